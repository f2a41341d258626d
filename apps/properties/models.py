"""
Property model for the Luxury Estate backend.
"""

import uuid

from django.db import models

from apps.core.currency import format_indian_price, parse_price_strict


class Property(models.Model):
    """
    A luxury listing shown on the marketing site.

    ``price`` keeps the text the admin typed ('28 Cr', '₹50,00,000');
    ``price_amount`` is the same price in rupees, derived on every save
    so listings can be filtered by budget.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )
    title = models.CharField(
        max_length=200,
        help_text="Listing headline."
    )
    location = models.CharField(
        max_length=255,
        db_index=True,
        help_text="Locality and city, e.g. 'Golf Course Road, Gurgaon'."
    )
    city = models.CharField(
        max_length=100,
        blank=True,
        default='',
        help_text="City used for grouping listings."
    )
    price = models.CharField(
        max_length=50,
        help_text="Display price, plain or crore/lakh shorthand."
    )
    price_amount = models.PositiveBigIntegerField(
        default=0,
        db_index=True,
        help_text="Price in rupees, parsed from the display price."
    )
    image_url = models.URLField(
        max_length=500,
        blank=True,
        default='',
    )
    description = models.TextField(blank=True, default='')
    enquiry_count = models.PositiveIntegerField(
        default=0,
        help_text="Number of leads that enquired about this listing."
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'properties'
        ordering = ['-created_at']
        verbose_name_plural = 'properties'

    def __str__(self):
        return f"{self.title} ({self.location})"

    def save(self, *args, **kwargs):
        self.price_amount = parse_price_strict(self.price)
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and 'price' in update_fields:
            kwargs['update_fields'] = set(update_fields) | {'price_amount'}
        super().save(*args, **kwargs)

    @property
    def formatted_price(self):
        """Price in Indian digit grouping, e.g. '₹2,80,00,000'."""
        return format_indian_price(self.price_amount)
