"""
Lead model for the Luxury Estate backend.
"""

import uuid

from django.db import models


class Lead(models.Model):
    """
    An enquiry submitted through the site's contact form.

    Optionally tied to the listing the visitor enquired about.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )
    name = models.CharField(max_length=150)
    phone = models.CharField(
        max_length=20,
        help_text="Contact number as entered by the visitor."
    )
    email = models.EmailField(max_length=254)
    budget = models.CharField(
        max_length=50,
        help_text="Budget range picked on the contact form, e.g. '10Cr - 25Cr'."
    )
    message = models.TextField()
    property = models.ForeignKey(
        'properties.Property',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='leads',
        help_text="Listing the enquiry is about, if any."
    )
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'leads'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} <{self.email}> ({self.budget})"
