"""
Property service layer.

Listing CRUD for the admin panel and the budget/location matcher used
by the public site. Views delegate here.
"""

import logging

from django.db.models import QuerySet

from apps.core.exceptions import PropertyNotFoundError
from apps.properties.models import Property

logger = logging.getLogger(__name__)

# Location value the site's matcher sends for "no location filter"
ALL_LOCATIONS = 'all locations'

EDITABLE_FIELDS = (
    'title',
    'location',
    'city',
    'price',
    'image_url',
    'description',
)


class PropertyService:
    """Service class for property listing operations."""

    @staticmethod
    def list_properties() -> QuerySet:
        """Return all listings, newest first."""
        return Property.objects.all()

    @staticmethod
    def get_property(property_id) -> Property:
        """
        Retrieve a listing by ID.

        Raises:
            PropertyNotFoundError: If no listing has this ID.
        """
        try:
            return Property.objects.get(pk=property_id)
        except Property.DoesNotExist:
            raise PropertyNotFoundError(
                detail=f"Property with ID {property_id} not found."
            )

    @staticmethod
    def create_property(validated_data: dict) -> Property:
        """
        Create a listing.

        Args:
            validated_data: Dict with title, location, price and optionally
                          city, image_url, description.

        Returns:
            The newly created Property instance.
        """
        prop = Property.objects.create(
            **{
                field: validated_data[field]
                for field in EDITABLE_FIELDS
                if field in validated_data
            }
        )

        logger.info(
            "Created property %s '%s' at %s for %s",
            prop.pk,
            prop.title,
            prop.location,
            prop.formatted_price,
        )

        return prop

    @classmethod
    def update_property(cls, property_id, validated_data: dict) -> Property:
        """
        Replace the editable fields of a listing.

        Fields missing from ``validated_data`` keep their current value.
        """
        prop = cls.get_property(property_id)

        for field in EDITABLE_FIELDS:
            if field in validated_data:
                setattr(prop, field, validated_data[field])
        prop.save()

        logger.info(
            "Updated property %s '%s' (price=%s)",
            prop.pk,
            prop.title,
            prop.formatted_price,
        )

        return prop

    @classmethod
    def delete_property(cls, property_id) -> None:
        """Delete a listing. Leads that referenced it are kept."""
        prop = cls.get_property(property_id)
        title = prop.title
        prop.delete()

        logger.info("Deleted property %s '%s'", property_id, title)

    @staticmethod
    def match_properties(budget: int, location: str = '') -> QuerySet:
        """
        Find listings within a budget, optionally in a location.

        Args:
            budget: Budget ceiling in rupees; listings priced at or
                    below it match.
            location: Case-insensitive substring of the listing location.
                      Blank or 'All Locations' disables the filter.

        Returns:
            QuerySet of matching listings, cheapest first.
        """
        matches = Property.objects.filter(price_amount__lte=budget)

        location = (location or '').strip()
        if location and location.lower() != ALL_LOCATIONS:
            matches = matches.filter(location__icontains=location)

        matches = matches.order_by('price_amount', '-created_at')

        logger.debug(
            "Matched %d properties for budget=%d, location=%r",
            matches.count(),
            budget,
            location,
        )

        return matches
