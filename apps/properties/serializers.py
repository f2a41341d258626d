"""
Property serializers for the Luxury Estate backend.
"""

from rest_framework import serializers

from apps.core.currency import InvalidPriceError, parse_price_strict


def validate_price_text(value):
    """Reject prices the strict parser can't read."""
    try:
        parse_price_strict(value)
    except InvalidPriceError as exc:
        raise serializers.ValidationError(str(exc))
    return value.strip()


class PropertySerializer(serializers.Serializer):
    """Serializer for property create/update requests."""

    title = serializers.CharField(
        max_length=200,
        required=True,
        help_text="Listing headline.",
    )
    location = serializers.CharField(
        max_length=255,
        required=True,
        help_text="Locality and city.",
    )
    city = serializers.CharField(
        max_length=100,
        required=False,
        allow_blank=True,
        default='',
    )
    price = serializers.CharField(
        max_length=50,
        required=True,
        validators=[validate_price_text],
        help_text="Price in rupees or shorthand, e.g. '28 Cr' or '75 Lakh'.",
    )
    image_url = serializers.URLField(
        max_length=500,
        required=False,
        allow_blank=True,
        default='',
    )
    description = serializers.CharField(
        required=False,
        allow_blank=True,
        default='',
    )


class PropertyResponseSerializer(serializers.Serializer):
    """Serializer for a listing in API responses."""

    id = serializers.UUIDField()
    title = serializers.CharField()
    location = serializers.CharField()
    city = serializers.CharField()
    price = serializers.CharField()
    price_amount = serializers.IntegerField()
    formatted_price = serializers.CharField()
    image_url = serializers.CharField()
    description = serializers.CharField()
    enquiry_count = serializers.IntegerField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class MatchPropertiesSerializer(serializers.Serializer):
    """Serializer for the property matcher request."""

    budget = serializers.CharField(
        max_length=50,
        required=True,
        validators=[validate_price_text],
        help_text="Budget ceiling in rupees or shorthand, e.g. '10Cr'.",
    )
    location = serializers.CharField(
        max_length=255,
        required=False,
        allow_blank=True,
        default='',
        help_text="Location substring; blank or 'All Locations' for any.",
    )

    def validate_budget(self, value):
        return parse_price_strict(value)
