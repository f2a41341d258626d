"""
Lead serializers for the Luxury Estate backend.
"""

import re

from rest_framework import serializers

PHONE_PATTERN = re.compile(r'^\+?[\d\s\-()]{7,20}$')


class CreateLeadSerializer(serializers.Serializer):
    """Serializer for contact form submissions."""

    name = serializers.CharField(
        max_length=150,
        required=True,
        help_text="Visitor's name.",
    )
    phone = serializers.CharField(
        max_length=20,
        required=True,
        help_text="Visitor's phone number.",
    )
    email = serializers.EmailField(
        required=True,
        help_text="Visitor's email address.",
    )
    budget = serializers.CharField(
        max_length=50,
        required=True,
        help_text="Budget range from the contact form.",
    )
    message = serializers.CharField(
        required=True,
        help_text="Enquiry message.",
    )
    property_id = serializers.UUIDField(
        required=False,
        allow_null=True,
        default=None,
        help_text="Listing the enquiry is about, if any.",
    )

    def validate_phone(self, value):
        """Validate phone number is 7-20 digits, spaces, dashes or brackets."""
        if not PHONE_PATTERN.match(value):
            raise serializers.ValidationError(
                "Please enter a valid phone number."
            )
        return value


class LeadResponseSerializer(serializers.Serializer):
    """Serializer for a lead in API responses."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    phone = serializers.CharField()
    email = serializers.EmailField()
    budget = serializers.CharField()
    message = serializers.CharField()
    property_id = serializers.UUIDField(allow_null=True)
    created_at = serializers.DateTimeField()
