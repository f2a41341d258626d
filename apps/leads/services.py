"""
Lead service layer.

Stores contact form enquiries and serves them to the admin panel.
"""

import logging

from django.db import transaction
from django.db.models import F, QuerySet

from apps.core.exceptions import PropertyNotFoundError
from apps.leads.models import Lead
from apps.properties.models import Property

logger = logging.getLogger(__name__)


class LeadService:
    """Service class for lead operations."""

    @staticmethod
    @transaction.atomic
    def create_lead(validated_data: dict) -> Lead:
        """
        Record a contact form enquiry.

        When the enquiry names a listing, that listing's enquiry_count
        is bumped in the same transaction.

        Args:
            validated_data: Dict with name, phone, email, budget, message
                          and optional property_id.

        Returns:
            The newly created Lead instance.

        Raises:
            PropertyNotFoundError: If property_id names no listing.
        """
        property_id = validated_data.get('property_id')

        if property_id is not None:
            updated = Property.objects.filter(pk=property_id).update(
                enquiry_count=F('enquiry_count') + 1,
            )
            if not updated:
                raise PropertyNotFoundError(
                    detail=f"Property with ID {property_id} not found."
                )

        lead = Lead.objects.create(
            name=validated_data['name'].strip(),
            phone=validated_data['phone'].strip(),
            email=validated_data['email'],
            budget=validated_data['budget'].strip(),
            message=validated_data['message'].strip(),
            property_id=property_id,
        )

        logger.info(
            "Lead %s received from %s (budget=%s, property=%s)",
            lead.pk,
            lead.email,
            lead.budget,
            property_id,
        )

        return lead

    @staticmethod
    def list_leads() -> QuerySet:
        """Return all leads, newest first."""
        return Lead.objects.all().order_by('-created_at')
