"""
Lead views for the Luxury Estate backend.

Views are thin; all business logic is in the service layer.
"""

import logging

from rest_framework import status
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.leads.serializers import CreateLeadSerializer, LeadResponseSerializer
from apps.leads.services import LeadService

logger = logging.getLogger(__name__)


class CreateLeadView(APIView):
    """
    POST /api/leads

    Submit the contact form.
    """

    def post(self, request):
        """Handle lead submission."""
        serializer = CreateLeadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        lead = LeadService.create_lead(serializer.validated_data)

        return Response(
            {
                'lead_id': lead.pk,
                'message': 'Thank you! Our team will contact you shortly.',
            },
            status=status.HTTP_201_CREATED,
        )


class LeadPagination(PageNumberPagination):
    """Pagination for the admin lead list."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class AdminLeadListView(APIView):
    """
    GET /api/admin/leads

    View submitted leads, newest first, with pagination.
    """

    def get(self, request):
        """Handle viewing all leads."""
        leads = LeadService.list_leads()

        paginator = LeadPagination()
        page = paginator.paginate_queryset(leads, request)
        serializer = LeadResponseSerializer(page, many=True)

        return paginator.get_paginated_response(serializer.data)
