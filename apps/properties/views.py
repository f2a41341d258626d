"""
Property views for the Luxury Estate backend.

Views are thin; all business logic is in the service layer.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.currency import format_indian_price
from apps.properties.serializers import (
    MatchPropertiesSerializer,
    PropertyResponseSerializer,
    PropertySerializer,
)
from apps.properties.services import PropertyService

logger = logging.getLogger(__name__)


class PropertyListView(APIView):
    """
    GET /api/properties

    List all published listings for the marketing site.
    """

    def get(self, request):
        """Handle listing all properties."""
        properties = PropertyService.list_properties()
        serializer = PropertyResponseSerializer(properties, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)


class PropertyDetailView(APIView):
    """
    GET /api/properties/<property_id>

    View a single listing.
    """

    def get(self, request, property_id):
        """Handle viewing a single property."""
        prop = PropertyService.get_property(property_id)
        serializer = PropertyResponseSerializer(prop)
        return Response(serializer.data, status=status.HTTP_200_OK)


class MatchPropertiesView(APIView):
    """
    POST /api/match-properties

    Find listings within a budget, optionally filtered by location.
    """

    def post(self, request):
        """Handle property matching."""
        serializer = MatchPropertiesSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        budget = serializer.validated_data['budget']
        location = serializer.validated_data['location']
        matches = PropertyService.match_properties(budget, location)

        return Response(
            {
                'budget': budget,
                'formatted_budget': format_indian_price(budget),
                'location': location,
                'count': matches.count(),
                'results': PropertyResponseSerializer(matches, many=True).data,
            },
            status=status.HTTP_200_OK,
        )


class AdminPropertyListView(APIView):
    """
    GET  /api/admin/properties: list listings for the admin panel
    POST /api/admin/properties: create a listing
    """

    def get(self, request):
        """Handle listing all properties for admins."""
        properties = PropertyService.list_properties()
        serializer = PropertyResponseSerializer(properties, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    def post(self, request):
        """Handle property creation."""
        serializer = PropertySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        prop = PropertyService.create_property(serializer.validated_data)

        return Response(
            PropertyResponseSerializer(prop).data,
            status=status.HTTP_201_CREATED,
        )


class AdminPropertyDetailView(APIView):
    """
    GET    /api/admin/properties/<property_id>
    PUT    /api/admin/properties/<property_id>
    DELETE /api/admin/properties/<property_id>
    """

    def get(self, request, property_id):
        """Handle viewing a single property for admins."""
        prop = PropertyService.get_property(property_id)
        return Response(
            PropertyResponseSerializer(prop).data,
            status=status.HTTP_200_OK,
        )

    def put(self, request, property_id):
        """Handle property update."""
        serializer = PropertySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        prop = PropertyService.update_property(
            property_id, serializer.validated_data,
        )

        return Response(
            PropertyResponseSerializer(prop).data,
            status=status.HTTP_200_OK,
        )

    def delete(self, request, property_id):
        """Handle property deletion."""
        PropertyService.delete_property(property_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
