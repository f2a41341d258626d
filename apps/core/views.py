"""
Core views for the Luxury Estate backend.

Health check, EMI calculator, price helpers and the ingestion trigger.
"""

import logging

from django.http import JsonResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.currency import (
    InvalidPriceError,
    format_indian_price,
    parse_price_strict,
    parse_price_to_number,
)
from apps.core.exceptions import InvalidLoanParametersError, InvalidPriceAPIError
from apps.core.serializers import (
    EMICalculatorResponseSerializer,
    EMICalculatorSerializer,
    FormatPriceSerializer,
    ParsePriceSerializer,
)
from apps.core.tasks import ingest_property_data
from apps.core.utils import calculate_emi, emi_changed

logger = logging.getLogger(__name__)


def health_check(request):
    """
    GET /health/

    Simple health check endpoint for Docker and load balancer probes.
    """
    return JsonResponse({'status': 'healthy'}, status=200)


class EMICalculatorView(APIView):
    """
    POST /api/emi-calculator

    Calculate the monthly EMI and total interest for a home loan.
    """

    def post(self, request):
        """Handle EMI calculation."""
        serializer = EMICalculatorSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            result = calculate_emi(
                property_price=data['property_price'],
                down_payment=data['down_payment'],
                tenure_years=data['tenure_years'],
                annual_rate=data['interest_rate'],
            )
        except ValueError as exc:
            raise InvalidLoanParametersError(detail=str(exc))

        response_data = {
            'loan_amount': result.principal,
            'tenure_months': result.tenure_months,
            'emi': result.emi,
            'total_interest': result.total_interest,
            'total_payment': result.total_payment,
            'emi_changed': emi_changed(data['previous_emi'], result),
            'formatted': {
                'loan_amount': format_indian_price(result.principal),
                'emi': format_indian_price(result.emi),
                'total_interest': format_indian_price(result.total_interest),
                'total_payment': format_indian_price(result.total_payment),
            },
        }

        response_serializer = EMICalculatorResponseSerializer(data=response_data)
        response_serializer.is_valid(raise_exception=True)

        return Response(
            response_serializer.validated_data,
            status=status.HTTP_200_OK,
        )


class FormatPriceView(APIView):
    """
    POST /api/format-price

    Format a rupee amount with Indian digit grouping.
    """

    def post(self, request):
        serializer = FormatPriceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        amount = serializer.validated_data['amount']

        return Response(
            {
                'amount': amount,
                'formatted': format_indian_price(amount),
            },
            status=status.HTTP_200_OK,
        )


class ParsePriceView(APIView):
    """
    POST /api/parse-price

    Parse crore/lakh shorthand into rupees. Lenient by default (bad
    text gives 0); with strict=true bad text is a 400.
    """

    def post(self, request):
        serializer = ParsePriceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        text = serializer.validated_data['text']

        if serializer.validated_data['strict']:
            try:
                amount = parse_price_strict(text)
            except InvalidPriceError as exc:
                raise InvalidPriceAPIError(detail=str(exc))
        else:
            amount = parse_price_to_number(text)

        return Response(
            {
                'text': text,
                'amount': amount,
                'formatted': format_indian_price(amount),
            },
            status=status.HTTP_200_OK,
        )


class TriggerIngestionView(APIView):
    """
    POST /api/admin/ingest-properties

    Trigger background ingestion of property listings from the
    properties spreadsheet via Celery.
    """

    def post(self, request):
        """Trigger the property ingestion task."""
        task = ingest_property_data.delay()

        logger.info("Property ingestion triggered, task=%s", task.id)

        return Response(
            {
                'message': 'Property ingestion task has been triggered.',
                'task_id': task.id,
            },
            status=status.HTTP_202_ACCEPTED,
        )
