"""
Custom exceptions and DRF exception handler for the Luxury Estate backend.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class PropertyNotFoundError(APIException):
    """Raised when a property does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Property not found.'
    default_code = 'property_not_found'


class InvalidPriceAPIError(APIException):
    """Raised when a price or budget cannot be parsed strictly."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid price.'
    default_code = 'invalid_price'


class InvalidLoanParametersError(APIException):
    """Raised when EMI inputs are rejected by the loan calculator."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid loan parameters.'
    default_code = 'invalid_loan_parameters'


class DataIngestionError(Exception):
    """Raised when property data ingestion fails."""

    pass


def error_payload(status_code: int, detail) -> dict:
    """Envelope shared by the exception handler and the API key middleware."""
    return {
        'error': True,
        'status_code': status_code,
        'detail': detail,
    }


def custom_exception_handler(exc, context):
    """
    Wrap every API error in the same envelope.

    Single-message errors ({'detail': ...}) are flattened to the message;
    field validation errors keep their per-field dict. Anything DRF can't
    handle is logged and answered with a generic 500.
    """
    response = exception_handler(exc, context)

    if response is not None:
        detail = response.data
        if isinstance(detail, dict) and set(detail) == {'detail'}:
            detail = detail['detail']
        view = context.get('view')
        logger.warning(
            "%s in %s: %s",
            exc.__class__.__name__,
            view.__class__.__name__ if view is not None else 'unknown',
            detail,
        )
        response.data = error_payload(response.status_code, detail)
    else:
        # Unhandled exceptions: log and return 500
        logger.exception(
            "Unhandled exception in %s",
            context.get('view', 'unknown'),
            exc_info=exc,
        )
        response = Response(
            error_payload(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                'An unexpected error occurred. Please try again later.',
            ),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return response
