"""
API Key authentication middleware.

Only the admin API (/api/admin/) requires a valid API key in the
X-API-KEY header. The public site endpoints stay open.
"""

import logging

from django.conf import settings
from django.http import JsonResponse

from apps.core.exceptions import error_payload

logger = logging.getLogger(__name__)

# Paths that require authentication
PROTECTED_PREFIXES = (
    '/api/admin/',
)


class APIKeyMiddleware:
    """
    Middleware that checks for a valid API key on admin API requests.

    If API_KEYS is empty in settings (e.g., during local development),
    the middleware is effectively disabled and all requests pass through.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if not request.path.startswith(PROTECTED_PREFIXES):
            return self.get_response(request)

        # If no API keys configured, skip auth (dev mode)
        api_keys = getattr(settings, 'API_KEYS', [])
        if not api_keys:
            return self.get_response(request)

        provided_key = request.META.get('HTTP_X_API_KEY', '')

        if not provided_key:
            logger.warning(
                "%s %s rejected: missing API key",
                request.method,
                request.path,
            )
            return JsonResponse(
                error_payload(
                    401, 'Authentication required. Provide X-API-KEY header.',
                ),
                status=401,
            )

        if provided_key not in api_keys:
            logger.warning(
                "%s %s rejected: invalid API key",
                request.method,
                request.path,
            )
            return JsonResponse(
                error_payload(403, 'Invalid API key.'),
                status=403,
            )

        return self.get_response(request)
