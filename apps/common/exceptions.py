"""
Error taxonomy for Student Club Portal
Domain failures raised by the data-access layer and rendered by DRF
"""
import logging

from django.db import DatabaseError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ValidationFailed(APIException):
    """Input rejected, nothing was changed"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input.'
    default_code = 'validation_failed'


class ScopeDenied(APIException):
    """Actor is outside the scope required for the action"""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'You do not have permission to perform this action.'
    default_code = 'scope_denied'


class NotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Not found.'
    default_code = 'not_found'


class Conflict(APIException):
    """Duplicate or out-of-order operation (already registered, already reviewed...)"""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'The request conflicts with the current state.'
    default_code = 'conflict'


class StoreUnavailable(APIException):
    """Backing store failure; the caller may retry"""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = 'The service is temporarily unavailable. Please try again.'
    default_code = 'store_unavailable'


def api_exception_handler(exc, context):
    """Render every failure as {'error': ..., 'code': ...}"""
    if isinstance(exc, DatabaseError):
        view = context.get('view')
        logger.warning("Store failure in %s: %s", view.__class__.__name__ if view else 'unknown view', exc)
        exc = StoreUnavailable()
    elif isinstance(exc, Http404):
        exc = NotFound()

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, APIException):
        detail = exc.detail
        code = exc.get_codes()
        if isinstance(detail, (list, dict)):
            # Field validation errors keep their per-field structure
            response.data = {
                'error': 'Invalid input.',
                'code': 'validation_failed',
                'fields': detail,
            }
        else:
            response.data = {
                'error': str(detail),
                'code': code if isinstance(code, str) else 'error',
            }

    return response
