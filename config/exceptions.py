"""
Project-wide DRF exception handler.

Converts every exception raised inside an API view into the
``{success, data, error}`` envelope:

- APIException subclasses (validation, auth, domain errors) keep their status code
- database unique-constraint violations become 409 Conflict
- anything else is logged and returned as a generic 500
"""
import logging

from django.db import IntegrityError
from rest_framework import status
from rest_framework.views import exception_handler

from config.responses import envelope, error_response


logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = 'Internal server error'


def flatten_errors(detail) -> str:
    """
    Flatten a DRF error structure into one readable message.

    Examples:
        {'email': ['Enter a valid email address.']} -> 'email: Enter a valid email address.'
        {'detail': 'Not found.'} -> 'Not found.'
        {'items': [{}, {'quantity_sent': ['...']}]} -> 'items: quantity_sent: ...'
    """
    if isinstance(detail, dict):
        parts = []
        for field, value in detail.items():
            message = flatten_errors(value)
            if not message:
                continue
            if field in ('non_field_errors', 'detail'):
                parts.append(message)
            else:
                parts.append(f'{field}: {message}')
        return '; '.join(parts)
    if isinstance(detail, (list, tuple)):
        return '; '.join(m for m in (flatten_errors(item) for item in detail) if m)
    return str(detail)


def envelope_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is not None:
        response.data = envelope(error=flatten_errors(response.data))
        return response

    view = context.get('view')
    view_name = view.__class__.__name__ if view is not None else 'unknown view'

    if isinstance(exc, IntegrityError):
        logger.warning('Integrity error in %s: %s', view_name, exc)
        return error_response('Resource already exists', status.HTTP_409_CONFLICT)

    logger.exception('Unhandled error in %s', view_name, exc_info=exc)
    return error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
