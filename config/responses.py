"""
Response envelope helpers.

Every API response body has the shape::

    {"success": bool, "data": <payload or null>, "error": <message or null>}
"""
from rest_framework import status
from rest_framework.response import Response


def envelope(data=None, error=None) -> dict:
    """Build the envelope dict for a payload or an error message."""
    return {
        'success': error is None,
        'data': data if error is None else None,
        'error': error,
    }


def success_response(data=None, status_code: int = status.HTTP_200_OK, **kwargs) -> Response:
    """Wrap a payload in a successful envelope."""
    return Response(envelope(data=data), status=status_code, **kwargs)


def error_response(message: str, status_code: int) -> Response:
    """Wrap an error message in a failed envelope."""
    return Response(envelope(error=message), status=status_code)
