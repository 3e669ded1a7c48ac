"""
Domain exceptions for clients app.

Each exception carries the HTTP status it maps to, so views can let
them propagate to the envelope exception handler.
"""
from rest_framework.exceptions import APIException


class ClientNotFoundError(APIException):
    """Client not found."""
    status_code = 404
    default_detail = 'Client not found'
    default_code = 'client_not_found'


class DuplicateClientNameError(APIException):
    """Another client already uses this name."""
    status_code = 409
    default_detail = 'Client with this name already exists'
    default_code = 'duplicate_client_name'


class DuplicateClientEmailError(APIException):
    """Another client already uses this email."""
    status_code = 409
    default_detail = 'Client with this email already exists'
    default_code = 'duplicate_client_email'


class InactiveClientError(APIException):
    """Operation requires an active client."""
    status_code = 400
    default_detail = 'Client is not active'
    default_code = 'inactive_client'
