"""
Domain exceptions for batches app.

Raised by the batch services and turned into the response envelope
by the API exception handler.
"""
from rest_framework.exceptions import APIException


class BatchNotFoundError(APIException):
    """Batch not found."""
    status_code = 404
    default_detail = 'Batch not found'
    default_code = 'batch_not_found'


class DuplicatePaperBatchIdError(APIException):
    """Paper batch id already used by another batch."""
    status_code = 409
    default_detail = 'Paper batch ID already exists'
    default_code = 'duplicate_paper_batch_id'


class InvalidStatusTransitionError(APIException):
    """Requested status is not reachable from the current one."""
    status_code = 400
    default_detail = 'Invalid status transition'
    default_code = 'invalid_status_transition'


class InvalidBatchItemsError(APIException):
    """Item list references missing/inactive categories or is malformed."""
    status_code = 400
    default_detail = 'Invalid batch items'
    default_code = 'invalid_batch_items'


class InvalidBatchDatesError(APIException):
    status_code = 400
    default_detail = 'Delivery date cannot be before pickup date'
    default_code = 'invalid_batch_dates'
