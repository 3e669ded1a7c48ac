"""Domain exceptions for the linen catalog."""
from rest_framework.exceptions import APIException


class CategoryNotFoundError(APIException):
    """Linen category not found."""
    status_code = 404
    default_detail = 'Category not found'
    default_code = 'category_not_found'


class DuplicateCategoryError(APIException):
    """A category with this name already exists."""
    status_code = 409
    default_detail = 'Category with this name already exists'
    default_code = 'duplicate_category'


class InvalidPriceError(APIException):
    """Price is negative, non-numeric or too large."""
    status_code = 400
    default_detail = 'Price must be a non-negative number below 1,000,000'
    default_code = 'invalid_price'


class BulkUpdateLimitError(APIException):
    status_code = 400
    default_detail = 'Updates must be a non-empty list of at most 100 entries'
    default_code = 'bulk_update_limit'
