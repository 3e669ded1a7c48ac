"""
Page-number pagination shared by list endpoints.

Unlike DRF's PageNumberPagination, out-of-range values are rejected with
400 instead of being clamped, and results are returned inside the envelope.
"""
import math
from typing import List, Tuple

from rest_framework import serializers


DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class PaginationQuerySerializer(serializers.Serializer):
    """
    Validate page and page size query parameters.

    Query Parameters:
        page (int): 1-based page number
        page_size (int): Items per page (1-100)
        pageSize (int): Alias for page_size
    """

    page = serializers.IntegerField(
        required=False,
        default=1,
        min_value=1,
        error_messages={'min_value': 'Page must be a positive integer'},
    )
    page_size = serializers.IntegerField(
        required=False,
        min_value=1,
        max_value=MAX_PAGE_SIZE,
        error_messages={
            'min_value': 'Page size must be between 1 and 100',
            'max_value': 'Page size must be between 1 and 100',
        },
    )
    pageSize = serializers.IntegerField(
        required=False,
        min_value=1,
        max_value=MAX_PAGE_SIZE,
        error_messages={
            'min_value': 'Page size must be between 1 and 100',
            'max_value': 'Page size must be between 1 and 100',
        },
    )

    def validate(self, attrs):
        alias = attrs.pop('pageSize', None)
        if attrs.get('page_size') is None:
            attrs['page_size'] = alias or DEFAULT_PAGE_SIZE
        return attrs


def paginate(queryset, *, page: int, page_size: int) -> Tuple[List, dict]:
    """
    Slice a queryset (or list) into one page.

    Returns:
        (items, meta) where meta holds total, page, page_size, total_pages
    """
    total = len(queryset) if isinstance(queryset, list) else queryset.count()
    offset = (page - 1) * page_size
    items = list(queryset[offset:offset + page_size])

    return items, {
        'total': total,
        'page': page,
        'page_size': page_size,
        'total_pages': math.ceil(total / page_size) if total else 0,
    }


def paginated_payload(results, meta: dict) -> dict:
    """Combine serialized results with pagination metadata."""
    return {'results': results, **meta}
