from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiParameter

from config.pagination import paginate, paginated_payload
from config.responses import success_response
from .models import LinenCategory
from .serializers import (
    CategoryListQuerySerializer,
    CategoryBulkPriceSerializer,
    CategoryUpdateSerializer,
    PriceLookupQuerySerializer,
    LinenCategorySerializer,
    CategoryStatsSerializer,
    BulkPriceResultSerializer,
    PriceLookupSerializer,
)
from .services import (
    list_categories,
    group_by_section,
    get_category,
    update_category,
    bulk_update_prices,
    category_stats,
    lookup_price,
)


@extend_schema(
    parameters=[
        OpenApiParameter(name='includeInactive', type=bool, required=False),
        OpenApiParameter(name='search', type=str, required=False),
        OpenApiParameter(name='stats', type=bool, required=False),
        OpenApiParameter(name='grouped', type=bool, required=False),
        OpenApiParameter(name='page', type=int, required=False),
        OpenApiParameter(name='pageSize', type=int, required=False),
    ],
    request=CategoryBulkPriceSerializer,
    responses={200: LinenCategorySerializer(many=True)},
    description=(
        "GET: list linen categories (optionally grouped by section, paginated, "
        "or as statistics). PATCH: bulk update prices."
    ),
    tags=['categories'],
)
@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def category_list(request):
    """List categories (GET) or bulk-update prices (PATCH)."""
    if request.method == 'PATCH':
        serializer = CategoryBulkPriceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = bulk_update_prices(updates=serializer.validated_data['updates'])
        return success_response(BulkPriceResultSerializer(result).data)

    query = CategoryListQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    params = query.validated_data

    if params['stats']:
        return success_response(CategoryStatsSerializer(category_stats()).data)

    categories = list_categories(
        include_inactive=params['includeInactive'],
        search=params.get('search'),
    )

    if params['grouped']:
        grouped = group_by_section(categories)
        return success_response({
            section: LinenCategorySerializer(items, many=True).data
            for section, items in grouped.items()
        })

    # Unpaginated unless the caller asks for a page
    if 'page' not in request.query_params and not (
        'page_size' in request.query_params or 'pageSize' in request.query_params
    ):
        return success_response(LinenCategorySerializer(categories, many=True).data)

    items, meta = paginate(categories, page=params['page'], page_size=params['page_size'])
    return success_response(paginated_payload(
        LinenCategorySerializer(items, many=True).data, meta
    ))


@extend_schema(
    request=CategoryUpdateSerializer,
    responses={200: LinenCategorySerializer},
    description="Get a category or update its price, name or active flag.",
    tags=['categories'],
)
@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def category_detail(request, pk):
    """Retrieve or update a single category."""
    if request.method == 'GET':
        category = get_category(category_id=pk)
        return success_response(LinenCategorySerializer(category).data)

    serializer = CategoryUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    category = update_category(category_id=pk, **serializer.validated_data)
    return success_response(LinenCategorySerializer(category).data)


@extend_schema(
    parameters=[
        OpenApiParameter(name='name', type=str, required=True, description='Category name as written'),
    ],
    responses={200: PriceLookupSerializer},
    description="Resolve the standard unit price for a free-text category name.",
    tags=['categories'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def price_lookup(request):
    """Look up a price via exact name, alias or fuzzy match."""
    query = PriceLookupQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    name = query.validated_data['name']

    match = lookup_price(name)
    category = None
    if match.matched_name:
        category = LinenCategory.objects.filter(
            name__iexact=match.matched_name, is_active=True
        ).first()

    data = {
        'name': name,
        'price': match.price,
        'matched_name': match.matched_name,
        'match_type': match.match_type,
        'score': match.score,
        'category_id': category.id if category else None,
    }
    return success_response(PriceLookupSerializer(data).data, status.HTTP_200_OK)
