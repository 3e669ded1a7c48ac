from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema

from config.pagination import paginate, paginated_payload
from config.responses import success_response
from .aggregation import aggregate_batch_items
from .serializers import (
    BatchListQuerySerializer,
    BatchCreateSerializer,
    BatchUpdateSerializer,
    BatchItemsSerializer,
    BatchListSerializer,
    BatchDetailSerializer,
    BatchItemsResponseSerializer,
    NextPaperIdSerializer,
)
from .services import (
    create_batch,
    update_batch,
    replace_items,
    get_batch,
    list_batches,
    next_paper_batch_id,
)


@extend_schema(
    parameters=[BatchListQuerySerializer],
    request=BatchCreateSerializer,
    responses={200: BatchListSerializer(many=True), 201: BatchDetailSerializer},
    description="List batches with filters, or create a batch with its items.",
    tags=['batches'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def batch_list(request):
    """List batches (GET) or create a batch (POST)."""
    if request.method == 'POST':
        serializer = BatchCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        batch = create_batch(created_by=request.user, **serializer.validated_data)
        return success_response(
            BatchDetailSerializer(get_batch(batch_id=batch.id)).data,
            status.HTTP_201_CREATED
        )

    query = BatchListQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    params = dict(query.validated_data)
    page = params.pop('page')
    page_size = params.pop('page_size')

    batches = list_batches(**params)
    items, meta = paginate(batches, page=page, page_size=page_size)

    return success_response(paginated_payload(
        BatchListSerializer(items, many=True).data, meta
    ))


@extend_schema(
    responses={200: NextPaperIdSerializer},
    description="Suggest the next numeric paper batch id.",
    tags=['batches'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def next_paper_id(request):
    return success_response({'next_paper_batch_id': next_paper_batch_id()})


@extend_schema(
    request=BatchUpdateSerializer,
    responses={200: BatchDetailSerializer},
    description=(
        "Get batch detail (client, aggregated items, financial summary, "
        "status history, next statuses) or update status, notes and dates."
    ),
    tags=['batches'],
)
@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def batch_detail(request, pk):
    """Retrieve or update a batch."""
    if request.method == 'PATCH':
        serializer = BatchUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        update_batch(batch_id=pk, data=serializer.validated_data, updated_by=request.user)

    batch = get_batch(batch_id=pk)
    return success_response(BatchDetailSerializer(batch).data)


@extend_schema(
    request=BatchItemsSerializer,
    responses={200: BatchItemsResponseSerializer},
    description="Get the batch items with discrepancy/pricing, or replace the whole item set.",
    tags=['batches'],
)
@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated])
def batch_items(request, pk):
    """Get aggregated items (GET) or replace them (PUT)."""
    if request.method == 'PUT':
        serializer = BatchItemsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        replace_items(batch_id=pk, items=serializer.validated_data['items'])

    batch = get_batch(batch_id=pk)
    items, summary = aggregate_batch_items(batch.items.all())
    return success_response(BatchItemsResponseSerializer({
        'items': items,
        'summary': summary,
    }).data)
