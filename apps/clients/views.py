from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiParameter

from config.pagination import paginate, paginated_payload
from config.responses import success_response
from .serializers import (
    ClientListQuerySerializer,
    ClientCreateSerializer,
    ClientUpdateSerializer,
    FavoriteInputSerializer,
    ClientSerializer,
    FavoritesSerializer,
)
from .services import ClientService


@extend_schema(
    parameters=[
        OpenApiParameter(name='search', type=str, required=False),
        OpenApiParameter(name='include_inactive', type=bool, required=False),
        OpenApiParameter(name='page', type=int, required=False),
        OpenApiParameter(name='page_size', type=int, required=False),
    ],
    request=ClientCreateSerializer,
    responses={200: ClientSerializer(many=True), 201: ClientSerializer},
    description="List clients (paginated, searchable) or create a client.",
    tags=['clients'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def client_list(request):
    """List clients (GET) or create a client (POST)."""
    if request.method == 'POST':
        serializer = ClientCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        client = ClientService.create_client(**serializer.validated_data)
        return success_response(ClientSerializer(client).data, status.HTTP_201_CREATED)

    query = ClientListQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    params = query.validated_data

    clients = ClientService.list_clients(
        search=params.get('search'),
        include_inactive=params['include_inactive'],
    )
    items, meta = paginate(clients, page=params['page'], page_size=params['page_size'])

    return success_response(paginated_payload(
        ClientSerializer(items, many=True).data, meta
    ))


@extend_schema(
    request=ClientUpdateSerializer,
    responses={200: ClientSerializer},
    description="Get, partially update or deactivate a client.",
    tags=['clients'],
)
@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated])
def client_detail(request, pk):
    """Retrieve, update or soft-delete a client."""
    if request.method == 'GET':
        client = ClientService.get_client(pk)

    elif request.method == 'PATCH':
        serializer = ClientUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        client = ClientService.update_client(pk, serializer.validated_data)

    else:
        client = ClientService.deactivate_client(pk)

    return success_response(ClientSerializer(client).data)


@extend_schema(
    request=FavoriteInputSerializer,
    responses={200: FavoritesSerializer},
    description="List or toggle a client's favourite linen categories.",
    tags=['clients'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def client_favorites(request, pk):
    """Get favourite category ids (GET) or set/unset one (POST)."""
    if request.method == 'GET':
        favorites = ClientService.favorite_category_ids(pk)
    else:
        serializer = FavoriteInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        favorites = ClientService.set_favorite(
            pk,
            serializer.validated_data['linen_category_id'],
            favorite=serializer.validated_data['favorite'],
        )

    return success_response(FavoritesSerializer({'favorites': favorites}).data)
