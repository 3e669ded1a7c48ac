from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework_simplejwt.tokens import RefreshToken
from django.contrib.auth import authenticate
from django.utils import timezone
from drf_spectacular.utils import extend_schema

from config.responses import success_response, error_response
from .models import User
from .permissions import IsAdminRole
from .serializers import (
    UserLoginSerializer,
    UserCreateSerializer,
    UserUpdateSerializer,
    UserSerializer,
)
from .services import (
    create_user,
    update_user,
    deactivate_user,
    get_user,
    DuplicateEmailError,
    UserNotFoundError,
    SelfDeactivationError,
)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    user = UserSerializer()
    tokens = TokensResponseSerializer()


@extend_schema(
    request=UserLoginSerializer,
    responses={200: AuthResponseSerializer},
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = authenticate(
        request,
        username=serializer.validated_data['email'].strip().lower(),
        password=serializer.validated_data['password'],
    )

    if user is None:
        return error_response('Invalid credentials', status.HTTP_401_UNAUTHORIZED)

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    refresh = RefreshToken.for_user(user)

    return success_response({
        'user': UserSerializer(user).data,
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        }
    })


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile and role.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def current_user(request):
    """Get current authenticated user profile."""
    return success_response(UserSerializer(request.user).data)


@extend_schema(
    request=UserCreateSerializer,
    responses={200: UserSerializer(many=True), 201: UserSerializer},
    description="List all users or create a new user (admin only).",
    tags=['users'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def user_list(request):
    """List users (GET) or create a user (POST)."""
    if request.method == 'GET':
        users = User.objects.order_by('-created_at')
        return success_response(UserSerializer(users, many=True).data)

    serializer = UserCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = create_user(created_by=request.user, **serializer.validated_data)
    except DuplicateEmailError as e:
        return error_response(str(e), status.HTTP_409_CONFLICT)

    return success_response(UserSerializer(user).data, status.HTTP_201_CREATED)


@extend_schema(
    request=UserUpdateSerializer,
    responses={200: UserSerializer},
    description="Get, update (email, full_name, role, password) or deactivate a user (admin only).",
    tags=['users'],
)
@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, IsAdminRole])
def user_detail(request, pk):
    """Retrieve, update or deactivate a single user."""
    try:
        if request.method == 'GET':
            user = get_user(user_id=pk)

        elif request.method == 'PATCH':
            serializer = UserUpdateSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            user = update_user(
                user_id=pk,
                updated_by=request.user,
                **serializer.validated_data
            )

        else:
            user = deactivate_user(user_id=pk, deactivated_by=request.user)

    except UserNotFoundError as e:
        return error_response(str(e), status.HTTP_404_NOT_FOUND)
    except DuplicateEmailError as e:
        return error_response(str(e), status.HTTP_409_CONFLICT)
    except SelfDeactivationError as e:
        return error_response(str(e), status.HTTP_400_BAD_REQUEST)

    return success_response(UserSerializer(user).data)
