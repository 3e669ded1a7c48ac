from rest_framework import serializers
from .models import User, UserRole


PASSWORD_ERRORS = {'min_length': 'Password must be at least 6 characters'}
ROLE_ERRORS = {'invalid_choice': 'Role must be either "admin" or "user"'}


# =============================================================================
# Input Serializers
# =============================================================================

class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class UserCreateSerializer(serializers.Serializer):
    """
    Validate a new user payload (admin only).

    Fields:
        email (str): Login email, stored lowercased
        password (str): At least 6 characters
        full_name (str): Optional display name
        role (str): 'admin' or 'user' (default 'user')
    """

    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(
        min_length=6,
        write_only=True,
        style={'input_type': 'password'},
        error_messages=PASSWORD_ERRORS,
    )
    full_name = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    role = serializers.ChoiceField(
        choices=UserRole.choices,
        default=UserRole.USER,
        error_messages=ROLE_ERRORS,
    )


class UserUpdateSerializer(serializers.Serializer):
    """Validate a partial user update; every field is optional."""

    email = serializers.EmailField(max_length=255, required=False)
    full_name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    role = serializers.ChoiceField(
        choices=UserRole.choices,
        required=False,
        error_messages=ROLE_ERRORS,
    )
    password = serializers.CharField(
        min_length=6,
        required=False,
        write_only=True,
        style={'input_type': 'password'},
        error_messages=PASSWORD_ERRORS,
    )

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError('No fields to update')
        return attrs


# =============================================================================
# Output Serializers
# =============================================================================

class UserSerializer(serializers.ModelSerializer):
    """User profile as exposed to the admin screens."""

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'full_name',
            'role',
            'is_active',
            'created_at',
            'updated_at',
            'last_login',
        ]
        read_only_fields = fields
