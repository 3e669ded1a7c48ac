from rest_framework import serializers

from config.pagination import PaginationQuerySerializer
from .models import Client


NAME_ERRORS = {
    'required': 'Client name is required',
    'blank': 'Client name is required',
    'max_length': 'Client name must be at most 255 characters',
}


# =============================================================================
# Input Serializers
# =============================================================================

class ClientListQuerySerializer(PaginationQuerySerializer):
    """
    Query parameters for listing clients.

    Query Parameters:
        search (str): Name, email or contact number contains
        include_inactive (bool): Include deactivated clients
    """

    search = serializers.CharField(required=False, allow_blank=True, max_length=255)
    include_inactive = serializers.BooleanField(required=False, default=False)


class ClientCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, error_messages=NAME_ERRORS)
    contact_number = serializers.CharField(max_length=20, required=False, allow_blank=True)
    email = serializers.EmailField(max_length=255, required=False, allow_blank=True, allow_null=True)
    address = serializers.CharField(max_length=500, required=False, allow_blank=True)
    logo_url = serializers.URLField(max_length=500, required=False, allow_blank=True)


class ClientUpdateSerializer(ClientCreateSerializer):
    """Partial update; every field optional."""

    name = serializers.CharField(max_length=255, required=False, error_messages=NAME_ERRORS)
    is_active = serializers.BooleanField(required=False)

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError('No fields to update')
        return attrs


class FavoriteInputSerializer(serializers.Serializer):
    linen_category_id = serializers.UUIDField(error_messages={
        'required': 'linen_category_id is required',
        'invalid': 'linen_category_id must be a valid UUID',
    })
    favorite = serializers.BooleanField(required=False, default=True)


# =============================================================================
# Output Serializers
# =============================================================================

class ClientSerializer(serializers.ModelSerializer):
    """Client as shown in lists and detail screens."""

    class Meta:
        model = Client
        fields = [
            'id',
            'name',
            'contact_number',
            'email',
            'address',
            'logo_url',
            'is_active',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ClientSummarySerializer(serializers.ModelSerializer):
    """Minimal client info embedded in batch payloads."""

    class Meta:
        model = Client
        fields = ['id', 'name', 'email', 'contact_number', 'logo_url', 'is_active']
        read_only_fields = fields


class FavoritesSerializer(serializers.Serializer):
    favorites = serializers.ListField(child=serializers.UUIDField())
