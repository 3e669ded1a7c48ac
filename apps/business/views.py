from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema

from config.responses import success_response
from .serializers import BusinessSettingsInputSerializer, BusinessSettingsSerializer
from .services import get_business_settings, save_business_settings


@extend_schema(
    request=BusinessSettingsInputSerializer,
    responses={200: BusinessSettingsSerializer},
    description="Get the business settings (null when never saved) or replace them.",
    tags=['settings'],
)
@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated])
def business_settings(request):
    """Get (GET) or save (PUT) the business settings."""
    if request.method == 'PUT':
        serializer = BusinessSettingsInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        settings_row = save_business_settings(**serializer.validated_data)
        return success_response(BusinessSettingsSerializer(settings_row).data)

    settings_row = get_business_settings()
    if settings_row is None:
        return success_response(None)
    return success_response(BusinessSettingsSerializer(settings_row).data)
