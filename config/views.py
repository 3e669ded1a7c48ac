from django.http import JsonResponse
from drf_spectacular.utils import extend_schema
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from config.responses import envelope, success_response


@extend_schema(description='Liveness probe.', tags=['health'])
@api_view(['GET'])
@permission_classes([AllowAny])
def health_check(request):
    """Health check endpoint (no auth)."""
    return success_response({'status': 'ok'})


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse(envelope(error='Not found'), status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse(envelope(error='Internal server error'), status=500)
