"""
URL configuration for the Linen Batch Tracker API.

All API routes live under /api/ and answer with the
{success, data, error} envelope.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenRefreshView

from config.views import health_check

urlpatterns = [
    # Health check (for Render)
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication + user administration
    path('api/auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
    path('api/', include('apps.accounts.urls')),

    # API endpoints
    path('api/categories/', include('apps.catalog.urls')),
    path('api/clients/', include('apps.clients.urls')),
    path('api/batches/', include('apps.batches.urls')),
    path('api/dashboard/', include('apps.reports.urls')),
    path('api/settings/', include('apps.business.urls')),
    path('api/rfid-data/', include('apps.rfid.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
