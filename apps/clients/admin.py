from django.contrib import admin
from .models import Client, ClientFavoriteCategory


class ClientFavoriteInline(admin.TabularInline):
    model = ClientFavoriteCategory
    extra = 0
    autocomplete_fields = ['linen_category']


@admin.register(Client)
class ClientAdmin(admin.ModelAdmin):
    """Admin interface for laundry clients."""

    list_display = [
        'name',
        'email',
        'contact_number',
        'is_active',
        'created_at',
    ]

    list_filter = ['is_active', 'created_at']
    search_fields = ['name', 'email', 'contact_number']
    ordering = ['name']

    readonly_fields = ['id', 'created_at', 'updated_at']
    inlines = [ClientFavoriteInline]

    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'name', 'is_active')
        }),
        ('Contact', {
            'fields': ('contact_number', 'email', 'address', 'logo_url')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
