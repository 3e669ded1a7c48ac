from django.contrib import admin
from .models import LinenCategory


@admin.register(LinenCategory)
class LinenCategoryAdmin(admin.ModelAdmin):
    """Admin interface for linen categories and their prices."""

    list_display = [
        'name',
        'section',
        'price_per_item',
        'is_active',
        'updated_at',
    ]

    list_filter = [
        'section',
        'is_active',
    ]

    search_fields = ['name']
    list_editable = ['price_per_item', 'is_active']
    ordering = ['name']

    readonly_fields = ['id', 'created_at', 'updated_at']

    actions = ['activate_categories', 'deactivate_categories']

    @admin.action(description='Activate selected categories')
    def activate_categories(self, request, queryset):
        count = queryset.update(is_active=True)
        self.message_user(request, f'Activated {count} category(ies).')

    @admin.action(description='Deactivate selected categories')
    def deactivate_categories(self, request, queryset):
        count = queryset.update(is_active=False)
        self.message_user(request, f'Deactivated {count} category(ies).')
