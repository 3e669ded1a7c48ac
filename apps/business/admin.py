from django.contrib import admin
from .models import BusinessSettings


@admin.register(BusinessSettings)
class BusinessSettingsAdmin(admin.ModelAdmin):
    list_display = ['company_name', 'email', 'phone', 'payment_terms_days', 'updated_at']
    readonly_fields = ['id', 'created_at', 'updated_at']

    fieldsets = (
        ('Company', {
            'fields': ('id', 'company_name', 'logo_url', 'address', 'phone', 'email', 'website')
        }),
        ('Banking', {
            'fields': (
                'bank_name',
                'bank_account_name',
                'bank_account_number',
                'bank_branch_code',
                'bank_account_type',
                'bank_payment_reference',
                'payment_terms_days',
            )
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
