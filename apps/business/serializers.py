from rest_framework import serializers

from .models import BusinessSettings


def _optional(max_length):
    return serializers.CharField(
        max_length=max_length,
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
    )


class BusinessSettingsInputSerializer(serializers.Serializer):
    """
    Business settings payload for PUT.

    Only company_name is required. Optional values are cleaned by the
    service (trimmed, blank to null, invalid URLs dropped), so no URL or
    email format is enforced here.
    """

    company_name = serializers.CharField(
        max_length=255,
        error_messages={
            'required': 'Company name is required',
            'blank': 'Company name is required',
            'null': 'Company name is required',
        },
    )
    logo_url = _optional(500)
    address = _optional(500)
    phone = _optional(50)
    email = _optional(255)
    website = _optional(255)
    bank_name = _optional(255)
    bank_account_name = _optional(255)
    bank_account_number = _optional(50)
    bank_branch_code = _optional(20)
    bank_account_type = _optional(50)
    bank_payment_reference = _optional(255)
    payment_terms_days = serializers.IntegerField(
        required=False,
        allow_null=True,
        min_value=0,
        max_value=365,
        error_messages={
            'min_value': 'Payment terms must be between 0 and 365 days',
            'max_value': 'Payment terms must be between 0 and 365 days',
        },
    )


class BusinessSettingsSerializer(serializers.ModelSerializer):

    class Meta:
        model = BusinessSettings
        fields = [
            'id',
            'company_name',
            'logo_url',
            'address',
            'phone',
            'email',
            'website',
            'bank_name',
            'bank_account_name',
            'bank_account_number',
            'bank_branch_code',
            'bank_account_type',
            'bank_payment_reference',
            'payment_terms_days',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields
