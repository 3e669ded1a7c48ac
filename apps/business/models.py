from django.db import models
import uuid


class BusinessSettings(models.Model):
    """
    Company details printed on invoices and reports.

    Only one logical row exists: the most recently updated one.
    Optional fields are NULL rather than '' when not set.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company_name = models.CharField(max_length=255)
    logo_url = models.URLField(max_length=500, null=True, blank=True)
    address = models.CharField(max_length=500, null=True, blank=True)
    phone = models.CharField(max_length=50, null=True, blank=True)
    email = models.EmailField(max_length=255, null=True, blank=True)
    website = models.URLField(max_length=255, null=True, blank=True)

    # Banking details
    bank_name = models.CharField(max_length=255, null=True, blank=True)
    bank_account_name = models.CharField(max_length=255, null=True, blank=True)
    bank_account_number = models.CharField(max_length=50, null=True, blank=True)
    bank_branch_code = models.CharField(max_length=20, null=True, blank=True)
    bank_account_type = models.CharField(max_length=50, null=True, blank=True)
    bank_payment_reference = models.CharField(max_length=255, null=True, blank=True)

    payment_terms_days = models.PositiveSmallIntegerField(default=8)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'business_settings'
        ordering = ['-updated_at']
        verbose_name_plural = 'business settings'

    def __str__(self):
        return self.company_name
