from django.db import models
import uuid


class RFIDRecord(models.Model):
    """One row of an RFID scanner export (a tagged linen item)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    rfid_number = models.CharField(max_length=100, blank=True, db_index=True)
    category = models.CharField(max_length=255, blank=True)
    status = models.CharField(max_length=100, blank=True)
    condition = models.CharField(max_length=100, null=True, blank=True)
    location = models.CharField(max_length=255, null=True, blank=True)
    user_name = models.CharField(max_length=255, null=True, blank=True)
    qty_washed = models.IntegerField(default=0)
    washes_remaining = models.IntegerField(default=0)
    assigned_location = models.CharField(max_length=255, null=True, blank=True)
    date_assigned = models.DateTimeField(null=True, blank=True)
    date_time = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'rfid_records'
        ordering = ['-created_at']

    def __str__(self):
        return self.rfid_number or str(self.id)
