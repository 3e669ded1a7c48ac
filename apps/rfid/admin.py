from django.contrib import admin
from .models import RFIDRecord


@admin.register(RFIDRecord)
class RFIDRecordAdmin(admin.ModelAdmin):
    list_display = ['rfid_number', 'category', 'status', 'condition', 'location', 'qty_washed', 'date_time']
    list_filter = ['status', 'condition', 'category']
    search_fields = ['rfid_number', 'category', 'location', 'user_name']
    readonly_fields = ['id', 'created_at']
