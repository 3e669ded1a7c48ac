from rest_framework import serializers

from .models import RFIDRecord


class RFIDImportSerializer(serializers.Serializer):
    """
    Scanner export upload.

    Fields:
        rfidRecords (list): Rows keyed by the export's column headers
    """

    rfidRecords = serializers.ListField(
        child=serializers.DictField(),
        allow_empty=True,
        error_messages={
            'required': 'Invalid data format',
            'null': 'Invalid data format',
            'not_a_list': 'Invalid data format',
        },
    )


class RFIDRecordSerializer(serializers.ModelSerializer):

    class Meta:
        model = RFIDRecord
        fields = [
            'id',
            'rfid_number',
            'category',
            'status',
            'condition',
            'location',
            'user_name',
            'qty_washed',
            'washes_remaining',
            'assigned_location',
            'date_assigned',
            'date_time',
            'created_at',
        ]
        read_only_fields = fields
