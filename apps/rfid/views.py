from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema

from config.responses import success_response
from .serializers import RFIDImportSerializer, RFIDRecordSerializer
from .services import clear_records, import_records, list_records


@extend_schema(
    request=RFIDImportSerializer,
    responses={200: RFIDRecordSerializer(many=True), 201: RFIDRecordSerializer(many=True)},
    description="List RFID records (GET), import a scanner export (POST) or delete all records (DELETE).",
    tags=['rfid'],
)
@api_view(['GET', 'POST', 'DELETE'])
@permission_classes([IsAuthenticated])
def rfid_data(request):
    if request.method == 'POST':
        serializer = RFIDImportSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        records = import_records(serializer.validated_data['rfidRecords'])
        return success_response({
            'message': 'RFID data inserted successfully',
            'count': len(records),
            'data': RFIDRecordSerializer(records, many=True).data,
        }, status.HTTP_201_CREATED)

    if request.method == 'DELETE':
        deleted = clear_records()
        return success_response({
            'message': 'All RFID data deleted successfully',
            'count': deleted,
        })

    return success_response(RFIDRecordSerializer(list_records(), many=True).data)
