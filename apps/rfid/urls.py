from django.urls import path
from . import views

app_name = 'rfid'

urlpatterns = [
    path('', views.rfid_data, name='rfid-data'),
]
