from django.urls import path
from . import views

app_name = 'clients'

urlpatterns = [
    path('', views.client_list, name='client-list'),
    path('<uuid:pk>/', views.client_detail, name='client-detail'),
    path('<uuid:pk>/favorites/', views.client_favorites, name='client-favorites'),
]
