from django.urls import path
from . import views

app_name = 'batches'

urlpatterns = [
    path('', views.batch_list, name='batch-list'),
    path('next-paper-id/', views.next_paper_id, name='next-paper-id'),
    path('<uuid:pk>/', views.batch_detail, name='batch-detail'),
    path('<uuid:pk>/items/', views.batch_items, name='batch-items'),
]
