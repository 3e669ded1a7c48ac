from django.urls import path
from . import views

app_name = 'catalog'

urlpatterns = [
    path('', views.category_list, name='category-list'),
    path('lookup/', views.price_lookup, name='price-lookup'),
    path('<uuid:pk>/', views.category_detail, name='category-detail'),
]
