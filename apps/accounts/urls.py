from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Authentication
    path('auth/login/', views.login, name='login'),
    path('auth/me/', views.current_user, name='current-user'),

    # User administration (admin only)
    path('users/', views.user_list, name='user-list'),
    path('users/<uuid:pk>/', views.user_detail, name='user-detail'),
]
