from django.urls import path
from . import views

app_name = 'reports'

urlpatterns = [
    path('stats/', views.dashboard_stats, name='dashboard-stats'),
    path('batches/', views.recent_batches, name='recent-batches'),
    path('reports/', views.invoice_report, name='invoice-report'),
    path('reports/pdf-stats/', views.pdf_stats, name='pdf-stats'),
    path('reports/batch-invoice/', views.batch_invoice, name='batch-invoice'),
    path('reports/client-batches/', views.client_batches, name='client-batches'),
    path('reports/export-excel/', views.export_excel, name='export-excel'),
]
