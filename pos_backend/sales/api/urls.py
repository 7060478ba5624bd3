# sales/api/urls.py

"""
SALES API URLS

Mounted at /api/sales/ by backend/urls.py:
- invoices/        list + create
- invoices/<id>/   detail + update
"""

from django.urls import path

from sales.api.views import SalesInvoiceDetailView, SalesInvoiceListCreateView

app_name = "sales"

urlpatterns = [
    path("invoices/", SalesInvoiceListCreateView.as_view(), name="invoice-list"),
    path("invoices/<str:pk>/", SalesInvoiceDetailView.as_view(), name="invoice-detail"),
]
