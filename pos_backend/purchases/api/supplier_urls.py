# purchases/api/supplier_urls.py

from django.urls import path

from purchases.api.views import SupplierDetailView, SupplierListCreateView

urlpatterns = [
    path("", SupplierListCreateView.as_view(), name="suppliers"),
    path("<str:pk>/", SupplierDetailView.as_view(), name="supplier-detail"),
]
