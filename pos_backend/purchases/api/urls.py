# purchases/api/urls.py

from django.urls import path

from purchases.api.views import PurchaseListCreateView

urlpatterns = [
    path("", PurchaseListCreateView.as_view(), name="purchases"),
]
