# purchases/api/views.py

"""
SUPPLIER + PURCHASE VIEWS

- Suppliers: list / create / detail / update / soft delete (delete is admin-only)
- Purchases: record (stock-in) / list

Responses use the project envelope. Supplier input errors answer "invalid input".
"""

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.permissions import IsAuthenticated

from backend.params import parse_positive_id
from backend.responses import error_response, success_response
from permissions.roles import IsAdmin, IsStaff
from purchases.api.serializers import (
    PurchaseCreateSerializer,
    PurchaseListSerializer,
    SupplierSerializer,
)
from purchases.models import PurchaseInvoice, Supplier
from purchases.services.recording_service import (
    PurchaseRecordingError,
    record_purchase,
)

logger = logging.getLogger(__name__)


# =========================================================
# SUPPLIERS
# =========================================================
class SupplierListCreateView(GenericAPIView):
    permission_classes = [IsAuthenticated, IsStaff]
    serializer_class = SupplierSerializer

    @extend_schema(tags=["suppliers"], responses=SupplierSerializer(many=True))
    def get(self, request):
        qs = Supplier.objects.alive().order_by("-created_at")
        return success_response(
            SupplierSerializer(qs, many=True).data,
            "Suppliers fetched successfully",
        )

    @extend_schema(
        tags=["suppliers"],
        request=SupplierSerializer,
        responses={201: OpenApiResponse(description="supplier created")},
    )
    def post(self, request):
        s = SupplierSerializer(data=request.data)
        if not s.is_valid():
            return error_response("invalid input", status.HTTP_400_BAD_REQUEST, details=s.errors)

        supplier = s.save()
        logger.info("Supplier created", extra={"supplier_id": supplier.id})

        return success_response(
            {"id": supplier.id},
            "supplier created",
            status=status.HTTP_201_CREATED,
        )


class SupplierDetailView(GenericAPIView):
    serializer_class = SupplierSerializer

    def get_permissions(self):
        if self.request.method == "DELETE":
            return [IsAuthenticated(), IsAdmin()]
        return [IsAuthenticated(), IsStaff()]

    def _get_live(self, supplier_id):
        return Supplier.objects.alive().filter(id=supplier_id).first()

    @extend_schema(tags=["suppliers"], responses={200: SupplierSerializer})
    def get(self, request, pk):
        supplier_id = parse_positive_id(pk)
        if supplier_id is None:
            return error_response("invalid id", status.HTTP_400_BAD_REQUEST)

        supplier = self._get_live(supplier_id)
        if supplier is None:
            return error_response("supplier not found", status.HTTP_404_NOT_FOUND)

        return success_response(
            SupplierSerializer(supplier).data,
            "Supplier details fetched successfully",
        )

    @extend_schema(tags=["suppliers"], request=SupplierSerializer)
    def put(self, request, pk):
        supplier_id = parse_positive_id(pk)
        if supplier_id is None:
            return error_response("invalid id", status.HTTP_400_BAD_REQUEST)

        s = SupplierSerializer(data=request.data)
        if not s.is_valid():
            return error_response("invalid input", status.HTTP_400_BAD_REQUEST, details=s.errors)

        updated = Supplier.objects.alive().filter(id=supplier_id).update(
            name=s.validated_data["name"],
            contact_info=s.validated_data.get("contact_info", ""),
        )
        if not updated:
            return error_response("supplier not found", status.HTTP_404_NOT_FOUND)

        return success_response(message="supplier updated")

    @extend_schema(tags=["suppliers"], request=None)
    def delete(self, request, pk):
        supplier_id = parse_positive_id(pk)
        if supplier_id is None:
            return error_response("invalid id", status.HTTP_400_BAD_REQUEST)

        deleted = Supplier.objects.filter(id=supplier_id).soft_delete()
        if not deleted:
            return error_response("supplier not found", status.HTTP_404_NOT_FOUND)

        logger.info("Supplier deleted", extra={"supplier_id": supplier_id, "by": request.user.id})
        return success_response(message="supplier deleted")


# =========================================================
# PURCHASES
# =========================================================
class PurchaseListCreateView(GenericAPIView):
    permission_classes = [IsAuthenticated, IsStaff]
    serializer_class = PurchaseCreateSerializer

    @extend_schema(tags=["purchases"], responses=PurchaseListSerializer(many=True))
    def get(self, request):
        qs = (
            PurchaseInvoice.objects.alive()
            .select_related("supplier")
            .order_by("-created_at")
        )
        return success_response(
            PurchaseListSerializer(qs, many=True).data,
            "Purchases fetched successfully",
        )

    @extend_schema(
        tags=["purchases"],
        request=PurchaseCreateSerializer,
        responses={201: OpenApiResponse(description="Purchase recorded")},
    )
    def post(self, request):
        s = PurchaseCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        try:
            invoice = record_purchase(
                supplier_id=data["supplier_id"],
                invoice_number=data.get("invoice_number", ""),
                notes=data.get("notes", ""),
                items=data.get("items") or [],
                user=request.user,
            )
        except PurchaseRecordingError as exc:
            return error_response(str(exc), status.HTTP_400_BAD_REQUEST)

        return success_response(
            {
                "purchase_id": invoice.id,
                "total_amount": invoice.total_invoice_amount,
                "total_quantity": invoice.total_quantity,
            },
            "Purchase recorded",
            status=status.HTTP_201_CREATED,
        )
