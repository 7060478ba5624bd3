# sales/api/views.py

"""
SALES INVOICE VIEWS

- GET  /api/sales/invoices/          list (status / from / to / page / limit)
- POST /api/sales/invoices/          create (DRAFT or INVOICED)
- GET  /api/sales/invoices/<id>/     header + live items
- PUT  /api/sales/invoices/<id>/     update a DRAFT invoice

Upsert runs in one transaction (services.invoice_service). The PDF is
published only after that transaction commits, and a publishing failure
never changes the response.
"""

import logging

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.permissions import IsAuthenticated

from backend.params import parse_positive_id, parse_positive_int
from backend.responses import error_response, success_response
from permissions.roles import IsStaff
from sales.filters import SalesInvoiceFilter
from sales.models import SalesInvoice
from sales.serializers import (
    SalesInvoiceHeaderSerializer,
    SalesInvoiceItemSerializer,
    SalesInvoiceListSerializer,
    SalesInvoiceUpsertSerializer,
)
from sales.services.exceptions import InvoiceLockedError, InvoiceNotFoundError
from sales.services.invoice_document import publish_invoice_pdf_safely
from sales.services.invoice_service import upsert_invoice

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20


class _InvoiceUpsertMixin:
    """
    Shared create/update path: validate -> upsert -> publish PDF.
    Returns (result, None) or (None, error Response).
    """

    def _upsert(self, request, invoice_id=None):
        s = SalesInvoiceUpsertSerializer(data=request.data)
        if not s.is_valid():
            return None, error_response(
                "invalid payload", status.HTTP_400_BAD_REQUEST, details=s.errors
            )

        header = s.header()
        try:
            result = upsert_invoice(
                invoice_id=invoice_id,
                customer_name=header.get("customer_name", ""),
                customer_mobile=header.get("customer_mobile", ""),
                payment_mode=header.get("payment_mode", ""),
                is_confirmed=header.get("is_confirmed"),
                items=s.validated_data["items"],
                user=request.user,
            )
        except InvoiceNotFoundError as exc:
            return None, error_response(str(exc), status.HTTP_404_NOT_FOUND)
        except InvoiceLockedError as exc:
            return None, error_response(str(exc), status.HTTP_400_BAD_REQUEST)

        if result.final_status == SalesInvoice.STATUS_INVOICED:
            publish_invoice_pdf_safely(result.invoice_id)

        return result, None


class SalesInvoiceListCreateView(_InvoiceUpsertMixin, GenericAPIView):
    permission_classes = [IsAuthenticated, IsStaff]
    serializer_class = SalesInvoiceUpsertSerializer

    @extend_schema(
        tags=["sales"],
        parameters=[
            OpenApiParameter("status", str, description="DRAFT or INVOICED"),
            OpenApiParameter("from", str, description="YYYY-MM-DD (inclusive)"),
            OpenApiParameter("to", str, description="YYYY-MM-DD (inclusive)"),
            OpenApiParameter("page", int),
            OpenApiParameter("limit", int),
        ],
        responses={200: SalesInvoiceListSerializer(many=True)},
    )
    def get(self, request):
        page = parse_positive_int(request.query_params.get("page"), DEFAULT_PAGE)
        limit = parse_positive_int(request.query_params.get("limit"), DEFAULT_LIMIT)

        f = SalesInvoiceFilter.from_query_params(
            request.query_params,
            SalesInvoice.objects.alive().order_by("-created_at", "-id"),
        )
        if not f.is_valid():
            return error_response("invalid filter", status.HTTP_400_BAD_REQUEST, details=f.errors)

        offset = (page - 1) * limit
        rows = f.qs[offset:offset + limit]

        return success_response(
            {
                "page": page,
                "limit": limit,
                "invoices": SalesInvoiceListSerializer(rows, many=True).data,
            },
            "Invoices fetched successfully",
        )

    @extend_schema(
        tags=["sales"],
        request=SalesInvoiceUpsertSerializer,
        responses={
            201: OpenApiResponse(description="invoice created"),
            400: OpenApiResponse(description="invalid payload"),
        },
    )
    def post(self, request):
        result, error = self._upsert(request)
        if error is not None:
            return error

        return success_response(
            {"invoice_id": result.invoice_id, "final_status": result.final_status},
            "invoice created",
            status=status.HTTP_201_CREATED,
        )


class SalesInvoiceDetailView(_InvoiceUpsertMixin, GenericAPIView):
    permission_classes = [IsAuthenticated, IsStaff]
    serializer_class = SalesInvoiceUpsertSerializer

    @extend_schema(
        tags=["sales"],
        responses={
            200: OpenApiResponse(description="invoice header + items"),
            400: OpenApiResponse(description="invalid invoice id"),
            404: OpenApiResponse(description="invoice not found"),
        },
    )
    def get(self, request, pk):
        invoice_id = parse_positive_id(pk)
        if invoice_id is None:
            return error_response("invalid invoice id", status.HTTP_400_BAD_REQUEST)

        invoice = SalesInvoice.objects.alive().filter(id=invoice_id).first()
        if invoice is None:
            return error_response("invoice not found", status.HTTP_404_NOT_FOUND)

        items = invoice.items.alive().select_related("product").order_by("id")

        return success_response(
            {
                "invoice": SalesInvoiceHeaderSerializer(invoice).data,
                "items": SalesInvoiceItemSerializer(items, many=True).data,
            },
            "Invoice details fetched successfully",
        )

    @extend_schema(
        tags=["sales"],
        request=SalesInvoiceUpsertSerializer,
        responses={
            200: OpenApiResponse(description="invoice updated"),
            400: OpenApiResponse(description="invalid payload / invoice locked"),
            404: OpenApiResponse(description="invoice not found"),
        },
    )
    def put(self, request, pk):
        invoice_id = parse_positive_id(pk)
        if invoice_id is None:
            return error_response("invalid invoice id", status.HTTP_400_BAD_REQUEST)

        result, error = self._upsert(request, invoice_id=invoice_id)
        if error is not None:
            return error

        return success_response(
            {"invoice_id": result.invoice_id, "final_status": result.final_status},
            "invoice updated",
        )
