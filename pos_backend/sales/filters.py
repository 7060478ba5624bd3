# sales/filters.py

"""
Invoice list filters (django-filter).

Query params: status, from, to (YYYY-MM-DD, both inclusive by calendar day
in the project time zone). `from` is a keyword in Python, so the view maps
it onto `date_from` / `date_to`.
"""

import django_filters

from sales.models import SalesInvoice


class SalesInvoiceFilter(django_filters.FilterSet):
    status = django_filters.CharFilter(field_name="status")
    date_from = django_filters.DateFilter(field_name="created_at", lookup_expr="date__gte")
    date_to = django_filters.DateFilter(field_name="created_at", lookup_expr="date__lte")

    class Meta:
        model = SalesInvoice
        fields = []

    @classmethod
    def from_query_params(cls, query_params, queryset):
        data = {
            "status": query_params.get("status", ""),
            "date_from": query_params.get("from", ""),
            "date_to": query_params.get("to", ""),
        }
        return cls(data=data, queryset=queryset)
