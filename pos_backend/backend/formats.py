# backend/formats.py

"""
Canonical date formats used in API payloads and invoice keys.
"""

from __future__ import annotations

from django.utils import timezone

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_date(value) -> str:
    if not value:
        return ""
    return value.strftime(DATE_FORMAT)


def format_datetime(value) -> str:
    """
    Render an aware datetime in the project time zone.
    Naive values are rendered as-is.
    """
    if not value:
        return ""
    if timezone.is_aware(value):
        value = timezone.localtime(value)
    return value.strftime(DATETIME_FORMAT)
