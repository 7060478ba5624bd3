# sales/services/invoice_storage.py

"""
INVOICE OBJECT STORAGE (S3 via boto3)

- Enabled only when both AWS_REGION and S3_BUCKET_INVOICES are set.
- Credentials come from the default boto3 chain (env, profile, instance role).
- Keys: invoices/<YYYY-MM-DD>/<invoice_number>.pdf
"""

from __future__ import annotations

import logging
from functools import lru_cache

import boto3
from django.conf import settings
from django.utils import timezone

from backend.formats import format_date
from sales.services.exceptions import InvoiceStorageError

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


@lru_cache(maxsize=4)
def _client_for(region: str):
    client = boto3.client("s3", region_name=region)
    logger.info("S3 client initialized", extra={"region": region})
    return client


def get_invoice_bucket() -> str:
    region = (getattr(settings, "AWS_REGION", "") or "").strip()
    bucket = (getattr(settings, "S3_BUCKET_INVOICES", "") or "").strip()

    if not region or not bucket:
        logger.warning("AWS_REGION or S3_BUCKET_INVOICES not set, invoice storage disabled")
        raise InvoiceStorageError("invoice storage not configured")

    return bucket


def get_s3_client():
    get_invoice_bucket()
    return _client_for(settings.AWS_REGION.strip())


def invoice_pdf_key(invoice_number: str, on_date=None) -> str:
    return f"invoices/{format_date(on_date or timezone.localdate())}/{invoice_number}.pdf"


def upload_invoice_pdf(*, key: str, body: bytes) -> str:
    bucket = get_invoice_bucket()
    get_s3_client().put_object(
        Bucket=bucket,
        Key=key,
        Body=body,
        ContentType=PDF_CONTENT_TYPE,
    )
    return key
