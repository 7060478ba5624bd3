# backend/db.py
"""
PATH: backend/db.py

SOFT DELETE BASE

Rows are never physically removed by the API:
- deleted_at IS NULL  -> live row
- deleted_at set      -> hidden from every read

Use `Model.objects.alive()` for reads and `instance.soft_delete()` /
`queryset.soft_delete()` for deletes.
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone


class SoftDeleteQuerySet(models.QuerySet):
    def alive(self):
        return self.filter(deleted_at__isnull=True)

    def soft_delete(self) -> int:
        """
        Mark every live row in this queryset as deleted.
        Returns the number of rows affected.
        """
        return self.alive().update(deleted_at=timezone.now())


class SoftDeleteModel(models.Model):
    deleted_at = models.DateTimeField(null=True, blank=True, db_index=True)

    objects = SoftDeleteQuerySet.as_manager()

    class Meta:
        abstract = True

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def soft_delete(self):
        self.deleted_at = timezone.now()
        self.save(update_fields=["deleted_at"])
