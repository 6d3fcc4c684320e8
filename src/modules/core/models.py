"""Base abstract models for the catalog service.

Provides:
- ``TimestampedModel``: created_at / updated_at bookkeeping.
- ``AvailabilityModel``: soft delete via an ``is_available`` flag.

Design decisions:
- ``objects`` manager returns ALL records (unfiltered).  Use
  ``.available()`` explicitly to exclude soft-deleted rows.
- ``delete()`` returns Django-compatible ``(count, {label: count})`` tuple
  and never removes the row.
- ``save()`` guard ensures ``updated_at`` is included when ``update_fields``
  is specified (Django skips ``auto_now`` fields otherwise).
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone

# ---------------------------------------------------------------------------
# TimestampedModel
# ---------------------------------------------------------------------------


class TimestampedModel(models.Model):
    """Abstract base with timestamp bookkeeping.

    The primary key is left to ``DEFAULT_AUTO_FIELD`` (store-generated
    integer).
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)


# ---------------------------------------------------------------------------
# Availability (soft delete) infrastructure
# ---------------------------------------------------------------------------


class AvailabilityQuerySet(models.QuerySet):
    """QuerySet with availability helpers."""

    def available(self) -> AvailabilityQuerySet:
        """Return only records visible to standard reads."""
        return self.filter(is_available=True)

    def delete(self) -> tuple[int, dict[str, int]]:
        """Bulk soft-delete: clears ``is_available`` and touches ``updated_at``."""
        count = self.available().update(is_available=False, updated_at=timezone.now())
        return count, {self.model._meta.label: count}


class AvailabilityManager(models.Manager):
    """Manager that exposes ``.available()``."""

    def get_queryset(self) -> AvailabilityQuerySet:
        return AvailabilityQuerySet(self.model, using=self._db)

    def available(self) -> AvailabilityQuerySet:
        return self.get_queryset().available()


class AvailabilityModel(TimestampedModel):
    """Abstract model with soft delete via a boolean ``is_available`` flag.

    - ``objects`` is **unfiltered** (returns all rows).
    - Use ``Model.objects.available()`` to exclude soft-deleted rows.
    - ``delete()`` flips the flag; there is no physical delete path.

    A richer lifecycle (e.g. active / archived) would replace the flag with
    a ``TextChoices`` status field here.
    """

    is_available = models.BooleanField(default=True, db_index=True)

    objects = AvailabilityManager()

    class Meta:
        abstract = True

    def delete(self, using=None, keep_parents=False) -> tuple[int, dict[str, int]]:
        """Soft-delete this instance (no-op if already unavailable)."""
        if not self.is_available:
            return 0, {}
        self.is_available = False
        self.save(update_fields=["is_available", "updated_at"])
        return 1, {self._meta.label: 1}

