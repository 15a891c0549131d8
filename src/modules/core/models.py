"""Abstract base model shared by every aggregate.

- UUIDv7 primary key (time-ordered, index friendly).
- ``created_at`` defaults to ``timezone.now`` instead of ``auto_now_add`` so
  services can stamp it from an injected clock.
- ``updated_at`` is refreshed on every ``save()``, including saves restricted
  with ``update_fields``.
"""

from __future__ import annotations

import uuid6
from django.db import models
from django.utils import timezone


class BaseModel(models.Model):
    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)
