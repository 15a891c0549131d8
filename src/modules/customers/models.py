"""Customer model.

A customer belongs to a manager and, when an agent created it, to that agent
as well.  Phone numbers are unique within a manager's book.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    manager = models.ForeignKey(
        "managers.Manager",
        on_delete=models.CASCADE,
        related_name="customers",
    )
    agent = models.ForeignKey(
        "managers.Agent",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="customers",
    )
    name = models.CharField(max_length=255)
    phone_number = models.CharField(max_length=20)
    email = models.EmailField(max_length=254)
    street_address = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    state_id = models.CharField(max_length=9)

    class Meta:
        db_table = "customers"
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["manager", "phone_number"],
                name="customers_manager_phone_uniq",
            ),
        ]
        indexes = [
            models.Index(fields=["manager", "agent"], name="customers_owner_idx"),
        ]

    def __str__(self) -> str:
        # state id is sensitive, show the last digits only
        suffix = self.state_id[-4:] if self.state_id else "????"
        return f"{self.name} (***{suffix})"
