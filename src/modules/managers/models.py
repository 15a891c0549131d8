"""Manager and Agent models.

A manager is the tenant: customers, orders and the business profile all hang
off a manager.  Agents work for exactly one manager and create customers and
order links on its behalf.  Both may be bound to a Django ``User`` used for
JWT authentication.
"""

from __future__ import annotations

from django.conf import settings
from django.db import models

from modules.core.models import BaseModel


class Manager(BaseModel):
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="manager_profile",
    )
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField(max_length=254, unique=True)
    phone_number = models.CharField(max_length=20)
    date_of_birth = models.DateField()
    street_address = models.CharField(max_length=255)
    city = models.CharField(max_length=100)

    class Meta:
        db_table = "managers"
        ordering = ["-created_at"]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return self.full_name


class Agent(BaseModel):
    manager = models.ForeignKey(
        "managers.Manager",
        on_delete=models.CASCADE,
        related_name="agents",
    )
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="agent_profile",
    )
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField(max_length=254, blank=True, default="")
    phone_number = models.CharField(max_length=20, blank=True, default="")
    street_address = models.CharField(max_length=255, blank=True, default="")
    city = models.CharField(max_length=100, blank=True, default="")

    class Meta:
        db_table = "agents"
        ordering = ["first_name", "last_name"]
        indexes = [
            models.Index(fields=["manager"], name="agents_manager_idx"),
        ]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return self.full_name
