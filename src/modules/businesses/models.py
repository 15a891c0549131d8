"""Business profile of a manager (one business per manager)."""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Business(BaseModel):
    manager = models.OneToOneField(
        "managers.Manager",
        on_delete=models.CASCADE,
        related_name="business",
    )
    name = models.CharField(max_length=255)
    state_id_number = models.CharField(max_length=20)
    email = models.EmailField(max_length=254)
    phone_number = models.CharField(max_length=20)
    street_address = models.CharField(max_length=255)
    city = models.CharField(max_length=100)

    class Meta:
        db_table = "businesses"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
