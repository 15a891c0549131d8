"""Django ORM implementation of the business repository."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.businesses.models import Business
from modules.businesses.repositories.interfaces import IBusinessRepository

logger = structlog.get_logger(__name__)


class BusinessDjangoRepository(IBusinessRepository):
    def get_by_id(self, id: str) -> Optional[Business]:
        try:
            return Business.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_manager(self, manager_id: str) -> Optional[Business]:
        try:
            return Business.objects.filter(manager_id=manager_id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Business]:
        queryset = Business.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Business) -> Business:
        entity.save()
        logger.info("business.saved", business_id=str(entity.id))
        return entity
