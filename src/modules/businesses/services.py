"""Business use cases."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.businesses.exceptions import BusinessFailureReason
from modules.businesses.models import Business
from modules.businesses.validators import BusinessValidators

if TYPE_CHECKING:
    from modules.businesses.dtos import CreateBusinessDTO, UpdateBusinessDTO
    from modules.businesses.repositories.interfaces import IBusinessRepository

logger = structlog.get_logger(__name__)

_EDITABLE_FIELDS = (
    "name",
    "state_id_number",
    "email",
    "phone_number",
    "street_address",
    "city",
)


class BusinessService:
    def __init__(self, repository: IBusinessRepository) -> None:
        self._repo = repository

    @transaction.atomic
    def create_business(self, dto: CreateBusinessDTO) -> Business:
        BusinessValidators.validate_create_business_fields(dto)

        if self._repo.get_by_manager(dto.manager_id):
            raise BusinessFailureReason.ALREADY_EXISTS.exception(manager_id=dto.manager_id)

        business = Business(
            manager_id=dto.manager_id,
            **{field: getattr(dto, field) for field in _EDITABLE_FIELDS},
        )
        business = self._repo.save(business)
        logger.info("business.created", business_id=str(business.id), manager_id=dto.manager_id)
        return business

    @transaction.atomic
    def update_business(self, manager_id: str, dto: UpdateBusinessDTO) -> Business:
        BusinessValidators.validate_update_business_fields(dto)

        business = self.get_business_for_manager(manager_id)
        for field in _EDITABLE_FIELDS:
            setattr(business, field, getattr(dto, field))
        return self._repo.save(business)

    def get_business_for_manager(self, manager_id: str) -> Business:
        business = self._repo.get_by_manager(manager_id)
        if not business:
            raise BusinessFailureReason.NOT_FOUND.exception(manager_id=manager_id)
        return business
