"""Manager use cases."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import structlog
from django.contrib.auth import get_user_model
from django.db import transaction

from modules.core.clock import Clock, system_clock
from modules.managers.exceptions import ManagerFailureReason
from modules.managers.models import Manager
from modules.managers.validators import ManagerValidators
from shared.domain import field_validators as fv

if TYPE_CHECKING:
    from modules.managers.dtos import ChangePasswordDTO, CreateManagerDTO, UpdateManagerDTO
    from modules.managers.repositories.interfaces import IManagerRepository

logger = structlog.get_logger(__name__)


class ManagerService:
    def __init__(self, repository: IManagerRepository, clock: Optional[Clock] = None) -> None:
        self._repo = repository
        self._clock = clock or system_clock

    @transaction.atomic
    def create_manager(self, dto: CreateManagerDTO) -> Manager:
        """Validate, then create the login user and the manager profile.

        Password hashing is delegated to Django's ``create_user``.
        """
        ManagerValidators.validate_create_manager_fields(dto, today=self._clock.today())

        if self._repo.get_by_email(dto.email):
            logger.warning("manager.duplicate_email")
            raise ManagerFailureReason.EMAIL_ALREADY_EXISTS.exception(email=dto.email)

        user = get_user_model().objects.create_user(
            username=dto.email,
            email=dto.email,
            password=dto.password,
            first_name=dto.first_name,
            last_name=dto.last_name,
        )
        manager = Manager(
            user=user,
            first_name=dto.first_name,
            last_name=dto.last_name,
            email=dto.email,
            phone_number=dto.phone_number,
            date_of_birth=dto.date_of_birth,
            street_address=dto.street_address,
            city=dto.city,
            created_at=self._clock.now(),
        )
        manager = self._repo.save(manager)
        logger.info("manager.created", manager_id=str(manager.id))
        return manager

    @transaction.atomic
    def update_manager(self, manager_id: str, dto: UpdateManagerDTO) -> Manager:
        ManagerValidators.validate_update_manager_fields(dto, today=self._clock.today())

        manager = self.get_manager(manager_id)
        for field in (
            "first_name",
            "last_name",
            "phone_number",
            "date_of_birth",
            "street_address",
            "city",
        ):
            setattr(manager, field, getattr(dto, field))

        manager = self._repo.save(manager)
        logger.info("manager.updated", manager_id=str(manager_id))
        return manager

    @transaction.atomic
    def update_password(self, manager_id: str, dto: ChangePasswordDTO) -> None:
        fv.validate_password_change(
            dto.old_password, dto.new_password, dto.new_password_confirmation
        )
        manager = self.get_manager(manager_id)
        user = manager.user
        if not user.check_password(dto.old_password):
            logger.warning("manager.password_mismatch", manager_id=str(manager_id))
            raise ManagerFailureReason.OLD_PASSWORD_INCORRECT.exception(manager_id=manager_id)

        user.set_password(dto.new_password)
        user.save(update_fields=["password"])
        self._repo.save(manager)
        logger.info("manager.password_updated", manager_id=str(manager_id))

    def get_manager(self, manager_id: str) -> Manager:
        manager = self._repo.get_by_id(str(manager_id))
        if not manager:
            raise ManagerFailureReason.NOT_FOUND.exception(manager_id=manager_id)
        return manager
