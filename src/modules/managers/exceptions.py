"""Manager and agent failure reasons."""

from __future__ import annotations

from shared.domain.failures import ErrorKind, FailureReason


class ManagerFailureReason(FailureReason):
    NOT_FOUND = (
        ErrorKind.NOT_FOUND,
        "Manager not found",
        "Manager not found",
    )
    EMAIL_ALREADY_EXISTS = (
        ErrorKind.VALIDATION_ERROR,
        "A manager with this email already exists",
        "Duplicate manager email `{email}`",
    )
    OLD_PASSWORD_INCORRECT = (
        ErrorKind.VALIDATION_ERROR,
        "Old password is incorrect",
        "Password mismatch for manager `{manager_id}`",
    )
