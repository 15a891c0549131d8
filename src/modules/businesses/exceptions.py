"""Business failure reasons."""

from __future__ import annotations

from shared.domain.failures import ErrorKind, FailureReason


class BusinessFailureReason(FailureReason):
    NOT_FOUND = (
        ErrorKind.NOT_FOUND,
        "Business not found",
        "Business not found",
    )
    ALREADY_EXISTS = (
        ErrorKind.VALIDATION_ERROR,
        "A business already exists for this manager",
        "Business already registered",
    )
