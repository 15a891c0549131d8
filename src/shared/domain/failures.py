"""Failure taxonomy shared by every module.

A failure is described by an immutable ``FailureDescriptor``.  Domain code
never builds descriptors by hand: each module declares a ``FailureReason``
enum whose members carry the failure kind plus the user-facing and technical
message templates, and the descriptor is produced at raise time::

    raise CustomerFailureReason.CUSTOMER_LIMIT_EXCEEDED.exception(
        manager_id=manager_id, agent_id=agent_id
    )

The API boundary renders ``ServiceException.failure`` unchanged.
"""

from __future__ import annotations

from enum import Enum, StrEnum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ErrorKind(StrEnum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    ILLEGAL_STATE_TRANSITION = "ILLEGAL_STATE_TRANSITION"
    NOT_FOUND = "NOT_FOUND"
    UNEXPECTED = "UNEXPECTED"


class SeverityLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"


HTTP_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION_ERROR: 400,
    ErrorKind.CAPACITY_EXCEEDED: 400,
    ErrorKind.ILLEGAL_STATE_TRANSITION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNEXPECTED: 500,
}

SEVERITY_BY_KIND: dict[ErrorKind, SeverityLevel] = {
    ErrorKind.VALIDATION_ERROR: SeverityLevel.WARN,
    ErrorKind.CAPACITY_EXCEEDED: SeverityLevel.WARN,
    ErrorKind.ILLEGAL_STATE_TRANSITION: SeverityLevel.WARN,
    ErrorKind.NOT_FOUND: SeverityLevel.WARN,
    ErrorKind.UNEXPECTED: SeverityLevel.ERROR,
}

GENERIC_USER_MESSAGE = "An unexpected error occurred. Please try again later."


class FailureDescriptor(BaseModel):
    """Immutable description of a failed operation."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    status: int
    user_message: str
    technical_message: str
    severity: SeverityLevel

    @classmethod
    def unexpected(cls, technical_message: str) -> FailureDescriptor:
        return cls(
            kind=ErrorKind.UNEXPECTED,
            status=HTTP_STATUS_BY_KIND[ErrorKind.UNEXPECTED],
            user_message=GENERIC_USER_MESSAGE,
            technical_message=technical_message or "No technical details available.",
            severity=SeverityLevel.ERROR,
        )


class ServiceException(Exception):
    """Carries a ``FailureDescriptor`` from the point of failure to the API."""

    def __init__(self, failure: FailureDescriptor) -> None:
        super().__init__(failure.technical_message)
        self.failure = failure

    @property
    def kind(self) -> ErrorKind:
        return self.failure.kind

    @property
    def status(self) -> int:
        return self.failure.status


class FailureReason(Enum):
    """Base for per-module reason enums.

    Member values are ``(kind, user_message, technical_message)`` tuples, with
    an optional fourth element overriding the kind's default severity.  Both
    message templates may reference keyword context with ``{name}``
    placeholders; context that is not consumed by the technical template is
    appended as ``key=value`` pairs for diagnosis.
    """

    @property
    def kind(self) -> ErrorKind:
        return self.value[0]

    @property
    def user_message(self) -> str:
        return self.value[1]

    @property
    def technical(self) -> str:
        return self.value[2]

    @property
    def severity(self) -> SeverityLevel:
        if len(self.value) > 3:
            return self.value[3]
        return SEVERITY_BY_KIND[self.kind]

    def failure(
        self, severity: Optional[SeverityLevel] = None, **context: Any
    ) -> FailureDescriptor:
        technical = self.technical.format(**context)
        extra = [
            f"{key}={value}"
            for key, value in context.items()
            if "{" + key + "}" not in self.technical
        ]
        if extra:
            technical = f"{technical} | {', '.join(extra)}"
        return FailureDescriptor(
            kind=self.kind,
            status=HTTP_STATUS_BY_KIND[self.kind],
            user_message=self.user_message.format(**context),
            technical_message=technical,
            severity=severity or self.severity,
        )

    def exception(
        self, severity: Optional[SeverityLevel] = None, **context: Any
    ) -> ServiceException:
        return ServiceException(self.failure(severity=severity, **context))
