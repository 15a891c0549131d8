"""DRF exception handler: the single boundary where failures are rendered.

Every error response has the same body::

    {"status": 404, "kind": "NOT_FOUND", "user_message": "...",
     "technical_message": "...", "severity": "WARN"}

- ``ServiceException`` → its ``FailureDescriptor``, unchanged.
- DRF ``APIException`` (auth, throttling, parse errors, serializer
  validation) → keeps DRF's status code and headers.
- pydantic ``ValidationError`` raised while building a DTO → 400.
- Anything else → ``UNEXPECTED`` / 500.  The technical detail goes to the
  log only; the response carries the generic message.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from shared.domain.failures import (
    ErrorKind,
    FailureDescriptor,
    ServiceException,
    SeverityLevel,
)

logger = structlog.get_logger(__name__)

_KIND_BY_STATUS = {
    status.HTTP_400_BAD_REQUEST: ErrorKind.VALIDATION_ERROR,
    status.HTTP_404_NOT_FOUND: ErrorKind.NOT_FOUND,
}


def render_failure(failure: FailureDescriptor) -> Dict[str, Any]:
    return failure.model_dump(mode="json")


def service_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if isinstance(exc, ServiceException):
        failure = exc.failure
        log = logger.bind(view=view_name, kind=failure.kind, status=failure.status)
        if failure.severity in (SeverityLevel.ERROR, SeverityLevel.FATAL):
            log.error("request.failed", technical_message=failure.technical_message)
        else:
            log.warning("request.rejected", technical_message=failure.technical_message)
        return Response(render_failure(failure), status=failure.status)

    if isinstance(exc, PydanticValidationError):
        failure = FailureDescriptor(
            kind=ErrorKind.VALIDATION_ERROR,
            status=status.HTTP_400_BAD_REQUEST,
            user_message="Invalid request data",
            technical_message=_summarize_pydantic_errors(exc),
            severity=SeverityLevel.WARN,
        )
        logger.warning("request.invalid_payload", view=view_name)
        return Response(render_failure(failure), status=failure.status)

    response = drf_exception_handler(exc, context)
    if response is not None:
        detail = response.data.get("detail") if isinstance(response.data, dict) else None
        failure = FailureDescriptor(
            kind=_KIND_BY_STATUS.get(response.status_code, ErrorKind.VALIDATION_ERROR),
            status=response.status_code,
            user_message=str(detail) if detail else "Invalid request",
            technical_message=str(response.data),
            severity=SeverityLevel.WARN,
        )
        response.data = render_failure(failure)
        return response

    logger.exception("request.unexpected_error", view=view_name)
    failure = FailureDescriptor.unexpected(str(exc))
    body = render_failure(failure)
    body["technical_message"] = "See server logs for details."
    return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def _summarize_pydantic_errors(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)
