"""Customer failure reasons."""

from __future__ import annotations

from shared.domain.failures import ErrorKind, FailureReason


class CustomerFailureReason(FailureReason):
    CUSTOMER_NOT_FOUND = (
        ErrorKind.NOT_FOUND,
        "Customer not found",
        "Customer `{customer_id}` not found",
    )
    CUSTOMER_ALREADY_EXISTS = (
        ErrorKind.VALIDATION_ERROR,
        "A customer with this phone number already exists",
        "Duplicate customer phone number `{phone_number}`",
    )
    CUSTOMER_LIMIT_EXCEEDED = (
        ErrorKind.CAPACITY_EXCEEDED,
        "Customer limit reached",
        "Customer cap of {cap} reached: managerId={manager_id}, agentId={agent_id}",
    )
    AGENT_NOT_FOUND = (
        ErrorKind.NOT_FOUND,
        "Agent not found",
        "Agent `{agent_id}` does not belong to manager `{manager_id}`",
    )
