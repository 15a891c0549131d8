"""Agent failure reasons."""

from __future__ import annotations

from shared.domain.failures import ErrorKind, FailureReason, SeverityLevel


class AgentFailureReason(FailureReason):
    NOT_FOUND = (
        ErrorKind.NOT_FOUND,
        "Agent not found",
        "Agent `{agent_id}` not found for manager `{manager_id}`",
    )
    EMAIL_ALREADY_EXISTS = (
        ErrorKind.VALIDATION_ERROR,
        "An agent with this email already exists",
        "Agent email conflict `{email}`",
        SeverityLevel.INFO,
    )
    LIMIT_REACHED = (
        ErrorKind.CAPACITY_EXCEEDED,
        "Agent limit reached",
        "Manager has reached the maximum number of agents: "
        "managerId={manager_id}, limit={limit}",
        SeverityLevel.INFO,
    )
    OLD_PASSWORD_INCORRECT = (
        ErrorKind.VALIDATION_ERROR,
        "Old password is incorrect",
        "Password mismatch for agent `{agent_id}`",
    )
