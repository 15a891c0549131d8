from __future__ import annotations

from shared.domain.failures import ErrorKind, FailureReason


class StatsFailureReason(FailureReason):
    INVALID_PERIOD = (
        ErrorKind.VALIDATION_ERROR,
        "Invalid year or month",
        "Invalid stats period: year={year}, month={month}",
    )
