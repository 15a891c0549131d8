"""Primitive field checks.

Every function returns ``None`` when the value is acceptable and raises a
``ServiceException`` (kind ``VALIDATION_ERROR``) otherwise.  The functions
hold no state and perform no I/O; callers needing "today" pass it in so
checks stay deterministic under test.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal
from typing import Optional

from shared.domain.failures import ErrorKind, FailureReason

EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}$"
)
PHONE_ALLOWED_PATTERN = re.compile(r"^[0-9\- ]+$")
PHONE_MIN_DIGITS = 8
PHONE_MAX_DIGITS = 10
PHONE_MAX_DASHES = 2
PASSWORD_MIN_LENGTH = 8


class FieldFailureReason(FailureReason):
    BLANK = (
        ErrorKind.VALIDATION_ERROR,
        "{field} cannot be blank",
        "{field} was blank or empty",
    )
    INVALID_EMAIL = (
        ErrorKind.VALIDATION_ERROR,
        "Invalid email format",
        "Email `{value}` failed pattern validation",
    )
    INVALID_PHONE = (
        ErrorKind.VALIDATION_ERROR,
        "Phone number must have 8-10 digits and at most 2 dashes.",
        "Phone number invalid: value=`{value}` digits={digits}, dashes={dashes}",
    )
    INVALID_NUMERIC_STRING = (
        ErrorKind.VALIDATION_ERROR,
        "{field} must be exactly {length} digits",
        "{field} `{value}` is not a {length}-digit numeric string",
    )
    FUTURE_DATE = (
        ErrorKind.VALIDATION_ERROR,
        "{field} cannot be in the future",
        "{field} `{value}` is after {today}",
    )
    PAST_DATE = (
        ErrorKind.VALIDATION_ERROR,
        "{field} cannot be in the past",
        "{field} `{value}` is before {today}",
    )
    WEAK_PASSWORD = (
        ErrorKind.VALIDATION_ERROR,
        "Password does not meet security requirements",
        "Password must contain at least 8 characters, 1 uppercase, "
        "1 lowercase, 1 digit, and 1 special character",
    )
    PASSWORD_CONFIRMATION_MISMATCH = (
        ErrorKind.VALIDATION_ERROR,
        "New password and confirmation do not match",
        "New password confirmation mismatch",
    )
    PASSWORD_UNCHANGED = (
        ErrorKind.VALIDATION_ERROR,
        "New password must be different from the old password",
        "New password equals the old password",
    )
    NEGATIVE_PRICE = (
        ErrorKind.VALIDATION_ERROR,
        "Price must be greater than or equal to 0",
        "Price `{value}` is negative",
    )


def validate_non_empty(value: Optional[str], field_label: str) -> None:
    if value is None or not value.strip():
        raise FieldFailureReason.BLANK.exception(field=field_label)


def validate_email(value: Optional[str]) -> None:
    if not value or not EMAIL_PATTERN.match(value):
        raise FieldFailureReason.INVALID_EMAIL.exception(value=value or "")


def validate_phone_number(value: Optional[str]) -> None:
    value = value or ""
    digits = sum(1 for char in value if char.isdigit())
    dashes = value.count("-")
    if (
        not PHONE_ALLOWED_PATTERN.match(value)
        or not PHONE_MIN_DIGITS <= digits <= PHONE_MAX_DIGITS
        or dashes > PHONE_MAX_DASHES
    ):
        raise FieldFailureReason.INVALID_PHONE.exception(
            value=value, digits=digits, dashes=dashes
        )


def validate_numeric_string(
    value: Optional[str], expected_length: int, field_label: str
) -> None:
    value = value or ""
    # str.isdigit() accepts non-ASCII digits such as "٣"
    if len(value) != expected_length or not (value.isascii() and value.isdigit()):
        raise FieldFailureReason.INVALID_NUMERIC_STRING.exception(
            field=field_label, value=value, length=expected_length
        )


def validate_date_not_future(
    value: date, field_label: str = "Date", today: Optional[date] = None
) -> None:
    today = today or date.today()
    if value > today:
        raise FieldFailureReason.FUTURE_DATE.exception(
            field=field_label, value=value.isoformat(), today=today.isoformat()
        )


def validate_not_past_date(
    value: date, field_label: str = "Date", today: Optional[date] = None
) -> None:
    today = today or date.today()
    if value < today:
        raise FieldFailureReason.PAST_DATE.exception(
            field=field_label, value=value.isoformat(), today=today.isoformat()
        )


def validate_strong_password(value: Optional[str]) -> None:
    value = value or ""
    if not (
        len(value) >= PASSWORD_MIN_LENGTH
        and any(char.isupper() for char in value)
        and any(char.islower() for char in value)
        and any(char.isdigit() for char in value)
        and any(not char.isalnum() for char in value)
    ):
        # the password itself never goes into a message
        raise FieldFailureReason.WEAK_PASSWORD.exception()


def validate_price(value: Decimal) -> None:
    if value < 0:
        raise FieldFailureReason.NEGATIVE_PRICE.exception(value=value)


def validate_password_change(
    old_password: Optional[str], new_password: Optional[str], confirmation: Optional[str]
) -> None:
    """Confirmation first, then "actually changed", then strength."""
    if new_password != confirmation:
        raise FieldFailureReason.PASSWORD_CONFIRMATION_MISMATCH.exception()
    if new_password == old_password:
        raise FieldFailureReason.PASSWORD_UNCHANGED.exception()
    validate_strong_password(new_password)
