"""
Domain service: user payload validation.

One rule set serves both creation and partial updates; the mode only
decides which fields are required and how blank values are treated.

Validation runs in two stages:
    1. A cheap presence gate (all fields blank on create, no field
       supplied on update) that short-circuits with a single message.
    2. A full per-field pass that collects every violated rule.

Pure business logic. No IO, no frameworks; email syntax is checked
with email-validator, offline.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from email_validator import EmailNotValidError, validate_email

FIELDS = ("name", "email", "password")

ALLOWED_EMAIL_DOMAINS: frozenset[str] = frozenset(
    {
        "gmail.com",
        "yahoo.com",
        "outlook.com",
        "aol.com",
        "icloud.com",
        "zoho.com",
        "proton.me",
        "yandex.ru",
    }
)

NAME_PATTERN = re.compile(r"[A-Za-z\s'-]+")
PASSWORD_MIN_LENGTH = 8

ALL_FIELDS_REQUIRED = (
    "All fields are required. Please provide name, email, and password."
)
NO_FIELDS_SUPPLIED = (
    "No fields supplied. Please provide at least one of name, email, or password."
)
NAME_REQUIRED = "Name is required and cannot be empty"
NAME_NOT_STRING = "Name must be a string"
NAME_INVALID = (
    "Name cannot contain special characters. "
    "Only letters, spaces, hyphens, and apostrophes are allowed."
)
EMAIL_REQUIRED = "Email is required and cannot be empty"
EMAIL_NOT_STRING = "Email must be a string"
EMAIL_MALFORMED = "Invalid email format. Please use a valid email address."
EMAIL_DOMAIN_NOT_ALLOWED = (
    "Email domain is not allowed. Please use an accepted domain like gmail.com."
)
PASSWORD_REQUIRED = "Password is required and cannot be empty"
PASSWORD_NOT_STRING = "Password must be a string"
PASSWORD_TOO_SHORT = (
    f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
)


class ValidationMode(Enum):
    """Which rule variant to apply to a payload."""

    CREATE = "create"
    UPDATE = "update"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a user payload.

    Attributes:
        errors: Every violated rule, in field order. Empty on success.
        values: The normalised fields that were supplied. Name and email
            are trimmed; the password is kept exactly as given.
    """

    errors: tuple[str, ...] = ()
    values: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _check_name(value: Any) -> list[str]:
    if _is_blank(value):
        return [NAME_REQUIRED]
    if not isinstance(value, str):
        return [NAME_NOT_STRING]
    if NAME_PATTERN.fullmatch(value.strip()) is None:
        return [NAME_INVALID]
    return []


def _check_email(value: Any) -> list[str]:
    if _is_blank(value):
        return [EMAIL_REQUIRED]
    if not isinstance(value, str):
        return [EMAIL_NOT_STRING]
    email = value.strip()
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return [EMAIL_MALFORMED]
    # Exact, case-sensitive match on the domain as typed, not as normalised.
    if email.split("@", 1)[1] not in ALLOWED_EMAIL_DOMAINS:
        return [EMAIL_DOMAIN_NOT_ALLOWED]
    return []


def _check_password(value: Any) -> list[str]:
    if _is_blank(value):
        return [PASSWORD_REQUIRED]
    if not isinstance(value, str):
        return [PASSWORD_NOT_STRING]
    if len(value.strip()) < PASSWORD_MIN_LENGTH:
        return [PASSWORD_TOO_SHORT]
    return []


_CHECKS = {
    "name": _check_name,
    "email": _check_email,
    "password": _check_password,
}


def _supplied_fields(payload: Mapping[str, Any], mode: ValidationMode) -> list[str]:
    """Return the fields that count as present for `mode`.

    On update a blank name means "leave unchanged"; any other non-null
    value is present and gets validated.
    """
    if mode is ValidationMode.CREATE:
        return list(FIELDS)
    supplied = []
    for name in FIELDS:
        value = payload.get(name)
        if value is None:
            continue
        if name == "name" and _is_blank(value):
            continue
        supplied.append(name)
    return supplied


def _normalize(name: str, value: str) -> str:
    if name == "password":
        return value
    return value.strip()


def validate(payload: Mapping[str, Any], mode: ValidationMode) -> ValidationResult:
    """Check a user payload against the field rules for `mode`.

    Args:
        payload: Raw request fields. Missing keys and None mean absent.
        mode: CREATE requires every field; UPDATE requires at least one.

    Returns:
        A ValidationResult carrying every violated rule, or the
        normalised values when the payload is valid.
    """
    if mode is ValidationMode.CREATE:
        if all(_is_blank(payload.get(name)) for name in FIELDS):
            return ValidationResult(errors=(ALL_FIELDS_REQUIRED,))

    supplied = _supplied_fields(payload, mode)
    if not supplied:
        return ValidationResult(errors=(NO_FIELDS_SUPPLIED,))

    errors: list[str] = []
    for name in supplied:
        errors.extend(_CHECKS[name](payload.get(name)))

    if errors:
        return ValidationResult(errors=tuple(errors))

    return ValidationResult(
        values={name: _normalize(name, payload[name]) for name in supplied}
    )
