"""Field validation for contact data. Pure predicates over strings."""

import re

PHONE_MIN_LENGTH = 8

_PHONE_PATTERN = re.compile(r"[()\d\s+-]*", re.ASCII)
_EMAIL_PATTERN = re.compile(r"[A-Za-z0-9+_.-]+@(.+)")


def validate_name(name: str | None) -> bool:
    """Name must be non-empty after trimming."""
    return bool(name and name.strip())


def validate_phone(phone: str | None) -> bool:
    """Digits, whitespace, parentheses, hyphens and plus only; at least 8 chars once trimmed."""
    if phone is None:
        return False
    if _PHONE_PATTERN.fullmatch(phone) is None:
        return False
    return len(phone.strip()) >= PHONE_MIN_LENGTH


def validate_email(email: str | None) -> bool:
    """local-part@anything, local part made of [A-Za-z0-9+_.-]."""
    if email is None:
        return False
    return _EMAIL_PATTERN.fullmatch(email) is not None


def first_invalid_field(
    name: str | None, phone: str | None, email: str | None
) -> str | None:
    """Return the first failing field ("name", "phone", "email") or None if all pass.

    Checked in that order; only the first problem is reported.
    """
    if not validate_name(name):
        return "name"
    if not validate_phone(phone):
        return "phone"
    if not validate_email(email):
        return "email"
    return None
