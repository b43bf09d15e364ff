"""Email address filter backed by email-validator."""

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email

from specfilter.errors import FilterError


def filter_email(value: object) -> str:
    """Accept syntactically valid email addresses; no DNS lookups are made."""

    if not isinstance(value, str):
        raise FilterError(f"Value '{value!r}' is not a string")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise FilterError(f"Value '{value}' is not a valid email") from exc
    return value


__all__ = ["filter_email"]
