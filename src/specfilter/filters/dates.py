"""Date and timezone filters backed by python-dateutil."""

from __future__ import annotations

from datetime import date, datetime, tzinfo
from datetime import timezone as dt_timezone

from dateutil import parser as date_parser
from dateutil import tz

from specfilter.errors import ConfigurationError, FilterError, describe_value
from specfilter.filters._checks import require_bool, trim


def filter_date(
    value: object,
    allow_null: bool = False,
    timezone: tzinfo | None = None,
) -> datetime | None:
    """Filter ``value`` into a ``datetime``.

    Integers and all-digit strings are UNIX timestamps in UTC. Other strings
    are parsed by ``dateutil``; naive results take ``timezone`` when given.
    """

    require_bool(allow_null, "allow_null")
    if timezone is not None and not isinstance(timezone, tzinfo):
        raise ConfigurationError("timezone was not a tzinfo")

    if allow_null and value is None:
        return None
    if isinstance(value, datetime):
        return value

    if isinstance(value, int) and not isinstance(value, bool):
        return _from_timestamp(value)
    if not isinstance(value, str) or not trim(value):
        raise FilterError("value is not a non-empty string")

    text = trim(value)
    if text.isascii() and text.isdigit():
        return _from_timestamp(int(text))

    try:
        parsed = date_parser.parse(text)
    except (OverflowError, ValueError) as exc:
        raise FilterError(f"Value '{text}' is not a valid date: {exc}") from exc

    if timezone is not None and parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone)
    return parsed


def format_date(value: object, format: str | None = None) -> str:
    """Render a date as ISO 8601, or with ``strftime`` when ``format`` is given."""

    if format is not None and (not isinstance(format, str) or not format.strip()):
        raise ConfigurationError("format is not a non-empty string")
    if not isinstance(value, date):
        raise FilterError(f"Value '{describe_value(value)}' is not a date")
    if format is None:
        return value.isoformat()
    return value.strftime(format)


def filter_timezone(value: object, allow_null: bool = False) -> tzinfo | None:
    """Filter ``value`` into a ``tzinfo`` using the IANA name database."""

    require_bool(allow_null, "allow_null")
    if allow_null and value is None:
        return None
    if isinstance(value, tzinfo):
        return value
    if not isinstance(value, str) or not trim(value):
        raise FilterError("value not a non-empty string")

    name = trim(value)
    try:
        resolved = tz.gettz(name)
    except (OSError, ValueError) as exc:
        raise FilterError(f"Unknown or bad timezone ({name})") from exc
    if resolved is None:
        raise FilterError(f"Unknown or bad timezone ({name})")
    return resolved


def _from_timestamp(seconds: int) -> datetime:
    try:
        return datetime.fromtimestamp(seconds, tz=dt_timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise FilterError(f"Value '{seconds}' is not a valid timestamp") from exc


__all__ = ["filter_date", "filter_timezone", "format_date"]
