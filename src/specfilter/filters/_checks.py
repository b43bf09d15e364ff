"""Parameter checks shared by the filters.

Every helper raises ``ConfigurationError``: a bad parameter is an error in how
the filter was invoked, never in the data being filtered.
"""

from __future__ import annotations

from specfilter.constants import TRIM_CHARS
from specfilter.errors import ConfigurationError


def require_bool(value: object, name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{name} was not a bool")
    return value


def require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} was not an int")
    return value


def require_optional_int(value: object, name: str) -> int | None:
    if value is None:
        return None
    return require_int(value, name)


def require_optional_number(value: object, name: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{name} was not a number")
    return float(value)


def require_length(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigurationError(f"{name} was not a positive integer value")
    return value


def require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{name} was not a string")
    return value


def trim(value: str) -> str:
    return value.strip(TRIM_CHARS)


__all__ = [
    "require_bool",
    "require_int",
    "require_length",
    "require_optional_int",
    "require_optional_number",
    "require_str",
    "trim",
]
