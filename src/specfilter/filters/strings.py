"""String filters: bounded strings, explicit stringification, and text helpers."""

from __future__ import annotations

import re
from decimal import Decimal
from fractions import Fraction

from specfilter.constants import MAX_INT
from specfilter.errors import ConfigurationError, FilterError, describe_value
from specfilter.filters._checks import require_bool, require_length, require_str, trim

_SCALAR_TYPES = (str, int, float, bool, Decimal, Fraction)


def filter_string(
    value: object,
    allow_null: bool = False,
    min_length: int = 1,
    max_length: int = MAX_INT,
) -> str | None:
    """Verify ``value`` is a string whose length is within ``[min_length, max_length]``."""

    require_bool(allow_null, "allow_null")
    minimum = require_length(min_length, "min_length")
    maximum = require_length(max_length, "max_length")

    if allow_null and value is None:
        return None

    if not isinstance(value, str):
        raise FilterError(f"Value '{value!r}' is not a string")

    length = len(value)
    if length < minimum or length > maximum:
        raise FilterError(
            f"Value '{value}' with length '{length}' is less than '{minimum}' "
            f"or greater than '{maximum}'"
        )
    return value


def stringify(value: object, allow_null: bool = False) -> str | None:
    """Convert a scalar, or an object defining its own ``__str__``, to ``str``."""

    require_bool(allow_null, "allow_null")
    if allow_null and value is None:
        return None
    if not _is_stringable(value):
        raise FilterError(f"Value '{value!r}' is not convertible to a string")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def filter_strings(
    value: object,
    allow_null: bool = False,
    min_length: int = 1,
    max_length: int = MAX_INT,
) -> str | None:
    """Bounded string filter that first converts stringable values."""

    require_bool(allow_null, "allow_null")
    if allow_null and value is None:
        return None
    return filter_string(stringify(value), False, min_length, max_length)


def explode(value: object, delimiter: str = ",") -> list[str]:
    """Split a string on ``delimiter``; ``"a,b"`` becomes ``["a", "b"]``."""

    if not isinstance(delimiter, str) or not delimiter:
        raise ConfigurationError(f"Delimiter '{delimiter!r}' is not a non-empty string")
    if not isinstance(value, str):
        raise FilterError(f"Value '{value!r}' is not a string")
    return value.split(delimiter)


def concat(
    value: object,
    allow_null: bool = False,
    prefix: str = "",
    suffix: str = "",
) -> str:
    require_bool(allow_null, "allow_null")
    require_str(prefix, "prefix")
    require_str(suffix, "suffix")

    if allow_null and value is None:
        return f"{prefix}{suffix}"
    if not _is_stringable(value):
        raise FilterError("value was not filterable as a string")
    return f"{prefix}{stringify(value)}{suffix}"


def nullify(value: object) -> str | None:
    """Turn blank or whitespace-only strings into ``None``."""

    if value is None:
        return None
    if not isinstance(value, str):
        raise FilterError("value was not filterable as a string")
    return None if not trim(value) else value


def regex(value: object, pattern: str) -> str:
    if not isinstance(pattern, str):
        raise ConfigurationError("pattern must be a string")
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        raise ConfigurationError(f"pattern is not a valid regular expression: {exc}") from exc

    if not isinstance(value, str):
        raise FilterError("value was not filterable as a string")
    if compiled.search(value) is None:
        raise FilterError(
            f"Value '{describe_value(value)}' does not match the given regular expression"
        )
    return value


def _is_stringable(value: object) -> bool:
    if isinstance(value, _SCALAR_TYPES):
        return True
    return type(value).__str__ is not object.__str__


__all__ = [
    "concat",
    "explode",
    "filter_string",
    "filter_strings",
    "nullify",
    "regex",
    "stringify",
]
