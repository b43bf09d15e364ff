"""Bounded integer filters."""

from __future__ import annotations

import re
from typing import Final

from specfilter.constants import MAX_INT, MIN_INT
from specfilter.errors import ConfigurationError, FilterError
from specfilter.filters._checks import (
    require_bool,
    require_int,
    require_optional_int,
    trim,
)

_DIGITS: Final[re.Pattern[str]] = re.compile(r"[0-9]+")


def filter_int(
    value: object,
    allow_null: bool = False,
    min_value: int | None = None,
    max_value: int = MAX_INT,
) -> int | None:
    """Filter ``value`` to an integer strictly.

    ``value`` must be an ``int`` or a string of decimal digits, optionally
    prefixed by ``+`` or ``-`` and optionally surrounded by whitespace.
    Strings outside the platform integer range are rejected instead of being
    clamped.
    """

    require_bool(allow_null, "allow_null")
    minimum = require_optional_int(min_value, "min_value")
    maximum = require_int(max_value, "max_value")

    if allow_null and value is None:
        return None

    if isinstance(value, int) and not isinstance(value, bool):
        parsed = value
    elif isinstance(value, str):
        parsed = _parse_int_text(trim(value))
    else:
        raise FilterError(f'"{value!r}" value is not a string')

    if minimum is not None and parsed < minimum:
        raise FilterError(f"{parsed} is less than {minimum}")
    if parsed > maximum:
        raise FilterError(f"{parsed} is greater than {maximum}")
    return parsed


def filter_uint(
    value: object,
    allow_null: bool = False,
    min_value: int | None = None,
    max_value: int = MAX_INT,
) -> int | None:
    """Filter ``value`` to an unsigned integer; ``min_value`` defaults to zero."""

    if min_value is None:
        min_value = 0
    elif isinstance(min_value, int) and not isinstance(min_value, bool) and min_value < 0:
        raise ConfigurationError(f"{min_value} was not greater or equal to zero")
    return filter_int(value, allow_null, min_value, max_value)


def _parse_int_text(text: str) -> int:
    if not text:
        raise FilterError("value string length is zero")

    digits = text[1:] if text[0] in "+-" else text
    if not _DIGITS.fullmatch(digits):
        raise FilterError(
            f"{text} does not contain all digits, optionally prepended by a '+' or '-' "
            "and optionally surrounded by whitespace"
        )

    parsed = int(text)
    if parsed > MAX_INT:
        raise FilterError(f"{text} was greater than a max int of {MAX_INT}")
    if parsed < MIN_INT:
        raise FilterError(f"{text} was less than a min int of {MIN_INT}")
    return parsed


__all__ = ["filter_int", "filter_uint"]
