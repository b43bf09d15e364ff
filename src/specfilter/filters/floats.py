"""Bounded float filter with locale-independent numeral parsing."""

from __future__ import annotations

import math
import re
from typing import Final

from specfilter.errors import FilterError
from specfilter.filters._checks import require_bool, require_optional_number, trim

NUMERAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?"
)


def filter_float(
    value: object,
    allow_null: bool = False,
    min_value: float | None = None,
    max_value: float | None = None,
    cast_ints: bool = False,
) -> float | None:
    """Filter ``value`` to a float strictly.

    Native floats pass, native ints pass only with ``cast_ints``, and strings
    must be plain decimal or scientific numerals. Hex notation is rejected
    explicitly. The sign of zero is kept from the input (``"-0"`` gives
    ``-0.0``).
    """

    require_bool(allow_null, "allow_null")
    minimum = require_optional_number(min_value, "min_value")
    maximum = require_optional_number(max_value, "max_value")
    require_bool(cast_ints, "cast_ints")

    if allow_null and value is None:
        return None

    if isinstance(value, float):
        parsed = value
        rendered = repr(value)
    elif isinstance(value, int) and not isinstance(value, bool) and cast_ints:
        try:
            parsed = float(value)
        except OverflowError:
            parsed = math.copysign(math.inf, value)
        rendered = str(value)
    elif isinstance(value, str):
        rendered = trim(value).lower()
        parsed = _parse_float_text(rendered)
    else:
        raise FilterError(f'"{value!r}" value is not a string')

    if math.isinf(parsed):
        raise FilterError(f"{rendered} {'overflow' if parsed > 0 else 'underflow'}")

    if minimum is not None and parsed < minimum:
        raise FilterError(f"{_render(parsed)} is less than {_render(minimum)}")
    if maximum is not None and parsed > maximum:
        raise FilterError(f"{_render(parsed)} is greater than {_render(maximum)}")
    return parsed


def _parse_float_text(text: str) -> float:
    # float() would accept "inf", "nan" and digit separators; only plain numerals pass.
    if "x" in text:
        raise FilterError(f"{text} is hex format")
    if not NUMERAL_PATTERN.fullmatch(text):
        raise FilterError(f"{text} does not pass numeric check")
    return float(text)


def _render(number: float) -> str:
    text = repr(number)
    return text[:-2] if text.endswith(".0") else text


__all__ = ["NUMERAL_PATTERN", "filter_float"]
