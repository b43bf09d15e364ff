"""Stable constants shared across the filter engine and filters."""

from __future__ import annotations

import sys
from typing import Final

# Platform integer range used by the bounded integer filters.
MAX_INT: Final[int] = sys.maxsize
MIN_INT: Final[int] = -sys.maxsize - 1

# Out-of-band keys inside a field rule.
RULE_FILTERS: Final[str] = "filters"
RULE_REQUIRED: Final[str] = "required"
RULE_DEFAULT: Final[str] = "default"
RULE_ERROR: Final[str] = "error"
RULE_KEYS: Final[frozenset[str]] = frozenset(
    {RULE_FILTERS, RULE_REQUIRED, RULE_DEFAULT, RULE_ERROR}
)

# Engine option names.
OPTION_ALLOW_UNKNOWNS: Final[str] = "allow_unknowns"
OPTION_DEFAULT_REQUIRED: Final[str] = "default_required"
OPTION_KEYS: Final[tuple[str, ...]] = (OPTION_ALLOW_UNKNOWNS, OPTION_DEFAULT_REQUIRED)

ENV_PREFIX: Final[str] = "SPECFILTER_"

# Characters removed by the filters' trim step (ASCII whitespace plus NUL).
TRIM_CHARS: Final[str] = " \t\n\r\x00\x0b"

__all__ = [
    "ENV_PREFIX",
    "MAX_INT",
    "MIN_INT",
    "OPTION_ALLOW_UNKNOWNS",
    "OPTION_DEFAULT_REQUIRED",
    "OPTION_KEYS",
    "RULE_DEFAULT",
    "RULE_ERROR",
    "RULE_FILTERS",
    "RULE_KEYS",
    "RULE_REQUIRED",
    "TRIM_CHARS",
]
