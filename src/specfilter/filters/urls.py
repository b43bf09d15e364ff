"""URL filter."""

from __future__ import annotations

import re
from typing import Final
from urllib.parse import urlsplit

from specfilter.errors import FilterError
from specfilter.filters._checks import require_bool

_SCHEME: Final[re.Pattern[str]] = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*")
_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s")


def filter_url(value: object, allow_null: bool = False) -> str | None:
    """Accept absolute URLs carrying both a scheme and a host."""

    require_bool(allow_null, "allow_null")
    if allow_null and value is None:
        return None
    if not isinstance(value, str):
        raise FilterError(f"Value '{value!r}' is not a string")

    if not _is_valid_url(value):
        raise FilterError(f"Value '{value}' is not a valid url")
    return value


def _is_valid_url(text: str) -> bool:
    if not text or _WHITESPACE.search(text):
        return False
    try:
        parsed = urlsplit(text)
        hostname = parsed.hostname
        parsed.port  # noqa: B018
    except ValueError:
        return False
    if not _SCHEME.fullmatch(parsed.scheme):
        return False
    return bool(hostname)


__all__ = ["filter_url"]
