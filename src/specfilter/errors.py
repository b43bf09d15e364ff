"""Exception hierarchy for specification filtering."""

from __future__ import annotations


class FiltererError(Exception):
    """Base class for every error raised by specfilter."""


class ConfigurationError(FiltererError, ValueError):
    """Raised when the API is misused: bad options, rule shapes, or filter parameters."""


class DomainError(FiltererError, RuntimeError):
    """Raised when a specification is unusable: unresolvable steps or alias collisions."""


class FilterError(FiltererError, ValueError):
    """Raised by a filter when it cannot accept the given value."""


def describe_value(value: object) -> str:
    """Render ``value`` for inclusion in an error message.

    Strings are rendered verbatim; booleans and ``None`` use their lowercase
    literal names and everything else falls back to ``repr``.
    """

    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return repr(value)


__all__ = [
    "ConfigurationError",
    "DomainError",
    "FilterError",
    "FiltererError",
    "describe_value",
]
