"""Boolean filters."""

from __future__ import annotations

from collections.abc import Sequence

from specfilter.errors import ConfigurationError, FilterError
from specfilter.filters._checks import require_bool, trim


def filter_bool(
    value: object,
    allow_null: bool = False,
    true_values: Sequence[str] = ("true",),
    false_values: Sequence[str] = ("false",),
) -> bool | None:
    """Filter ``value`` to a bool strictly.

    Strings are trimmed and lowercased before being looked up in
    ``true_values``/``false_values``; both lists are expected in lowercase.
    """

    require_bool(allow_null, "allow_null")
    accepted_true = _token_list(true_values, "true_values")
    accepted_false = _token_list(false_values, "false_values")

    if allow_null and value is None:
        return None
    if isinstance(value, bool):
        return value
    if not isinstance(value, str):
        raise FilterError(f'"{value!r}" value is not a string')

    token = trim(value).lower()
    if token in accepted_true:
        return True
    if token in accepted_false:
        return False

    expected = "' or '".join((*accepted_true, *accepted_false))
    raise FilterError(f"{token} is not '{expected}' disregarding case and whitespace")


def convert(value: object, true: object = "true", false: object = "false") -> object:
    """Map a bool onto one of two arbitrary values."""

    if not isinstance(value, bool):
        raise FilterError(f'"{value!r}" value is not a bool')
    return true if value else false


def _token_list(tokens: object, name: str) -> tuple[str, ...]:
    if isinstance(tokens, str) or not isinstance(tokens, Sequence):
        raise ConfigurationError(f"{name} was not a sequence of strings")
    if not all(isinstance(token, str) for token in tokens):
        raise ConfigurationError(f"{name} was not a sequence of strings")
    return tuple(tokens)


__all__ = ["convert", "filter_bool"]
