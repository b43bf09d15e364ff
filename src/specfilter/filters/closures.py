"""Callable filter."""

from __future__ import annotations

from collections.abc import Callable

from specfilter.errors import FilterError
from specfilter.filters._checks import require_bool


def filter_closure(value: object, allow_null: bool = False) -> Callable[..., object] | None:
    require_bool(allow_null, "allow_null")
    if allow_null and value is None:
        return None
    if callable(value):
        return value
    raise FilterError(f'Value "{value!r}" is not callable or allow_null is not set')


__all__ = ["filter_closure"]
