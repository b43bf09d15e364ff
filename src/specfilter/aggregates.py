"""Filters that run the engine recursively over collection members.

Nested calls use the alias registry of the engine call in progress, so a
per-call registry override also applies to the nested specifications.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from specfilter.engine import filter_input
from specfilter.errors import ConfigurationError, FilterError, describe_value
from specfilter.filters.arrays import is_array
from specfilter.registry import current_registry


def of_scalars(values: object, filters: Sequence[object]) -> list[object] | dict[object, object]:
    """Apply one shared list of steps to every member of ``values``.

    Keys (or positions) are preserved. Every failing member is reported in a
    single ``FilterError``.
    """

    if isinstance(filters, str) or not isinstance(filters, Sequence):
        raise ConfigurationError("filters was not a sequence")
    members = _members(values)
    wrapped = {key: list(filters) for key in members}

    response = filter_input(wrapped, members, aliases=current_registry())
    if not response.success:
        raise FilterError(response.error_message)
    return _rebuild(values, response.filtered_value or {})


def of_arrays(
    values: object,
    specification: Mapping[object, object],
) -> list[object] | dict[object, object]:
    """Apply ``specification`` to every mapping in ``values``."""

    results: dict[object, object] = {}
    errors: list[str] = []
    registry = current_registry()
    for key, item in _members(values).items():
        if not isinstance(item, Mapping):
            errors.append(f"Value at position '{describe_value(key)}' was not an array")
            continue
        response = filter_input(specification, item, aliases=registry)
        if not response.success:
            errors.append(response.error_message or "")
            continue
        results[key] = response.filtered_value

    if errors:
        raise FilterError("\n".join(errors))
    return _rebuild(values, results)


def of_array(value: object, specification: Mapping[object, object]) -> dict[object, object]:
    """Apply ``specification`` to a single nested mapping."""

    if not isinstance(value, Mapping):
        raise FilterError(f"Value '{describe_value(value)}' is not an array")
    response = filter_input(specification, value, aliases=current_registry())
    if not response.success:
        raise FilterError(response.error_message)
    return response.filtered_value or {}


def _members(values: object) -> dict[object, object]:
    if not is_array(values):
        raise FilterError(f"Value '{describe_value(values)}' is not an array")
    if isinstance(values, Mapping):
        return dict(values)
    return dict(enumerate(values))  # type: ignore[arg-type]


def _rebuild(
    original: object,
    filtered: Mapping[object, object],
) -> list[object] | dict[object, object]:
    if isinstance(original, Mapping):
        return dict(filtered)
    return list(filtered.values())


__all__ = ["of_arrays", "of_array", "of_scalars"]
