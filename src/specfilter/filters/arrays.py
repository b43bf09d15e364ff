"""Collection filters: bounded counts, membership, and flattening."""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterator, Mapping, Sequence

from specfilter.constants import MAX_INT
from specfilter.errors import ConfigurationError, FilterError, describe_value
from specfilter.filters._checks import require_bool, require_int, trim
from specfilter.filters.floats import NUMERAL_PATTERN


def filter_array(value: object, min_count: int = 1, max_count: int = MAX_INT) -> object:
    """Fail unless ``value`` is a list, tuple or mapping with a count in range."""

    minimum = require_int(min_count, "min_count")
    maximum = require_int(max_count, "max_count")

    if not is_array(value):
        raise FilterError(f"Value '{describe_value(value)}' is not an array")

    count = len(value)  # type: ignore[arg-type]
    if count < minimum:
        raise FilterError(f"value count of {count} is less than {minimum}")
    if count > maximum:
        raise FilterError(f"value count of {count} is greater than {maximum}")
    return value


def in_array(
    value: object,
    haystack: Collection[object] | Callable[[], Collection[object]],
    strict: bool = True,
) -> object:
    """Fail unless ``value`` is a member of ``haystack``.

    ``haystack`` may be a zero-argument callable, evaluated on every call.
    Strict comparison requires identical types; loose comparison lets
    numeric strings match numbers and falsy values match each other.
    """

    require_bool(strict, "strict")
    candidates = haystack() if callable(haystack) else haystack
    if isinstance(candidates, str) or not isinstance(candidates, Collection):
        raise ConfigurationError("haystack was not a collection")

    equals = _strict_equals if strict else _loose_equals
    if not any(equals(value, item) for item in candidates):
        raise FilterError(f"Value '{describe_value(value)}' is not in array {candidates!r}")
    return value


def flatten(value: object) -> list[object]:
    """Flatten nested lists, tuples and mapping values depth-first; keys are dropped.

    ``[[1, 2], [3, [4, 5]]]`` becomes ``[1, 2, 3, 4, 5]``.
    """

    if not is_array(value):
        raise FilterError(f"Value '{describe_value(value)}' is not an array")
    return list(_walk(value))


def arrayize(value: object) -> list[object]:
    """Wrap a non-list value in a list; ``None`` becomes an empty list."""

    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    return [value]


def is_array(value: object) -> bool:
    if isinstance(value, Mapping):
        return True
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _walk(value: object) -> Iterator[object]:
    items = value.values() if isinstance(value, Mapping) else value
    for item in items:  # type: ignore[attr-defined]
        if is_array(item):
            yield from _walk(item)
        else:
            yield item


def _strict_equals(left: object, right: object) -> bool:
    return type(left) is type(right) and left == right


def _loose_equals(left: object, right: object) -> bool:
    if left == right:
        return True
    if isinstance(left, bool) or isinstance(right, bool):
        return bool(left) == bool(right)
    if left is None or right is None:
        return not left and not right
    left_number = _as_number(left)
    right_number = _as_number(right)
    if left_number is None or right_number is None:
        return False
    return left_number == right_number


def _as_number(value: object) -> float | None:
    if isinstance(value, str):
        value = trim(value).lower()
        if not NUMERAL_PATTERN.fullmatch(value):
            return None
    elif not isinstance(value, (int, float)):
        return None
    try:
        return float(value)
    except (OverflowError, ValueError):
        return None


__all__ = ["arrayize", "filter_array", "flatten", "in_array", "is_array"]
