"""Unit tests for the boolean filters."""

from __future__ import annotations

import pytest

from specfilter.errors import ConfigurationError, FilterError
from specfilter.filters.booleans import convert, filter_bool


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "expected"),
    [(True, True), (False, False), (" TRUE ", True), ("false", False), ("\tFaLsE\n", False)],
)
def test_default_tokens(value: object, expected: bool) -> None:
    assert filter_bool(value) is expected


@pytest.mark.unit
def test_unmatched_token_names_accepted_values() -> None:
    with pytest.raises(FilterError) as exc_info:
        filter_bool(" Maybe ")
    assert str(exc_info.value) == (
        "maybe is not 'true' or 'false' disregarding case and whitespace"
    )


@pytest.mark.unit
def test_custom_token_lists() -> None:
    assert filter_bool("Y", False, ["y", "yes"], ["n", "no"]) is True
    assert filter_bool("no", False, ["y", "yes"], ["n", "no"]) is False
    with pytest.raises(FilterError, match="'y' or 'yes' or 'n' or 'no'"):
        filter_bool("true", False, ["y", "yes"], ["n", "no"])


@pytest.mark.unit
def test_non_string_rejected() -> None:
    with pytest.raises(FilterError, match="value is not a string"):
        filter_bool(1)
    assert filter_bool(None, True) is None


@pytest.mark.unit
def test_token_list_must_be_sequence_of_strings() -> None:
    with pytest.raises(ConfigurationError):
        filter_bool("true", False, "true")
    with pytest.raises(ConfigurationError):
        filter_bool("true", False, [1])


@pytest.mark.unit
def test_convert_maps_bool_to_values() -> None:
    assert convert(True) == "true"
    assert convert(False, "yes", "no") == "no"
    assert convert(True, 1, 0) == 1
    with pytest.raises(FilterError):
        convert("true")
