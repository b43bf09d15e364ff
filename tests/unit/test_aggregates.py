"""Unit tests for the nested-collection filters."""

from __future__ import annotations

import pytest

from specfilter.aggregates import of_array, of_arrays, of_scalars
from specfilter.engine import filter_input
from specfilter.errors import ConfigurationError, FilterError


@pytest.mark.unit
def test_of_scalars_applies_shared_steps_to_every_member() -> None:
    assert of_scalars(["1", " 2 "], [["int"]]) == [1, 2]
    assert of_scalars({"a": "1", "b": "2"}, [["int"]]) == {"a": 1, "b": 2}
    assert of_scalars([], [["int"]]) == []


@pytest.mark.unit
def test_of_scalars_reports_every_failing_member() -> None:
    with pytest.raises(FilterError) as exc_info:
        of_scalars(["x", "1", "y"], [["int"]])

    lines = str(exc_info.value).split("\n")
    assert len(lines) == 2
    assert lines[0].startswith("Field '0' with value 'x' failed filtering")
    assert lines[1].startswith("Field '2' with value 'y' failed filtering")


@pytest.mark.unit
def test_of_scalars_argument_checks() -> None:
    with pytest.raises(ConfigurationError, match="filters was not a sequence"):
        of_scalars(["1"], "int")  # type: ignore[arg-type]
    with pytest.raises(FilterError, match="is not an array"):
        of_scalars("1", [["int"]])


@pytest.mark.unit
def test_of_scalars_inside_a_specification() -> None:
    response = filter_input({"ids": [["ofScalars", [["uint"]]]]}, {"ids": ["1", "-1"]})

    assert response.success is False
    assert response.errors[0].startswith(
        "Field 'ids' with value '['1', '-1']' failed filtering, "
        "message 'Field '1' with value '-1' failed filtering"
    )


@pytest.mark.unit
def test_nested_filters_use_the_per_call_registry() -> None:
    aliases = {"ofScalars": of_scalars, "upper": str.upper}

    response = filter_input(
        {"names": [["ofScalars", [["upper"]]]]},
        {"names": ["ada", "grace"]},
        aliases=aliases,
    )

    assert response.filtered_value == {"names": ["ADA", "GRACE"]}


@pytest.mark.unit
def test_of_arrays_filters_each_mapping() -> None:
    rows = [{"id": "1"}, {"id": "2", "name": "b"}]

    result = of_arrays(rows, {"id": [["uint"]], "name": {"default": "unnamed"}})

    assert result == [{"id": 1, "name": "unnamed"}, {"id": 2, "name": "b"}]


@pytest.mark.unit
def test_of_arrays_collects_errors_from_all_members() -> None:
    with pytest.raises(FilterError) as exc_info:
        of_arrays([{"id": "x"}, "row", {"id": "1", "extra": 1}], {"id": [["uint"]]})

    lines = str(exc_info.value).split("\n")
    assert lines[0].startswith("Field 'id' with value 'x' failed filtering")
    assert lines[1] == "Value at position '1' was not an array"
    assert lines[2] == "Field 'extra' with value '1' is unknown"


@pytest.mark.unit
def test_of_array_filters_one_mapping() -> None:
    assert of_array({"id": "3"}, {"id": [["int"]]}) == {"id": 3}
    with pytest.raises(FilterError, match="Field 'id' was required and not present"):
        of_array({}, {"id": {"required": True}})
    with pytest.raises(FilterError, match="is not an array"):
        of_array(["id"], {"id": []})


@pytest.mark.unit
def test_of_array_inside_a_specification() -> None:
    spec = {"address": [["ofArray", {"zip": [["string", False, 5, 5]], "city": []}]]}

    response = filter_input(spec, {"address": {"zip": "12345", "city": "Oslo"}})

    assert response.filtered_value == {"address": {"zip": "12345", "city": "Oslo"}}
