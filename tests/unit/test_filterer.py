"""Unit tests for the Filterer facade and its invokable wrapper."""

from __future__ import annotations

import pytest

from specfilter.errors import DomainError, FilterError
from specfilter.filterer import Filterer, InvokableFilterer
from specfilter.options import FilterOptions
from specfilter.registry import default_registry


@pytest.mark.unit
def test_execute_filters_values() -> None:
    filterer = Filterer({"id": [["uint"]], "name": {"filters": [["string"]], "required": True}})

    response = filterer.execute({"id": "7", "name": "n"})

    assert response.filtered_value == {"id": 7, "name": "n"}


@pytest.mark.unit
def test_construction_compiles_the_specification() -> None:
    with pytest.raises(DomainError, match="Function 'nope' for field 'a' is not callable"):
        Filterer({"a": [["nope"]]})


@pytest.mark.unit
def test_shared_registry_is_copied_at_construction() -> None:
    filterer = Filterer({"a": []})
    default_registry().register("upper", str.upper)

    assert "upper" not in filterer.get_aliases()
    assert "int" in filterer.get_aliases()


@pytest.mark.unit
def test_explicit_aliases_replace_builtins() -> None:
    filterer = Filterer({"a": [["upper"]]}, {"upper": str.upper})

    assert filterer.get_aliases() == {"upper": str.upper}
    assert filterer.execute({"a": "x"}).filtered_value == {"a": "X"}


@pytest.mark.unit
def test_with_methods_return_new_instances() -> None:
    original = Filterer({"a": [["upper"]]}, {"upper": str.upper})

    lowered = original.with_aliases({"upper": str.lower})
    widened = original.with_specification({"a": [["upper"]], "b": []})
    lenient = original.with_options({"allow_unknowns": True})

    assert lowered is not original
    assert lowered.execute({"a": "X"}).filtered_value == {"a": "x"}
    assert original.execute({"a": "x"}).filtered_value == {"a": "X"}
    assert set(widened.get_specification()) == {"a", "b"}
    assert set(original.get_specification()) == {"a"}
    assert lenient.options == FilterOptions(allow_unknowns=True)
    assert lenient.execute({"a": "x", "z": 1}).unknowns == {"z": 1}


@pytest.mark.unit
def test_options_are_applied() -> None:
    filterer = Filterer({"a": []}, options={"default_required": True})

    assert filterer.execute({}).errors == ("Field 'a' was required and not present",)


@pytest.mark.unit
def test_get_specification_returns_a_copy() -> None:
    filterer = Filterer({"a": []})
    filterer.get_specification()["b"] = []

    assert filterer.get_specification() == {"a": []}


@pytest.mark.unit
def test_invokable_filterer_returns_value_or_raises() -> None:
    invokable = InvokableFilterer(Filterer({"a": [["int"]]}))

    assert invokable({"a": "5"}) == {"a": 5}
    with pytest.raises(FilterError) as exc_info:
        invokable({"a": "x", "b": 1})
    message = str(exc_info.value)
    assert message.startswith("Field 'a' with value 'x' failed filtering")
    assert message.endswith("Field 'b' with value '1' is unknown")


@pytest.mark.unit
def test_invokable_filterer_delegates() -> None:
    inner = Filterer({"a": []}, {"upper": str.upper})
    invokable = InvokableFilterer(inner)

    assert invokable.execute({"a": 1}).filtered_value == {"a": 1}
    assert invokable.get_aliases() == {"upper": str.upper}
    assert invokable.get_specification() == {"a": []}
    assert invokable.with_specification({"b": []}).get_specification() == {"b": []}
    assert invokable.with_aliases({}).get_aliases() == {}
