"""Unit tests for the alias registry."""

from __future__ import annotations

import pytest

from specfilter.engine import filter_input
from specfilter.errors import ConfigurationError, DomainError
from specfilter.filters import filter_int
from specfilter.registry import AliasRegistry, builtin_aliases, default_registry

_BUILTIN_NAMES = {
    "int", "uint", "float", "bool", "bool-convert", "string", "strings", "stringify",
    "concat", "explode", "nullify", "regex", "array", "arrayize", "in", "flatten",
    "ofScalars", "ofArrays", "ofArray", "url", "email", "date", "date-format",
    "timezone", "closure",
}


@pytest.mark.unit
def test_fresh_registry_holds_builtins() -> None:
    registry = AliasRegistry()

    assert set(registry.get()) == _BUILTIN_NAMES
    assert registry.resolve("int") is filter_int
    assert "int" in registry
    assert len(registry) == len(_BUILTIN_NAMES)


@pytest.mark.unit
def test_get_returns_a_copy() -> None:
    registry = AliasRegistry({"a": str.upper})
    snapshot = registry.get()
    snapshot["b"] = str.lower

    assert "b" not in registry


@pytest.mark.unit
def test_register_refuses_to_overwrite_without_flag() -> None:
    registry = AliasRegistry({"upper": str.upper})

    with pytest.raises(DomainError) as exc_info:
        registry.register("upper", str.lower)
    assert str(exc_info.value) == "Alias 'upper' exists"

    registry.register("upper", str.lower, True)
    assert registry.resolve("upper") is str.lower


@pytest.mark.unit
@pytest.mark.parametrize(
    ("name", "function", "overwrite", "message"),
    [
        (1.5, str.upper, False, "alias was not a string or int"),
        (True, str.upper, False, "alias was not a string or int"),
        ("a", "upper", False, "filter for alias 'a' was not callable"),
        ("a", str.upper, 1, "overwrite was not a bool"),
    ],
)
def test_register_validates_arguments(
    name: object, function: object, overwrite: object, message: str
) -> None:
    with pytest.raises(ConfigurationError, match=message):
        AliasRegistry({}).register(name, function, overwrite)  # type: ignore[arg-type]


@pytest.mark.unit
def test_replace_all_is_atomic() -> None:
    registry = AliasRegistry({"keep": str.strip})

    with pytest.raises(ConfigurationError):
        registry.replace_all({"upper": str.upper, "bad": "not callable"})

    assert registry.get() == {"keep": str.strip}


@pytest.mark.unit
def test_replace_all_requires_a_mapping() -> None:
    with pytest.raises(ConfigurationError, match="aliases was not a mapping"):
        AliasRegistry({}).replace_all([("a", str.upper)])  # type: ignore[arg-type]


@pytest.mark.unit
def test_reset_restores_builtins() -> None:
    registry = AliasRegistry({})
    registry.reset()

    assert registry.get() == builtin_aliases()


@pytest.mark.unit
def test_copy_is_independent() -> None:
    original = AliasRegistry({"a": str.upper})
    duplicate = original.copy()
    duplicate.register("b", str.lower)

    assert "b" not in original
    assert duplicate.resolve("a") is str.upper


@pytest.mark.unit
def test_shared_registry_mutation_is_visible_to_engine_calls() -> None:
    default_registry().register("upper", str.upper)

    response = filter_input({"a": [["upper"]]}, {"a": "b"})

    assert response.filtered_value == {"a": "B"}


@pytest.mark.unit
def test_shared_registry_is_a_singleton() -> None:
    assert default_registry() is default_registry()


@pytest.mark.unit
def test_resolve_ignores_non_alias_values() -> None:
    registry = AliasRegistry()

    assert registry.resolve(None) is None
    assert registry.resolve(["int"]) is None
    assert registry.resolve(True) is None
