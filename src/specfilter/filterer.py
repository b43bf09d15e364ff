"""Object facade over the filter engine."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from specfilter.engine import filter_input
from specfilter.errors import ConfigurationError, FilterError
from specfilter.options import FilterOptions, coerce_options
from specfilter.registry import AliasName, AliasRegistry, default_registry
from specfilter.response import FilterResponse
from specfilter.spec import CompiledSpecification, FilterFunction, compile_specification

AliasesArg = AliasRegistry | Mapping[AliasName, FilterFunction] | None


class FiltererInterface(Protocol):
    def execute(self, values: Mapping[Any, Any]) -> FilterResponse: ...

    def get_aliases(self) -> dict[AliasName, FilterFunction]: ...

    def get_specification(self) -> dict[Any, Any]: ...

    def with_aliases(
        self, aliases: Mapping[AliasName, FilterFunction]
    ) -> FiltererInterface: ...

    def with_specification(self, specification: Mapping[Any, Any]) -> FiltererInterface: ...


class Filterer:
    """A specification bundled with its aliases and options.

    The specification is compiled on construction, so malformed rules and
    unresolvable steps fail here rather than on first use. Without explicit
    ``aliases`` the shared registry is copied, so later registry mutations do
    not affect an existing instance.
    """

    __slots__ = ("_compiled", "_options", "_registry", "_specification")

    def __init__(
        self,
        specification: Mapping[Any, Any],
        aliases: AliasesArg = None,
        options: FilterOptions | Mapping[str, object] | None = None,
    ) -> None:
        if not isinstance(specification, Mapping):
            raise ConfigurationError(
                f"specification was not a mapping, got {type(specification).__name__}"
            )
        if aliases is None:
            registry = default_registry().copy()
        elif isinstance(aliases, AliasRegistry):
            registry = aliases.copy()
        else:
            registry = AliasRegistry(aliases)

        self._specification = dict(specification)
        self._registry = registry
        self._options = coerce_options(options)
        self._compiled: CompiledSpecification = compile_specification(
            self._specification, self._registry
        )

    @property
    def options(self) -> FilterOptions:
        return self._options

    def execute(self, values: Mapping[Any, Any]) -> FilterResponse:
        return filter_input(self._compiled, values, self._options, aliases=self._registry)

    def get_aliases(self) -> dict[AliasName, FilterFunction]:
        return self._registry.get()

    def get_specification(self) -> dict[Any, Any]:
        return dict(self._specification)

    def with_aliases(self, aliases: Mapping[AliasName, FilterFunction]) -> Filterer:
        return Filterer(self._specification, aliases, self._options)

    def with_specification(self, specification: Mapping[Any, Any]) -> Filterer:
        return Filterer(specification, self._registry, self._options)

    def with_options(self, options: FilterOptions | Mapping[str, object]) -> Filterer:
        return Filterer(self._specification, self._registry, options)


class InvokableFilterer:
    """Callable wrapper returning the filtered value or raising ``FilterError``."""

    __slots__ = ("_filterer",)

    def __init__(self, filterer: FiltererInterface) -> None:
        self._filterer = filterer

    def __call__(self, values: Mapping[Any, Any]) -> dict[Any, Any]:
        response = self._filterer.execute(values)
        if not response.success:
            raise FilterError(response.error_message)
        return response.filtered_value or {}

    def execute(self, values: Mapping[Any, Any]) -> FilterResponse:
        return self._filterer.execute(values)

    def get_aliases(self) -> dict[AliasName, FilterFunction]:
        return self._filterer.get_aliases()

    def get_specification(self) -> dict[Any, Any]:
        return self._filterer.get_specification()

    def with_aliases(self, aliases: Mapping[AliasName, FilterFunction]) -> FiltererInterface:
        return self._filterer.with_aliases(aliases)

    def with_specification(self, specification: Mapping[Any, Any]) -> FiltererInterface:
        return self._filterer.with_specification(specification)


__all__ = ["Filterer", "FiltererInterface", "InvokableFilterer"]
