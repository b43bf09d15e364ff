"""Alias registry mapping short names to filter callables."""

from __future__ import annotations

import contextvars
import logging
from collections.abc import Mapping
from typing import Final

from specfilter.errors import ConfigurationError, DomainError
from specfilter.spec import FilterFunction

logger = logging.getLogger(__name__)

AliasName = str | int


class AliasRegistry:
    """Mutable alias table consulted when a specification is compiled.

    A fresh registry holds the built-in aliases unless ``aliases`` is given.
    There is no locking: share one registry across threads only if mutations
    are serialized by the caller.
    """

    __slots__ = ("_aliases",)

    def __init__(self, aliases: Mapping[AliasName, FilterFunction] | None = None) -> None:
        self._aliases: dict[AliasName, FilterFunction] = {}
        self.replace_all(builtin_aliases() if aliases is None else aliases)

    def get(self) -> dict[AliasName, FilterFunction]:
        return dict(self._aliases)

    def resolve(self, name: object) -> FilterFunction | None:
        if not _is_alias_name(name):
            return None
        return self._aliases.get(name)  # type: ignore[arg-type]

    def register(
        self,
        name: AliasName,
        function: FilterFunction,
        overwrite: bool = False,
    ) -> None:
        if not _is_alias_name(name):
            raise ConfigurationError("alias was not a string or int")
        if not isinstance(overwrite, bool):
            raise ConfigurationError("overwrite was not a bool")
        if not callable(function):
            raise ConfigurationError(f"filter for alias '{name}' was not callable")
        if name in self._aliases and not overwrite:
            raise DomainError(f"Alias '{name}' exists")
        self._aliases[name] = function
        logger.debug("alias registered", extra={"alias": str(name), "overwrite": overwrite})

    def replace_all(self, aliases: Mapping[AliasName, FilterFunction]) -> None:
        """Replace every alias; on any invalid entry the previous table is restored."""

        if not isinstance(aliases, Mapping):
            raise ConfigurationError(f"aliases was not a mapping, got {type(aliases).__name__}")
        snapshot = self._aliases
        self._aliases = {}
        try:
            for name, function in aliases.items():
                self.register(name, function)
        except Exception:
            self._aliases = snapshot
            raise

    def reset(self) -> None:
        self.replace_all(builtin_aliases())

    def copy(self) -> AliasRegistry:
        return AliasRegistry(self._aliases)

    def __contains__(self, name: object) -> bool:
        return self.resolve(name) is not None

    def __len__(self) -> int:
        return len(self._aliases)

    def __repr__(self) -> str:
        return f"AliasRegistry({sorted(map(str, self._aliases))!r})"


def builtin_aliases() -> dict[AliasName, FilterFunction]:
    """Return a new mapping of the built-in aliases."""

    from specfilter import aggregates
    from specfilter import filters as f

    return {
        "int": f.filter_int,
        "uint": f.filter_uint,
        "float": f.filter_float,
        "bool": f.filter_bool,
        "bool-convert": f.convert,
        "string": f.filter_string,
        "strings": f.filter_strings,
        "stringify": f.stringify,
        "concat": f.concat,
        "explode": f.explode,
        "nullify": f.nullify,
        "regex": f.regex,
        "array": f.filter_array,
        "arrayize": f.arrayize,
        "in": f.in_array,
        "flatten": f.flatten,
        "ofScalars": aggregates.of_scalars,
        "ofArrays": aggregates.of_arrays,
        "ofArray": aggregates.of_array,
        "url": f.filter_url,
        "email": f.filter_email,
        "date": f.filter_date,
        "date-format": f.format_date,
        "timezone": f.filter_timezone,
        "closure": f.filter_closure,
    }


_DEFAULT_REGISTRY: AliasRegistry | None = None
_ACTIVE_REGISTRY: Final[contextvars.ContextVar[AliasRegistry | None]] = contextvars.ContextVar(
    "specfilter_active_registry", default=None
)


def default_registry() -> AliasRegistry:
    """Return the process-wide shared registry, creating it on first use."""

    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = AliasRegistry()
    return _DEFAULT_REGISTRY


def current_registry() -> AliasRegistry:
    """Return the registry of the engine call in progress, else the shared one."""

    active = _ACTIVE_REGISTRY.get()
    return active if active is not None else default_registry()


def activate_registry(registry: AliasRegistry) -> contextvars.Token[AliasRegistry | None]:
    return _ACTIVE_REGISTRY.set(registry)


def deactivate_registry(token: contextvars.Token[AliasRegistry | None]) -> None:
    _ACTIVE_REGISTRY.reset(token)


def resolve_registry(
    aliases: AliasRegistry | Mapping[AliasName, FilterFunction] | None,
) -> AliasRegistry:
    """Map an ``aliases`` argument onto a registry instance."""

    if aliases is None:
        return current_registry()
    if isinstance(aliases, AliasRegistry):
        return aliases
    return AliasRegistry(aliases)


def _is_alias_name(value: object) -> bool:
    return isinstance(value, (str, int)) and not isinstance(value, bool)


__all__ = [
    "AliasName",
    "AliasRegistry",
    "activate_registry",
    "builtin_aliases",
    "current_registry",
    "deactivate_registry",
    "default_registry",
    "resolve_registry",
]
