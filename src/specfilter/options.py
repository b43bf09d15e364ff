"""
specfilter: engine options and their resolution.

Purpose
- Define the options accepted by the filter engine.
- Resolve effective options from explicit overrides and ``SPECFILTER_``
  environment variables.

Functional requirements
- Precedence: explicit overrides > environment > defaults.
- Every option is a strict bool; anything else is a ``ConfigurationError``.
- No configuration files are read.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Final

from specfilter.constants import ENV_PREFIX, OPTION_KEYS
from specfilter.errors import ConfigurationError

_BOOLEAN_TRUE: Final[frozenset[str]] = frozenset({"1", "true", "t", "yes", "y", "on"})
_BOOLEAN_FALSE: Final[frozenset[str]] = frozenset({"0", "false", "f", "no", "n", "off"})


@dataclass(frozen=True, slots=True)
class FilterOptions:
    """Engine options.

    ``allow_unknowns`` accepts input fields missing from the specification;
    ``default_required`` is the requiredness of rules that do not state one.
    """

    allow_unknowns: bool = False
    default_required: bool = False

    def __post_init__(self) -> None:
        for option in fields(self):
            if not isinstance(getattr(self, option.name), bool):
                raise ConfigurationError(f"'{option.name}' option was not a bool")

    def as_dict(self) -> dict[str, bool]:
        return {option.name: getattr(self, option.name) for option in fields(self)}


def coerce_options(options: FilterOptions | Mapping[str, object] | None) -> FilterOptions:
    """Validate an ``options`` argument and return it as ``FilterOptions``."""

    if options is None:
        return FilterOptions()
    if isinstance(options, FilterOptions):
        return options
    if not isinstance(options, Mapping):
        raise ConfigurationError(f"options was not a mapping, got {type(options).__name__}")

    for key in sorted(map(str, options)):
        if key not in OPTION_KEYS:
            raise ConfigurationError(f"unknown option {key!r}")
    return FilterOptions(**options)  # type: ignore[arg-type]


def load_options(
    overrides: FilterOptions | Mapping[str, object] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> FilterOptions:
    """Resolve options with deterministic precedence: overrides > env > defaults."""

    env_map = os.environ if environ is None else environ
    resolved: dict[str, object] = {}
    for key in OPTION_KEYS:
        env_name = f"{ENV_PREFIX}{key.upper()}"
        raw = env_map.get(env_name)
        if raw is not None:
            resolved[key] = _parse_env_bool(env_name, raw)

    if isinstance(overrides, FilterOptions):
        resolved.update(overrides.as_dict())
    elif overrides is not None:
        coerce_options(overrides)
        resolved.update({key: overrides[key] for key in OPTION_KEYS if key in overrides})
    return coerce_options(resolved)


def _parse_env_bool(env_name: str, raw: str) -> bool:
    normalized = raw.strip().lower()
    if normalized in _BOOLEAN_TRUE:
        return True
    if normalized in _BOOLEAN_FALSE:
        return False
    raise ConfigurationError(f"{env_name} must be a boolean token, got {raw!r}")


__all__ = ["FilterOptions", "coerce_options", "load_options"]
