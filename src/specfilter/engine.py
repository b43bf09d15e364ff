"""
specfilter: specification-driven filter engine.

Purpose
- Reconcile a specification against an input mapping.

Functional requirements
- Fields present in both are threaded through their steps; the first failing
  step ends that field and records exactly one error.
- Fields only in the specification take their ``default`` (which wins over
  ``required``) or record a missing-required error.
- Fields only in the input are unknown; they are errors unless
  ``allow_unknowns`` is set, and are always reported back.
- Field failures never abort the call. ``ConfigurationError`` and
  ``DomainError`` always do.

Non-functional requirements
- Deterministic error order: filter failures of present fields in
  specification order, then missing-required fields in specification order,
  then unknowns in input order.
- Output order: present fields in input order, then defaulted fields.
- Defaults are returned as given; builtin list, dict and set defaults are
  shallow-copied per call.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from specfilter.errors import ConfigurationError, DomainError, describe_value
from specfilter.options import FilterOptions, coerce_options
from specfilter.registry import (
    AliasName,
    AliasRegistry,
    activate_registry,
    deactivate_registry,
    resolve_registry,
)
from specfilter.response import FilterResponse
from specfilter.spec import CompiledRule, FilterFunction, ResolvedStep, compile_specification

logger = logging.getLogger(__name__)

_VALUE_PLACEHOLDER = "{value}"


@dataclass(frozen=True, slots=True)
class _StepOutcome:
    value: object = None
    failure: str | None = None

    @property
    def failed(self) -> bool:
        return self.failure is not None


def filter_input(
    specification: Mapping[object, object],
    values: Mapping[object, object],
    options: FilterOptions | Mapping[str, object] | None = None,
    *,
    aliases: AliasRegistry | Mapping[AliasName, FilterFunction] | None = None,
) -> FilterResponse:
    """Filter ``values`` against ``specification`` and report every problem found.

    Parameters
    ----------
    specification:
        Mapping of field name to rule. See ``specfilter.spec`` for rule shapes.
    values:
        The raw input mapping.
    options:
        ``FilterOptions`` or a mapping with ``allow_unknowns`` and/or
        ``default_required``.
    aliases:
        Registry (or plain alias mapping) used instead of the shared registry
        for this call and for nested aggregate filters it runs.
    """

    resolved_options = coerce_options(options)
    registry = resolve_registry(aliases)
    compiled = compile_specification(specification, registry)
    if not isinstance(values, Mapping):
        raise ConfigurationError(f"input was not a mapping, got {type(values).__name__}")

    token = activate_registry(registry)
    try:
        return _reconcile(compiled, values, resolved_options)
    finally:
        deactivate_registry(token)


def _reconcile(
    compiled: Mapping[object, CompiledRule],
    values: Mapping[object, object],
    options: FilterOptions,
) -> FilterResponse:
    errors: list[str] = []
    filtered: dict[object, object] = {}

    for field_name, rule in compiled.items():
        if field_name not in values:
            continue
        outcome = _filter_field(rule, values[field_name])
        if outcome.failed:
            errors.append(outcome.failure)  # type: ignore[arg-type]
        else:
            filtered[field_name] = outcome.value

    # Present fields keep input order; defaulted fields follow in rule order.
    result = {name: filtered[name] for name in values if name in filtered}

    for field_name, rule in compiled.items():
        if field_name in values:
            continue
        if rule.has_default:
            result[field_name] = _default_value(rule.default)
            continue

        required = rule.required if rule.required is not None else options.default_required
        if required:
            logger.debug("required field missing", extra={"field": str(field_name)})
            errors.append(f"Field '{describe_value(field_name)}' was required and not present")

    unknowns = {name: value for name, value in values.items() if name not in compiled}
    if not options.allow_unknowns:
        for field_name, value in unknowns.items():
            logger.debug("unknown field", extra={"field": str(field_name)})
            errors.append(
                f"Field '{describe_value(field_name)}' with value "
                f"'{describe_value(value)}' is unknown"
            )

    logger.debug(
        "filter call finished",
        extra={"fields": len(compiled), "errors": len(errors), "unknowns": len(unknowns)},
    )
    return FilterResponse(result, errors, unknowns)


def _default_value(default: object) -> object:
    if type(default) in (list, dict, set):
        return default.copy()  # type: ignore[attr-defined]
    return default


def _filter_field(rule: CompiledRule, raw_value: object) -> _StepOutcome:
    value = raw_value
    for step in rule.steps:
        outcome = _apply_step(step, value)
        if outcome.failed:
            logger.debug(
                "field failed filtering",
                extra={"field": str(rule.field), "step": step.label},
            )
            return _StepOutcome(failure=_field_error(rule, value, outcome.failure or ""))
        value = outcome.value
    return _StepOutcome(value=value)


def _apply_step(step: ResolvedStep, value: object) -> _StepOutcome:
    try:
        return _StepOutcome(value=step(value))
    except (ConfigurationError, DomainError):
        raise
    except Exception as exc:
        return _StepOutcome(failure=str(exc))


def _field_error(rule: CompiledRule, value: object, message: str) -> str:
    rendered = describe_value(value)
    if rule.error is not None:
        return rule.error.replace(_VALUE_PLACEHOLDER, rendered)
    return (
        f"Field '{describe_value(rule.field)}' with value '{rendered}' "
        f"failed filtering, message '{message}'"
    )


__all__ = ["filter_input"]
