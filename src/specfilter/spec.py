"""
specfilter: typed specification model.

Purpose
- Turn the loose specification format (field -> list of steps plus
  ``required``/``default``/``error`` metadata) into typed rules.
- Resolve every step head once, against an alias registry, before any value
  is filtered.

Functional requirements
- A rule is a list/tuple of steps, a mapping with ``filters`` and metadata
  keys, or a ``FieldRule``.
- A step is a list/tuple ``[head, *extra_args]`` or a ``FilterStep``; empty
  steps are identity and are dropped.
- Step heads are alias names (``str``/``int``) or callables. Anything else is
  a ``DomainError`` raised at compile time.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from specfilter.constants import (
    RULE_DEFAULT,
    RULE_ERROR,
    RULE_FILTERS,
    RULE_KEYS,
    RULE_REQUIRED,
)
from specfilter.errors import ConfigurationError, DomainError, describe_value

if TYPE_CHECKING:
    from specfilter.registry import AliasRegistry

FilterFunction = Callable[..., object]


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final[_Missing] = _Missing()


@dataclass(frozen=True, slots=True)
class AliasRef:
    """Step head naming an entry in an alias registry."""

    name: str | int


@dataclass(frozen=True, slots=True)
class FunctionRef:
    """Step head holding a directly invocable filter."""

    function: FilterFunction


StepRef = AliasRef | FunctionRef


@dataclass(frozen=True, slots=True)
class FilterStep:
    """Unresolved step: a head plus the extra arguments appended after the value."""

    head: object
    args: tuple[object, ...] = ()


@dataclass(frozen=True, slots=True)
class ResolvedStep:
    ref: StepRef
    function: FilterFunction
    args: tuple[object, ...] = ()

    @property
    def label(self) -> str:
        if isinstance(self.ref, AliasRef):
            return str(self.ref.name)
        return getattr(self.function, "__qualname__", None) or repr(self.function)

    def __call__(self, value: object) -> object:
        return self.function(value, *self.args)


@dataclass(frozen=True, slots=True)
class FieldRule:
    """Ordered filter steps plus the out-of-band field metadata."""

    steps: tuple[FilterStep | Sequence[object], ...] = ()
    required: bool | None = None
    default: object = MISSING
    error: str | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING


@dataclass(frozen=True, slots=True)
class CompiledRule:
    field: object
    steps: tuple[ResolvedStep, ...]
    required: bool | None
    default: object
    error: str | None

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING


class CompiledSpecification(Mapping[object, CompiledRule]):
    """Specification whose step heads are resolved; iteration keeps field order."""

    __slots__ = ("_rules",)

    def __init__(self, rules: Mapping[object, CompiledRule]) -> None:
        self._rules = dict(rules)

    def __getitem__(self, key: object) -> CompiledRule:
        return self._rules[key]

    def __iter__(self) -> Iterator[object]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


def compile_specification(
    specification: Mapping[object, object],
    registry: AliasRegistry,
) -> CompiledSpecification:
    """Validate every rule of ``specification`` and resolve its step heads."""

    if isinstance(specification, CompiledSpecification):
        return specification
    if not isinstance(specification, Mapping):
        raise ConfigurationError(
            f"specification was not a mapping, got {type(specification).__name__}"
        )

    rules: dict[object, CompiledRule] = {}
    for field_name, raw_rule in specification.items():
        rule = parse_rule(field_name, raw_rule)
        rules[field_name] = CompiledRule(
            field=field_name,
            steps=tuple(
                _resolve_step(field_name, step, registry)
                for step in _iter_steps(field_name, rule)
            ),
            required=rule.required,
            default=rule.default,
            error=rule.error,
        )
    return CompiledSpecification(rules)


def parse_rule(field_name: object, raw_rule: object) -> FieldRule:
    """Normalize one raw field rule into a ``FieldRule``."""

    if isinstance(raw_rule, FieldRule):
        _check_required(field_name, raw_rule.required)
        _check_error(field_name, raw_rule.error)
        return raw_rule

    if isinstance(raw_rule, Mapping):
        for key in raw_rule:
            if key not in RULE_KEYS:
                raise ConfigurationError(
                    f"unknown key {key!r} in rule for field '{describe_value(field_name)}'"
                )
        steps = raw_rule.get(RULE_FILTERS, ())
        if not _is_step_sequence(steps):
            raise ConfigurationError(
                f"filters for field '{describe_value(field_name)}' was not a sequence"
            )
        required = raw_rule.get(RULE_REQUIRED)
        error = raw_rule.get(RULE_ERROR)
        _check_required(field_name, required)
        _check_error(field_name, error)
        return FieldRule(
            steps=tuple(steps),
            required=required,
            default=raw_rule[RULE_DEFAULT] if RULE_DEFAULT in raw_rule else MISSING,
            error=error,
        )

    if _is_step_sequence(raw_rule):
        return FieldRule(steps=tuple(raw_rule))  # type: ignore[arg-type]

    raise ConfigurationError(
        f"filters for field '{describe_value(field_name)}' was not a sequence"
    )


def _iter_steps(field_name: object, rule: FieldRule) -> Iterator[FilterStep]:
    for raw_step in rule.steps:
        if isinstance(raw_step, FilterStep):
            yield raw_step
            continue
        if not _is_step_sequence(raw_step):
            raise ConfigurationError(
                f"filter for field '{describe_value(field_name)}' was not a sequence"
            )
        if not raw_step:
            continue
        head, *args = raw_step
        yield FilterStep(head=head, args=tuple(args))


def _resolve_step(
    field_name: object,
    step: FilterStep,
    registry: AliasRegistry,
) -> ResolvedStep:
    head = step.head
    function = registry.resolve(head)
    if function is not None:
        alias = AliasRef(head)  # type: ignore[arg-type]
        return ResolvedStep(ref=alias, function=function, args=step.args)
    if callable(head):
        return ResolvedStep(ref=FunctionRef(head), function=head, args=step.args)
    raise DomainError(
        f"Function '{describe_value(head)}' for field "
        f"'{describe_value(field_name)}' is not callable"
    )


def _is_step_sequence(value: object) -> bool:
    return isinstance(value, (list, tuple))


def _check_required(field_name: object, required: object) -> None:
    if required is not None and not isinstance(required, bool):
        raise ConfigurationError(
            f"'required' for field '{describe_value(field_name)}' was not a bool"
        )


def _check_error(field_name: object, error: object) -> None:
    if error is None:
        return
    if not isinstance(error, str) or not error.strip():
        raise ConfigurationError(
            f"error for field '{describe_value(field_name)}' was not a non-empty string"
        )


__all__ = [
    "MISSING",
    "AliasRef",
    "CompiledRule",
    "CompiledSpecification",
    "FieldRule",
    "FilterFunction",
    "FilterStep",
    "FunctionRef",
    "ResolvedStep",
    "StepRef",
    "compile_specification",
    "parse_rule",
]
