"""Read-only result of one filter call."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class FilterResponse:
    """Outcome of filtering one input mapping.

    ``success`` and ``error_message`` are derived from ``errors`` at
    construction. ``filtered_value`` is ``None`` whenever the call failed.
    """

    filtered_value: dict[Any, Any] | None
    errors: tuple[str, ...] = ()
    unknowns: Mapping[Any, Any] = field(default_factory=dict)
    success: bool = field(init=False)
    error_message: str | None = field(init=False)

    def __post_init__(self) -> None:
        errors = tuple(self.errors)
        success = not errors
        object.__setattr__(self, "errors", errors)
        object.__setattr__(self, "unknowns", dict(self.unknowns))
        object.__setattr__(self, "success", success)
        object.__setattr__(self, "error_message", None if success else "\n".join(errors))
        if not success:
            object.__setattr__(self, "filtered_value", None)

    def to_tuple(self) -> tuple[bool, dict[Any, Any] | None, str | None, dict[Any, Any]]:
        """Return ``(success, filtered_value, error_message, unknowns)``."""

        return (self.success, self.filtered_value, self.error_message, dict(self.unknowns))


__all__ = ["FilterResponse"]
