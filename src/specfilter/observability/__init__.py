"""Public observability primitives: structured logging."""

from specfilter.observability.logging import (
    JSONValue,
    LogRedactor,
    default_log_redactor,
    reset_logging,
    setup_logging,
)

__all__ = [
    "JSONValue",
    "LogRedactor",
    "default_log_redactor",
    "reset_logging",
    "setup_logging",
]
