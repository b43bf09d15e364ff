"""JSON-lines logging for specfilter.

The library never configures logging on import. Applications that want
machine-readable records from the engine call ``setup_logging``; everything
else sees ordinary ``logging`` records under the ``specfilter`` logger.
"""

from __future__ import annotations

import json
import logging
import math
import re
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import IO, Final

JSONScalar = str | int | float | bool | None
JSONValue = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
LogRedactor = Callable[[JSONValue], JSONValue]

_MASK: Final[str] = "***REDACTED***"
_PACKAGE_LOGGER: Final[str] = "specfilter"
_HANDLER_MARKER: Final[str] = "_specfilter_structured"

# Input field names routinely carry these words; their values must not reach logs.
_SENSITIVE_KEY_TERMS: Final[tuple[str, ...]] = (
    "password",
    "passphrase",
    "secret",
    "token",
    "api_key",
    "apikey",
    "authorization",
    "cookie",
    "ssn",
    "card_number",
)

_INLINE_SECRET: Final[re.Pattern[str]] = re.compile(
    r"(?i)\b(password|secret|token|api[_-]?key|authorization)\b(\s*[:=]\s*)([^\s,;']+)"
)
_BEARER: Final[re.Pattern[str]] = re.compile(r"(?i)\bbearer\s+[A-Za-z0-9._~+/-]+=*")

_RESERVED_RECORD_ATTRS: Final[frozenset[str]] = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


class _JsonLineFormatter(logging.Formatter):
    """One JSON object per record with sorted keys and compact separators."""

    def __init__(self, *, redactor: LogRedactor) -> None:
        super().__init__()
        self._redactor = redactor

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict[str, JSONValue] = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": _as_text(self._redactor(record.getMessage())),
        }

        extras = {
            key: _to_json(value)
            for key, value in vars(record).items()
            if key not in _RESERVED_RECORD_ATTRS and not key.startswith("_")
        }
        if extras:
            payload["fields"] = self._redactor(extras)
        if record.exc_info:
            payload["exception"] = _as_text(self._redactor(self.formatException(record.exc_info)))

        return json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def setup_logging(
    level: int | str = "INFO",
    *,
    stream: IO[str] | None = None,
    redactor: LogRedactor | None = None,
    logger_name: str = _PACKAGE_LOGGER,
) -> logging.Logger:
    """Attach one JSON-lines handler to the ``specfilter`` logger and return it.

    Calling it again replaces the handler installed by the previous call.
    Records still propagate to ancestor loggers.
    """

    numeric_level = _parse_log_level(level)
    reset_logging(logger_name)

    handler = logging.StreamHandler(stream)
    handler.setLevel(numeric_level)
    handler.setFormatter(_JsonLineFormatter(redactor=redactor or default_log_redactor))
    setattr(handler, _HANDLER_MARKER, True)

    logger = logging.getLogger(logger_name)
    logger.setLevel(numeric_level)
    logger.addHandler(handler)
    return logger


def reset_logging(logger_name: str = _PACKAGE_LOGGER) -> None:
    """Remove and close the handlers installed by ``setup_logging``."""

    logger = logging.getLogger(logger_name)
    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_MARKER, False)]:
        logger.removeHandler(handler)
        handler.close()


def default_log_redactor(value: JSONValue) -> JSONValue:
    """Mask values stored under sensitive keys and secrets embedded in text."""
    return _redact(value, None)


def _redact(value: JSONValue, key: str | None) -> JSONValue:
    if key is not None and any(term in key.lower() for term in _SENSITIVE_KEY_TERMS):
        return _MASK
    if isinstance(value, str):
        masked = _INLINE_SECRET.sub(lambda m: f"{m.group(1)}{m.group(2)}{_MASK}", value)
        return _BEARER.sub(f"Bearer {_MASK}", masked)
    if isinstance(value, list):
        return [_redact(item, None) for item in value]
    if isinstance(value, dict):
        return {name: _redact(item, name) for name, item in value.items()}
    return value


def _parse_log_level(value: int | str) -> int:
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise ValueError(f"level must be int or str, got {type(value).__name__}")

    resolved = logging.getLevelName(value.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unsupported logging level {value!r}")
    return resolved


def _as_text(value: JSONValue) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _to_json(value: object) -> JSONValue:
    if isinstance(value, float) and not math.isfinite(value):
        return repr(value)
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, Mapping):
        return {str(key): _to_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_json(item) for item in value]
    return repr(value)


__all__ = [
    "JSONScalar",
    "JSONValue",
    "LogRedactor",
    "default_log_redactor",
    "reset_logging",
    "setup_logging",
]
