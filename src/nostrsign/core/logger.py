"""
Structured logging for nostrsign.

A thin wrapper over the standard library ``logging`` module. Every call
takes an event-style message (``"event_verified"``) plus keyword fields,
rendered either as ``key=value`` pairs (default) or as a single JSON object
per line.

The ``StructuredFormatter`` reads the fields from the ``structured_kv``
extra attached by [Logger][nostrsign.core.logger.Logger], so plain
``logging.getLogger()`` records and structured records share one layout:
``level name message key=value ...``.

Examples:
    ```python
    from nostrsign.core.logger import Logger

    logger = Logger("nostrsign.signature")
    logger.debug("verify_failed", event_id="ab12...", reason="id_mismatch")
    # debug nostrsign.signature verify_failed event_id=ab12... reason=id_mismatch
    ```
"""

from __future__ import annotations

import datetime
import json
import logging
from typing import Any, ClassVar


def _truncate(value: Any, max_value_length: int | None) -> str:
    s = str(value)
    if max_value_length and len(s) > max_value_length:
        return s[:max_value_length] + f"...<truncated {len(s) - max_value_length} chars>"
    return s


def format_kv_pairs(
    kwargs: dict[str, Any],
    max_value_length: int | None = 1000,
    prefix: str = " ",
) -> str:
    """Render *kwargs* as space-separated ``key=value`` pairs.

    Values containing whitespace, ``=`` or quotes are escaped and wrapped in
    double quotes; empty values render as ``key=""``.

    Args:
        kwargs: Fields to render, in insertion order.
        max_value_length: Truncate each value to this many characters.
            ``None`` disables truncation.
        prefix: Prepended to the result when there is at least one field.

    Returns:
        The rendered pairs, or an empty string when *kwargs* is empty.
    """
    if not kwargs:
        return ""

    parts = []
    for k, v in kwargs.items():
        s = _truncate(v, max_value_length)
        if not s or any(c in s for c in (" ", "=", '"', "'")):
            escaped = s.replace("\\", "\\\\").replace('"', '\\"')
            parts.append(f'{k}="{escaped}"')
        else:
            parts.append(f"{k}={s}")
    return prefix + " ".join(parts)


class StructuredFormatter(logging.Formatter):
    """Render every record as ``level name message key=value ...``."""

    def format(self, record: logging.LogRecord) -> str:
        base = f"{record.levelname.lower()} {record.name} {record.getMessage()}"
        extra: dict[str, Any] = getattr(record, "structured_kv", {})
        if extra:
            base += format_kv_pairs(extra)
        return base


class JsonFormatter(logging.Formatter):
    """Render every record as one JSON object per line.

    Structured fields attached by [Logger][nostrsign.core.logger.Logger] are
    merged into the top-level object. Messages that a ``json_output`` logger
    has already encoded pass through unchanged.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        extra: dict[str, Any] = getattr(record, "structured_kv", {})
        if not extra and message.startswith("{"):
            return message
        payload = {
            "timestamp": datetime.datetime.fromtimestamp(record.created, datetime.UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": message,
            **extra,
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class Logger:
    """Structured logger bound to a ``logging.getLogger(name)`` instance.

    Keyword arguments passed to the level methods become structured fields.
    With ``json_output=True`` the whole record is emitted as one JSON
    document carrying ``timestamp``, ``level``, ``logger`` and ``message``.
    """

    _DEFAULT_MAX_VALUE_LENGTH: ClassVar[int] = 1000

    def __init__(
        self,
        name: str,
        *,
        json_output: bool = False,
        max_value_length: int | None = None,
    ) -> None:
        if max_value_length is None:
            max_value_length = self._DEFAULT_MAX_VALUE_LENGTH
        self._logger = logging.getLogger(name)
        self._json_output = json_output
        self._max_value_length = max_value_length

    @property
    def name(self) -> str:
        return self._logger.name

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def _format_json(self, msg: str, level: str, kwargs: dict[str, Any]) -> str:
        record = {
            "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
            "level": level,
            "logger": self._logger.name,
            "message": msg,
            **{k: _truncate(v, self._max_value_length) for k, v in kwargs.items()},
        }
        return json.dumps(record, default=str)

    def _make_extra(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        if not kwargs:
            return {}
        return {
            "structured_kv": {
                k: _truncate(v, self._max_value_length) for k, v in kwargs.items()
            }
        }

    def _log(self, level: int, msg: str, kwargs: dict[str, Any], *, exc_info: bool = False) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if self._json_output:
            name = logging.getLevelName(level).lower()
            self._logger.log(level, self._format_json(msg, name, kwargs), exc_info=exc_info)
        else:
            self._logger.log(level, msg, extra=self._make_extra(kwargs), exc_info=exc_info)

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log at ERROR level with the active exception's traceback."""
        self._log(logging.ERROR, msg, kwargs, exc_info=True)


def setup_logging(level: str = "INFO", *, json_output: bool = False) -> None:
    """Install a ``StructuredFormatter`` handler on the root logger.

    With *json_output* a ``JsonFormatter`` is installed instead. Calling
    this twice replaces the previously installed handler.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if json_output else StructuredFormatter())
    handler.set_name("nostrsign")

    for existing in list(logging.root.handlers):
        if existing.get_name() == "nostrsign":
            logging.root.removeHandler(existing)

    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper()))
