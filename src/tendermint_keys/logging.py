"""Structured logging setup."""
from __future__ import annotations

import logging
import os
import sys
from typing import Dict

import structlog

_DEFAULT_LEVEL = "info"
_LEVEL_ENV = "TM_KEYS_LOG_LEVEL"

REDACTED = "[REDACTED]"
SECRET_FIELDS = frozenset({"priv_key", "private_key", "seed", "secret", "value"})


def configure_logging(level: str | None = None, *, json: bool = True) -> None:
    """Configure structlog for the library and its host process.

    Records carry ``ts``, ``level``, ``component`` and ``msg``. Any field named
    in :data:`SECRET_FIELDS` is replaced with ``"[REDACTED]"`` before rendering,
    wherever it appears in the event.
    """

    log_level = (level or os.getenv(_LEVEL_ENV) or _DEFAULT_LEVEL).lower()
    numeric_level = _level_from_str(log_level)

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stdout)],
        format="%(message)s",
        force=True,
    )

    # ConsoleRenderer reads the "event" key, so only JSON output is renamed
    renderers: list[structlog.types.Processor] = (
        [_rename_event_to_msg, structlog.processors.JSONRenderer()]
        if json
        else [structlog.dev.ConsoleRenderer(colors=False)]
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _component_processor,
            redact_secrets,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            *renderers,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def redact_secrets(
    _logger: object, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    """Replace secret-bearing fields, including inside nested mappings."""

    return {key: _redact(key, value) for key, value in event_dict.items()}


def _redact(key: str, value: object) -> object:
    if key in SECRET_FIELDS:
        return REDACTED
    if isinstance(value, dict):
        return {k: _redact(k, v) for k, v in value.items()}
    return value


def _component_processor(
    logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    component = event_dict.get("component")
    if component is None:
        logger_name = getattr(logger, "name", None) or "tendermint_keys"
        event_dict["component"] = logger_name
    return event_dict


def _rename_event_to_msg(
    _logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    if "msg" not in event_dict:
        event = event_dict.pop("event", "")
        event_dict["msg"] = event
    return event_dict


def _level_from_str(level: str) -> int:
    mapping: Dict[str, int] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
    }
    return mapping.get(level, logging.INFO)


__all__ = ["REDACTED", "SECRET_FIELDS", "configure_logging", "redact_secrets"]
