"""Structured logging setup for polyrecover."""
from __future__ import annotations

import logging
import sys
from typing import Dict

import structlog

from .errors import ConfigError

LEVELS: Dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

_DEFAULT_LEVEL = "INFO"
_ROOT_COMPONENT = "polyrecover"


def configure_logging(level: str | None = None) -> None:
    """Route structlog events as JSON lines to stderr.

    Each line carries ``level``, ``ts``, ``msg`` and ``component``; stdout stays
    reserved for reconstruction results. An unknown ``level`` raises
    ``ConfigError`` instead of falling back silently.
    """

    numeric_level = level_from_name(level or _DEFAULT_LEVEL)

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _component_processor,
            _event_as_msg,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def level_from_name(name: str) -> int:
    try:
        return LEVELS[name.strip().upper()]
    except KeyError:
        raise ConfigError(f"Unknown log level '{name}', expected one of {sorted(LEVELS)}") from None


def _component_processor(
    logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    # stdlib logger names are module paths such as polyrecover.reconstructor
    event_dict.setdefault("component", getattr(logger, "name", None) or _ROOT_COMPONENT)
    return event_dict


def _event_as_msg(
    _logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    return event_dict


__all__ = ["LEVELS", "configure_logging", "level_from_name"]
