"""
Structured logging for docspine.

The store and the identity manager emit events through :func:`get_logger`.
Rendering is left to the application, which calls :func:`configure_logging`
once at startup (or :meth:`DocStoreSettings.configure_logging`).

Architecture:
    ::

        configure_logging(level="INFO", json_format=True, service="docspine")
              ↓
        build_processors():
          TimeStamper (iso)          optional
          add_log_level
          service.name               from ``service``
          ECS renames                JSON only (@timestamp, log.level)
          JSONRenderer | ConsoleRenderer

Examples:
    >>> from docspine.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=False)
    >>> get_logger(__name__).info("document_saved", document_id="abc")

Tags:
    logging, structlog, observability, docspine

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Literal

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from .errors import ConfigError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# event key -> ECS field name
_ECS_FIELDS = {"timestamp": "@timestamp", "level": "log.level"}


def _service_metadata(service: str) -> Processor:
    """Processor stamping ``service.name`` on records that lack one."""

    def add_service(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service.name", service)
        return event_dict

    return add_service


def _ecs_field_names(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Rename structlog's default keys to their Elasticsearch (ECS) names."""
    for key, ecs_key in _ECS_FIELDS.items():
        if key in event_dict:
            event_dict[ecs_key] = event_dict.pop(key)
    return event_dict


def build_processors(
    *,
    json_format: bool,
    service: str = "docspine",
    add_timestamp: bool = True,
) -> list[Processor]:
    """Processor chain used by :func:`configure_logging`, renderer last."""
    processors: list[Processor] = []
    if add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors += [
        structlog.stdlib.add_log_level,
        _service_metadata(service),
    ]
    if json_format:
        processors += [_ecs_field_names, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    return processors


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "docspine",
    add_timestamp: bool = True,
) -> None:
    """Configure structlog for the application.

    Args:
        level: One of ``LOG_LEVELS`` (case-insensitive)
        json_format: True for JSON, False for console, None for JSON unless stdout is a tty
        service: Value of ``service.name`` on every record
        add_timestamp: Include an ISO timestamp

    Raises:
        ConfigError: ``level`` is not a known log level.
    """
    level_name = level.upper()
    if level_name not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level {level!r}; expected one of {', '.join(LOG_LEVELS)}")

    if json_format is None:
        json_format = not sys.stdout.isatty()

    structlog.configure(
        processors=build_processors(
            json_format=json_format, service=service, add_timestamp=add_timestamp
        ),
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level_name)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger (usually ``get_logger(__name__)``)."""
    return structlog.get_logger(name)


__all__ = [
    "LOG_LEVELS",
    "LogLevel",
    "build_processors",
    "configure_logging",
    "get_logger",
]
