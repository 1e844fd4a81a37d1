"""Structured logging for the D&D 5E rules core.

Engine modules log through structlog. A host application can bind
character or session context with ``bind_context(character_id=...)`` and
it is merged into every roll, level-up and attunement event that follows.
The library never configures logging on import; call ``configure_logging``
or ``configure_logging_from_settings`` once at startup.

Example:
    >>> from dnd_rules.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Level up applied", new_level=4, pending_asi=True)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


LIBRARY_NAME = "dnd_rules"
_STDLIB_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def add_rules_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Tag each event with the library name.

    An ``app`` value bound by the host is left untouched.
    """
    event_dict.setdefault("app", LIBRARY_NAME)
    return event_dict


def _build_processors(json_format: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_rules_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if json_format:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    return processors


def configure_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | Path | None = None,
) -> None:
    """Set up structlog and the stdlib root logger.

    Args:
        level: Level name such as ``"DEBUG"`` or ``"WARNING"``. Unknown
            names fall back to INFO.
        json_format: Render events as JSON lines instead of console text.
        log_file: If given, stdlib records are also written to this file.

    Example:
        >>> configure_logging(level="DEBUG")
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=_build_processors(json_format),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format=_STDLIB_FORMAT,
        level=log_level,
        stream=sys.stdout,
        force=True,
    )

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(_STDLIB_FORMAT))
        logging.getLogger().addHandler(file_handler)


def configure_logging_from_settings() -> None:
    """Configure logging from the ``DND_RULES_LOG_*`` settings."""
    from dnd_rules.core.config import get_settings

    log_settings = get_settings().logging
    configure_logging(
        level=log_settings.level,
        json_format=log_settings.json_format,
        log_file=log_settings.log_file,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Return a structlog logger, usually called with ``__name__``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Attach key-value pairs to every later event in this context.

    Example:
        >>> bind_context(character_id="abc123")
        >>> get_logger(__name__).info("Initiative rolled")  # carries character_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


__all__ = [
    "add_rules_context",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
