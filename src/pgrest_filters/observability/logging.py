"""Observability – structlog configuration and ``get_logger`` helper.

The codec and the search session only ever log at ``debug`` level: dropped
query fragments and skipped serialisations are expected, not failures.
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from pgrest_filters.config import SearchSettings

# Query-string values are user input; long ones are cut in log events.
MAX_LOGGED_FRAGMENT = 200
_TRUNCATED_KEYS = ("fragment", "value")

_configured = False


def truncate_fragments(logger: Any, method: Any, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    """structlog processor shortening ``fragment`` / ``value`` fields."""
    for key in _TRUNCATED_KEYS:
        value = event_dict.get(key)
        if isinstance(value, str) and len(value) > MAX_LOGGED_FRAGMENT:
            event_dict[key] = value[:MAX_LOGGED_FRAGMENT] + "..."
    return event_dict


def _resolve_level(level: int | str | None, settings: SearchSettings | None) -> int:
    if level is None:
        return settings.level if settings is not None else logging.INFO
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def configure_logging(
    level: int | str | None = None,
    *,
    settings: SearchSettings | None = None,
    force: bool = False,
) -> None:
    """Route structlog through stdlib logging with JSON output on stderr.

    An explicit ``level`` wins over ``settings.log_level``; unknown level
    names fall back to ``INFO``. Calling it again is a no-op unless
    ``force`` is set.
    """
    global _configured
    if _configured and not force:
        return

    resolved = _resolve_level(level, settings)
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        truncate_fragments,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # sys.__stderr__ survives test runners that swap and close sys.stderr
    handler = logging.StreamHandler(sys.__stderr__)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
    )
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolved)
    _configured = True


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["MAX_LOGGED_FRAGMENT", "configure_logging", "get_logger", "truncate_fragments"]
