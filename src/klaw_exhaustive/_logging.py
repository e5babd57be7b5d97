"""Structured logging for klaw-exhaustive.

Logging is opt-in: nothing is emitted until `configure(log_level=...)` is
called. Loggers are wrapped locally with `structlog.wrap_logger`, so the host
application's global structlog configuration is never touched. Output goes
through a ProcessorFormatter on a handler attached to the `klaw_exhaustive`
stdlib logger only. Hooks let tooling observe unreachable-variant events
without parsing log lines.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'PACKAGE_LOGGER',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

PACKAGE_LOGGER = 'klaw_exhaustive'


def _event_processors() -> list[Any]:
    """Processors that enrich an event before it reaches the stdlib handler."""
    import structlog

    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _create_hook_processor(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool) -> Any:
    import structlog

    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> logging.Logger:
    """Attach a structlog-rendering handler to the package logger.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use console output.

    Returns:
        The configured `klaw_exhaustive` stdlib logger.
    """
    import structlog

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = False
    return package_logger


def get_logger(name: str = PACKAGE_LOGGER) -> Any:
    """Get a structlog logger bound to a stdlib logger, without global config.

    Args:
        name: stdlib logger name; should live under `klaw_exhaustive`.

    Returns:
        A structlog BoundLogger.
    """
    import structlog

    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_event_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


# --- Logging Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook to be called for each log entry.

    Hooks receive a copy of the event dict, e.g. to count unreachable-variant
    events in a crash reporter.

    Args:
        hook: Callable that receives log entry dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook.

    Args:
        hook: The hook to remove.
    """
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def _create_hook_processor() -> Callable[[Any, str, dict[str, Any]], dict[str, Any]]:
    """Create a processor that invokes log hooks."""

    def hook_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        for hook in _log_hooks:
            try:
                hook(event_dict.copy())
            except Exception:
                pass  # Don't let hook failures mask the assertion being raised
        return event_dict

    return hook_processor
