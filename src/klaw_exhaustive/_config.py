"""Package configuration: ExhaustiveConfig, configure(), get_config()."""

from __future__ import annotations

from dataclasses import dataclass

from klaw_exhaustive._logging import configure_logging

__all__ = [
    'ExhaustiveConfig',
    'configure',
    'get_config',
    'reset_config',
]


@dataclass(frozen=True)
class ExhaustiveConfig:
    """Configuration for unreachable-variant reporting.

    Attributes:
        pretty: Indent the serialized fallback representation (2 spaces).
        log_level: Logging level (e.g., "DEBUG", "WARNING"). None = silent.
        json_logs: Render log events as JSON. False = console output.
    """

    pretty: bool = False
    log_level: str | None = None
    json_logs: bool = True


_DEFAULT_CONFIG = ExhaustiveConfig()

# Global configuration (replaced by configure())
_config: ExhaustiveConfig = _DEFAULT_CONFIG


def configure(
    pretty: bool = False,  # noqa: FBT001, FBT002
    log_level: str | None = None,
    *,
    json_logs: bool = True,
) -> ExhaustiveConfig:
    """Replace the package configuration.

    Args:
        pretty: Indent serialized representations in error messages.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: Emit JSON log lines; False switches to console rendering.

    Returns:
        The ExhaustiveConfig that was set.

    Example:
        ```python
        from klaw_exhaustive import configure

        # Multi-line JSON in messages, log every unreachable hit to the console
        configure(pretty=True, log_level="DEBUG", json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = ExhaustiveConfig(pretty=pretty, log_level=log_level, json_logs=json_logs)

    if log_level is not None:
        configure_logging(log_level, json_output=json_logs)

    return _config


def get_config() -> ExhaustiveConfig:
    """Get the current configuration.

    Unlike most configuration entry points this never requires a prior
    `configure()` call: an unreachable branch can be hit at import time.

    Returns:
        The current ExhaustiveConfig, or the defaults.
    """
    return _config


def reset_config() -> None:
    """Restore the default configuration."""
    global _config  # noqa: PLW0603
    _config = _DEFAULT_CONFIG
