"""Library configuration: FerrumConfig and initialization.

Configuration only affects the ambient layers (logging). The value types
behave identically whether or not `init()` has been called.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from ferrum._logging import configure_logging, get_logger

__all__ = [
    'FerrumConfig',
    'get_config',
    'init',
]

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
_LOG_FORMATS = ('json', 'console')


@dataclass(frozen=True)
class FerrumConfig:
    """Configuration for ferrum.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Emit JSON logs if True, console-formatted logs otherwise.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: FerrumConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from FERRUM_LOG_LEVEL, ignoring unknown values."""
    env_level = os.environ.get('FERRUM_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in _LOG_LEVELS:
        logging.warning("Unknown FERRUM_LOG_LEVEL value '%s', ignoring", env_level)
        return None
    return env_level


def _detect_json_logs() -> bool:
    """Read the log format from FERRUM_LOG_FORMAT ("json" or "console")."""
    env_format = os.environ.get('FERRUM_LOG_FORMAT', '').lower()
    if env_format and env_format not in _LOG_FORMATS:
        logging.warning("Unknown FERRUM_LOG_FORMAT value '%s', defaulting to json", env_format)
    return env_format != 'console'


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> FerrumConfig:
    """Initialize ferrum with the given configuration.

    Unset arguments fall back to the FERRUM_LOG_LEVEL and FERRUM_LOG_FORMAT
    environment variables.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = auto-detect.
        json_logs: JSON (True) or console (False) output. None = auto-detect.

    Returns:
        The FerrumConfig that was set.

    Raises:
        ValueError: If log_level is not a known level name.

    Example:
        ```python
        from ferrum import init

        init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    if log_level is None:
        resolved_level = _detect_log_level()
    elif log_level.upper() in _LOG_LEVELS:
        resolved_level = log_level.upper()
    else:
        msg = f'Unknown log level {log_level!r}; expected one of {", ".join(_LOG_LEVELS)}'
        raise ValueError(msg)

    resolved_json = _detect_json_logs() if json_logs is None else json_logs

    _config = FerrumConfig(log_level=resolved_level, json_logs=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)
        get_logger(__name__).debug('ferrum initialized', log_level=resolved_level, json_logs=resolved_json)

    return _config


def get_config() -> FerrumConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'ferrum not initialized. Call ferrum.init() first.'
        raise RuntimeError(msg)
    return _config
