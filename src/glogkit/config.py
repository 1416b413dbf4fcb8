"""
Logging configuration.

Provides a single startup entry point that gives the standard library
backend a named output handler, so records emitted through ``Glog`` have
somewhere to go and ``set_default_formatting`` has a handler to target.

Configuration is read from environment variables (see ``GlogSettings``):
- GLOG_LEVEL: emergency | alert | critical | error | warning | notice |
  info | debug | all | none (default: info)
- GLOG_FORMAT: keyvalue | json | console (default: keyvalue)
- GLOG_HANDLER_NAME: handler name (default: default)
- GLOG_STREAM: stderr | stdout (default: stderr)

Usage:
    # Configure at application startup
    from glogkit import configure_logging
    configure_logging()

    # Or with explicit settings
    configure_logging(level="debug", format="json")
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from glogkit.backends import LoggingBackend, get_backend, set_backend
from glogkit.errors import InvalidConfigError
from glogkit.formatting import FORMATTERS
from glogkit.settings import GlogSettings, parse_config_level

logger = logging.getLogger(__name__)

# Track if logging has been configured
_configured = False


def configure_logging(
    level: Any = None,
    format: str | None = None,
    settings: GlogSettings | None = None,
    force: bool = False,
) -> None:
    """
    Configure the default backend for the application.

    Should be called once at application startup. Subsequent calls are
    no-ops unless force=True.

    When the default backend is a ``LoggingBackend`` a ``StreamHandler``
    named ``settings.handler_name`` replaces any handler of that name on
    the primary logger. If that name differs from the backend's
    ``default_handler``, a ``LoggingBackend`` bound to it becomes the
    default backend, so ``set_default_formatting`` targets the installed
    handler. Thresholds are then applied through the backend adapter, so
    any ``Backend`` receives them.

    Args:
        level: Threshold (overrides GLOG_LEVEL); name, number or ConfigLevel
        format: Output format (overrides GLOG_FORMAT)
        settings: Explicit settings instead of reading the environment
        force: Reconfigure even if already configured

    Raises:
        InvalidConfigError: Unknown level or format
    """
    global _configured

    if _configured and not force:
        return

    settings = settings or GlogSettings()
    threshold = parse_config_level(level) if level is not None else settings.level

    log_format = (format or settings.format).lower()
    factory = FORMATTERS.get(log_format)
    if factory is None:
        valid = ", ".join(FORMATTERS)
        raise InvalidConfigError("format", format, f"Unknown log format {format!r} (expected one of: {valid})")

    backend = get_backend()
    if isinstance(backend, LoggingBackend):
        stream = sys.stdout if settings.stream == "stdout" else sys.stderr
        _install_handler(backend.primary_logger, settings.handler_name, stream, factory())
        if backend.default_handler != settings.handler_name:
            backend = LoggingBackend(backend.logger_name, default_handler=settings.handler_name)
            set_backend(backend)

    backend.set_primary_level(threshold)
    backend.set_handler_level(settings.handler_name, threshold)

    _configured = True
    logger.debug("Logging configured: level=%s format=%s handler=%s", threshold.name, log_format, settings.handler_name)


def _install_handler(target: logging.Logger, name: str, stream: Any, formatter: logging.Formatter) -> None:
    for existing in [h for h in target.handlers if h.name == name]:
        target.removeHandler(existing)
        existing.close()

    handler = logging.StreamHandler(stream)
    handler.set_name(name)
    handler.setFormatter(formatter)
    target.addHandler(handler)


def is_configured() -> bool:
    """Check if logging has been configured."""
    return _configured


__all__ = ["configure_logging", "is_configured"]
