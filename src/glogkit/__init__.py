"""
glogkit - immutable, chainable structured logging.

Build a context of fields, emit a leveled record, get a fresh context back:

    from glogkit import Arg, configure_logging, new

    configure_logging()

    log = new().add("user", "alice").add("count", 3)
    log.error("failed")
    log.warningf("{} retries left for {}", Arg.of(2, "alice"))

Records are forwarded to a ``Backend`` (standard library ``logging`` by
default) whose handlers own filtering, formatting and output.
"""

import logging

from glogkit.backends import (
    DEFAULT_HANDLER,
    EmittedRecord,
    LoggingBackend,
    MemoryBackend,
    get_backend,
    set_backend,
    set_default_formatting,
    set_handler_config,
    set_handler_level,
    set_primary_config,
    set_primary_level,
)
from glogkit.config import configure_logging, is_configured
from glogkit.context import Glog, new
from glogkit.errors import (
    BackendError,
    ConfigError,
    ErrorCategory,
    GlogError,
    HandlerNotFoundError,
    InvalidConfigError,
    TemplateArityError,
    TemplateError,
)
from glogkit.fields import MESSAGE_KEY, Arg, Field
from glogkit.levels import ConfigLevel, Level
from glogkit.protocols import Backend
from glogkit.settings import GlogSettings
from glogkit.template import format as format_template

__version__ = "0.3.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Context
    "Glog",
    "new",
    "Field",
    "Arg",
    "MESSAGE_KEY",
    # Levels
    "Level",
    "ConfigLevel",
    # Templates
    "format_template",
    # Backend
    "Backend",
    "LoggingBackend",
    "MemoryBackend",
    "EmittedRecord",
    "DEFAULT_HANDLER",
    "get_backend",
    "set_backend",
    "set_primary_level",
    "set_handler_level",
    "set_default_formatting",
    "set_primary_config",
    "set_handler_config",
    # Configuration
    "configure_logging",
    "is_configured",
    "GlogSettings",
    # Errors
    "GlogError",
    "ErrorCategory",
    "TemplateError",
    "TemplateArityError",
    "BackendError",
    "HandlerNotFoundError",
    "ConfigError",
    "InvalidConfigError",
]
