"""
Backend adapters and the process-wide default backend.

``LoggingBackend`` forwards to the standard library ``logging`` package.
Levels go to ``Logger.log`` / ``dictConfig`` as plain level numbers and
whatever the standard library raises reaches the caller unchanged.

Raw configuration is split in two. ``level`` (and ``propagate`` for the
primary logger) go through ``logging.config.dictConfig`` in incremental
mode. Incremental mode ignores every other key, so the rest are applied
directly on the logger or handler:

    primary logger:  handlers  -> replaces the logger's handlers
                     filters   -> replaces the logger's filters
    handler:         formatter -> Formatter instance or FORMATTERS preset name
                     filters   -> replaces the handler's filters
                     stream    -> StreamHandler.setStream (``ext://`` allowed)

Any other key raises ``InvalidConfigError`` before anything is applied.

``MemoryBackend`` keeps everything it receives in lists. Tests use it to
assert on emitted records; applications can use it to capture output.

Mapping to ``logging``:
    ::

        emit(level, fields)            -> logger.log(int(level), dict(fields))
        set_primary_config(cfg)        -> dictConfig({"incremental": True, "root": {level, propagate}})
                                          + logger.addHandler / logger.addFilter
        set_handler_config(name, cfg)  -> dictConfig({"incremental": True, "handlers": {name: {level}}})
                                          + handler.setFormatter / addFilter / setStream
        set_primary_level(lvl)         -> set_primary_config({"level": int(lvl)})
        set_handler_level(name, lvl)   -> set_handler_config(name, {"level": int(lvl)})
        set_default_formatting()       -> handler "default".setFormatter(default_formatter())

Usage:
    from glogkit.backends import MemoryBackend, set_backend

    previous = set_backend(MemoryBackend())
"""

from __future__ import annotations

import logging
import logging.config
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from glogkit.errors import HandlerNotFoundError, InvalidConfigError
from glogkit.fields import MESSAGE_KEY
from glogkit.formatting import FORMATTERS, default_formatter
from glogkit.levels import ConfigLevel, Level
from glogkit.protocols import Backend

logger = logging.getLogger(__name__)

DEFAULT_HANDLER = "default"

# Keys dictConfig honours in incremental mode
_INCREMENTAL_PRIMARY_KEYS = frozenset({"level", "propagate"})
_INCREMENTAL_HANDLER_KEYS = frozenset({"level"})

PRIMARY_CONFIG_KEYS = _INCREMENTAL_PRIMARY_KEYS | {"handlers", "filters"}
HANDLER_CONFIG_KEYS = _INCREMENTAL_HANDLER_KEYS | {"formatter", "filters", "stream"}

_converter = logging.config.BaseConfigurator({})


def _threshold(level: ConfigLevel) -> int:
    if not isinstance(level, ConfigLevel):
        raise TypeError(
            f"Expected a ConfigLevel, got {type(level).__name__} {level!r} "
            "(use Level.config to convert an emission level)"
        )
    return int(level)


def _severity(level: Level) -> int:
    if not isinstance(level, Level):
        raise TypeError(f"Expected a Level, got {type(level).__name__} {level!r}")
    return int(level)


def _check_keys(section: Mapping[str, Any], allowed: frozenset[str], target: str) -> None:
    unknown = sorted(set(section) - allowed)
    if unknown:
        raise InvalidConfigError(
            unknown[0],
            section[unknown[0]],
            f"Unsupported {target} config key(s) {unknown} (expected any of: {sorted(allowed)})",
        )


def _resolve(value: Any) -> Any:
    """Resolve ``ext://`` references the way ``dictConfig`` does."""
    if isinstance(value, str):
        return _converter.convert(value)
    return value


def _as_formatter(value: Any) -> logging.Formatter:
    if isinstance(value, str) and value.lower() in FORMATTERS:
        return FORMATTERS[value.lower()]()
    resolved = _resolve(value)
    if not isinstance(resolved, logging.Formatter):
        raise InvalidConfigError(
            "formatter", value, f"Expected a logging.Formatter or one of {sorted(FORMATTERS)}, got {value!r}"
        )
    return resolved


def _as_filters(value: Any) -> list[Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise InvalidConfigError("filters", value, f"Expected a list of filters, got {value!r}")
    filters = [_resolve(item) for item in value]
    for item in filters:
        if not (callable(item) or hasattr(item, "filter")):
            raise InvalidConfigError("filters", value, f"Not a filter: {item!r}")
    return filters


def _as_handlers(value: Any) -> list[logging.Handler]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise InvalidConfigError("handlers", value, f"Expected a list of handlers, got {value!r}")
    handlers = [_resolve(item) for item in value]
    for item in handlers:
        if not isinstance(item, logging.Handler):
            raise InvalidConfigError("handlers", value, f"Not a logging.Handler: {item!r}")
    return handlers


def _replace_filters(target: logging.Filterer, filters: list[Any]) -> None:
    for existing in list(target.filters):
        target.removeFilter(existing)
    for item in filters:
        target.addFilter(item)


class LoggingBackend:
    """Backend over a standard library logger.

    Args:
        logger_name: Primary logger; ``None`` means the root logger.
        default_handler: Name of the handler ``set_default_formatting`` targets.
    """

    def __init__(self, logger_name: str | None = None, default_handler: str = DEFAULT_HANDLER):
        self.logger_name = logger_name
        self.default_handler = default_handler

    @property
    def primary_logger(self) -> logging.Logger:
        return logging.getLogger(self.logger_name)

    def handler(self, name: str) -> logging.Handler:
        """Find a handler attached to the primary logger by name."""
        for candidate in self.primary_logger.handlers:
            if candidate.name == name:
                return candidate
        raise HandlerNotFoundError(name, self.logger_name)

    def emit(self, level: Level, fields: Mapping[str, Any]) -> None:
        self.primary_logger.log(_severity(level), dict(fields))

    def set_primary_config(self, config: Mapping[str, Any]) -> None:
        """Apply raw configuration to the primary logger.

        Keys are those of a ``dictConfig`` logger section: ``level``,
        ``propagate``, ``handlers`` (``Handler`` objects, replacing the
        current ones) and ``filters`` (replacing the current ones).

        Raises:
            InvalidConfigError: Unsupported key or unusable value
            ValueError: ``dictConfig`` rejected ``level``
        """
        section = dict(config)
        _check_keys(section, PRIMARY_CONFIG_KEYS, "logger")
        handlers = _as_handlers(section["handlers"]) if "handlers" in section else None
        filters = _as_filters(section["filters"]) if "filters" in section else None

        incremental = {k: v for k, v in section.items() if k in _INCREMENTAL_PRIMARY_KEYS}
        if incremental:
            if self.logger_name is None:
                target: dict[str, Any] = {"root": incremental}
            else:
                target = {"loggers": {self.logger_name: incremental}}
            logging.config.dictConfig({"version": 1, "incremental": True, **target})

        primary = self.primary_logger
        if handlers is not None:
            for existing in list(primary.handlers):
                primary.removeHandler(existing)
            for handler in handlers:
                primary.addHandler(handler)
        if filters is not None:
            _replace_filters(primary, filters)

        logger.debug("Applied primary config to %s: %s", self.logger_name or "root", sorted(section))

    def set_handler_config(self, handler_name: str, config: Mapping[str, Any]) -> None:
        """Apply raw configuration to a named handler.

        Keys: ``level``, ``formatter`` (a ``Formatter`` or a preset name
        from ``FORMATTERS``), ``filters`` (replacing the current ones) and
        ``stream`` (``StreamHandler`` only; ``ext://sys.stdout`` style
        references are resolved).

        Raises:
            InvalidConfigError: Unsupported key or unusable value
            HandlerNotFoundError: Non-level keys given for a handler not on the primary logger
            ValueError: ``dictConfig`` found no handler of that name or rejected ``level``
        """
        section = dict(config)
        _check_keys(section, HANDLER_CONFIG_KEYS, "handler")
        formatter = _as_formatter(section["formatter"]) if "formatter" in section else None
        filters = _as_filters(section["filters"]) if "filters" in section else None
        stream = _resolve(section["stream"]) if "stream" in section else None

        direct = set(section) - _INCREMENTAL_HANDLER_KEYS
        target = self.handler(handler_name) if direct else None
        if "stream" in section:
            if not isinstance(target, logging.StreamHandler):
                raise InvalidConfigError("stream", section["stream"], f"Handler {handler_name!r} has no stream")
            if not hasattr(stream, "write"):
                raise InvalidConfigError("stream", section["stream"], f"Not a writable stream: {stream!r}")

        if "level" in section or not direct:
            incremental = {k: v for k, v in section.items() if k in _INCREMENTAL_HANDLER_KEYS}
            logging.config.dictConfig({"version": 1, "incremental": True, "handlers": {handler_name: incremental}})

        if target is not None:
            if formatter is not None:
                target.setFormatter(formatter)
            if filters is not None:
                _replace_filters(target, filters)
            if "stream" in section:
                target.setStream(stream)

        logger.debug("Applied handler config to %s: %s", handler_name, sorted(section))

    def set_primary_level(self, level: ConfigLevel) -> None:
        self.set_primary_config({"level": _threshold(level)})

    def set_handler_level(self, handler_name: str, level: ConfigLevel) -> None:
        self.set_handler_config(handler_name, {"level": _threshold(level)})

    def set_default_formatting(self) -> None:
        self.handler(self.default_handler).setFormatter(default_formatter())
        logger.debug("Installed default formatter on handler %s", self.default_handler)

    def __repr__(self) -> str:
        return f"LoggingBackend(logger_name={self.logger_name!r}, default_handler={self.default_handler!r})"


@dataclass(frozen=True)
class EmittedRecord:
    """One record captured by ``MemoryBackend``."""

    level: Level
    fields: dict[str, Any]

    @property
    def message(self) -> Any:
        return self.fields.get(MESSAGE_KEY)


@dataclass
class MemoryBackend:
    """Backend that stores records and configuration calls in memory."""

    records: list[EmittedRecord] = field(default_factory=list)
    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)
    primary_level: ConfigLevel | None = None
    handler_levels: dict[str, ConfigLevel] = field(default_factory=dict)
    primary_config: dict[str, Any] = field(default_factory=dict)
    handler_configs: dict[str, dict[str, Any]] = field(default_factory=dict)
    default_formatting: bool = False

    def __post_init__(self) -> None:
        self._lock = threading.Lock()

    def emit(self, level: Level, fields: Mapping[str, Any]) -> None:
        with self._lock:
            self.records.append(EmittedRecord(level, dict(fields)))

    def set_primary_level(self, level: ConfigLevel) -> None:
        with self._lock:
            self.calls.append(("set_primary_level", (level,)))
            self.primary_level = level

    def set_handler_level(self, handler_name: str, level: ConfigLevel) -> None:
        with self._lock:
            self.calls.append(("set_handler_level", (handler_name, level)))
            self.handler_levels[handler_name] = level

    def set_default_formatting(self) -> None:
        with self._lock:
            self.calls.append(("set_default_formatting", ()))
            self.default_formatting = True

    def set_primary_config(self, config: Mapping[str, Any]) -> None:
        with self._lock:
            self.calls.append(("set_primary_config", (dict(config),)))
            self.primary_config.update(config)

    def set_handler_config(self, handler_name: str, config: Mapping[str, Any]) -> None:
        with self._lock:
            self.calls.append(("set_handler_config", (handler_name, dict(config))))
            self.handler_configs.setdefault(handler_name, {}).update(config)

    @property
    def messages(self) -> list[Any]:
        return [record.message for record in self.records]

    def clear(self) -> None:
        with self._lock:
            self.records.clear()
            self.calls.clear()


# =============================================================================
# DEFAULT BACKEND
# =============================================================================

_default_backend: Backend = LoggingBackend()
_backend_lock = threading.Lock()


def get_backend() -> Backend:
    """Return the backend used by contexts that have none bound."""
    return _default_backend


def set_backend(backend: Backend) -> Backend:
    """Replace the process-wide default backend, returning the previous one."""
    global _default_backend

    if not isinstance(backend, Backend):
        raise TypeError(f"{type(backend).__name__} does not implement the Backend protocol")

    with _backend_lock:
        previous = _default_backend
        _default_backend = backend
    return previous


def emit(level: Level, fields: Mapping[str, Any]) -> None:
    get_backend().emit(level, fields)


def set_primary_level(level: ConfigLevel) -> None:
    get_backend().set_primary_level(level)


def set_handler_level(handler_name: str, level: ConfigLevel) -> None:
    get_backend().set_handler_level(handler_name, level)


def set_default_formatting() -> None:
    get_backend().set_default_formatting()


def set_primary_config(config: Mapping[str, Any]) -> None:
    get_backend().set_primary_config(config)


def set_handler_config(handler_name: str, config: Mapping[str, Any]) -> None:
    get_backend().set_handler_config(handler_name, config)


__all__ = [
    "DEFAULT_HANDLER",
    "PRIMARY_CONFIG_KEYS",
    "HANDLER_CONFIG_KEYS",
    "LoggingBackend",
    "MemoryBackend",
    "EmittedRecord",
    "get_backend",
    "set_backend",
    "emit",
    "set_primary_level",
    "set_handler_level",
    "set_default_formatting",
    "set_primary_config",
    "set_handler_config",
]
