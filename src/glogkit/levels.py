"""
Severity taxonomy for glogkit.

Two enumerations live here and they are deliberately not interchangeable:

- ``Level``: the severity attached to an emitted record (syslog order).
- ``ConfigLevel``: a threshold used to configure the backend. It has every
  severity plus the ``ALL`` and ``NONE`` sentinels, which are never valid
  on a record.

Both are ``IntEnum`` subclasses whose values are standard library
``logging`` level numbers, so comparisons follow severity and the values
can be handed to ``Logger.log`` / ``Logger.setLevel`` unchanged.

Architecture:
    ::

        EMERGENCY 70  ─┐
        ALERT     60   │  registered via logging.addLevelName
        CRITICAL  50   │
        ERROR     40   │
        WARNING   30   │
        NOTICE    25   │  registered via logging.addLevelName
        INFO      20   │
        DEBUG     10  ─┘

        ConfigLevel adds: ALL = 1, NONE = 71

Examples:
    >>> Level.EMERGENCY > Level.DEBUG
    True
    >>> Level.from_name("warn")
    <Level.WARNING: 30>
    >>> ConfigLevel.from_level(Level.NOTICE)
    <ConfigLevel.NOTICE: 25>
"""

from __future__ import annotations

import logging
from enum import IntEnum

NOTICE = 25
ALERT = 60
EMERGENCY = 70

logging.addLevelName(NOTICE, "NOTICE")
logging.addLevelName(ALERT, "ALERT")
logging.addLevelName(EMERGENCY, "EMERGENCY")

_ALIASES = {
    "warn": "warning",
    "fatal": "critical",
    "crit": "critical",
    "err": "error",
    "emerg": "emergency",
}


def _lookup(enum_cls, name: str):
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    try:
        return enum_cls[key.upper()]
    except KeyError:
        valid = ", ".join(member.name.lower() for member in enum_cls)
        raise ValueError(f"Unknown {enum_cls.__name__} {name!r} (expected one of: {valid})") from None


class Level(IntEnum):
    """Severity of an emitted record, highest first."""

    EMERGENCY = EMERGENCY
    ALERT = ALERT
    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    NOTICE = NOTICE
    INFO = logging.INFO
    DEBUG = logging.DEBUG

    @classmethod
    def from_name(cls, name: str) -> Level:
        """Resolve a level by name (case-insensitive, ``warn``/``fatal`` aliases)."""
        return _lookup(cls, name)

    @property
    def config(self) -> ConfigLevel:
        """The matching configuration threshold."""
        return ConfigLevel(int(self))

    @property
    def method_name(self) -> str:
        """Name of the ``Glog`` method emitting at this level."""
        return self.name.lower()


class ConfigLevel(IntEnum):
    """Threshold for the backend's primary logger or one of its handlers."""

    NONE = EMERGENCY + 1
    EMERGENCY = EMERGENCY
    ALERT = ALERT
    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    NOTICE = NOTICE
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    ALL = 1

    @classmethod
    def from_name(cls, name: str) -> ConfigLevel:
        return _lookup(cls, name)

    @classmethod
    def from_level(cls, level: Level) -> ConfigLevel:
        return cls(int(level))


__all__ = [
    "Level",
    "ConfigLevel",
    "NOTICE",
    "ALERT",
    "EMERGENCY",
]
