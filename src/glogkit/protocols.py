"""
Backend contract for glogkit.

``Glog`` never talks to a logging library directly. It depends on the
``Backend`` protocol below and nothing else; any object with these
methods can receive records (structural typing, no inheritance needed).

Implementations:
    - ``glogkit.backends.LoggingBackend``: standard library ``logging``
    - ``glogkit.backends.MemoryBackend``: captures records in lists

Guardrails:
    ❌ DON'T: Call ``logging`` from ``Glog``
    ✅ DO: Route every record through ``Backend.emit``

    ❌ DON'T: Catch backend failures inside an adapter
    ✅ DO: Let them propagate to the caller unchanged
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from glogkit.levels import ConfigLevel, Level


@runtime_checkable
class Backend(Protocol):
    """Destination for emitted records and target of threshold/format settings."""

    def emit(self, level: Level, fields: Mapping[str, Any]) -> None:
        """Hand one record to the logging facility."""
        ...

    def set_primary_level(self, level: ConfigLevel) -> None:
        """Set the facility-wide threshold."""
        ...

    def set_handler_level(self, handler_name: str, level: ConfigLevel) -> None:
        """Set the threshold of one named handler."""
        ...

    def set_default_formatting(self) -> None:
        """Install the single-line formatter preset on the default handler."""
        ...

    def set_primary_config(self, config: Mapping[str, Any]) -> None:
        """Apply a raw configuration structure to the primary logger."""
        ...

    def set_handler_config(self, handler_name: str, config: Mapping[str, Any]) -> None:
        """Apply a raw configuration structure to one named handler."""
        ...


__all__ = ["Backend"]
