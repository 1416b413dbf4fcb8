"""
Glog - the immutable, chainable log context.

A ``Glog`` holds a read-only mapping of field names to values. Adding a
field returns a new ``Glog``; emitting a record returns a fresh, empty
``Glog``. The receiver is never modified, so a context can be built once
and reused for many records, or extended concurrently from several
threads, without coordination.

Architecture:
    ::

        Glog.new()
          .add("user", "alice")          -> Glog({"user": "alice"})
          .add("count", 3)               -> Glog({"user": "alice", "count": 3})
          .error("failed")               ─┐
                                          │ add("msg", "failed")
                                          │ backend.emit(Level.ERROR, fields)
                                          ▼
                                        Glog({})   (same backend binding)

        errorf(template, args) = error(format_template(template, args))

Field precedence:
    Last write wins, whether fields arrive one at a time or in a batch.
    The emitting call writes ``msg`` last, so a field added under the
    reserved ``msg`` name is replaced by the emitted message.

Examples:
    >>> backend = MemoryBackend()
    >>> base = Glog.new(backend).add("request_id", "r-1")
    >>> base.info("started")
    Glog({})
    >>> base.add("rows", 10).info("finished")
    Glog({})
    >>> backend.messages
    ['started', 'finished']
    >>> base.fields
    mappingproxy({'request_id': 'r-1'})
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from glogkit import backends
from glogkit.fields import MESSAGE_KEY, Arg, Field
from glogkit.levels import Level
from glogkit.protocols import Backend
from glogkit.template import format as format_template


class Glog:
    """Immutable accumulator of structured log fields."""

    __slots__ = ("_fields", "_backend")

    def __init__(self, fields: Mapping[str, Any] | None = None, backend: Backend | None = None):
        self._fields: Mapping[str, Any] = MappingProxyType(dict(fields or {}))
        self._backend = backend

    @classmethod
    def new(cls, backend: Backend | None = None) -> Glog:
        """Empty context. Without ``backend`` the default backend is used at emit time."""
        return cls(backend=backend)

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    @property
    def fields(self) -> Mapping[str, Any]:
        return self._fields

    @property
    def backend(self) -> Backend:
        """The bound backend, or the current default."""
        return self._backend if self._backend is not None else backends.get_backend()

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Glog):
            return NotImplemented
        return dict(self._fields) == dict(other._fields)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Glog({dict(self._fields)!r})"

    # -------------------------------------------------------------------------
    # Field accumulation
    # -------------------------------------------------------------------------

    def _derive(self, updates: Iterable[tuple[str, Any]]) -> Glog:
        merged = dict(self._fields)
        for name, value in updates:
            merged[name] = value
        return Glog(merged, self._backend)

    def add(self, name: str, value: Any) -> Glog:
        """New context with ``name`` set to ``value`` (overwrites)."""
        return self._derive([(name, value)])

    def add_field(self, field: Field) -> Glog:
        return self._derive([(field.name, field.value)])

    def add_fields(self, fields: Iterable[Field]) -> Glog:
        """New context with every field merged in order; later names win."""
        return self._derive((field.name, field.value) for field in fields)

    def with_backend(self, backend: Backend | None) -> Glog:
        """Same fields, routed to ``backend`` (``None`` = default backend)."""
        return Glog(self._fields, backend)

    # -------------------------------------------------------------------------
    # Emission
    # -------------------------------------------------------------------------

    def log(self, level: Level, message: str) -> Glog:
        """Emit one record at ``level`` and return a fresh empty context.

        Backend failures propagate unchanged; ``self`` is left as it was.
        A ``ConfigLevel`` (or any non-``Level``) raises ``TypeError``.
        """
        if not isinstance(level, Level):
            raise TypeError(f"Expected a Level, got {type(level).__name__} {level!r}")
        record = self.add(MESSAGE_KEY, message)
        self.backend.emit(level, record.fields)
        return Glog(backend=self._backend)

    def logf(self, level: Level, template: str, args: Sequence[Arg]) -> Glog:
        """Render ``template`` with ``args`` then emit as ``log``.

        Raises ``TemplateError`` before anything is emitted if the
        template does not match its arguments.
        """
        return self.log(level, format_template(template, args))

    def emergency(self, message: str) -> Glog:
        return self.log(Level.EMERGENCY, message)

    def emergencyf(self, template: str, args: Sequence[Arg]) -> Glog:
        return self.logf(Level.EMERGENCY, template, args)

    def alert(self, message: str) -> Glog:
        return self.log(Level.ALERT, message)

    def alertf(self, template: str, args: Sequence[Arg]) -> Glog:
        return self.logf(Level.ALERT, template, args)

    def critical(self, message: str) -> Glog:
        return self.log(Level.CRITICAL, message)

    def criticalf(self, template: str, args: Sequence[Arg]) -> Glog:
        return self.logf(Level.CRITICAL, template, args)

    def error(self, message: str) -> Glog:
        return self.log(Level.ERROR, message)

    def errorf(self, template: str, args: Sequence[Arg]) -> Glog:
        return self.logf(Level.ERROR, template, args)

    def warning(self, message: str) -> Glog:
        return self.log(Level.WARNING, message)

    def warningf(self, template: str, args: Sequence[Arg]) -> Glog:
        return self.logf(Level.WARNING, template, args)

    def notice(self, message: str) -> Glog:
        return self.log(Level.NOTICE, message)

    def noticef(self, template: str, args: Sequence[Arg]) -> Glog:
        return self.logf(Level.NOTICE, template, args)

    def info(self, message: str) -> Glog:
        return self.log(Level.INFO, message)

    def infof(self, template: str, args: Sequence[Arg]) -> Glog:
        return self.logf(Level.INFO, template, args)

    def debug(self, message: str) -> Glog:
        return self.log(Level.DEBUG, message)

    def debugf(self, template: str, args: Sequence[Arg]) -> Glog:
        return self.logf(Level.DEBUG, template, args)


def new(backend: Backend | None = None) -> Glog:
    """Empty ``Glog`` context."""
    return Glog.new(backend)


__all__ = ["Glog", "new"]
