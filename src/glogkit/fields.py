"""
Value types threaded through a ``Glog`` context.

``Field`` is a named value destined for the structured record. ``Arg`` is
an unnamed value substituted positionally into a message template. Both
are frozen: once built they never change, so they can be shared freely.

Values are stored as-is. Nothing here inspects or converts them; turning
a value into text is the formatter's job at render time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Reserved key carrying the resolved message text of an emitted record.
MESSAGE_KEY = "msg"


@dataclass(frozen=True)
class Field:
    """A single key/value pair for a log record."""

    name: str
    value: Any

    @classmethod
    def of(cls, **kwargs: Any) -> list[Field]:
        """Build fields from keyword arguments, keeping keyword order.

        Example:
            >>> Field.of(user="alice", count=3)
            [Field(name='user', value='alice'), Field(name='count', value=3)]
        """
        return [cls(name, value) for name, value in kwargs.items()]


@dataclass(frozen=True)
class Arg:
    """A positional template argument."""

    value: Any

    @classmethod
    def of(cls, *values: Any) -> list[Arg]:
        """Wrap each value in an ``Arg``, preserving order."""
        return [cls(value) for value in values]


__all__ = ["Field", "Arg", "MESSAGE_KEY"]
