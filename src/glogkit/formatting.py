"""
Formatter presets for the standard library backend.

A ``Glog`` emission reaches ``logging`` as a "report" record: the record's
``msg`` is the field mapping itself. The formatters built here are
``structlog.stdlib.ProcessorFormatter`` instances whose processor chain
lifts that mapping into the event dict before rendering, so a handler
prints the structured fields instead of ``str(dict)``.

Processor chain (all presets):
    1. merge_report_fields   - report mapping -> event dict
    2. add_log_level         - "level": "notice", "error", ...
    3. TimeStamper           - "timestamp": ISO-8601 UTC
    4. remove_processors_meta
    5. renderer              - preset specific

Records logged with plain ``logging`` calls still render: their text
lands under the ``msg`` key.

Usage:
    handler = logging.StreamHandler()
    handler.setFormatter(default_formatter())
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from glogkit.fields import MESSAGE_KEY

KEY_ORDER = ["timestamp", "level", MESSAGE_KEY]


def merge_report_fields(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Structlog processor that expands a report record into the event dict."""
    record = event_dict.get("_record")
    report = getattr(record, "msg", None)

    if not event_dict.get("_from_structlog") and isinstance(report, Mapping):
        event_dict.pop("event", None)
        event_dict.update(report)
    elif "event" in event_dict:
        event_dict.setdefault(MESSAGE_KEY, event_dict.pop("event"))

    return event_dict


def _message_as_event(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    # ConsoleRenderer highlights the "event" key
    if MESSAGE_KEY in event_dict:
        event_dict["event"] = event_dict.pop(MESSAGE_KEY)
    return event_dict


def _build(renderer: Processor, *extra: Processor) -> structlog.stdlib.ProcessorFormatter:
    processors: list[Processor] = [
        merge_report_fields,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
        *extra,
        renderer,
    ]
    return structlog.stdlib.ProcessorFormatter(processors=processors)


def default_formatter() -> structlog.stdlib.ProcessorFormatter:
    """Single-line ``key=value`` output: timestamp, level and msg first."""
    return _build(structlog.processors.KeyValueRenderer(key_order=KEY_ORDER, drop_missing=True))


def json_formatter(**dumps_kw: Any) -> structlog.stdlib.ProcessorFormatter:
    """One JSON object per record."""
    return _build(structlog.processors.JSONRenderer(**dumps_kw))


def console_formatter(colors: bool = True) -> structlog.stdlib.ProcessorFormatter:
    """Human-friendly developer output."""
    return _build(structlog.dev.ConsoleRenderer(colors=colors), _message_as_event)


FORMATTERS = {
    "keyvalue": default_formatter,
    "json": json_formatter,
    "console": console_formatter,
}


__all__ = [
    "merge_report_fields",
    "default_formatter",
    "json_formatter",
    "console_formatter",
    "FORMATTERS",
    "KEY_ORDER",
]
