"""
Structured error types for glogkit.

glogkit is a thin forwarding layer, so it raises very little on its own.
What it does raise carries a category, a context dict and an optional
chained cause, so callers can log or serialize the failure without
losing detail.

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                       GlogError                           │
        │             (category, context, cause)                    │
        ├──────────────────────────────────────────────────────────┤
        │  TemplateError        BackendError        ConfigError     │
        │  (TEMPLATE)           (BACKEND)           (CONFIG)        │
        │       │                    │                   │          │
        │  TemplateArityError   HandlerNotFoundError InvalidConfig  │
        └──────────────────────────────────────────────────────────┘

    Failures raised inside the standard library ``logging`` machinery
    (a handler that cannot write, ``dictConfig`` rejecting a handler
    name) are not wrapped; they reach the caller unchanged.

Examples:
    >>> err = TemplateArityError("{} and {}", placeholders=[0, 1], arguments=1)
    >>> err.category
    <ErrorCategory.TEMPLATE: 'TEMPLATE'>
    >>> err.to_dict()["context"]["arguments"]
    1
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Classification of glogkit failures."""

    TEMPLATE = "TEMPLATE"  # Message template could not be rendered
    BACKEND = "BACKEND"  # Backend adapter could not act
    CONFIG = "CONFIG"  # Invalid startup/settings value
    INTERNAL = "INTERNAL"


class GlogError(Exception):
    """Base exception for all glogkit errors."""

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context: dict[str, Any] = dict(context or {})
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> GlogError:
        """Attach extra context (fluent API)."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            result["context"] = dict(self.context)
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# TEMPLATE ERRORS
# =============================================================================


class TemplateError(GlogError, ValueError):
    """A message template could not be rendered against its arguments."""

    default_category = ErrorCategory.TEMPLATE

    def __init__(self, message: str, *, template: str | None = None, cause: Exception | None = None):
        self.template = template
        context = {"template": template} if template is not None else None
        super().__init__(message, context=context, cause=cause)


class TemplateArityError(TemplateError):
    """Placeholders and arguments do not line up one-to-one."""

    def __init__(self, template: str, *, placeholders: Iterable[int], arguments: int):
        self.placeholders = sorted(set(placeholders))
        self.arguments = arguments
        super().__init__(
            f"Template references argument indices {self.placeholders} "
            f"but {arguments} argument(s) were given",
            template=template,
        )
        self.context.update(placeholders=self.placeholders, arguments=arguments)


# =============================================================================
# BACKEND ERRORS
# =============================================================================


class BackendError(GlogError):
    """The backend adapter could not carry out a request."""

    default_category = ErrorCategory.BACKEND


class HandlerNotFoundError(BackendError, LookupError):
    """No handler with the given name is attached to the primary logger."""

    def __init__(self, handler_name: str, logger_name: str | None = None):
        self.handler_name = handler_name
        self.logger_name = logger_name
        target = logger_name or "root"
        super().__init__(
            f"No handler named {handler_name!r} on logger {target!r}",
            context={"handler_name": handler_name, "logger_name": target},
        )


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(GlogError):
    """Configuration error. Must be fixed by the caller."""

    default_category = ErrorCategory.CONFIG


class InvalidConfigError(ConfigError, ValueError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: Any, message: str | None = None):
        self.key = key
        self.value = value
        super().__init__(
            message or f"Invalid configuration for {key}: {value!r}",
            context={"key": key, "value": repr(value)},
        )


__all__ = [
    "ErrorCategory",
    "GlogError",
    "TemplateError",
    "TemplateArityError",
    "BackendError",
    "HandlerNotFoundError",
    "ConfigError",
    "InvalidConfigError",
]
