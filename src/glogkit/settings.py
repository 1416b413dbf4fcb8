"""Environment-driven settings for glogkit.

``GlogSettings`` reads ``GLOG_*`` environment variables (and a ``.env``
file when present) for the startup helper ``configure_logging``.

Fields
──────
level        : Primary threshold, by name (``GLOG_LEVEL=debug``)
format       : keyvalue | json | console
handler_name : Name of the handler installed on the primary logger
stream       : stderr | stdout

Examples:
    >>> import os
    >>> os.environ["GLOG_LEVEL"] = "notice"
    >>> GlogSettings().level
    <ConfigLevel.NOTICE: 25>
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from glogkit.backends import DEFAULT_HANDLER
from glogkit.errors import InvalidConfigError
from glogkit.levels import ConfigLevel, Level

LogFormat = Literal["keyvalue", "json", "console"]


def parse_config_level(value: Any) -> ConfigLevel:
    """Coerce a name, number, ``Level`` or ``ConfigLevel`` into a ``ConfigLevel``."""
    if isinstance(value, ConfigLevel):
        return value
    if isinstance(value, Level):
        return value.config
    try:
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return ConfigLevel(int(text))
            return ConfigLevel.from_name(text)
        if isinstance(value, int) and not isinstance(value, bool):
            return ConfigLevel(value)
    except ValueError as exc:
        raise InvalidConfigError("level", value) from exc
    raise InvalidConfigError("level", value)


class GlogSettings(BaseSettings):
    """Startup settings for the standard library backend."""

    model_config = SettingsConfigDict(
        env_prefix="GLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: ConfigLevel = Field(default=ConfigLevel.INFO, description="Primary threshold")
    format: LogFormat = Field(default="keyvalue", description="Handler output format")
    handler_name: str = Field(default=DEFAULT_HANDLER, min_length=1)
    stream: Literal["stderr", "stdout"] = "stderr"

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, value: Any) -> ConfigLevel:
        return parse_config_level(value)

    @field_validator("format", mode="before")
    @classmethod
    def _lower_format(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value


__all__ = ["GlogSettings", "LogFormat", "parse_config_level"]
