# ABOUTME: Base configuration classes for the driver settings library
# ABOUTME: Provides environment-driven driver defaults and their case-insensitive validation

import re
from typing import Any, Dict, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from driver.models.enum import GuidRepresentation, ReadPreferenceMode

ENV_ALIASES: Dict[str, str] = {
    "dev": "development",
    "develop": "development",
    "stage": "staging",
    "prod": "production",
}
LOG_FORMAT_ALIASES: Dict[str, str] = {
    "structured": "json",
    "text": "txt",
}
WRITE_CONCERN_ALIASES: Dict[str, str] = {
    "ack": "acknowledged",
    "safe": "acknowledged",
    "true": "acknowledged",
    "unack": "unacknowledged",
    "unsafe": "unacknowledged",
    "false": "unacknowledged",
}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _lookup(aliases: Dict[str, str], value: Any) -> Any:
    if isinstance(value, str):
        key = value.strip().lower()
        return aliases.get(key, key)
    return value


class BaseDriverSettings(BaseSettings):
    """Defines the environment-level configuration of the driver.

    Besides the usual runtime switches (environment, debug, logging), this
    class carries the driver-wide defaults that seed the root of the settings
    hierarchy: `ServerSettings.from_config()` copies them into a server-level
    settings object, from which database and collection settings inherit.

    Values are loaded by `pydantic-settings` from `DRIVER_`-prefixed
    environment variables or a `.env` file. Every string option is matched
    case-insensitively and accepts the aliases in the module-level tables.

    Attributes:
        ENV: The runtime environment, which selects the logging profile.
        DEBUG: Log at DEBUG regardless of LOG_LEVEL.
        LOG_LEVEL: The minimum level for console log messages.
        LOG_FORMAT: Console output format, JSON lines or human-readable text.
        GUID_REPRESENTATION: Default byte order for GUID values.
        READ_PREFERENCE: Default read preference mode.
        WRITE_CONCERN: Default write acknowledgment mode.
        ASSIGN_ID_ON_INSERT: Whether inserted documents get an id assigned client-side.
    """

    ENV: Literal["development", "staging", "production"] = Field(
        default="development",
        description="The runtime environment. Selects the logging profile.",
    )
    DEBUG: bool = Field(default=False, description="Force DEBUG logging.")

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="The minimum level for log messages to be processed.",
    )
    LOG_FORMAT: Literal["json", "txt"] = Field(
        default="txt",
        description="The output format for logs. Use 'json' for production environments.",
    )

    GUID_REPRESENTATION: GuidRepresentation = Field(
        default=GuidRepresentation.CSHARP_LEGACY,
        description="Default representation for GUID values.",
    )
    READ_PREFERENCE: ReadPreferenceMode = Field(
        default=ReadPreferenceMode.PRIMARY,
        description="Default read preference mode.",
    )
    WRITE_CONCERN: Literal["acknowledged", "unacknowledged"] = Field(
        default="acknowledged",
        description="Default write acknowledgment mode.",
    )
    ASSIGN_ID_ON_INSERT: bool = Field(
        default=True,
        description="Whether the driver assigns an id to inserted documents that lack one.",
    )

    model_config = SettingsConfigDict(
        env_prefix="DRIVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("ENV", mode="before")
    @classmethod
    def normalize_env(cls, v: Any) -> Any:
        """Map dev/develop, stage and prod onto the canonical environment names."""
        return _lookup(ENV_ALIASES, v)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def normalize_log_format(cls, v: Any) -> Any:
        return _lookup(LOG_FORMAT_ALIASES, v)

    @field_validator("GUID_REPRESENTATION", "READ_PREFERENCE", mode="before")
    @classmethod
    def normalize_enum_name(cls, v: Any) -> Any:
        """Accept 'secondaryPreferred', 'secondary-preferred' or 'SECONDARY PREFERRED'.

        camelCase word boundaries, dashes and whitespace all become underscores
        before the value is matched against the enum.
        """
        if isinstance(v, str):
            snake = _CAMEL_BOUNDARY.sub("_", v.strip())
            return re.sub(r"[-\s]+", "_", snake).lower()
        return v

    @field_validator("WRITE_CONCERN", mode="before")
    @classmethod
    def normalize_write_concern(cls, v: Any) -> Any:
        """Accept booleans and the ack/safe/unack/unsafe shorthands."""
        if isinstance(v, bool):
            return "acknowledged" if v else "unacknowledged"
        return _lookup(WRITE_CONCERN_ALIASES, v)
