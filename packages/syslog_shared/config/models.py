"""Typed configuration models for syslog-fields runtime settings."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "syslog-fields" / "fields.yaml"
DEFAULT_LOCALE = "en-US"


class FieldLimits(BaseModel):
    """Maximum byte length of each validated field kind.

    Defaults are the RFC 5424 limits for APP-NAME, HOSTNAME, MSGID, PROCID
    and SD-NAME (shared by element and parameter names).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    app_name: int = Field(default=48, ge=0)
    hostname: int = Field(default=255, ge=0)
    msgid: int = Field(default=32, ge=0)
    procid: int = Field(default=128, ge=0)
    element_name: int = Field(default=32, ge=0)
    param_name: int = Field(default=32, ge=0)

    def max_length(self, kind: str | Enum) -> int:
        """Return the configured maximum for one field kind."""
        name = str(kind.value) if isinstance(kind, Enum) else str(kind)
        if name not in type(self).model_fields:
            raise KeyError(f"unknown field kind: {name}")
        return int(getattr(self, name))


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "syslog-fields"
    environment: str = "dev"


class FieldSettings(BaseSettings):
    """Root runtime settings resolved from init/env/yaml/defaults sources."""

    model_config = SettingsConfigDict(
        env_prefix="SYSLOG_FIELDS_",
        env_nested_delimiter="__",
        extra="ignore",
        frozen=True,
        nested_model_default_partial_update=True,
        yaml_file=DEFAULT_CONFIG_PATH,
        yaml_file_encoding="utf-8",
    )

    limits: FieldLimits = Field(default_factory=FieldLimits)
    locale: str = DEFAULT_LOCALE
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("locale", mode="before")
    @classmethod
    def _normalize_locale(cls, value: object) -> object:
        """Normalize locale tags such as ``de_de`` into ``de-DE``."""
        if not isinstance(value, str):
            return value
        normalized = value.strip().replace("_", "-")
        if normalized == "":
            raise ValueError("locale must be non-empty")
        language, _, region = normalized.partition("-")
        if not region:
            return language.lower()
        return f"{language.lower()}-{region.upper()}"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > model defaults."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
        )
