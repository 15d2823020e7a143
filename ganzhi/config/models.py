"""Typed configuration models.

The config subsystem relies on pydantic to validate the YAML file and to
provide strongly-typed objects to :mod:`ganzhi.main`. The library types in
:mod:`ganzhi.combinations` never read configuration themselves.
"""
from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ganzhi.core.enums import TextFormat


class RenderConfig(BaseModel):
    """How cycle values are printed by the command-line entry point."""

    default_format: TextFormat = TextFormat.PINYIN
    columns: int = Field(10, ge=1, le=60, description="Items per line in the cycle table")
    separator: str = " "

    model_config = ConfigDict(frozen=True)


class TelemetryConfig(BaseModel):
    """Logging switches passed to :func:`ganzhi.telemetry.configure_logging`."""

    log_level: str = Field("INFO")
    log_dir: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


class AppConfig(BaseModel):
    """Top-level config composed of the render and telemetry sections."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    model_config = ConfigDict(frozen=True)


__all__ = ["AppConfig", "RenderConfig", "TelemetryConfig"]
