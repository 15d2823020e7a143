from __future__ import annotations

import pytest
from pydantic import ValidationError

from ganzhi.config.models import AppConfig, RenderConfig, TelemetryConfig
from ganzhi.core.enums import TextFormat


def test_app_config_should_apply_defaults() -> None:
    config = AppConfig()
    assert config.render == RenderConfig()
    assert config.render.default_format is TextFormat.PINYIN
    assert config.render.separator == " "
    assert config.telemetry == TelemetryConfig()


def test_render_config_should_validate_columns() -> None:
    assert RenderConfig(columns=60).columns == 60
    with pytest.raises(ValidationError):
        RenderConfig(columns=0)
    with pytest.raises(ValidationError):
        RenderConfig(columns=61)


def test_render_config_should_accept_format_codes() -> None:
    assert RenderConfig(default_format="C").default_format is TextFormat.CHINESE
    with pytest.raises(ValidationError):
        RenderConfig(default_format="chinese")


def test_telemetry_config_should_normalize_level() -> None:
    assert TelemetryConfig(log_level="warning").log_level == "WARNING"
    with pytest.raises(ValidationError):
        TelemetryConfig(log_level="LOUD")


def test_config_models_should_be_frozen() -> None:
    config = AppConfig()
    with pytest.raises(ValidationError):
        config.render = RenderConfig(columns=5)  # type: ignore[misc]
