"""Configuration loading and validation package."""

from .loader import DEFAULT_CONFIG_PATH, load_app_config, load_app_config_or_default
from .models import AppConfig, RenderConfig, TelemetryConfig

__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "RenderConfig",
    "TelemetryConfig",
    "load_app_config",
    "load_app_config_or_default",
]
