"""YAML loader for the config subsystem.

The file has two optional root-level sections, ``render`` and ``telemetry``,
validated by :class:`~ganzhi.config.models.AppConfig`. Missing sections fall
back to the model defaults.
"""
from __future__ import annotations

from pathlib import Path
from typing import Mapping

import yaml

from ganzhi.core.errors import ConfigurationError

from .models import AppConfig

DEFAULT_CONFIG_PATH = Path("config") / "ganzhi.yml"


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        try:
            data = yaml.safe_load(fp) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"YAML root must be a mapping in {path}")
    return data


def load_app_config(path: Path | str = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load and validate the YAML config at ``path``."""

    data = _read_yaml(Path(path))
    return AppConfig.model_validate(data)


def load_app_config_or_default(path: Path | str | None = None) -> AppConfig:
    """Load ``path`` if given, else the default file if it exists, else defaults.

    An explicitly given path must exist; only the implicit default is optional.
    """

    if path is not None:
        return load_app_config(path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_app_config(DEFAULT_CONFIG_PATH)
    return AppConfig()


__all__ = ["DEFAULT_CONFIG_PATH", "load_app_config", "load_app_config_or_default"]
