# src/alongline/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/alongline/config/defaults.yaml`, then optionally overridden by:
- environment variables (e.g., `ALONGLINE_LOG_LEVEL`, `ALONGLINE_DEFAULT_UNITS`)
- an external YAML file via `ALONGLINE_CONFIG_PATH`

Design rule:
- Tuning knobs (probe length, default units) live in YAML, not hard-coded in geometry code.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from alongline.core.env import load_dotenv_if_present
from alongline.core.geo import Units


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `alongline.config`."""
    text = resources.files("alongline.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "AlongLine"
    log_level: str = "INFO"


class ProjectionSettings(BaseModel):
    default_units: Units = "miles"
    probe_distance: float = Field(1000.0, gt=0)
    probe_units: Units = "miles"


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    projection: ProjectionSettings = Field(default_factory=ProjectionSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("ALONGLINE_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    units = os.getenv("ALONGLINE_DEFAULT_UNITS")
    if units:
        data.setdefault("projection", {})["default_units"] = units.strip().lower()

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("ALONGLINE_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
