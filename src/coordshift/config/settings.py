# src/coordshift/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/coordshift/config/defaults.yaml`, then optionally overridden by:
- environment variables (e.g., `COORDSHIFT_LOG_LEVEL`, `COORDSHIFT_SOLVER_MAX_ITERATIONS`)
- an external YAML file via `COORDSHIFT_CONFIG_PATH`

Design rule:
- The numerical core never reads settings; it uses its own constants as defaults.
  Settings only feed the CLI and the `coordshift.converter` façade.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from coordshift.core.env import load_dotenv_if_present
from coordshift.core.regional import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE_DEG


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `coordshift.config`."""
    text = resources.files("coordshift.config").joinpath(filename).read_text(encoding="utf-8")
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
    name: str = "coordshift"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value


class SolverSettings(BaseModel):
    """Knobs for the GCJ-02 -> WGS-84 fixed-point inverse."""

    tolerance_deg: float = Field(DEFAULT_TOLERANCE_DEG, gt=0)
    max_iterations: int = Field(DEFAULT_MAX_ITERATIONS, ge=1, le=1000)


class InputSettings(BaseModel):
    # "propagate": NaN/inf flow through and come out as NaN/inf.
    # "reject": raise NonFiniteCoordinateError before converting.
    non_finite: Literal["propagate", "reject"] = "propagate"


class OutputSettings(BaseModel):
    precision: int = Field(6, ge=0, le=17)


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    solver: SolverSettings = Field(default_factory=SolverSettings)
    input: InputSettings = Field(default_factory=InputSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload.

    Only a small whitelist is honored; values are validated by Pydantic afterwards.
    """
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("COORDSHIFT_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    max_iterations = os.getenv("COORDSHIFT_SOLVER_MAX_ITERATIONS")
    if max_iterations:
        data.setdefault("solver", {})["max_iterations"] = max_iterations

    tolerance = os.getenv("COORDSHIFT_SOLVER_TOLERANCE")
    if tolerance:
        data.setdefault("solver", {})["tolerance_deg"] = tolerance

    non_finite = os.getenv("COORDSHIFT_NON_FINITE")
    if non_finite:
        data.setdefault("input", {})["non_finite"] = non_finite.strip().lower()

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("COORDSHIFT_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
