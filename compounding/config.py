"""Configuration models and loaders for the calculator backend."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

import yaml
from pydantic import BaseModel, Field

CONFIG_ENV_VAR = "COMPOUNDING_CONFIG"


class ServerParams(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(5000, ge=1, le=65535)
    debug: bool = False


class CorsParams(BaseModel):
    origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ]
    )


class LoggingParams(BaseModel):
    level: str = "INFO"


class FormDefaults(BaseModel):
    """Values the browser form is pre-filled with."""

    principal: float = 1000.0
    annualRatePercent: float = 5.0
    years: float = 10
    periodicContribution: float = 100.0
    compoundingPeriodsPerYear: int = Field(12, gt=0)
    contributionPeriodsPerYear: int = Field(12, gt=0)


class CalculatorParams(BaseModel):
    granularity: Literal["year", "period"] = "year"
    defaults: FormDefaults = Field(default_factory=FormDefaults)


class Config(BaseModel):
    server: ServerParams = Field(default_factory=ServerParams)
    cors: CorsParams = Field(default_factory=CorsParams)
    logging: LoggingParams = Field(default_factory=LoggingParams)
    calculator: CalculatorParams = Field(default_factory=CalculatorParams)


def _deep_update(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = dict(base)
    for key, value in overrides.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_update(merged[key], value)
        else:
            merged[key] = value
    return merged


def default_config_dict() -> Dict[str, Any]:
    """Return the default configuration as a dictionary."""

    return Config().model_dump()


def load_config(path: str | Path | None = None, overrides: Optional[Dict[str, Any]] = None) -> Config:
    """Load configuration from YAML (or $COMPOUNDING_CONFIG) and merge with defaults."""

    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None

    base_dict = default_config_dict()
    if path is not None:
        with Path(path).open("r", encoding="utf-8") as handle:
            user_data = yaml.safe_load(handle) or {}
        if not isinstance(user_data, dict):
            raise ValueError(f"Config YAML at {path} must map to an object")
        base_dict = _deep_update(base_dict, user_data)
    if overrides:
        base_dict = _deep_update(base_dict, overrides)
    return Config.model_validate(base_dict)


__all__ = [
    "CONFIG_ENV_VAR",
    "CalculatorParams",
    "Config",
    "CorsParams",
    "FormDefaults",
    "LoggingParams",
    "ServerParams",
    "load_config",
]
