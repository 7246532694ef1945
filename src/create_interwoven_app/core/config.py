"""Configuration loading for create-interwoven-app."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from create_interwoven_app.chains.registry import MAINNET_REGISTRY_URL, TESTNET_REGISTRY_URL

from .templates import TEMPLATES_ROOT

HOME_ENV_VAR = "CREATE_INTERWOVEN_APP_HOME"
CONFIG_FILENAME = "config.toml"

# environment variable -> config field
ENV_OVERRIDES: dict[str, str] = {
    "CREATE_INTERWOVEN_APP_TEMPLATES_DIR": "templates_dir",
    "CREATE_INTERWOVEN_APP_MAINNET_REGISTRY_URL": "mainnet_registry_url",
    "CREATE_INTERWOVEN_APP_TESTNET_REGISTRY_URL": "testnet_registry_url",
    "CREATE_INTERWOVEN_APP_INSTALL_TIMEOUT": "install_timeout",
}


class ConfigurationError(RuntimeError):
    """Raised when configuration loading fails."""


class ScaffoldConfig(BaseModel):
    """Settings for a scaffolding run."""

    default_template: str = "default"
    templates_dir: Path = TEMPLATES_ROOT
    mainnet_registry_url: str = MAINNET_REGISTRY_URL
    testnet_registry_url: str = TESTNET_REGISTRY_URL
    registry_timeout: float = Field(default=10.0, gt=0)
    install_command: str = "npm"
    install_args: list[str] = Field(default_factory=lambda: ["install", "--legacy-peer-deps"])
    install_timeout: float = Field(default=600.0, gt=0)

    @field_validator("templates_dir", mode="before")
    @classmethod
    def _expand_templates_dir(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Path(value).expanduser()
        return value

    @field_validator("install_command")
    @classmethod
    def _check_install_command(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("install_command cannot be empty")
        return value.strip()


def default_config_dir(environ: Mapping[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ
    home = env.get(HOME_ENV_VAR)
    return Path(home).expanduser() if home else Path.home() / ".create-interwoven-app"


def load_config(path: Path | None = None, *, environ: Mapping[str, str] | None = None) -> ScaffoldConfig:
    """Load settings from TOML, then apply environment overrides.

    A missing file is not an error; defaults are used instead.
    """
    env = os.environ if environ is None else environ
    config_path = path or default_config_dir(env) / CONFIG_FILENAME
    data = _read_config_dict(config_path)
    for variable, field_name in ENV_OVERRIDES.items():
        value = env.get(variable)
        if value:
            data[field_name] = value
    try:
        return ScaffoldConfig(**data)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


def _read_config_dict(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        return tomllib.loads(path.read_text())
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Failed to load config from {path}: {exc}") from exc


__all__ = [
    "CONFIG_FILENAME",
    "ConfigurationError",
    "ENV_OVERRIDES",
    "HOME_ENV_VAR",
    "ScaffoldConfig",
    "default_config_dir",
    "load_config",
]
