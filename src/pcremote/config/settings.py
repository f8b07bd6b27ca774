"""Configuration management for pcremote.

Loads settings from a YAML configuration file with environment variable
overrides. Supports .env files.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/pcremote.yaml")
DEFAULT_BASE_URL = "http://movilserver.zapto.org:3000"


class ServerConfig(BaseModel):
    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout: float | None = Field(
        default=None, gt=0, description="Request timeout in seconds; None waits forever"
    )


class ControlConfig(BaseModel):
    repeat_interval: float = Field(default=0.1, gt=0, description="Seconds between repeated moves")
    move_step: int = Field(default=45, gt=0, description="Pointer displacement per move command")


class DisplayConfig(BaseModel):
    width: int = Field(default=480, gt=0)
    height: int = Field(default=800, gt=0)
    font_size: int = Field(default=20, gt=0)
    fps: int = Field(default=30, gt=0)
    bg_color: tuple[int, int, int] = Field(default=(255, 255, 255))
    fg_color: tuple[int, int, int] = Field(default=(51, 51, 51))
    button_color: tuple[int, int, int] = Field(default=(240, 240, 240))
    accent_color: tuple[int, int, int] = Field(default=(173, 216, 230))
    window_title: str = Field(default="pcremote")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for the pcremote client.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "PCREMOTE_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    server: ServerConfig = Field(default_factory=ServerConfig)
    control: ControlConfig = Field(default_factory=ControlConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Priority: env vars > .env file > YAML file > defaults
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    _load_dotenv()

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    _apply_env_overrides(yaml_data)

    return Settings(**yaml_data)


def _load_dotenv() -> None:
    """Load .env file into os.environ if it exists."""
    env_path = Path(".env")
    if not env_path.exists():
        return
    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip()
                if not os.environ.get(key):
                    os.environ[key] = value


def _apply_env_overrides(yaml_data: dict) -> None:
    """Apply prefixed env vars on top of the YAML data.

    pydantic-settings gives init kwargs priority over the environment, so
    the nested values read from YAML would otherwise shadow them. Values
    are handed over as init kwargs, so complex ones (lists, objects) are
    JSON-decoded here the way pydantic-settings decodes its own env source.
    """
    prefix = "PCREMOTE_"
    for name, value in os.environ.items():
        if not name.startswith(prefix) or "__" not in name:
            continue
        section, _, field = name[len(prefix):].lower().partition("__")
        if section not in Settings.model_fields:
            continue
        section_data = yaml_data.setdefault(section, {})
        if isinstance(section_data, dict):
            section_data[field] = _decode_env_value(value)


def _decode_env_value(value: str) -> Any:
    """Decode JSON arrays/objects; every other value stays a string."""
    if value.lstrip()[:1] not in ("[", "{"):
        return value
    try:
        return json.loads(value)
    except ValueError:
        return value
