"""Configuration management for pcremote.

Loads and validates YAML-based configuration with Pydantic models.
Environment variables override file values.
"""

from pcremote.config.settings import DEFAULT_BASE_URL, Settings, load_settings

__all__ = ["DEFAULT_BASE_URL", "Settings", "load_settings"]
