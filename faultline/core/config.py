"""Configuration management for faultline.

Preferences are read from ``~/.faultline.json`` and can be overridden per
process with ``FAULTLINE_*`` environment variables.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from faultline.core.errors import ConfigError
from faultline.core.source_window import CONTEXT_LINES
from faultline.core.theme import BUILTIN_THEMES
from faultline.utils.log import get_logger


logger = get_logger()

# Environment variable -> config field.
ENV_OVERRIDES: Dict[str, str] = {
    "FAULTLINE_COLOR": "color",
    "FAULTLINE_THEME": "theme",
    "FAULTLINE_CONTEXT_LINES": "context_lines",
}


class FaultlineConfig(BaseModel):
    """User preferences for rendering diagnostics."""

    color: Literal["auto", "always", "never"] = "auto"
    theme: str = "default"
    # Source lines shown on each side of an anchored line.
    context_lines: int = Field(default=CONTEXT_LINES, ge=0)
    show_tracebacks: bool = False
    # Show anchored paths relative to the working directory when possible.
    relative_paths: bool = True

    @field_validator("theme")
    @classmethod
    def _known_theme(cls, value: str) -> str:
        if value not in BUILTIN_THEMES:
            raise ValueError(
                f"unknown theme {value!r} (available: {', '.join(BUILTIN_THEMES)})"
            )
        return value


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value is not None and value.strip():
            overrides[field_name] = value.strip()
    return overrides


class ConfigManager:
    """Loads, caches and saves the faultline configuration."""

    def __init__(self) -> None:
        self.config_path = Path.home() / ".faultline.json"
        self._config: Optional[FaultlineConfig] = None

    def _load_file(self) -> FaultlineConfig:
        if not self.config_path.exists():
            logger.debug(
                "[config] Config file not found; using defaults",
                extra={"path": str(self.config_path)},
            )
            return FaultlineConfig()
        try:
            data = json.loads(self.config_path.read_text(encoding="utf-8"))
            config = FaultlineConfig(**data)
        except (
            json.JSONDecodeError,
            OSError,
            UnicodeDecodeError,
            ValueError,
            TypeError,
        ) as e:
            logger.warning(
                "Error loading config: %s: %s",
                type(e).__name__,
                e,
                extra={"path": str(self.config_path)},
            )
            return FaultlineConfig()
        logger.debug("[config] Loaded configuration", extra={"path": str(self.config_path)})
        return config

    def get_config(self) -> FaultlineConfig:
        """Load and return the configuration, environment overrides applied."""
        if self._config is None:
            config = self._load_file()
            overrides = _env_overrides()
            if overrides:
                try:
                    config = FaultlineConfig(**{**config.model_dump(), **overrides})
                except ValidationError as e:
                    logger.warning(
                        "Ignoring invalid environment overrides: %s",
                        e,
                        extra={"overrides": overrides},
                    )
            self._config = config
        return self._config

    def save_config(self, config: FaultlineConfig) -> None:
        """Save the configuration."""
        self._config = config
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(config.model_dump_json(indent=2), encoding="utf-8")
        logger.debug("[config] Saved configuration", extra={"path": str(self.config_path)})

    def update(self, **changes: Any) -> FaultlineConfig:
        """Validate ``changes`` against the current config and save the result.

        Raises:
            ConfigError: a value is invalid.
        """
        current = self.get_config()
        try:
            updated = FaultlineConfig(**{**current.model_dump(), **changes})
        except ValidationError as e:
            raise ConfigError(str(e)) from e
        self.save_config(updated)
        return updated


# Global instance
config_manager = ConfigManager()


def get_config() -> FaultlineConfig:
    """Get the configuration."""
    return config_manager.get_config()


def save_config(config: FaultlineConfig) -> None:
    """Save the configuration."""
    config_manager.save_config(config)


__all__ = [
    "ENV_OVERRIDES",
    "FaultlineConfig",
    "ConfigManager",
    "config_manager",
    "get_config",
    "save_config",
]
