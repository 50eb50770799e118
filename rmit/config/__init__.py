"""Configuration Management Package"""

import json
import os
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_API_URL = "https://openrouter.ai/api/v1/chat/completions"
DEFAULT_MODEL = "openai/gpt-3.5-turbo"
API_KEY_ENV = "OPENROUTER_API_KEY"

CONFIG_KEYS = ("api_key", "api_url", "default_model")

# Keys that may not be set to an empty string
REQUIRED_KEYS = {"api_key", "api_url"}


class ConfigError(Exception):
    """Raised when a configuration key or value is rejected."""
    pass


@dataclass
class Config:
    """Resolved settings for the completion endpoint."""
    api_key: str = ""
    api_url: str = DEFAULT_API_URL
    default_model: str = DEFAULT_MODEL

    def to_dict(self) -> dict:
        return asdict(self)

    def validate(self) -> None:
        """Fill in defaults for missing endpoint settings."""
        if not self.api_url:
            self.api_url = DEFAULT_API_URL
        if not self.default_model:
            self.default_model = DEFAULT_MODEL

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    def get(self, key: str) -> str:
        _check_key(key)
        return getattr(self, key)

    def set(self, key: str, value: str) -> None:
        _check_key(key)
        if key in REQUIRED_KEYS and not value.strip():
            label = "API key" if key == "api_key" else "API URL"
            raise ConfigError(f"{label} cannot be empty")
        setattr(self, key, value)

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        # Only non-empty string values override the defaults
        filtered = {
            k: v for k, v in data.items()
            if k in CONFIG_KEYS and isinstance(v, str) and v
        }
        config = cls(**filtered)
        config.validate()
        return config


def _check_key(key: str) -> None:
    if key not in CONFIG_KEYS:
        raise ConfigError(
            f"Unknown configuration key: {key}. Valid keys are: {', '.join(CONFIG_KEYS)}"
        )


class ConfigManager:
    """Loads and saves the per-user configuration file."""

    CONFIG_FILENAME = ".rmitconfig"

    def __init__(self, path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None):
        self._path = path
        self._environ = os.environ if environ is None else environ

    @property
    def path(self) -> Path:
        return self._path or Path.home() / self.CONFIG_FILENAME

    @property
    def env_api_key(self) -> str:
        return self._environ.get(API_KEY_ENV, "")

    def load(self) -> Config:
        """Stored settings with the environment API key applied on top."""
        config = self.load_stored()
        if self.env_api_key:
            config.api_key = self.env_api_key
        return config

    def load_stored(self) -> Config:
        """Settings from the config file only, or defaults if there is none."""
        path = self.path
        if not path.exists():
            return Config()
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"Warning: Could not load {path} (using defaults): {e}", file=sys.stderr)
            return Config()
        if not isinstance(data, dict):
            print(f"Warning: Could not load {path} (using defaults): expected a JSON object", file=sys.stderr)
            return Config()
        return Config.from_dict(data)

    def save(self, config: Config) -> Path:
        config.validate()
        path = self.path
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2)
        return path


__all__ = [
    "Config",
    "ConfigError",
    "ConfigManager",
    "CONFIG_KEYS",
    "DEFAULT_API_URL",
    "DEFAULT_MODEL",
    "API_KEY_ENV",
]
