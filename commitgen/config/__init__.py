"""Configuration Management Package"""

import json
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv


API_KEY_ENV = "GEMINI_API_KEY"


@dataclass
class Config:
    """User configuration with sensible defaults."""
    model: Optional[str] = None
    style: str = "conventional"
    include_body: bool = True
    max_subject_length: int = 72
    timeout: float = 30.0
    temperature: float = 0.0

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning. The style is
        left as given; an unknown style is an error when the CLI resolves it.
        """
        warnings = []
        defaults = Config()

        if not isinstance(self.include_body, bool):
            warnings.append(f"Invalid include_body '{self.include_body}', using {str(defaults.include_body).lower()}")
            self.include_body = defaults.include_body

        if not _is_number(self.max_subject_length, int) or self.max_subject_length <= 0:
            warnings.append(f"Invalid max_subject_length '{self.max_subject_length}', using {defaults.max_subject_length}")
            self.max_subject_length = defaults.max_subject_length

        if not _is_number(self.timeout, (int, float)) or self.timeout <= 0:
            warnings.append(f"Invalid timeout '{self.timeout}', using {defaults.timeout:g}")
            self.timeout = defaults.timeout

        if not _is_number(self.temperature, (int, float)) or not 0.0 <= self.temperature <= 2.0:
            warnings.append(f"Invalid temperature '{self.temperature}', using {defaults.temperature:g}")
            self.temperature = defaults.temperature

        return warnings

    def apply_env(self, environ=None) -> list[str]:
        """Apply GCM_* environment overrides. Returns warnings for unusable values."""
        environ = os.environ if environ is None else environ
        warnings = []
        if environ.get("GCM_MODEL"):
            self.model = environ["GCM_MODEL"]
        if environ.get("GCM_STYLE"):
            self.style = environ["GCM_STYLE"]
        if environ.get("GCM_TIMEOUT"):
            try:
                self.timeout = float(environ["GCM_TIMEOUT"])
            except ValueError:
                warnings.append(f"Ignoring GCM_TIMEOUT='{environ['GCM_TIMEOUT']}' (not a number)")
        return warnings + self.validate()

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


def _is_number(value, types) -> bool:
    return isinstance(value, types) and not isinstance(value, bool)


class ConfigManager:
    """Manages loading and saving configuration."""

    CONFIG_FILENAME = ".gcmrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if path.exists():
                self._config = self._load_from_file(path)
                self._config_path = path
                return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()
        if not isinstance(data, dict):
            print(f"Warning: Could not load {path}: expected a JSON object", file=sys.stderr)
            return Config()
        return Config.from_dict(data)

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


def load_api_key(dotenv_path: Optional[Path] = None) -> Optional[str]:
    """Read GEMINI_API_KEY, loading a .env file first. Existing env vars win."""
    load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)
    key = os.environ.get(API_KEY_ENV, "").strip()
    return key or None


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "get_config_path",
    "load_api_key",
    "API_KEY_ENV",
]
