"""Simple configuration system for bankshot.

A minimal configuration loader that:
- Loads from a single JSON file (default: ./config.json)
- Applies BANKSHOT_* environment variable overrides
- Provides dot-notation access (e.g., config.get("table.width", 1118.0))
- Validates the merged data against the pydantic schemas on demand
- Is a singleton instance
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from bankshot.core.validation import BankShotError

from .schemas import ApplicationConfig

logger = logging.getLogger(__name__)


class ConfigurationError(BankShotError):
    """Raised when configuration cannot be loaded or fails validation."""

    pass


def _parse_env_value(raw: str) -> Any:
    """Interpret an environment value as JSON when possible, else as a string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def load_environment(
    environ: Optional[dict[str, str]] = None,
    prefix: str = "BANKSHOT_",
    nested_separator: str = "__",
) -> dict[str, Any]:
    """Load configuration overrides from environment variables.

    ``BANKSHOT_TABLE__WIDTH=1270`` becomes ``{"table": {"width": 1270}}``.

    Args:
        environ: Mapping to read from (defaults to os.environ)
        prefix: Variable prefix to filter on
        nested_separator: Separator for nested keys

    Returns:
        Configuration dictionary with nested structure
    """
    environ = os.environ if environ is None else environ
    result: dict[str, Any] = {}

    for name in sorted(environ):
        if not name.startswith(prefix):
            continue
        path = [part.lower() for part in name[len(prefix) :].split(nested_separator)]
        if not all(path):
            logger.warning(f"Ignoring malformed environment variable {name}")
            continue

        target = result
        for key in path[:-1]:
            if not isinstance(target.get(key), dict):
                target[key] = {}
            target = target[key]
        target[path[-1]] = _parse_env_value(environ[name])

    return result


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class Config:
    """Simple configuration class with dot-notation access support.

    This is a singleton that loads configuration from a specified file
    (default: ./config.json relative to the working directory), overlays
    environment overrides and provides get/set methods with default value
    fallbacks.

    Example:
        config = Config()
        width = config.get("table.width", 1118.0)
        settings = config.settings()
    """

    _instance: Optional["Config"] = None

    ENV_PREFIX = "BANKSHOT_"
    NESTED_SEPARATOR = "__"

    _config_data: dict[str, Any]
    _config_file: Optional[Path]
    _loaded: bool

    def __new__(cls) -> "Config":
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._config_data = {}
            instance._config_file = None
            instance._loaded = False
            cls._instance = instance
        return cls._instance

    @classmethod
    def set_config_file(cls, config_path: str | Path) -> "Config":
        """Set the configuration file path and load it.

        Args:
            config_path: Path to the configuration file

        Returns:
            The singleton instance
        """
        instance = cls()
        instance._config_file = Path(config_path).resolve()
        instance._load_config()
        return instance

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next Config() starts from scratch."""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        if self._config_file is None:
            self._config_file = Path(os.getcwd()) / "config.json"
        return self._config_file

    def _load_config(self) -> None:
        """Load configuration from the config file and the environment.

        Raises:
            ConfigurationError: If the file exists but is not valid JSON
        """
        path = self.config_file
        file_data: dict[str, Any] = {}

        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    file_data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.error(f"Error loading config from {path}: {e}")
                raise ConfigurationError(f"Cannot read configuration {path}: {e}") from e
            if not isinstance(file_data, dict):
                raise ConfigurationError(
                    f"Configuration {path} must contain a JSON object"
                )
            logger.info(f"Loaded configuration from {path}")
        else:
            logger.debug(f"Config file not found: {path}, using defaults")

        env_data = load_environment(
            prefix=self.ENV_PREFIX, nested_separator=self.NESTED_SEPARATOR
        )
        if env_data:
            logger.debug(f"Applying environment overrides: {sorted(env_data)}")

        self._config_data = merge_dicts(file_data, env_data)
        self._loaded = True

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self._load_config()

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation.

        Args:
            key: Dot-separated key path (e.g., "table.width")
            default: Default value if key not found

        Returns:
            Configuration value or default if not found
        """
        self._ensure_loaded()

        value: Any = self._config_data
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """Set configuration value using dot notation (in memory).

        Call save() to persist.
        """
        self._ensure_loaded()

        keys = key.split(".")
        data = self._config_data
        for k in keys[:-1]:
            if k not in data or not isinstance(data[k], dict):
                data[k] = {}
            data = data[k]
        data[keys[-1]] = value

    def save(self) -> None:
        """Write the current configuration to the config file."""
        path = self.config_file
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self._config_data, f, indent=2, ensure_ascii=False)
        logger.debug(f"Saved configuration to {path}")

    def reload(self) -> None:
        """Reload configuration from file and environment."""
        self._load_config()

    def get_all(self) -> dict[str, Any]:
        """Get entire configuration as dictionary."""
        self._ensure_loaded()
        return copy.deepcopy(self._config_data)

    def settings(self) -> ApplicationConfig:
        """Validate the configuration against the application schema.

        Raises:
            ConfigurationError: If validation fails
        """
        try:
            return ApplicationConfig.model_validate(self.get_all())
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


__all__ = [
    "Config",
    "ConfigurationError",
    "load_environment",
    "merge_dicts",
]
