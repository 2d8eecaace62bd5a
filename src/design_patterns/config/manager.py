"""Unified configuration management for the application."""
from __future__ import annotations

import copy
import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from design_patterns.config.defaults import DEFAULT_CONFIG
from design_patterns.config.schemas import AppConfig, DemoConfig, LoggingConfig
from design_patterns.config.utils.env_expansion import expand_config_env_vars
from design_patterns.domain.core.exceptions import ConfigurationError
from design_patterns.infrastructure.logging.logger import get_logger


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Sources, lowest precedence first:
    - built-in defaults (``DEFAULT_CONFIG``, with ``${VAR:default}`` placeholders)
    - an optional JSON or YAML file
    - environment variable expansion

    The typed ``AppConfig`` is loaded lazily and cached. Obtain the shared
    instance through ``get_singleton(ConfigurationManager)``.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._logger = get_logger(__name__)

    @property
    def config_file(self) -> Optional[str]:
        """Path of the configuration file, if any."""
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    @property
    def logging(self) -> LoggingConfig:
        """Typed logging configuration."""
        return self.app_config.logging

    @property
    def demo(self) -> DemoConfig:
        """Typed demo configuration."""
        return self.app_config.demo

    def use_file(self, config_file: Optional[str]) -> None:
        """Point the manager at another configuration file and reload."""
        with self._lock:
            self._config_file = config_file
            self._app_config = None

    def reload(self) -> None:
        """Reload configuration from sources on next access."""
        with self._lock:
            self._app_config = None

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dotted key.

        Args:
            key: Dotted path such as ``"logging.level"``
            default: Value returned when the key does not exist

        Returns:
            Configuration value or default
        """
        value: Any = self.app_config.model_dump(mode="json")
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data = copy.deepcopy(DEFAULT_CONFIG)

        if self._config_file:
            file_data = self._load_file(self._config_file)
            config_data = self._merge(config_data, file_data)

        config_data = expand_config_env_vars(config_data)

        try:
            app_config = AppConfig.from_dict(config_data)
        except ValidationError as e:
            invalid = [".".join(str(loc) for loc in err["loc"]) for err in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", invalid) from e

        self._logger.debug(
            "Configuration loaded",
            config_file=self._config_file,
            log_level=app_config.logging.level.value,
        )
        return app_config

    def _load_file(self, config_file: str) -> Dict[str, Any]:
        """Read a JSON or YAML configuration file."""
        path = Path(config_file)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {config_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping at the top level"
            )
        return data

    @classmethod
    def _merge(cls, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge ``override`` into ``base``."""
        result = dict(base)
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(result.get(key), dict):
                result[key] = cls._merge(result[key], value)
            else:
                result[key] = value
        return result


def config_file_from_env() -> Optional[str]:
    """Configuration file named by ``DESIGN_PATTERNS_CONFIG``, if set."""
    return os.environ.get("DESIGN_PATTERNS_CONFIG") or None
