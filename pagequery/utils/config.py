"""
Configuration utility for pagequery.
"""

import copy
import json
import logging
import os
import threading
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PAGEQUERY_CONFIG"

DEFAULTS: Dict[str, Any] = {
    "logging": {
        "console_level": "WARNING",
        "file_level": "DEBUG",
        "file": None
    },
    "selector": {
        "cache_size": 256
    },
    "parser": {
        "keep_parse_errors": True
    }
}


class Config:
    """Configuration manager for pagequery."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the config file. Falls back to the
                PAGEQUERY_CONFIG environment variable; with neither set
                only the defaults are used.
        """
        if not config_path:
            config_path = os.environ.get(CONFIG_ENV_VAR) or None

        self.config_path = config_path
        self.config: Dict[str, Any] = {}
        self._lock = threading.Lock()

        self.load()

        logger.debug(f"Configuration initialized (config_path: {config_path})")

    def load(self) -> None:
        """Load configuration from file, layered over the defaults."""
        self._set_defaults()
        if not self.config_path:
            return

        try:
            if os.path.exists(self.config_path):
                with open(self.config_path, 'r') as f:
                    loaded = json.load(f)
                with self._lock:
                    _merge(self.config, loaded)
                logger.debug(f"Configuration loaded from {self.config_path}")
            else:
                logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            self._set_defaults()

    def save(self) -> None:
        """Save configuration to file."""
        if not self.config_path:
            logger.warning("No configuration path set, not saving")
            return

        with self._lock:
            config_copy = copy.deepcopy(self.config)

        config_dir = os.path.dirname(self.config_path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(self.config_path, 'w') as f:
            json.dump(config_copy, f, indent=4)

        logger.debug(f"Configuration saved to {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'selector.cache_size')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return default
                config = config[part]

            return config.get(parts[-1], default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (can be nested using dots)
            value: Configuration value
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if not isinstance(config.get(part), dict):
                    config[part] = {}
                config = config[part]

            config[parts[-1]] = value

    def remove(self, key: str) -> bool:
        """
        Remove a configuration value.

        Args:
            key: Configuration key

        Returns:
            bool: True if key was removed
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return False
                config = config[part]

            if parts[-1] in config:
                del config[parts[-1]]
                return True
            return False

    def get_all(self) -> Dict[str, Any]:
        """Get a copy of all configuration values."""
        with self._lock:
            return copy.deepcopy(self.config)

    def _set_defaults(self) -> None:
        """Set default configuration values."""
        with self._lock:
            self.config = copy.deepcopy(DEFAULTS)


def _merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = value


_config: Optional[Config] = None
_config_lock = threading.Lock()


def get_config() -> Config:
    """Return the process-wide configuration, loading it on first use."""
    global _config
    with _config_lock:
        if _config is None:
            _config = Config()
        return _config
