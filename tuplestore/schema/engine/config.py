import copy
import logging
import os
from typing import Dict, Any, Optional

import yaml

logger = logging.getLogger(__name__)

# Default configuration
DEFAULT_CONFIG = {
    "schema": {
        # When false, hashing a SchemaDescriptor raises UnsupportedOperationError
        "hashable": False
    },
    "logging": {
        "level": "WARNING"
    }
}


class Config:
    """Configuration manager for schema descriptors."""

    _instance = None
    _config_dict = None
    _config_file = None

    @classmethod
    def get_instance(cls) -> 'Config':
        """Get the singleton instance of Config."""
        if cls._instance is None:
            cls._instance = Config()
        return cls._instance

    def __init__(self):
        """Initialize with default configuration."""
        if Config._instance is not None:
            raise RuntimeError("Config is a singleton. Use Config.get_instance() instead.")
        self._config_dict = copy.deepcopy(DEFAULT_CONFIG)

    def load_from_file(self, config_file: str) -> None:
        """Load configuration from a YAML file."""
        if not os.path.exists(config_file):
            logger.warning(f"Config file {config_file} not found. Using default configuration.")
            return

        try:
            with open(config_file, 'r') as f:
                config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Error loading config file {config_file}: {e}")
            raise

        if not config:
            logger.warning("Empty config file. Using default configuration.")
            return

        if not isinstance(config, dict):
            logger.error(f"Config file {config_file} must contain a mapping, got {type(config).__name__}")
            raise ValueError(f"Config file {config_file} must contain a mapping")

        # Validate on a copy, swap in only on success
        merged = copy.deepcopy(self._config_dict)
        self._update_dict_recursive(merged, config)
        try:
            self._resolve_log_level(self._lookup(merged, "logging.level", "WARNING"))
        except ValueError as e:
            logger.error(f"Error loading config file {config_file}: {e}")
            raise

        self._config_dict = merged
        self._config_file = config_file
        self.apply_log_level()
        logger.info(f"Loaded configuration from {config_file}")

    def _update_dict_recursive(self, target: Dict, source: Dict) -> None:
        """Recursively update a dictionary, preserving keys not in source."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict_recursive(target[key], value)
            else:
                target[key] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation path."""
        return self._lookup(self._config_dict, path, default)

    @staticmethod
    def _lookup(config_dict: Dict, path: str, default: Any = None) -> Any:
        parts = path.split('.')
        current = config_dict

        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default

        return current

    def set(self, path: str, value: Any) -> None:
        """Set configuration value by dot-notation path."""
        parts = path.split('.')
        current = self._config_dict

        # Navigate to the parent of the target
        for part in parts[:-1]:
            if part not in current or not isinstance(current[part], dict):
                current[part] = {}
            current = current[part]

        current[parts[-1]] = value

    def reset(self) -> None:
        """Restore the default configuration."""
        self._config_dict = copy.deepcopy(DEFAULT_CONFIG)
        self._config_file = None

    def is_hashable(self) -> bool:
        """Whether SchemaDescriptor hashing is enabled."""
        return bool(self.get('schema.hashable', False))

    def get_log_level(self) -> int:
        """Get the configured level for the tuplestore logger."""
        return self._resolve_log_level(self.get('logging.level', 'WARNING'))

    @staticmethod
    def _resolve_log_level(level: Any) -> int:
        if isinstance(level, int):
            return level
        resolved = logging.getLevelName(str(level).upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level}")
        return resolved

    def apply_log_level(self) -> None:
        """Apply the configured level to the package logger."""
        logging.getLogger("tuplestore").setLevel(self.get_log_level())

    def save(self, config_file: Optional[str] = None) -> None:
        """Save current configuration to a YAML file."""
        file_path = config_file or self._config_file

        if not file_path:
            logger.warning("No config file specified for saving.")
            return

        try:
            with open(file_path, 'w') as f:
                yaml.dump(self._config_dict, f, default_flow_style=False)
        except OSError as e:
            logger.error(f"Error saving config to {file_path}: {e}")
            raise
        logger.info(f"Saved configuration to {file_path}")


# Singleton instance
config = Config.get_instance()
