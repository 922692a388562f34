"""
================================================================================
Fluentverify Common Utilities
================================================================================

This module provides shared configuration management and logging setup
for the verification framework and its page objects.

Exports:
    - GlobalConfig: Singleton configuration manager
    - get_config: Convenience function to get configuration values
    - set_config: Convenience function to set configuration values
    - init_logger: Function to initialize loguru logger with standard settings

Usage:
    from fluentverify.common import get_config, init_logger

    init_logger()
    browser = get_config("browser.name", "chrome")

================================================================================
"""

import copy
import os
import sys
from typing import Any, Dict, Optional

import yaml
from loguru import logger

# ============================================================
# Configuration Management
# ============================================================

DEFAULT_CONFIG: Dict[str, Any] = {
    "browser": {
        "name": "chrome",
        "headless": True,
        "implicit_wait": 10,
        "window_size": "1920,1080",
    },
    "ui": {
        "base_url": "https://demos.telerik.com/kendo-ui",
    },
    "logging": {
        "level": "INFO",
    },
}

# Environment variable -> dot-notation key
ENV_MAPPING: Dict[str, str] = {
    "BROWSER": "browser.name",
    "HEADLESS": "browser.headless",
    "IMPLICIT_WAIT": "browser.implicit_wait",
    "UI_BASE_URL": "ui.base_url",
    "LOG_LEVEL": "logging.level",
    "LOG_FILE": "logging.file",
}


def _coerce(value: str) -> Any:
    """Convert an environment string into bool/int where it looks like one."""
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "on"):
        return True
    if lowered in ("false", "no", "off"):
        return False
    try:
        return int(value)
    except ValueError:
        return value


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merges two dictionaries, with override taking precedence.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class GlobalConfig:
    """
    Singleton class to manage global configuration.

    Loads settings from defaults, an optional YAML configuration file and
    environment variables. Environment variables take precedence over
    file-based configuration.
    """
    _instance: Optional["GlobalConfig"] = None
    _config: Dict[str, Any] = {}
    _initialized: bool = False

    def __new__(cls) -> "GlobalConfig":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._load_configs()
        self._initialized = True

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next access reloads configuration."""
        cls._instance = None
        cls._config = {}
        cls._initialized = False

    def _load_configs(self) -> None:
        """
        Loads configurations from YAML files and environment variables.
        """
        config = copy.deepcopy(DEFAULT_CONFIG)

        # Look for config in multiple locations
        config_paths = [
            os.getenv("FLUENTVERIFY_CONFIG", ""),
            "config/config.yaml",
            os.path.join(os.path.dirname(__file__), "..", "..", "config", "config.yaml"),
        ]

        for config_path in config_paths:
            if config_path and os.path.exists(config_path):
                try:
                    with open(config_path, "r", encoding="utf-8") as f:
                        file_config = yaml.safe_load(f) or {}
                    config = _deep_merge(config, file_config)
                    logger.debug(f"Loaded configuration from {config_path}")
                    break
                except (OSError, yaml.YAMLError) as e:
                    logger.warning(f"Failed to load config from {config_path}: {e}")

        self._config = config

        # Override with environment variables
        for env_key, config_key in ENV_MAPPING.items():
            if env_key in os.environ:
                self._set_nested(config_key, _coerce(os.environ[env_key]))

    def _set_nested(self, key: str, value: Any) -> None:
        """
        Sets a nested configuration value using dot notation.
        """
        keys = key.split(".")
        current = self._config
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                current[k] = {}
            current = current[k]
        current[keys[-1]] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Retrieves a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "browser.name")
            default: Default value if key is not found

        Returns:
            Configuration value or default
        """
        keys = key.split(".")
        value = self._config
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """
        Sets a configuration value.

        Args:
            key: Configuration key (e.g., "browser.headless")
            value: Value to set
        """
        self._set_nested(key, value)

    def get_all(self) -> Dict[str, Any]:
        """
        Returns a copy of the entire configuration dictionary.
        """
        return self._config.copy()


def get_config(key: str, default: Any = None) -> Any:
    """
    Convenience function to get a configuration value.

    Args:
        key: Configuration key using dot notation
        default: Default value if not found

    Returns:
        Configuration value or default

    Example:
        wait = get_config("browser.implicit_wait", 10)
    """
    return GlobalConfig().get(key, default)


def set_config(key: str, value: Any) -> None:
    """
    Convenience function to set a configuration value.

    Args:
        key: Configuration key using dot notation
        value: Value to set
    """
    GlobalConfig().set(key, value)


# ============================================================
# Logging Setup
# ============================================================

_logger_initialized = False


def init_logger(
    level: str = None,
    format_string: str = None,
    log_file: str = None
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_string: Log format string. Uses default if not provided.
        log_file: Optional file path to write logs to.

    Example:
        init_logger()  # Use defaults
        init_logger(level="DEBUG", log_file="logs/verify.log")
    """
    global _logger_initialized

    if _logger_initialized:
        return

    # Remove default handler
    logger.remove()

    level = str(level or get_config("logging.level", "INFO")).upper()
    format_string = format_string or get_config(
        "logging.format",
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
    )

    log_file = log_file or get_config("logging.file")
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        logger.add(
            log_file,
            format=format_string,
            level=level,
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug("Logger initialized successfully")


# Export public API
__all__ = [
    "GlobalConfig",
    "get_config",
    "set_config",
    "init_logger",
]
