"""
Config Module - Black Box Interface

Purpose: Application configuration management
Interface: ConfigModule.get(), ConfigModule.get_all()
Hidden: Config sources, validation logic, environment parsing

Values come from (highest precedence first) explicit overrides, environment
variables (the CLI loads a .env file into them), an optional YAML file,
then defaults.
Configuration is read-only once loaded.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_CATALOG_ROOT = Path(__file__).resolve().parent.parent.parent / "templates"


# Configuration Contract: Required and Optional Keys

REQUIRED_CONFIG_KEYS = {
    "catalog_root": "Directory holding the built-in <identifier>.xml templates",
    "template_extension": "File extension of catalog templates",
    "log_level": "Logging level (DEBUG, INFO, WARNING, ERROR)",
}

OPTIONAL_CONFIG_KEYS = {
    "connector": {
        "description": "Connector import path, 'package.module:attribute'",
        "default": None,
    },
    "enable_exception": {
        "description": "Return failures as structured outcomes instead of warnings",
        "default": False,
    },
}

ENV_KEYS = {
    "catalog_root": "XEIMPORT_CATALOG_ROOT",
    "template_extension": "XEIMPORT_TEMPLATE_EXTENSION",
    "log_level": "LOG_LEVEL",
    "connector": "XEIMPORT_CONNECTOR",
    "enable_exception": "XEIMPORT_ENABLE_EXCEPTION",
}


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


class ConfigModule:
    """Configuration management module."""

    def __init__(
        self,
        config_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ):
        """
        Load configuration.

        Args:
            config_file: Optional YAML file (default: XEIMPORT_CONFIG env var)
            overrides: Values that win over every other source

        Raises:
            ValueError: Unknown keys in the YAML file or missing required keys
        """
        config_file = config_file or os.getenv("XEIMPORT_CONFIG")
        self._config = self._defaults()
        if config_file:
            self._config.update(self._load_from_file(config_file))
        self._config.update(self._load_from_env())
        self._config.update({k: v for k, v in (overrides or {}).items() if v is not None})

        self._config["catalog_root"] = Path(self._config["catalog_root"])
        self._config["enable_exception"] = _as_bool(self._config["enable_exception"])
        self._config["log_level"] = str(self._config["log_level"]).upper()
        self._validate_required_keys()

    @staticmethod
    def _defaults() -> Dict[str, Any]:
        defaults = {
            "catalog_root": DEFAULT_CATALOG_ROOT,
            "template_extension": ".xml",
            "log_level": "INFO",
        }
        for key, spec in OPTIONAL_CONFIG_KEYS.items():
            defaults[key] = spec["default"]
        return defaults

    def _validate_required_keys(self) -> None:
        """
        Validate that all required configuration keys are present.

        Raises:
            ValueError: If required keys are missing
        """
        missing_keys = []
        for key in REQUIRED_CONFIG_KEYS:
            if key not in self._config or self._config[key] in (None, ""):
                missing_keys.append(key)

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}. "
                f"Check environment variables and the configuration file."
            )

    def _load_from_file(self, path: str) -> Dict[str, Any]:
        """Load configuration from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")

        known = set(REQUIRED_CONFIG_KEYS) | set(OPTIONAL_CONFIG_KEYS)
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys in {path}: {', '.join(unknown)}")

        # Relative catalog paths are relative to the config file
        if data.get("catalog_root"):
            root = Path(data["catalog_root"])
            if not root.is_absolute():
                data["catalog_root"] = Path(path).resolve().parent / root
        return data

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment."""
        values = {}
        for key, env_name in ENV_KEYS.items():
            value = os.getenv(env_name)
            if value:
                values[key] = value
        return values

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        """Get all configuration values."""
        return self._config.copy()

    @staticmethod
    def get_config_schema() -> Dict[str, Dict[str, Any]]:
        """
        Get the configuration schema (required and optional keys).

        Returns:
            Dictionary with 'required' and 'optional' key specifications

        Example:
            >>> schema = ConfigModule.get_config_schema()
            >>> schema['required']['log_level']
            'Logging level (DEBUG, INFO, WARNING, ERROR)'
        """
        return {
            "required": REQUIRED_CONFIG_KEYS.copy(),
            "optional": OPTIONAL_CONFIG_KEYS.copy(),
        }


__all__ = ["ConfigModule"]
