"""
Configuration management for the Flomo importer.

This module handles loading and accessing configuration values from config.yaml.
It provides a centralized way to manage logging, workspace and derived-view
settings together with the default import options.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional
import logging

from .models import ImportSettings


class ConfigManager:
    """
    Manages configuration loading and access for the Flomo importer.
    """

    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file
        """
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file, layered over the defaults."""
        self._config = self._get_default_config()

        if not self.config_path.exists():
            logging.debug(f"Configuration file not found: {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logging.error(f"Failed to load configuration: {e}")
            return

        if not isinstance(loaded, dict):
            logging.error(f"Ignoring configuration {self.config_path}: expected a mapping")
            return

        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(self._config.get(section), dict):
                self._config[section].update(values)
            else:
                self._config[section] = values

        logging.info(f"Configuration loaded from {self.config_path}")

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values as fallback."""
        return {
            "paths": {
                "log_file": "flomo_importer.log",
                "workspace_root": None,
                "vault_config_dir": ".obsidian"
            },
            "logging": {
                "level": "INFO",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
            "views": {
                "moments_limit": 50,
                "canvas_limit": 50,
                "canvas_columns": 8
            },
            "import": {
                "flomoTarget": "flomo",
                "memoTarget": "memos",
                "mergeByDate": False,
                "expOptionAllowbilink": True,
                "optionsMoments": "copy_with_link",
                "optionsCanvas": "copy_with_link",
                "canvasSize": "M"
            }
        }

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key_path: Dot-separated path to the configuration value (e.g., "views.moments_limit")
            default: Default value if key is not found

        Returns:
            The configuration value

        Examples:
            config.get("logging.level")  # Returns "INFO"
            config.get("import.canvasSize")  # Returns "M"
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Name of the configuration section

        Returns:
            Dictionary containing the section configuration
        """
        return self._config.get(section, {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    def import_settings(self, **overrides: Any) -> ImportSettings:
        """
        Build validated import settings from the ``import`` section.

        Args:
            **overrides: Option values that win over the file, by alias or
                field name; ``None`` values are ignored

        Raises:
            InvalidInputError: if the combined options are not valid
        """
        data = dict(self.get_section("import"))
        for key, value in overrides.items():
            if value is None:
                continue
            field = ImportSettings.model_fields.get(key)
            data[field.alias if field and field.alias else key] = value
        return ImportSettings.from_mapping(data)

    # Convenience properties for commonly used values

    @property
    def log_filename(self) -> str:
        """Get log file name."""
        return self.get("paths.log_file", "flomo_importer.log")

    @property
    def workspace_root(self) -> Optional[str]:
        """Get the directory under which run workspaces are created."""
        return self.get("paths.workspace_root")

    @property
    def vault_config_dir(self) -> str:
        """Get the vault settings folder name."""
        return self.get("paths.vault_config_dir", ".obsidian")

    @property
    def moments_limit(self) -> int:
        """Get how many memos the Moments digest shows."""
        return int(self.get("views.moments_limit", 50))

    @property
    def canvas_limit(self) -> int:
        """Get how many memos the canvas lays out."""
        return int(self.get("views.canvas_limit", 50))

    @property
    def canvas_columns(self) -> int:
        """Get the number of canvas grid columns."""
        return int(self.get("views.canvas_columns", 8))


# Global configuration instance
config = ConfigManager()


def get_config() -> ConfigManager:
    """
    Get the global configuration instance.

    Returns:
        The global ConfigManager instance
    """
    return config
