"""
Configuration management for action code generation.

Handles loading and merging configuration from JSON files and command
line overrides, providing defaults and validation for generator settings.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .errors import GeneratorError


class ConfigError(GeneratorError):
    """Exception raised for configuration-related errors."""

    pass


_STRING_SETTINGS = {"redux_module", "actions_module", "actions_alias"}
_OPTIONAL_STRING_SETTINGS = {"feature", "output_file"}


@dataclass
class GeneratorConfig:
    """Settings for one generation run."""

    # Run-level feature label, prefixes enum values and sets metadata["feature"]
    feature: Optional[str] = None

    # Modules imported at the top of the generated file
    redux_module: str = "redux"
    actions_module: str = "./actions"
    actions_alias: str = "actions"

    # Indent used when serializing metadata objects
    metadata_indent: int = 2

    # Output settings
    output_file: Optional[str] = None

    # Unrecognised keys from config files
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        self._defaults: Dict[str, Any] = {
            "redux_module": "redux",
            "actions_module": "./actions",
            "actions_alias": "actions",
            "metadata_indent": 2,
        }

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Overrides applied last (e.g. from CLI flags)
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config = self._defaults.copy()

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(
                {key: value for key, value in custom_config.items() if value is not None}
            )

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        self._check_types(config_args)

        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    @staticmethod
    def _check_types(config_args: Dict[str, Any]) -> None:
        """Raise ConfigError for settings of the wrong JSON type."""
        for key, value in config_args.items():
            if key in _STRING_SETTINGS:
                expected = "a string"
                valid = isinstance(value, str)
            elif key in _OPTIONAL_STRING_SETTINGS:
                expected = "a string or null"
                valid = value is None or isinstance(value, str)
            elif key == "metadata_indent":
                expected = "an integer"
                # bool is an int subclass
                valid = isinstance(value, int) and not isinstance(value, bool)
            elif key == "custom":
                expected = "an object"
                valid = isinstance(value, dict)
            else:
                continue

            if not valid:
                raise ConfigError(
                    f"Configuration value '{key}' must be {expected}, got {value!r}"
                )

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.feature is not None:
            if not config.feature.strip():
                warnings.append("Empty feature label is ignored")
            if "]" in config.feature or "\n" in config.feature:
                warnings.append(f"Feature label contains ']' or a newline: {config.feature!r}")

        if not config.actions_alias.isidentifier():
            warnings.append(f"Invalid import alias: {config.actions_alias}")

        if not isinstance(config.metadata_indent, int) or config.metadata_indent < 1:
            warnings.append(f"Invalid metadata_indent: {config.metadata_indent}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Overrides applied after the config file
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return get_config_manager().get_config(custom_config, config_file)
