"""
Configuration management for struct rendering.

Handles loading and merging configuration from JSON files and dict
overrides, with validation for rendering settings. Configuration
never mutates a registered profile; ``apply_config`` derives a new one.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..logging_config import get_logger
from .profile import LanguageProfile
from .types import parse_scalar_kind

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


@dataclass
class RenderConfig:
    """Rendering overrides for one target language."""

    # Code style settings; None keeps the profile's indentation
    indent_size: Optional[int] = None
    use_tabs: bool = False

    # Scalar kind or named type -> literal fragment
    type_overrides: Dict[str, str] = field(default_factory=dict)

    # Lines above the opening line (decorators, attributes); None keeps the profile's
    prefix_lines: Optional[List[str]] = None

    # Custom settings (unrecognised keys end up here)
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging.

    Defaults live in the language profiles; a configuration only carries
    what differs from them.
    """

    def get_config(self, language: str, custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> RenderConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language id
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        base_config: Dict[str, Any] = {}

        # Load from file if provided
        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(self._select_section(file_config, language))

        # Apply custom overrides
        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _select_section(self, file_config: Dict[str, Any], language: str) -> Dict[str, Any]:
        """Pick the language section of a per-language file, or the whole flat file."""
        known_fields = {f.name for f in fields(RenderConfig)}
        if any(key in known_fields for key in file_config):
            return file_config

        section = file_config.get(language.lower(), {})
        if not isinstance(section, dict):
            raise ConfigError(f"Configuration section for {language} must be an object")
        return section

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == '.json':
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug(f"Loaded configuration from {path}")
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> RenderConfig:
        """Convert dictionary to RenderConfig instance."""
        # Extract known fields
        known_fields = {f.name for f in fields(RenderConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Add custom fields to the custom dict
        if custom_args:
            existing_custom = dict(config_args.get('custom', {}))
            existing_custom.update(custom_args)
            config_args['custom'] = existing_custom

        return RenderConfig(**config_args)

    def validate_config(self, config: RenderConfig) -> List[str]:
        """
        Validate a configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.indent_size is not None:
            if not isinstance(config.indent_size, int) or config.indent_size < 0:
                warnings.append(f"Invalid indent_size: {config.indent_size}")

        if not isinstance(config.type_overrides, dict):
            warnings.append("type_overrides must be an object")
        else:
            for key, value in config.type_overrides.items():
                if not isinstance(value, str) or not value:
                    warnings.append(f"Invalid type override for {key}: {value!r}")

        if config.prefix_lines is not None and (
            not isinstance(config.prefix_lines, (list, tuple))
            or not all(isinstance(line, str) for line in config.prefix_lines)
        ):
            warnings.append("prefix_lines must be a list of strings")

        for key in config.custom:
            warnings.append(f"Unknown configuration key: {key}")

        return warnings


def apply_config(profile: LanguageProfile, config: RenderConfig) -> LanguageProfile:
    """
    Derive a profile with the configuration's overrides applied.

    Raises:
        ConfigError: If the configuration is invalid
    """
    problems = [
        w for w in get_config_manager().validate_config(config)
        if not w.startswith("Unknown configuration key")
    ]
    if problems:
        raise ConfigError("; ".join(problems))

    changes: Dict[str, Any] = {}

    if config.use_tabs:
        changes["indent"] = "\t"
    elif config.indent_size is not None:
        changes["indent"] = " " * config.indent_size

    if config.type_overrides:
        type_table = dict(profile.type_table)
        boxed_table = dict(profile.boxed_table)
        named_overrides = dict(profile.named_overrides)
        for key, value in config.type_overrides.items():
            kind = parse_scalar_kind(key)
            if kind is not None:
                type_table[kind] = value
                boxed_table.pop(kind, None)
            else:
                named_overrides[key] = value
        changes.update(
            type_table=type_table,
            boxed_table=boxed_table,
            named_overrides=named_overrides,
        )

    if config.prefix_lines is not None:
        changes["prefix_lines"] = tuple(config.prefix_lines)

    if not changes:
        return profile
    return profile.with_overrides(**changes)


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(language: str, custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> RenderConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language id
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)


# Example configuration file for reference
EXAMPLE_CONFIG = {
    "python": {
        "prefix_lines": ["@dataclass_json", "@dataclass"],
    },
    "typescript": {
        "indent_size": 4,
        "type_overrides": {"int64": "bigint", "DateTime": "Date"},
    },
    "rust": {
        "prefix_lines": ["#[derive(Debug, Clone, Serialize, Deserialize)]"],
    },
}
