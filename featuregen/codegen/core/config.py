"""
Configuration for the single file generator.

Handles loading and merging configuration from JSON files on top of the
defaults.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Settings used when writing diagnostics into generated files."""

    # Test framework named in dependency diagnostics
    framework_name: str = "SpecFlow"
    framework_package: str = "TechTalk.SpecFlow"
    documentation_url: str = (
        "https://specflow.org/documentation/Generate-Tests-from-MsBuild/"
    )

    # Separator between rendered diagnostic lines
    line_ending: str = "\n"

    # Unrecognized keys from config files
    custom: Dict[str, Any] = field(default_factory=dict)


def _load_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load configuration from JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    if path.suffix.lower() != ".json":
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


def _dict_to_config(config_dict: Dict[str, Any]) -> GeneratorConfig:
    """Convert dictionary to GeneratorConfig instance."""
    known_fields = {f.name for f in fields(GeneratorConfig)}

    config_args = {}
    custom_args = {}

    for key, value in config_dict.items():
        if key in known_fields:
            config_args[key] = value
        else:
            custom_args[key] = value

    if custom_args:
        existing_custom = dict(config_args.get("custom") or {})
        existing_custom.update(custom_args)
        config_args["custom"] = existing_custom

    for name in ("framework_name", "framework_package", "documentation_url", "line_ending"):
        if name in config_args and not isinstance(config_args[name], str):
            raise ConfigError(f"Configuration value '{name}' must be a string")

    if config_args.get("line_ending") not in (None, "\n", "\r\n"):
        raise ConfigError("line_ending must be '\\n' or '\\r\\n'")

    return GeneratorConfig(**config_args)


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    custom_config: Optional[Dict[str, Any]] = None,
) -> GeneratorConfig:
    """
    Load configuration.

    Args:
        config_file: Path to JSON configuration file
        custom_config: Overrides applied last

    Returns:
        Merged configuration

    Raises:
        ConfigError: If the file is missing or invalid
    """
    config_dict = asdict(GeneratorConfig())

    if config_file:
        config_dict.update(_load_config_file(config_file))

    if custom_config:
        config_dict.update(custom_config)

    return _dict_to_config(config_dict)


def save_config(config: GeneratorConfig, output_path: Union[str, Path]):
    """Save configuration to JSON file."""
    path = Path(output_path)

    config_dict = asdict(config)
    custom = config_dict.pop("custom")
    config_dict.update(custom)

    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config_dict, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise ConfigError(f"Failed to save configuration to {path}: {e}") from e
