"""
Configuration Management
========================

This module provides TOML-based configuration file support for the behavioral CLI.

Configuration files are searched in the following order:
1. Path specified via --config option
2. ./behavioral.toml (current directory)
3. ~/.config/behavioral/config.toml (user config)
4. /etc/behavioral/config.toml (system config)

Example configuration file (behavioral.toml):

    [history]
    truncate_on_compute = true

    [logging]
    level = "INFO"

    [output]
    format = "table"
"""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from behavioral.core.logger import get_logger

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = get_logger(__name__)


# Default configuration values
DEFAULT_CONFIG: Dict[str, Any] = {
    "history": {
        "truncate_on_compute": True,
    },
    "logging": {
        "level": "INFO",
    },
    "output": {
        "format": "table",  # "table" or "json"
    },
}

SECTIONS = tuple(DEFAULT_CONFIG)

# Standard config file locations
CONFIG_LOCATIONS = [
    Path("behavioral.toml"),
    Path("~/.config/behavioral/config.toml").expanduser(),
    Path("/etc/behavioral/config.toml"),
]


@dataclass
class Config:
    """
    Configuration container for behavioral settings.

    Attributes:
        history: Undo/redo history settings
        logging: Logging settings
        output: CLI output settings
        _source: Path to the config file that was loaded
    """
    history: Dict[str, Any] = field(default_factory=dict)
    logging: Dict[str, Any] = field(default_factory=dict)
    output: Dict[str, Any] = field(default_factory=dict)
    _source: Optional[str] = None

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        section_dict = getattr(self, section, {})
        return section_dict.get(key, default)

    @property
    def truncate_on_compute(self) -> bool:
        return self.get("history", "truncate_on_compute", True)

    @property
    def log_level(self) -> str:
        return self.get("logging", "level", "INFO")

    @property
    def output_format(self) -> str:
        return self.get("output", "format", "table")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {name: getattr(self, name) for name in SECTIONS}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[str] = None) -> "Config":
        """
        Create Config from dictionary.

        A section that is not a table, or a setting whose type differs from
        its default, is replaced by the default with a warning.
        """
        sections = {name: _checked_section(name, data.get(name, {})) for name in SECTIONS}
        return cls(**sections, _source=source)


def _checked_section(name: str, values: Any) -> Dict[str, Any]:
    defaults = DEFAULT_CONFIG[name]
    if not isinstance(values, dict):
        logger.warning(f"Config section [{name}] must be a table, got {values!r}; using defaults")
        return dict(defaults)

    checked = {}
    for key, value in values.items():
        default = defaults.get(key)
        if default is not None and not isinstance(value, type(default)):
            logger.warning(
                f"Config value {name}.{key} must be {type(default).__name__}, "
                f"got {value!r}; using {default!r}"
            )
            value = default
        checked[key] = value
    return checked


def load_toml(filepath: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a TOML configuration file.

    Args:
        filepath: Path to the TOML file

    Returns:
        Dictionary with configuration values

    Raises:
        FileNotFoundError: If file doesn't exist
        tomllib.TOMLDecodeError: If TOML parsing fails
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    with open(path, "rb") as f:
        return tomllib.load(f)


def save_toml(config: Dict[str, Any], filepath: Union[str, Path]) -> str:
    """
    Save configuration to a TOML file.

    Only flat sections of strings, booleans and numbers are written, which
    covers every setting in DEFAULT_CONFIG.

    Returns:
        Path to the saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    lines = []
    for section, values in config.items():
        lines.append(f"[{section}]")
        for key, value in values.items():
            if isinstance(value, str):
                lines.append(f'{key} = "{value}"')
            elif isinstance(value, bool):
                lines.append(f"{key} = {str(value).lower()}")
            else:
                lines.append(f"{key} = {value}")
        lines.append("")

    path.write_text("\n".join(lines))
    return str(path)


def find_config_file(config_path: Optional[str] = None) -> Optional[Path]:
    """
    Find the configuration file to use.

    Args:
        config_path: Explicit path to config file (highest priority)

    Returns:
        Path to config file, or None if not found
    """
    if config_path:
        path = Path(config_path)
        if path.exists():
            return path
        logger.warning(f"Specified config file not found: {config_path}")
        return None

    for location in CONFIG_LOCATIONS:
        if location.exists():
            return location

    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from file or use defaults.

    Settings missing from the file keep their default value.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Config object with merged settings
    """
    config_file = find_config_file(config_path)
    if config_file is None:
        return get_default_config()

    try:
        file_config = load_toml(config_file)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Error loading config file {config_file}: {e}")
        return get_default_config()

    unknown = sorted(set(file_config) - set(SECTIONS))
    if unknown:
        logger.warning(f"Ignoring unknown config sections in {config_file}: {', '.join(unknown)}")

    merged = {}
    for name in SECTIONS:
        section = file_config.get(name, {})
        if isinstance(section, dict):
            section = {**DEFAULT_CONFIG[name], **section}
        merged[name] = section

    logger.debug(f"Loaded configuration from {config_file}")
    return Config.from_dict(merged, source=str(config_file))


def get_default_config() -> Config:
    """Get the default configuration."""
    return Config.from_dict(DEFAULT_CONFIG)


def create_default_config_file(filepath: Optional[str] = None) -> str:
    """
    Create a default configuration file.

    Args:
        filepath: Path to create the file (default: ./behavioral.toml)

    Returns:
        Path to the created file
    """
    if filepath is None:
        filepath = "behavioral.toml"

    return save_toml(DEFAULT_CONFIG, filepath)


# Global configuration instance
_global_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = load_config()
    return _global_config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def reset_config() -> None:
    """Reset the global configuration to None (will reload on next access)."""
    global _global_config
    _global_config = None
