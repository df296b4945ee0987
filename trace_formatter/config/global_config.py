"""
Global configuration loader (TOML).

Stores defaults for output mode, logging and the color theme.
Uses Pydantic for validation.
"""

from pathlib import Path
import tomllib

from trace_formatter.constants import DEFAULT_CONFIG_PATH

from .models import GlobalConfigModel

GlobalConfig = GlobalConfigModel


def load_global_config(config_path: Path) -> GlobalConfig:
    """
    Loads and validates the global configuration from a TOML file.

    Args:
        config_path: Path to the configuration file (usually defaults.toml).

    Returns:
        A validated GlobalConfig object.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the config file is not valid TOML or fails validation.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    # pydantic.ValidationError is a ValueError subclass
    return GlobalConfig(**data)


def resolve_config(config_path: Path | None = None) -> GlobalConfig:
    """
    Loads an explicit config file, or defaults.toml when present.

    Falls back to built-in defaults when no path is given and the default
    file does not exist.
    """
    if config_path is not None:
        return load_global_config(config_path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_global_config(DEFAULT_CONFIG_PATH)
    return GlobalConfig()
