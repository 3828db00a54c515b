"""Configuration loader for the relauncher.

Loads settings from config.yaml and validates the target section.
"""

import os
from pathlib import Path

import yaml

from relauncher.exceptions import ConfigError
from relauncher.utils.logging import parse_level

_CONFIG_DIR = Path(__file__).parent
_DEFAULT_CONFIG_PATH = _CONFIG_DIR / "config.yaml"

_config: dict | None = None


def load_config(path: Path | None = None) -> dict:
    """Load configuration from a YAML file.

    Args:
        path: Path to the config file. Defaults to relauncher/config.yaml.

    Returns:
        Configuration dictionary with ``target`` and ``logging`` sections.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigError: If the file cannot be read, is malformed, or a value
            is invalid.
    """
    config_path = path if path is not None else _DEFAULT_CONFIG_PATH
    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{config_path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"{config_path} must contain a mapping")

    config.setdefault("target", {})
    config.setdefault("logging", {})
    _validate_target(config)
    _validate_logging(config)
    _expand_paths(config)
    return config


def get_config() -> dict:
    """Get the cached configuration, loading it if necessary."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def _expand_paths(config: dict) -> None:
    """Expand ~ and environment variables in path-like config values."""
    path_keys = {
        ("target", "launch_path"),
        ("logging", "file"),
    }
    for section_key, value_key in path_keys:
        section = config.get(section_key, {})
        if value_key in section and isinstance(section[value_key], str):
            section[value_key] = os.path.expandvars(os.path.expanduser(section[value_key]))


def _validate_target(config: dict) -> None:
    """Check that target.name is a non-empty string.

    Raises:
        ConfigError: If the target section is missing or incomplete.
    """
    target = config["target"]
    if not isinstance(target, dict):
        raise ConfigError("target must be a mapping")

    name = target.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ConfigError("target.name is required and must be a non-empty string")

    launch_path = target.get("launch_path")
    if launch_path is not None and not isinstance(launch_path, str):
        raise ConfigError("target.launch_path must be a string or null")


def _validate_logging(config: dict) -> None:
    """Normalize logging.level to an int.

    Raises:
        ConfigError: If the level name is unknown.
    """
    logging_cfg = config["logging"]
    if not isinstance(logging_cfg, dict):
        raise ConfigError("logging must be a mapping")

    level = logging_cfg.get("level")
    try:
        logging_cfg["level"] = parse_level("INFO" if level is None else level)
    except ValueError as e:
        raise ConfigError(f"logging.level: {e}") from e
