"""
User settings for pinshim.

Settings are read from an optional YAML file in the configuration home
(``$PINSHIM_HOME/config.yaml``). Every key is optional; missing keys keep
their defaults.

Example config.yaml:
    search_paths:
      - /opt/python/3.11/bin
    bash_files:
      - .bashrc
    conflicting_env_vars:
      - POETRY_ACTIVE
      - VIRTUAL_ENV
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from pinshim.core.constants import CONFIG_FILE
from pinshim.core.directory import get_home_dir
from pinshim.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_BASH_FILES = [".bashrc", ".bash_profile"]
DEFAULT_CONFLICTING_ENV_VARS = ["POETRY_ACTIVE"]
DEFAULT_SHIM_NAMES = ["python", "python3", "pip", "pip3"]

_LIST_KEYS = ("search_paths", "bash_files", "conflicting_env_vars", "shim_names")


@dataclass
class Settings:
    """
    Resolved settings.

    Attributes:
        home: pinshim configuration home
        search_paths: Extra directories scanned for interpreters
        bash_files: Startup files, relative to the user's home, that receive
            the configuration block
        conflicting_env_vars: Variables whose presence disables the shim
        shim_names: Executable names shimmed by setup
    """

    home: Path
    search_paths: List[Path] = field(default_factory=list)
    bash_files: List[str] = field(default_factory=lambda: list(DEFAULT_BASH_FILES))
    conflicting_env_vars: List[str] = field(
        default_factory=lambda: list(DEFAULT_CONFLICTING_ENV_VARS)
    )
    shim_names: List[str] = field(default_factory=lambda: list(DEFAULT_SHIM_NAMES))


def load_yaml_config(config_file: Path) -> Dict[str, Any]:
    """
    Load and parse a YAML settings file.

    Returns:
        Configuration dictionary (empty dict if the file doesn't exist)

    Raises:
        ConfigError: If YAML parsing fails or the top level is not a mapping
    """
    if not config_file.exists():
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}")

    config = config or {}
    if not isinstance(config, dict):
        raise ConfigError(f"Expected a mapping at the top of {config_file}")
    return config


def load_settings(home: Optional[Path] = None) -> Settings:
    """
    Build Settings from defaults and the optional config.yaml.

    Args:
        home: Configuration home (default: $PINSHIM_HOME or ~/.pinshim)
    """
    home = Path(home) if home is not None else get_home_dir()
    config = load_yaml_config(home / CONFIG_FILE)

    settings = Settings(home=home)
    for key, value in config.items():
        if key not in _LIST_KEYS:
            logger.warning(f"Ignoring unknown setting '{key}' in {CONFIG_FILE}")
            continue
        if not isinstance(value, list):
            raise ConfigError(f"Setting '{key}' must be a list, got {value!r}")
        if key == "search_paths":
            settings.search_paths = [Path(str(p)).expanduser() for p in value]
        else:
            setattr(settings, key, [str(v) for v in value])

    return settings
