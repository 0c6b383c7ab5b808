"""Configuration loading for bob_the_builder.

This module handles loading build configuration from an optional YAML
file and environment variables.

Contract:
- Inputs: Config file path, project directory, environment variables
- Outputs: BuilderSettings objects
- Side Effects: None
"""

import logging
import os
from pathlib import Path

import yaml

from ..errors import ConfigNotFound
from .settings import BuilderSettings

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "bob.yaml"


def get_config_path(project_dir: Path | str = ".") -> Path:
    """Get path to the default config file.

    Args:
        project_dir: Project root holding the root manifest

    Returns:
        Path to bob.yaml in the project directory

    Example:
        >>> assert get_config_path().name == "bob.yaml"
    """
    return Path(project_dir) / CONFIG_FILE_NAME


def load_config(config_path: Path | str | None = None, project_dir: Path | str = ".") -> BuilderSettings:
    """Load build configuration from YAML and environment.

    Environment variables take precedence over YAML settings.
    Variables should be prefixed with BOB_ (e.g., BOB_TARGET_DIR).

    Args:
        config_path: Optional config file path (default: bob.yaml in project_dir)
        project_dir: Project root used to locate the default config file

    Returns:
        Validated builder settings

    Raises:
        ConfigNotFound: If an explicitly passed config file does not exist
    """
    if config_path is None:
        config_path = get_config_path(project_dir)
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigNotFound(f"Configuration file not found: {config_path}")

    yaml_settings = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                yaml_settings = yaml.safe_load(f) or {}
            if not isinstance(yaml_settings, dict):
                raise ValueError("top level must be a mapping")
            logger.debug(f"Loaded config from {config_path}")
        except Exception as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            logger.info("Using default settings and environment variables")
            yaml_settings = {}

    # Only pass YAML values that don't have corresponding env vars,
    # so that env vars always win over the file
    filtered_yaml = {}
    for key, value in yaml_settings.items():
        env_key = f"BOB_{str(key).upper()}"
        if env_key not in os.environ:
            filtered_yaml[key] = value

    settings = BuilderSettings(**filtered_yaml)

    logger.debug(
        f"Build configuration loaded: cargo={settings.cargo_path}, "
        f"target_dir={settings.target_dir}, prefix={settings.contract_prefix}"
    )

    return settings
