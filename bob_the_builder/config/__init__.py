"""Configuration module for bob_the_builder.

Provides build configuration loading from YAML and environment variables.

Public Interface:
    - BuilderSettings: Settings model
    - load_config: Load configuration
    - get_config_path: Get default config file path
"""

from .loader import get_config_path
from .loader import load_config
from .settings import BuilderSettings

__all__ = [
    "BuilderSettings",
    "load_config",
    "get_config_path",
]
