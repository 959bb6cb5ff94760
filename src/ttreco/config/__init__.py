"""Configuration loading for discriminator jobs.

Main Entry Point
----------------
load_config : Load a YAML configuration file
"""

from .errors import ConfigCycleError, ConfigError, ConfigIncludeError, ConfigPathError
from .loader import load_config, load_config_str

__all__ = [
    "load_config",
    "load_config_str",
    "ConfigError",
    "ConfigIncludeError",
    "ConfigCycleError",
    "ConfigPathError",
]
