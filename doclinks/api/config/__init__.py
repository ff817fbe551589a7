"""Configuration domain."""

from .ConfigError import ConfigError
from .LinkCheckConfig import LinkCheckConfig
from .load_config import load_config
from .LoadedConfig import LoadedConfig

__all__ = ["ConfigError", "LinkCheckConfig", "LoadedConfig", "load_config"]
