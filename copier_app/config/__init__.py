"""Configuration for the signal relay server."""

from .defaults import CopierConfig, get_default_config
from .loader import ConfigLoader

__all__ = ["CopierConfig", "ConfigLoader", "get_default_config"]
