"""Configuration for rewit."""

from rewit.config.document import load_config, save_config
from rewit.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "load_config", "save_config"]
