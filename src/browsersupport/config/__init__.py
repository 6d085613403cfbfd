"""Configuration module."""

from browsersupport.config.loader import load_config
from browsersupport.config.models import AppConfig, PluginConfig
from browsersupport.config.paths import get_config_path, get_home

__all__ = [
    "AppConfig",
    "PluginConfig",
    "get_config_path",
    "get_home",
    "load_config",
]
