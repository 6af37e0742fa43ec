"""
Configuration management for FactoryPlayground.
"""
from .config_manager import (
    Config,
    ConfigManager,
    ENV_PREFIX,
    get_config_manager,
    load_config,
    get_config,
    set_config
)
from .presets import ConfigPresets

__all__ = [
    'Config',
    'ConfigManager',
    'ENV_PREFIX',
    'get_config_manager',
    'load_config',
    'get_config',
    'set_config',
    'ConfigPresets',
]
