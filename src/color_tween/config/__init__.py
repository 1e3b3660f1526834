"""Configuration schema and loading."""

from .schema import ColorTweenConfig, DEFAULT_PROPERTIES
from .loader import load_config, save_config

__all__ = [
    "ColorTweenConfig",
    "DEFAULT_PROPERTIES",
    "load_config",
    "save_config",
]
