"""
Color tweening for animation schedulers.

This package provides:
- A codec for hex, rgb() and hsl() color strings
- RGB <-> HSL conversion
- Linear interpolation between two colors in RGB or HSL mode
- A plugin object a tween scheduler can install for color properties
"""

import logging

from .errors import ColorTweenError, ColorError, UnrecognizedColorFormat, ConfigError
from .color import (
    ColorSpace,
    ColorFormat,
    RGB,
    HSL,
    ColorCodec,
    classify,
    parse_color,
    format_color,
    convert_to_rgb,
    convert_to_hsl,
    rgb_to_hsl,
    hsl_to_rgb,
)
from .config import ColorTweenConfig, load_config, save_config
from .tween import IGNORE, Ignore, Interpolator, ColorPlugin

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "ColorTweenError",
    "ColorError",
    "UnrecognizedColorFormat",
    "ConfigError",
    # Color
    "ColorSpace",
    "ColorFormat",
    "RGB",
    "HSL",
    "ColorCodec",
    "classify",
    "parse_color",
    "format_color",
    "convert_to_rgb",
    "convert_to_hsl",
    "rgb_to_hsl",
    "hsl_to_rgb",
    # Config
    "ColorTweenConfig",
    "load_config",
    "save_config",
    # Tween
    "IGNORE",
    "Ignore",
    "Interpolator",
    "ColorPlugin",
]
