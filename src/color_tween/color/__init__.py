"""Color parsing, serialization and RGB/HSL conversion."""

from .types import ColorSpace, ColorFormat, ParsedColor, RGB, HSL, ChannelTriplet
from .conversions import rgb_to_hsl, hsl_to_rgb, round_half_up
from .codec import (
    ColorCodec,
    classify,
    parse_color,
    format_color,
    convert_color,
    convert_to_rgb,
    convert_to_hsl,
)

__all__ = [
    "ColorSpace",
    "ColorFormat",
    "ParsedColor",
    "RGB",
    "HSL",
    "ChannelTriplet",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "round_half_up",
    "ColorCodec",
    "classify",
    "parse_color",
    "format_color",
    "convert_color",
    "convert_to_rgb",
    "convert_to_hsl",
]
