"""
Color string codec.

Parses the supported textual color encodings into channel triplets and
serializes triplets back into canonical strings.

Supported grammars (case-insensitive), checked in this order:
- hsl(h, s, l)       s and l with optional "%"
- rgb(r, g, b)       also rgba(r, g, b, a); alpha is ignored
- #RRGGBB            up to two extra trailing digits are ignored
- #RGB / RGB         shorthand, "#" optional

Usage:
    from color_tween.color import convert_to_rgb, parse_color, ColorSpace

    convert_to_rgb("#f00")                    # "rgb(255,0,0)"
    parse_color("hsl(120,100%,50%)", ColorSpace.RGB)  # RGB(0.0, 255.0, 0.0)
"""

import logging
import re
from typing import TYPE_CHECKING, Sequence

from ..errors import ConfigError, UnrecognizedColorFormat
from .conversions import hex_to_rgb, hsl_to_rgb, rgb_to_hsl, round_half_up
from .types import HSL, RGB, ChannelTriplet, ColorFormat, ColorSpace, ParsedColor

if TYPE_CHECKING:
    from ..config import ColorTweenConfig

logger = logging.getLogger(__name__)

_NUMBER = r"(\d+(?:\.\d*)?|\.\d+)"

HSL_COLOR = re.compile(rf"hsl\({_NUMBER}, ?{_NUMBER}%?, ?{_NUMBER}%?\)", re.IGNORECASE)
RGB_COLOR = re.compile(
    r"rgba?\((\d{1,3}), ?(\d{1,3}), ?(\d{1,3})(?:, ?(?:\d+(?:\.\d*)?|\.\d+)%?)?\)",
    re.IGNORECASE,
)
FULL_HEX = re.compile(r"#([0-9a-f]{6,8})", re.IGNORECASE)
SHORT_HEX = re.compile(r"#?([0-9a-f]{3})", re.IGNORECASE)

# First match wins. The order matters for loose inputs: "abc" is short hex
# only because nothing earlier claims it.
GRAMMARS: tuple[tuple[ColorFormat, re.Pattern[str]], ...] = (
    (ColorFormat.HSL, HSL_COLOR),
    (ColorFormat.RGB, RGB_COLOR),
    (ColorFormat.FULL_HEX, FULL_HEX),
    (ColorFormat.SHORT_HEX, SHORT_HEX),
)


def classify(value: object) -> ParsedColor:
    """
    Match a color string against the supported grammars.

    Args:
        value: Candidate color string (surrounding whitespace is ignored)

    Returns:
        ParsedColor for the first grammar that matches, or
        ParsedColor(ColorFormat.UNRECOGNIZED) if none does
    """
    if not isinstance(value, str):
        return ParsedColor(ColorFormat.UNRECOGNIZED)
    text = value.strip()
    for fmt, pattern in GRAMMARS:
        match = pattern.fullmatch(text)
        if match:
            return ParsedColor(fmt, match.groups())
    return ParsedColor(ColorFormat.UNRECOGNIZED)


def _check_space(space: object) -> ColorSpace:
    if space is ColorSpace.RGB or space is ColorSpace.HSL:
        return space
    raise ConfigError(f"Unknown color mode {space!r}")

def _to_rgb(parsed: ParsedColor) -> RGB:
    if parsed.format is ColorFormat.RGB:
        return RGB(*(float(g) for g in parsed.groups))
    if parsed.format is ColorFormat.HSL:
        return hsl_to_rgb(*(float(g) for g in parsed.groups))
    return hex_to_rgb(parsed.groups[0])


def _to_hsl(parsed: ParsedColor) -> HSL:
    if parsed.format is ColorFormat.HSL:
        return HSL(*(float(g) for g in parsed.groups))
    return rgb_to_hsl(*_to_rgb(parsed))


def parse_color(value: object, space: ColorSpace) -> ChannelTriplet:
    """
    Parse a color string into a channel triplet in the given space.

    A string already written in the target space's own grammar is passed
    through without conversion or rounding. Anything else is converted.

    Args:
        value: Color string in any supported grammar
        space: Target channel space

    Returns:
        RGB or HSL triplet of floats

    Raises:
        UnrecognizedColorFormat: If value is None or matches no grammar
        ConfigError: If space is not a ColorSpace
    """
    space = _check_space(space)
    parsed = classify(value)
    if not parsed.recognized:
        logger.warning("Couldn't read color %r", value)
        raise UnrecognizedColorFormat(value)

    if space is ColorSpace.RGB:
        return _to_rgb(parsed)
    return _to_hsl(parsed)


def format_color(triplet: Sequence[float], space: ColorSpace) -> str:
    """
    Serialize a channel triplet as rgb(R,G,B) or hsl(H,S%,L%).

    Channels are rounded half-up. Nothing is clamped and the hue is not
    wrapped, so rgb(300,-4,0) or hsl(400,120%,50%) can be produced.

    Raises:
        ConfigError: If space is not a ColorSpace
    """
    space = _check_space(space)
    a, b, c = (round_half_up(x) for x in triplet)
    if space is ColorSpace.RGB:
        return f"rgb({a},{b},{c})"
    return f"hsl({a},{b}%,{c}%)"


def convert_color(value: object, space: ColorSpace) -> str:
    """Parse a color and re-serialize it in canonical form for the given space."""
    return format_color(parse_color(value, space), space)


def convert_to_rgb(value: object) -> str:
    """
    Convert a color string to rgb(R,G,B).

    Raises:
        UnrecognizedColorFormat: If the color can't be read
    """
    return convert_color(value, ColorSpace.RGB)


def convert_to_hsl(value: object) -> str:
    """
    Convert a color string to hsl(H,S%,L%).

    Raises:
        UnrecognizedColorFormat: If the color can't be read
    """
    return convert_color(value, ColorSpace.HSL)


class ColorCodec:
    """
    Codec bound to a configuration.

    The target space defaults to the config's current mode, read on
    every call, so a mode change is picked up immediately.
    """

    def __init__(self, config: "ColorTweenConfig"):
        self.config = config

    @property
    def space(self) -> ColorSpace:
        return self.config.mode

    def parse(self, value: object, space: ColorSpace | None = None) -> ChannelTriplet:
        return parse_color(value, space or self.space)

    def serialize(self, triplet: Sequence[float], space: ColorSpace | None = None) -> str:
        return format_color(triplet, space or self.space)

    def convert(self, value: object, space: ColorSpace | None = None) -> str:
        return convert_color(value, space or self.space)
