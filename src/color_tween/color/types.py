"""
Core data structures for color parsing and interpolation.

This module contains the fundamental types used throughout the package:
- ColorSpace: The channel space colors are parsed into and tweened in
- RGB / HSL: Channel triplets for each space
- ColorFormat: Which textual grammar a color string matched
- ParsedColor: The result of classifying a color string
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union

from ..errors import ConfigError


class ColorSpace(Enum):
    """Supported tween modes."""

    RGB = "rgb"
    HSL = "hsl"

    @classmethod
    def coerce(cls, value: "ColorSpace | str") -> "ColorSpace":
        """
        Resolve a mode given as an enum member or a name like "rgb" / "HSL".

        Raises:
            ConfigError: If the value names no supported mode
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        supported = ", ".join(repr(m.value) for m in cls)
        raise ConfigError(f"Unknown color mode {value!r} (expected one of {supported})")


class RGB(NamedTuple):
    """
    RGB channel triplet.

    Channels are conceptually 0-255 but are never clamped, so
    extrapolated tweens can carry values outside that range.
    """
    r: float
    g: float
    b: float


class HSL(NamedTuple):
    """
    HSL channel triplet.

    - h: Hue in degrees (0-360, not wrapped)
    - s: Saturation in percent (0-100)
    - l: Lightness in percent (0-100)
    """
    h: float
    s: float
    l: float


ChannelTriplet = Union[RGB, HSL]


class ColorFormat(Enum):
    """Textual grammar a color string was matched against."""

    HSL = "hsl"
    RGB = "rgb"
    FULL_HEX = "full_hex"
    SHORT_HEX = "short_hex"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class ParsedColor:
    """
    A classified color string.

    Attributes:
        format: The first grammar that matched
        groups: Captured channel text (three entries, or one for hex)
    """
    format: ColorFormat
    groups: tuple[str, ...] = ()

    @property
    def recognized(self) -> bool:
        return self.format is not ColorFormat.UNRECOGNIZED
