"""
Linear color interpolation.

Resolves a start and end color into triplets in the active mode,
LERPs each channel by the tween ratio and serializes the result:

    channel = round_half_up(start + (end - start) * ratio)

RGB tweens look more natural; HSL tweens sweep across the hue spectrum.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from ..color.codec import ColorCodec
from ..color.conversions import round_half_up
from ..color.types import HSL, RGB, ChannelTriplet, ColorSpace
from ..errors import ColorError

if TYPE_CHECKING:
    from ..config import ColorTweenConfig

logger = logging.getLogger(__name__)


class Ignore:
    """
    Sentinel returned by tween() when a frame should leave the property alone.

    There is a single instance, IGNORE. It is falsy.
    """

    _instance: "Ignore | None" = None

    def __new__(cls) -> "Ignore":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "IGNORE"


IGNORE = Ignore()


def lerp(start: Sequence[float], end: Sequence[float], ratio: float) -> tuple[int, int, int]:
    """
    Interpolate two channel triplets and round each channel half-up.

    Args:
        start: Triplet at ratio 0
        end: Triplet at ratio 1
        ratio: Progress; values outside 0-1 extrapolate past the ends

    Returns:
        Rounded channel values
    """
    a, b, c = (
        round_half_up(s + (e - s) * ratio)
        for s, e in zip(start, end, strict=True)
    )
    return a, b, c


class Interpolator:
    """
    Computes the color at a tween ratio between two boundary colors.

    Reads the mode from the shared config on each call, so switching
    config.mode affects the next call and nothing before it.
    """

    def __init__(self, config: ColorTweenConfig, codec: ColorCodec | None = None):
        self.config = config
        self.codec = codec or ColorCodec(config)

    def _active_space(self) -> ColorSpace | None:
        mode = self.config.mode
        return mode if isinstance(mode, ColorSpace) else None

    def get_color(self, value: object) -> ChannelTriplet | None:
        """
        Get the channels of a color in the active mode.

        Returns:
            RGB or HSL triplet, or None if the color can't be read
        """
        space = self._active_space()
        if value is None or space is None:
            return None
        try:
            return self.codec.parse(value, space)
        except ColorError:
            return None

    def init(self, value: object) -> object:
        """
        Normalize a color to the active mode's canonical form.

        None, unreadable colors and an invalid mode leave the value as is.
        """
        space = self._active_space()
        if value is None or space is None:
            return value
        try:
            return self.codec.convert(value, space)
        except ColorError:
            logger.warning("Leaving unreadable color %r unchanged", value)
            return value

    def tween(self, start: object, end: object, ratio: float) -> str | Ignore:
        """
        Get the color at ratio between start and end.

        Args:
            start: Color at ratio 0
            end: Color at ratio 1
            ratio: Tween progress, usually 0-1 (not clamped)

        Returns:
            Color string in the active mode, or IGNORE if either end is
            missing or unreadable
        """
        space = self._active_space()
        if space is None:
            logger.warning("Invalid color mode %r, skipping frame", self.config.mode)
            return IGNORE

        start_color = self.get_color(start)
        if start_color is None:
            logger.debug("Skipping frame: unreadable start color %r", start)
            return IGNORE
        end_color = self.get_color(end)
        if end_color is None:
            logger.debug("Skipping frame: unreadable end color %r", end)
            return IGNORE

        return self.codec.serialize(lerp(start_color, end_color, ratio), space)

    def tween_triplet(
        self,
        start: ChannelTriplet,
        end: ChannelTriplet,
        ratio: float,
    ) -> ChannelTriplet:
        """
        Interpolate already-parsed triplets, keeping the start's type.

        Unlike tween(), nothing is parsed or serialized, which is useful
        when the same boundaries are sampled many times.
        """
        if type(start) is not type(end):
            raise ColorError(
                f"Cannot interpolate {type(start).__name__} to {type(end).__name__}"
            )
        channels = lerp(start, end, ratio)
        return HSL(*channels) if isinstance(start, HSL) else RGB(*channels)
