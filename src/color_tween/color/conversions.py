"""
RGB <-> HSL conversion math.

RGB channels are 0-255, HSL is (degrees, percent, percent). Neither
direction clamps its inputs or wraps the hue, so out-of-range values
propagate arithmetically.
"""

import math

from ..errors import ColorError
from .types import HSL, RGB

RGB_MAX = 255
HUE_MAX = 360
PERCENT_MAX = 100

_ONE_THIRD = 1 / 3
_ONE_SIXTH = 1 / 6
_TWO_THIRDS = 2 / 3


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties toward +infinity (floor(x + 0.5))."""
    return math.floor(x + 0.5)


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """
    Convert RGB to HSL.

    Args:
        r, g, b: Channels in 0-255

    Returns:
        HSL with hue in degrees and saturation/lightness in percent.
        Achromatic input (all channels equal) yields h == s == 0.
    """
    m = 1 / RGB_MAX
    r, g, b = r * m, g * m, b * m
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    l = (cmax + cmin) * 0.5

    if cmax == cmin:
        h = s = 0.0
    else:
        d = cmax - cmin
        denom = 2 - cmax - cmin if l > 0.5 else cmax + cmin
        # Channels past 255 can cancel the denominator out
        s = d / denom if denom else 0.0
        if cmax == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif cmax == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return HSL(h * HUE_MAX, s * PERCENT_MAX, l * PERCENT_MAX)


def hue_to_channel(p: float, q: float, t: float) -> float:
    """
    Evaluate one RGB channel from the HSL intermediates p and q.

    Args:
        p, q: Intermediates derived from lightness and saturation
        t: Hue position in turns, already offset for the channel

    Returns:
        Channel value in 0-1 (for in-range inputs)
    """
    # Single wrap only: hues more than one turn out of range are not folded back.
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < _ONE_SIXTH:
        return p + (q - p) * 6 * t
    if t < 0.5:
        return q
    if t < _TWO_THIRDS:
        return p + (q - p) * (_TWO_THIRDS - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees
        s: Saturation in percent
        l: Lightness in percent

    Returns:
        RGB with float channels in 0-255 (unrounded)
    """
    h /= HUE_MAX
    s /= PERCENT_MAX
    l /= PERCENT_MAX

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = hue_to_channel(p, q, h + _ONE_THIRD)
        g = hue_to_channel(p, q, h)
        b = hue_to_channel(p, q, h - _ONE_THIRD)

    return RGB(r * RGB_MAX, g * RGB_MAX, b * RGB_MAX)


def hex_to_rgb(digits: str) -> RGB:
    """
    Split hex digits into 8-bit channels.

    Args:
        digits: "RRGGBB" (extra trailing digits, e.g. alpha, are ignored)
            or "RGB" shorthand, without the leading "#"

    Returns:
        RGB with integer-valued channels

    Raises:
        ColorError: If fewer than 3 digits or a non-hex digit is given
    """
    # Expand shorthand (RGB -> RRGGBB)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) < 6:
        raise ColorError(f"Invalid hex color: {digits}")
    try:
        return RGB(*(float(int(digits[i:i + 2], 16)) for i in (0, 2, 4)))
    except ValueError:
        raise ColorError(f"Invalid hex color: {digits}")
