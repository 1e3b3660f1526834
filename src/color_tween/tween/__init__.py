"""Color interpolation and the scheduler-facing plugin."""

from .interpolator import IGNORE, Ignore, Interpolator, lerp
from .plugin import ColorPlugin, TweenRegistry

__all__ = [
    "IGNORE",
    "Ignore",
    "Interpolator",
    "lerp",
    "ColorPlugin",
    "TweenRegistry",
]
