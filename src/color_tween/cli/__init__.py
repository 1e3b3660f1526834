"""
CLI entry points for color-tween.

- tween_colors: convert colors and print interpolated sequences
"""

from .tween_colors import main

__all__ = [
    "main",
]
