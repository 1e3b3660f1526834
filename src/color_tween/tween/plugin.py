"""
Tween plugin hooks for an external animation scheduler.

The scheduler owns timing, easing and property lookup. This module
only answers its three calls:
- install(registry): register for the color properties ("style", "color")
- init(tween, prop, value): normalize a property's starting color
- tween(tween, prop, value, start_values, end_values, ratio, ...): the
  color for this tick, or IGNORE to leave the property alone

Usage:
    plugin = ColorPlugin(ColorTweenConfig(mode="hsl"))
    plugin.install(scheduler)
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol

from ..color.types import ColorSpace
from ..config import ColorTweenConfig
from .interpolator import Ignore, Interpolator


class TweenRegistry(Protocol):
    """Anything that plugins can be installed into."""

    def install_plugin(self, plugin: Any, properties: list[str]) -> None:
        ...


class ColorPlugin:
    """
    Tweens color strings by splitting them into channels and LERPing
    each channel in the configured mode.
    """

    def __init__(
        self,
        config: ColorTweenConfig | None = None,
        properties: Iterable[str] | None = None,
    ):
        """
        Initialize the plugin.

        Args:
            config: Shared configuration (defaults to rgb mode)
            properties: Property names to handle (defaults to config.properties)
        """
        self.config = config or ColorTweenConfig()
        self.properties = list(properties) if properties is not None else list(self.config.properties)
        self.interpolator = Interpolator(self.config)

    @property
    def mode(self) -> ColorSpace:
        return self.config.mode

    @mode.setter
    def mode(self, value: ColorSpace | str) -> None:
        self.config.set_mode(value)

    def install(self, registry: TweenRegistry) -> "ColorPlugin":
        """Register this plugin with the scheduler for its color properties."""
        registry.install_plugin(self, list(self.properties))
        return self

    def init(self, tween: Any, prop: str, value: object) -> object:
        """
        Normalize the starting color of a new tween to the current mode.

        Colors that can't be read are returned unchanged.
        """
        return self.interpolator.init(value)

    def tween(
        self,
        tween: Any,
        prop: str,
        value: object,
        start_values: Mapping[str, object],
        end_values: Mapping[str, object],
        ratio: float,
        wait: bool = False,
        end: bool = False,
    ) -> str | Ignore:
        """
        Compute the tweened color for one tick.

        Args:
            tween: The scheduler's tween instance (unused)
            prop: Property name being tweened
            value: The current color (unused)
            start_values: Values at the start of this step, keyed by property
            end_values: Values at the end of this step, keyed by property
            ratio: Tween progress, usually 0-1

        Returns:
            Color string, or IGNORE if either boundary color is missing
            or unreadable
        """
        return self.interpolator.tween(start_values.get(prop), end_values.get(prop), ratio)
