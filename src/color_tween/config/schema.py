"""Configuration dataclasses."""

from dataclasses import dataclass, field
from typing import Any

from ..color.types import ColorSpace
from ..errors import ConfigError

DEFAULT_PROPERTIES = ("style", "color")


@dataclass
class ColorTweenConfig:
    """
    Tween configuration shared by the codec and interpolator.

    Attributes:
        mode: Channel space colors are parsed into and tweened in.
            Accepts a ColorSpace or its name ("rgb" / "hsl").
        properties: Property names the plugin registers for
    """
    mode: ColorSpace = ColorSpace.RGB
    properties: list[str] = field(default_factory=lambda: list(DEFAULT_PROPERTIES))

    def __post_init__(self):
        self.mode = ColorSpace.coerce(self.mode)
        if isinstance(self.properties, str):
            raise ConfigError("properties must be a list of names, not a string")
        self.properties = [str(p) for p in self.properties]

    def set_mode(self, mode: ColorSpace | str) -> None:
        """
        Switch the active mode. Takes effect on the next parse or tween.

        Raises:
            ConfigError: If mode is not "rgb" or "hsl"
        """
        self.mode = ColorSpace.coerce(mode)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ColorTweenConfig":
        """Build a validated config from plain data (e.g. parsed YAML)."""
        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping, got {type(data).__name__}")
        unknown = set(data) - {"mode", "properties"}
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(
            mode=data.get("mode", ColorSpace.RGB),
            properties=data.get("properties", list(DEFAULT_PROPERTIES)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"mode": self.mode.value, "properties": list(self.properties)}
