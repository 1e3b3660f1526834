"""Exception types raised by color-tween."""


class ColorTweenError(Exception):
    """Base class for all color-tween errors."""


class ColorError(ColorTweenError, ValueError):
    """A color value could not be used."""


class UnrecognizedColorFormat(ColorError):
    """Raised when a string matches none of the supported color grammars."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Couldn't read color: {value!r}")


class ConfigError(ColorTweenError, ValueError):
    """Invalid configuration (unknown mode, malformed config file)."""
