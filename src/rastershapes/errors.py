"""Exceptions raised by rastershapes."""


class ShapeError(Exception):
    """Base class for all rastershapes errors."""


class InvalidRangeError(ShapeError, ValueError):
    """A random sample was requested from an empty or inverted range."""

    def __init__(self, lo: int, hi: int, what: str = "value"):
        self.lo = lo
        self.hi = hi
        super().__init__(f"cannot sample {what} from empty range [{lo}, {hi})")


class ConfigError(ShapeError, ValueError):
    """The demo scene configuration is unusable."""
