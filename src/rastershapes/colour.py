from dataclasses import dataclass
from typing import Optional, Protocol, Tuple, Union

from .errors import ConfigError
from .random_source import RandomSource


# make the rgba immutable using frozen=True
@dataclass(frozen=True)
class rgba:
    """A dataclass to represent an RGBA colour, with validation."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self):
        """Validate that RGBA values are within the 0-255 range."""
        for component in ("r", "g", "b", "a"):
            value = getattr(self, component)
            if not isinstance(value, int) or not (0 <= value <= 255):
                raise ValueError(f"RGBA component '{component}' must be an integer between 0 and 255, but got {value}")

    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return the colour as a tuple."""
        return (self.r, self.g, self.b, self.a)

    def __iter__(self):
        return iter((self.r, self.g, self.b, self.a))

    @classmethod
    def from_value(cls, value: Union["rgba", tuple, None]) -> "rgba":
        """
        Build an rgba from another rgba, a 3 or 4 element tuple, or None.

        None gives opaque white, matching a blank image.
        """
        match value:
            case None:
                return cls(255, 255, 255, 255)
            case rgba():
                return value
            case (r, g, b):
                return cls(r, g, b)
            case (r, g, b, a):
                return cls(r, g, b, a)
            case _:
                raise TypeError(f"Invalid type for RGBA colour: {type(value).__name__}")

    @classmethod
    def parse(cls, text: str) -> "rgba":
        """Parse a comma separated "r,g,b" or "r,g,b,a" string."""
        try:
            channels = tuple(int(part) for part in text.split(","))
        except ValueError as exc:
            raise ConfigError(f"colour must be comma separated integers, got {text!r}") from exc
        if len(channels) not in (3, 4):
            raise ConfigError(f"colour needs 3 or 4 channels, got {len(channels)} in {text!r}")
        try:
            return cls(*channels)
        except ValueError as exc:
            raise ConfigError(f"bad colour {text!r}: {exc}") from exc


class ColourProvider(Protocol):
    """Anything that hands out the colour for the next drawn element."""

    def colour(self) -> rgba: ...


class RandomColour:
    """Samples every channel uniformly from [1, 254] on each call, alpha is opaque."""

    LOW = 1
    HIGH = 255

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self._rng = rng if rng is not None else RandomSource()

    def colour(self) -> rgba:
        r = self._rng.randrange(self.LOW, self.HIGH, "red")
        g = self._rng.randrange(self.LOW, self.HIGH, "green")
        b = self._rng.randrange(self.LOW, self.HIGH, "blue")
        return rgba(r, g, b)


class FixedColour:
    """Always returns the same colour."""

    def __init__(self, colour: Union[rgba, tuple]) -> None:
        self._colour = rgba.from_value(colour)

    def colour(self) -> rgba:
        return self._colour

    def __repr__(self):
        return f"FixedColour({self._colour!r})"
