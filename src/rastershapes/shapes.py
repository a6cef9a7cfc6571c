import logging
from dataclasses import dataclass
from numbers import Integral
from typing import Iterable, Iterator, Optional, Union

from .colour import ColourProvider, RandomColour
from .errors import InvalidRangeError
from .image import Displayable
from .random_source import RandomSource
from .raster import Pixel, circle_pixels, line_pixels

logger = logging.getLogger(__name__)

MIN_RANDOM_RADIUS = 5
# random circles keep their radius this far below the canvas width
RADIUS_MARGIN = 5


def _provider(colours: Optional[ColourProvider]) -> ColourProvider:
    return colours if colours is not None else RandomColour()


@dataclass(frozen=True)
class Point:
    """A 2D integer coordinate, which may lie outside the image."""

    x: int
    y: int

    def __post_init__(self):
        for component in ("x", "y"):
            value = getattr(self, component)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise TypeError(f"Point component '{component}' must be an integer, but got {value!r}")
            # numpy integers are fine, but store plain ints
            object.__setattr__(self, component, int(value))

    @classmethod
    def random(cls, w: int, h: int, rng: RandomSource) -> "Point":
        """Return a point with x uniform in [0, w) and y uniform in [0, h)."""
        # randrange rejects a bad w; h is checked here so it fails before x is sampled
        if h <= 0:
            raise InvalidRangeError(0, h, "y")
        return cls(rng.randrange(0, w, "x"), rng.randrange(0, h, "y"))

    def draw(self, target: Displayable, colours: Optional[ColourProvider] = None) -> None:
        target.display(self.x, self.y, _provider(colours).colour())


@dataclass(frozen=True)
class Line:
    p1: Point
    p2: Point

    @classmethod
    def random(cls, w: int, h: int, rng: RandomSource) -> "Line":
        return cls(Point.random(w, h, rng), Point.random(w, h, rng))

    def pixels(self) -> Iterator[Pixel]:
        return line_pixels(self.p1.x, self.p1.y, self.p2.x, self.p2.y)

    def draw(self, target: Displayable, colours: Optional[ColourProvider] = None) -> None:
        """Draw the segment, asking for a fresh colour for every pixel."""
        colours = _provider(colours)
        for x, y in self.pixels():
            target.display(x, y, colours.colour())


@dataclass(frozen=True)
class Rectangle:
    """An axis aligned rectangle outline given by two opposite corners, in any order."""

    p1: Point
    p2: Point

    @classmethod
    def random(cls, w: int, h: int, rng: RandomSource) -> "Rectangle":
        return cls(Point.random(w, h, rng), Point.random(w, h, rng))

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Return the corners a, b, c, d in drawing order, with b = p1 and d = p2."""
        b = self.p1
        d = self.p2
        a = Point(d.x, b.y)
        c = Point(b.x, d.y)
        return a, b, c, d

    def edges(self) -> tuple[Line, Line, Line, Line]:
        a, b, c, d = self.corners()
        return Line(a, b), Line(b, c), Line(c, d), Line(d, a)

    def draw(self, target: Displayable, colours: Optional[ColourProvider] = None) -> None:
        colours = _provider(colours)
        for edge in self.edges():
            edge.draw(target, colours)


@dataclass(frozen=True)
class Triangle:
    a: Point
    b: Point
    c: Point

    @classmethod
    def random(cls, w: int, h: int, rng: RandomSource) -> "Triangle":
        return cls(Point.random(w, h, rng), Point.random(w, h, rng), Point.random(w, h, rng))

    def edges(self) -> tuple[Line, Line, Line]:
        return Line(self.a, self.b), Line(self.b, self.c), Line(self.c, self.a)

    def draw(self, target: Displayable, colours: Optional[ColourProvider] = None) -> None:
        colours = _provider(colours)
        for edge in self.edges():
            edge.draw(target, colours)


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: int

    def __post_init__(self):
        if isinstance(self.radius, bool) or not isinstance(self.radius, Integral):
            raise TypeError(f"radius must be an integer, but got {self.radius!r}")
        if self.radius < 0:
            raise ValueError(f"radius must be non-negative, but got {self.radius}")
        object.__setattr__(self, "radius", int(self.radius))

    @classmethod
    def random(cls, w: int, h: int, rng: RandomSource) -> "Circle":
        """
        Return a circle with a random centre inside w x h and a radius in [5, w - 5).

        Raises:
            InvalidRangeError: If w <= 10, leaving no room for a radius. Nothing
                is sampled from rng in that case.
        """
        lo, hi = MIN_RANDOM_RADIUS, w - RADIUS_MARGIN
        if hi <= lo:
            raise InvalidRangeError(lo, hi, "radius")
        center = Point.random(w, h, rng)
        return cls(center, rng.randrange(lo, hi, "radius"))

    def pixels(self) -> Iterator[Pixel]:
        return circle_pixels(self.center.x, self.center.y, self.radius)

    def draw(self, target: Displayable, colours: Optional[ColourProvider] = None) -> None:
        """Draw the outline, asking for a fresh colour for every pixel written."""
        colours = _provider(colours)
        for x, y in self.pixels():
            target.display(x, y, colours.colour())


Shape = Union[Point, Line, Rectangle, Triangle, Circle]


def draw(shape: Shape, target: Displayable, colours: Optional[ColourProvider] = None) -> None:
    """Draw any of the supported shapes onto target."""
    match shape:
        case Point() | Line() | Rectangle() | Triangle() | Circle():
            shape.draw(target, colours)
        case _:
            raise TypeError(f"cannot draw {type(shape).__name__}, expected one of Point, Line, Rectangle, Triangle, Circle")


def draw_all(shapes: Iterable[Shape], target: Displayable, colours: Optional[ColourProvider] = None) -> int:
    """Draw shapes in order and return how many were drawn."""
    colours = _provider(colours)
    count = 0
    for shape in shapes:
        draw(shape, target, colours)
        count += 1
    logger.debug("drew %d shapes", count)
    return count
