import logging
from typing import List, Optional

from .colour import ColourProvider, RandomColour
from .config import SceneConfig
from .image import Image
from .random_source import RandomSource
from .shapes import Circle, Line, Point, Rectangle, Shape, Triangle, draw_all

logger = logging.getLogger(__name__)

# fixed shapes are laid out on a 1000x1000 canvas and scaled to the real one
REFERENCE_SIZE = 1000
RECTANGLE_CORNERS = ((150, 300), (50, 60))
TRIANGLE_VERTICES = ((500, 500), (250, 700), (700, 800))


def _scaled(x: int, y: int, width: int, height: int) -> Point:
    return Point(x * width // REFERENCE_SIZE, y * height // REFERENCE_SIZE)


def build_scene(config: SceneConfig, rng: RandomSource) -> List[Shape]:
    """
    Build the demo shapes in drawing order.

    Random lines first, then random points, one fixed rectangle, one fixed
    triangle and finally the random circles.
    """
    w, h = config.width, config.height
    shapes: List[Shape] = []
    shapes.extend(Line.random(w, h, rng) for _ in range(config.lines))
    shapes.extend(Point.random(w, h, rng) for _ in range(config.points))
    shapes.append(Rectangle(*(_scaled(x, y, w, h) for x, y in RECTANGLE_CORNERS)))
    shapes.append(Triangle(*(_scaled(x, y, w, h) for x, y in TRIANGLE_VERTICES)))
    shapes.extend(Circle.random(w, h, rng) for _ in range(config.circles))
    logger.debug(
        "built scene: %d lines, %d points, 1 rectangle, 1 triangle, %d circles",
        config.lines,
        config.points,
        config.circles,
    )
    return shapes


def render(config: SceneConfig, colours: Optional[ColourProvider] = None) -> Image:
    """Validate config, then draw the whole demo scene onto a fresh image."""
    config.validate()
    rng = RandomSource(config.seed)
    shapes = build_scene(config, rng)
    if colours is None:
        colours = RandomColour(rng)
    img = Image(config.width, config.height, config.background)
    draw_all(shapes, img, colours)
    return img
