from .colour import ColourProvider, FixedColour, RandomColour, rgba
from .config import SceneConfig
from .errors import ConfigError, InvalidRangeError, ShapeError
from .image import Displayable, Image
from .random_source import RandomSource
from .raster import circle_pixels, line_pixels
from .scene import build_scene, render
from .shapes import Circle, Line, Point, Rectangle, Shape, Triangle, draw, draw_all

__version__ = "0.1.0"

__all__ = [
    "Circle",
    "ColourProvider",
    "ConfigError",
    "Displayable",
    "FixedColour",
    "Image",
    "InvalidRangeError",
    "Line",
    "Point",
    "RandomColour",
    "RandomSource",
    "Rectangle",
    "SceneConfig",
    "Shape",
    "ShapeError",
    "Triangle",
    "build_scene",
    "circle_pixels",
    "draw",
    "draw_all",
    "line_pixels",
    "render",
    "rgba",
]
