from typing import Protocol, Tuple, Union

import numpy as np
from PIL import Image as PILImage

from .colour import rgba


class Displayable(Protocol):
    """The write side of an image: put one coloured pixel at x,y."""

    def display(self, x: int, y: int, colour: rgba) -> None: ...


class Image:
    """A class to represent an image, built on numpy and Pillow."""

    def __init__(self, width: int, height: int, fill_colour: Union[rgba, tuple, None] = None):
        """
        Initialize the Image object.

        Args:
            width: The width of the image in pixels.
            height: The height of the image in pixels.
            fill_colour: The initial colour of the image. Can be an rgba object,
                         a 3 or 4 element tuple, or None for a default white image.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._rgba_data = np.full((self._height, self._width, 4), rgba.from_value(fill_colour).as_tuple(), dtype=np.uint8)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _check_bounds(self, x: int, y: int) -> None:
        """
        Check if the given x,y coordinates are within the bounds of the image.

        Raises:
            IndexError: If the coordinates are out of range.
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"x,y values out of range {x=} {self.width=} {y=} {self.height=}")

    @property
    def width(self) -> int:
        """Get the width of the image in pixels."""
        return self._width

    @property
    def height(self) -> int:
        """Get the height of the image in pixels."""
        return self._height

    def display(self, x: int, y: int, colour: rgba) -> None:
        """
        Write a pixel for a shape rasterizer.

        Shapes are free to run off the edge of the canvas, so writes outside
        the image are dropped rather than raising.
        """
        if self.in_bounds(x, y):
            self._rgba_data[y, x] = colour.as_tuple()

    def set_pixel(self, x: int, y: int, colour: Union[rgba, tuple, None]):
        """
        Set the colour of a single pixel.

        Raises:
            IndexError: If x,y is outside the image.
        """
        self._check_bounds(x, y)
        self._rgba_data[y, x] = rgba.from_value(colour).as_tuple()

    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Get the colour of a single pixel as an (r, g, b, a) tuple."""
        self._check_bounds(x, y)
        return tuple(int(c) for c in self._rgba_data[y, x])

    @property
    def pixels(self) -> np.ndarray:
        """Get the raw pixel data as a (height, width, 4) uint8 numpy array."""
        return self._rgba_data

    @property
    def shape(self) -> tuple[int, ...]:
        return self._rgba_data.shape

    def count_not(self, colour: Union[rgba, tuple, None]) -> int:
        """Count the pixels that differ from colour, handy for checking what got drawn."""
        target = np.array(rgba.from_value(colour).as_tuple(), dtype=np.uint8)
        return int(np.any(self._rgba_data != target, axis=-1).sum())

    def save(self, name: str) -> None:
        """
        Save the image to a file.

        Args:
            name: The path to save the file to. The format is determined from the extension.
        """
        img = PILImage.fromarray(self._rgba_data)
        img.save(name)

    def __getitem__(self, key: tuple[int, int]) -> rgba:
        """
        Get the colour of a pixel using subscript notation (e.g., img[x, y]).
        """
        x, y = key
        self._check_bounds(x, y)
        return rgba(*(int(c) for c in self._rgba_data[y, x]))
