"""
Rasterizers that turn continuous geometry into pixel coordinates.

Both functions are generators of (x, y) integer pairs and know nothing about
colours or images; the shapes in shapes.py pair every coordinate with a
colour and hand it to the target image.
"""

from typing import Iterator, Tuple

import numpy as np

Pixel = Tuple[int, int]


def round_half_away(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer, with .5 going away from zero (2.5 -> 3, -2.5 -> -3)."""
    return (np.sign(values) * np.floor(np.abs(values) + 0.5)).astype(np.int64)


def line_pixels(x1: int, y1: int, x2: int, y2: int) -> Iterator[Pixel]:
    """
    Yield the pixels of the segment from (x1, y1) to (x2, y2).

    The dominant axis moves by exactly one pixel per step and the minor axis
    by dx / steps (or dy / steps), so max(|dx|, |dy|) + 1 pixels come out.
    Positions are computed from the step index rather than by accumulating
    the increment, which keeps the result identical when the endpoints are
    swapped.

    Args:
        x1, y1: Start point.
        x2, y2: End point.

    Yields:
        (x, y) integer coordinates in order from the start to the end point.
    """
    dx = x2 - x1
    dy = y2 - y1
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        yield (x1, y1)
        return

    step = np.arange(steps + 1, dtype=np.float64)
    xs = round_half_away(x1 + dx * step / steps)
    ys = round_half_away(y1 + dy * step / steps)
    for x, y in zip(xs.tolist(), ys.tolist()):
        yield (x, y)


def circle_pixels(cx: int, cy: int, radius: int) -> Iterator[Pixel]:
    """
    Yield the boundary pixels of a circle using the midpoint algorithm.

    One octant is traced, starting straight above the centre (x = 0,
    y = -radius) and walking right until x meets -y. Every traced offset is
    mirrored into all eight octants, so each iteration yields eight
    coordinates, some of which repeat where octants meet.

    A radius of 0 yields nothing.
    """
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")

    x = 0
    y = -radius
    r_squared_4 = 4 * radius * radius
    while x < -y:
        # midpoint test x^2 + (y + 0.5)^2 > r^2, scaled by 4 to stay in integers
        if 4 * x * x + (2 * y + 1) ** 2 > r_squared_4:
            y += 1

        yield (cx + x, cy + y)
        yield (cx - x, cy + y)
        yield (cx + x, cy - y)
        yield (cx - x, cy - y)
        yield (cx + y, cy + x)
        yield (cx - y, cy + x)
        yield (cx + y, cy - x)
        yield (cx - y, cy - x)

        x += 1
