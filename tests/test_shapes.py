from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from rastershapes import (
    Circle,
    Image,
    InvalidRangeError,
    Line,
    Point,
    RandomSource,
    Rectangle,
    Triangle,
    draw,
    draw_all,
    line_pixels,
)


# --- Point ---


def test_point_draw_one_pixel_one_colour(recorder, counting_colour):
    Point(3, -2).draw(recorder, counting_colour)
    assert recorder.coords == [(3, -2)]
    assert counting_colour.calls == 1


def test_point_is_frozen():
    with pytest.raises(FrozenInstanceError):
        Point(1, 2).x = 5


@pytest.mark.parametrize("x, y", [(1.5, 2), (1, "2"), (None, 0), (True, 1)])
def test_point_rejects_non_integers(x, y):
    with pytest.raises(TypeError):
        Point(x, y)


def test_point_accepts_numpy_integers():
    p = Point(np.int64(4), np.int32(-7))
    assert type(p.x) is int and type(p.y) is int
    assert p == Point(4, -7)


def test_point_random_stays_in_bounds(rng):
    for _ in range(10_000):
        p = Point.random(100, 100, rng)
        assert 0 <= p.x < 100
        assert 0 <= p.y < 100


@pytest.mark.parametrize("w, h", [(0, 10), (10, 0), (-5, 5)])
def test_point_random_rejects_empty_bounds(rng, w, h):
    with pytest.raises(InvalidRangeError):
        Point.random(w, h, rng)


def test_random_shapes_are_reproducible():
    a = RandomSource(11)
    b = RandomSource(11)
    assert [Line.random(50, 40, a) for _ in range(10)] == [Line.random(50, 40, b) for _ in range(10)]


# --- Line ---


def test_line_colour_per_pixel(recorder, counting_colour):
    Line(Point(0, 0), Point(4, 2)).draw(recorder, counting_colour)
    assert recorder.coords == [(0, 0), (1, 1), (2, 1), (3, 2), (4, 2)]
    assert counting_colour.calls == 5
    # every pixel got its own colour
    assert len({colour for _, _, colour in recorder.writes}) == 5


def test_degenerate_line(recorder, solid_red):
    Line(Point(5, 5), Point(5, 5)).draw(recorder, solid_red)
    assert recorder.coords == [(5, 5)]


def test_line_default_colours_are_random(recorder):
    Line(Point(0, 0), Point(30, 0)).draw(recorder)
    assert len(recorder.writes) == 31
    for _, _, colour in recorder.writes:
        assert 1 <= colour.r <= 254 and 1 <= colour.g <= 254 and 1 <= colour.b <= 254


def test_line_random_endpoints_in_bounds(rng):
    for _ in range(500):
        line = Line.random(20, 30, rng)
        for p in (line.p1, line.p2):
            assert 0 <= p.x < 20 and 0 <= p.y < 30


# --- Rectangle ---


def test_rectangle_draws_four_lines_in_order(recorder, solid_red):
    b, d = Point(1, 2), Point(6, 9)
    Rectangle(b, d).draw(recorder, solid_red)

    a, c = Point(6, 2), Point(1, 9)
    expected = []
    for start, end in ((a, b), (b, c), (c, d), (d, a)):
        expected.extend(line_pixels(start.x, start.y, end.x, end.y))
    assert recorder.coords == expected
    # corners are shared but not deduplicated
    assert len(recorder.writes) == 2 * (5 + 1) + 2 * (7 + 1)


def test_rectangle_corners_any_orientation():
    rect = Rectangle(Point(10, 0), Point(0, 10))
    assert rect.corners() == (Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10))


def test_rectangle_edges_match_corners():
    a, b, c, d = Rectangle(Point(2, 3), Point(8, 1)).corners()
    assert Rectangle(Point(2, 3), Point(8, 1)).edges() == (Line(a, b), Line(b, c), Line(c, d), Line(d, a))


def test_rectangle_outline_on_image(solid_red, red, white):
    img = Image(12, 12)
    Rectangle(Point(2, 2), Point(9, 7)).draw(img, solid_red)
    for x in range(2, 10):
        assert img[x, 2] == red
        assert img[x, 7] == red
    for y in range(2, 8):
        assert img[2, y] == red
        assert img[9, y] == red
    assert img[5, 5] == white
    assert img.count_not(white) == 2 * 8 + 2 * 4


def test_rectangle_colour_per_edge_pixel(recorder, counting_colour):
    Rectangle(Point(0, 0), Point(3, 3)).draw(recorder, counting_colour)
    assert counting_colour.calls == len(recorder.writes) == 16


# --- Triangle ---


def test_triangle_is_union_of_three_lines(recorder, solid_red):
    a, b, c = Point(0, 0), Point(20, 5), Point(7, 18)
    Triangle(a, b, c).draw(recorder, solid_red)

    expected = []
    for start, end in ((a, b), (b, c), (c, a)):
        expected.extend(line_pixels(start.x, start.y, end.x, end.y))
    assert recorder.coords == expected
    assert set(recorder.coords) == set(expected)


def test_triangle_random(rng):
    tri = Triangle.random(64, 48, rng)
    for p in (tri.a, tri.b, tri.c):
        assert 0 <= p.x < 64 and 0 <= p.y < 48


# --- Circle ---


def test_circle_draw(recorder, counting_colour):
    Circle(Point(10, 10), 3).draw(recorder, counting_colour)
    assert len(recorder.writes) == 24
    assert counting_colour.calls == 24
    offsets = {(x - 10, y - 10) for x, y in recorder.coords}
    for dx, dy in offsets:
        assert (-dx, dy) in offsets and (dx, -dy) in offsets and (dy, dx) in offsets
        assert max(abs(dx), abs(dy)) <= 4


def test_zero_radius_circle_writes_nothing(recorder, counting_colour):
    # radius 0 leaves the image untouched, the centre is not drawn
    Circle(Point(4, 4), 0).draw(recorder, counting_colour)
    assert recorder.writes == []
    assert counting_colour.calls == 0


def test_circle_rejects_bad_radius():
    with pytest.raises(ValueError):
        Circle(Point(0, 0), -1)
    with pytest.raises(TypeError):
        Circle(Point(0, 0), 2.5)


def test_circle_random_radius_range(rng):
    for _ in range(1000):
        circle = Circle.random(40, 30, rng)
        assert 5 <= circle.radius < 35
        assert 0 <= circle.center.x < 40
        assert 0 <= circle.center.y < 30


@pytest.mark.parametrize("w", [5, 10, 0, -3])
def test_circle_random_narrow_canvas_fails(w):
    rng = RandomSource(1)
    with pytest.raises(InvalidRangeError):
        Circle.random(w, 100, rng)
    # nothing was sampled before the failure
    assert rng.randrange(0, 1_000_000) == RandomSource(1).randrange(0, 1_000_000)


def test_circle_random_smallest_canvas(rng):
    assert Circle.random(11, 11, rng).radius == 5


def test_circle_partly_off_image_is_clipped_by_image(solid_red, white):
    img = Image(10, 10)
    Circle(Point(0, 0), 4).draw(img, solid_red)
    assert img.count_not(white) > 0


# --- dispatch ---


def test_draw_dispatches_every_shape(recorder, solid_red):
    shapes = [
        Point(1, 1),
        Line(Point(0, 0), Point(3, 0)),
        Rectangle(Point(0, 0), Point(2, 2)),
        Triangle(Point(0, 0), Point(2, 0), Point(0, 2)),
        Circle(Point(5, 5), 2),
    ]
    for shape in shapes:
        draw(shape, recorder, solid_red)
    assert len(recorder.writes) == 1 + 4 + 12 + 9 + 16


def test_draw_rejects_unknown_shape(recorder):
    with pytest.raises(TypeError):
        draw((1, 2), recorder)


def test_draw_all_counts_and_orders(recorder, counting_colour):
    shapes = [Point(0, 0), Point(1, 1), Line(Point(2, 2), Point(4, 2))]
    assert draw_all(shapes, recorder, counting_colour) == 3
    assert recorder.coords == [(0, 0), (1, 1), (2, 2), (3, 2), (4, 2)]
    assert counting_colour.calls == 5


def test_drawing_does_not_change_shapes(recorder):
    rect = Rectangle(Point(0, 0), Point(5, 5))
    before = rect.corners()
    rect.draw(recorder)
    rect.draw(recorder)
    assert rect.corners() == before


def test_point_random_bad_height_samples_nothing():
    rng = RandomSource(8)
    with pytest.raises(InvalidRangeError):
        Point.random(10, 0, rng)
    assert rng.randrange(0, 1_000_000) == RandomSource(8).randrange(0, 1_000_000)


def test_shape_pixels_are_iterators():
    line = Line(Point(0, 0), Point(2, 1))
    assert list(line.pixels()) == [(0, 0), (1, 1), (2, 1)]
    assert len(list(Circle(Point(0, 0), 1).pixels())) == 8
