import math

import numpy as np
import pytest

from algorithms import bresenham_line, midpoint_circle
from canvas import colors_equal
from config import BLACK, BLUE, BOUNDARY, RED
from fill import boundary_fill


def outline(canvas, vertices, color):
    n = len(vertices)
    for i in range(n):
        canvas.plot(bresenham_line(vertices[i], vertices[(i + 1) % n]), color)


@pytest.mark.parametrize("r", [3, 10, 25])
def test_fill_inside_circle(make_canvas, r):
    canvas = make_canvas(64, 64)
    center = (32, 32)
    border = set(midpoint_circle(center, r))
    canvas.plot(border, BOUNDARY)

    filled = boundary_fill(center, BLUE, BOUNDARY, canvas)

    for x in range(64):
        for y in range(64):
            d = math.hypot(x - center[0], y - center[1])
            if (x, y) in border:
                assert canvas.get((x, y)) == BOUNDARY
            elif d < r - 1:
                assert canvas.get((x, y)) == BLUE, (x, y)
            elif d > r + 1:
                assert canvas.get((x, y)) == BLACK, (x, y)
    assert filled == canvas.count(BLUE)
    assert filled <= 4 * r * r


def test_fill_polygon_outline(make_canvas):
    canvas = make_canvas(30, 30)
    outline(canvas, [(2, 2), (25, 5), (20, 27), (4, 20)], BOUNDARY)
    filled = boundary_fill((12, 12), RED, BOUNDARY, canvas)
    assert filled > 0
    assert canvas.get((12, 12)) == RED
    assert canvas.get((0, 0)) == BLACK
    assert canvas.get((29, 29)) == BLACK


def test_seed_on_border_is_noop(canvas):
    canvas.plot(midpoint_circle((20, 20), 8), BOUNDARY)
    before = canvas.pixels.copy()
    assert boundary_fill((20, 28), BLUE, BOUNDARY, canvas) == 0
    assert np.array_equal(before, canvas.pixels)


def test_seed_already_fill_color_is_noop(canvas):
    canvas.set((5, 5), BLUE)
    before = canvas.pixels.copy()
    assert boundary_fill((5, 5), BLUE, BOUNDARY, canvas) == 0
    assert np.array_equal(before, canvas.pixels)


def test_seed_outside_canvas_is_noop(canvas):
    assert boundary_fill((-1, 5), BLUE, BOUNDARY, canvas) == 0
    assert boundary_fill((5, 64), BLUE, BOUNDARY, canvas) == 0
    assert canvas.count(BLACK) == 64 * 64


def test_second_fill_is_noop(canvas):
    canvas.plot(midpoint_circle((30, 30), 12), BOUNDARY)
    first = boundary_fill((30, 30), BLUE, BOUNDARY, canvas)
    assert first > 0
    assert boundary_fill((30, 30), BLUE, BOUNDARY, canvas) == 0


def test_unbounded_region_stops_at_canvas_edge(make_canvas):
    canvas = make_canvas(40, 30)
    assert boundary_fill((10, 10), RED, BOUNDARY, canvas) == 40 * 30
    assert canvas.count(RED) == 40 * 30


def test_gap_in_border_leaks(make_canvas):
    canvas = make_canvas(30, 30)
    outline(canvas, [(5, 5), (20, 5), (20, 20), (5, 20)], BOUNDARY)
    canvas.set((12, 20), BLACK)
    boundary_fill((12, 12), RED, BOUNDARY, canvas)
    # the fill escapes through the missing pixel
    assert canvas.get((0, 0)) == RED
    assert canvas.get((12, 20)) == RED


def test_border_matched_within_epsilon(make_canvas):
    canvas = make_canvas(20, 20)
    near_border = (0.995, 0.004, 1.0)
    assert colors_equal(near_border, BOUNDARY)
    outline(canvas, [(2, 2), (15, 2), (15, 15), (2, 15)], near_border)
    boundary_fill((8, 8), BLUE, BOUNDARY, canvas)
    assert canvas.get((0, 0)) == BLACK
    assert canvas.get((8, 8)) == BLUE
    assert canvas.get((2, 8)) == near_border
