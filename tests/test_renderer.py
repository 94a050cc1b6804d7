import numpy as np

from algorithms import ClipRect
from config import BLACK, BLUE, RED
from renderer import Renderer, polygon_centroid


def test_default_clip_is_whole_canvas(canvas):
    r = Renderer(canvas)
    assert r.clip_rect == ClipRect(0, 63, 0, 63)


def test_line_clipped_to_window(canvas):
    r = Renderer(canvas, ClipRect(0, 10, 0, 10))
    assert r.draw_line((5, 5), (15, 5), RED)
    assert [canvas.get((x, 5)) for x in range(5, 11)] == [RED] * 6
    assert canvas.get((11, 5)) == BLACK
    assert canvas.count(RED) == 6


def test_invisible_line_draws_nothing(canvas):
    r = Renderer(canvas, ClipRect(0, 10, 0, 10))
    before = canvas.pixels.copy()
    assert not r.draw_line((20, 20), (30, 30), RED)
    assert np.array_equal(before, canvas.pixels)


def test_unclipped_line(canvas):
    r = Renderer(canvas, ClipRect(0, 10, 0, 10))
    r.draw_line((5, 5), (15, 5), RED, clip=False)
    assert canvas.count(RED) == 11


def test_polygon_outline_is_closed(canvas):
    r = Renderer(canvas)
    tri = [(5, 5), (40, 10), (20, 50)]
    r.draw_polygon_outline(tri, BLUE)
    for v in tri:
        assert canvas.get(v) == BLUE
    # closing edge from the last vertex back to the first
    assert canvas.get((10, 23)) == BLUE or canvas.get((11, 23)) == BLUE


def test_circle_outline(canvas):
    r = Renderer(canvas)
    r.draw_circle((30, 30), 10, RED)
    for p in [(30, 40), (30, 20), (20, 30), (40, 30)]:
        assert canvas.get(p) == RED
    assert canvas.get((30, 30)) == BLACK


def test_fill_circle_scanline(canvas):
    r = Renderer(canvas)
    r.fill_circle_scanline((30, 30), 10, BLUE)
    for p in [(30, 30), (20, 30), (40, 30), (30, 40), (30, 20), (35, 35)]:
        assert canvas.get(p) == BLUE
    assert canvas.get((38, 38)) == BLACK


def test_fill_circle_respects_clip(canvas):
    r = Renderer(canvas, ClipRect(0, 29, 0, 63))
    r.fill_circle_scanline((30, 30), 10, BLUE)
    assert canvas.get((29, 30)) == BLUE
    assert canvas.get((31, 30)) == BLACK


def test_fill_polygon_scanline(canvas):
    r = Renderer(canvas)
    r.fill_polygon_scanline([(2, 2), (8, 2), (8, 8), (2, 8)], RED)
    assert canvas.count(RED) == 42


def test_centroid_truncates():
    assert polygon_centroid([(0, 0), (10, 0), (5, 10)]) == (5, 3)
    assert polygon_centroid([(0, 0), (-10, 0), (-5, -10)]) == (-5, -3)
