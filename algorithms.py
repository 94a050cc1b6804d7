# algorithms.py
import logging
import math
from collections import namedtuple

logger = logging.getLogger(__name__)

ClipRect = namedtuple("ClipRect", ["xmin", "xmax", "ymin", "ymax"])


def liang_barsky_clip(p0, p1, rect):
    """Liang-Barsky line clipping.
    Returns the visible part of segment p0-p1 as a pair of integer points,
    or None when nothing of it lies inside rect."""
    xmin, xmax, ymin, ymax = rect
    if xmin > xmax or ymin > ymax:
        raise ValueError(f"inverted clip rectangle {tuple(rect)}")
    x0, y0 = p0
    x1, y1 = p1
    dx = x1 - x0
    dy = y1 - y0
    p = (-dx, dx, -dy, dy)
    q = (x0 - xmin, xmax - x0, y0 - ymin, ymax - y0)
    u1, u2 = 0.0, 1.0
    for pi, qi in zip(p, q):
        if pi == 0:
            # parallel to this edge
            if qi < 0:
                return None
            continue
        r = qi / pi
        if pi < 0:
            u1 = max(u1, r)
        else:
            u2 = min(u2, r)
    if u1 > u2:
        return None
    return ((int(round(x0 + u1 * dx)), int(round(y0 + u1 * dy))),
            (int(round(x0 + u2 * dx)), int(round(y0 + u2 * dy))))


def bresenham_line(p0, p1):
    """Integer Bresenham line algorithm. Yields (x,y) from p0 to p1 inclusive.

    The error term breaks ties differently per direction, so pixels are always
    walked from the lexicographically smaller endpoint, and both orders cover
    the same pixels. Only that direction is lazy: when p0 is the larger end the
    whole walk is built as a list first and then yielded backwards.
    """
    start = (int(p0[0]), int(p0[1]))
    end = (int(p1[0]), int(p1[1]))
    if end < start:
        yield from reversed(list(_bresenham_walk(end, start)))
    else:
        yield from _bresenham_walk(start, end)


def _bresenham_walk(p0, p1):
    x, y = p0
    x1, y1 = p1
    dx = abs(x1 - x)
    dy = abs(y1 - y)
    sx = 1 if x < x1 else -1
    sy = 1 if y < y1 else -1
    err = dx - dy
    while True:
        yield (x, y)
        if x == x1 and y == y1:
            return
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def _octants(cx, cy, x, y):
    return (
        (cx + x, cy + y), (cx - x, cy + y), (cx + x, cy - y), (cx - x, cy - y),
        (cx + y, cy + x), (cx - y, cy + x), (cx + y, cy - x), (cx - y, cy - x),
    )


def midpoint_circle(center, radius):
    """Midpoint circle algorithm. Yields boundary pixels, 8 per octant step.

    Only the octant from (0, r) to the diagonal is walked; the rest comes from
    symmetry. Points on the axes and on the diagonal (x == y) come out more
    than once. Negative radius is treated as 0.
    """
    cx, cy = int(center[0]), int(center[1])
    r = max(0, int(radius))
    x, y = 0, r
    d = 1 - r
    yield from _octants(cx, cy, x, y)
    while x < y:
        x += 1
        if d < 0:
            # midpoint inside, keep y
            d += 2 * x + 1
        else:
            y -= 1
            d += 2 * (x - y) + 1
        yield from _octants(cx, cy, x, y)


def scanline_spans(polygon):
    """Even-odd scanline spans of a polygon as (x_start, x_end, y), inclusive.

    Edges use the half-open rule min(a.y, b.y) <= y < max(a.y, b.y) so a vertex
    shared by two edges is counted once. A span covers the pixels whose x lies
    between the two crossings.
    """
    pts = [(int(x), int(y)) for x, y in polygon]
    if len(pts) < 3:
        return []
    n = len(pts)
    min_y = min(y for _, y in pts)
    max_y = max(y for _, y in pts)
    spans = []
    for y in range(min_y, max_y + 1):
        intersections = []
        for i in range(n):
            ax, ay = pts[i]
            bx, by = pts[(i + 1) % n]
            if ay == by:
                continue
            if ay <= y < by or by <= y < ay:
                intersections.append(ax + (y - ay) * (bx - ax) / (by - ay))
        if len(intersections) % 2:
            logger.debug("odd crossing count %d on scanline y=%d, skipped", len(intersections), y)
            continue
        intersections.sort()
        for i in range(0, len(intersections), 2):
            x_start = math.ceil(intersections[i])
            x_end = math.floor(intersections[i + 1])
            if x_start <= x_end:
                spans.append((x_start, x_end, y))
    return spans
