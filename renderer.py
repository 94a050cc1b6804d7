# renderer.py
import math
from algorithms import ClipRect, liang_barsky_clip, bresenham_line, midpoint_circle
from fill import scanline_fill


def polygon_centroid(vertices):
    """Integer mean of the vertices, truncated toward zero."""
    n = len(vertices)
    sx = sum(v[0] for v in vertices)
    sy = sum(v[1] for v in vertices)
    return (int(sx / n), int(sy / n))


class Renderer:
    """Draws outlines and filled shapes onto a Canvas through the raster algorithms."""

    def __init__(self, canvas, clip_rect=None):
        self.canvas = canvas
        self.clip_rect = None
        self.set_clip(clip_rect)

    def set_clip(self, clip_rect=None):
        if clip_rect is None:
            clip_rect = ClipRect(0, self.canvas.width - 1, 0, self.canvas.height - 1)
        self.clip_rect = ClipRect(*clip_rect)

    # ------------------ outlines ------------------
    def draw_line(self, p0, p1, color, clip=True):
        """Clip to the window then rasterize. Returns False when nothing was visible."""
        if clip:
            seg = liang_barsky_clip(p0, p1, self.clip_rect)
            if seg is None:
                return False
            p0, p1 = seg
        self.canvas.plot(bresenham_line(p0, p1), color)
        return True

    def draw_polygon_outline(self, vertices, color, clip=True):
        n = len(vertices)
        for i in range(n):
            self.draw_line(vertices[i], vertices[(i + 1) % n], color, clip=clip)

    def draw_circle(self, center, radius, color):
        self.canvas.plot(midpoint_circle(center, radius), color)

    def draw_points(self, points, color):
        self.canvas.plot(points, color)

    # ------------------ filled shapes ------------------
    def fill_polygon_scanline(self, vertices, color):
        scanline_fill(vertices, color, self.canvas)

    def fill_circle_scanline(self, center, radius, color):
        """Filled disc as one clipped horizontal line per row."""
        cx, cy = center
        r = max(0, int(radius))
        for y in range(-r, r + 1):
            dx = int(math.sqrt(r * r - y * y))
            self.draw_line((cx - dx, cy + y), (cx + dx, cy + y), color)
