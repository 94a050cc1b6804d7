# canvas.py
import numpy as np
from config import BLACK, COLOR_EPSILON


def colors_equal(a, b, eps=COLOR_EPSILON):
    """Approximate color equality: every channel closer than eps."""
    return all(abs(ca - cb) < eps for ca, cb in zip(a, b))


class Canvas:
    """Fixed-size RGB pixel buffer addressed by integer (x, y), y pointing up."""

    def __init__(self, width, height, background=BLACK):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        # row index is y, so row 0 is the bottom of the picture
        self.pixels = np.zeros((self.height, self.width, 3), dtype=np.float64)
        self.clear(background)

    @property
    def size(self):
        return (self.width, self.height)

    def in_bounds(self, p):
        x, y = p
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self, color=BLACK):
        self.pixels[:, :] = color

    def set(self, p, color):
        x, y = p
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = color

    def get(self, p):
        x, y = p
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel {p} outside {self.width}x{self.height} canvas")
        r, g, b = self.pixels[y, x]
        return (float(r), float(g), float(b))

    def plot(self, points, color):
        for p in points:
            self.set(p, color)

    def hline(self, x0, x1, y, color):
        """Inclusive horizontal span, clamped to the canvas."""
        if not (0 <= y < self.height):
            return
        if x0 > x1:
            x0, x1 = x1, x0
        x0 = max(0, x0)
        x1 = min(self.width - 1, x1)
        if x0 > x1:
            return
        self.pixels[y, x0:x1 + 1] = color

    def count(self, color, eps=COLOR_EPSILON):
        """Number of pixels matching color."""
        diff = np.abs(self.pixels - np.asarray(color, dtype=np.float64))
        return int(np.count_nonzero(np.all(diff < eps, axis=2)))

    def to_rgb8(self):
        return (np.clip(self.pixels, 0.0, 1.0) * 255.0 + 0.5).astype(np.uint8)
