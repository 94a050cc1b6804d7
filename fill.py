# fill.py
import logging
from algorithms import scanline_spans
from canvas import colors_equal

logger = logging.getLogger(__name__)

NEIGHBORS_4 = ((1, 0), (-1, 0), (0, 1), (0, -1))


def boundary_fill(seed, fill_color, border_color, canvas):
    """4-connected boundary fill from seed, stopped by border_color pixels.

    The border must already be on the canvas: a missing border pixel lets the
    fill escape. Uses an explicit stack so memory grows with the filled area,
    not with recursion depth. Returns the number of pixels written.
    """
    if not canvas.in_bounds(seed):
        logger.debug("boundary fill seed %s outside canvas, nothing to do", seed)
        return 0
    stack = [(int(seed[0]), int(seed[1]))]
    filled = 0
    while stack:
        x, y = stack.pop()
        current = canvas.get((x, y))
        if colors_equal(current, border_color) or colors_equal(current, fill_color):
            continue
        canvas.set((x, y), fill_color)
        filled += 1
        for dx, dy in NEIGHBORS_4:
            n = (x + dx, y + dy)
            if canvas.in_bounds(n):
                stack.append(n)
    if filled == 0:
        logger.debug("boundary fill seed %s already border or fill color", seed)
    return filled


def scanline_fill(polygon, color, canvas):
    """Even-odd scanline fill of a closed polygon. Fewer than 3 vertices draws nothing."""
    if len(polygon) < 3:
        logger.debug("scanline fill skipped degenerate polygon with %d vertices", len(polygon))
        return
    for x_start, x_end, y in scanline_spans(polygon):
        canvas.hline(x_start, x_end, y, color)
