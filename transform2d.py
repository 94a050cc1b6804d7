# transform2d.py
import math

def translate(points, tx, ty):
    return [(x + tx, y + ty) for (x, y) in points]

def rotate(points, angle_deg, origin=(0,0)):
    angle = math.radians(angle_deg)
    ox, oy = origin
    cos_a = math.cos(angle); sin_a = math.sin(angle)
    out = []
    for x, y in points:
        x -= ox; y -= oy
        xr = x * cos_a - y * sin_a
        yr = x * sin_a + y * cos_a
        out.append((xr + ox, yr + oy))
    return out

def scale(points, sx, sy=None, origin=(0,0)):
    if sy is None: sy = sx
    ox, oy = origin
    return [((x-ox) * sx + ox, (y-oy) * sy + oy) for x, y in points]

def reflect_y(points, axis_y):
    """Mirror points across the horizontal line y = axis_y, truncated to pixels."""
    return [(int(x), int(y)) for x, y in scale(points, 1, -1, origin=(0, axis_y))]

def ring(radius, segments):
    """Vertices of a regular polygon around the origin, truncated to pixels."""
    out = []
    for i in range(segments):
        theta = 2.0 * math.pi * i / segments
        out.append((int(radius * math.cos(theta)), int(radius * math.sin(theta))))
    return out

def to_pixels(points, angle_deg=0.0, factor=1.0, offset=(0, 0)):
    """Model -> pixel transform: rotate about the origin, scale, truncate, then offset.
    Truncation happens before the offset so a shape keeps its pixel layout while moving."""
    ox, oy = offset
    out = []
    for x, y in scale(rotate(points, angle_deg), factor):
        out.append((int(x) + ox, int(y) + oy))
    return out

def quadratic_bezier(p0, p1, p2, t):
    """Point at parameter t on the quadratic Bezier p0 -> p2 pulled towards p1."""
    u = 1.0 - t
    x = u * u * p0[0] + 2 * u * t * p1[0] + t * t * p2[0]
    y = u * u * p0[1] + 2 * u * t * p1[1] + t * t * p2[1]
    return (x, y)
