# scene.py
import logging
import math
import random
from algorithms import ClipRect
from config import (
    ANIMATION_SPEED, ZOOM_SPEED, FLIGHT_START, FLIGHT_PEAK, FLIGHT_END, CAMERA_START,
    STAR_COUNT, FLAME_COUNT, PLANETS, BLACK, WHITE, RED, SILVER, BOUNDARY,
    SCREEN_W, SCREEN_H, SKY, YELLOW, MOUNTAIN, LAKE, REFLECTION, HORIZON_Y, MOUNTAINS,
    SUN_CENTER, SUN_RADIUS, SUN_SEGMENTS, ZOOM_START, ZOOM_STEP, ZOOM_SHOW_LANDSCAPE
)
from fill import boundary_fill
from renderer import Renderer, polygon_centroid
from states import FillStrategy
from transform2d import to_pixels, quadratic_bezier, translate, reflect_y, ring

logger = logging.getLogger(__name__)

# Rocket model in local coordinates, nose pointing +y
ROCKET_PARTS = [
    # name, vertices, color
    ("nose", [(0, 40), (-15, 10), (15, 10)], RED),
    ("body", [(-15, 10), (15, 10), (15, -30), (-15, -30)], SILVER),
    ("left_fin", [(-15, 0), (-15, -25), (-25, -35)], RED),
    ("right_fin", [(15, 0), (15, -25), (25, -35)], RED),
]
EXHAUST_BASE = [(-15, -40), (15, -40)]


class SceneState:
    """Animation state of the flight: rocket pose and the camera window."""

    def __init__(self):
        self.reset()

    def reset(self):
        self.t = 0.0
        self.zoom_t = 0.0
        self.rocket_pos = (float(FLIGHT_START[0]), float(FLIGHT_START[1]))
        self.rocket_angle = 0.0
        self.camera = ClipRect(*CAMERA_START)

    @property
    def landed(self):
        return self.t >= 1.0

    @property
    def scale_factor(self):
        # smallest at both ends of the flight, full size at the top of the arc
        return 1.0 - abs(0.5 - self.t)

    def advance(self, steps=1):
        for _ in range(steps):
            self._step()

    def _step(self):
        if self.t < 1.0:
            self.t += ANIMATION_SPEED
            t = self.t
            self.rocket_pos = quadratic_bezier(FLIGHT_START, FLIGHT_PEAK, FLIGHT_END, t)
            self.rocket_angle = -360.0 * t * (1.0 - t)
            self.camera = ClipRect(50 - 50 * t, 150 + 650 * t, 250 - 250 * t, 450 + 150 * t)
            if self.t >= 1.0:
                logger.info("rocket landed, camera closing in")
        else:
            if self.zoom_t < 1.0:
                self.zoom_t = min(1.0, self.zoom_t + ZOOM_SPEED)
            k = 1.0 - self.zoom_t
            self.camera = ClipRect(600 - 50 * k, 800 + 50 * k, 200 - 50 * k, 400 + 50 * k)


def rocket_polygons(state):
    """Rocket parts in pixel coordinates for the current pose."""
    offset = (int(state.rocket_pos[0]), int(state.rocket_pos[1]))
    return [(name, to_pixels(verts, state.rocket_angle, state.scale_factor, offset), color)
            for name, verts, color in ROCKET_PARTS]


class SpaceScene:
    """Stars, two planets and a rocket, filled with either fill strategy."""

    def __init__(self, strategy=FillStrategy.SCANLINE, seed=None):
        self.strategy = strategy
        self.rng = random.Random(seed)

    def set_strategy(self, strategy):
        if strategy != self.strategy:
            logger.info("fill strategy: %s -> %s", self.strategy.value, strategy.value)
        self.strategy = strategy

    def render(self, canvas, state):
        canvas.clear(BLACK)
        renderer = Renderer(canvas, state.camera)
        self.draw_stars(renderer)
        self.draw_planets(renderer)
        self.draw_flames(renderer, state)
        self.draw_rocket(renderer, state)
        return renderer

    def draw_stars(self, renderer):
        w, h = renderer.canvas.size
        stars = [(self.rng.randrange(w), self.rng.randrange(h)) for _ in range(STAR_COUNT)]
        renderer.draw_points(stars, WHITE)

    def draw_planets(self, renderer):
        for center, radius, color in PLANETS:
            if self.strategy == FillStrategy.BOUNDARY:
                renderer.draw_circle(center, radius, BOUNDARY)
                boundary_fill(center, color, BOUNDARY, renderer.canvas)
                renderer.draw_circle(center, radius, color)
            else:
                renderer.fill_circle_scanline(center, radius, color)

    def draw_flames(self, renderer, state):
        base_l, base_r = to_pixels(EXHAUST_BASE, state.rocket_angle, state.scale_factor,
                                   (int(state.rocket_pos[0]), int(state.rocket_pos[1])))
        rad = math.radians(state.rocket_angle - 90.0)
        dir_x, dir_y = math.cos(rad), math.sin(rad)
        for _ in range(FLAME_COUNT):
            u = self.rng.random()
            base = (int(base_l[0] + u * (base_r[0] - base_l[0])),
                    int(base_l[1] + u * (base_r[1] - base_l[1])))
            length = (10 + self.rng.randrange(20)) * state.scale_factor
            tip = (int(base[0] + length * dir_x), int(base[1] + length * dir_y))
            color = (1.0, 0.5 + self.rng.randrange(50) / 100.0, 0.0)
            renderer.draw_line((base[0] - 2, base[1]), tip, color)
            renderer.draw_line((base[0] + 2, base[1]), tip, color)

    def draw_rocket(self, renderer, state):
        parts = rocket_polygons(state)
        if self.strategy == FillStrategy.BOUNDARY:
            # every sentinel outline goes down before any fill starts
            for _, verts, _ in parts:
                renderer.draw_polygon_outline(verts, BOUNDARY, clip=False)
            for _, verts, color in parts:
                boundary_fill(polygon_centroid(verts), color, BOUNDARY, renderer.canvas)
            for _, verts, color in parts:
                renderer.draw_polygon_outline(verts, color, clip=False)
        else:
            for _, verts, color in parts:
                renderer.fill_polygon_scanline(verts, color)


class SceneryState:
    """Zoom of the scenery view: starts on a close-up of the sun and pulls back."""

    def __init__(self):
        self.reset()

    def reset(self):
        self.zoom_factor = ZOOM_START

    @property
    def show_landscape(self):
        return self.zoom_factor <= ZOOM_SHOW_LANDSCAPE

    @property
    def sun_radius(self):
        return int(SUN_RADIUS * self.zoom_factor)

    @property
    def camera(self):
        return ClipRect(0, SCREEN_W - 1, 0, SCREEN_H - 1)

    def advance(self, steps=1):
        for _ in range(steps):
            if self.zoom_factor > 1.0:
                sun_only = not self.show_landscape
                self.zoom_factor -= ZOOM_STEP
                if sun_only and self.show_landscape:
                    logger.info("zoomed out far enough, drawing landscape")


def sun_polygon(center, radius):
    return translate(ring(radius, SUN_SEGMENTS), center[0], center[1])


class SceneryScene:
    """Mountains, a lake with their reflection and the sun, all scanline filled."""

    def render(self, canvas, state):
        canvas.clear(SKY)
        renderer = Renderer(canvas, state.camera)
        if state.show_landscape:
            renderer.draw_line((0, HORIZON_Y), (canvas.width, HORIZON_Y), BLACK)
            for mountain in MOUNTAINS:
                renderer.fill_polygon_scanline(mountain, MOUNTAIN)
            renderer.fill_polygon_scanline(
                [(0, 0), (canvas.width, 0), (canvas.width, HORIZON_Y), (0, HORIZON_Y)], LAKE)
            for mountain in MOUNTAINS:
                renderer.fill_polygon_scanline(reflect_y(mountain, HORIZON_Y), REFLECTION)
        self.draw_sun(renderer, state.sun_radius)
        return renderer

    def draw_sun(self, renderer, radius):
        renderer.fill_polygon_scanline(sun_polygon(SUN_CENTER, radius), YELLOW)
        renderer.draw_circle(SUN_CENTER, radius, BLACK)
