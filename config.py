# config.py
SCREEN_W = 800
SCREEN_H = 600
FPS = 60
LOG_LEVEL = "INFO"

# Two colors are the same pixel value when every channel differs by less than this
COLOR_EPSILON = 0.01

# Colors (normalized floats 0..1)
BLACK = (0.0, 0.0, 0.0)
WHITE = (1.0, 1.0, 1.0)
RED = (1.0, 0.0, 0.0)
SILVER = (0.8, 0.8, 0.9)
DARK_GREY = (0.3, 0.3, 0.3)
BLUE = (0.2, 0.4, 1.0)
ORANGE = (0.9, 0.3, 0.1)
# sentinel border for boundary fill, never used by the final scene
BOUNDARY = (1.0, 0.0, 1.0)

# Animation
ANIMATION_SPEED = 0.001      # flight parameter step per frame
ZOOM_SPEED = 0.005           # camera close-in step per frame after landing
FLIGHT_START = (100, 370)
FLIGHT_PEAK = (400, 550)
FLIGHT_END = (700, 400)

# Camera window at t=0 (xmin, xmax, ymin, ymax)
CAMERA_START = (50, 150, 250, 450)

# Scene
STAR_COUNT = 200
FLAME_COUNT = 15
PLANETS = [
    # center, radius, color
    ((100, 300), 50, BLUE),
    ((700, 300), 80, ORANGE),
]

# Scenery: mountains over a lake, sun zooming out
SKY = (0.8, 0.9, 1.0)
YELLOW = (1.0, 1.0, 0.0)
MOUNTAIN = (0.2, 0.2, 0.2)
LAKE = (0.0, 0.0, 0.5)
REFLECTION = (0.15, 0.15, 0.15)
HORIZON_Y = 100
MOUNTAINS = [
    [(100, 100), (250, 300), (400, 100)],
    [(300, 100), (450, 350), (600, 100)],
]
SUN_CENTER = (500, 450)
SUN_RADIUS = 40
SUN_SEGMENTS = 360
ZOOM_START = 5.0
ZOOM_STEP = 0.05            # zoom factor drop per frame until it reaches 1
ZOOM_SHOW_LANDSCAPE = 1.2   # below this the ground layers are drawn
