# states.py
from enum import Enum

class FillStrategy(Enum):
    BOUNDARY = "boundary"   # sentinel outline + flood fill from the centroid
    SCANLINE = "scanline"   # edge-intersection spans
