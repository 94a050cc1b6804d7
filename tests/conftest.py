import pytest

from canvas import Canvas
from config import BLACK


@pytest.fixture
def canvas():
    return Canvas(64, 64, BLACK)


@pytest.fixture
def make_canvas():
    def _make(width, height, background=BLACK):
        return Canvas(width, height, background)

    return _make
