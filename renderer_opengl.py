# renderer_opengl.py
import numpy as np
from OpenGL.GL import *
from OpenGL.GLU import *


def camera_crop(rgb8, camera):
    """Rows and columns of the canvas image that fall inside the camera window."""
    h, w = rgb8.shape[:2]
    xmin, xmax, ymin, ymax = camera
    x0 = max(0, min(w - 1, int(xmin)))
    x1 = max(x0, min(w - 1, int(xmax)))
    y0 = max(0, min(h - 1, int(ymin)))
    y1 = max(y0, min(h - 1, int(ymax)))
    return np.ascontiguousarray(rgb8[y0:y1 + 1, x0:x1 + 1])


class GLPresenter:
    """Shows a software-rasterized Canvas in the OpenGL window.

    Nothing is drawn with GL primitives: the finished pixel buffer is cropped
    to the camera window and blitted with glDrawPixels, scaled to the window.
    """

    def __init__(self, w, h):
        self.w = w
        self.h = h
        self._init_gl()

    def _init_gl(self):
        glViewport(0, 0, self.w, self.h)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        gluOrtho2D(0, self.w, 0, self.h)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
        glDisable(GL_DEPTH_TEST)
        glPixelStorei(GL_UNPACK_ALIGNMENT, 1)

    def clear(self):
        glClearColor(0.0, 0.0, 0.0, 1.0)
        glClear(GL_COLOR_BUFFER_BIT)

    def present(self, canvas, camera):
        view = camera_crop(canvas.to_rgb8(), camera)
        vh, vw = view.shape[:2]
        # canvas row 0 is the bottom row, which is also what glDrawPixels expects
        glPixelZoom(self.w / float(vw), self.h / float(vh))
        glRasterPos2i(0, 0)
        glDrawPixels(vw, vh, GL_RGB, GL_UNSIGNED_BYTE, view)
        glPixelZoom(1.0, 1.0)
