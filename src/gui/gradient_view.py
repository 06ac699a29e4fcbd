"""
Gradient View
Full-window QOpenGLWidget that draws the gradient every frame.

Frames are paced by the display: each swap schedules the next update, so
the loop runs at the vsync rate and pauses when the window is hidden.
"""

import time

from PyQt5.QtWidgets import QOpenGLWidget, QSizePolicy
from PyQt5.QtCore import pyqtSignal

from src.model.parameter_store import ParameterStore
from src.render.gradient_renderer import GradientRenderer, InitializationError
from src.utils.logger import logger


class GradientView(QOpenGLWidget):
    """Renders the store's parameters once per displayed frame."""

    init_failed = pyqtSignal(str)

    def __init__(self, store: ParameterStore, parent=None):
        super().__init__(parent)
        self.store = store
        self.renderer = None
        self.failed = False
        self._start = time.monotonic()

        self.setObjectName("gradient_view")
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMouseTracking(True)
        self.frameSwapped.connect(self._schedule_frame)

    def elapsed(self) -> float:
        """Seconds since the view was created."""
        return time.monotonic() - self._start

    def initializeGL(self):
        try:
            self.renderer = GradientRenderer.from_current_context()
        except InitializationError as e:
            self.failed = True
            logger.error("Gradient renderer unavailable", component="RENDER", details=str(e))
            self.init_failed.emit(str(e))
            return
        logger.info("Gradient renderer initialized", component="RENDER")

    def resizeGL(self, width, height):
        if self.renderer is None:
            return
        ratio = self.devicePixelRatioF()
        self.renderer.resize(int(width * ratio), int(height * ratio))

    def paintGL(self):
        if self.renderer is None:
            return
        self.store.commit_frame()
        params = self.store.get()
        framebuffer = self.renderer.ctx.detect_framebuffer(self.defaultFramebufferObject())
        self.renderer.render(params, self.elapsed(), framebuffer)

    def _schedule_frame(self):
        if not self.failed:
            self.update()

    def release(self):
        """Free GL objects. Call before the widget is destroyed."""
        if self.renderer is None:
            return
        self.makeCurrent()
        self.renderer.release()
        self.renderer = None
        self.doneCurrent()
