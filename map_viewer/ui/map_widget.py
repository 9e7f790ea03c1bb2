from __future__ import annotations

import logging
from pathlib import Path

from PyQt5 import QtCore, QtGui, QtSvg, QtWidgets

from map_viewer.interaction import GestureAdapter
from map_viewer.model.view_models import Rect, ViewWindow

logger = logging.getLogger(__name__)

MOUSE_POINTER_ID = 1


class MapWidget(QtWidgets.QWidget):
    """SVG render surface that shows one view window of the scene.

    The view box always fills the whole widget rectangle, stretching if the
    widget's aspect differs from the scene's, so one pixel maps to
    ``window.w / width()`` scene units horizontally and ``window.h /
    height()`` vertically.

    Pointer coordinates are reported in global screen pixels so that moves
    delivered during a mouse grab keep working outside the widget.
    """

    geometryChangedOnScreen = QtCore.pyqtSignal()

    def __init__(
        self,
        svg_path: Path | None = None,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setMinimumSize(320, 240)
        self.setFocusPolicy(QtCore.Qt.StrongFocus)

        palette = self.palette()
        palette.setColor(QtGui.QPalette.Window, QtGui.QColor("white"))
        self.setAutoFillBackground(True)
        self.setPalette(palette)

        self._renderer = QtSvg.QSvgRenderer(self)
        self._gestures: GestureAdapter | None = None
        self._captured_pointer: int | None = None
        self._view_rect: QtCore.QRectF | None = None
        if svg_path is not None:
            self.load(svg_path)

    def load(self, svg_path: Path) -> bool:
        loaded = self._renderer.load(str(svg_path))
        if not loaded:
            logger.info("Could not load SVG scene %s", svg_path)
        elif self._view_rect is not None:
            # loading replaces the view box with the document's own
            self._renderer.setViewBox(self._view_rect)
        self.update()
        return loaded

    def set_gesture_adapter(self, gestures: GestureAdapter) -> None:
        self._gestures = gestures

    def view_box(self) -> QtCore.QRectF:
        if self._view_rect is None:
            return self._renderer.viewBoxF()
        return QtCore.QRectF(self._view_rect)

    # ------------------------------------------------------------------
    # RenderSurface
    # ------------------------------------------------------------------
    def set_view_rect(self, window: ViewWindow) -> None:
        self._view_rect = QtCore.QRectF(*window.as_tuple())
        self._renderer.setViewBox(self._view_rect)
        self.update()

    def pixel_size(self) -> tuple[float, float]:
        return (float(self.width()), float(self.height()))

    def screen_rect(self) -> Rect:
        top_left = self.mapToGlobal(QtCore.QPoint(0, 0))
        return (
            float(top_left.x()),
            float(top_left.y()),
            float(self.width()),
            float(self.height()),
        )

    def capture_pointer(self, pointer_id: int) -> None:
        self._captured_pointer = pointer_id
        self.grabMouse()
        self.setCursor(QtCore.Qt.ClosedHandCursor)

    def release_pointer(self, pointer_id: int) -> None:
        if self._captured_pointer != pointer_id:
            return
        self._captured_pointer = None
        self.releaseMouse()
        self.unsetCursor()

    # ------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------
    def paintEvent(self, event: QtGui.QPaintEvent) -> None:  # noqa: D401
        _ = event
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.Antialiasing)
        if self._renderer.isValid():
            self._renderer.render(painter, QtCore.QRectF(self.rect()))
        painter.end()

    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:  # noqa: D401
        super().resizeEvent(event)
        self.geometryChangedOnScreen.emit()

    def mousePressEvent(self, event: QtGui.QMouseEvent) -> None:  # noqa: D401
        if self._gestures is None or event.button() != QtCore.Qt.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.globalPos()
        if self._gestures.handle_pointer_down(MOUSE_POINTER_ID, pos.x(), pos.y()):
            event.accept()

    def mouseMoveEvent(self, event: QtGui.QMouseEvent) -> None:  # noqa: D401
        if self._gestures is None:
            return
        pos = event.globalPos()
        if self._gestures.handle_pointer_move(MOUSE_POINTER_ID, pos.x(), pos.y()):
            event.accept()

    def mouseReleaseEvent(self, event: QtGui.QMouseEvent) -> None:  # noqa: D401
        if self._gestures is None or event.button() != QtCore.Qt.LeftButton:
            return
        pos = event.globalPos()
        if self._gestures.handle_pointer_up(MOUSE_POINTER_ID, pos.x(), pos.y()):
            event.accept()

    def wheelEvent(self, event: QtGui.QWheelEvent) -> None:  # noqa: D401
        if self._gestures is None:
            event.ignore()
            return
        pos = event.globalPosition()
        # Qt reports wheel-away as positive, the gesture layer expects negative
        delta_y = -event.angleDelta().y()
        if self._gestures.handle_wheel(delta_y, pos.x(), pos.y()):
            event.accept()
        else:
            event.ignore()

    def hideEvent(self, event: QtGui.QHideEvent) -> None:  # noqa: D401
        if self._gestures is not None:
            self._gestures.handle_capture_lost()
        super().hideEvent(event)

    def changeEvent(self, event: QtCore.QEvent) -> None:  # noqa: D401
        if (
            event.type() == QtCore.QEvent.ActivationChange
            and not self.isActiveWindow()
            and self._gestures is not None
        ):
            self._gestures.handle_capture_lost()
        super().changeEvent(event)
