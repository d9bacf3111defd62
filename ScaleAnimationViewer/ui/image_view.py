"""Image widget with pinch, drag and double-tap zoom.

This module provides ScaleAnimationImageView, a QWidget that forwards Qt
input to a ViewTransformController and draws the image with the
controller's transform:
- Left-drag pans the image
- Double-click toggles between fit-to-view and native size
- Pinch gestures (touch screens and touchpads) zoom with elastic limits
- Ctrl + mouse wheel zooms around the cursor
- Resizing the widget re-clamps scale and position

Each paint first advances the running animation, then reads the transform.
"""

from typing import Optional
from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtGui import QPainter, QPixmap, QImage, QTransform, QColor
from PySide6.QtCore import Qt, QEvent, QPointF, Signal

from ..core.config import ViewTransformConfig
from ..core.constants import WHEEL_STEPS_PER_DOUBLING
from ..core.controller import ViewTransformController


class ScaleAnimationImageView(QWidget):
    """Widget displaying one image under a clamped, animated zoom/pan transform.

    Signals:
        transform_changed(scale, offset_x, offset_y): Emitted from paintEvent
            when the drawn transform differs from the previous frame.
    """

    transform_changed = Signal(float, float, float)

    def __init__(self, parent=None, config: Optional[ViewTransformConfig] = None):
        super().__init__(parent)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setAttribute(Qt.WA_AcceptTouchEvents)
        self.grabGesture(Qt.PinchGesture)

        self.controller = ViewTransformController(config, request_refresh=self.update)
        self.controller.on_viewport_size_changed(self.width(), self.height())

        self._pixmap: Optional[QPixmap] = None
        self._drag_pos: Optional[QPointF] = None
        self._last_painted = None
        self.background = QColor(32, 32, 32)

    # Content
    def set_image(self, qimage: QImage):
        """Display ``qimage`` starting at its fit scale."""
        if qimage is None or qimage.isNull():
            self.clear()
            return
        self._pixmap = QPixmap.fromImage(qimage)
        self.controller.load_content(self._pixmap.width(), self._pixmap.height())
        self.update()

    def clear(self):
        self._pixmap = None
        self.controller.load_content(0, 0)
        self.update()

    def has_image(self) -> bool:
        return self._pixmap is not None

    # Commands used by menus/shortcuts
    def fit_to_view(self):
        if self.has_image():
            self.controller.fit_to_view()

    def zoom_at_center(self, factor: float):
        if not self.has_image():
            return
        self.controller.zoom_by(factor, self.width() / 2.0, self.height() / 2.0)
        self.update()

    def toggle_fit_zoom(self):
        if not self.has_image():
            return
        self.controller.on_double_tap(self.width() / 2.0, self.height() / 2.0)

    # Qt events
    def resizeEvent(self, e):
        super().resizeEvent(e)
        self.controller.on_viewport_size_changed(e.size().width(), e.size().height())
        self.update()

    def mousePressEvent(self, e):
        if e.button() == Qt.LeftButton:
            self._drag_pos = e.position()
            self.setCursor(Qt.ClosedHandCursor)
        super().mousePressEvent(e)

    def mouseMoveEvent(self, e):
        if self._drag_pos is not None and e.buttons() & Qt.LeftButton:
            pos = e.position()
            # Pan distance is previous minus current position
            self.controller.on_pan(self._drag_pos.x() - pos.x(), self._drag_pos.y() - pos.y())
            self._drag_pos = pos
            self.update()
        super().mouseMoveEvent(e)

    def mouseReleaseEvent(self, e):
        if e.button() == Qt.LeftButton:
            self._drag_pos = None
            self.unsetCursor()
        super().mouseReleaseEvent(e)

    def mouseDoubleClickEvent(self, e):
        if e.button() == Qt.LeftButton:
            pos = e.position()
            self.controller.on_double_tap(pos.x(), pos.y())
        super().mouseDoubleClickEvent(e)

    def wheelEvent(self, e):
        if not (e.modifiers() & Qt.ControlModifier):
            super().wheelEvent(e)
            return
        steps = e.angleDelta().y() / 120.0
        if steps == 0 or not self.has_image():
            return
        pos = e.position()
        self.controller.zoom_by(2.0 ** (steps / WHEEL_STEPS_PER_DOUBLING), pos.x(), pos.y())
        self.update()
        e.accept()

    def event(self, e):
        if e.type() == QEvent.Gesture:
            pinch = e.gesture(Qt.PinchGesture)
            if pinch is not None:
                self._handle_pinch(pinch)
                e.accept()
                return True
        elif e.type() == QEvent.NativeGesture:
            if self._handle_native_gesture(e):
                e.accept()
                return True
        return super().event(e)

    def _handle_pinch(self, pinch):
        # Pinch center is reported in screen coordinates
        center = self.mapFromGlobal(pinch.centerPoint())
        state = pinch.state()
        if state == Qt.GestureStarted:
            self._drag_pos = None
            self.controller.on_scale_gesture_begin(center.x(), center.y())
        elif state == Qt.GestureUpdated:
            self.controller.on_scale_gesture_sample(pinch.scaleFactor(), center.x(), center.y())
        elif state in (Qt.GestureFinished, Qt.GestureCanceled):
            self.controller.on_scale_gesture_end()
        self.update()

    def _handle_native_gesture(self, e) -> bool:
        """Touchpad pinch (macOS) arrives as native gesture events."""
        kind = e.gestureType()
        pos = e.position()
        if kind == Qt.BeginNativeGesture:
            self.controller.on_scale_gesture_begin(pos.x(), pos.y())
        elif kind == Qt.ZoomNativeGesture:
            self.controller.on_scale_gesture_sample(1.0 + e.value(), pos.x(), pos.y())
        elif kind == Qt.EndNativeGesture:
            if self.controller.is_scaling:
                self.controller.on_scale_gesture_end()
        else:
            return False
        self.update()
        return True

    def paintEvent(self, e):
        # Advance animation before reading the transform for this frame
        self.controller.advance()
        t = self.controller.current_transform()

        painter = QPainter(self)
        painter.fillRect(self.rect(), self.background)
        if self._pixmap is None:
            painter.end()
            return

        painter.setRenderHint(QPainter.SmoothPixmapTransform, t.scale < 1.0)
        painter.setTransform(QTransform(t.scale, 0.0, 0.0, t.scale, t.offset_x, t.offset_y))
        painter.drawPixmap(0, 0, self._pixmap)
        painter.end()

        if t != self._last_painted:
            self._last_painted = t
            self.transform_changed.emit(t.scale, t.offset_x, t.offset_y)
