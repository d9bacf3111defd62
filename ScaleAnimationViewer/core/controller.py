"""View transform controller.

This module wires the three parts of the transform logic together:
- TransformState: scale/offset and their valid ranges
- GestureController: pan, pinch and double-tap input
- TransformAnimator: animated snap-back and double-tap zoom

The controller owns a single TransformState and passes it explicitly to the
gesture controller and the animator. Hosts feed it input and size events and,
once per display refresh, call ``advance()`` followed by
``current_transform()``.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .config import ViewTransformConfig
from .gesture_controller import GestureController
from .transform_animator import TransformAnimator
from .transform_state import TransformState, ViewTransform

logger = logging.getLogger(__name__)


class ViewTransformController:
    """Clamped, animated scale+translate transform for one viewport.

    Args:
        config: Construction-time settings (defaults when None)
        clock: Zero-argument callable returning seconds (time.monotonic by default)
        request_refresh: Called whenever the host should draw a new frame
    """

    def __init__(
        self,
        config: Optional[ViewTransformConfig] = None,
        clock: Optional[Callable[[], float]] = None,
        request_refresh: Optional[Callable[[], None]] = None,
    ):
        self.config = config or ViewTransformConfig()
        self._state = TransformState(
            horizontal_policy=self.config.horizontal_fit_policy,
            vertical_policy=self.config.vertical_fit_policy,
            min_scale_floor=self.config.min_scale_floor,
            max_scale_ceiling=self.config.max_scale_ceiling,
        )
        self.animator = TransformAnimator(
            self._state,
            duration_ms=self.config.animation_duration_ms,
            clock=clock,
            request_refresh=request_refresh,
        )
        self.gestures = GestureController(
            self._state,
            self.animator,
            restrict_factor=self.config.scale_restrict_factor,
        )

    @property
    def state(self) -> TransformState:
        return self._state

    @property
    def is_animating(self) -> bool:
        return self.animator.is_running

    @property
    def is_scaling(self) -> bool:
        return self.gestures.is_scaling

    # Size events
    def on_content_size_changed(self, width: float, height: float):
        self._state.on_content_size_changed(width, height)
        self.animator.retarget()

    def on_viewport_size_changed(self, width: float, height: float):
        self._state.on_viewport_size_changed(width, height)
        # A running animation must still come to rest inside the new bounds
        self.animator.retarget()

    def load_content(self, width: float, height: float):
        """Show new content of the given size starting from its fit scale.

        Any running animation is dropped since it targets the old content.
        """
        logger.debug("Loading content of size %sx%s", width, height)
        self.animator.stop()
        self._state.reset()
        self._state.on_content_size_changed(width, height)

    # Gesture events
    def on_pan(self, dx: float, dy: float):
        self.gestures.on_pan(dx, dy)

    def on_scale_gesture_begin(self, focus_x: float, focus_y: float):
        self.gestures.on_scale_gesture_begin(focus_x, focus_y)

    def on_scale_gesture_sample(self, factor: float, focus_x: float, focus_y: float) -> float:
        return self.gestures.on_scale_gesture_sample(factor, focus_x, focus_y)

    def on_scale_gesture_end(self):
        self.gestures.on_scale_gesture_end()

    def on_double_tap(self, x: float, y: float):
        self.gestures.on_double_tap(x, y)

    def zoom_by(self, factor: float, focus_x: float, focus_y: float):
        """Run a complete pinch (begin, one sample, end) around a fixed point.

        Used for discrete zoom input such as Ctrl+wheel or keyboard shortcuts.
        """
        if not self._state.is_initialized:
            return
        self.gestures.on_scale_gesture_begin(focus_x, focus_y)
        self.gestures.on_scale_gesture_sample(factor, focus_x, focus_y)
        self.gestures.on_scale_gesture_end()

    def fit_to_view(self):
        """Animate to the fit scale around the viewport center."""
        state = self._state
        if not state.is_initialized:
            return
        self.animator.start_scale_animation(state.fit_scale, state.viewport_width / 2.0, state.viewport_height / 2.0)

    # Per-frame polling
    def advance(self) -> bool:
        """Advance the running animation; True while it is still running."""
        return self.animator.advance()

    def current_transform(self) -> ViewTransform:
        return self._state.snapshot()
