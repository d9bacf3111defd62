"""Pan, pinch and double-tap handling.

Continuous gestures (pan, pinch samples) update the TransformState directly.
Gesture ends and double taps hand a target scale to the TransformAnimator.
"""

from __future__ import annotations

import logging

from .constants import SCALE_RESTRICT_FACTOR
from .transform_animator import TransformAnimator
from .transform_state import TransformState

logger = logging.getLogger(__name__)


class GestureController:
    """Turns gesture events into changes of a TransformState.

    While a pinch is live the scale may leave ``[min_scale, max_scale]``;
    samples taken outside the range are damped so the content resists further
    scaling. Releasing the pinch animates the scale back into range.
    """

    def __init__(
        self,
        state: TransformState,
        animator: TransformAnimator,
        restrict_factor: float = SCALE_RESTRICT_FACTOR,
    ):
        self.state = state
        self.animator = animator
        self.restrict_factor = restrict_factor
        self.previous_focus_x = 0.0
        self.previous_focus_y = 0.0
        self._scaling = False

    @property
    def is_scaling(self) -> bool:
        return self._scaling

    def on_pan(self, dx: float, dy: float):
        """Scroll by a drag distance (previous position minus current position)."""
        if self._scaling:
            return
        state = self.state
        state.offset_x = state.adjusted_x(state.offset_x - dx, state.scale)
        state.offset_y = state.adjusted_y(state.offset_y - dy, state.scale)

    def on_scale_gesture_begin(self, focus_x: float, focus_y: float):
        self.previous_focus_x = focus_x
        self.previous_focus_y = focus_y
        self._scaling = True

    def restricted_factor(self, factor: float) -> float:
        """Damp ``factor`` when the current scale is at or beyond its range.

        The comparison is against the bounds exactly; inside the range the
        factor passes through unchanged.
        """
        state = self.state
        if state.scale >= state.max_scale:
            return 1.0 + (factor - 1.0) * state.max_scale / state.scale * self.restrict_factor
        elif state.scale <= state.min_scale:
            return 1.0 + (factor - 1.0) * state.scale / state.min_scale * self.restrict_factor
        return factor

    def on_scale_gesture_sample(self, factor: float, focus_x: float, focus_y: float) -> float:
        """Apply one pinch sample.

        Args:
            factor: Scale change since the previous sample
            focus_x, focus_y: Current focal point in view coordinates

        Returns:
            The factor actually applied after damping (1.0 if nothing is shown yet)
        """
        if not self.state.is_initialized:
            logger.debug("Scale sample ignored: no size known yet")
            return 1.0
        if not self._scaling:
            self.on_scale_gesture_begin(focus_x, focus_y)

        applied = self.restricted_factor(factor)
        state = self.state
        state.scale *= applied

        # The previous focal point moves to the current one, scaled around it
        state.offset_x = focus_x + (state.offset_x - self.previous_focus_x) * applied
        state.offset_y = focus_y + (state.offset_y - self.previous_focus_y) * applied

        self.previous_focus_x = focus_x
        self.previous_focus_y = focus_y
        return applied

    def on_scale_gesture_end(self):
        """Snap the scale back into range around the last focal point."""
        self._scaling = False
        if not self.state.is_initialized:
            return
        target = self.state.clamp_scale(self.state.scale)
        self.animator.start_scale_animation(target, self.previous_focus_x, self.previous_focus_y)

    def on_double_tap(self, x: float, y: float):
        """Toggle between native size (1.0) and the fit scale around ``(x, y)``."""
        state = self.state
        if not state.is_initialized:
            logger.debug("Double tap ignored: no size known yet")
            return
        if state.is_at_fit_scale():
            target = 1.0
        else:
            target = state.fit_scale
        logger.debug("Double tap at (%.1f, %.1f): target scale %.4f", x, y, target)
        self.animator.start_scale_animation(target, x, y)
