"""Linear scale/offset animation driven by wall-clock time.

The animator moves a TransformState toward a target scale and offset over a
fixed duration. Only one animation runs at a time: requests made while one is
running are dropped, and a started animation always runs to completion.

The host polls ``advance()`` once per display refresh, before reading the
transform to draw.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .constants import ANIMATION_DURATION_MS
from .transform_state import TransformState

logger = logging.getLogger(__name__)


@dataclass
class AnimationJob:
    """Start/target values of one running animation."""

    start_scale: float
    start_x: float
    start_y: float
    target_scale: float
    target_x: float
    target_y: float
    start_time: float
    duration: float

    @property
    def delta_scale(self) -> float:
        return self.target_scale - self.start_scale

    @property
    def delta_x(self) -> float:
        return self.target_x - self.start_x

    @property
    def delta_y(self) -> float:
        return self.target_y - self.start_y

    def progress(self, now: float) -> float:
        """Fraction of the duration elapsed at ``now`` (may exceed 1.0)."""
        if self.duration <= 0:
            return 1.0
        return (now - self.start_time) / self.duration


class TransformAnimator:
    """Animates a TransformState toward a target transform.

    Args:
        state: State to animate (shared with the gesture controller)
        duration_ms: Animation length in milliseconds
        clock: Zero-argument callable returning the current time in seconds
        request_refresh: Called whenever a new frame should be drawn
    """

    def __init__(
        self,
        state: TransformState,
        duration_ms: float = ANIMATION_DURATION_MS,
        clock: Optional[Callable[[], float]] = None,
        request_refresh: Optional[Callable[[], None]] = None,
    ):
        self.state = state
        self.duration = duration_ms / 1000.0
        self.clock = clock or time.monotonic
        self.request_refresh = request_refresh or (lambda: None)
        self._job: Optional[AnimationJob] = None

    @property
    def is_running(self) -> bool:
        return self._job is not None

    @property
    def job(self) -> Optional[AnimationJob]:
        return self._job

    def start_scale_animation(self, target_scale: float, pivot_x: float, pivot_y: float) -> bool:
        """Animate to ``target_scale`` keeping the content under the pivot in place.

        The target offsets are clamped for the target scale.

        Args:
            target_scale: Scale after the animation
            pivot_x: X position (view coordinates) that stays fixed
            pivot_y: Y position (view coordinates) that stays fixed

        Returns:
            True if an animation was started
        """
        state = self.state
        diff_factor = target_scale / state.scale - 1.0
        target_x = state.offset_x + (state.offset_x - pivot_x) * diff_factor
        target_y = state.offset_y + (state.offset_y - pivot_y) * diff_factor
        target_x = state.adjusted_x(target_x, target_scale)
        target_y = state.adjusted_y(target_y, target_scale)
        return self.start_animation(target_scale, target_x, target_y)

    def start_animation(self, target_scale: float, target_x: float, target_y: float) -> bool:
        """Start animating toward the given transform.

        Does nothing if an animation is already running, or if the target
        equals the current transform.

        Returns:
            True if an animation was started
        """
        if self._job is not None:
            # Never override a running animation
            logger.debug("Animation request to scale=%.4f dropped: animation running", target_scale)
            return False

        state = self.state
        if target_scale == state.scale and target_x == state.offset_x and target_y == state.offset_y:
            return False

        self._job = AnimationJob(
            start_scale=state.scale,
            start_x=state.offset_x,
            start_y=state.offset_y,
            target_scale=target_scale,
            target_x=target_x,
            target_y=target_y,
            start_time=self.clock(),
            duration=self.duration,
        )
        logger.debug(
            "Animation started: scale %.4f -> %.4f, offset (%.1f, %.1f) -> (%.1f, %.1f)",
            state.scale,
            target_scale,
            state.offset_x,
            state.offset_y,
            target_x,
            target_y,
        )
        self.request_refresh()
        return True

    def advance(self) -> bool:
        """Move the state to its position for the current time.

        Returns:
            True while the animation is still running after this step
        """
        job = self._job
        if job is None:
            return False

        progress = job.progress(self.clock())
        if progress >= 1.0:
            # Snap exactly to the target
            self._job = None
            self.state.set(job.target_scale, job.target_x, job.target_y)
            logger.debug("Animation finished at scale=%.4f", job.target_scale)
        else:
            self.state.set(
                job.start_scale + job.delta_scale * progress,
                job.start_x + job.delta_x * progress,
                job.start_y + job.delta_y * progress,
            )
        self.request_refresh()
        return self._job is not None

    def retarget(self):
        """Re-clamp the running animation's target after a size change.

        The job keeps running from the current state toward the target
        clamped to the new bounds, finishing at its original end time.
        """
        job = self._job
        if job is None:
            return
        state = self.state
        now = self.clock()
        target_scale = state.clamp_scale(job.target_scale)
        remaining = max(0.0, job.start_time + job.duration - now)
        self._job = AnimationJob(
            start_scale=state.scale,
            start_x=state.offset_x,
            start_y=state.offset_y,
            target_scale=target_scale,
            target_x=state.adjusted_x(job.target_x, target_scale),
            target_y=state.adjusted_y(job.target_y, target_scale),
            start_time=now,
            duration=remaining,
        )
        logger.debug(
            "Animation retargeted: scale %.4f, offset (%.1f, %.1f)",
            target_scale,
            self._job.target_x,
            self._job.target_y,
        )
        self.request_refresh()

    def stop(self):
        """Drop the running animation, leaving the state where it is.

        Only used when the content itself is replaced.
        """
        self._job = None
