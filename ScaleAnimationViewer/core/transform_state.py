"""Scale and translation state of the displayed content.

This module holds the numeric model shared by the gesture controller and
the animator:
- Current scale and X/Y offset of the content inside the viewport
- Content and viewport sizes
- Derived fit/min/max scale bounds
- Per-axis fit policy used when the scaled content is smaller than the viewport

Everything here is pure data and pure functions; nothing depends on time or Qt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .constants import MIN_SCALE_FLOOR, MAX_SCALE_CEILING

logger = logging.getLogger(__name__)


# Fit policies: placement of content on an axis where it is smaller than the viewport
FIT_START = "start"
FIT_CENTER = "center"
FIT_END = "end"

FIT_POLICIES = (FIT_START, FIT_CENTER, FIT_END)


def normalize_fit_policy(policy) -> str:
    """Return the canonical fit policy name for ``policy``.

    Args:
        policy: One of FIT_POLICIES, case-insensitive

    Raises:
        ValueError: If ``policy`` is not a known fit policy.
    """
    if isinstance(policy, str) and policy.lower() in FIT_POLICIES:
        return policy.lower()
    raise ValueError(f"Unknown fit policy: {policy!r} (expected one of {', '.join(FIT_POLICIES)})")


def ensure_range(value: float, min_value: float, max_value: float) -> float:
    """Clamp ``value`` into ``[min_value, max_value]``."""
    if value <= min_value:
        return min_value
    elif value >= max_value:
        return max_value
    return value


def adjusted_position(pos: float, scale: float, content_length: float, viewport_length: float, policy: str) -> float:
    """Return the allowed offset on one axis.

    When the scaled content fits in the viewport the requested position is
    ignored and the content is placed according to ``policy``. Otherwise the
    position is clamped so that no empty space shows at either edge.

    Args:
        pos: Requested offset on this axis
        scale: Scale at which the content is displayed
        content_length: Content size on this axis (unscaled)
        viewport_length: Viewport size on this axis
        policy: FIT_START, FIT_CENTER or FIT_END

    Returns:
        Offset to apply on this axis

    Raises:
        ValueError: If ``policy`` is not a known fit policy.
    """
    margin = viewport_length - content_length * scale
    if margin >= 0:
        if policy == FIT_START:
            return 0.0
        elif policy == FIT_CENTER:
            return margin * 0.5
        elif policy == FIT_END:
            return margin
        raise ValueError(f"Unknown fit policy: {policy!r}")
    # Content overflows: margin is the minimum offset
    return ensure_range(pos, margin, 0.0)


def compute_fit_scale(content_width: float, content_height: float, viewport_width: float, viewport_height: float) -> float:
    """Scale at which the whole content fits inside the viewport.

    Returns 1.0 when any of the sizes is not positive.
    """
    if content_width <= 0 or content_height <= 0 or viewport_width <= 0 or viewport_height <= 0:
        return 1.0
    return min(viewport_width / content_width, viewport_height / content_height)


@dataclass(frozen=True)
class ViewTransform:
    """Snapshot of the transform applied to the content when drawing.

    The content is scaled uniformly by ``scale`` and then translated by
    ``(offset_x, offset_y)``.
    """

    scale: float
    offset_x: float
    offset_y: float

    def as_matrix(self) -> np.ndarray:
        """Return the 3x3 affine matrix mapping content to view coordinates."""
        return np.array(
            [
                [self.scale, 0.0, self.offset_x],
                [0.0, self.scale, self.offset_y],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )

    def map_to_view(self, x: float, y: float) -> tuple[float, float]:
        """Map a content-space point to view coordinates."""
        return (x * self.scale + self.offset_x, y * self.scale + self.offset_y)

    def map_to_content(self, x: float, y: float) -> tuple[float, float]:
        """Map a view-space point to content coordinates."""
        s = self.scale if self.scale > 0 else 1.0
        return ((x - self.offset_x) / s, (y - self.offset_y) / s)


class TransformState:
    """Current scale/offset of the content together with its valid ranges.

    A ``scale`` of 0 means "not initialized": the first size change that
    knows the viewport sets it to the fit scale. After that, size changes
    only clamp it into ``[min_scale, max_scale]``.

    Attributes:
        content_width, content_height: Unscaled content size (0 = unknown)
        viewport_width, viewport_height: Size of the display area
        fit_scale: Scale at which the content fits the viewport
        min_scale, max_scale: Scale range at rest, always containing fit_scale
        scale: Current scale factor
        offset_x, offset_y: Translation applied after scaling
        horizontal_policy, vertical_policy: Fit policy for each axis
    """

    def __init__(
        self,
        horizontal_policy: str = FIT_CENTER,
        vertical_policy: str = FIT_CENTER,
        min_scale_floor: float = MIN_SCALE_FLOOR,
        max_scale_ceiling: float = MAX_SCALE_CEILING,
    ):
        self.horizontal_policy = normalize_fit_policy(horizontal_policy)
        self.vertical_policy = normalize_fit_policy(vertical_policy)
        self.min_scale_floor = min_scale_floor
        self.max_scale_ceiling = max_scale_ceiling

        self.content_width = 0.0
        self.content_height = 0.0
        self.viewport_width = 0.0
        self.viewport_height = 0.0

        self.fit_scale = 1.0
        self.min_scale = min(self.fit_scale, min_scale_floor)
        self.max_scale = max(self.fit_scale, max_scale_ceiling)

        self.scale = 0.0
        self.offset_x = 0.0
        self.offset_y = 0.0

    def __repr__(self):
        return (
            f"TransformState(scale={self.scale:.4f}, offset=({self.offset_x:.1f}, {self.offset_y:.1f}), "
            f"range=[{self.min_scale:.4f}, {self.max_scale:.4f}], fit={self.fit_scale:.4f})"
        )

    @property
    def is_initialized(self) -> bool:
        return self.scale > 0

    def on_content_size_changed(self, width: float, height: float):
        """Update the content size and re-clamp scale and position."""
        self.content_width = float(width)
        self.content_height = float(height)
        self._update_bounds()

    def on_viewport_size_changed(self, width: float, height: float):
        """Update the viewport size and re-clamp scale and position."""
        self.viewport_width = float(width)
        self.viewport_height = float(height)
        self._update_bounds()

    def reset(self):
        """Forget the current scale and offsets, keeping the known sizes."""
        self.scale = 0.0
        self.offset_x = 0.0
        self.offset_y = 0.0

    def _update_bounds(self):
        self.fit_scale = compute_fit_scale(
            self.content_width, self.content_height, self.viewport_width, self.viewport_height
        )
        # Scale range includes fit scale
        self.min_scale = min(self.fit_scale, self.min_scale_floor)
        self.max_scale = max(self.fit_scale, self.max_scale_ceiling)

        if self.scale <= 0:
            if self.viewport_width <= 0 or self.viewport_height <= 0:
                # Not laid out yet; keep uninitialized until the real fit is known
                return
            self.scale = self.fit_scale
        else:
            self.scale = self.clamp_scale(self.scale)
        self.adjust_position()
        logger.debug("Bounds updated: %r", self)

    def clamp_scale(self, scale: float) -> float:
        """Clamp ``scale`` into ``[min_scale, max_scale]``."""
        return ensure_range(scale, self.min_scale, self.max_scale)

    def adjusted_x(self, pos: float, scale: float) -> float:
        return adjusted_position(pos, scale, self.content_width, self.viewport_width, self.horizontal_policy)

    def adjusted_y(self, pos: float, scale: float) -> float:
        return adjusted_position(pos, scale, self.content_height, self.viewport_height, self.vertical_policy)

    def adjust_position(self):
        """Re-clamp both offsets at the current scale."""
        self.offset_x = self.adjusted_x(self.offset_x, self.scale)
        self.offset_y = self.adjusted_y(self.offset_y, self.scale)

    def is_at_fit_scale(self) -> bool:
        # Exact comparison: any deviation counts as "zoomed"
        return self.scale == self.fit_scale

    def is_at_rest(self) -> bool:
        """Return True if scale and offsets satisfy their rest-state ranges."""
        return (
            self.min_scale <= self.scale <= self.max_scale
            and self.offset_x == self.adjusted_x(self.offset_x, self.scale)
            and self.offset_y == self.adjusted_y(self.offset_y, self.scale)
        )

    def set(self, scale: float, offset_x: float, offset_y: float):
        """Overwrite scale and offsets without any clamping."""
        self.scale = scale
        self.offset_x = offset_x
        self.offset_y = offset_y

    def snapshot(self) -> ViewTransform:
        return ViewTransform(self.scale, self.offset_x, self.offset_y)
