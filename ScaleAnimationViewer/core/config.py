"""Construction-time configuration of the view transform controller."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    MIN_SCALE_FLOOR,
    MAX_SCALE_CEILING,
    SCALE_RESTRICT_FACTOR,
    ANIMATION_DURATION_MS,
)
from .transform_state import FIT_CENTER, normalize_fit_policy


@dataclass
class ViewTransformConfig:
    """Settings fixed for the lifetime of a controller.

    - min_scale_floor / max_scale_ceiling: scale range when the fit scale lies inside it
    - animation_duration_ms: length of snap-back and double-tap animations
    - horizontal_fit_policy / vertical_fit_policy: "start", "center" or "end"
    - scale_restrict_factor: damping of pinch samples outside the scale range

    Invalid values raise ValueError on construction.
    """

    min_scale_floor: float = MIN_SCALE_FLOOR
    max_scale_ceiling: float = MAX_SCALE_CEILING
    animation_duration_ms: float = ANIMATION_DURATION_MS
    horizontal_fit_policy: str = FIT_CENTER
    vertical_fit_policy: str = FIT_CENTER
    scale_restrict_factor: float = SCALE_RESTRICT_FACTOR

    def __post_init__(self):
        if self.min_scale_floor <= 0 or self.max_scale_ceiling <= 0:
            raise ValueError(
                f"Scale limits must be positive (floor={self.min_scale_floor}, ceiling={self.max_scale_ceiling})"
            )
        if self.min_scale_floor > self.max_scale_ceiling:
            raise ValueError(
                f"min_scale_floor ({self.min_scale_floor}) exceeds max_scale_ceiling ({self.max_scale_ceiling})"
            )
        if self.animation_duration_ms < 0:
            raise ValueError(f"animation_duration_ms must not be negative: {self.animation_duration_ms}")
        if not 0 < self.scale_restrict_factor <= 1:
            raise ValueError(f"scale_restrict_factor must be in (0, 1]: {self.scale_restrict_factor}")
        self.horizontal_fit_policy = normalize_fit_policy(self.horizontal_fit_policy)
        self.vertical_fit_policy = normalize_fit_policy(self.vertical_fit_policy)
