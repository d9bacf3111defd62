"""UI-independent transform logic.

- transform_state.py: scale/offset state, fit policies and position clamping
- gesture_controller.py: pan, pinch and double-tap handling
- transform_animator.py: linear snap-back / zoom animation
- controller.py: ViewTransformController wiring the three together
- config.py: construction-time configuration

image_io.py (Qt image conversion and file loading) is imported directly
from its module so that the transform logic stays free of Qt.
"""

from .config import ViewTransformConfig
from .controller import ViewTransformController
from .gesture_controller import GestureController
from .transform_animator import AnimationJob, TransformAnimator
from .transform_state import (
    FIT_START,
    FIT_CENTER,
    FIT_END,
    FIT_POLICIES,
    TransformState,
    ViewTransform,
    adjusted_position,
    compute_fit_scale,
    ensure_range,
)

__all__ = [
    "ViewTransformConfig",
    "ViewTransformController",
    "GestureController",
    "AnimationJob",
    "TransformAnimator",
    "FIT_START",
    "FIT_CENTER",
    "FIT_END",
    "FIT_POLICIES",
    "TransformState",
    "ViewTransform",
    "adjusted_position",
    "compute_fit_scale",
    "ensure_range",
]
