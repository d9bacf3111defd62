"""Default constants for the view transform.

This module contains the defaults used when no explicit configuration is given.
"""

# Scale range limits (the fit scale is always included in the range)
MIN_SCALE_FLOOR = 1.0
MAX_SCALE_CEILING = 2.0

# Damping applied to pinch samples once the scale is outside its range
SCALE_RESTRICT_FACTOR = 0.3

# Duration of snap-back / double-tap animations
ANIMATION_DURATION_MS = 150

# Ctrl+wheel: one notch (120 units) zooms by 2 ** (1 / WHEEL_STEPS_PER_DOUBLING)
WHEEL_STEPS_PER_DOUBLING = 4
