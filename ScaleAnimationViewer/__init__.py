"""ScaleAnimationViewer - An image view with animated pinch zoom.

This package provides a view transform controller that turns pan, pinch and
double-tap input into a clamped, animated scale+translate transform for an
image shown inside a fixed viewport, plus a Qt viewer built on it.

Core Features:
    - Fit scale and scale range derived from image and viewport sizes
    - Per-axis fit policy (start/center/end) for images smaller than the view
    - Pan clamped so no empty space shows around an oversized image
    - Elastic pinch beyond the scale range with animated snap-back
    - Double-tap toggle between fit-to-view and native size

Package Structure:
    - core/: UI-independent transform logic (state, gestures, animation)
    - core/image_io.py: Image loading and NumPy to QImage conversion
    - ui/: Qt widget, main window and menus

Quick Start:
    from ScaleAnimationViewer import main
    main()

    # Without Qt:
    from ScaleAnimationViewer.core import ViewTransformController
    ctrl = ViewTransformController()
    ctrl.on_viewport_size_changed(500, 500)
    ctrl.on_content_size_changed(1000, 2000)
    ctrl.on_double_tap(250, 250)
    ctrl.advance()
    t = ctrl.current_transform()

Dependencies:
    - PySide6: Qt for Python (ui/ and image_io only)
    - numpy: Affine matrices and image arrays
    - opencv-python: Image decoding
"""

from .core import ViewTransformConfig, ViewTransformController, ViewTransform

__version__ = "0.1.0"
__all__ = [
    "main",
    "ViewTransformConfig",
    "ViewTransformController",
    "ViewTransform",
]


def main(argv=None):
    """Run the Qt viewer (imported lazily so the core works without a display)."""
    from .app import main as _main

    return _main(argv)
