"""UI components package.

- image_view.py: ScaleAnimationImageView, the zoomable image widget
- viewer.py: ImageViewer main window
- menu_builder.py: menus and keyboard shortcuts
"""

from .image_view import ScaleAnimationImageView
from .viewer import ImageViewer

__all__ = ["ScaleAnimationImageView", "ImageViewer"]
