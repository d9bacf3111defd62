"""Main image viewer application window.

This module provides the ImageViewer class, the main window hosting a
ScaleAnimationImageView.

Features:
- Multi-image loading (file dialog, drag and drop, command line) and navigation
- Pinch, drag, double-click and Ctrl+wheel zoom handled by the image view
- Status bar showing current scale, fit scale and image size
- Title bar showing current filename and image index
"""

import logging
from pathlib import Path
from typing import Iterable, Optional
from PySide6.QtWidgets import QMainWindow, QStatusBar, QLabel, QFileDialog, QMessageBox

from ..core.config import ViewTransformConfig
from ..core.image_io import numpy_to_qimage, load_image, is_image_file
from .image_view import ScaleAnimationImageView
from .menu_builder import create_menus

logger = logging.getLogger(__name__)


class ImageViewer(QMainWindow):
    """Main application window.

    Keyboard Shortcuts:
        - Ctrl+O: Open images
        - Ctrl+W: Close current image
        - n / b: Next / previous image
        - + / -: Zoom in / out around the view center
        - f: Fit to window
        - Space: Toggle fit / original size

    Mouse Controls:
        - Left-drag: Pan
        - Double-click: Toggle fit / original size around the cursor
        - Ctrl + Mouse wheel: Zoom around the cursor
        - Pinch: Zoom with elastic limits

    Attributes:
        images: List of loaded image dictionaries with keys 'path', 'qimage'
        current_index: Index of currently displayed image
    """

    def __init__(self, config: Optional[ViewTransformConfig] = None):
        super().__init__()
        self.setWindowTitle("ScaleAnimationViewer")
        self.resize(1000, 700)

        self.images = []
        self.current_index = None

        self.image_view = ScaleAnimationImageView(self, config)
        self.setCentralWidget(self.image_view)
        self.image_view.transform_changed.connect(self.update_scale_status)

        self.status = QStatusBar()
        self.setStatusBar(self.status)
        self.status_image = QLabel()
        self.status_scale = QLabel()
        self.status.addPermanentWidget(self.status_image, 3)
        self.status.addPermanentWidget(self.status_scale, 1)

        create_menus(self)
        self.setAcceptDrops(True)
        self.update_status()

    # Image loading and navigation
    def open_files(self):
        """Open file dialog to load image files."""
        files, _ = QFileDialog.getOpenFileNames(
            self, "Open Images", "", "Images (*.png *.jpg *.jpeg *.tif *.tiff *.bmp *.gif *.webp *.npy)"
        )
        self.add_images(files)

    def dragEnterEvent(self, e):
        if e.mimeData().hasUrls():
            e.acceptProposedAction()

    def dropEvent(self, e):
        files = [u.toLocalFile() for u in e.mimeData().urls()]
        self.add_images([f for f in files if is_image_file(f)])

    def _show_load_error(self, path: str, error_msg: str = ""):
        """Show error message with file details."""
        details = f"File: {Path(path).name}"
        if error_msg:
            details += f"\n\nError: {error_msg}"
        QMessageBox.warning(self, "Image Load Error", details)

    def add_images(self, paths: Iterable[str]) -> int:
        """Load image files, append them and show the first new one.

        Returns:
            Number of images successfully loaded
        """
        first_new = len(self.images)
        for path in paths or []:
            if not path:
                continue
            try:
                arr = load_image(path)
                if arr.ndim < 2 or arr.ndim > 3:
                    raise ValueError(f"Expected a 2-D or 3-D array, got shape {arr.shape}")
                qimage = numpy_to_qimage(arr)
            except (RuntimeError, ValueError, OSError) as e:
                logger.warning("Failed to load %s: %s", path, e)
                self._show_load_error(path, str(e))
                continue
            self.images.append({"path": str(Path(path).resolve()), "qimage": qimage})

        new_count = len(self.images) - first_new
        if new_count > 0:
            self.show_image(first_new)
        return new_count

    def show_image(self, index: int):
        if not (0 <= index < len(self.images)):
            return
        self.current_index = index
        self.image_view.set_image(self.images[index]["qimage"])
        self.update_status()

    def next_image(self):
        if self.images:
            self.show_image((self.current_index + 1) % len(self.images))

    def prev_image(self):
        if self.images:
            self.show_image((self.current_index - 1) % len(self.images))

    def close_current_image(self):
        if self.current_index is None:
            return
        del self.images[self.current_index]
        if not self.images:
            self.current_index = None
            self.image_view.clear()
            self.update_status()
        else:
            self.show_image(min(self.current_index, len(self.images) - 1))

    # Status
    def update_status(self):
        """Update title bar and image part of the status bar."""
        if self.current_index is None:
            self.setWindowTitle("ScaleAnimationViewer")
            self.status_image.setText("No image")
            self.status_scale.setText("")
            return
        img = self.images[self.current_index]
        name = Path(img["path"]).name
        self.setWindowTitle(f"{name} ({self.current_index + 1}/{len(self.images)}) - ScaleAnimationViewer")
        qimg = img["qimage"]
        self.status_image.setText(f"{name}  {qimg.width()} x {qimg.height()}")
        state = self.image_view.controller.state
        self.update_scale_status(state.scale, state.offset_x, state.offset_y)

    def update_scale_status(self, scale: float, offset_x: float, offset_y: float):
        if self.current_index is None:
            return
        fit = self.image_view.controller.state.fit_scale
        self.status_scale.setText(f"Scale: {scale * 100:.1f}%  (fit {fit * 100:.1f}%)")
