"""Image I/O utilities for loading and converting images.

This module provides functions for:
- Converting NumPy arrays to QImage for Qt display
- Loading images from files (OpenCV, NumPy)
- Validating image file extensions

The image view only needs the size and pixels of the content; how they are
obtained lives here, outside the transform logic.
"""

from pathlib import Path
from typing import Union
import numpy as np
from PySide6.QtGui import QImage
import cv2


IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp", ".gif", ".webp"}
ARRAY_EXTENSIONS = {".npy"}


def numpy_to_qimage(arr: np.ndarray) -> QImage:
    """Convert a NumPy image array to a Qt QImage suitable for display.

    The returned QImage owns a copy of the pixel data, so the caller does
    not need to keep the NumPy array alive.

    Supported input shapes:
      - (H, W) -> 8-bit grayscale
      - (H, W, 3) -> RGB (8-bit per channel)
      - (H, W, 4) -> RGBA (8-bit per channel)
      - Any other channel count -> converted to grayscale by averaging

    Args:
        arr: Numeric array-like image. Float images are taken as [0, 1];
             values outside [0, 255] are clipped.

    Returns:
        QImage: A freshly allocated QImage. If ``arr`` is ``None`` an empty
        QImage is returned.

    Raises:
        ValueError: If ``arr`` is not 2- or 3-dimensional.
    """
    if arr is None:
        return QImage()
    a = np.asarray(arr)
    # Scale float images from [0,1] to [0,255]
    if np.issubdtype(a.dtype, np.floating):
        a = a * 255.0
    if a.ndim == 3 and a.shape[2] not in (3, 4):
        a = a.mean(axis=2)
    if a.ndim == 2:
        disp = np.ascontiguousarray(np.clip(a, 0, 255).astype(np.uint8))
        h, w = disp.shape
        return QImage(disp.data, w, h, w, QImage.Format_Grayscale8).copy()
    elif a.ndim == 3:
        h, w, c = a.shape
        disp = np.ascontiguousarray(np.clip(a, 0, 255).astype(np.uint8))
        fmt = QImage.Format_RGB888 if c == 3 else QImage.Format_RGBA8888
        return QImage(disp.data, w, h, c * w, fmt).copy()
    raise ValueError(f"Unsupported array shape: {a.shape}")


def cv2_imread_unicode(path: str):
    data = np.fromfile(path, dtype=np.uint8)
    return cv2.imdecode(data, cv2.IMREAD_UNCHANGED)


def load_image(path: Union[str, Path]) -> np.ndarray:
    """Load an image file into a NumPy array.

    Supported inputs:
      - .npy: loaded via numpy.load and returned as-is.
      - common LDR formats: read with OpenCV. Color images are converted
        from OpenCV's BGR/BGRA order to RGB/RGBA; grayscale images are
        returned as 2-D arrays.

    Args:
        path: Path to the image file (str or pathlib.Path).

    Returns:
        np.ndarray: Image data.

    Raises:
        RuntimeError: If the file cannot be decoded or has an unsupported suffix.
    """
    path_str = str(path)
    ext = Path(path_str).suffix.lower()

    if ext in ARRAY_EXTENSIONS:
        return np.load(path_str)
    elif ext in IMAGE_EXTENSIONS:
        img = cv2_imread_unicode(path_str)
        if img is None:
            raise RuntimeError(f"Cannot open image: {path_str}")

        if img.ndim == 3 and img.shape[2] == 4:
            img = cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
        elif img.ndim == 3 and img.shape[2] == 3:
            img = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
        return img

    raise RuntimeError(f"Cannot open image: {path_str} (unsupported format)")


def is_image_file(path: Union[str, Path]) -> bool:
    """Return True if the given path has a supported image file suffix.

    Only the suffix is checked (case-insensitive); the file is not opened.
    """
    ext = Path(path).suffix.lower()
    return ext in IMAGE_EXTENSIONS or ext in ARRAY_EXTENSIONS
