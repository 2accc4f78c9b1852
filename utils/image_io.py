"""Image loading using OpenCV."""

import cv2
import numpy as np


def load_image(path: str) -> np.ndarray:
    """Load image as RGB uint8.

    Grayscale files are expanded to three equal channels and an alpha
    channel is dropped. Only 8-bit files are accepted.
    """
    img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    if img.dtype != np.uint8:
        raise ValueError(f"Expected 8-bit samples in {path}, got {img.dtype}")
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGB)
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGB)
    if img.shape[2] == 3:
        return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
    raise ValueError(f"Unsupported channel count {img.shape[2]} in {path}")
