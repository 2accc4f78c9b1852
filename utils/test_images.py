"""Synthetic RGB images for tests and the command line demo."""

import numpy as np


def generate_flat(height: int = 8, width: int = 8, value=(128, 128, 128)) -> np.ndarray:
    """Single-color image. Gray 128 is neutral after the level shift."""
    img = np.empty((height, width, 3), dtype=np.uint8)
    img[:, :] = value
    return img


def generate_square_on_background(
    size: int = 16,
    top: int = 0,
    left: int = 0,
    side: int = 8,
    color=(255, 255, 255),
    background=(0, 0, 0)
) -> np.ndarray:
    """Solid square of `side` pixels at (top, left) over a flat background."""
    img = generate_flat(size, size, background)
    img[top:top + side, left:left + side] = color
    return img


def generate_colored_checkerboard(size: int = 256, cell: int = 32) -> np.ndarray:
    """High-contrast checkerboard - lots of AC energy at cell edges."""
    rows = np.arange(size)[:, None] // cell
    cols = np.arange(size)[None, :] // cell
    light = ((rows + cols) % 2).astype(bool)
    img = np.empty((size, size, 3), dtype=np.uint8)
    img[~light] = [30, 30, 30]
    img[light] = [220, 220, 220]
    return img


def generate_thin_stripes(size: int = 256, stripe_width: int = 4) -> np.ndarray:
    """Fine vertical color stripes - stresses chroma subsampling."""
    img = np.empty((size, size, 3), dtype=np.uint8)
    even = (np.arange(size) // stripe_width) % 2 == 0
    img[:, even] = [200, 60, 60]
    img[:, ~even] = [60, 180, 200]
    return img


def generate_gradient(size: int = 256) -> np.ndarray:
    """Smooth diagonal gradient - few non-zero AC terms per block."""
    t = (np.arange(size)[:, None] + np.arange(size)[None, :]) / max(2 * size - 2, 1)
    img = np.stack([40 + t * 180, 60 + t * 140, 120 + t * 100], axis=-1)
    return np.clip(img, 0, 255).astype(np.uint8)


def generate_chroma_stripes(size: int = 256) -> np.ndarray:
    """Saturated color bars - strong chroma content."""
    colors = np.array([
        [180, 40, 40],    # Red
        [40, 160, 40],    # Green
        [40, 80, 180],    # Blue
        [180, 180, 40],   # Yellow
        [180, 40, 180],   # Magenta
        [40, 180, 180],   # Cyan
        [200, 120, 40],   # Orange
        [120, 40, 180],   # Purple
    ], dtype=np.uint8)
    bar = np.minimum(np.arange(size) * len(colors) // size, len(colors) - 1)
    return np.broadcast_to(colors[bar][None, :, :], (size, size, 3)).copy()


def generate_demo_image(key: str) -> np.ndarray | None:
    """Generate demo image by key."""
    generators = {
        "flat": lambda: generate_flat(64, 64),
        "square": lambda: generate_square_on_background(64, 16, 16, 24),
        "gradient": lambda: generate_gradient(256),
        "checkerboard": lambda: generate_colored_checkerboard(256),
        "stripes": lambda: generate_thin_stripes(256, 2),
        "chroma_stripes": lambda: generate_chroma_stripes(256),
    }

    if key in generators:
        return generators[key]()

    return None
