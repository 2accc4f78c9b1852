"""Shared utilities."""

from .constants import (
    BLOCK_SIZE,
    LEVEL_SHIFT,
    LUMINANCE,
    CHROMINANCE,
    JPEG_LUMA_Q50,
    JPEG_CHROMA_Q50,
    ZIGZAG_ORDER,
)
from .metrics import Timer, count_nonzero, estimate_bitrate_from_tokens
from .test_images import generate_flat, generate_square_on_background, generate_demo_image
from .image_io import load_image

__all__ = [
    'BLOCK_SIZE',
    'LEVEL_SHIFT',
    'LUMINANCE',
    'CHROMINANCE',
    'JPEG_LUMA_Q50',
    'JPEG_CHROMA_Q50',
    'ZIGZAG_ORDER',
    'Timer',
    'count_nonzero',
    'estimate_bitrate_from_tokens',
    'generate_flat',
    'generate_square_on_background',
    'generate_demo_image',
    'load_image',
]
