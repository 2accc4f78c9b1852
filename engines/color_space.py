"""Color space conversion and chroma subsampling."""

import logging

import numpy as np
from typing import Literal, Tuple

from engines.errors import InvalidInputError

logger = logging.getLogger(__name__)


def rgb_to_ycbcr(rgb: np.ndarray) -> np.ndarray:
    """RGB to YCbCr using ITU-R BT.601 (full range, no clamping)."""
    rgb = np.asarray(rgb, dtype=np.float64)
    if rgb.ndim != 3 or rgb.shape[2] != 3:
        raise InvalidInputError(f"Expected an HxWx3 RGB array, got shape {rgb.shape}")
    R, G, B = rgb[:, :, 0], rgb[:, :, 1], rgb[:, :, 2]
    Y = 0.299 * R + 0.587 * G + 0.114 * B
    Cb = 128.0 - 0.168736 * R - 0.331264 * G + 0.5 * B
    Cr = 128.0 + 0.5 * R - 0.418688 * G - 0.081312 * B
    logger.info("Converting to YCbCr finished (%dx%d)", rgb.shape[1], rgb.shape[0])
    return np.stack([Y, Cb, Cr], axis=-1)


def split_planes(ycbcr: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Split an HxWx3 YCbCr array into contiguous Y, Cb, Cr planes."""
    return (
        np.ascontiguousarray(ycbcr[:, :, 0]),
        np.ascontiguousarray(ycbcr[:, :, 1]),
        np.ascontiguousarray(ycbcr[:, :, 2]),
    )


def downsample_plane(plane: np.ndarray) -> np.ndarray:
    """
    Average every 2x2 neighbourhood into one sample.

    Odd heights/widths are padded with zeros rather than edge samples, and
    the divisor stays 4 even where the neighbourhood is incomplete.
    """
    plane = np.asarray(plane, dtype=np.float64)
    if plane.ndim != 2 or plane.shape[0] <= 0 or plane.shape[1] <= 0:
        raise InvalidInputError(f"Cannot downsample plane of shape {plane.shape}")
    h, w = plane.shape
    padded = np.pad(plane, ((0, h % 2), (0, w % 2)), mode='constant', constant_values=0.0)
    out_h, out_w = padded.shape[0] // 2, padded.shape[1] // 2
    return padded.reshape(out_h, 2, out_w, 2).sum(axis=(1, 3)) / 4.0


def subsample_chroma(
    cb: np.ndarray,
    cr: np.ndarray,
    mode: Literal['4:4:4', '4:2:0'] = '4:2:0'
) -> Tuple[np.ndarray, np.ndarray]:
    """Subsample chroma channels according to mode."""
    if mode == '4:4:4':
        return np.array(cb, dtype=np.float64), np.array(cr, dtype=np.float64)
    if mode != '4:2:0':
        raise ValueError(f"Unknown subsampling mode: {mode}")

    cb_sub = downsample_plane(cb)
    cr_sub = downsample_plane(cr)
    logger.info("Downsampling color finished (%dx%d -> %dx%d)",
                cb.shape[1], cb.shape[0], cb_sub.shape[1], cb_sub.shape[0])
    return cb_sub, cr_sub
