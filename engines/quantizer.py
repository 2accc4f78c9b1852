"""Quantization tables and coefficient quantization."""

import logging

import numpy as np

from engines.errors import ArithmeticFaultError, InvalidInputError
from utils.constants import BASE_TABLES, BLOCK_SIZE, PlaneKind

logger = logging.getLogger(__name__)

MIN_QUALITY = 1
MAX_QUALITY = 99


def clamp_quality(quality) -> int:
    """Clamp quality into [1, 99]."""
    return int(np.clip(int(quality), MIN_QUALITY, MAX_QUALITY))


def quality_scale(quality) -> float:
    """Scale factor applied to the base tables for a quality level."""
    quality = clamp_quality(quality)
    if quality < 50:
        return 50.0 / quality
    return 2.0 - quality / 50.0


def calculate_quantization_table(kind: PlaneKind, quality) -> np.ndarray:
    """Scaled 64-entry table (row-major) for luminance or chrominance."""
    try:
        base = BASE_TABLES[kind]
    except KeyError:
        raise ValueError(f"Unknown plane kind: {kind}") from None

    # float32 scale, product and +0.5, then truncate
    scale = np.float32(quality_scale(quality))
    logger.debug("Scale factor for %s at quality %s: %.4f", kind, quality, scale)

    scaled = base.reshape(-1).astype(np.float32) * scale + np.float32(0.5)
    table = np.clip(scaled.astype(np.int32), 1, 255)
    return table.astype(np.int32)


def quantize(dct_coeffs: np.ndarray, table: np.ndarray, rounding: str = 'truncate') -> np.ndarray:
    """
    Divide DCT coefficients by the table and convert to integers.

    ``rounding='truncate'`` cuts toward zero; ``'round'`` goes to the
    nearest integer. Every divisor must be positive.
    """
    dct_coeffs = np.asarray(dct_coeffs, dtype=np.float64)
    table = np.asarray(table)
    if dct_coeffs.shape != (BLOCK_SIZE, BLOCK_SIZE):
        raise InvalidInputError(f"Expected an 8x8 block, got shape {dct_coeffs.shape}")
    if table.size != BLOCK_SIZE * BLOCK_SIZE:
        raise InvalidInputError(f"Expected 64 table entries, got {table.size}")
    if np.any(table <= 0):
        raise ArithmeticFaultError("Quantization table contains a non-positive divisor")

    ratio = dct_coeffs / table.reshape(BLOCK_SIZE, BLOCK_SIZE).astype(np.float64)
    if rounding == 'truncate':
        return np.trunc(ratio).astype(np.int32)
    if rounding == 'round':
        return np.round(ratio).astype(np.int32)
    raise ValueError(f"Unknown rounding mode: {rounding}")
