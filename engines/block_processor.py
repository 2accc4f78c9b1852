"""Block extraction: level shift, zero padding, row-major splitting."""

import numpy as np
from typing import Iterator, List, Tuple

from engines.errors import InvalidInputError
from utils.constants import BLOCK_SIZE, LEVEL_SHIFT


def _check_plane(plane: np.ndarray) -> None:
    if plane.ndim != 2:
        raise InvalidInputError(f"Expected a 2D plane, got {plane.ndim} dimensions")
    h, w = plane.shape
    if h <= 0 or w <= 0:
        raise InvalidInputError(f"Plane dimensions must be positive, got {h}x{w}")


def blocks_shape(shape: Tuple[int, int]) -> Tuple[int, int]:
    """Number of block rows and columns needed to cover a plane."""
    h, w = shape
    return (-(-h // BLOCK_SIZE), -(-w // BLOCK_SIZE))


def block_offsets(shape: Tuple[int, int]) -> Iterator[Tuple[int, int]]:
    """Top-left offsets of every block, row-major."""
    h, w = shape
    for i in range(0, h, BLOCK_SIZE):
        for j in range(0, w, BLOCK_SIZE):
            yield i, j


def extract_block(plane: np.ndarray, i: int, j: int) -> np.ndarray:
    """
    Copy the 8x8 block at (i, j) and center it around zero.

    In-bounds samples become ``sample - 128``; positions past the plane
    edge are exactly 0, not -128.
    """
    block = np.zeros((BLOCK_SIZE, BLOCK_SIZE), dtype=np.float64)
    region = plane[i:i + BLOCK_SIZE, j:j + BLOCK_SIZE]
    block[:region.shape[0], :region.shape[1]] = region - LEVEL_SHIFT
    return block


def split_into_blocks(plane: np.ndarray) -> List[Tuple[int, int, np.ndarray]]:
    """Split 2D plane into level-shifted 8x8 blocks."""
    plane = np.asarray(plane, dtype=np.float64)
    _check_plane(plane)
    return [(i, j, extract_block(plane, i, j)) for i, j in block_offsets(plane.shape)]
