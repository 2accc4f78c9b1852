"""Zig-zag reordering of quantized blocks."""

import numpy as np

from engines.errors import InvalidInputError
from utils.constants import BLOCK_SIZE, ZIGZAG_ORDER


def zigzag(block: np.ndarray) -> np.ndarray:
    """Flatten an 8x8 block into 64 values in zig-zag order."""
    block = np.asarray(block)
    if block.shape != (BLOCK_SIZE, BLOCK_SIZE):
        raise InvalidInputError(f"Expected an 8x8 block, got shape {block.shape}")
    return block.reshape(-1)[ZIGZAG_ORDER].copy()


def inverse_zigzag(sequence: np.ndarray) -> np.ndarray:
    """Scatter a zig-zag sequence back into an 8x8 block."""
    sequence = np.asarray(sequence)
    if sequence.shape != (BLOCK_SIZE * BLOCK_SIZE,):
        raise InvalidInputError(f"Expected 64 values, got shape {sequence.shape}")
    flat = np.empty_like(sequence)
    flat[ZIGZAG_ORDER] = sequence
    return flat.reshape(BLOCK_SIZE, BLOCK_SIZE)
