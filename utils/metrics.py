"""Metrics: encode timing and bitrate estimation from RLE tokens."""

import time
from typing import Dict, Iterable, Sequence

import numpy as np

RUN_LENGTH_BITS = 6


class Timer:
    """Simple timer for encode runtime."""

    def __init__(self):
        self.encode_time_ms = 0.0

    def measure_encode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.encode_time_ms += (time.perf_counter() - start) * 1000.0
        return result


def count_nonzero(quantized_blocks: Iterable[np.ndarray]) -> int:
    """Number of non-zero quantized coefficients over all blocks."""
    return int(sum(np.count_nonzero(block) for block in quantized_blocks))


def estimate_bitrate_from_tokens(
    token_blocks: Iterable[Sequence],
    original_shape: tuple
) -> Dict:
    """
    Estimate compressed size from RLE tokens WITHOUT entropy coding.

    Simple model: each token stores its run length in 6 bits plus the
    value's magnitude bits and a sign bit. The end-of-block sentinel costs
    the same as any other token. Real JPEG would be smaller.
    """
    h, w = original_shape
    num_pixels = h * w
    original_bits = num_pixels * 3 * 8

    estimated_bits = 0
    token_count = 0
    for tokens in token_blocks:
        for value, _ in tokens:
            magnitude = abs(int(value))
            estimated_bits += RUN_LENGTH_BITS + magnitude.bit_length() + 1
            token_count += 1

    return {
        'estimated_bits': int(estimated_bits),
        'token_count': token_count,
        'bpp': float(estimated_bits / num_pixels),
        'compression_ratio': float(original_bits / max(estimated_bits, 1)),
        'label': 'Estimated (no entropy coding)'
    }
