"""Forward 2D DCT-II on level-shifted 8x8 blocks."""

import numpy as np
from scipy.fft import dctn

from engines.errors import InvalidInputError
from utils.constants import BLOCK_SIZE


def _precompute_cosines() -> np.ndarray:
    """cos((2m+1)p*pi/16), indexed [spatial m][frequency p]."""
    m = np.arange(BLOCK_SIZE).reshape(-1, 1)
    p = np.arange(BLOCK_SIZE).reshape(1, -1)
    return np.cos((2 * m + 1) * p * np.pi / (2 * BLOCK_SIZE))


def _alphas() -> np.ndarray:
    alpha = np.full(BLOCK_SIZE, np.sqrt(2.0 / BLOCK_SIZE))
    alpha[0] = np.sqrt(1.0 / BLOCK_SIZE)
    return alpha


COSINES = _precompute_cosines()
ALPHA = _alphas()
# Orthonormal DCT matrix: DCT_MATRIX[p, m] = alpha(p) * cos((2m+1)p*pi/16)
DCT_MATRIX = ALPHA[:, None] * COSINES.T

for _table in (COSINES, ALPHA, DCT_MATRIX):
    _table.setflags(write=False)
del _table


def _check_block(block: np.ndarray) -> np.ndarray:
    block = np.asarray(block, dtype=np.float64)
    if block.shape != (BLOCK_SIZE, BLOCK_SIZE):
        raise InvalidInputError(f"Expected an 8x8 block, got shape {block.shape}")
    return block


def dct2(block: np.ndarray) -> np.ndarray:
    """Separable 2D DCT-II: rows then columns via the cached basis."""
    block = _check_block(block)
    return DCT_MATRIX @ block @ DCT_MATRIX.T


def dct2_direct(block: np.ndarray) -> np.ndarray:
    """Literal double sum over the cached cosine table."""
    block = _check_block(block)
    out = np.zeros((BLOCK_SIZE, BLOCK_SIZE), dtype=np.float64)
    for p in range(BLOCK_SIZE):
        for q in range(BLOCK_SIZE):
            total = 0.0
            for m in range(BLOCK_SIZE):
                for n in range(BLOCK_SIZE):
                    total += block[m, n] * COSINES[m, p] * COSINES[n, q]
            out[p, q] = ALPHA[p] * ALPHA[q] * total
    return out


def dct2_scipy(block: np.ndarray) -> np.ndarray:
    """2D DCT-II with orthonormal normalization (scipy reference)."""
    block = _check_block(block)
    return dctn(block, type=2, norm='ortho')


DCT_FUNCTIONS = {
    'basis': dct2,
    'direct': dct2_direct,
    'scipy': dct2_scipy,
}


def forward_dct(block: np.ndarray, method: str = 'basis') -> np.ndarray:
    """Transform a centered spatial block with the chosen implementation."""
    try:
        func = DCT_FUNCTIONS[method]
    except KeyError:
        raise ValueError(f"Unknown DCT method: {method}") from None
    return func(block)
