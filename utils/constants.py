"""Fixed tables shared by the encoder engines."""

import numpy as np
from typing import Literal

BLOCK_SIZE = 8
LEVEL_SHIFT = 128.0

PlaneKind = Literal['luminance', 'chrominance']
LUMINANCE: PlaneKind = 'luminance'
CHROMINANCE: PlaneKind = 'chrominance'

# ITU-T T.81 Annex K, natural (row-major) order
JPEG_LUMA_Q50 = np.array([
    [16, 11, 10, 16, 24, 40, 51, 61],
    [12, 12, 14, 19, 26, 58, 60, 55],
    [14, 13, 16, 24, 40, 57, 69, 56],
    [14, 17, 22, 29, 51, 87, 80, 62],
    [18, 22, 37, 56, 68, 109, 103, 77],
    [24, 35, 55, 64, 81, 104, 113, 92],
    [49, 64, 78, 87, 103, 121, 120, 101],
    [72, 92, 95, 98, 112, 100, 103, 99],
], dtype=np.float64)

JPEG_CHROMA_Q50 = np.array([
    [17, 18, 24, 47, 99, 99, 99, 99],
    [18, 21, 26, 66, 99, 99, 99, 99],
    [24, 26, 56, 99, 99, 99, 99, 99],
    [47, 66, 99, 99, 99, 99, 99, 99],
    [99, 99, 99, 99, 99, 99, 99, 99],
    [99, 99, 99, 99, 99, 99, 99, 99],
    [99, 99, 99, 99, 99, 99, 99, 99],
    [99, 99, 99, 99, 99, 99, 99, 99],
], dtype=np.float64)

BASE_TABLES = {
    LUMINANCE: JPEG_LUMA_Q50,
    CHROMINANCE: JPEG_CHROMA_Q50,
}

# Output position i reads row-major block index ZIGZAG_ORDER[i]
ZIGZAG_ORDER = np.array([
    0, 1, 5, 6, 14, 15, 27, 28,
    2, 4, 7, 13, 16, 26, 29, 42,
    3, 8, 12, 17, 25, 30, 41, 43,
    9, 11, 18, 24, 31, 40, 44, 53,
    10, 19, 23, 32, 39, 45, 52, 54,
    20, 22, 33, 38, 46, 51, 55, 60,
    21, 34, 37, 47, 50, 56, 59, 61,
    35, 36, 48, 49, 57, 58, 62, 63,
], dtype=np.intp)

for _table in (JPEG_LUMA_Q50, JPEG_CHROMA_Q50, ZIGZAG_ORDER):
    _table.setflags(write=False)
del _table

SUBSAMPLING_MODES = ('4:4:4', '4:2:0')
ROUNDING_MODES = ('truncate', 'round')
DCT_METHODS = ('basis', 'direct', 'scipy')
