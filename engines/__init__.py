"""DSP engines - pure computation, no I/O.

The whole-image encoder lives in ``engines.pipeline``.
"""

from .errors import InvalidInputError, ArithmeticFaultError
from .color_space import rgb_to_ycbcr, split_planes, downsample_plane, subsample_chroma
from .block_processor import blocks_shape, block_offsets, extract_block, split_into_blocks
from .dct_engine import COSINES, dct2, dct2_direct, dct2_scipy, forward_dct
from .quantizer import clamp_quality, quality_scale, calculate_quantization_table, quantize
from .zigzag import zigzag, inverse_zigzag
from .rle import RLEToken, END_OF_BLOCK, run_length_encode, run_length_decode

__all__ = [
    'InvalidInputError',
    'ArithmeticFaultError',
    'rgb_to_ycbcr',
    'split_planes',
    'downsample_plane',
    'subsample_chroma',
    'blocks_shape',
    'block_offsets',
    'extract_block',
    'split_into_blocks',
    'COSINES',
    'dct2',
    'dct2_direct',
    'dct2_scipy',
    'forward_dct',
    'clamp_quality',
    'quality_scale',
    'calculate_quantization_table',
    'quantize',
    'zigzag',
    'inverse_zigzag',
    'RLEToken',
    'END_OF_BLOCK',
    'run_length_encode',
    'run_length_decode',
]
