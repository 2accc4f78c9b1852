"""Compression parameters."""

from dataclasses import dataclass
from typing import Literal

from utils.constants import DCT_METHODS, ROUNDING_MODES, SUBSAMPLING_MODES


@dataclass
class CompressionParams:
    """JPEG-like encoder parameters.

    Quality outside [1, 99] is accepted and clamped by the quantizer.
    """

    quality: int = 50
    subsampling_mode: Literal['4:4:4', '4:2:0'] = '4:2:0'
    rounding: Literal['truncate', 'round'] = 'truncate'
    dct_method: Literal['basis', 'direct', 'scipy'] = 'basis'

    def __post_init__(self):
        if self.subsampling_mode not in SUBSAMPLING_MODES:
            raise ValueError(f"Subsampling mode must be one of {SUBSAMPLING_MODES}, got {self.subsampling_mode}")
        if self.rounding not in ROUNDING_MODES:
            raise ValueError(f"Rounding mode must be one of {ROUNDING_MODES}, got {self.rounding}")
        if self.dct_method not in DCT_METHODS:
            raise ValueError(f"DCT method must be one of {DCT_METHODS}, got {self.dct_method}")
