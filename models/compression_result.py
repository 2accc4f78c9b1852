"""Encoded planes and summary statistics."""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import numpy as np

from engines.rle import RLEToken
from utils.constants import PlaneKind


@dataclass
class PlaneEncoding:
    """RLE tokens of every block of one plane, row-major block order."""

    name: str
    kind: PlaneKind
    shape: Tuple[int, int]
    blocks_shape: Tuple[int, int]
    blocks: List[List[RLEToken]] = field(default_factory=list)

    @property
    def block_count(self) -> int:
        return len(self.blocks)

    @property
    def token_count(self) -> int:
        return sum(len(tokens) for tokens in self.blocks)

    def block_at(self, row: int, col: int) -> List[RLEToken]:
        """Tokens of the block at block coordinates (row, col)."""
        return self.blocks[row * self.blocks_shape[1] + col]


@dataclass
class CompressionResult:
    """Results from the encoding pipeline."""

    y: PlaneEncoding
    cb: PlaneEncoding
    cr: PlaneEncoding

    quality: int
    quantization_tables: Dict[str, np.ndarray]

    # Compression stats
    nonzero_coeffs: int
    total_coeffs: int
    token_count: int
    estimated_bits: int
    bpp: float
    compression_ratio: float

    # Runtime
    encode_time_ms: float

    bitrate_label: str = "Estimated (no entropy coding)"

    @property
    def planes(self) -> Tuple[PlaneEncoding, PlaneEncoding, PlaneEncoding]:
        return (self.y, self.cb, self.cr)
