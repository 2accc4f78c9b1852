"""Intermediate data for inspecting one block."""

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from engines.rle import RLEToken


@dataclass
class IntermediateData:
    """Every stage of one selected luma block."""

    selected_block_idx: tuple = (0, 0)
    selected_block_original: Optional[np.ndarray] = None
    selected_block_shifted: Optional[np.ndarray] = None
    selected_block_dct: Optional[np.ndarray] = None
    selected_block_quantized: Optional[np.ndarray] = None
    selected_block_zigzag: Optional[np.ndarray] = None
    selected_block_rle: Optional[List[RLEToken]] = None
