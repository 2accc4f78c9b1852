"""Run-length encoding of zig-zag sequences."""

import numpy as np
from typing import Iterable, List, NamedTuple

SENTINEL_RUN = 0


class RLEToken(NamedTuple):
    value: int
    run_length: int


END_OF_BLOCK = RLEToken(0, SENTINEL_RUN)


def run_length_encode(sequence: Iterable[int]) -> List[RLEToken]:
    """Collapse runs of equal values, then append the (0, 0) sentinel."""
    tokens = []
    current = None
    count = 0
    for value in sequence:
        value = int(value)
        if count and value == current:
            count += 1
            continue
        if count:
            tokens.append(RLEToken(current, count))
        current, count = value, 1
    if count:
        tokens.append(RLEToken(current, count))
    tokens.append(END_OF_BLOCK)
    return tokens


def run_length_decode(tokens: Iterable) -> np.ndarray:
    """Expand tokens up to the sentinel."""
    values = []
    for value, run_length in tokens:
        if run_length == SENTINEL_RUN:
            break
        values.extend([value] * run_length)
    return np.array(values, dtype=np.int32)
