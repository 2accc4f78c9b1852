"""Tests for bitrate estimation."""

import numpy as np
from utils.metrics import Timer, count_nonzero, estimate_bitrate_from_tokens


def test_empty_block_costs_two_tokens():
    info = estimate_bitrate_from_tokens([[(0, 64), (0, 0)]], (8, 8))
    assert info['token_count'] == 2
    assert info['estimated_bits'] == 14
    assert np.isclose(info['bpp'], 14 / 64)
    assert np.isclose(info['compression_ratio'], 8 * 8 * 24 / 14)


def test_magnitude_adds_bits():
    small = estimate_bitrate_from_tokens([[(1, 1), (0, 0)]], (8, 8))
    large = estimate_bitrate_from_tokens([[(-300, 1), (0, 0)]], (8, 8))
    assert large['estimated_bits'] > small['estimated_bits']


def test_count_nonzero():
    blocks = [np.zeros((8, 8)), np.eye(8)]
    assert count_nonzero(blocks) == 8


def test_timer_accumulates():
    timer = Timer()
    assert timer.measure_encode(sum, [1, 2, 3]) == 6
    first = timer.encode_time_ms
    timer.measure_encode(sum, [4])
    assert timer.encode_time_ms >= first >= 0.0
