"""Tests for quantization tables and coefficient quantization."""

import numpy as np
import pytest
from engines.errors import ArithmeticFaultError, InvalidInputError
from engines.quantizer import calculate_quantization_table, clamp_quality, quality_scale, quantize
from utils.constants import CHROMINANCE, JPEG_CHROMA_Q50, JPEG_LUMA_Q50, LUMINANCE


@pytest.mark.parametrize('kind', [LUMINANCE, CHROMINANCE])
def test_tables_are_64_positive_integers(kind):
    for quality in range(1, 100):
        table = calculate_quantization_table(kind, quality)
        assert table.shape == (64,)
        assert np.issubdtype(table.dtype, np.integer)
        assert np.all(table >= 1)
        assert np.all(table <= 255)


def test_quality_50_uses_base_tables():
    assert np.array_equal(calculate_quantization_table(LUMINANCE, 50), JPEG_LUMA_Q50.reshape(-1))
    assert np.array_equal(calculate_quantization_table(CHROMINANCE, 50), JPEG_CHROMA_Q50.reshape(-1))


def test_scale_factor():
    assert quality_scale(25) == 2.0
    assert quality_scale(50) == 1.0
    assert quality_scale(75) == 0.5
    assert quality_scale(10) == 5.0


def test_quality_is_clamped():
    assert clamp_quality(0) == 1
    assert clamp_quality(-20) == 1
    assert clamp_quality(150) == 99
    assert np.array_equal(calculate_quantization_table(LUMINANCE, 0),
                          calculate_quantization_table(LUMINANCE, 1))
    assert np.array_equal(calculate_quantization_table(LUMINANCE, 500),
                          calculate_quantization_table(LUMINANCE, 99))


def test_extreme_qualities_hit_bounds():
    assert np.all(calculate_quantization_table(LUMINANCE, 1) == 255)
    high = calculate_quantization_table(LUMINANCE, 99)
    assert high.min() == 1
    assert high.max() == 2


def test_scaling_uses_single_precision():
    """Half-way products land where a float32 multiply puts them."""
    low = calculate_quantization_table(LUMINANCE, 12)
    assert low[np.flatnonzero(JPEG_LUMA_Q50.reshape(-1) == 51)[0]] == 212
    assert low[np.flatnonzero(JPEG_LUMA_Q50.reshape(-1) == 57)[0]] == 237

    high = calculate_quantization_table(LUMINANCE, 55)
    assert high[np.flatnonzero(JPEG_LUMA_Q50.reshape(-1) == 55)[0]] == 50
    assert high[np.flatnonzero(JPEG_LUMA_Q50.reshape(-1) == 35)[0]] == 32


def test_lower_quality_never_finer():
    coarse = calculate_quantization_table(LUMINANCE, 20)
    fine = calculate_quantization_table(LUMINANCE, 80)
    assert np.all(coarse >= fine)


def test_unknown_kind():
    with pytest.raises(ValueError):
        calculate_quantization_table('alpha', 50)


def test_quantize_truncates_toward_zero():
    dct_block = np.zeros((8, 8))
    dct_block[0, 0] = -15.7
    dct_block[0, 1] = 15.7
    dct_block[0, 2] = 3.9
    table = np.full(64, 4)
    out = quantize(dct_block, table)
    assert out[0, 0] == -3
    assert out[0, 1] == 3
    assert out[0, 2] == 0
    assert np.issubdtype(out.dtype, np.integer)


def test_quantize_round_strategy():
    dct_block = np.zeros((8, 8))
    dct_block[0, 0] = -15.7
    dct_block[0, 1] = 15.7
    out = quantize(dct_block, np.full(64, 4), rounding='round')
    assert out[0, 0] == -4
    assert out[0, 1] == 4
    with pytest.raises(ValueError):
        quantize(dct_block, np.full(64, 4), rounding='floor')


def test_table_position_is_row_major():
    dct_block = np.full((8, 8), 100.0)
    table = np.ones(64, dtype=np.int32)
    table[1 * 8 + 2] = 10
    out = quantize(dct_block, table)
    assert out[1, 2] == 10
    assert out[2, 1] == 100


def test_zero_divisor_fails_fast():
    table = np.ones(64, dtype=np.int32)
    table[5] = 0
    with pytest.raises(ArithmeticFaultError):
        quantize(np.ones((8, 8)), table)


def test_quantize_rejects_bad_shapes():
    with pytest.raises(InvalidInputError):
        quantize(np.ones((4, 4)), np.ones(64))
    with pytest.raises(InvalidInputError):
        quantize(np.ones((8, 8)), np.ones(16))
