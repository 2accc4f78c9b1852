"""Main encoding pipeline: RGB image -> per-plane, per-block RLE tokens."""

import logging

import numpy as np
from typing import Dict, List, Tuple

from models.compression_params import CompressionParams
from models.compression_result import CompressionResult, PlaneEncoding
from models.intermediate_data import IntermediateData
from engines.errors import InvalidInputError
from engines.color_space import rgb_to_ycbcr, split_planes, subsample_chroma
from engines.block_processor import blocks_shape, extract_block, split_into_blocks
from engines.dct_engine import forward_dct
from engines.quantizer import calculate_quantization_table, clamp_quality, quantize
from engines.zigzag import zigzag
from engines.rle import RLEToken, run_length_encode
from utils.constants import BLOCK_SIZE, CHROMINANCE, LUMINANCE, PlaneKind
from utils.metrics import Timer, count_nonzero, estimate_bitrate_from_tokens

logger = logging.getLogger(__name__)


def _validate_image(image_rgb: np.ndarray) -> np.ndarray:
    """Check shape and sample range; float samples inside [0, 255] are accepted as is."""
    image = np.asarray(image_rgb)
    if image.ndim != 3 or image.shape[2] != 3:
        raise InvalidInputError(f"Expected an HxWx3 RGB image, got shape {image.shape}")
    h, w = image.shape[:2]
    if h <= 0 or w <= 0:
        raise InvalidInputError(f"Image dimensions must be positive, got {w}x{h}")
    image = image.astype(np.float64)
    if not np.all(np.isfinite(image)) or image.min() < 0 or image.max() > 255:
        raise InvalidInputError("RGB samples must lie in [0, 255]")
    return image


def encode_block(
    block: np.ndarray,
    table: np.ndarray,
    rounding: str = 'truncate',
    dct_method: str = 'basis'
) -> Tuple[np.ndarray, List[RLEToken]]:
    """DCT, quantize, zig-zag and RLE one level-shifted block.

    Returns the quantized block alongside its tokens.
    """
    dct_coeffs = forward_dct(block, dct_method)
    quantized = quantize(dct_coeffs, table, rounding)
    return quantized, run_length_encode(zigzag(quantized))


def encode_plane(
    name: str,
    plane: np.ndarray,
    kind: PlaneKind,
    table: np.ndarray,
    params: CompressionParams
) -> Tuple[PlaneEncoding, List[np.ndarray]]:
    """Encode every block of a plane in row-major block order."""
    encoding = PlaneEncoding(
        name=name,
        kind=kind,
        shape=plane.shape,
        blocks_shape=blocks_shape(plane.shape),
    )
    quantized_blocks = []
    for (_, _, block) in split_into_blocks(plane):
        quantized, tokens = encode_block(block, table, params.rounding, params.dct_method)
        quantized_blocks.append(quantized)
        encoding.blocks.append(tokens)

    logger.info("Encoded %s plane (%s): %d blocks, %d tokens",
                name, kind, encoding.block_count, encoding.token_count)
    return encoding, quantized_blocks


def _inspect_block(
    plane: np.ndarray,
    selected_block_idx: Tuple[int, int],
    table: np.ndarray,
    params: CompressionParams
) -> IntermediateData:
    block_row, block_col = selected_block_idx
    rows, cols = blocks_shape(plane.shape)
    if not (0 <= block_row < rows and 0 <= block_col < cols):
        return IntermediateData(selected_block_idx=selected_block_idx)

    i, j = block_row * BLOCK_SIZE, block_col * BLOCK_SIZE
    shifted = extract_block(plane, i, j)
    dct_coeffs = forward_dct(shifted, params.dct_method)
    quantized = quantize(dct_coeffs, table, params.rounding)
    sequence = zigzag(quantized)
    return IntermediateData(
        selected_block_idx=selected_block_idx,
        selected_block_original=plane[i:i + BLOCK_SIZE, j:j + BLOCK_SIZE].copy(),
        selected_block_shifted=shifted,
        selected_block_dct=dct_coeffs,
        selected_block_quantized=quantized,
        selected_block_zigzag=sequence,
        selected_block_rle=run_length_encode(sequence),
    )


def compress(
    image_rgb: np.ndarray,
    params: CompressionParams = None,
    selected_block_idx: Tuple[int, int] = (0, 0)
) -> Tuple[CompressionResult, IntermediateData]:
    """Run the full JPEG-like encoder over an RGB image."""
    params = params if params is not None else CompressionParams()
    timer = Timer()
    image_float = _validate_image(image_rgb)
    original_shape = image_float.shape[:2]

    # === COLOR ===
    ycbcr = timer.measure_encode(rgb_to_ycbcr, image_float)
    Y, Cb, Cr = split_planes(ycbcr)
    Cb_sub, Cr_sub = timer.measure_encode(subsample_chroma, Cb, Cr, params.subsampling_mode)

    # === TABLES ===
    quality = clamp_quality(params.quality)
    tables: Dict[str, np.ndarray] = {
        LUMINANCE: calculate_quantization_table(LUMINANCE, quality),
        CHROMINANCE: calculate_quantization_table(CHROMINANCE, quality),
    }

    channels_to_process = [
        ('Y', Y, LUMINANCE),
        ('Cb', Cb_sub, CHROMINANCE),
        ('Cr', Cr_sub, CHROMINANCE),
    ]

    # === BLOCKS ===
    encodings = {}
    all_quantized = []
    for channel_name, channel, kind in channels_to_process:
        encoding, quantized_blocks = timer.measure_encode(
            encode_plane, channel_name, channel, kind, tables[kind], params
        )
        encodings[channel_name] = encoding
        all_quantized.extend(quantized_blocks)

    logger.info("DCT and quantization finished for %dx%d image at quality %d",
                original_shape[1], original_shape[0], quality)

    # === METRICS ===
    token_blocks = [tokens for enc in encodings.values() for tokens in enc.blocks]
    bitrate_info = estimate_bitrate_from_tokens(token_blocks, original_shape)

    result = CompressionResult(
        y=encodings['Y'],
        cb=encodings['Cb'],
        cr=encodings['Cr'],
        quality=quality,
        quantization_tables=tables,
        nonzero_coeffs=count_nonzero(all_quantized),
        total_coeffs=len(all_quantized) * BLOCK_SIZE * BLOCK_SIZE,
        token_count=bitrate_info['token_count'],
        estimated_bits=bitrate_info['estimated_bits'],
        bpp=bitrate_info['bpp'],
        compression_ratio=bitrate_info['compression_ratio'],
        encode_time_ms=timer.encode_time_ms,
        bitrate_label=bitrate_info['label'],
    )

    # === INTERMEDIATE DATA ===
    intermediate = _inspect_block(Y, selected_block_idx, tables[LUMINANCE], params)

    return result, intermediate
