"""
JPEG Block Encoder
Color transform, chroma subsampling, DCT, quantization, zig-zag and RLE.
"""

import argparse
import logging
import sys

from utils.constants import DCT_METHODS, ROUNDING_MODES, SUBSAMPLING_MODES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Encode an image into per-block RLE tokens')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('image_path', nargs='?', help='Image file to encode')
    source.add_argument('--synthetic', metavar='NAME',
                        help='Use a generated image (flat, square, gradient, checkerboard, '
                             'stripes, chroma_stripes)')
    parser.add_argument('--quality', type=int, default=50, help='Quality 1-99 (clamped)')
    parser.add_argument('--subsampling', choices=SUBSAMPLING_MODES, default='4:2:0')
    parser.add_argument('--rounding', choices=ROUNDING_MODES, default='truncate')
    parser.add_argument('--dct-method', choices=DCT_METHODS, default='basis')
    parser.add_argument('--block', type=int, nargs=2, default=(0, 0), metavar=('ROW', 'COL'),
                        help='Luma block to print stage by stage')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log each pipeline stage')
    return parser


def run_cli(argv=None) -> int:
    """Encode one image and print a per-plane summary."""
    from models.compression_params import CompressionParams
    from engines.pipeline import compress
    from utils.test_images import generate_demo_image
    from utils.image_io import load_image

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    if args.synthetic:
        image = generate_demo_image(args.synthetic)
        if image is None:
            print(f"Unknown synthetic image: {args.synthetic}", file=sys.stderr)
            return 2
    else:
        print(f"Loading: {args.image_path}")
        image = load_image(args.image_path)

    params = CompressionParams(
        quality=args.quality,
        subsampling_mode=args.subsampling,
        rounding=args.rounding,
        dct_method=args.dct_method,
    )

    print(f"Image: {image.shape[1]}x{image.shape[0]}")
    print(f"Quality: {params.quality}")

    result, intermediate = compress(image, params, tuple(args.block))

    print("\n=== Planes ===")
    for plane in result.planes:
        h, w = plane.shape
        rows, cols = plane.blocks_shape
        print(f"{plane.name:<3} {w}x{h}  blocks: {rows}x{cols}  tokens: {plane.token_count}")

    print("\n=== Results ===")
    print(f"Non-zero:  {result.nonzero_coeffs}/{result.total_coeffs}")
    print(f"Tokens:    {result.token_count}")
    print(f"BPP:       {result.bpp:.3f} ({result.bitrate_label})")
    print(f"Ratio:     {result.compression_ratio:.2f}:1")
    print(f"Time:      {result.encode_time_ms:.2f} ms")

    if intermediate.selected_block_rle is not None:
        print(f"\nBlock {intermediate.selected_block_idx} RLE: "
              f"{[tuple(token) for token in intermediate.selected_block_rle]}")
    return 0


def main():
    sys.exit(run_cli())


if __name__ == '__main__':
    main()
