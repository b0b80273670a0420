#!/usr/bin/env python3
"""
Reassembly run: load a tile file, rebuild the image, find the motif.

Reports:
- checksum: product of the four corner tile ids
- roughness: set pixels not accounted for by motif occurrences

A JSON receipt is written for every run, PASS or FAIL.

Usage:
    python run_reassembly.py --input ../tests/fixtures/example_tiles.txt
    python run_reassembly.py --input tiles.txt --motif motif.txt --strict
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tile_core.errors import TilingError
from tile_core.motif import SEA_MONSTER, Motif
from tile_core.parse import load_tiles_file
from tile_core.pipeline import reassemble

from utils import build_receipt, get_fixtures_dir, save_receipt, setup_logger


def load_motif(path):
    """Read a motif drawn with '#' pixels; None means the built-in sea monster."""
    if path is None:
        return SEA_MONSTER
    lines = Path(path).read_text().splitlines()
    return Motif.from_lines(line for line in lines if line.strip())


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Reassemble tiles into one image and scan it for a motif"
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=get_fixtures_dir() / "example_tiles.txt",
        help="Tile file (default: bundled 9-tile example)",
    )
    parser.add_argument(
        "--motif",
        type=Path,
        default=None,
        help="Motif file with '#' pixels (default: sea monster)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first ambiguous tile edge",
    )
    parser.add_argument(
        "--show-image",
        action="store_true",
        help="Embed the oriented image in the receipt",
    )
    parser.add_argument(
        "--receipts-dir",
        type=Path,
        default=Path(__file__).parent / "receipts",
        help="Directory for JSON receipts",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=Path(__file__).parent / "logs" / "reassembly.log",
        help="Log file path",
    )

    args = parser.parse_args(argv)

    logger = setup_logger("reassembly", args.log_file)

    logger.info("=" * 80)
    logger.info(f"Reassembly: {args.input}")
    logger.info("=" * 80)

    try:
        tiles = load_tiles_file(args.input)
        result = reassemble(tiles, motif=load_motif(args.motif), strict=args.strict)
    except (TilingError, OSError) as err:
        logger.error(f"No solution: {err}")
        receipt = build_receipt(args.input.name, status="FAIL", error=str(err))
        save_receipt(receipt, args.receipts_dir)
        return 1

    logger.info(f"Checksum: {result.checksum}")
    logger.info(f"Roughness: {result.roughness}")

    receipt = build_receipt(args.input.name, result, include_image=args.show_image)
    receipt_file = save_receipt(receipt, args.receipts_dir)
    logger.info(f"Receipt saved to {receipt_file}")

    print(result.checksum)
    print(result.roughness)
    return 0


if __name__ == "__main__":
    sys.exit(main())
