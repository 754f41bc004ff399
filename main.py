# main.py
# จุดเริ่มต้น: สร้าง collision mask ให้ sprite ทั้งหมด
#
#   python main.py
#   python main.py --resolution 16 --sprites-dir ./sprites papa-john.png

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

from config.mask_config import MaskConfig
from config.settings import DECODERS, MASKS_DIR_NAME
from core.errors import MaskError
from core.message_log import MessageLog
from collision.batch_runner import run_batch


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate downsampled collision masks from sprite alpha channels."
    )
    parser.add_argument("sprites", nargs="*", help="sprite file names (default: built-in list)")
    parser.add_argument("--resolution", type=int, help="grid size of each mask")
    parser.add_argument("--alpha-threshold", type=int, help="alpha >= this value is solid (0-255)")
    parser.add_argument("--sprites-dir", help="folder that holds the sprites")
    parser.add_argument("--output-dir", help="folder for the mask files (default: <sprites-dir>/masks)")
    parser.add_argument("--decoder", choices=DECODERS, help="image decoder to use")
    parser.add_argument("--strict", action="store_true", help="stop the whole batch on the first broken sprite")
    parser.add_argument("--quiet", action="store_true", help="do not print progress or previews")
    return parser


def config_from_args(args: argparse.Namespace) -> MaskConfig:
    config = MaskConfig.default()

    if args.sprites_dir:
        config.source_dir = args.sprites_dir
        config.output_dir = os.path.join(args.sprites_dir, MASKS_DIR_NAME)
    if args.output_dir:
        config.output_dir = args.output_dir
    if args.resolution is not None:
        config.resolution = args.resolution
    if args.alpha_threshold is not None:
        config.alpha_threshold = args.alpha_threshold
    if args.decoder:
        config.decoder = args.decoder
    if args.sprites:
        config.input_list = list(args.sprites)
    config.strict = args.strict
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)

    try:
        config.validate()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    log = MessageLog(quiet=args.quiet)
    try:
        result = run_batch(config, log)
    except (MaskError, OSError) as exc:
        # strict mode: หยุดทั้ง batch ตั้งแต่ตัวที่พัง
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
