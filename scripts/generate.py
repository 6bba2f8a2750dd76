#!/usr/bin/env python3
"""
CLI: Generate a 5-color palette from a word, phrase or emotion.
Usage:
  python scripts/generate.py "calm ocean"
  python scripts/generate.py "sunset" --format json --seed 7
  python scripts/generate.py "sunset" --from-hex "#FF5733" "#C70039" "#900C3F" "#581845" "#FFC300" --lock 0 --lock 2
  python scripts/generate.py "coffee" --png output/coffee.png
  python scripts/generate.py "coffee" --png   (writes under output.dir from config)
  python scripts/generate.py --suggest
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging
import random

from emopalette.color import Color, min_contrast
from emopalette.config import get_png_size, load_config, png_output_path
from emopalette.data import COMMON_EMOTIONS
from emopalette.export import EXPORT_FORMATS, export_palette, save_png
from emopalette.harmony import determine_harmony_type
from emopalette.mapping import find_emotion_mapping
from emopalette.palette import PALETTE_SIZE, generate_palette_from_emotion

logger = logging.getLogger(__name__)

_DEFAULT_PNG = Path()


def _lock_index(value: str) -> int:
    idx = int(value)
    if not 0 <= idx < PALETTE_SIZE:
        raise argparse.ArgumentTypeError(f"lock index must be 0-{PALETTE_SIZE - 1}, got {idx}")
    return idx


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate a harmonized 5-color palette from text (no external services)."
    )
    parser.add_argument(
        "text",
        type=str,
        nargs="?",
        default="",
        help="Word, phrase or emotion (empty: random palette).",
    )
    parser.add_argument(
        "--from-hex",
        nargs=PALETTE_SIZE,
        metavar="HEX",
        default=None,
        help=f"Current palette ({PALETTE_SIZE} hex values) to regenerate around locked colors.",
    )
    parser.add_argument(
        "--lock",
        type=_lock_index,
        action="append",
        default=[],
        help="Index (0-4) of a color to keep. Repeatable. Requires --from-hex.",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=sorted(EXPORT_FORMATS),
        default=None,
        help="Output format (default: from config, css).",
    )
    parser.add_argument(
        "--png",
        type=Path,
        nargs="?",
        const=_DEFAULT_PNG,
        default=None,
        help="Also write the palette as a PNG swatch strip (no value: output.dir/palette_<text>.png).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Optional random seed for reproducibility.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    parser.add_argument(
        "--suggest",
        action="store_true",
        help="Print suggested starting words and exit.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Debug logging (shows which rule resolved the text).",
    )
    args = parser.parse_args()

    config = load_config(args.config)
    level = "DEBUG" if args.verbose else str(config.get("logging", {}).get("level", "WARNING")).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.suggest:
        print(", ".join(COMMON_EMOTIONS))
        return 0
    if args.lock and not args.from_hex:
        parser.error("--lock requires --from-hex")

    rng = random.Random(args.seed) if args.seed is not None else None
    current = [Color.from_hex(h) for h in args.from_hex] if args.from_hex else []

    mapping = find_emotion_mapping(args.text)
    palette = generate_palette_from_emotion(args.text, current, set(args.lock), rng=rng)

    fmt = args.format or config.get("export", {}).get("format", "css")
    print(f"Text: {args.text!r} → {mapping.emotion} ({determine_harmony_type(args.text, mapping)})")
    try:
        output = export_palette(palette, fmt)
    except ValueError as e:
        parser.error(str(e))
    print(output)
    logger.info("Minimum contrast: %.1f", min_contrast(palette))

    if args.png is not None:
        width, height = get_png_size(config)
        target = png_output_path(config, args.text, None if args.png is _DEFAULT_PNG else args.png)
        path = save_png(palette, target, width, height)
        print(f"PNG: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
