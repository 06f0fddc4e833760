"""
Command line entry point.

Usage:
    python -m posbarcode "A1-2"
    python -m posbarcode 12345 --symbology code128c --height 30
    python -m posbarcode 000123 --preset sale_ticket --png ticket.png
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from posbarcode import (
    BarcodeGenerator,
    BarcodeGenError,
    Symbology,
    get_logger,
    get_preset,
    load_config,
    setup_logging,
)

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="posbarcode", description="Generate Code 39 / Code 128-C barcodes as SVG"
    )
    parser.add_argument("value", help="Value to encode")
    parser.add_argument(
        "--symbology",
        "-s",
        default=Symbology.CODE39.value,
        choices=[s.value for s in Symbology],
    )
    parser.add_argument("--preset", "-p", help="Named preset from the configuration")
    parser.add_argument("--config", type=Path, help="JSON configuration file")
    parser.add_argument("--height", type=float)
    parser.add_argument("--font-size", type=float, dest="include_text_font_size")
    parser.add_argument("--no-text", action="store_true", help="Omit the human-readable line")
    parser.add_argument("--png", type=Path, help="Write a PNG preview instead of SVG")
    parser.add_argument("--scale", type=float, default=4.0, help="Pixels per unit for --png")
    parser.add_argument("--strict", action="store_true", help="Fail on invalid options")
    parser.add_argument("--log-level", default=None)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config) if args.config else None
    setup_logging(args.log_level or (config or {}).get("log_level"))

    options: Dict[str, Any]
    try:
        if args.preset:
            symbology, options = get_preset(args.preset, config)
        else:
            symbology = Symbology(args.symbology)
            options = dict((config or {}).get(symbology.value) or {})
        if args.height is not None:
            options["height"] = args.height
        if args.include_text_font_size is not None:
            options["include_text_font_size"] = args.include_text_font_size
        if args.no_text:
            options["include_text"] = False

        generator = BarcodeGenerator(symbology, args.value, options, strict=args.strict)
        if args.png:
            args.png.write_bytes(generator.render_bytes(scale=args.scale))
            logger.info("PNG written to %s", args.png)
        else:
            sys.stdout.write(generator.render_svg() + "\n")
    except BarcodeGenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: cannot write {args.png}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
