"""Command line entry point for brailletables."""

from __future__ import annotations

import argparse
import logging
import sys

from brailletables.errors import BrailleTableError
from brailletables.sources import TableLocator
from brailletables.translator import Translator

log = logging.getLogger("brailletables")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brailletables",
        description="Translate between ASCII text, braille bit strings and Unicode braille",
    )
    parser.add_argument("--data-dir", action="append", default=[], metavar="DIR",
                        help="Directory searched first for the definition files (repeatable)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    sub = parser.add_subparsers(dest="command", required=True)

    encode = sub.add_parser("encode", help="Text to braille bits")
    encode.add_argument("text")

    decode = sub.add_parser("decode", help="Braille bits to ASCII text")
    decode.add_argument("bits")

    uni = sub.add_parser("unicode", help="Braille bits to Unicode braille")
    uni.add_argument("bits")

    render = sub.add_parser("render", help="Braille bits to a PNG image")
    render.add_argument("bits")
    render.add_argument("--out", required=True, help="Output image path")
    render.add_argument("--cell-px", type=int, default=24,
                        help="Width of one cell in pixels (default: 24)")
    return parser


def run(args: argparse.Namespace) -> str:
    """Execute one parsed command and return what should be printed."""
    translator = Translator(TableLocator(args.data_dir))
    if args.command == "encode":
        return translator.string_to_braille(args.text)
    if args.command == "decode":
        return translator.string_to_ascii(args.bits)
    if args.command == "unicode":
        return translator.string_to_unicode(args.bits)
    # render
    from brailletables.render import render_cells

    img = render_cells(args.bits, cell_px=args.cell_px)
    img.save(args.out)
    log.info("Saved %dx%d image to %s", img.width, img.height, args.out)
    return args.out


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        output = run(args)
    except BrailleTableError as exc:
        log.error("%s", exc)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
