"""Fixed widths and file names shared across the package."""

from __future__ import annotations

HEX = 16

BRAILLE_WIDTH = 6  # dots 1..6 of one cell
ASCII_WIDTH = 8

DEFAULT_SEPARATOR = ","

# Unicode "Braille Patterns" block; six-dot cells use the first 64 code points
BRAILLE_RANGE_START = 0x2800
BRAILLE_SIX_DOT_END = BRAILLE_RANGE_START + (1 << BRAILLE_WIDTH)

DATA_DIR_ENV = "BRAILLETABLES_DATA_DIR"
