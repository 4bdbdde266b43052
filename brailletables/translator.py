"""Translation between ASCII text, braille bit strings and Unicode braille."""

from __future__ import annotations

import logging
import string

from brailletables.constants import (
    ASCII_WIDTH,
    BRAILLE_RANGE_START,
    BRAILLE_SIX_DOT_END,
    BRAILLE_WIDTH,
    HEX,
)
from brailletables.errors import IncompleteInput, InvalidConfig, InvalidHex, KeyNotFound
from brailletables.sources import Locator, TableLocator
from brailletables.tables import (
    ASCII_TO_BRAILLE,
    BRAILLE_TO_ASCII,
    BRAILLE_TO_UNICODE,
    load_table,
)
from brailletables.trie import BitTrie

log = logging.getLogger("brailletables")


def split_every(text: str, n: int) -> list[str]:
    """Split *text* into consecutive chunks of exactly *n* characters."""
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise InvalidConfig(f"chunk size must be a positive integer, got {n!r}")
    if len(text) % n != 0:
        raise IncompleteInput(len(text), n)
    return [text[i:i + n] for i in range(0, len(text), n)]


def symbol_key(symbol: str, width: int = ASCII_WIDTH) -> str:
    """Zero-padded binary code of a single character."""
    if len(symbol) != 1:
        raise KeyNotFound(symbol, f"Expected a single character, got {symbol!r}")
    code = ord(symbol)
    if code >= 1 << width:
        raise KeyNotFound(symbol, f"Cannot find {symbol!r}")
    return format(code, f"0{width}b")


def hex_to_char(value: str) -> str:
    """Character whose code point is the hexadecimal numeral *value*."""
    if not value or any(c not in string.hexdigits for c in value):
        raise InvalidHex(value)
    try:
        return chr(int(value, HEX))
    except (ValueError, OverflowError) as exc:
        raise InvalidHex(value) from exc


class Translator:
    """String-level braille translation backed by freshly loaded tables.

    Each public call loads the table it needs once and discards it
    afterwards, so edits to the definition files take effect on the next
    call.
    """

    def __init__(self, locator: Locator | None = None):
        self.locator = locator if locator is not None else TableLocator()

    # single symbols

    def to_braille(self, symbol: str) -> str:
        """Six-dot bit string for one character."""
        return self._braille_of(load_table(ASCII_TO_BRAILLE, self.locator), symbol)

    def to_ascii(self, bits: str) -> str:
        """Character for one six-dot cell."""
        return load_table(BRAILLE_TO_ASCII, self.locator).get(bits)

    def to_unicode(self, bits: str) -> str:
        """Unicode braille glyph for one six-dot cell."""
        return hex_to_char(load_table(BRAILLE_TO_UNICODE, self.locator).get(bits))

    # whole strings

    def string_to_braille(self, text: str) -> str:
        if not text:
            return ""
        trie = load_table(ASCII_TO_BRAILLE, self.locator)
        out: list[str] = []
        for symbol in text:
            out.append(self._braille_of(trie, symbol))
        return "".join(out)

    def string_to_ascii(self, bits: str) -> str:
        cells = split_every(bits, BRAILLE_WIDTH)
        if not cells:
            return ""
        trie = load_table(BRAILLE_TO_ASCII, self.locator)
        return "".join(trie.get(cell) for cell in cells)

    def string_to_unicode(self, bits: str) -> str:
        cells = split_every(bits, BRAILLE_WIDTH)
        if not cells:
            return ""
        trie = load_table(BRAILLE_TO_UNICODE, self.locator)
        return "".join(hex_to_char(trie.get(cell)) for cell in cells)

    @staticmethod
    def unicode_to_braille(text: str) -> str:
        """Bit string for Unicode six-dot braille glyphs (no table needed)."""
        out: list[str] = []
        for glyph in text:
            code = ord(glyph)
            if not BRAILLE_RANGE_START <= code < BRAILLE_SIX_DOT_END:
                raise KeyNotFound(glyph, f"Not a six-dot braille character: {glyph!r}")
            offset = code - BRAILLE_RANGE_START
            # bit i of the offset is dot i + 1
            out.append("".join(str((offset >> i) & 1) for i in range(BRAILLE_WIDTH)))
        return "".join(out)

    @staticmethod
    def _braille_of(trie: BitTrie, symbol: str) -> str:
        key = symbol_key(symbol, trie.key_width)
        result = trie.find(key)
        if not result.found:
            log.debug("No braille cell for %r (key %s)", symbol, key)
            raise KeyNotFound(symbol, f"Cannot find {symbol!r}")
        return result.value
