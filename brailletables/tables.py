"""The three translation tables and how to load one."""

from __future__ import annotations

import logging
from typing import NamedTuple

from brailletables.constants import ASCII_WIDTH, BRAILLE_WIDTH
from brailletables.sources import Locator
from brailletables.trie import BitTrie

log = logging.getLogger("brailletables")


class Table(NamedTuple):
    name: str
    filename: str
    key_width: int


ASCII_TO_BRAILLE = Table("ascii_to_braille", "ASCIIToBraille.txt", ASCII_WIDTH)
BRAILLE_TO_ASCII = Table("braille_to_ascii", "BrailleToASCII.txt", BRAILLE_WIDTH)
BRAILLE_TO_UNICODE = Table("braille_to_unicode", "BrailleToUnicode.txt", BRAILLE_WIDTH)

TABLES: dict[str, Table] = {
    t.name: t for t in (ASCII_TO_BRAILLE, BRAILLE_TO_ASCII, BRAILLE_TO_UNICODE)
}


def load_table(table: Table, locator: Locator, *, overwrite: bool = True) -> BitTrie:
    """Build a fresh trie for *table* from the locator's source.

    Nothing is cached; every call re-reads the source.
    """
    trie = BitTrie(table.key_width, overwrite=overwrite)
    with locator.open(table.filename) as lines:
        count = trie.load(lines)
    log.debug("Loaded %d %s entries from %s", count, table.name, table.filename)
    return trie
