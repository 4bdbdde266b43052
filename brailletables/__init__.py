"""brailletables -- braille table translation over bit-keyed tries."""

from brailletables.constants import ASCII_WIDTH, BRAILLE_WIDTH, DEFAULT_SEPARATOR
from brailletables.errors import (
    BrailleTableError,
    IncompleteInput,
    InvalidConfig,
    InvalidHex,
    KeyNotFound,
    MalformedEntry,
    SourceUnavailable,
    TrieNotLoaded,
)
from brailletables.trie import BitTrie, BitTrieNode, Lookup
from brailletables.sources import MemoryLocator, TableLocator
from brailletables.tables import (
    ASCII_TO_BRAILLE,
    BRAILLE_TO_ASCII,
    BRAILLE_TO_UNICODE,
    TABLES,
    Table,
    load_table,
)
from brailletables.translator import Translator, split_every

__all__ = [
    "ASCII_WIDTH",
    "BRAILLE_WIDTH",
    "DEFAULT_SEPARATOR",
    "ASCII_TO_BRAILLE",
    "BRAILLE_TO_ASCII",
    "BRAILLE_TO_UNICODE",
    "TABLES",
    "BitTrie",
    "BitTrieNode",
    "BrailleTableError",
    "IncompleteInput",
    "InvalidConfig",
    "InvalidHex",
    "KeyNotFound",
    "Lookup",
    "MalformedEntry",
    "MemoryLocator",
    "SourceUnavailable",
    "Table",
    "TableLocator",
    "Translator",
    "TrieNotLoaded",
    "load_table",
    "split_every",
]
