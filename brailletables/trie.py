"""Binary trie keyed by fixed-width bit strings."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, NamedTuple

from brailletables.constants import DEFAULT_SEPARATOR
from brailletables.errors import (
    InvalidConfig,
    KeyNotFound,
    MalformedEntry,
    SourceUnavailable,
    TrieNotLoaded,
)

log = logging.getLogger("brailletables.trie")

_BITS = {"0": 0, "1": 1}


class Lookup(NamedTuple):
    """Outcome of :meth:`BitTrie.find`."""

    key: str
    value: str | None
    found: bool


class BitTrieNode:
    """Single node in the bit trie: two children, or a terminal value."""

    __slots__ = ("children", "value")

    def __init__(self):
        self.children: list[BitTrieNode | None] = [None, None]
        self.value: str | None = None


class BitTrie:
    """Trie over bit strings of exactly ``key_width`` characters.

    Each root-to-leaf path spells one key, one bit per level, and the leaf
    holds the value for that key. Lookup and insertion cost O(key_width)
    no matter how many entries are stored.

    Duplicate keys overwrite the earlier value unless ``overwrite`` is
    false, in which case they are reported as :class:`MalformedEntry`.
    """

    def __init__(
        self,
        key_width: int,
        *,
        overwrite: bool = True,
        separator: str = DEFAULT_SEPARATOR,
    ):
        if isinstance(key_width, bool) or not isinstance(key_width, int) or key_width <= 0:
            raise InvalidConfig(f"key width must be a positive integer, got {key_width!r}")
        if not separator or any(ch in _BITS for ch in separator):
            raise InvalidConfig(f"unusable separator {separator!r}")
        self.key_width = key_width
        self.overwrite = overwrite
        self.separator = separator
        self.root = BitTrieNode()
        self._size = 0
        self._broken = False

    # loading

    def load(self, source: Iterable[str]) -> int:
        """Insert every ``<key><separator><value>`` line of *source*.

        Returns the number of lines inserted. Any failure leaves the trie
        unusable; a later lookup raises :class:`TrieNotLoaded`. Loading a
        second source into a populated trie merges the two, with the later
        source winning on duplicate keys when ``overwrite`` is set.
        """
        count = 0
        loaded = False
        try:
            for line_number, raw in enumerate(source, start=1):
                line = raw.rstrip("\r\n")
                fields = line.split(self.separator)
                if len(fields) != 2:
                    raise MalformedEntry(
                        line_number, line, f"expected 2 fields, found {len(fields)}"
                    )
                key, value = fields
                reason = self._check_entry(key, value)
                if reason is not None:
                    raise MalformedEntry(line_number, line, reason)
                self._insert(key, value)
                count += 1
            loaded = True
        except SourceUnavailable:
            raise
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceUnavailable(f"definition source could not be read: {exc}") from exc
        finally:
            if not loaded:
                self._broken = True
        log.debug("Loaded %d entries into %d-bit trie", count, self.key_width)
        return count

    def insert(self, key: str, value: str) -> None:
        """Store *value* under *key*, validating it like a loaded line."""
        reason = self._check_entry(key, value)
        if reason is not None:
            raise MalformedEntry(None, f"{key}{self.separator}{value}", reason)
        self._insert(key, value)

    def _check_entry(self, key: str, value: str) -> str | None:
        if len(key) != self.key_width:
            return f"key must be {self.key_width} bits, got {len(key)}"
        if any(ch not in _BITS for ch in key):
            return "key may only contain '0' and '1'"
        if not value:
            return "value is empty"
        if not self.overwrite and key in self:
            return "duplicate key"
        return None

    def _insert(self, key: str, value: str) -> None:
        node = self.root
        for ch in key:
            bit = _BITS[ch]
            child = node.children[bit]
            if child is None:
                child = node.children[bit] = BitTrieNode()
            node = child
        if node.value is None:
            self._size += 1
        node.value = value

    # lookup

    def get(self, key: str) -> str:
        """Value stored under *key*; raises :class:`KeyNotFound` otherwise."""
        node = self._walk(key)
        if node is None:
            raise KeyNotFound(key)
        return node.value

    def find(self, key: str) -> Lookup:
        """Like :meth:`get`, but reports a missing key in the result."""
        node = self._walk(key)
        if node is None:
            return Lookup(key, None, False)
        return Lookup(key, node.value, True)

    def items(self) -> Iterator[tuple[str, str]]:
        """``(key, value)`` pairs in ascending key order."""
        self._check_usable()
        stack: list[tuple[BitTrieNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if len(prefix) == self.key_width:
                yield prefix, node.value
                continue
            # push "1" first so "0" pops first
            for bit in (1, 0):
                child = node.children[bit]
                if child is not None:
                    stack.append((child, prefix + str(bit)))

    def _walk(self, key: str) -> BitTrieNode | None:
        self._check_usable()
        if not isinstance(key, str) or len(key) != self.key_width:
            return None
        node = self.root
        for ch in key:
            bit = _BITS.get(ch)
            if bit is None:
                return None
            node = node.children[bit]
            if node is None:
                return None
        return node if node.value is not None else None

    def _check_usable(self) -> None:
        if self._broken:
            raise TrieNotLoaded(
                f"{self.key_width}-bit trie failed to load and must be discarded"
            )

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._walk(key) is not None

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BitTrie(key_width={self.key_width}, entries={self._size})"
