"""Error types raised while loading and querying braille tables."""

from __future__ import annotations


class BrailleTableError(Exception):
    """Base class for every error this package raises."""


class InvalidConfig(BrailleTableError, ValueError):
    """A key width, separator or chunk size is unusable."""


class SourceUnavailable(BrailleTableError, OSError):
    """A definition source is missing or cannot be read."""


class MalformedEntry(BrailleTableError, ValueError):
    """A definition line does not parse into a fixed-width key/value pair."""

    def __init__(self, line_number: int | None, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        where = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{where}{reason}: {line!r}")


class KeyNotFound(BrailleTableError, KeyError):
    """No value is stored under the requested key."""

    def __init__(self, key: str, message: str | None = None):
        self.key = key
        self.message = message or f"Cannot find {key!r}"
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.message


class IncompleteInput(BrailleTableError, ValueError):
    """Input length is not a multiple of the chunk width."""

    def __init__(self, length: int, width: int):
        self.length = length
        self.width = width
        super().__init__(
            f"The input is an incomplete braille or invalid input "
            f"(length {length} is not a multiple of {width})"
        )


class InvalidHex(BrailleTableError, ValueError):
    """A stored code point is not a valid hexadecimal numeral."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Not a valid hexadecimal code point: {value!r}")


class TrieNotLoaded(BrailleTableError):
    """The trie's last load failed; it must be discarded."""
