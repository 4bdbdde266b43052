"""
Tests for the string-level translator and its chunking helpers.
"""

import pytest

from brailletables.errors import (
    IncompleteInput,
    InvalidConfig,
    InvalidHex,
    KeyNotFound,
    SourceUnavailable,
)
from brailletables.sources import MemoryLocator, TableLocator
from brailletables.translator import Translator, hex_to_char, split_every, symbol_key


class CountingLocator(MemoryLocator):
    """MemoryLocator that records which files were opened."""

    def __init__(self, tables):
        super().__init__(tables)
        self.opened = []

    def open(self, filename):
        self.opened.append(filename)
        return super().open(filename)


class TestSplitEvery:
    def test_chunks_in_order(self):
        assert split_every("100000110000", 6) == ["100000", "110000"]

    @pytest.mark.parametrize("n_chunks", [1, 2, 5])
    def test_chunk_count(self, n_chunks):
        text = "".join(str(i % 2) * 4 for i in range(n_chunks))
        chunks = split_every(text, 4)
        assert len(chunks) == n_chunks
        assert "".join(chunks) == text

    def test_empty(self):
        assert split_every("", 6) == []

    @pytest.mark.parametrize("text", ["1", "10000", "1000001"])
    def test_incomplete(self, text):
        with pytest.raises(IncompleteInput) as exc_info:
            split_every(text, 6)
        assert exc_info.value.length == len(text)
        assert exc_info.value.width == 6

    @pytest.mark.parametrize("n", [0, -6])
    def test_bad_size(self, n):
        with pytest.raises(InvalidConfig):
            split_every("000000", n)


class TestHelpers:
    def test_symbol_key_zero_padded(self):
        assert symbol_key("A") == "01000001"
        assert symbol_key(" ") == "00100000"
        assert symbol_key("\x00", 6) == "000000"

    def test_symbol_key_too_wide(self):
        with pytest.raises(KeyNotFound):
            symbol_key("é", 7)
        with pytest.raises(KeyNotFound):
            symbol_key("€")

    def test_symbol_key_needs_one_character(self):
        with pytest.raises(KeyNotFound):
            symbol_key("ab")

    def test_hex_to_char(self):
        assert hex_to_char("41") == "A"
        assert hex_to_char("2801") == "⠁"

    @pytest.mark.parametrize(
        "value", ["ZZ", "", "0x", "110000000", "0x41", " 41 ", "4_1", "+41", "-41", "41\n"]
    )
    def test_hex_to_char_invalid(self, value):
        with pytest.raises(InvalidHex) as exc_info:
            hex_to_char(value)
        assert exc_info.value.value == value


class TestInMemoryTables:
    def test_to_braille(self, memory_locator):
        assert Translator(memory_locator).to_braille("a") == "100000"

    def test_to_braille_missing(self, memory_locator):
        with pytest.raises(KeyNotFound, match="Cannot find 'z'"):
            Translator(memory_locator).to_braille("z")

    def test_to_ascii(self, memory_locator):
        assert Translator(memory_locator).to_ascii("110000") == "b"

    def test_to_unicode_reinterprets_hex(self, memory_locator):
        assert Translator(memory_locator).to_unicode("100000") == "A"

    def test_to_unicode_invalid_hex(self, memory_locator):
        with pytest.raises(InvalidHex):
            Translator(memory_locator).to_unicode("000000")

    def test_string_to_braille(self, memory_locator):
        assert Translator(memory_locator).string_to_braille("ab a") == (
            "100000" "110000" "000000" "100000"
        )

    def test_string_to_ascii(self, memory_locator):
        assert Translator(memory_locator).string_to_ascii("110000000000100000") == "b a"

    def test_string_to_unicode_two_chunks(self, memory_locator):
        assert Translator(memory_locator).string_to_unicode("100000110000") == "AB"

    def test_unknown_chunk(self, memory_locator):
        with pytest.raises(KeyNotFound) as exc_info:
            Translator(memory_locator).string_to_ascii("100000111111")
        assert exc_info.value.key == "111111"

    def test_empty_strings(self, memory_locator):
        translator = Translator(memory_locator)
        assert translator.string_to_braille("") == ""
        assert translator.string_to_ascii("") == ""
        assert translator.string_to_unicode("") == ""

    @pytest.mark.parametrize("method", ["string_to_ascii", "string_to_unicode"])
    def test_incomplete_input_before_any_load(self, method):
        locator = CountingLocator({})
        with pytest.raises(IncompleteInput):
            getattr(Translator(locator), method)("1000001")
        assert locator.opened == []

    def test_table_reloaded_every_call(self, memory_locator):
        locator = CountingLocator(memory_locator.tables)
        translator = Translator(locator)
        translator.string_to_braille("ab")
        translator.string_to_braille("ba")
        assert locator.opened == ["ASCIIToBraille.txt", "ASCIIToBraille.txt"]

    def test_missing_source(self):
        with pytest.raises(SourceUnavailable):
            Translator(MemoryLocator({})).to_braille("a")


class TestPackagedTables:
    """The definition files shipped with the package."""

    @pytest.fixture
    def translator(self):
        return Translator(TableLocator(env={}))

    def test_letters(self, translator):
        assert translator.string_to_braille("abc") == "100000110000100100"

    def test_upper_and_lower_case_share_cells(self, translator):
        assert translator.string_to_braille("Hello") == translator.string_to_braille("hello")

    def test_round_trip_lowercase(self, translator):
        text = "the quick brown fox jumps over the lazy dog"
        assert translator.string_to_ascii(translator.string_to_braille(text)) == text

    def test_punctuation(self, translator):
        assert translator.to_braille(".") == "010011"
        assert translator.to_ascii("010011") == "."

    def test_digits_not_supported(self, translator):
        with pytest.raises(KeyNotFound):
            translator.to_braille("7")

    def test_unicode(self, translator):
        assert translator.to_unicode("100000") == "⠁"
        assert translator.to_unicode("111111") == "⠿"
        assert translator.string_to_unicode("000000101101") == "⠀⠭"

    def test_every_cell_has_a_glyph(self, translator):
        bits = "".join(format(v, "06b") for v in range(64))
        glyphs = translator.string_to_unicode(bits)
        assert len(glyphs) == 64
        assert Translator.unicode_to_braille(glyphs) == bits


class TestUnicodeToBraille:
    def test_dot_order(self):
        assert Translator.unicode_to_braille("⠁") == "100000"
        assert Translator.unicode_to_braille("⠠") == "000001"
        assert Translator.unicode_to_braille("⠀⠿") == "000000111111"

    @pytest.mark.parametrize("glyph", ["a", "⡀", "⣿"])
    def test_outside_six_dot_range(self, glyph):
        with pytest.raises(KeyNotFound):
            Translator.unicode_to_braille(glyph)


class TestMalformedUnicodeTable:
    @pytest.mark.parametrize("stored", ["0x41", "+41", "4_1"])
    def test_python_literal_syntax_rejected(self, stored):
        locator = MemoryLocator({"BrailleToUnicode.txt": [f"100000,{stored}\n"]})
        with pytest.raises(InvalidHex) as exc_info:
            Translator(locator).string_to_unicode("100000")
        assert exc_info.value.value == stored
