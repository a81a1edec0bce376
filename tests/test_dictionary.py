"""Tests for the word list and membership checks."""

import pytest

from src.engine import Dictionary, DictionaryLoadError, load_dictionary


class TestDictionary:
    """Test dictionary membership."""

    def test_contains_word(self):
        d = Dictionary(["CAT", "DOG"])
        assert d.is_valid_word("CAT")
        assert "DOG" in d

    def test_reverse_is_accepted(self):
        """A word read backwards is the same word."""
        d = Dictionary(["CAT"])
        assert d.is_valid_word("TAC")

    def test_reverse_symmetry(self):
        d = Dictionary(["CAT", "STOP", "LEVEL", "A"])
        for word in ["CAT", "STOP", "LEVEL", "A", "XYZ", "ACT"]:
            assert d.is_valid_word(word) == d.is_valid_word(word[::-1])

    def test_unknown_word(self):
        d = Dictionary(["CAT"])
        assert not d.is_valid_word("ACT")

    def test_words_are_normalized(self):
        """Words are stripped and upper-cased; blanks are dropped."""
        d = Dictionary([" cat ", "", "   ", "Dog\r"])
        assert len(d) == 2
        assert sorted(d) == ["CAT", "DOG"]

    def test_lookup_is_case_insensitive(self):
        d = Dictionary(["CAT"])
        assert d.is_valid_word("cat")

    def test_max_length(self):
        assert Dictionary(["A", "ABCDE", "ABC"]).max_length == 5
        assert Dictionary([]).max_length == 0

    def test_from_text_skips_blank_lines(self):
        d = Dictionary.from_text("CAT\n\nDOG\n   \nBIRD\n")
        assert len(d) == 3


class TestLoadDictionary:
    """Test loading word lists from disk."""

    def test_load_word_list(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("CAT\nDOG\n\nBIRD\n", encoding="utf-8")
        d = load_dictionary(path)
        assert len(d) == 3
        assert d.is_valid_word("GOD")

    def test_missing_file(self, tmp_path):
        with pytest.raises(DictionaryLoadError):
            load_dictionary(tmp_path / "missing.txt")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("\n\n", encoding="utf-8")
        with pytest.raises(DictionaryLoadError):
            load_dictionary(path)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(DictionaryLoadError):
            load_dictionary(path)
