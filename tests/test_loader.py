"""
Tests for loader — word set files and the bundled space generator
"""

import pytest

from humanoid.codec import HumanoID
from humanoid.errors import ConfigurationError
from humanoid.loader import (
    SPACE_CATEGORIES,
    load_space_words,
    load_word_sets,
    parse_word_sets,
    space_id_generator,
)
from humanoid.presentation.formatters import WordFormat


class TestLoadWordSets:
    """JSON and YAML word set files."""

    def test_json(self, tmp_path):
        path = tmp_path / "words.json"
        path.write_text('{"colors": ["Red", "blue"], "animals": ["cat", "dog"]}')

        word_sets = load_word_sets(path)

        assert word_sets == {"colors": ["Red", "blue"], "animals": ["cat", "dog"]}
        assert list(word_sets) == ["colors", "animals"]

    @pytest.mark.parametrize("name", ["words.yaml", "words.YML"])
    def test_yaml(self, tmp_path, name):
        path = tmp_path / name
        path.write_text("colors:\n  - red\n  - blue\nanimals: [cat, dog]\n")

        assert load_word_sets(path) == {"colors": ["red", "blue"], "animals": ["cat", "dog"]}

    def test_loaded_sets_build_a_codec(self, tmp_path):
        path = tmp_path / "words.json"
        path.write_text('{"colors": ["red", "blue"], "animals": ["cat", "dog", "emu"]}')

        codec = HumanoID(load_word_sets(path), categories=["colors", "animals"])

        assert codec.create(3) == "blue-cat"
        assert codec.parse("blue-cat") == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_word_sets(tmp_path / "nope.json")

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("red\nblue\n")
        with pytest.raises(ConfigurationError, match="Unsupported"):
            load_word_sets(path)


class TestParseWordSets:
    """Document validation."""

    def test_invalid_json(self):
        with pytest.raises(ConfigurationError, match="Invalid word set document"):
            parse_word_sets(b"{not json", "json")

    def test_invalid_yaml(self):
        with pytest.raises(ConfigurationError, match="Invalid word set document"):
            parse_word_sets(b"colors: [unclosed", "yaml")

    def test_top_level_list(self):
        with pytest.raises(ConfigurationError, match="non-empty mapping"):
            parse_word_sets(b'["red", "blue"]', "json")

    def test_empty_document(self):
        with pytest.raises(ConfigurationError, match="non-empty mapping"):
            parse_word_sets(b"{}", "json")

    def test_words_must_be_strings(self):
        with pytest.raises(ConfigurationError, match="list of strings"):
            parse_word_sets(b'{"numbers": [1, 2]}', "json")

    def test_unknown_format(self):
        with pytest.raises(ConfigurationError, match="Unsupported"):
            parse_word_sets(b"{}", "toml")


class TestSpaceGenerator:
    """Bundled space word set."""

    def test_bundled_categories(self):
        assert list(load_space_words()) == SPACE_CATEGORIES

    def test_reference_tokens(self):
        codec = space_id_generator()
        assert codec.categories == SPACE_CATEGORIES
        assert codec.create(0) == "andromeda"
        assert codec.create(1) == "backward"
        assert codec.create(2) == "bode"
        assert codec.create(3) == "cigar"
        assert codec.create(23) == "eris-pinwheel"
        assert codec.parse("eris-pinwheel") == 23

    def test_options_pass_through(self):
        codec = space_id_generator(separator=" ", word_format=WordFormat.UPPER_FIRST)
        assert codec.create(23) == "Eris Pinwheel"
        assert codec.parse("Eris Pinwheel") == 23

    def test_custom_order(self):
        codec = space_id_generator(categories=["star-taxonomy", "colors"])
        assert codec.create(0) == "amber"
