"""
Shared pytest fixtures for the humanoid test suite.

Usage in tests:
    def test_something(space_codec):
        assert space_codec.create(0) == "andromeda"

    def test_custom(make_codec):
        codec = make_codec(separator="_", word_format="upper")
"""

import pytest

from humanoid.codec import HumanoID
from humanoid.loader import SPACE_CATEGORIES, load_space_words


@pytest.fixture
def space_words():
    """Raw bundled space word sets (category -> words)."""
    return load_space_words()


@pytest.fixture
def space_codec(space_words):
    """Reference codec: space words, '-' separator, identity, no casing."""
    return HumanoID(space_words, categories=SPACE_CATEGORIES)


@pytest.fixture
def make_codec(space_words):
    """
    Factory for space-word codecs with custom options.

    Example:
        def test_upper(make_codec):
            codec = make_codec(word_format="upper")
    """
    def _make(**options):
        options.setdefault("categories", SPACE_CATEGORIES)
        return HumanoID(space_words, **options)
    return _make
