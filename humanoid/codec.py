"""
HumanoID — Reversible integer <-> word token codec

Turns integer IDs into memorable, URL-safe tokens and back:

    codec = HumanoID(word_sets, categories=["colors", "buzzwords",
                                            "life-cycle", "star-taxonomy"])
    codec.create(23)               # "eris-pinwheel"
    codec.parse("eris-pinwheel")   # 23

Mixed radix: each category is one digit whose base is its word count.
The last category is the least significant digit. Category 0 is the most
significant and repeats as often as needed, so any non-negative integer
encodes.

create():  id -> obfuscator.forward -> digits (last category first)
           -> words -> casing -> reversed, joined with the separator
parse():   token -> words matched from the right (reverse tries)
           -> digits -> obfuscator.inverse -> id

The codec holds only immutable state after construction; one instance can
serve any number of concurrent create/parse calls.
"""

import logging
from typing import Dict, List, Mapping, Optional, Protocol, Sequence, Union

from rapidfuzz import process

from .config import DEFAULT_SEPARATOR, CodecConfig
from .core.obfuscators import IdentityObfuscator, Obfuscator
from .core.trie import WordNotFound, WordTrie
from .core.wordsets import WordSetStore, trim
from .errors import ConfigurationError, DecodeError, InvalidInputError
from .presentation.formatters import WordFormat, format_word


logger = logging.getLogger(__name__)

# Close words offered in DecodeError
SUGGESTION_LIMIT = 3
SUGGESTION_CUTOFF = 60


class HumanoIDProtocol(Protocol):
    """What callers of a codec rely on."""

    def create(self, id: int) -> str:
        ...

    def parse(self, text: str) -> int:
        ...


class HumanoID:
    """
    Word-based identifier codec.

    Args:
        word_sets: Category name -> raw words (normalized on construction)
        categories: Category order, most significant first. Omit to use
            the mapping's order (logged as a warning; pass it explicitly
            for deterministic tokens)
        separator: Joins words in a token (default "-")
        word_format: Casing applied by create() (WordFormat or its name)
        obfuscator: forward/inverse transform (default: identity)

    Raises:
        ConfigurationError: invalid word sets, order, format or separator
    """

    def __init__(self,
                 word_sets: Mapping[str, Sequence[str]],
                 categories: Optional[Sequence[str]] = None,
                 separator: str = DEFAULT_SEPARATOR,
                 word_format: Union[WordFormat, str, None] = WordFormat.NONE,
                 obfuscator: Optional[Obfuscator] = None):
        if not isinstance(separator, str):
            raise ConfigurationError(f"Separator must be a string, got {separator!r}")
        try:
            self._format = WordFormat.parse(word_format)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        self._store = WordSetStore(word_sets, categories)
        self._separator = separator
        self._obfuscator = obfuscator if obfuscator is not None else IdentityObfuscator()

        # Tokens are read right to left, so tries match suffixes
        self._tries: Dict[str, WordTrie] = {
            name: WordTrie.from_words(self._store.words(name), reverse=True)
            for name in set(self._store.categories)
        }

        logger.debug(
            "HumanoID ready: categories=%s separator=%r format=%s obfuscator=%s",
            list(self._store.categories), separator, self._format.value,
            type(self._obfuscator).__name__,
        )

    @classmethod
    def from_config(cls, word_sets: Mapping[str, Sequence[str]],
                    config: CodecConfig) -> "HumanoID":
        """Build a codec from a CodecConfig (see humanoid.config)."""
        error = config.validate()
        if error:
            raise ConfigurationError(error)
        return cls(
            word_sets,
            categories=config.categories,
            separator=config.separator,
            word_format=config.word_format,
            obfuscator=config.build_obfuscator(),
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def categories(self) -> List[str]:
        return list(self._store.categories)

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def word_format(self) -> WordFormat:
        return self._format

    @property
    def obfuscator(self) -> Obfuscator:
        return self._obfuscator

    @property
    def word_sets(self) -> WordSetStore:
        return self._store

    # =========================================================================
    # Encoding
    # =========================================================================

    def create(self, id: int) -> str:
        """
        Encode a non-negative integer as a word token.

        Args:
            id: Integer to encode (0 gives a single word)

        Returns:
            Token such as "eris-pinwheel"

        Raises:
            InvalidInputError: if id is negative or not an integer
        """
        if isinstance(id, bool) or not isinstance(id, int):
            raise InvalidInputError(f"The input ID must be an integer, got {id!r}")
        if id < 0:
            raise InvalidInputError("The input ID must be a positive integer")

        value = self._obfuscator.forward(id)
        position = len(self._store) - 1
        words = []

        while True:
            radix = self._store.radix(position)
            words.append(format_word(self._store.word(position, value % radix), self._format))
            value //= radix
            # Walk toward category 0, then keep repeating it
            position = max(position - 1, 0)
            if value <= 0:
                break

        words.reverse()
        return self._separator.join(words)

    # =========================================================================
    # Decoding
    # =========================================================================

    def parse(self, text: str) -> int:
        """
        Decode a token produced by create().

        Case and surrounding whitespace are ignored.

        Args:
            text: Token such as "Eris-Pinwheel"

        Returns:
            The original integer

        Raises:
            InvalidInputError: if the token is empty after trimming
            DecodeError: if part of the token matches no expected word
        """
        if not isinstance(text, str):
            raise InvalidInputError(f"Token must be a string, got {text!r}")
        remaining = trim(text).lower()
        if not remaining:
            raise InvalidInputError("No text specified")

        separator = self._separator.lower()
        position = len(self._store) - 1
        step = 1
        result = 0

        while remaining:
            category = self._store.category_at(position)
            try:
                index, length = self._tries[category].longest_suffix(remaining)
            except WordNotFound:
                raise self._decode_error(remaining, category) from None

            result += index * step
            step *= self._store.radix(position)
            remaining = remaining[:-length]

            if remaining:
                if separator:
                    if not remaining.endswith(separator):
                        raise self._decode_error(remaining + self._store.word(position, index), category)
                    remaining = remaining[:-len(separator)]
                    if not remaining:
                        raise DecodeError(separator, category)

            position = max(position - 1, 0)

        return self._obfuscator.inverse(result)

    def _last_segment(self, text: str) -> str:
        separator = self._separator.lower()
        if separator and separator in text:
            return text.rsplit(separator, 1)[-1]
        return text

    def _decode_error(self, text: str, category: str) -> DecodeError:
        """DecodeError for the segment at the end of `text`, with close words."""
        fragment = self._last_segment(text)
        matches = process.extract(
            fragment,
            self._store.words(category),
            limit=SUGGESTION_LIMIT,
            score_cutoff=SUGGESTION_CUTOFF,
        )
        return DecodeError(fragment, category, [match[0] for match in matches])

    def __repr__(self) -> str:
        return (f"HumanoID(categories={list(self._store.categories)!r}, "
                f"separator={self._separator!r}, word_format={self._format.value!r})")
