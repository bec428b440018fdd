"""
WordSetStore — Validated, normalized word lists per category

A word set maps a category name to its words:

    {"colors": ["Amber", "azure ", "amber"], "star-taxonomy": [...]}

Normalization per category:
1. Trim whitespace (space, tab, newline, carriage return, vertical tab, NUL)
2. Lower-case
3. Drop words that end up empty
4. Deduplicate, keeping first-seen order

The category order is separate from the mapping. It defines significance:
the LAST category is the least significant digit, category 0 the most
significant and the one that repeats once all others are used up.

Callers should pass an explicit order. Without one the mapping's iteration
order is used, which only happens to be stable for insertion-ordered dicts.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..errors import ConfigurationError


logger = logging.getLogger(__name__)

# Characters stripped from both ends of every word and every parsed token
TRIM_CHARS = " \n\r\t\v\x00"


def trim(text: str) -> str:
    """Strip surrounding whitespace and NUL bytes."""
    return text.strip(TRIM_CHARS)


def normalize_words(words: Iterable[str]) -> List[str]:
    """
    Trim, lower-case and deduplicate a word list.

    Idempotent: normalizing an already normalized list returns it unchanged.
    """
    seen = set()
    result = []
    for raw in words:
        if not isinstance(raw, str):
            raise ConfigurationError(f"Word `{raw!r}` is not a string")
        word = trim(raw).lower()
        if word and word not in seen:
            seen.add(word)
            result.append(word)
    return result


class WordSetStore:
    """
    Read-only word lists for the categories a codec uses.

    Only categories named in the order are normalized and kept.
    Positions (0 .. len-1) index into the category order.
    """

    def __init__(self, word_sets: Mapping[str, Sequence[str]],
                 categories: Optional[Sequence[str]] = None):
        if not word_sets:
            raise ConfigurationError("No word sets provided")

        if categories is None:
            categories = list(word_sets.keys())
            logger.warning(
                "No category order given; using word set order %s. "
                "Pass categories explicitly for deterministic tokens.",
                categories,
            )
        elif len(categories) == 0:
            raise ConfigurationError(
                "Categories cannot be empty - omit them to use the word set order instead"
            )

        self._categories: Tuple[str, ...] = tuple(categories)
        self._words: Dict[str, Tuple[str, ...]] = {}

        for name in self._categories:
            if not isinstance(name, str) or not name:
                raise ConfigurationError(f"Category `{name}` is invalid")
            if name in self._words:
                continue
            if name not in word_sets:
                raise ConfigurationError(f"Category `{name}` has no word set")
            words = normalize_words(word_sets[name])
            if not words:
                raise ConfigurationError(f"Category `{name}` has no words")
            self._words[name] = tuple(words)

        if self.radix(0) < 2:
            raise ConfigurationError(
                f"Category `{self._categories[0]}` repeats for large values "
                "and needs at least 2 words"
            )

        logger.debug(
            "Built word sets: %s",
            ", ".join(f"{name}={len(self._words[name])}" for name in self._categories),
        )

    @property
    def categories(self) -> Tuple[str, ...]:
        """Category names, most significant first."""
        return self._categories

    def words(self, category: str) -> Tuple[str, ...]:
        """Normalized words of a category."""
        return self._words[category]

    def category_at(self, position: int) -> str:
        return self._categories[position]

    def word(self, position: int, index: int) -> str:
        """Word `index` of the category at `position` in the order."""
        return self._words[self._categories[position]][index]

    def radix(self, position: int) -> int:
        """Word count of the category at `position` in the order."""
        return len(self._words[self._categories[position]])

    def to_dict(self) -> Dict[str, List[str]]:
        """Plain copy of the normalized word sets, in category order."""
        return {name: list(words) for name, words in self._words.items()}

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, category: str) -> bool:
        return category in self._words
