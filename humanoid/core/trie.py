"""
WordTrie — Character trie over one category's word list

Decoding a token never splits it on the separator. Instead each category's
words are loaded into a trie and the decoder asks for the longest known word
at the edge of the remaining text:

    trie = WordTrie.from_words(["nova", "supernova"])
    trie.longest_match("supernova-x")   # (1, 9)

Reverse tries store every word backwards so the same walk finds the longest
word that is a SUFFIX of the text. The codec reads tokens right to left
(least significant word last), so it builds reverse tries.

Nodes are tagged: a children mapping plus an optional word index. The
complete-word marker is a field, never a key in the children mapping.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional, Tuple


class WordNotFound(LookupError):
    """No complete word was passed while walking the trie."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"No known word at the edge of `{text}`")


@dataclass
class TrieNode:
    """One character position in the trie."""
    children: Dict[str, "TrieNode"] = field(default_factory=dict)
    index: Optional[int] = None  # Set when a word ends here


class WordTrie:
    """
    Longest-match lookup of word indices.

    Built once by from_words(); there is no public mutation afterwards,
    so a trie can be shared freely between codecs and threads.
    """

    def __init__(self, reverse: bool = False):
        self._root = TrieNode()
        self._size = 0
        self.reverse = reverse

    @classmethod
    def from_words(cls, words: Iterable[str], reverse: bool = False) -> "WordTrie":
        """
        Build a trie where each word maps to its position in `words`.

        Args:
            words: Normalized, unique words (order defines the index)
            reverse: Store words backwards for suffix matching

        Returns:
            Populated WordTrie
        """
        trie = cls(reverse=reverse)
        for index, word in enumerate(words):
            trie._insert(word, index)
        return trie

    def _insert(self, word: str, index: int) -> None:
        node = self._root
        for character in self._oriented(word):
            child = node.children.get(character)
            if child is None:
                child = TrieNode()
                node.children[character] = child
            node = child
        if node.index is None:
            self._size += 1
        node.index = index

    def _oriented(self, text: str) -> Iterator[str]:
        return reversed(text) if self.reverse else iter(text)

    def longest_match(self, text: str) -> Tuple[int, int]:
        """
        Find the longest known word at the start of `text`.

        For reverse tries the walk starts at the END of `text`, so the result
        is the longest known word that `text` ends with.

        Args:
            text: Remaining input

        Returns:
            (word index, matched length in characters)

        Raises:
            WordNotFound: if no complete word was passed
        """
        node = self._root
        found: Optional[Tuple[int, int]] = None
        depth = 0
        for character in self._oriented(text):
            node = node.children.get(character)
            if node is None:
                break
            depth += 1
            if node.index is not None:
                found = (node.index, depth)

        if found is None:
            raise WordNotFound(text)
        return found

    def longest_suffix(self, text: str) -> Tuple[int, int]:
        """Longest known word that `text` ends with (reverse tries only)."""
        if not self.reverse:
            raise TypeError("longest_suffix requires a trie built with reverse=True")
        return self.longest_match(text)

    def __contains__(self, word: str) -> bool:
        node = self._root
        for character in self._oriented(word):
            node = node.children.get(character)
            if node is None:
                return False
        return node.index is not None

    def __len__(self) -> int:
        return self._size
