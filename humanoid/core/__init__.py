"""
Core layer — word sets, tries and obfuscators the codec is built from.

Everything here is immutable once constructed.
"""

from .wordsets import WordSetStore, normalize_words, trim
from .trie import WordTrie, TrieNode, WordNotFound
from .obfuscators import Obfuscator, IdentityObfuscator, XorObfuscator

__all__ = [
    'WordSetStore', 'normalize_words', 'trim',
    'WordTrie', 'TrieNode', 'WordNotFound',
    'Obfuscator', 'IdentityObfuscator', 'XorObfuscator',
]
