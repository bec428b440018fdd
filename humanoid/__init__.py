"""
HumanoID — Human-readable identifiers

Turns integer IDs into short word tokens and back.

Usage:
    from humanoid import space_id_generator

    codec = space_id_generator()
    codec.create(23)               # "eris-pinwheel"
    codec.parse("eris-pinwheel")   # 23

    codec = HumanoID(word_sets, categories=["colors", "animals"],
                     separator="_", word_format="upper_first",
                     obfuscator=XorObfuscator(0x5A17))
"""

__version__ = "0.1.0"

# Core layer
from .core.wordsets import WordSetStore, normalize_words
from .core.trie import WordTrie, TrieNode
from .core.obfuscators import Obfuscator, IdentityObfuscator, XorObfuscator

# Presentation layer
from .presentation.formatters import WordFormat, format_word

# Codec
from .codec import HumanoID, HumanoIDProtocol
from .errors import HumanoIDError, ConfigurationError, InvalidInputError, DecodeError

# Config and loading
from .config import CodecConfig, load_config
from .loader import load_word_sets, parse_word_sets, space_id_generator, SPACE_CATEGORIES

__all__ = [
    # Core
    'WordSetStore', 'normalize_words',
    'WordTrie', 'TrieNode',
    'Obfuscator', 'IdentityObfuscator', 'XorObfuscator',
    # Presentation
    'WordFormat', 'format_word',
    # Codec
    'HumanoID', 'HumanoIDProtocol',
    'HumanoIDError', 'ConfigurationError', 'InvalidInputError', 'DecodeError',
    # Config and loading
    'CodecConfig', 'load_config',
    'load_word_sets', 'parse_word_sets', 'space_id_generator', 'SPACE_CATEGORIES',
]
