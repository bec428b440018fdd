"""
Loader — Word sets from files and bundled generators

Word set documents map category names to word lists:

    {"colors": ["amber", "azure"], "star-taxonomy": ["andromeda", "bode"]}

Supported formats by extension:
- .json  (parsed with orjson)
- .yaml / .yml  (parsed with yaml.safe_load)

space_id_generator() builds a codec over the bundled space word set.
"""

import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import orjson
import yaml

from .codec import HumanoID
from .errors import ConfigurationError


logger = logging.getLogger(__name__)

SPACE_WORDS_RESOURCE = "space-words.json"
SPACE_CATEGORIES = ["colors", "buzzwords", "life-cycle", "star-taxonomy"]

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


def parse_word_sets(raw: bytes, fmt: str = "json", source: str = "<data>") -> Dict[str, List[str]]:
    """
    Parse a word set document.

    Args:
        raw: Document bytes
        fmt: "json" or "yaml"
        source: Name used in error messages

    Returns:
        Category name -> list of words (not yet normalized)

    Raises:
        ConfigurationError: unparsable document or wrong shape
    """
    try:
        if fmt == "json":
            data = orjson.loads(raw)
        elif fmt == "yaml":
            data = yaml.safe_load(raw)
        else:
            raise ConfigurationError(f"Unsupported word set format '{fmt}'")
    except (orjson.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Invalid word set document {source}: {e}") from e

    return _validate_word_sets(data, source)


def _validate_word_sets(data: Any, source: str) -> Dict[str, List[str]]:
    if not isinstance(data, dict) or not data:
        raise ConfigurationError(f"Word set document {source} must be a non-empty mapping")

    word_sets: Dict[str, List[str]] = {}
    for name, words in data.items():
        if not isinstance(name, str):
            raise ConfigurationError(f"Category `{name}` in {source} must be a string")
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise ConfigurationError(f"Category `{name}` in {source} must be a list of strings")
        word_sets[name] = words
    return word_sets


def load_word_sets(path: Union[str, Path]) -> Dict[str, List[str]]:
    """
    Load a word set file (.json, .yaml or .yml).

    Raises:
        ConfigurationError: missing file, unknown extension, bad content
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        fmt = "json"
    elif suffix in YAML_SUFFIXES:
        fmt = "yaml"
    else:
        raise ConfigurationError(f"Unsupported word set file type: {path.name}")

    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        raise ConfigurationError(f"Word set file not found: {path}") from None

    word_sets = parse_word_sets(raw, fmt, source=str(path))
    logger.debug("Loaded %d categories from %s", len(word_sets), path)
    return word_sets


def load_space_words() -> Dict[str, List[str]]:
    """The bundled space word set."""
    raw = resources.files("humanoid.data").joinpath(SPACE_WORDS_RESOURCE).read_bytes()
    return parse_word_sets(raw, "json", source=SPACE_WORDS_RESOURCE)


def space_id_generator(categories: Optional[Sequence[str]] = None, **options) -> HumanoID:
    """
    Codec over the bundled space word set.

    Args:
        categories: Category order (default: SPACE_CATEGORIES)
        **options: separator, word_format, obfuscator (see HumanoID)
    """
    return HumanoID(
        load_space_words(),
        categories=categories if categories is not None else SPACE_CATEGORIES,
        **options,
    )
