"""
Formatters — Casing applied to words at render time

Words are stored normalized (trimmed, lower-case). Casing is applied only
when a token is rendered by create() and is never stored; parse() folds
case back, so every mode round-trips.

Modes:
- NONE: pass through
- UPPER_FIRST: first character upper-cased, rest untouched
- LOWER_FIRST: first character lower-cased, rest untouched
- UPPER: whole word upper-cased
- LOWER: whole word lower-cased
"""

from enum import Enum
from typing import Union


class WordFormat(Enum):
    """How create() cases each word."""
    NONE = "none"
    UPPER_FIRST = "upper_first"
    LOWER_FIRST = "lower_first"
    UPPER = "upper"
    LOWER = "lower"

    @classmethod
    def parse(cls, value: Union["WordFormat", str, None]) -> "WordFormat":
        """
        Accept a member, or a name/value in any case with '-' or '_'.

        "Upper-First", "UPPER_FIRST" and "upper_first" all give UPPER_FIRST.
        None gives NONE.
        """
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "_")
        for member in cls:
            if member.value == key:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown word format '{value}'. Valid: {valid}")


def format_word(word: str, mode: WordFormat = WordFormat.NONE) -> str:
    """Apply a casing mode to one word. Each mode is idempotent."""
    if not word:
        return word
    if mode is WordFormat.UPPER_FIRST:
        return word[0].upper() + word[1:]
    if mode is WordFormat.LOWER_FIRST:
        return word[0].lower() + word[1:]
    if mode is WordFormat.UPPER:
        return word.upper()
    if mode is WordFormat.LOWER:
        return word.lower()
    return word
