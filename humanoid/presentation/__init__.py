"""Presentation layer — how words are rendered into tokens."""

from .formatters import WordFormat, format_word

__all__ = ['WordFormat', 'format_word']
