"""
Errors — Exception hierarchy for the humanoid codec

Every failure is raised to the caller, never swallowed or retried:
- ConfigurationError: bad word sets or options at construction time
- InvalidInputError: negative ID on create, empty token on parse
- DecodeError: token text that no known word matches

All inherit from ValueError so callers validating user input can catch
one familiar type.
"""

from typing import List, Optional, Sequence


class HumanoIDError(Exception):
    """Base class for all humanoid errors."""


class ConfigurationError(HumanoIDError, ValueError):
    """Raised when a codec cannot be built from the supplied word sets or options."""


class InvalidInputError(HumanoIDError, ValueError):
    """Raised when create/parse receive input outside their domain."""


class DecodeError(HumanoIDError, ValueError):
    """
    Raised when part of a token matches no word of the expected category.

    Carries the unmatched fragment, the category it was checked against,
    and close words from that category (may be empty).
    """

    def __init__(self, fragment: str, category: Optional[str] = None,
                 suggestions: Optional[Sequence[str]] = None):
        self.fragment = fragment
        self.category = category
        self.suggestions: List[str] = list(suggestions or [])
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        message = f"Failed to lookup `{self.fragment}`"
        if self.category:
            message += f" in category '{self.category}'"
        if self.suggestions:
            message += f" (did you mean: {', '.join(self.suggestions)}?)"
        return message
