"""
Obfuscators — Reversible integer transforms applied around encoding

An obfuscator is any object with a forward/inverse pair where
inverse(forward(x)) == x for every non-negative x. The codec calls
forward() before encoding and inverse() after decoding and never checks
which kind it holds.

This is NOT encryption. XOR with a salt only keeps sequential IDs from
producing visibly sequential tokens.

Both sides of a round-trip must use the same obfuscator (same salt or key).
"""

from dataclasses import dataclass
from typing import Protocol

import xxhash

from ..errors import ConfigurationError


class Obfuscator(Protocol):
    """Capability: symmetric integer transform."""

    def forward(self, value: int) -> int:
        ...

    def inverse(self, value: int) -> int:
        ...


@dataclass(frozen=True)
class IdentityObfuscator:
    """Leaves IDs untouched (the default)."""

    def forward(self, value: int) -> int:
        return value

    def inverse(self, value: int) -> int:
        return value


@dataclass(frozen=True)
class XorObfuscator:
    """
    XOR with a fixed salt. XOR is its own inverse, so forward == inverse.

    Non-negative input with a non-negative salt stays non-negative.
    """
    salt: int

    def __post_init__(self):
        if isinstance(self.salt, bool) or not isinstance(self.salt, int):
            raise ConfigurationError(f"Salt must be an integer, got {self.salt!r}")
        if self.salt < 0:
            raise ConfigurationError(f"Salt must be non-negative, got {self.salt}")

    @classmethod
    def from_key(cls, key: str) -> "XorObfuscator":
        """
        Derive the salt from a text key.

        Uses xxhash (xxh32) so the same key always yields the same salt,
        on every machine and Python version.
        """
        if not key:
            raise ConfigurationError("Obfuscation key cannot be empty")
        return cls(xxhash.xxh32(key.encode("utf-8")).intdigest())

    def forward(self, value: int) -> int:
        return value ^ self.salt

    def inverse(self, value: int) -> int:
        return value ^ self.salt
