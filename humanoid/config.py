"""
Configuration — Codec settings from files, environment and defaults

Config hierarchy (highest to lowest priority):
  1. Config file (YAML, passed to load_config)
  2. Environment variables
  3. Defaults

Environment variables:
- HUMANOID_SEPARATOR: word separator (default: "-")
- HUMANOID_FORMAT: none | upper_first | lower_first | upper | lower
- HUMANOID_CATEGORIES: comma separated category order
- HUMANOID_SALT: integer salt for XOR obfuscation
- HUMANOID_KEY: text key, hashed into a salt

Salt and key are alternatives; setting both is a validation error.
Encoding and decoding sides must share the same salt/key.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .core.obfuscators import IdentityObfuscator, Obfuscator, XorObfuscator
from .errors import ConfigurationError
from .presentation.formatters import WordFormat


DEFAULT_SEPARATOR = "-"  # Shared with HumanoID
DEFAULT_FORMAT = WordFormat.NONE.value

ENV_PREFIX = "HUMANOID_"


@dataclass
class CodecConfig:
    """Options for building a HumanoID codec."""
    separator: str = DEFAULT_SEPARATOR
    word_format: str = DEFAULT_FORMAT
    categories: Optional[List[str]] = None  # None = word set order
    salt: Optional[int] = None
    key: Optional[str] = None

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if not isinstance(self.separator, str):
            return f"Separator must be a string, got {self.separator!r}"

        try:
            WordFormat.parse(self.word_format)
        except ValueError as e:
            return str(e)

        if self.categories is not None:
            if not isinstance(self.categories, (list, tuple)):
                return f"Categories must be a list of names, got {self.categories!r}"
            if not self.categories:
                return "Categories cannot be empty"
            for name in self.categories:
                if not isinstance(name, str) or not name:
                    return f"Category `{name}` is invalid"

        if self.salt is not None and self.key is not None:
            return "Set either salt or key, not both"
        if self.salt is not None:
            if isinstance(self.salt, bool) or not isinstance(self.salt, int) or self.salt < 0:
                return f"Salt must be a non-negative integer, got {self.salt!r}"
        if self.key is not None and not self.key:
            return "Key cannot be empty"

        return None

    def build_obfuscator(self) -> Obfuscator:
        """Obfuscator described by salt/key (identity when neither is set)."""
        if self.salt is not None:
            return XorObfuscator(self.salt)
        if self.key is not None:
            return XorObfuscator.from_key(self.key)
        return IdentityObfuscator()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "separator": self.separator,
            "word_format": self.word_format,
            "categories": list(self.categories) if self.categories is not None else None,
            "salt": self.salt,
            "key": self.key,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CodecConfig":
        """Create from dictionary. Missing keys keep their defaults."""
        categories = data.get("categories")
        return cls(
            separator=data.get("separator", DEFAULT_SEPARATOR),
            word_format=data.get("word_format", data.get("format", DEFAULT_FORMAT)),
            categories=list(categories) if isinstance(categories, (list, tuple)) else categories,
            salt=data.get("salt"),
            key=data.get("key"),
        )

    @classmethod
    def from_env(cls) -> "CodecConfig":
        """Load configuration from HUMANOID_* environment variables."""
        return cls.from_dict(_env_overrides())


def load_config(path: Optional[Union[str, Path]] = None) -> CodecConfig:
    """
    Load configuration with hierarchy: file > environment > defaults.

    Args:
        path: Optional YAML file. A missing file is an error.

    Raises:
        ConfigurationError: unreadable file, wrong shape, or invalid values
    """
    data = _env_overrides()

    if path is not None:
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")
        try:
            file_data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(file_data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        # Obfuscation settings from the file replace the environment's as a pair
        if file_data.get("salt") is not None or file_data.get("key") is not None:
            data.pop("salt", None)
            data.pop("key", None)
        # "format" is accepted in files; store it under the key the environment uses
        if "format" in file_data:
            fmt = file_data.pop("format")
            file_data.setdefault("word_format", fmt)
        data.update({k: v for k, v in file_data.items() if v is not None})

    config = CodecConfig.from_dict(data)
    error = config.validate()
    if error:
        raise ConfigurationError(error)
    return config


def _env_overrides() -> Dict[str, Any]:
    """Settings present in the environment, keyed like CodecConfig fields."""
    data: Dict[str, Any] = {}

    separator = os.environ.get(ENV_PREFIX + "SEPARATOR")
    if separator is not None:
        data["separator"] = separator

    word_format = os.environ.get(ENV_PREFIX + "FORMAT", "").strip()
    if word_format:
        data["word_format"] = word_format

    categories = os.environ.get(ENV_PREFIX + "CATEGORIES", "").strip()
    if categories:
        data["categories"] = [c.strip() for c in categories.split(",") if c.strip()]

    salt = os.environ.get(ENV_PREFIX + "SALT", "").strip()
    if salt:
        try:
            data["salt"] = int(salt, 0)
        except ValueError:
            raise ConfigurationError(f"{ENV_PREFIX}SALT must be an integer, got {salt!r}") from None

    key = os.environ.get(ENV_PREFIX + "KEY")
    if key:
        data["key"] = key

    return data
