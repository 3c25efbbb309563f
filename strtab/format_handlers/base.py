#!/usr/bin/env python3
"""
Base classes for resource format handlers.

FormatHandler is the abstract base class every resource format implements.
ResourceEntry is the per-file unit a handler reads and writes: one named
string with its text and translatable marking.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class ResourceEntry:
    """
    One string as it appears in a single locale's resource file.

    Attributes:
        name: String name, unique within the file
        text: String content
        translatable: False when the file marks the string translatable="false"
    """
    name: str
    text: str
    translatable: bool = True

    def __post_init__(self):
        """Ensure name is string."""
        self.name = str(self.name)


@dataclass
class PlaceholderPattern:
    """Pattern definition for placeholder detection."""
    name: str
    pattern: str  # Regex pattern

    def find_all(self, text: str) -> list[str]:
        """Find all placeholders matching this pattern."""
        return [m.group(0) for m in re.finditer(self.pattern, text)]


PLACEHOLDER_PATTERNS = {
    'android': PlaceholderPattern('android', r'%\d+\$[sdf]'),         # %1$s, %2$d
    'printf': PlaceholderPattern('printf', r'%[sdf]'),                # %s, %d
}


class FormatHandler(ABC):
    """
    Abstract base class for resource format handlers.

    A handler converts between the raw content of one locale's resource file
    and a list of ResourceEntry objects.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short format name."""
        pass

    @property
    @abstractmethod
    def file_extensions(self) -> list[str]:
        """List of file extensions this handler supports (without dot)."""
        pass

    @property
    def placeholder_patterns(self) -> list[PlaceholderPattern]:
        """
        Placeholder patterns used by this format.

        Default returns empty list (no placeholder checks).
        """
        return []

    @abstractmethod
    def parse(self, content: str, source: Optional[str] = None) -> list[ResourceEntry]:
        """
        Parse raw file content into resource entries.

        Args:
            content: Raw file content as string
            source: Optional file path used in error messages

        Returns:
            List of ResourceEntry objects in file order

        Raises:
            ParseError: If the content is not well-formed
        """
        pass

    @abstractmethod
    def reconstruct(self, entries: list[ResourceEntry]) -> str:
        """
        Serialize resource entries into complete file content.

        Args:
            entries: Entries to write, in output order

        Returns:
            File content as string
        """
        pass

    def extract_placeholders(self, text: str) -> list[str]:
        """
        Extract all placeholders from text using this format's patterns.

        Returns:
            Placeholder strings found (deduplicated, order preserved)
        """
        placeholders = []
        for pattern in self.placeholder_patterns:
            placeholders.extend(pattern.find_all(text))
        return list(dict.fromkeys(placeholders))

    def validate_placeholders(self, source: str, translation: str) -> list[str]:
        """
        Check that every source placeholder also appears in a translation.

        Args:
            source: Default locale text
            translation: Translated text

        Returns:
            List of missing placeholder messages
        """
        missing = set(self.extract_placeholders(source)) - set(self.extract_placeholders(translation))
        return [f"Missing placeholder in translation: {p}" for p in sorted(missing)]


class FormatRegistry:
    """Registry of available resource format handlers."""

    _handlers: dict[str, type[FormatHandler]] = {}
    _extension_map: dict[str, str] = {}  # extension -> handler name

    @classmethod
    def register(cls, handler_class: type[FormatHandler]) -> None:
        """Register a format handler class."""
        handler = handler_class()
        cls._handlers[handler.name.lower()] = handler_class
        for ext in handler.file_extensions:
            cls._extension_map[ext.lower()] = handler.name.lower()

    @classmethod
    def get_handler(cls, name: str) -> FormatHandler:
        """Get handler instance by name."""
        name_lower = name.lower()
        if name_lower not in cls._handlers:
            available = ', '.join(cls._handlers.keys())
            raise ValueError(f"Unknown format: {name}. Available: {available}")
        return cls._handlers[name_lower]()

    @classmethod
    def get_handler_for_extension(cls, extension: str) -> FormatHandler:
        """Get handler instance by file extension."""
        ext = extension.lower().lstrip('.')
        if ext not in cls._extension_map:
            available = ', '.join(cls._extension_map.keys())
            raise ValueError(f"Unknown extension: .{ext}. Supported: {available}")
        return cls.get_handler(cls._extension_map[ext])
