#!/usr/bin/env python3
"""
Android XML strings.xml format handler.

Handles parsing and reconstruction of the flat <string> entries of an
Android resource file.
"""

import re
from typing import Optional
from xml.etree import ElementTree as ET

from ..errors import ParseError
from .base import FormatHandler, PlaceholderPattern, ResourceEntry, PLACEHOLDER_PATTERNS

INDENT = '  '

# Control characters XML 1.0 does not allow (tab, newline and CR are allowed)
_INVALID_XML_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f]')


class AndroidXmlHandler(FormatHandler):
    """
    Handler for Android strings.xml resource files.

    Android XML structure:
    ```xml
    <?xml version="1.0" encoding="utf-8"?>
    <resources>
      <string name="app_name" translatable="false">My App</string>
      <string name="welcome">Welcome, %1$s!</string>
    </resources>
    ```

    Text is kept exactly as the XML parser returns it; Android backslash
    escapes (\\' and \\") are not interpreted, so they survive a trip
    through the CSV unchanged.
    """

    @property
    def name(self) -> str:
        return "android"

    @property
    def file_extensions(self) -> list[str]:
        return ["xml"]

    @property
    def placeholder_patterns(self) -> list[PlaceholderPattern]:
        """Android uses numbered printf-style placeholders."""
        return [
            PLACEHOLDER_PATTERNS['android'],  # %1$s, %2$d
            PLACEHOLDER_PATTERNS['printf'],   # %s, %d
        ]

    def parse(self, content: str, source: Optional[str] = None) -> list[ResourceEntry]:
        """
        Parse Android XML content into resource entries.

        Only direct <string> children of <resources> are read.

        Args:
            content: Raw XML file content
            source: Optional file path used in error messages

        Returns:
            List of ResourceEntry objects in file order
        """
        where = source or '<string>'
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise ParseError(f"Invalid XML in {where}: {e}", path=source) from e

        if root.tag != 'resources':
            raise ParseError(
                f"Invalid resources file {where}: root element must be 'resources', found '{root.tag}'",
                path=source,
            )

        entries = []
        for elem in root.findall('string'):
            name = elem.get('name')
            if not name:
                raise ParseError(f"Invalid resources file {where}: <string> without a name attribute", path=source)
            entries.append(ResourceEntry(
                name=name,
                text=self._get_element_text(elem),
                translatable=elem.get('translatable') != 'false',
            ))

        return entries

    def _get_element_text(self, elem: ET.Element) -> str:
        """Extract text content from element, including inline markup like <xliff:g>."""
        return ''.join(elem.itertext())

    def _escape_xml(self, text: str, quote: bool = False) -> str:
        """
        Escape special XML characters.

        Carriage returns become character references so a reader does not
        fold them into newlines. Characters XML 1.0 does not allow are
        replaced with U+FFFD. With quote set, the result is safe inside a
        double-quoted attribute, where whitespace is normalized on read.
        """
        text = _INVALID_XML_CHARS.sub('\ufffd', text)
        text = text.replace('&', '&amp;')
        text = text.replace('<', '&lt;')
        text = text.replace('>', '&gt;')
        text = text.replace('\r', '&#13;')
        if quote:
            text = text.replace('"', '&quot;')
            text = text.replace('\n', '&#10;')
            text = text.replace('\t', '&#9;')
        return text

    def reconstruct(self, entries: list[ResourceEntry]) -> str:
        """
        Reconstruct Android XML from entries.

        Entries marked non-translatable keep their translatable="false"
        attribute, so parse(reconstruct(entries)) returns the same entries.
        ResourceWriter only passes translatable entries.

        Args:
            entries: Entries to write, in output order

        Returns:
            Complete XML file content
        """
        lines = ['<?xml version="1.0" encoding="utf-8"?>', '<resources>']

        for entry in entries:
            name = self._escape_xml(entry.name, quote=True)
            text = self._escape_xml(entry.text)
            if entry.translatable:
                lines.append(f'{INDENT}<string name="{name}">{text}</string>')
            else:
                lines.append(f'{INDENT}<string name="{name}" translatable="false">{text}</string>')

        lines.append('</resources>')
        return '\n'.join(lines) + '\n'
