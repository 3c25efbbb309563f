#!/usr/bin/env python3
"""
Format handlers for resource files.

Supported formats:
- Android XML: Android strings.xml
"""

from .base import (
    FormatHandler,
    FormatRegistry,
    PlaceholderPattern,
    ResourceEntry,
    PLACEHOLDER_PATTERNS,
)
from .android_xml import AndroidXmlHandler

FormatRegistry.register(AndroidXmlHandler)

__all__ = [
    'FormatHandler',
    'FormatRegistry',
    'PlaceholderPattern',
    'ResourceEntry',
    'PLACEHOLDER_PATTERNS',
    'AndroidXmlHandler',
]
