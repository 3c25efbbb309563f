#!/usr/bin/env python3
"""
Error types and exit codes for strtab.

Every failure the engine reports derives from StrtabError so the CLI can
turn it into a single terminal error object and exit code.
"""

from typing import Optional


class StrtabError(Exception):
    """Base exception for strtab errors."""

    exit_code = 1

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(StrtabError):
    """Invalid or unreadable project configuration."""

    exit_code = 2


class PathError(StrtabError):
    """Target is not a resource directory (or lacks the default strings file)."""

    exit_code = 3


class ParseError(StrtabError):
    """Resource file content is not well-formed."""

    exit_code = 4

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class FormatError(StrtabError):
    """CSV content does not follow the exchange format contract."""

    exit_code = 5


class UnknownKeyError(StrtabError):
    """CSV row references a string name absent from the loaded resources."""

    exit_code = 6

    def __init__(self, key: str, line: Optional[int] = None):
        self.key = key
        self.line = line
        where = f" (line {line})" if line is not None else ""
        super().__init__(
            f"value with name '{key}' from csv{where} is not found in resources file"
        )


class FileAccessError(StrtabError):
    """Underlying open/read/write failure on the file system."""

    exit_code = 7

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class WriteError(StrtabError):
    """Failure persisting one locale's resource file."""

    exit_code = 8

    def __init__(self, locale: str, path: str, reason: str):
        self.locale = locale
        self.path = path
        super().__init__(f"cannot write strings for locale '{locale}' to {path}: {reason}")


# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
