#!/usr/bin/env python3
"""
Reading and writing per-locale resource files.

ResourceLoader merges every registered locale's strings file into one
StringTable. ResourceWriter writes the translatable part of the table back
out, one file per non-default locale.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .config import ProjectConfig
from .errors import FileAccessError, PathError, WriteError
from .format_handlers import FormatHandler, FormatRegistry, ResourceEntry
from .locales import LocaleRegistry
from .string_table import StringTable

logger = logging.getLogger(__name__)


def locale_file(res_dir: Union[str, Path], locale: str, config: ProjectConfig) -> Path:
    """Path of a locale's strings file: values/strings.xml or values-<locale>/strings.xml."""
    if locale == config.default_locale:
        return Path(res_dir) / config.values_dir / config.strings_file
    return Path(res_dir) / f"{config.values_prefix}{locale}" / config.strings_file


def check_resources_dir(path: Union[str, Path], config: ProjectConfig) -> None:
    """
    Verify that path is a resource directory.

    Raises:
        PathError: If path is not a directory or lacks the default strings file
    """
    p = Path(path)
    if not p.exists():
        raise PathError(f"{p} does not exist")
    if not p.is_dir():
        raise PathError(f"{p} is not a dir")
    strings = locale_file(p, config.default_locale, config)
    if not strings.is_file():
        raise PathError(f"{p} is not a resources dir: {strings} not found")


def resolve_resources_dir(project_dir: Union[str, Path], config: ProjectConfig) -> Path:
    """
    Find the resource directory for a project path.

    `<project>/<resources_subdir>` (app/src/main/res) is tried first, then
    the project path itself.

    Raises:
        PathError: If neither candidate is a resource directory
    """
    project = Path(project_dir)
    if config.resources_subdir:
        candidate = project / config.resources_subdir
        try:
            check_resources_dir(candidate, config)
            return candidate
        except PathError as e:
            logger.debug("Not using %s: %s", candidate, e)
    check_resources_dir(project, config)
    return project


@dataclass
class WrittenFile:
    """Result of writing one locale's strings file."""
    locale: str
    path: str
    entries: int
    fallback: int
    backup: Optional[str] = None


class ResourceLoader:
    """Builds a StringTable from the resource files of all registered locales."""

    def __init__(self, res_dir: Union[str, Path], config: Optional[ProjectConfig] = None,
                 handler: Optional[FormatHandler] = None):
        self.res_dir = Path(res_dir)
        self.config = config or ProjectConfig()
        self.handler = handler or FormatRegistry.get_handler_for_extension(Path(self.config.strings_file).suffix)

    def read_entries(self, locale: str) -> Optional[list[ResourceEntry]]:
        """
        Parse one locale's strings file.

        Returns:
            Entries, or None when the file does not exist

        Raises:
            ParseError: If the file is not well-formed
            FileAccessError: If the file exists but cannot be read
        """
        path = locale_file(self.res_dir, locale, self.config)
        try:
            content = path.read_text(encoding="utf-8-sig")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(f"Cannot read {path}: {e}", path=str(path)) from e
        return self.handler.parse(content, source=str(path))

    def load(self, registry: LocaleRegistry) -> StringTable:
        """
        Load all locales in registry order into a new table.

        Args:
            registry: Locales to load; the default locale comes first

        Returns:
            Merged StringTable

        Raises:
            PathError: If the default locale's file is missing
        """
        table = StringTable()
        for locale in registry:
            entries = self.read_entries(locale)
            if entries is None:
                if locale == registry.default:
                    path = locale_file(self.res_dir, locale, self.config)
                    raise PathError(f"{self.res_dir} is not a resources dir: {path} not found")
                logger.info("No strings file for locale %s, starting empty", locale)
                continue

            for entry in entries:
                if locale != registry.default and entry.name not in table:
                    logger.warning("String '%s' in locale %s has no default value", entry.name, locale)
                table.upsert(entry.name, locale, entry.text, translatable=entry.translatable)
            logger.debug("Loaded %d strings for locale %s", len(entries), locale)

        logger.info("Loaded %d strings across %d locale(s)", len(table), len(registry))
        return table


class ResourceWriter:
    """Writes translatable strings to every non-default locale's file."""

    def __init__(self, res_dir: Union[str, Path], config: Optional[ProjectConfig] = None,
                 handler: Optional[FormatHandler] = None):
        self.res_dir = Path(res_dir)
        self.config = config or ProjectConfig()
        self.handler = handler or FormatRegistry.get_handler_for_extension(Path(self.config.strings_file).suffix)

    def build_entries(self, table: StringTable, locale: str, default: str) -> tuple[list[ResourceEntry], int]:
        """
        Entries to write for a locale, with absent values taken from the default.

        Returns:
            Tuple of (entries, number of values that fell back to the default)
        """
        entries = []
        fallback = 0
        for record in table.translatable():
            if locale not in record.values:
                fallback += 1
            entries.append(ResourceEntry(name=record.name, text=record.value_for(locale, default)))
        return entries, fallback

    def _backup(self, path: Path) -> Optional[str]:
        """Move an existing file aside. Failure is logged, never raised."""
        if not path.exists():
            return None
        backup_path = path.with_name(path.name + self.config.backup_suffix)
        try:
            os.replace(path, backup_path)
        except OSError as e:
            logger.warning("Could not back up %s: %s", path, e)
            return None
        return str(backup_path)

    def write_locale(self, table: StringTable, locale: str, default: str) -> WrittenFile:
        """
        Write one locale's strings file.

        Raises:
            WriteError: If the directory or the file cannot be written
        """
        path = locale_file(self.res_dir, locale, self.config)
        entries, fallback = self.build_entries(table, locale, default)
        content = self.handler.reconstruct(entries)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriteError(locale, str(path), str(e)) from e

        backup = self._backup(path) if self.config.backup else None

        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise WriteError(locale, str(path), str(e)) from e

        logger.info("Wrote %d strings to %s (%d from default)", len(entries), path, fallback)
        return WrittenFile(locale=locale, path=str(path), entries=len(entries), fallback=fallback, backup=backup)

    def write(self, table: StringTable, registry: LocaleRegistry) -> list[WrittenFile]:
        """
        Write every non-default locale.

        Stops at the first failing locale; files already written stay written.
        """
        return [self.write_locale(table, locale, registry.default) for locale in registry.non_default()]
