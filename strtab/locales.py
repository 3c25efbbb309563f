#!/usr/bin/env python3
"""
Locale registry.

Keeps the ordered list of locales a run works with. The default locale is
implicit: it always sits at index 0 and is never discovered from disk.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "def"
VALUES_PREFIX = "values-"


class LocaleRegistry:
    """
    Append-only, duplicate-free sequence of locale identifiers.

    Attributes:
        default: Label of the default locale (first entry)
    """

    def __init__(self, default: str = DEFAULT_LOCALE, locales: Optional[Iterable[str]] = None):
        """
        Initialize registry.

        Args:
            default: Label of the default locale
            locales: Optional explicit locales registered after the default
        """
        if not default:
            raise ValueError("Default locale label must not be empty")
        self.default = default
        self._locales: list[str] = [default]
        if locales:
            self.register_all(locales)

    def register(self, locale_id: str) -> bool:
        """
        Append a locale if it is not registered yet.

        Args:
            locale_id: Locale identifier (e.g. 'fr', 'pt-rBR')

        Returns:
            True if the locale was added, False if it was already present
        """
        if not locale_id:
            raise ValueError("Locale identifier must not be empty")
        if locale_id in self._locales:
            return False
        self._locales.append(locale_id)
        logger.debug("Registered locale %s", locale_id)
        return True

    def register_all(self, locale_ids: Iterable[str]) -> list[str]:
        """Register several locales, returning the ones that were new."""
        return [loc for loc in locale_ids if self.register(loc)]

    def discover(self, base_dir: Union[str, Path], prefix: str = VALUES_PREFIX) -> list[str]:
        """
        Register locales found as `<prefix><locale>` subdirectories of base_dir.

        Directories are visited in name order. A directory that cannot be
        scanned yields no locales: having no translations yet is valid.

        Args:
            base_dir: Resource directory to scan
            prefix: Directory name prefix preceding the locale suffix

        Returns:
            Newly registered locale identifiers
        """
        try:
            names = sorted(p.name for p in Path(base_dir).iterdir() if p.is_dir())
        except OSError as e:
            logger.debug("Locale discovery skipped for %s: %s", base_dir, e)
            return []

        found = []
        for name in names:
            if name.startswith(prefix) and len(name) > len(prefix):
                if self.register(name[len(prefix):]):
                    found.append(name[len(prefix):])

        logger.info("Discovered %d locale(s) in %s: %s", len(found), base_dir, ", ".join(found) or "-")
        return found

    def non_default(self) -> list[str]:
        """Registered locales except the default one."""
        return self._locales[1:]

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._locales))

    def __len__(self) -> int:
        return len(self._locales)

    def __contains__(self, locale_id: object) -> bool:
        return locale_id in self._locales

    def __repr__(self) -> str:
        return f"LocaleRegistry({self._locales!r})"
