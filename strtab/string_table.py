#!/usr/bin/env python3
"""
In-memory string table shared by the loader, the CSV exporter/importer and
the resource writer.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass
class StringRecord:
    """
    One named string across all locales.

    Attributes:
        name: Unique string name (the `name` attribute in strings.xml)
        values: Map of locale -> text; sparse
        translatable: False once any locale marks the string translatable="false"
    """
    name: str
    values: dict[str, str] = field(default_factory=dict)
    translatable: bool = True

    def value_for(self, locale: str, fallback_locale: Optional[str] = None) -> str:
        """
        Text for a locale, falling back to another locale when absent.

        A value that is present but empty is returned as-is.
        """
        if locale in self.values:
            return self.values[locale]
        if fallback_locale is not None:
            return self.values.get(fallback_locale, '')
        return ''


class StringTable:
    """Map of string name -> StringRecord, in first-seen order."""

    def __init__(self):
        self._records: dict[str, StringRecord] = {}

    def upsert(self, name: str, locale: str, value: str, translatable: bool = True) -> StringRecord:
        """
        Merge one locale's value for a string into the table.

        The first call for a name creates the record; later calls only set
        their locale's value. The translatable flag can be cleared but never
        set back to True.

        Args:
            name: String name
            locale: Locale the value belongs to
            value: Text for that locale
            translatable: Whether this locale's source marks it translatable

        Returns:
            The created or updated record
        """
        record = self._records.get(name)
        if record is None:
            record = StringRecord(name=name)
            self._records[name] = record
        record.values[locale] = value
        if not translatable:
            record.translatable = False
        return record

    def get(self, name: str) -> Optional[StringRecord]:
        return self._records.get(name)

    def records(self) -> list[StringRecord]:
        return list(self._records.values())

    def translatable(self) -> list[StringRecord]:
        """Records that take part in export, import and write-back."""
        return [r for r in self._records.values() if r.translatable]

    def names(self) -> list[str]:
        return list(self._records)

    def __getitem__(self, name: str) -> StringRecord:
        return self._records[name]

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __iter__(self) -> Iterator[StringRecord]:
        return iter(self.records())

    def __len__(self) -> int:
        return len(self._records)
