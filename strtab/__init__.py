"""
strtab - Android strings.xml <-> CSV converter for spreadsheet translation

Loads the strings.xml of every locale of an Android project into one table,
exports it as a CSV with one column per locale, and writes translations
edited in a spreadsheet back into values-<locale>/strings.xml.

Quick start:
    strtab --export strings.csv path/to/project
    # translators fill in the locale columns
    strtab --import strings.csv path/to/project
"""

__version__ = "1.0.0"

from .config import ProjectConfig, load_config
from .errors import (
    ConfigError,
    FileAccessError,
    FormatError,
    ParseError,
    PathError,
    StrtabError,
    UnknownKeyError,
    WriteError,
)
from .locales import LocaleRegistry
from .project import LocalizationProject
from .resources import ResourceLoader, ResourceWriter
from .string_table import StringRecord, StringTable
from .table import ImportResult, export_rows, export_table, import_rows, import_table

__all__ = [
    "ConfigError",
    "FileAccessError",
    "FormatError",
    "ImportResult",
    "LocaleRegistry",
    "LocalizationProject",
    "ParseError",
    "PathError",
    "ProjectConfig",
    "ResourceLoader",
    "ResourceWriter",
    "StringRecord",
    "StringTable",
    "StrtabError",
    "UnknownKeyError",
    "WriteError",
    "export_rows",
    "export_table",
    "import_rows",
    "import_table",
    "load_config",
]
