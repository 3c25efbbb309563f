#!/usr/bin/env python3
"""
Localization project: the state of one strtab run.

Resolves the resource directory of an Android project, builds the locale
registry, loads all strings into one table, and drives export to CSV or
import from CSV followed by write-back of the translated resource files.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .config import ProjectConfig
from .format_handlers import FormatHandler, FormatRegistry
from .locales import LocaleRegistry
from .resources import ResourceLoader, ResourceWriter, resolve_resources_dir
from .string_table import StringTable
from .table import export_table, import_table

logger = logging.getLogger(__name__)


class LocalizationProject:
    """
    Manages one run over a resource tree.

    Handles:
    - Finding the resource directory (app/src/main/res or the path itself)
    - Registering locales (explicit list, or values-* discovery)
    - Loading strings.xml files into a StringTable
    - Exporting the table to CSV
    - Importing CSV and writing translated strings.xml files
    """

    def __init__(
        self,
        project_dir: Union[str, Path],
        locales: Optional[list[str]] = None,
        config: Optional[ProjectConfig] = None,
    ):
        """
        Initialize a project.

        Args:
            project_dir: Android project root or resource directory
            locales: Explicit locales; when empty, locales are discovered
            config: Project configuration (defaults if not provided)

        Raises:
            PathError: If no resource directory is found
        """
        self.project_dir = Path(project_dir)
        self.config = config or ProjectConfig()
        self.res_dir = resolve_resources_dir(self.project_dir, self.config)

        self.handler: FormatHandler = FormatRegistry.get_handler_for_extension(
            Path(self.config.strings_file).suffix
        )

        explicit = locales if locales else self.config.locales
        self.registry = LocaleRegistry(default=self.config.default_locale)
        if explicit:
            self.registry.register_all(explicit)
        else:
            self.registry.discover(self.res_dir, prefix=self.config.values_prefix)

        self.table: Optional[StringTable] = None
        logger.debug("Project %s: resources in %s, locales %s", self.project_dir, self.res_dir, list(self.registry))

    def load(self) -> "LocalizationProject":
        """Load all registered locales into the string table."""
        loader = ResourceLoader(self.res_dir, self.config, self.handler)
        self.table = loader.load(self.registry)
        return self

    def _require_table(self) -> StringTable:
        if self.table is None:
            self.load()
        return self.table

    def export(self, output_file: Union[str, Path]) -> dict:
        """
        Export translatable strings to a CSV file.

        Returns:
            Status dictionary with output path and stats
        """
        table = self._require_table()
        rows = export_table(
            table,
            self.registry,
            output_file,
            id_column=self.config.id_column,
            delimiter=self.config.delimiter,
            encoding=self.config.encoding,
        )
        return {
            "status": "ok",
            "output_file": str(output_file),
            "resources_dir": str(self.res_dir),
            "locales": list(self.registry),
            "stats": {
                "total_strings": len(table),
                "exported": rows,
                "non_translatable": len(table) - rows,
            },
            "summary": f"Exported {rows} strings in {len(self.registry)} locale(s) to {Path(output_file).name}",
        }

    def import_csv(self, input_file: Union[str, Path]) -> dict:
        """
        Import translations from a CSV file into the table (nothing is written).

        Returns:
            Status dictionary with import stats
        """
        table = self._require_table()
        result = import_table(
            input_file,
            table,
            self.registry,
            id_column=self.config.id_column,
            delimiter=self.config.delimiter,
            encoding=self.config.encoding,
            handler=self.handler,
        )
        return {
            "status": "ok",
            "input_file": str(input_file),
            "stats": {
                "rows": result.rows,
                "updated_values": result.updated,
                "skipped_non_translatable": len(result.skipped),
            },
            "new_locales": result.new_locales,
            "warnings": result.warnings,
        }

    def save(self) -> dict:
        """
        Write every non-default locale's strings file.

        Returns:
            Status dictionary listing the written files
        """
        table = self._require_table()
        writer = ResourceWriter(self.res_dir, self.config, self.handler)
        written = writer.write(table, self.registry)
        return {
            "status": "ok",
            "resources_dir": str(self.res_dir),
            "files": [
                {
                    "locale": w.locale,
                    "path": w.path,
                    "strings": w.entries,
                    "from_default": w.fallback,
                    "backup": w.backup,
                }
                for w in written
            ],
            "summary": f"Wrote {len(written)} locale file(s) in {self.res_dir}",
        }

    def import_and_save(self, input_file: Union[str, Path]) -> dict:
        """Import a CSV, then write the resource files."""
        imported = self.import_csv(input_file)
        saved = self.save()
        saved["import"] = {k: v for k, v in imported.items() if k != "status"}
        saved["summary"] = (
            f"Imported {imported['stats']['rows']} rows; " + saved["summary"]
        )
        return saved
