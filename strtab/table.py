#!/usr/bin/env python3
"""
CSV exchange format.

Export turns the translatable part of a StringTable into rows:

    id,def,fr,de
    app_title,My App,Mon appli,Meine App

Import reads such rows back. The header must start with the id column and
the default locale; further columns name locales (new ones are registered).
The default column is never imported: default texts come from the
resource files only.

Import is all-or-nothing: every row is validated before the first value is
applied, so a failing import leaves the table and the registry untouched.
"""

import csv
import logging
import os
import stat
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Iterable, Iterator, Optional, Union

from .errors import FileAccessError, FormatError, UnknownKeyError
from .format_handlers import FormatHandler
from .locales import LocaleRegistry
from .string_table import StringRecord, StringTable

logger = logging.getLogger(__name__)

ID_COLUMN = "id"

# Locale names become directory names
_PATH_SEPARATORS = {"/", "\\", os.sep} | ({os.altsep} if os.altsep else set())


@dataclass
class ImportResult:
    """Summary of an applied import."""
    rows: int = 0
    updated: int = 0
    skipped: list[str] = field(default_factory=list)      # non-translatable names
    new_locales: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def export_rows(table: StringTable, registry: LocaleRegistry, id_column: str = ID_COLUMN) -> Iterator[list[str]]:
    """
    Rows for the CSV: header first, then one row per translatable string.

    The table is snapshotted now; the returned iterator is single-pass and
    does not see later changes to the table or the registry.

    Args:
        table: Loaded string table
        registry: Locales, one column each, default first
        id_column: Label of the first header cell

    Returns:
        Iterator of rows (lists of cell strings)
    """
    locales = list(registry)
    snapshot = [(r.name, dict(r.values)) for r in table.translatable()]
    return _iter_rows(id_column, locales, snapshot)


def _iter_rows(id_column: str, locales: list[str], snapshot: list[tuple[str, dict[str, str]]]) -> Iterator[list[str]]:
    yield [id_column] + locales
    for name, values in snapshot:
        yield [name] + [values.get(loc, '') for loc in locales]


def write_rows(rows: Iterable[list[str]], fp: IO[str], delimiter: str = ",") -> int:
    """
    Write rows to an open text stream as CSV.

    Returns:
        Number of data rows written (header excluded)
    """
    writer = csv.writer(fp, delimiter=delimiter)
    count = -1
    for row in rows:
        writer.writerow(row)
        count += 1
    return max(count, 0)


def _export_mode(target: Path) -> int:
    """Permission bits for the exported file: the existing file's, else 0666 minus umask."""
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        pass
    mask = os.umask(0)
    os.umask(mask)
    return 0o666 & ~mask


def export_table(
    table: StringTable,
    registry: LocaleRegistry,
    path: Union[str, Path],
    id_column: str = ID_COLUMN,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> int:
    """
    Export the table to a CSV file, creating or truncating it.

    The CSV is written next to the destination first and moved into place
    when complete. An existing file keeps its permissions; a symlinked
    destination is replaced at its target. A new file gets the usual
    umask-derived mode.

    Returns:
        Number of data rows written

    Raises:
        FileAccessError: If the destination cannot be written
    """
    dest = Path(path)
    target = Path(os.path.realpath(dest))
    rows = export_rows(table, registry, id_column=id_column)
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w", encoding=encoding, newline="", dir=target.parent,
            prefix=f".{target.name}.", suffix=".tmp", delete=False,
        ) as fp:
            tmp_name = fp.name
            count = write_rows(rows, fp, delimiter=delimiter)
        os.chmod(tmp_name, _export_mode(target))
        os.replace(tmp_name, target)
    except (OSError, UnicodeEncodeError) as e:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                logger.debug("Could not remove temporary file %s", tmp_name)
        raise FileAccessError(f"Cannot write {dest}: {e}", path=str(dest)) from e

    logger.info("Exported %d strings in %d locale(s) to %s", count, len(registry), dest)
    return count


def _check_header(header: Optional[list[str]], registry: LocaleRegistry, id_column: str) -> list[str]:
    """Validate the header row and return the locale columns after the default one."""
    if not header:
        raise FormatError("invalid csv format: missing header row")
    if header[0] != id_column:
        raise FormatError(f"invalid csv format: first column name should be '{id_column}', not '{header[0]}'")
    if len(header) < 2:
        raise FormatError(f"invalid csv format: second column name should be '{registry.default}', but it is missing")
    if header[1] != registry.default:
        raise FormatError(f"invalid csv format: second column name should be '{registry.default}', not '{header[1]}'")

    locales = header[2:]
    seen = set()
    for i, loc in enumerate(locales, start=3):
        if not loc:
            raise FormatError(f"invalid csv format: column {i} has no locale name")
        if loc in (".", "..") or any(sep in loc for sep in _PATH_SEPARATORS):
            raise FormatError(f"invalid csv format: column {i} has an invalid locale name '{loc}'")
        if loc == registry.default or loc in seen:
            raise FormatError(f"invalid csv format: locale '{loc}' appears more than once in header")
        seen.add(loc)
    return locales


def import_rows(
    rows: Iterable[list[str]],
    table: StringTable,
    registry: LocaleRegistry,
    id_column: str = ID_COLUMN,
    handler: Optional[FormatHandler] = None,
) -> ImportResult:
    """
    Apply CSV rows to the table.

    Args:
        rows: Parsed CSV rows, header first; errors name physical lines when
            rows is a csv.reader
        table: Table to update in place
        registry: Registry receiving locales named in the header
        id_column: Expected label of the first header cell
        handler: Optional resource handler used to warn about dropped placeholders

    Returns:
        ImportResult

    Raises:
        FormatError: If the header or a row does not match the exchange format
        UnknownKeyError: If a row names a string absent from the table
    """
    it = iter(rows)
    header = next((row for row in it if row), None)
    locales = _check_header(header, registry, id_column)

    result = ImportResult()
    updates: list[tuple[StringRecord, dict[str, str]]] = []

    # A csv.reader reports physical lines; plain row lists are counted instead
    physical = hasattr(rows, "line_num")
    end = rows.line_num if physical else 1

    for count, row in enumerate(it, start=2):
        if physical:
            line, end = end + 1, rows.line_num
        else:
            line = count
        # Blank lines and rows of empty cells (spreadsheet padding)
        if not any(row):
            continue
        if len(row) != len(header):
            raise FormatError(
                f"invalid csv format: line {line} has {len(row)} fields, expected {len(header)}"
            )

        name = row[0]
        record = table.get(name)
        if record is None:
            raise UnknownKeyError(name, line=line)

        result.rows += 1
        if not record.translatable:
            logger.warning("Skipping non-translatable string '%s' (line %d)", name, line)
            result.skipped.append(name)
            continue

        values = {loc: row[i] for i, loc in enumerate(locales, start=2)}
        if handler is not None:
            source = record.values.get(registry.default, '')
            for loc, text in values.items():
                if not text:
                    continue
                for error in handler.validate_placeholders(source, text):
                    message = f"[{name}:{loc}] {error}"
                    logger.warning("%s", message)
                    result.warnings.append(message)
        updates.append((record, values))

    result.new_locales = registry.register_all(locales)
    for record, values in updates:
        record.values.update(values)
        result.updated += len(values)

    logger.info("Imported %d rows (%d values) for locale(s): %s",
                result.rows, result.updated, ", ".join(locales) or "-")
    return result


def _reader_encoding(encoding: str) -> str:
    """Read UTF-8 with BOM tolerance: spreadsheet tools often prepend one."""
    if encoding.lower().replace("-", "").replace("_", "") == "utf8":
        return "utf-8-sig"
    return encoding


def import_table(
    path: Union[str, Path],
    table: StringTable,
    registry: LocaleRegistry,
    id_column: str = ID_COLUMN,
    delimiter: str = ",",
    encoding: str = "utf-8",
    handler: Optional[FormatHandler] = None,
) -> ImportResult:
    """
    Import a CSV file into the table.

    Raises:
        FileAccessError: If the file cannot be opened or decoded
        FormatError: If the CSV is malformed or breaks the header contract
        UnknownKeyError: If a row names a string absent from the table
    """
    src = Path(path)
    try:
        with open(src, newline="", encoding=_reader_encoding(encoding)) as fp:
            reader = csv.reader(fp, delimiter=delimiter)
            return import_rows(reader, table, registry, id_column=id_column, handler=handler)
    except csv.Error as e:
        raise FormatError(f"invalid csv format in {src}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(f"Cannot read {src}: {e}", path=str(src)) from e
