#!/usr/bin/env python3
"""
strtab - Android strings.xml <-> CSV for spreadsheet translation

Exports every translatable string of an Android project to one CSV with a
column per locale, and imports the edited CSV back into the
values-<locale>/strings.xml files.

Commands:
    strtab --export strings.csv path/to/project
    strtab --import strings.csv path/to/project

CSV layout:
    id,def,fr,de
    app_title,My App,Mon appli,Meine App

Adding a column to the CSV header adds that locale on import.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from .config import load_config
from .errors import EXIT_ERROR, EXIT_SUCCESS, StrtabError
from .logging_config import setup_logging
from .project import LocalizationProject


def parse_locales(value: Optional[str]) -> Optional[list[str]]:
    """Split a comma-separated locale list."""
    if not value:
        return None
    return [loc.strip() for loc in value.split(",") if loc.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strtab",
        description="strtab - Android strings.xml <-> CSV for spreadsheet translation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Export all locales found as values-* folders
  strtab --export strings.csv ~/src/MyApp

  # Export only French and German (adds empty columns for missing ones)
  strtab --export strings.csv --locales fr,de ~/src/MyApp

  # Import translations and rewrite values-*/strings.xml (old files kept as .bak)
  strtab --import strings.csv ~/src/MyApp

Config file (strtab.yaml in the project dir, or --config):
  locales: [fr, de]
  backup_suffix: .orig
  delimiter: ";"
        """,
    )
    parser.add_argument("project", nargs="?", help="Android project dir or resources dir")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--export", "-e", metavar="PATH", help="CSV file to export values to")
    mode.add_argument("--import", "-i", dest="import_file", metavar="PATH", help="CSV file to import values from")

    parser.add_argument("--locales", "-l", help="Comma-separated locales (discovered from values-* dirs if omitted)")
    parser.add_argument("--config", "-c", help="Path to YAML config file")
    parser.add_argument("--no-backup", action="store_true", help="Do not keep .bak copies of overwritten files")

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output (INFO level logging)")
    parser.add_argument("--debug", action="store_true", help="Enable debug output (DEBUG level logging)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file")
    return parser


def cmd_export(args, project: LocalizationProject) -> dict:
    """Export strings to CSV."""
    return project.load().export(args.export)


def cmd_import(args, project: LocalizationProject) -> dict:
    """Import CSV and write translated resource files."""
    return project.load().import_and_save(args.import_file)


def run(args) -> dict:
    """Build the project for the parsed arguments and run the selected mode."""
    config = load_config(project_dir=args.project, config_file=args.config)
    if args.no_backup:
        config = config.merged(backup=False)

    project = LocalizationProject(args.project, locales=parse_locales(args.locales), config=config)
    if args.export:
        return cmd_export(args, project)
    return cmd_import(args, project)


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.project or not (args.export or args.import_file):
        parser.print_usage()
        return EXIT_SUCCESS

    setup_logging(verbose=args.verbose, debug=args.debug, quiet=args.quiet, log_file=args.log_file)

    try:
        result = run(args)
    except StrtabError as e:
        print(json.dumps({
            "status": "error",
            "error": str(e),
            "error_type": type(e).__name__,
        }), file=sys.stderr)
        return e.exit_code
    except Exception as e:
        print(json.dumps({
            "status": "error",
            "error": str(e),
            "error_type": type(e).__name__,
        }), file=sys.stderr)
        return EXIT_ERROR

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
