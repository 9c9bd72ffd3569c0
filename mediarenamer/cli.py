#!/usr/bin/env python3
"""
mediarenamer - clean up media file and folder names

Two-step workflow:

    mediarenamer /media/movies            # write RenameMapping.txt for review
    mediarenamer /media/movies commit     # apply it and write RenameReport.txt
"""
import argparse
import logging
import sys
from pathlib import Path

from .config import SettingsManager
from .executor import execute_mappings
from .mapfile import read_mapping_file, write_mapping_file, write_report_file
from .models import RenameMapping, ReportEntry
from .scanner import build_mappings

log = logging.getLogger(__name__)


def print_mapping(mapping: RenameMapping) -> None:
    """Print one proposed rename."""
    print(f"  {Path(mapping.original_path).name}")
    print(f"  -> {Path(mapping.proposed_path).name}")


def print_failure(entry: ReportEntry) -> None:
    """Print a failed rename."""
    print(f"  [FAILED] {entry.original_path}")
    print(f"           {entry.error_message}")


def setup_logging(level_name: str, verbose: bool) -> None:
    """Configure the root logger once for the whole run."""
    level = logging.DEBUG if verbose else getattr(logging, str(level_name).upper(), logging.WARNING)
    logging.basicConfig(level=level, format="  [%(levelname)s] %(message)s")


def propose(directory: Path, mapping_file: Path, recursive: bool) -> None:
    """Scan *directory* and write the mapping file for review."""
    mappings = build_mappings(str(directory), recursive)

    print(f"Found {len(mappings)} entr{'y' if len(mappings) == 1 else 'ies'} to rename")
    for mapping in mappings:
        print_mapping(mapping)

    write_mapping_file(mappings, mapping_file)
    print(f"Mapping file generated at: {mapping_file}")
    print("Please review and edit the 'ProposedNewFullPath' in the mapping file if necessary.")


def commit(mapping_file: Path, report_file: Path) -> None:
    """Apply the reviewed mapping file and write the report."""
    mappings = read_mapping_file(mapping_file)
    entries = execute_mappings(mappings)

    failed = [e for e in entries if not e.success]
    for entry in failed:
        print_failure(entry)

    write_report_file(entries, report_file)
    print("-" * 50)
    print(f"Renamed: {len(entries) - len(failed)} | Failed: {len(failed)}")
    print(f"Report generated at: {report_file}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mediarenamer",
        description="Propose and apply clean 'Title (Year)' names for media files and folders."
    )

    parser.add_argument(
        "path",
        type=Path,
        nargs="?",
        help="Directory to process"
    )
    parser.add_argument(
        "tokens",
        nargs="*",
        metavar="commit",
        help="Apply the mapping file; without it the mapping file is written"
    )
    parser.add_argument(
        "--recursive", "-r",
        action="store_true",
        help="Include subdirectories (default; wins over --non-recursive)"
    )
    parser.add_argument(
        "--non-recursive",
        action="store_true",
        help="Only process the top level of the directory"
    )

    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Settings file to use instead of the per-user one"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show detailed debug information"
    )
    return parser


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    parsed_args, unknown = parser.parse_known_intermixed_args(args)

    if parsed_args.path is None:
        parser.print_usage()
        return 0

    settings = SettingsManager(parsed_args.settings)
    setup_logging(settings.get("log_level"), parsed_args.verbose)
    if unknown:
        log.debug("Ignoring unknown options: %s", " ".join(unknown))

    directory = parsed_args.path
    if not directory.is_dir():
        print(f"Directory not found: {directory}")
        return 0

    if parsed_args.recursive:
        recursive = True
    elif parsed_args.non_recursive:
        recursive = False
    else:
        recursive = bool(settings.get("recursive"))

    commit_mode = any(token.lower() == "commit" for token in parsed_args.tokens)

    mapping_file = directory / settings.get("mapping_file_name")
    report_file = directory / settings.get("report_file_name")

    try:
        if commit_mode:
            if not mapping_file.is_file():
                print(f"Mapping file not found: {mapping_file}")
                return 0
            commit(mapping_file, report_file)
        else:
            propose(directory, mapping_file, recursive)
    except OSError as e:
        log.debug("Run aborted", exc_info=True)
        print(f"Error: {e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
