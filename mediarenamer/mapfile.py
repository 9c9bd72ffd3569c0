"""Reading and writing the pipe-delimited mapping and report files.

Mapping file::

    OriginalFullPath|ProposedNewFullPath
    /media/The.Matrix.1999.mkv|/media/The Matrix (1999).mkv

Report file::

    Status|OriginalFullPath|NewFullPath|ErrorMessage
    Success|/media/The.Matrix.1999.mkv|/media/The Matrix (1999).mkv|

The first line of each file is a header and is never parsed.  Lines that
do not split into the expected number of columns are skipped.
"""
import logging
from pathlib import Path

from .models import RenameMapping, ReportEntry, ReportStatus

log = logging.getLogger(__name__)

DELIMITER = "|"
MAPPING_HEADER = "OriginalFullPath|ProposedNewFullPath"
REPORT_HEADER = "Status|OriginalFullPath|NewFullPath|ErrorMessage"


def _read_rows(file_path: Path, columns: int) -> list[list[str]]:
    """Return the data lines of *file_path* split into *columns* parts."""
    with open(file_path, 'r', encoding='utf-8') as f:
        lines = [line.rstrip('\n') for line in f]

    rows = []
    for line_number, line in enumerate(lines[1:], start=2):
        parts = line.split(DELIMITER)
        if len(parts) != columns:
            log.debug("Skipping line %d of %s: %r", line_number, file_path, line)
            continue
        rows.append(parts)
    return rows


def _write_lines(file_path: Path, header: str, rows: list[list[str]]) -> None:
    with open(file_path, 'w', encoding='utf-8') as f:
        f.write(header + "\n")
        for row in rows:
            f.write(DELIMITER.join(row) + "\n")


def write_mapping_file(mappings: list[RenameMapping], file_path: str | Path) -> None:
    """Write *mappings* for review, one ``original|proposed`` pair per line."""
    _write_lines(
        Path(file_path),
        MAPPING_HEADER,
        [[m.original_path, m.proposed_path] for m in mappings]
    )


def read_mapping_file(file_path: str | Path) -> list[RenameMapping]:
    """
    Read a (possibly hand-edited) mapping file.

    Args:
        file_path: Path to the mapping file

    Returns:
        Mappings in file order; malformed lines are left out.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    return [
        RenameMapping(original_path=original, proposed_path=proposed)
        for original, proposed in _read_rows(Path(file_path), 2)
    ]


def write_report_file(entries: list[ReportEntry], file_path: str | Path) -> None:
    """Write one ``status|original|new|error`` line per entry."""
    _write_lines(
        Path(file_path),
        REPORT_HEADER,
        [
            [e.status.value, e.original_path, e.new_path, e.error_message]
            for e in entries
        ]
    )


def read_report_file(file_path: str | Path) -> list[ReportEntry]:
    """
    Read a report back into ReportEntry objects.

    Lines with an unknown status are skipped along with malformed ones.
    """
    entries = []
    for status, original, new, error in _read_rows(Path(file_path), 4):
        try:
            report_status = ReportStatus(status)
        except ValueError:
            log.debug("Unknown report status %r in %s", status, file_path)
            continue
        entries.append(ReportEntry(
            status=report_status,
            original_path=original,
            new_path=new,
            error_message=error
        ))
    return entries
