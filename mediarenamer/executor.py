"""Apply reviewed rename mappings to the filesystem."""
import logging

from .filesystem import FileSystem, LocalFileSystem
from .models import RenameMapping, ReportEntry, ReportStatus

log = logging.getLogger(__name__)


def sort_files_first(
    mappings: list[RenameMapping],
    fs: FileSystem
) -> list[RenameMapping]:
    """
    Order mappings so directories are renamed after files.

    Each entry is classified by what its original path is right now; an
    entry that no longer exists sorts with the files.  The sort is
    stable, so relative order inside each group is kept.
    """
    return sorted(mappings, key=lambda m: fs.is_dir(m.original_path))


def rename_entry(mapping: RenameMapping, fs: FileSystem) -> ReportEntry:
    """
    Rename a single entry and report the outcome.

    Args:
        mapping: The rename to apply
        fs: Filesystem to operate on

    Returns:
        ReportEntry with status Success or Failed
    """
    source = mapping.original_path
    dest = mapping.proposed_path

    try:
        if fs.is_file(source) or fs.is_dir(source):
            fs.move(source, dest)
            return ReportEntry(ReportStatus.SUCCESS, source, dest)

        message = f"Path not found: {source}"
        log.warning(message)
        return ReportEntry(ReportStatus.FAILED, source, dest, message)

    except Exception as e:
        log.warning("Error renaming '%s' to '%s': %s", source, dest, e)
        return ReportEntry(ReportStatus.FAILED, source, dest, str(e))


def execute_mappings(
    mappings: list[RenameMapping],
    fs: FileSystem | None = None
) -> list[ReportEntry]:
    """
    Apply every mapping, continuing past failures.

    Nothing is rolled back: each mapping is attempted once and gets its
    own report entry, in execution order.

    Args:
        mappings: Renames to apply, as read from the mapping file
        fs: Filesystem to use (defaults to the local one)

    Returns:
        List of ReportEntry, one per mapping
    """
    fs = fs or LocalFileSystem()
    return [rename_entry(m, fs) for m in sort_files_first(mappings, fs)]
