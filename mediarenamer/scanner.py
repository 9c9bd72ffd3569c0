"""Build the list of proposed renames for a directory tree."""
import logging
import os

from .cleaner import base_name, clean_name, names_match
from .filesystem import FileSystem, LocalFileSystem
from .models import RenameMapping

log = logging.getLogger(__name__)


def build_mappings(
    root: str,
    recursive: bool = True,
    fs: FileSystem | None = None
) -> list[RenameMapping]:
    """
    Propose a cleaned name for every entry under *root*.

    Entries whose cleaned name differs from the current one (ignoring
    case) produce a mapping to the cleaned name in the same parent
    directory.  Entries whose name cleans to nothing are left alone.
    Results keep the filesystem's enumeration order.

    Args:
        root: Directory to scan
        recursive: Whether to descend into subdirectories
        fs: Filesystem to use (defaults to the local one)

    Returns:
        List of RenameMapping
    """
    fs = fs or LocalFileSystem()
    mappings = []

    for path in fs.list_entries(root, recursive):
        is_directory = not fs.is_file(path)
        proposed_name = clean_name(path, is_directory)

        if names_match(base_name(path), proposed_name):
            continue
        if not proposed_name:
            log.debug("Nothing left after cleaning, skipped: %s", path)
            continue

        new_path = os.path.join(os.path.dirname(path), proposed_name)
        log.debug("Proposed: %s -> %s", path, new_path)
        mappings.append(RenameMapping(original_path=path, proposed_path=new_path))

    return mappings
