"""Filesystem access used by the scanner and the executor.

Everything that touches disk goes through a ``FileSystem`` so the
scanner and executor can be exercised against an in-memory tree.
"""
from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """The operations the renamer needs from a filesystem."""

    def list_entries(self, root: str, recursive: bool) -> list[str]:
        """Return the paths of all files and directories under *root*."""
        ...

    def is_file(self, path: str) -> bool:
        ...

    def is_dir(self, path: str) -> bool:
        ...

    def move(self, source: str, dest: str) -> None:
        """Move a file or a directory with its contents."""
        ...


class LocalFileSystem:
    """``FileSystem`` backed by the operating system."""

    def list_entries(self, root: str, recursive: bool) -> list[str]:
        path = Path(root)
        items = path.rglob("*") if recursive else path.iterdir()
        return [str(item) for item in items]

    def is_file(self, path: str) -> bool:
        return Path(path).is_file()

    def is_dir(self, path: str) -> bool:
        return Path(path).is_dir()

    def move(self, source: str, dest: str) -> None:
        """
        Rename *source* to *dest*.

        Raises:
            FileExistsError: If *dest* exists and is not *source* itself
                (a case-only rename on a case-insensitive filesystem is
                allowed).
            OSError: If the rename fails.
        """
        src = Path(source)
        dst = Path(dest)
        if dst.exists() and not src.samefile(dst):
            raise FileExistsError(f"Destination already exists: {dest}")
        src.rename(dst)
