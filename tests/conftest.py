import os

import pytest


class MemoryFileSystem:
    """In-memory FileSystem; entries keep insertion order."""

    def __init__(self):
        self.entries: dict[str, str] = {}

    def add_file(self, *parts: str) -> str:
        path = os.path.join(*parts)
        self.entries[path] = "file"
        return path

    def add_dir(self, *parts: str) -> str:
        path = os.path.join(*parts)
        self.entries[path] = "dir"
        return path

    def _is_under(self, path: str, root: str) -> bool:
        return path.startswith(root.rstrip(os.sep) + os.sep)

    def list_entries(self, root: str, recursive: bool) -> list[str]:
        return [
            path for path in self.entries
            if self._is_under(path, root)
            and (recursive or os.path.dirname(path) == root)
        ]

    def is_file(self, path: str) -> bool:
        return self.entries.get(path) == "file"

    def is_dir(self, path: str) -> bool:
        return self.entries.get(path) == "dir"

    def move(self, source: str, dest: str) -> None:
        if source not in self.entries:
            raise FileNotFoundError(f"No such file or directory: {source}")
        if dest in self.entries:
            raise FileExistsError(f"Destination already exists: {dest}")

        moved = {}
        for path, kind in self.entries.items():
            if path == source:
                moved[dest] = kind
            elif self._is_under(path, source):
                moved[dest + path[len(source):]] = kind
            else:
                moved[path] = kind
        self.entries = moved


@pytest.fixture
def memory_fs():
    return MemoryFileSystem()


@pytest.fixture
def media_root():
    return os.path.join(os.sep, "media")
