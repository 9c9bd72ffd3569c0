"""Data models for the mediarenamer package."""
from dataclasses import dataclass
from enum import Enum


class ReportStatus(str, Enum):
    """Outcome of a single rename."""
    SUCCESS = "Success"
    FAILED = "Failed"


@dataclass(frozen=True)
class RenameMapping:
    """An original path paired with the path it should be renamed to."""
    original_path: str
    proposed_path: str


@dataclass(frozen=True)
class ReportEntry:
    """Represents the result of applying one RenameMapping."""
    status: ReportStatus
    original_path: str
    new_path: str
    error_message: str = ""

    @property
    def success(self) -> bool:
        return self.status is ReportStatus.SUCCESS
