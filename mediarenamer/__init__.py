"""
mediarenamer - Media File Renamer

A CLI tool that proposes clean "Title (Year)" names for media files and
folders, then applies the reviewed proposals.
"""
from .models import (
    RenameMapping,
    ReportEntry,
    ReportStatus
)
from .cleaner import (
    clean_name,
    names_match,
    split_extensions
)
from .filesystem import FileSystem, LocalFileSystem
from .scanner import build_mappings
from .executor import execute_mappings
from .mapfile import (
    read_mapping_file,
    write_mapping_file,
    read_report_file,
    write_report_file
)

__version__ = "1.0.0"
__all__ = [
    "RenameMapping",
    "ReportEntry",
    "ReportStatus",
    "clean_name",
    "names_match",
    "split_extensions",
    "FileSystem",
    "LocalFileSystem",
    "build_mappings",
    "execute_mappings",
    "read_mapping_file",
    "write_mapping_file",
    "read_report_file",
    "write_report_file",
]
