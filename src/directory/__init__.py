"""Volunteer directory loading."""
from src.directory.exceptions import (
    DirectoryError,
    DirectoryNotFoundError,
    InvalidDirectoryError,
)
from src.directory.loader import (
    VolunteerDirectoryFile,
    VolunteerEntry,
    build_matcher,
    load_volunteer_directory,
)

__all__ = [
    "VolunteerDirectoryFile",
    "VolunteerEntry",
    "build_matcher",
    "load_volunteer_directory",
    "DirectoryError",
    "DirectoryNotFoundError",
    "InvalidDirectoryError",
]
