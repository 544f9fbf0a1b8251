"""Volunteer directory exceptions."""


class DirectoryError(Exception):
    """Base exception for volunteer directory errors."""

    pass


class DirectoryNotFoundError(DirectoryError):
    """Raised when the volunteer directory file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Volunteer directory not found: {path}")


class InvalidDirectoryError(DirectoryError):
    """Raised when the volunteer directory file cannot be parsed or validated."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid volunteer directory {path}: {reason}")
