"""Exception classes for roster storage and operations."""

from pathlib import Path


class RosterError(Exception):
    """Base exception for roster errors."""

    pass


class StorageError(RosterError):
    """Base exception for storage-related errors."""

    def __init__(self, path: Path, message: str):
        """Initialize with the backing file path and a message."""
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")


class StorageWriteError(StorageError):
    """Raised when the backing file cannot be written."""

    pass


class MalformedStoreError(StorageError):
    """Raised when persisted content cannot be parsed."""

    def __init__(self, path: Path, message: str, line: int | None = None):
        """Initialize with path, message and optional line number."""
        self.line = line
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(path, message)
