"""Pluggable storage backends.

Provides one interface over two interchangeable on-disk formats:

- **TabularBackend**: CSV file with true incremental append
- **DocumentBackend**: Indented JSON array, append by rewrite

Backends are looked up by ``StorageFormat`` through ``BACKENDS``.
"""

from pathlib import Path

from .base import BaseBackend, StorageFormat
from .document import DocumentBackend
from .tabular import TabularBackend

BACKENDS: dict[StorageFormat, type[BaseBackend]] = {
    StorageFormat.TABULAR: TabularBackend,
    StorageFormat.DOCUMENT: DocumentBackend,
}


def create_backend(storage_format: StorageFormat, path: Path) -> BaseBackend:
    """Build the backend registered for a format, bound to ``path``."""
    return BACKENDS[storage_format](path)


__all__ = [
    "BACKENDS",
    "BaseBackend",
    "DocumentBackend",
    "StorageFormat",
    "TabularBackend",
    "create_backend",
]
