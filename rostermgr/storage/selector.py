"""Runtime selection of the active storage backend."""

import logging
from collections.abc import Mapping
from pathlib import Path

from .backends import BaseBackend, StorageFormat, create_backend

logger = logging.getLogger(__name__)

FORMAT_TOKENS = {
    "1": StorageFormat.TABULAR,
    "csv": StorageFormat.TABULAR,
    "tabular": StorageFormat.TABULAR,
    "2": StorageFormat.DOCUMENT,
    "json": StorageFormat.DOCUMENT,
    "document": StorageFormat.DOCUMENT,
}

CANCEL_TOKENS = {"", "0", "cancel"}


def resolve_format(token: str | StorageFormat | None) -> StorageFormat | None:
    """Map an operator token to a format; ``None`` means no selection."""
    if isinstance(token, StorageFormat):
        return token
    if token is None:
        return None
    return FORMAT_TOKENS.get(token.strip().lower())


class BackendSelector:
    """Holds the single active backend and swaps it on request.

    Each format is bound to its own well-known file. Switching never copies
    data between files: the new backend starts from whatever already exists
    at its path.
    """

    def __init__(
        self,
        paths: Mapping[StorageFormat, Path],
        initial: StorageFormat = StorageFormat.TABULAR,
    ):
        missing = [f.value for f in StorageFormat if f not in paths]
        if missing:
            raise ValueError(f"No file path configured for: {', '.join(missing)}")

        self.paths = {fmt: Path(path) for fmt, path in paths.items()}
        self._backend = create_backend(initial, self.paths[initial])

    @property
    def backend(self) -> BaseBackend:
        """The active backend."""
        return self._backend

    @property
    def format(self) -> StorageFormat:
        """Format of the active backend."""
        return self._backend.format

    @property
    def label(self) -> str:
        """Human-readable label of the active format."""
        return self._backend.label

    def switch(self, token: str | StorageFormat | None) -> bool:
        """Activate the backend named by ``token``.

        Cancellation and unrecognized tokens leave the active backend
        untouched.

        Returns:
            True if a new backend handle was installed.
        """
        if token is None or (
            isinstance(token, str) and token.strip().lower() in CANCEL_TOKENS
        ):
            logger.debug("Format switch cancelled")
            return False

        storage_format = resolve_format(token)
        if storage_format is None:
            logger.debug(f"Unrecognized format {token!r}, keeping {self.label}")
            return False

        self._backend = create_backend(storage_format, self.paths[storage_format])
        logger.info(f"Switched storage format to {self.label} ({self._backend.path})")
        return True
