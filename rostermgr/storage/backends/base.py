"""Base storage backend interface."""

import logging
import os
import stat
import tempfile
from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from rostermgr.core.exceptions import StorageWriteError
from rostermgr.core.fields import names_match
from rostermgr.core.models import Character

logger = logging.getLogger(__name__)


class StorageFormat(Enum):
    """Available on-disk formats."""

    TABULAR = "csv"
    DOCUMENT = "json"

    @property
    def label(self) -> str:
        """Human-readable format name."""
        return self.value.upper()

    @property
    def default_filename(self) -> str:
        """Well-known file name for this format."""
        return f"characters.{self.value}"


class BaseBackend(ABC):
    """Abstract base class for character storage backends.

    Every backend reads and writes the whole collection of characters in one
    file. Lookups are pure functions over an already loaded list and are
    shared by all formats.
    """

    format: StorageFormat

    def __init__(self, path: Path):
        self.path = Path(path)

    @property
    def label(self) -> str:
        """Human-readable name of the active format."""
        return self.format.label

    @abstractmethod
    def read_all(self) -> list[Character]:
        """Read every persisted character in file order.

        Missing or malformed files yield an empty list; parse faults are
        logged and never raised.
        """
        pass

    @abstractmethod
    def write_all(self, characters: Sequence[Character]) -> None:
        """Replace the stored collection with exactly ``characters``."""
        pass

    @abstractmethod
    def append_one(self, character: Character) -> None:
        """Add one character to the end of the stored collection."""
        pass

    def find_by_name(
        self, characters: Sequence[Character], name: str
    ) -> Character | None:
        """Return the first character whose name matches, ignoring case."""
        for character in characters:
            if names_match(character.name, name):
                return character
        return None

    def find_by_class(
        self, characters: Sequence[Character], class_name: str
    ) -> list[Character]:
        """Return all characters of a class, ignoring case, in order."""
        return [c for c in characters if names_match(c.class_, class_name)]

    def exists(self) -> bool:
        """Check if the backing file exists."""
        return self.path.exists()

    def count(self) -> int:
        """Number of persisted characters."""
        return len(self.read_all())

    def _atomic_write(self, content: str) -> None:
        """Write content to a temp file and rename it over the target."""
        try:
            temp_fd, temp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
        except OSError as e:
            raise StorageWriteError(self.path, f"Cannot write {self.label} file") from e

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            os.chmod(temp_path, self._file_mode())
            os.replace(temp_path, self.path)
        except OSError as e:
            Path(temp_path).unlink(missing_ok=True)
            raise StorageWriteError(self.path, f"Cannot write {self.label} file") from e

        logger.debug(f"Wrote {self.label} file {self.path}")

    def _file_mode(self) -> int:
        """Permission bits for the replacement file.

        An existing file keeps its mode; a new one gets the mode a plain
        ``open`` would give it.
        """
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"
