"""Document (JSON) storage backend."""

import logging
from collections.abc import Sequence

import msgspec

from rostermgr.core.exceptions import MalformedStoreError
from rostermgr.core.models import Character

from .base import BaseBackend, StorageFormat

logger = logging.getLogger(__name__)


class DocumentBackend(BaseBackend):
    """Whole collection stored as one indented JSON array of objects.

    Object keys are matched case-insensitively on read. JSON has no append
    primitive, so ``append_one`` reads the collection and rewrites it; this
    is slower than the CSV append but keeps the same contract.
    """

    format = StorageFormat.DOCUMENT

    def read_all(self) -> list[Character]:
        """Read all characters from the JSON file."""
        if not self.path.exists():
            logger.warning(f"JSON file not found at {self.path}")
            return []

        try:
            raw = self.path.read_bytes()
        except OSError as e:
            logger.warning(f"Error reading JSON file {self.path}: {e}")
            return []

        if not raw.strip():
            logger.warning(f"JSON file is empty: {self.path}")
            return []

        try:
            return self._parse(raw)
        except MalformedStoreError as e:
            logger.warning(f"Ignoring malformed JSON file: {e}")
            return []

    def write_all(self, characters: Sequence[Character]) -> None:
        """Serialize every character and replace the file in one shot."""
        encoded = msgspec.json.encode([c.to_dict() for c in characters])
        content = msgspec.json.format(encoded, indent=2).decode("utf-8")
        self._atomic_write(content + "\n")

    def append_one(self, character: Character) -> None:
        """Read, append and rewrite the full collection."""
        characters = self.read_all()
        characters.append(character)
        self.write_all(characters)

    def _parse(self, raw: bytes) -> list[Character]:
        try:
            data = msgspec.json.decode(raw)
        except (msgspec.DecodeError, UnicodeDecodeError) as e:
            raise MalformedStoreError(self.path, f"Invalid JSON ({e})") from e

        if data is None:
            raise MalformedStoreError(self.path, "JSON document is null")

        if not isinstance(data, list):
            raise MalformedStoreError(self.path, "Expected a JSON array of characters")

        characters = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise MalformedStoreError(
                    self.path, f"Item {index} is not a JSON object"
                )
            try:
                characters.append(Character.from_dict(item))
            except (TypeError, ValueError) as e:
                raise MalformedStoreError(self.path, f"Item {index}: {e}") from e

        return characters
