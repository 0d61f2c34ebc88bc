"""Tabular (CSV) storage backend."""

import csv
import io
import logging
from collections.abc import Sequence

from rostermgr.core.exceptions import MalformedStoreError, StorageWriteError
from rostermgr.core.fields import (
    FIELD_NAMES,
    coerce_hit_points,
    coerce_level,
    parse_equipment,
)
from rostermgr.core.models import Character

from .base import BaseBackend, StorageFormat

logger = logging.getLogger(__name__)


class TabularBackend(BaseBackend):
    """One character per CSV line, preceded by a header line.

    Fields are written in fixed order (name, class, level, hitPoints,
    equipment) and trimmed on read. Appends write a single line without
    touching earlier ones.
    """

    format = StorageFormat.TABULAR

    def read_all(self) -> list[Character]:
        """Read all characters from the CSV file."""
        if not self.path.exists():
            logger.debug(f"CSV file not found at {self.path}")
            return []

        try:
            with open(self.path, encoding="utf-8-sig", newline="") as f:
                text = f.read()
            return self._parse(text)
        except MalformedStoreError as e:
            logger.warning(f"Ignoring malformed CSV file: {e}")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Error reading CSV file {self.path}: {e}")
        return []

    def write_all(self, characters: Sequence[Character]) -> None:
        """Rewrite the header and every data line."""
        output = io.StringIO()
        writer = self._writer(output)
        writer.writerow(FIELD_NAMES)
        for character in characters:
            writer.writerow(self._to_row(character))

        self._atomic_write(output.getvalue())

    def append_one(self, character: Character) -> None:
        """Append a single data line, writing the header for a new file."""
        try:
            needs_header = not self.path.exists() or self.path.stat().st_size == 0
            needs_newline = not needs_header and not self._ends_with_newline()

            with open(self.path, "a", encoding="utf-8", newline="") as f:
                if needs_newline:
                    f.write("\n")
                writer = self._writer(f)
                if needs_header:
                    writer.writerow(FIELD_NAMES)
                writer.writerow(self._to_row(character))
        except OSError as e:
            raise StorageWriteError(self.path, "Cannot append to CSV file") from e

        logger.debug(f"Appended {character.name!r} to {self.path}")

    def _parse(self, text: str) -> list[Character]:
        reader = csv.reader(io.StringIO(text))

        # Header is positional only
        if next(reader, None) is None:
            return []

        characters = []
        for row in reader:
            fields = [field.strip() for field in row]
            if not any(fields):
                continue

            if len(fields) != len(FIELD_NAMES):
                raise MalformedStoreError(
                    self.path,
                    f"Expected {len(FIELD_NAMES)} fields, found {len(fields)}",
                    line=reader.line_num,
                )

            name, class_name, level, hp, equipment = fields
            try:
                level_value = int(level)
                hp_value = int(hp)
            except ValueError:
                raise MalformedStoreError(
                    self.path, "Invalid level or hit points", line=reader.line_num
                )

            characters.append(
                Character(
                    name=name,
                    class_=class_name,
                    level=coerce_level(level_value),
                    hp=coerce_hit_points(hp_value),
                    equipment=parse_equipment(equipment),
                )
            )

        return characters

    def _ends_with_newline(self) -> bool:
        with open(self.path, "rb") as f:
            f.seek(-1, io.SEEK_END)
            return f.read(1) in (b"\n", b"\r")

    @staticmethod
    def _writer(stream):
        return csv.writer(stream, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")

    @staticmethod
    def _to_row(character: Character) -> list[str]:
        return [
            character.name,
            character.class_,
            str(character.level),
            str(character.hp),
            character.equipment_text,
        ]
