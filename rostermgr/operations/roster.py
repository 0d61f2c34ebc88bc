"""Roster operations built on the storage backend contract.

Every operation re-reads the collection from the active backend; nothing is
cached between calls.
"""

import logging

from rostermgr.core.exceptions import StorageWriteError
from rostermgr.core.fields import (
    coerce_hit_points,
    coerce_level,
    names_match,
    parse_equipment,
)
from rostermgr.core.models import Character
from rostermgr.storage.backends import BaseBackend

from .results import OperationResult, ResultStatus

logger = logging.getLogger(__name__)


def build_character(
    name: str | None,
    class_name: str | None,
    level: str | int | None,
    hp: str | int | None,
    equipment: str | list[str] | tuple[str, ...] | None,
) -> Character:
    """Build a Character from raw operator input.

    Non-numeric level and hit points fall back to 1 and 0.
    """
    return Character(
        name=(name or "").strip(),
        class_=(class_name or "").strip(),
        level=coerce_level(level),
        hp=coerce_hit_points(hp),
        equipment=parse_equipment(equipment),
    )


def list_characters(backend: BaseBackend) -> list[Character]:
    """All persisted characters in file order."""
    return backend.read_all()


def find_character(backend: BaseBackend, name: str) -> Character | None:
    """First character with the given name, ignoring case."""
    return backend.find_by_name(backend.read_all(), name)


def find_characters_by_class(backend: BaseBackend, class_name: str) -> list[Character]:
    """Characters of the given class, ignoring case."""
    return backend.find_by_class(backend.read_all(), class_name)


def add_character(backend: BaseBackend, character: Character) -> OperationResult:
    """Append a new character to the active store.

    Args:
        backend: Active storage backend
        character: Character to add

    Returns:
        Operation result
    """
    if not character.name:
        return OperationResult(
            status=ResultStatus.VALIDATION_FAILED,
            message="Character name cannot be empty",
            errors=["name: required"],
        )

    try:
        backend.append_one(character)
    except StorageWriteError as e:
        logger.error(f"Storage error adding {character.name}: {e}")
        return OperationResult(
            status=ResultStatus.ERROR,
            message="Storage error",
            entity_id=character.name,
            errors=[str(e)],
        )

    logger.info(f"Added character: {character.name}")
    return OperationResult(
        status=ResultStatus.SUCCESS,
        message=f"Character '{character.name}' has been added",
        entity_id=character.name,
    )


def level_up(backend: BaseBackend, name: str) -> OperationResult:
    """Raise the level of every character with the given name by one.

    The full collection is written back only when at least one character
    matched.

    Args:
        backend: Active storage backend
        name: Character name, matched ignoring case

    Returns:
        Operation result; ``data["changes"]`` lists each level change
    """
    characters = backend.read_all()
    changes = []
    updated = []

    for character in characters:
        if names_match(character.name, name):
            promoted = character.leveled_up()
            changes.append(
                {
                    "name": character.name,
                    "old_level": character.level,
                    "new_level": promoted.level,
                }
            )
            updated.append(promoted)
        else:
            updated.append(character)

    if not changes:
        return OperationResult(
            status=ResultStatus.NOT_FOUND,
            message=f"Character '{name}' not found",
            entity_id=name,
        )

    try:
        backend.write_all(updated)
    except StorageWriteError as e:
        logger.error(f"Storage error leveling up {name}: {e}")
        return OperationResult(
            status=ResultStatus.ERROR,
            message="Storage error",
            entity_id=name,
            errors=[str(e)],
        )

    logger.info(f"Leveled up {len(changes)} character(s) named {name}")
    return OperationResult(
        status=ResultStatus.SUCCESS,
        message=f"'{changes[0]['name']}' has been leveled up",
        entity_id=changes[0]["name"],
        data={"changes": changes},
    )
