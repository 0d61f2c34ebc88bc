"""Roster operations: listing, searching, adding and leveling up."""

from rostermgr.operations.results import OperationResult, ResultStatus
from rostermgr.operations.roster import (
    add_character,
    build_character,
    find_character,
    find_characters_by_class,
    level_up,
    list_characters,
)

__all__ = [
    "OperationResult",
    "ResultStatus",
    "add_character",
    "build_character",
    "find_character",
    "find_characters_by_class",
    "level_up",
    "list_characters",
]
