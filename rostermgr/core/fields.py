"""Character field definitions and value coercion."""

from collections.abc import Iterable
from typing import Any

EQUIPMENT_DELIMITER = "|"

# Persisted field order, shared by both storage formats
FIELD_NAMES = ("name", "class", "level", "hitPoints", "equipment")

# Lowercased aliases accepted when reading documents
FIELD_ALIASES = {
    "name": "name",
    "class": "class",
    "level": "level",
    "hitpoints": "hitPoints",
    "hp": "hitPoints",
    "equipment": "equipment",
}

DEFAULT_LEVEL = 1
DEFAULT_HIT_POINTS = 0


def parse_equipment(
    value: str | list[str] | tuple[str, ...] | None,
) -> tuple[str, ...]:
    """Split an equipment value into individual item names.

    Accepts the pipe-joined string form or an already split list. Items are
    trimmed, blank items are dropped and list items holding the delimiter
    are split further.

    Raises:
        TypeError: If the value is neither a string nor a list of items.
    """
    if value is None:
        return ()

    if isinstance(value, (list, tuple)):
        value = EQUIPMENT_DELIMITER.join(str(item) for item in value)
    elif not isinstance(value, str):
        raise TypeError(
            f"Equipment must be a string or a list, not {type(value).__name__}"
        )

    items = value.split(EQUIPMENT_DELIMITER)

    return tuple(item.strip() for item in items if item.strip())


def join_equipment(items: Iterable[str]) -> str:
    """Join equipment items into the single persisted string."""
    return EQUIPMENT_DELIMITER.join(items)


def _to_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def coerce_level(value: Any) -> int:
    """Coerce raw input into a level, falling back to 1."""
    level = _to_int(value)
    if level is None or level < 1:
        return DEFAULT_LEVEL
    return level


def coerce_hit_points(value: Any) -> int:
    """Coerce raw input into hit points, falling back to 0."""
    hp = _to_int(value)
    if hp is None or hp < 0:
        return DEFAULT_HIT_POINTS
    return hp


def names_match(left: str, right: str) -> bool:
    """Case-insensitive comparison used for every name and class lookup."""
    return left.casefold() == right.casefold()
