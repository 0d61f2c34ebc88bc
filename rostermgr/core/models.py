"""Core data model for roster characters.

A Character carries exactly five persisted fields (name, class, level,
hit points, equipment). Both storage formats read and write the same five
fields; equipment is persisted as a single pipe-joined string.

Key components:
- Character: Immutable character record with derived views
"""

from typing import Any

import msgspec

from .fields import (
    DEFAULT_HIT_POINTS,
    DEFAULT_LEVEL,
    FIELD_ALIASES,
    coerce_hit_points,
    coerce_level,
    join_equipment,
    parse_equipment,
)


class Character(msgspec.Struct, frozen=True, kw_only=True):
    """Immutable role-playing-game character.

    Records are built fresh on every read and discarded once an operation
    finishes, so mutation is expressed as copies (see ``leveled_up``).

    Only values that both storage formats read back unchanged are accepted:
    text without surrounding whitespace, level of at least 1, non-negative
    hit points and trimmed, non-blank equipment items free of the delimiter.
    ``from_dict`` and ``build_character`` normalize raw input to that form.
    """

    name: str
    class_: str = msgspec.field(default="", name="class")
    level: int = DEFAULT_LEVEL
    hp: int = msgspec.field(default=DEFAULT_HIT_POINTS, name="hitPoints")
    equipment: tuple[str, ...] = ()

    def __post_init__(self):
        """Validate field values."""
        for label, text in (("name", self.name), ("class", self.class_)):
            if text != text.strip():
                raise ValueError(
                    f"Character {label} has surrounding whitespace: {text!r}"
                )
        if self.level < DEFAULT_LEVEL:
            raise ValueError(
                f"Level must be at least {DEFAULT_LEVEL}, got {self.level}"
            )
        if self.hp < 0:
            raise ValueError(f"Hit points cannot be negative, got {self.hp}")
        if parse_equipment(self.equipment) != tuple(self.equipment):
            raise ValueError(f"Invalid equipment items: {self.equipment!r}")

    @property
    def equipment_text(self) -> str:
        """Equipment as the pipe-joined persisted string."""
        return join_equipment(self.equipment)

    def with_level(self, level: int) -> "Character":
        """Return a copy with a different level."""
        return msgspec.structs.replace(self, level=level)

    def leveled_up(self) -> "Character":
        """Return a copy one level higher."""
        return self.with_level(self.level + 1)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the canonical document mapping.

        Returns:
            Dictionary keyed by the persisted field names, in field order.
        """
        return {
            "name": self.name,
            "class": self.class_,
            "level": self.level,
            "hitPoints": self.hp,
            "equipment": self.equipment_text,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Character":
        """Create a Character from a document mapping.

        Keys are matched case-insensitively and ``hp`` is accepted for
        ``hitPoints``. Numeric fields are coerced to their defaults when
        they are missing or invalid.

        Args:
            data: Mapping with character fields.

        Returns:
            New Character instance.
        """
        fields: dict[str, Any] = {}
        for key, value in data.items():
            canonical = FIELD_ALIASES.get(str(key).lower())
            if canonical is not None and canonical not in fields:
                fields[canonical] = value

        name = fields.get("name")
        class_name = fields.get("class")

        return cls(
            name="" if name is None else str(name).strip(),
            class_="" if class_name is None else str(class_name).strip(),
            level=coerce_level(fields.get("level")),
            hp=coerce_hit_points(fields.get("hitPoints")),
            equipment=parse_equipment(fields.get("equipment")),
        )
