"""Core roster data model.

- **Character**: Immutable record with five persisted fields
- **fields**: Equipment parsing and numeric coercion helpers
- **exceptions**: Error taxonomy shared by storage and operations
"""

from rostermgr.core.exceptions import (
    MalformedStoreError,
    RosterError,
    StorageError,
    StorageWriteError,
)
from rostermgr.core.fields import (
    EQUIPMENT_DELIMITER,
    FIELD_NAMES,
    coerce_hit_points,
    coerce_level,
    join_equipment,
    names_match,
    parse_equipment,
)
from rostermgr.core.models import Character

__all__ = [
    "Character",
    "EQUIPMENT_DELIMITER",
    "FIELD_NAMES",
    "coerce_hit_points",
    "coerce_level",
    "join_equipment",
    "names_match",
    "parse_equipment",
    "RosterError",
    "StorageError",
    "StorageWriteError",
    "MalformedStoreError",
]
