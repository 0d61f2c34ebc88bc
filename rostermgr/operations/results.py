"""Result types for roster operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ResultStatus(Enum):
    """Status of an operation result."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    ERROR = "error"

    def is_success(self) -> bool:
        """Check if status indicates success."""
        return self is ResultStatus.SUCCESS


@dataclass
class OperationResult:
    """Result of a single roster operation."""

    status: ResultStatus
    message: str
    entity_id: str | None = None
    errors: list[str] | None = None
    data: dict[str, Any] | None = None

    @property
    def success(self) -> bool:
        """Check if the operation succeeded."""
        return self.status.is_success()
