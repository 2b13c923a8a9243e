"""Validation Error

The single failure type of the engine. A failure is collapsed at the point
where it happens into one human-readable reason; nested schemas propagate
that reason verbatim, so there is no field path to carry.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from shapeguard.errors import AppError, ErrorCode


@dataclass(eq=False)
class ValidationError(Exception):
    """Raised by Schema.parse() and carried by SafeParseFailure.

    - message: the reason, either a check's default text or its custom message
    - code: error code from the E2xxx taxonomy
    - constraint: name of the failing check (e.g. "min", "email", "type")
    """
    message: str
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC
    constraint: str | None = None

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_app_error(self, origin: str = "") -> AppError:
        """Convert to AppError for the Result-based error handling."""
        metadata = {"constraint": self.constraint} if self.constraint else {}
        return AppError(code=self.code, message=self.message, origin=origin, metadata=metadata)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for API responses."""
        return {"error": {"type": "validation_error", "message": self.message,
            "code": self.code.name, "constraint": self.constraint}}
