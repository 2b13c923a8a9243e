from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterable

from shapeguard.errors import ErrorCode

from .base import Schema
from .result import ValidationResult


@dataclass(frozen=True, slots=True, init=False)
class EnumSchema(Schema[str]):
    """Closed set of string literals. Membership is exact and case-sensitive."""
    kind: ClassVar[str] = "enum"
    values: tuple[str, ...]

    def __init__(self, values: Iterable[str]):
        values = tuple(values)
        if not values:
            raise ValueError("enum() needs at least one value")
        if not all(isinstance(v, str) for v in values):
            raise TypeError(f"enum() values must be strings, got {values!r}")
        object.__setattr__(self, "values", values)

    def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return ValidationResult.invalid(f"{value!r} should be a string", ErrorCode.E2004_INVALID_TYPE,
                constraint="type")
        if value not in self.values:
            return ValidationResult.invalid(f"{value!r} is not a member of {', '.join(self.values)}",
                ErrorCode.E2005_CONSTRAINT_VIOLATION, constraint="enum")
        return ValidationResult.valid(value)

    @property
    def enum(self) -> dict[str, str]:
        """Literal-to-literal mapping, rebuilt on every access."""
        return {value: value for value in self.values}
