"""Wrapper Schemas

Each wrapper short-circuits one special value and delegates everything
else to its inner schema unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from .base import UNDEFINED, Schema
from .result import ValidationResult

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class OptionalSchema(Schema[T], Generic[T]):
    """Accepts UNDEFINED as valid without consulting the inner schema."""
    kind: ClassVar[str] = "optional"
    inner: Schema[T]

    def validate(self, value: Any) -> ValidationResult:
        if value is UNDEFINED:
            return ValidationResult.valid(UNDEFINED)
        return self.inner.validate(value)

    def unwrap(self) -> Schema[T]:
        return self.inner


@dataclass(frozen=True, slots=True)
class NullableSchema(Schema[T], Generic[T]):
    """Accepts None as valid without consulting the inner schema."""
    kind: ClassVar[str] = "nullable"
    inner: Schema[T]

    def validate(self, value: Any) -> ValidationResult:
        if value is None:
            return ValidationResult.valid(None)
        return self.inner.validate(value)

    def unwrap(self) -> Schema[T]:
        return self.inner
