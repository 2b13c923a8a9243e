from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, ClassVar, Generic, TypeVar

from shapeguard.errors import ErrorCode

from .base import Schema
from .checks import ArrayCheck, ExactLength, MaxLength, MinLength
from .result import ValidationResult

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ArraySchema(Schema[list[T]], Generic[T]):
    """List or tuple whose every element satisfies the element schema.

    Order of evaluation: type gate, nonempty flag, length checks in append
    order, then elements by index. The first failing element's reason is
    returned as is, without its index.
    """
    kind: ClassVar[str] = "array"
    element: Schema[T]
    checks: tuple[ArrayCheck, ...] = ()
    is_nonempty: bool = False
    nonempty_message: str | None = None

    def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, (list, tuple)):
            return ValidationResult.invalid(f"{value!r} is not an array", ErrorCode.E2004_INVALID_TYPE,
                constraint="type")

        if self.is_nonempty and not value:
            return ValidationResult.invalid(self.nonempty_message or f"{value!r} should be non empty",
                ErrorCode.E2003_OUT_OF_RANGE, constraint="nonempty")

        size = len(value)
        for check in self.checks:
            match check:
                case MinLength(value=n) if size < n:
                    reason = f"{value!r}'s length should be greater or equal to {n}"
                case MaxLength(value=n) if size > n:
                    reason = f"{value!r}'s length should be less or equal to {n}"
                case ExactLength(value=n) if size != n:
                    reason = f"{value!r}'s length should be {n}"
                case _:
                    continue
            return ValidationResult.invalid(check.message or reason, ErrorCode.E2003_OUT_OF_RANGE,
                constraint=check.kind)

        items = []
        for item in value:
            if not (result := self.element.validate(item)).is_valid:
                return result
            items.append(result.data)
        return ValidationResult.valid(items)

    def _add_check(self, check: ArrayCheck) -> ArraySchema[T]:
        return replace(self, checks=(*self.checks, check))

    def min(self, min_length: int, message: str | None = None) -> ArraySchema[T]:
        return self._add_check(MinLength(min_length, message))

    def max(self, max_length: int, message: str | None = None) -> ArraySchema[T]:
        return self._add_check(MaxLength(max_length, message))

    def length(self, length: int, message: str | None = None) -> ArraySchema[T]:
        return self._add_check(ExactLength(length, message))

    def nonempty(self, message: str | None = None) -> ArraySchema[T]:
        return replace(self, is_nonempty=True, nonempty_message=message)
