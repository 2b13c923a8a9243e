"""Primitive Schemas

StringSchema and NumberSchema hold an ordered tuple of checks. Builder
methods append a check to a copy of that tuple, so schemas derived from a
common ancestor never observe each other's checks. Checks run in append order
and the first failing check decides the reason.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any, ClassVar

from shapeguard.errors import ErrorCode

from .base import Schema
from .checks import (
    Email,
    ExactLength,
    Finite,
    Integer,
    Maximum,
    MaxLength,
    MinLength,
    Minimum,
    MultipleOf,
    NumberCheck,
    Regex,
    StringCheck,
    Trim,
)
from .numeric import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER, is_finite, is_multiple_of
from .result import ValidationResult

# No leading dot, no ".." in the local part, one "@", dot-separated domain
# labels and an alphabetic TLD of two or more letters.
EMAIL_PATTERN = re.compile(
    r"(?!\.)(?!.*\.\.)[A-Z0-9_+,.-]*[A-Z0-9_+-]@(?:[A-Z0-9][A-Z0-9-]*\.)+[A-Z]{2,}",
    re.IGNORECASE,
)


def is_number(value: Any) -> bool:
    """True for int and float, but not bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# ============================================================================
# String
# ============================================================================

@dataclass(frozen=True, slots=True)
class StringSchema(Schema[str]):
    kind: ClassVar[str] = "string"
    checks: tuple[StringCheck, ...] = ()

    def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return ValidationResult.invalid(f"{value!r} is not a string", ErrorCode.E2004_INVALID_TYPE,
                constraint="type")

        for check in self.checks:
            match check:
                case MinLength(value=n) if len(value) < n:
                    reason, code = f"{value!r} should be at least {n} characters", ErrorCode.E2003_OUT_OF_RANGE
                case MaxLength(value=n) if len(value) > n:
                    reason, code = f"{value!r} should be {n} characters or fewer", ErrorCode.E2003_OUT_OF_RANGE
                case ExactLength(value=n) if len(value) != n:
                    reason, code = f"{value!r} should be {n} characters", ErrorCode.E2003_OUT_OF_RANGE
                case Email() if not EMAIL_PATTERN.fullmatch(value):
                    reason, code = "invalid email", ErrorCode.E2010_INVALID_EMAIL
                case Regex(pattern=pattern) if not pattern.search(value):
                    reason, code = f"{value!r} does not satisfy the given regex", ErrorCode.E2002_INVALID_FORMAT
                case Trim():
                    # Terminal: checks appended after trim() never run.
                    return ValidationResult.valid(value.strip())
                case _:
                    continue
            return ValidationResult.invalid(check.message or reason, code, constraint=check.kind)

        return ValidationResult.valid(value)

    def _add_check(self, check: StringCheck) -> StringSchema:
        return replace(self, checks=(*self.checks, check))

    def min(self, min_length: int, message: str | None = None) -> StringSchema:
        return self._add_check(MinLength(min_length, message))

    def max(self, max_length: int, message: str | None = None) -> StringSchema:
        return self._add_check(MaxLength(max_length, message))

    def length(self, length: int, message: str | None = None) -> StringSchema:
        return self._add_check(ExactLength(length, message))

    def email(self, message: str | None = None) -> StringSchema:
        return self._add_check(Email(message))

    def regex(self, pattern: str | re.Pattern, message: str | None = None) -> StringSchema:
        """Require a match anywhere in the value (re.search semantics)."""
        return self._add_check(Regex(re.compile(pattern), message))

    def trim(self, message: str | None = None) -> StringSchema:
        """Strip surrounding whitespace. Checks appended after this one are not evaluated."""
        return self._add_check(Trim(message))


# ============================================================================
# Number
# ============================================================================

@dataclass(frozen=True, slots=True)
class NumberSchema(Schema[float]):
    kind: ClassVar[str] = "number"
    checks: tuple[NumberCheck, ...] = ()

    def validate(self, value: Any) -> ValidationResult:
        if not is_number(value):
            return ValidationResult.invalid(f"{value!r} is not a number", ErrorCode.E2004_INVALID_TYPE,
                constraint="type")

        for check in self.checks:
            match check:
                case Minimum(value=bound, inclusive=True) if value < bound:
                    reason = f"{value} should be greater than or equal to {bound}"
                    code = ErrorCode.E2003_OUT_OF_RANGE
                case Minimum(value=bound, inclusive=False) if value <= bound:
                    reason, code = f"{value} should be greater than {bound}", ErrorCode.E2003_OUT_OF_RANGE
                case Maximum(value=bound, inclusive=True) if value > bound:
                    reason = f"{value} should be less than or equal to {bound}"
                    code = ErrorCode.E2003_OUT_OF_RANGE
                case Maximum(value=bound, inclusive=False) if value >= bound:
                    reason, code = f"{value} should be less than {bound}", ErrorCode.E2003_OUT_OF_RANGE
                case Integer() if not _is_integral(value):
                    reason, code = f"{value} is not an integer", ErrorCode.E2005_CONSTRAINT_VIOLATION
                case MultipleOf(value=step) if not is_multiple_of(value, step):
                    reason, code = f"{value} should be multiple of {step}", ErrorCode.E2005_CONSTRAINT_VIOLATION
                case Finite() if not is_finite(value):
                    reason, code = f"{value} is not a finite number", ErrorCode.E2005_CONSTRAINT_VIOLATION
                case _:
                    continue
            return ValidationResult.invalid(check.message or reason, code, constraint=check.kind)

        return ValidationResult.valid(value)

    def _add_check(self, check: NumberCheck) -> NumberSchema:
        return replace(self, checks=(*self.checks, check))

    def gt(self, value: int | float, message: str | None = None) -> NumberSchema:
        return self._add_check(Minimum(value, inclusive=False, message=message))

    def gte(self, value: int | float, message: str | None = None) -> NumberSchema:
        return self._add_check(Minimum(value, inclusive=True, message=message))

    def lt(self, value: int | float, message: str | None = None) -> NumberSchema:
        return self._add_check(Maximum(value, inclusive=False, message=message))

    def lte(self, value: int | float, message: str | None = None) -> NumberSchema:
        return self._add_check(Maximum(value, inclusive=True, message=message))

    def int(self, message: str | None = None) -> NumberSchema:
        return self._add_check(Integer(message))

    def positive(self, message: str | None = None) -> NumberSchema:
        return self.gt(0, message)

    def nonnegative(self, message: str | None = None) -> NumberSchema:
        return self.gte(0, message)

    def negative(self, message: str | None = None) -> NumberSchema:
        return self.lt(0, message)

    def nonpositive(self, message: str | None = None) -> NumberSchema:
        return self.lte(0, message)

    def multiple_of(self, value: int | float, message: str | None = None) -> NumberSchema:
        if not is_number(value) or not is_finite(value) or value == 0:
            raise ValueError(f"multiple_of() needs a non-zero finite number, got {value!r}")
        return self._add_check(MultipleOf(value, message))

    def finite(self, message: str | None = None) -> NumberSchema:
        return self._add_check(Finite(message))

    def safe(self, message: str | None = None) -> NumberSchema:
        """Bound the value to the safe integer range of a double, +/-(2**53 - 1)."""
        return self.gte(MIN_SAFE_INTEGER, message).lte(MAX_SAFE_INTEGER, message)


def _is_integral(value: int | float) -> bool:
    return isinstance(value, int) or value.is_integer()
