"""Validation Results

ValidationResult is what every schema's validate() returns: a valid outcome
carrying the (possibly transformed) data, or an invalid one carrying a single
reason. safe_parse() lifts it into SafeParseSuccess / SafeParseFailure.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Literal, TypeVar, Union

from shapeguard.errors import AppError, ErrorCode, Err, Ok, Result

from .errors import ValidationError

T = TypeVar("T")

DEFAULT_REASON = "data is invalid"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating one value against one schema."""
    is_valid: bool
    data: Any = None
    reason: str | None = None
    code: ErrorCode | None = None
    constraint: str | None = None

    @classmethod
    def valid(cls, data: Any) -> ValidationResult:
        return cls(is_valid=True, data=data)

    @classmethod
    def invalid(cls, reason: str | None = None, code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC, *,
                constraint: str | None = None) -> ValidationResult:
        return cls(is_valid=False, reason=reason, code=code, constraint=constraint)

    def to_error(self) -> ValidationError:
        """Build the exception parse() raises for an invalid result."""
        return ValidationError(message=self.reason or DEFAULT_REASON,
            code=self.code or ErrorCode.E2000_VALIDATION_GENERIC, constraint=self.constraint)


@dataclass(frozen=True, slots=True)
class SafeParseSuccess(Generic[T]):
    success: ClassVar[Literal[True]] = True
    data: T

    def to_result(self) -> Result[T, AppError]:
        return Ok(self.data)


@dataclass(frozen=True, slots=True)
class SafeParseFailure:
    success: ClassVar[Literal[False]] = False
    error: ValidationError

    def to_result(self) -> Result[Any, AppError]:
        return Err(self.error.to_app_error())


SafeParseResult = Union[SafeParseSuccess[T], SafeParseFailure]
