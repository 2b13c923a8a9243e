"""Schema Base Contract

Every schema variant implements validate() and inherits parse(),
safe_parse() and the wrapping entry points optional(), nullable() and
array(). Schemas are frozen dataclasses: builder methods always return a new
schema, so a schema handed to a caller never changes underneath it.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from shapeguard.config import get_settings
from shapeguard.logging import validation_logger

from .result import SafeParseFailure, SafeParseResult, SafeParseSuccess, ValidationResult

if TYPE_CHECKING:
    from .arrays import ArraySchema
    from .wrappers import NullableSchema, OptionalSchema

T = TypeVar("T")

log = validation_logger()


class _Undefined:
    """Marker for an absent value, distinct from None."""

    __slots__ = ()
    _instance: ClassVar[_Undefined | None] = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict) -> _Undefined:
        return self

    def __reduce__(self) -> tuple:
        return (_Undefined, ())


UNDEFINED = _Undefined()


class Schema(ABC, Generic[T]):
    """Base class for all schemas.

    T is the output type. It exists for type checkers only and has no
    runtime effect.
    """

    __slots__ = ()
    kind: ClassVar[str] = "schema"

    @abstractmethod
    def validate(self, value: Any) -> ValidationResult:
        """Check value and return a valid result with the output data or an invalid one with a reason."""

    def safe_parse(self, value: Any) -> SafeParseResult[T]:
        """Validate without raising."""
        if (result := self.validate(value)).is_valid:
            return SafeParseSuccess(result.data)
        return SafeParseFailure(result.to_error())

    def parse(self, value: Any) -> T:
        """Validate and return the output data, raising ValidationError on failure."""
        result = self.safe_parse(value)
        if result.success:
            return result.data
        if get_settings().LOG_FAILURES:
            log.debug("parse_failed", schema=self.kind, reason=result.error.message,
                constraint=result.error.constraint)
        raise result.error

    def optional(self) -> OptionalSchema[T]:
        from .wrappers import OptionalSchema
        return OptionalSchema(self)

    def nullable(self) -> NullableSchema[T]:
        from .wrappers import NullableSchema
        return NullableSchema(self)

    def array(self) -> ArraySchema[T]:
        from .arrays import ArraySchema
        return ArraySchema(self)
