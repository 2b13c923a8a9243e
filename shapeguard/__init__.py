"""shapeguard: composable runtime validation for untrusted data.

Usage:
    import shapeguard as sg

    person = sg.object({
        "name": sg.string().min(1),
        "age": sg.number().int().nonnegative(),
        "blood_type": sg.enum(["A", "B", "AB", "O"]),
        "email": sg.string().email().optional(),
    })

    person.parse({"name": "mike", "age": 20, "blood_type": "A", "email": sg.UNDEFINED})

    result = person.safe_parse(payload)
    if not result.success:
        print(result.error)
"""
from collections.abc import Iterable, Mapping
from typing import TypeVar

from .errors import AppError, ErrorCode, Err, Ok, Result
from .validation import (
    UNDEFINED,
    ArraySchema,
    BoundaryValidator,
    EnumSchema,
    ExtraKeyPolicy,
    NullableSchema,
    NumberSchema,
    ObjectSchema,
    OptionalSchema,
    SafeParseFailure,
    SafeParseSuccess,
    Schema,
    StringSchema,
    ValidationError,
    ValidationResult,
    parse_batch,
    parse_external,
    parse_ingress,
    validate_input,
)

__version__ = "0.1.0"

T = TypeVar("T")


def string() -> StringSchema:
    return StringSchema()


def number() -> NumberSchema:
    return NumberSchema()


def enum(values: Iterable[str]) -> EnumSchema:
    return EnumSchema(values)


def optional(schema: Schema[T]) -> OptionalSchema[T]:
    return OptionalSchema(schema)


def nullable(schema: Schema[T]) -> NullableSchema[T]:
    return NullableSchema(schema)


def array(schema: Schema[T]) -> ArraySchema[T]:
    return ArraySchema(schema)


def object(shape: Mapping[str, Schema]) -> ObjectSchema:
    return ObjectSchema(shape)


__all__ = [
    # Constructors
    "string",
    "number",
    "enum",
    "optional",
    "nullable",
    "array",
    "object",
    # Schemas
    "Schema",
    "StringSchema",
    "NumberSchema",
    "EnumSchema",
    "OptionalSchema",
    "NullableSchema",
    "ArraySchema",
    "ObjectSchema",
    "ExtraKeyPolicy",
    "UNDEFINED",
    # Results and errors
    "ValidationResult",
    "SafeParseSuccess",
    "SafeParseFailure",
    "ValidationError",
    "AppError",
    "ErrorCode",
    "Result",
    "Ok",
    "Err",
    # Boundaries
    "BoundaryValidator",
    "parse_ingress",
    "parse_external",
    "parse_batch",
    "validate_input",
]
