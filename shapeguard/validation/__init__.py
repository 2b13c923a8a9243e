"""Declarative Validation Engine

Schemas are built bottom-up with builder methods and validate top-down,
failing fast with a single reason.

Key Features:
- String, number and enum schemas with ordered, short-circuiting checks
- Optional / nullable wrappers and array schemas
- Object schemas with strip / passthrough / strict extra-key policies
- Structural combinators: extend, merge, pick, omit, partial, required
- Boundary helpers returning Result values instead of raising
"""
from .base import Schema, UNDEFINED
from .result import (
    ValidationResult,
    SafeParseSuccess,
    SafeParseFailure,
    SafeParseResult,
)
from .errors import ValidationError
from .checks import (
    MinLength,
    MaxLength,
    ExactLength,
    Email,
    Regex,
    Trim,
    Minimum,
    Maximum,
    Integer,
    MultipleOf,
    Finite,
)
from .numeric import is_multiple_of, scaled_remainder, MAX_SAFE_INTEGER, MIN_SAFE_INTEGER
from .primitives import StringSchema, NumberSchema
from .enums import EnumSchema
from .wrappers import OptionalSchema, NullableSchema
from .arrays import ArraySchema
from .objects import ObjectSchema, ExtraKeyPolicy
from .boundaries import (
    BoundaryValidator,
    parse_ingress,
    parse_external,
    parse_batch,
    validate_input,
)

__all__ = [
    # Core
    "Schema",
    "UNDEFINED",
    "ValidationResult",
    "SafeParseSuccess",
    "SafeParseFailure",
    "SafeParseResult",
    "ValidationError",
    # Checks
    "MinLength",
    "MaxLength",
    "ExactLength",
    "Email",
    "Regex",
    "Trim",
    "Minimum",
    "Maximum",
    "Integer",
    "MultipleOf",
    "Finite",
    # Numeric
    "is_multiple_of",
    "scaled_remainder",
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    # Schemas
    "StringSchema",
    "NumberSchema",
    "EnumSchema",
    "OptionalSchema",
    "NullableSchema",
    "ArraySchema",
    "ObjectSchema",
    "ExtraKeyPolicy",
    # Boundaries
    "BoundaryValidator",
    "parse_ingress",
    "parse_external",
    "parse_batch",
    "validate_input",
]
