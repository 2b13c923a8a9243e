"""Check Variants

A check is one atomic, ordered rule attached to a primitive or array schema.
Checks are immutable tagged records; the owning schema dispatches on their
type. Every check carries an optional custom message that replaces the
default reason when that check fails.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Union


# ============================================================================
# Length Checks (strings and arrays)
# ============================================================================

@dataclass(frozen=True, slots=True)
class MinLength:
    kind: ClassVar[str] = "min"
    value: int
    message: str | None = None


@dataclass(frozen=True, slots=True)
class MaxLength:
    kind: ClassVar[str] = "max"
    value: int
    message: str | None = None


@dataclass(frozen=True, slots=True)
class ExactLength:
    kind: ClassVar[str] = "length"
    value: int
    message: str | None = None


# ============================================================================
# String Checks
# ============================================================================

@dataclass(frozen=True, slots=True)
class Email:
    kind: ClassVar[str] = "email"
    message: str | None = None


@dataclass(frozen=True, slots=True)
class Regex:
    kind: ClassVar[str] = "regex"
    pattern: re.Pattern
    message: str | None = None


@dataclass(frozen=True, slots=True)
class Trim:
    """Transforms the value; the string schema stops evaluating after it."""
    kind: ClassVar[str] = "trim"
    message: str | None = None


# ============================================================================
# Number Checks
# ============================================================================

@dataclass(frozen=True, slots=True)
class Minimum:
    kind: ClassVar[str] = "min"
    value: int | float
    inclusive: bool
    message: str | None = None


@dataclass(frozen=True, slots=True)
class Maximum:
    kind: ClassVar[str] = "max"
    value: int | float
    inclusive: bool
    message: str | None = None


@dataclass(frozen=True, slots=True)
class Integer:
    kind: ClassVar[str] = "int"
    message: str | None = None


@dataclass(frozen=True, slots=True)
class MultipleOf:
    kind: ClassVar[str] = "multiple_of"
    value: int | float
    message: str | None = None


@dataclass(frozen=True, slots=True)
class Finite:
    kind: ClassVar[str] = "finite"
    message: str | None = None


StringCheck = Union[MinLength, MaxLength, ExactLength, Email, Regex, Trim]
NumberCheck = Union[Minimum, Maximum, Integer, MultipleOf, Finite]
ArrayCheck = Union[MinLength, MaxLength, ExactLength]
