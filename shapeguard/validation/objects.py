"""Object Schema

Shape reconciliation for plain records (dicts):

1. Type gate. Values that are objects but not plain records (None, arrays,
   awaitables, patterns, dates, sets, other mappings) each fail with their
   own reason.
2. Every shape key must be present in the input, in shape declaration order.
3. Input keys outside the shape are extra keys; the policy decides whether
   they are dropped (strip), kept (passthrough) or rejected (strict).
4. Declared fields are validated in input order; the first failure wins.

Structural combinators never touch the receiver and return a new schema.
"""
from __future__ import annotations

import inspect
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from datetime import date, time
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar

from shapeguard.errors import ErrorCode

from .base import Schema
from .enums import EnumSchema
from .result import ValidationResult
from .wrappers import OptionalSchema

Mask = Mapping[str, Any] | Iterable[str]


class ExtraKeyPolicy(str, Enum):
    """How an object schema treats input keys missing from its shape."""
    STRIP = "strip"
    PASSTHROUGH = "passthrough"
    STRICT = "strict"


def _is_thenable(value: Any) -> bool:
    return inspect.isawaitable(value) or (
        callable(getattr(value, "then", None)) and callable(getattr(value, "catch", None)))


def _non_record_reason(value: Any) -> str | None:
    """Why value is not a plain record, or None if it is one."""
    if value is None:
        return f"{value!r} is null"
    if isinstance(value, (list, tuple)):
        return f"{value!r} is an array"
    if _is_thenable(value):
        return f"{value!r} is a promise"
    if isinstance(value, re.Pattern):
        return f"{value!r} is a regex"
    if isinstance(value, (date, time)):
        return f"{value!r} is a date"
    if isinstance(value, (set, frozenset)):
        return f"{value!r} is a set"
    if isinstance(value, Mapping) and not isinstance(value, dict):
        return f"{value!r} is a map"
    if not isinstance(value, dict):
        return f"{value!r} is not an object"
    return None


def _selected_keys(mask: Mask) -> set[str]:
    """Keys a mask selects: truthy entries of a mapping, or every name of an iterable."""
    if isinstance(mask, (str, bytes)):
        raise TypeError(f"mask must be a mapping or an iterable of field names, got {mask!r}")
    if isinstance(mask, Mapping):
        return {key for key, flag in mask.items() if flag}
    return set(mask)


@dataclass(frozen=True, slots=True, init=False)
class ObjectSchema(Schema[dict[str, Any]]):
    kind: ClassVar[str] = "object"
    shape: Mapping[str, Schema]
    policy: ExtraKeyPolicy

    def __init__(self, shape: Mapping[str, Schema], policy: ExtraKeyPolicy = ExtraKeyPolicy.STRIP):
        for key, field in shape.items():
            if not isinstance(field, Schema):
                raise TypeError(f"shape field {key!r} must be a Schema, got {type(field).__name__}")
        object.__setattr__(self, "shape", MappingProxyType(dict(shape)))
        object.__setattr__(self, "policy", ExtraKeyPolicy(policy))

    def __hash__(self) -> int:
        return hash((frozenset(self.shape.items()), self.policy))

    def validate(self, value: Any) -> ValidationResult:
        if (reason := _non_record_reason(value)) is not None:
            return ValidationResult.invalid(reason, ErrorCode.E2004_INVALID_TYPE, constraint="type")

        for key in self.shape:
            if key not in value:
                return ValidationResult.invalid(f"{key} is in shape, but not in data",
                    ErrorCode.E2001_REQUIRED_FIELD_MISSING, constraint="required")

        extra_keys = [key for key in value if key not in self.shape]
        if extra_keys and self.policy is ExtraKeyPolicy.STRICT:
            return ValidationResult.invalid(f"extra key(s) found: {', '.join(map(str, extra_keys))}",
                ErrorCode.E2005_CONSTRAINT_VIOLATION, constraint="strict")

        reshaped: dict[Any, Any] = {}
        for key, item in value.items():
            if (field := self.shape.get(key)) is None:
                # Extra key: dropped under strip, copied unvalidated otherwise.
                if self.policy is not ExtraKeyPolicy.STRIP:
                    reshaped[key] = item
                continue
            if not (result := field.validate(item)).is_valid:
                return result
            reshaped[key] = result.data
        return ValidationResult.valid(reshaped)

    # ------------------------------------------------------------------
    # Extra-key policy
    # ------------------------------------------------------------------

    def passthrough(self) -> ObjectSchema:
        return replace(self, policy=ExtraKeyPolicy.PASSTHROUGH)

    def strict(self) -> ObjectSchema:
        return replace(self, policy=ExtraKeyPolicy.STRICT)

    def strip(self) -> ObjectSchema:
        return replace(self, policy=ExtraKeyPolicy.STRIP)

    # ------------------------------------------------------------------
    # Structural combinators
    # ------------------------------------------------------------------

    def keyof(self) -> EnumSchema:
        """Enum of the shape's field names."""
        return EnumSchema(self.shape.keys())

    def extend(self, fields: Mapping[str, Schema]) -> ObjectSchema:
        """Add fields; a field named like an existing one replaces it."""
        return replace(self, shape={**self.shape, **fields})

    def merge(self, other: ObjectSchema) -> ObjectSchema:
        return self.extend(other.shape)

    def pick(self, mask: Mask) -> ObjectSchema:
        keys = _selected_keys(mask)
        return replace(self, shape={key: field for key, field in self.shape.items() if key in keys})

    def omit(self, mask: Mask) -> ObjectSchema:
        keys = _selected_keys(mask)
        return replace(self, shape={key: field for key, field in self.shape.items() if key not in keys})

    def partial(self, mask: Mask | None = None) -> ObjectSchema:
        """Make the selected fields (all when no mask is given) accept UNDEFINED."""
        keys = self.shape.keys() if mask is None else _selected_keys(mask)
        return replace(self, shape={key: field.optional() if key in keys else field
            for key, field in self.shape.items()})

    def required(self, mask: Mask | None = None) -> ObjectSchema:
        """Strip every Optional layer from the selected fields (all when no mask is given)."""
        keys = self.shape.keys() if mask is None else _selected_keys(mask)
        shape = {}
        for key, field in self.shape.items():
            if key in keys:
                while isinstance(field, OptionalSchema):
                    field = field.unwrap()
            shape[key] = field
        return replace(self, shape=shape)
