"""Validation at System Boundaries

Parse-don't-validate helpers for the places untrusted data enters a program:
- Ingress: request bodies, form submissions, config files
- External services: third-party API responses, webhook payloads

Each helper turns a schema failure into an Err carrying an AppError instead
of raising, and logs the failure once at the boundary.
"""
from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Generic, TypeVar

from shapeguard.errors import AppError, Err, Ok, Result, sequence_results, validation_error
from shapeguard.logging import boundary_logger

from .base import Schema

T = TypeVar("T")

log = boundary_logger()


class BoundaryValidator(Generic[T]):
    """Stateless boundary validator for a specific schema.

    Usage:
        user_boundary = BoundaryValidator(user_schema, name="user")
        result = user_boundary.parse_ingress(payload)
    """

    __slots__ = ("schema", "name")

    def __init__(self, schema: Schema[T], name: str | None = None):
        self.schema, self.name = schema, name or schema.kind

    def parse_ingress(self, data: Any) -> Result[T, AppError]:
        """Parse data entering the system."""
        result = self.schema.safe_parse(data)
        if result.success:
            return Ok(result.data)
        log.warning("ingress_validation_failed", schema=self.name, reason=result.error.message,
            constraint=result.error.constraint)
        return Err(result.error.to_app_error(origin="ingress").with_metadata(schema=self.name))

    def parse_external(self, data: Any, service_name: str = "external") -> Result[T, AppError]:
        """Parse a response received from another service."""
        result = self.schema.safe_parse(data)
        if result.success:
            return Ok(result.data)
        log.warning("external_validation_failed", schema=self.name, service=service_name,
            reason=result.error.message)
        return validation_error(f"{service_name} returned invalid data: {result.error.message}",
            code=result.error.code, constraint=result.error.constraint, schema=self.name,
            origin="external", service=service_name)

    def parse_batch(self, items: list[Any]) -> Result[list[T], AppError]:
        """Parse every item, stopping at the first invalid one.

        The Err carries the failing item's position as batch_index metadata.
        """
        results = []
        for idx, item in enumerate(items):
            result = self.parse_ingress(item)
            if result.is_err():
                return Err(result.unwrap_err().with_metadata(batch_index=idx))
            results.append(result)
        return sequence_results(results)


# ============================================================================
# Functional Boundary Parsers
# ============================================================================

def parse_ingress(schema: Schema[T], data: Any) -> Result[T, AppError]:
    """Parse and validate incoming data.

    Usage:
        result = parse_ingress(user_schema, json.loads(body))
        if result.is_err():
            return error_response(result.unwrap_err())
        user = result.unwrap()
    """
    return BoundaryValidator(schema).parse_ingress(data)


def parse_external(schema: Schema[T], data: Any, service_name: str = "external") -> Result[T, AppError]:
    """Parse and validate external service response.

    Usage:
        result = parse_external(weather_schema, response.json(), "weather_api")
    """
    return BoundaryValidator(schema).parse_external(data, service_name)


def parse_batch(schema: Schema[T], items: list[Any]) -> Result[list[T], AppError]:
    """Parse a list of payloads with one schema, failing fast."""
    return BoundaryValidator(schema).parse_batch(items)


# ============================================================================
# Decorator-based Boundary Validation
# ============================================================================

def validate_input(schema: Schema[Any]) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorator that parses the wrapped function's first positional argument.

    The function receives the parsed value; a failure raises ValidationError
    before the function body runs.

    Usage:
        @validate_input(user_schema)
        def create_user(user: dict) -> None:
            ...
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(data: Any, *args, **kwargs) -> T:
            return func(schema.parse(data), *args, **kwargs)
        return wrapper
    return decorator

