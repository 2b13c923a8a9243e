"""Error Builders"""
from .types import AppError, ErrorCode, Err


def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    constraint: str | None = None,
    schema: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Wrap a validation failure in Err. Metadata entries that are None are dropped."""
    meta = {"constraint": constraint, "schema": schema, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        origin=origin,
        metadata={k: v for k, v in meta.items() if v is not None},
    ))
