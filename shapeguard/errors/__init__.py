"""Result-based Error Handling

For callers that prefer values over exceptions.

Usage:
    from shapeguard.errors import Ok, Err

    match boundary.parse_ingress(payload):
        case Ok(data):
            store(data)
        case Err(error):
            log.warning(error.message, code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    sequence_results,
)

from .builders import (
    validation_error,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "sequence_results",
    "validation_error",
]
