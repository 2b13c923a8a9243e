from __future__ import annotations

import pytest

import shapeguard as sg
from shapeguard import ErrorCode, ValidationError
from shapeguard.errors import Err, validation_error
from shapeguard.validation import ValidationResult


def test_parse_raises_the_safe_parse_error() -> None:
    schema = sg.string().email("bad email")

    failure = schema.safe_parse("nope").error
    with pytest.raises(ValidationError) as exc_info:
        schema.parse("nope")

    assert exc_info.value.message == failure.message == "bad email"
    assert exc_info.value.code is failure.code is ErrorCode.E2010_INVALID_EMAIL
    assert exc_info.value.constraint == "email"


def test_validation_error_is_an_exception() -> None:
    error = ValidationError("broken", constraint="min")

    assert isinstance(error, Exception)
    assert str(error) == "broken"
    assert error.args == ("broken",)
    assert error.to_dict() == {"error": {"type": "validation_error", "message": "broken",
        "code": "E2000_VALIDATION_GENERIC", "constraint": "min"}}


def test_validation_error_to_app_error() -> None:
    app_error = ValidationError("broken", ErrorCode.E2003_OUT_OF_RANGE, "max").to_app_error(origin="cli")

    assert app_error.code is ErrorCode.E2003_OUT_OF_RANGE
    assert app_error.origin == "cli"
    assert app_error.metadata == {"constraint": "max"}
    assert str(app_error) == "[E2003_OUT_OF_RANGE] broken"


def test_invalid_result_without_reason_uses_default() -> None:
    error = ValidationResult.invalid().to_error()

    assert error.message == "data is invalid"
    assert error.code is ErrorCode.E2000_VALIDATION_GENERIC


def test_validation_error_builder_drops_empty_metadata() -> None:
    result = validation_error("nope", constraint="min", origin="ingress", field=None)

    assert isinstance(result, Err)
    assert result.error.metadata == {"constraint": "min"}
    assert result.error.origin == "ingress"
