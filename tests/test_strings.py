"""String schema: type gate, ordered checks, custom messages and trim."""
from __future__ import annotations

import dataclasses
import re

import pytest

import shapeguard as sg
from shapeguard import ErrorCode, ValidationError


def test_type_gate() -> None:
    schema = sg.string()

    assert schema.safe_parse("1").success
    assert not schema.safe_parse(1).success
    assert schema.parse("1") == "1"
    with pytest.raises(ValidationError, match="is not a string"):
        schema.parse(1)


def test_type_gate_runs_before_checks() -> None:
    result = sg.string().min(1, "custom").safe_parse(None)

    assert result.error.message == "None is not a string"
    assert result.error.code is ErrorCode.E2004_INVALID_TYPE


def test_min() -> None:
    min_five = sg.string().min(5)

    assert min_five.parse("abcde") == "abcde"
    with pytest.raises(ValidationError) as exc_info:
        min_five.parse("a")
    assert str(exc_info.value) == "'a' should be at least 5 characters"
    assert exc_info.value.constraint == "min"


def test_max() -> None:
    max_five = sg.string().max(5)

    assert max_five.parse("a") == "a"
    assert max_five.parse("abcde") == "abcde"
    with pytest.raises(ValidationError, match="5 characters or fewer"):
        max_five.parse("abcdef")


def test_length() -> None:
    five = sg.string().length(5)

    assert five.parse("abcde") == "abcde"
    with pytest.raises(ValidationError):
        five.parse("a")
    with pytest.raises(ValidationError):
        five.parse("abcdef")


@pytest.mark.parametrize("address", ["test@gmail.com", "A.B@Example.ORG", "first+tag@mail.co.uk", "x_y-z@a-b.io",
    "last,first@mail.com"])
def test_email_accepts(address: str) -> None:
    assert sg.string().email().parse(address) == address


@pytest.mark.parametrize("address", ["test@", ".lead@gmail.com", "two..dots@gmail.com", "a@b.c", "no-at-sign.com",
    "a@@b.com", "trailing.@gmail.com", "a@b.com\n"])
def test_email_rejects(address: str) -> None:
    result = sg.string().email().safe_parse(address)

    assert not result.success
    assert result.error.message == "invalid email"
    assert result.error.code is ErrorCode.E2010_INVALID_EMAIL


def test_regex_searches_anywhere() -> None:
    starts_with_hello = sg.string().regex(r"^hello")

    assert starts_with_hello.parse("hello world") == "hello world"
    with pytest.raises(ValidationError, match="does not satisfy the given regex"):
        starts_with_hello.parse("abc")
    assert sg.string().regex("ell").parse("hello") == "hello"


def test_regex_accepts_compiled_pattern() -> None:
    schema = sg.string().regex(re.compile(r"^[a-z]+$", re.IGNORECASE))

    assert schema.parse("Hello") == "Hello"
    assert not schema.safe_parse("hello1").success


def test_trim_transforms_value() -> None:
    assert sg.string().trim().parse(" hello") == "hello"
    assert sg.string().trim().parse("\t hi \n") == "hi"


def test_trim_is_terminal() -> None:
    # min(10) is appended after trim() and never evaluated
    assert sg.string().trim().min(10).parse(" hi ") == "hi"


def test_checks_before_trim_see_untrimmed_value() -> None:
    schema = sg.string().min(3).trim()

    assert schema.parse(" a ") == "a"
    assert not schema.safe_parse("a").success


def test_custom_message_overrides_only_its_check() -> None:
    schema = sg.string().min(2, "too short").max(4)

    assert schema.safe_parse("a").error.message == "too short"
    assert schema.safe_parse("abcdef").error.message == "'abcdef' should be 4 characters or fewer"


def test_first_failing_check_decides() -> None:
    schema = sg.string().min(5, "first").length(2, "second")

    assert schema.safe_parse("abc").error.message == "first"


def test_builders_copy_checks() -> None:
    base = sg.string()
    short = base.max(2)
    long = base.min(5)

    assert base.checks == ()
    assert len(short.checks) == 1
    assert len(long.checks) == 1
    assert short.parse("ab") == "ab"
    assert long.parse("abcdef") == "abcdef"


def test_siblings_from_common_ancestor_stay_independent() -> None:
    ancestor = sg.string().min(1)
    with_max = ancestor.max(3)
    with_email = ancestor.email()

    assert with_max.parse("ab") == "ab"
    assert not with_email.safe_parse("ab").success
    assert ancestor.checks == (sg.validation.MinLength(1),)


def test_schema_is_frozen() -> None:
    schema = sg.string()

    with pytest.raises(dataclasses.FrozenInstanceError):
        schema.checks = (sg.validation.Trim(),)
