from __future__ import annotations

import pytest

from statuses.errors import (
    DataError,
    StatusErrorCode,
    StatusNotFoundError,
    build_data_error,
)
from statuses.results import Found, NotFound

pytestmark = pytest.mark.unit


def test_found_exposes_value() -> None:
    result = Found("Not Found")

    assert result.found
    assert result.unwrap() == "Not Found"
    assert result.value_or("fallback") == "Not Found"


def test_not_found_value_or_returns_default() -> None:
    result = NotFound(query="999", key="999", kind="message")

    assert not result.found
    assert result.value_or("Unknown") == "Unknown"


def test_not_found_unwrap_raises_typed_error() -> None:
    result = NotFound(query=" Teapot ", key="teapot", kind="code")

    with pytest.raises(StatusNotFoundError) as exc_info:
        result.unwrap()

    detail = exc_info.value.detail
    assert detail.code == StatusErrorCode.E_STATUS_NOT_FOUND
    assert detail.input_text == " Teapot "
    assert detail.witness == ("teapot",)
    assert "no code is defined for ' Teapot '" in str(exc_info.value)
    assert isinstance(exc_info.value, LookupError)


def test_results_support_structural_matching() -> None:
    def describe(result: Found | NotFound) -> str:
        match result:
            case Found(value=value):
                return value
            case NotFound(kind=kind):
                return f"missing {kind}"

    assert describe(Found("OK")) == "OK"
    assert describe(NotFound(query="x", key="x", kind="message")) == "missing message"


def test_build_data_error_carries_detail() -> None:
    error = build_data_error(
        StatusErrorCode.E_DATA_RECORD_INVALID,
        "record 3 is invalid: code",
        "{}",
        witness=("3", "code"),
    )

    assert isinstance(error, DataError)
    assert isinstance(error, ValueError)
    assert str(error) == "E_DATA_RECORD_INVALID: record 3 is invalid: code"
    assert error.detail.witness == ("3", "code")
