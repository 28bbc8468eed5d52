from __future__ import annotations

import pytest

import statuses

pytestmark = pytest.mark.unit


def test_public_api_surface_is_explicit_and_stable() -> None:
    assert statuses.__all__ == [
        "DataError",
        "DuplicatePolicy",
        "Found",
        "LookupCache",
        "LookupResult",
        "NotFound",
        "RecordSource",
        "StatusErrorCode",
        "StatusErrorDetail",
        "StatusNotFoundError",
        "StatusRecord",
        "StatusTables",
        "all_codes",
        "all_messages",
        "code",
        "default_cache",
        "file_record_source",
        "is_valid_code",
        "is_valid_message",
        "load",
        "message",
        "normalize_key",
        "parse_status_records",
        "read_status_records",
    ]
    assert not hasattr(statuses, "build_data_error")
    assert not hasattr(statuses, "resolve_codes_path")


def test_module_functions_share_the_default_cache() -> None:
    cache = statuses.default_cache()

    assert statuses.default_cache() is cache
    assert statuses.message("200") == cache.message("200")
    assert cache.is_ready
    assert statuses.all_codes() == cache.all_codes()
