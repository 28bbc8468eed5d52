from .cache import (
    LookupCache,
    all_codes,
    all_messages,
    code,
    default_cache,
    is_valid_code,
    is_valid_message,
    message,
)
from .errors import DataError, StatusErrorCode, StatusErrorDetail, StatusNotFoundError
from .loader import (
    DuplicatePolicy,
    RecordSource,
    StatusTables,
    file_record_source,
    load,
    parse_status_records,
    read_status_records,
)
from .records import StatusRecord, normalize_key
from .results import Found, LookupResult, NotFound

__all__ = [
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
