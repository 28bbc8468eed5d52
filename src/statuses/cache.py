from __future__ import annotations

import logging
import threading

from .config import resolve_codes_path
from .errors import DataError, StatusErrorCode, StatusErrorDetail, build_data_error
from .loader import (
    DuplicatePolicy,
    RawRecord,
    RecordSource,
    StatusTables,
    load,
    read_status_records,
)
from .records import normalize_key
from .results import Found, LookupResult, NotFound

logger = logging.getLogger(__name__)


class LookupCache:
    """Bidirectional status lookup built once, on first use, from ``source``.

    The first query runs the source and the loader under a lock; every later
    query reads the published ``StatusTables`` without locking. A failed
    build is permanent: the source is not retried and each later query raises
    a ``DataError`` with the same detail.
    """

    def __init__(
        self,
        source: RecordSource,
        *,
        duplicate_policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS,
    ) -> None:
        self._source = source
        self._duplicate_policy = duplicate_policy
        self._lock = threading.Lock()
        self._tables: StatusTables | None = None
        self._failure: StatusErrorDetail | None = None

    @property
    def is_ready(self) -> bool:
        return self._tables is not None

    def tables(self) -> StatusTables:
        tables = self._tables
        if tables is not None:
            return tables
        with self._lock:
            if self._tables is None:
                if self._failure is not None:
                    raise DataError(self._failure)
                self._tables = self._build()
            return self._tables

    def code(self, message: str) -> LookupResult:
        key = normalize_key(message)
        value = self.tables().message_to_code.get(key)
        if value is None:
            return NotFound(query=message, key=key, kind="code")
        return Found(value)

    def message(self, code: str) -> LookupResult:
        key = normalize_key(code)
        value = self.tables().code_to_message.get(key)
        if value is None:
            return NotFound(query=code, key=key, kind="message")
        return Found(value)

    def is_valid_code(self, code: str) -> bool:
        return normalize_key(code) in self.tables().code_to_message

    def is_valid_message(self, message: str) -> bool:
        return normalize_key(message) in self.tables().message_to_code

    def all_codes(self) -> tuple[str, ...]:
        return tuple(self.tables().message_to_code.values())

    def all_messages(self) -> tuple[str, ...]:
        return tuple(self.tables().code_to_message.values())

    def _build(self) -> StatusTables:
        logger.debug("building status tables")
        try:
            tables = load(self._read_source(), duplicate_policy=self._duplicate_policy)
        except DataError as exc:
            self._failure = exc.detail
            logger.error("status tables could not be built: %s", exc)
            raise
        logger.debug("status tables ready: %d codes", tables.size)
        return tables

    def _read_source(self) -> tuple[RawRecord, ...]:
        try:
            return tuple(self._source())
        except DataError:
            raise
        except OSError as exc:
            raise build_data_error(
                StatusErrorCode.E_DATA_SOURCE_UNREADABLE,
                f"record source failed: {exc}",
                repr(self._source),
            ) from exc
        except Exception as exc:
            raise build_data_error(
                StatusErrorCode.E_DATA_SOURCE_MALFORMED,
                f"record source failed: {exc}",
                repr(self._source),
            ) from exc


def default_record_source() -> tuple[RawRecord, ...]:
    return read_status_records(resolve_codes_path())


_DEFAULT_CACHE = LookupCache(default_record_source)


def default_cache() -> LookupCache:
    return _DEFAULT_CACHE


def code(message: str) -> LookupResult:
    """Status code for a reason phrase, e.g. ``code("Forbidden")`` finds ``"403"``."""
    return _DEFAULT_CACHE.code(message)


def message(code: str) -> LookupResult:
    """Reason phrase for a status code, e.g. ``message("422")`` finds ``"Unprocessable Entity"``."""
    return _DEFAULT_CACHE.message(code)


def is_valid_code(code: str) -> bool:
    return _DEFAULT_CACHE.is_valid_code(code)


def is_valid_message(message: str) -> bool:
    return _DEFAULT_CACHE.is_valid_message(message)


def all_codes() -> tuple[str, ...]:
    return _DEFAULT_CACHE.all_codes()


def all_messages() -> tuple[str, ...]:
    return _DEFAULT_CACHE.all_messages()
