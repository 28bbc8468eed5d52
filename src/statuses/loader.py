from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from types import MappingProxyType
from typing import Protocol, runtime_checkable

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from .errors import StatusErrorCode, build_data_error
from .records import StatusRecord

logger = logging.getLogger(__name__)

_JSON_SUFFIXES: tuple[str, ...] = (".json",)
_YAML_SUFFIXES: tuple[str, ...] = (".yaml", ".yml")

type RawRecord = StatusRecord | Mapping[str, object]


class DuplicatePolicy(StrEnum):
    LAST_WINS = "last_wins"
    REJECT = "reject"


@runtime_checkable
class RecordSource(Protocol):
    def __call__(self) -> Iterable[RawRecord]: ...


@dataclass(frozen=True, slots=True)
class StatusTables:
    """Both lookup directions, keyed by normalized code or message."""

    code_to_message: Mapping[str, str]
    message_to_code: Mapping[str, str]

    @property
    def size(self) -> int:
        return len(self.code_to_message)


def load(
    records: Iterable[RawRecord],
    *,
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS,
) -> StatusTables:
    """Build both lookup tables from one pass over ``records``.

    With ``DuplicatePolicy.LAST_WINS`` a later record whose normalized code
    (or message) matches an earlier one replaces that entry. With
    ``DuplicatePolicy.REJECT`` the first collision raises ``DataError``.
    Nothing is returned unless both tables are complete.
    """
    code_to_message: dict[str, str] = {}
    message_to_code: dict[str, str] = {}
    for index, raw in enumerate(records):
        record = _coerce_record(raw, index=index)
        _insert(
            code_to_message,
            record.code_key,
            record.message,
            field_name="code",
            index=index,
            duplicate_policy=duplicate_policy,
        )
        _insert(
            message_to_code,
            record.message_key,
            record.code,
            field_name="message",
            index=index,
            duplicate_policy=duplicate_policy,
        )
    return StatusTables(
        code_to_message=MappingProxyType(code_to_message),
        message_to_code=MappingProxyType(message_to_code),
    )


def parse_status_records(payload: object, *, origin: str = "<payload>") -> tuple[StatusRecord, ...]:
    if not isinstance(payload, list):
        raise build_data_error(
            StatusErrorCode.E_DATA_PAYLOAD_INVALID,
            "status definitions must be a list of {code, message} mappings",
            origin,
        )
    return tuple(_coerce_record(entry, index=index) for index, entry in enumerate(payload))


def read_status_records(path: Path | str) -> tuple[StatusRecord, ...]:
    target = Path(path)
    suffix = target.suffix.lower()
    decode: Callable[[str], object]
    if suffix in _JSON_SUFFIXES:
        decode = json.loads
    elif suffix in _YAML_SUFFIXES:
        decode = yaml.safe_load
    else:
        raise build_data_error(
            StatusErrorCode.E_DATA_SOURCE_FORMAT_UNSUPPORTED,
            f"unsupported definition file suffix: {suffix or '<none>'}",
            target.as_posix(),
        )

    try:
        text = target.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise build_data_error(
            StatusErrorCode.E_DATA_SOURCE_UNREADABLE,
            f"cannot read definition file: {exc}",
            target.as_posix(),
        ) from exc

    try:
        payload = decode(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise build_data_error(
            StatusErrorCode.E_DATA_SOURCE_MALFORMED,
            f"invalid definition payload: {exc}",
            target.as_posix(),
        ) from exc

    records = parse_status_records(payload, origin=target.as_posix())
    logger.debug("read %d status records from %s", len(records), target.as_posix())
    return records


def file_record_source(path: Path | str) -> RecordSource:
    target = Path(path)

    def source() -> tuple[StatusRecord, ...]:
        return read_status_records(target)

    return source


def _coerce_record(raw: object, *, index: int) -> StatusRecord:
    if isinstance(raw, StatusRecord):
        return raw
    if not isinstance(raw, Mapping):
        raise build_data_error(
            StatusErrorCode.E_DATA_RECORD_INVALID,
            f"record {index} must be a mapping with code and message",
            repr(raw),
            witness=(str(index),),
        )
    try:
        return StatusRecord.model_validate(dict(raw))
    except ValidationError as exc:
        fields = tuple(sorted({".".join(str(part) for part in err["loc"]) for err in exc.errors()}))
        raise build_data_error(
            StatusErrorCode.E_DATA_RECORD_INVALID,
            f"record {index} is invalid: {', '.join(fields) or 'record'}",
            repr(dict(raw)),
            witness=(str(index), *fields),
        ) from exc


def _insert(
    table: dict[str, str],
    key: str,
    value: str,
    *,
    field_name: str,
    index: int,
    duplicate_policy: DuplicatePolicy,
) -> None:
    previous = table.get(key)
    if previous is not None:
        if duplicate_policy is DuplicatePolicy.REJECT:
            raise build_data_error(
                StatusErrorCode.E_DATA_DUPLICATE_KEY,
                f"record {index} repeats {field_name} key '{key}'",
                key,
                witness=(str(index), field_name),
            )
        logger.debug(
            "record %d overwrites %s key %r (%r -> %r)", index, field_name, key, previous, value
        )
    table[key] = value
