from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class StatusErrorCode(StrEnum):
    E_STATUS_NOT_FOUND = "E_STATUS_NOT_FOUND"
    E_DATA_SOURCE_UNREADABLE = "E_DATA_SOURCE_UNREADABLE"
    E_DATA_SOURCE_MALFORMED = "E_DATA_SOURCE_MALFORMED"
    E_DATA_SOURCE_FORMAT_UNSUPPORTED = "E_DATA_SOURCE_FORMAT_UNSUPPORTED"
    E_DATA_PAYLOAD_INVALID = "E_DATA_PAYLOAD_INVALID"
    E_DATA_RECORD_INVALID = "E_DATA_RECORD_INVALID"
    E_DATA_DUPLICATE_KEY = "E_DATA_DUPLICATE_KEY"


@dataclass(frozen=True, slots=True)
class StatusErrorDetail:
    code: str
    message: str
    input_text: str
    witness: tuple[str, ...] | None = None


class DataError(ValueError):
    """The status definitions could not be read, parsed or validated."""

    def __init__(self, detail: StatusErrorDetail) -> None:
        super().__init__(f"{detail.code}: {detail.message}")
        self.detail = detail


class StatusNotFoundError(LookupError):
    """Raised when a missing lookup result is unwrapped."""

    def __init__(self, detail: StatusErrorDetail) -> None:
        super().__init__(f"{detail.code}: {detail.message}")
        self.detail = detail


def build_data_error(
    code: StatusErrorCode,
    message: str,
    input_text: str,
    witness: tuple[str, ...] | None = None,
) -> DataError:
    return DataError(
        StatusErrorDetail(
            code=code.value,
            message=message,
            input_text=input_text,
            witness=witness,
        )
    )


def build_not_found_error(message: str, input_text: str, key: str) -> StatusNotFoundError:
    return StatusNotFoundError(
        StatusErrorDetail(
            code=StatusErrorCode.E_STATUS_NOT_FOUND.value,
            message=message,
            input_text=input_text,
            witness=(key,),
        )
    )
