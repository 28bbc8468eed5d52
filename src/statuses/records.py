from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def normalize_key(value: str) -> str:
    """Lookup key for a code or message: lowercased, surrounding whitespace removed."""
    return value.lower().strip()


class StatusRecord(BaseModel):
    """One canonical (code, message) pair, stored exactly as defined."""

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    code: str = Field(min_length=1)
    message: str = Field(min_length=1)

    @field_validator("code", "message")
    @classmethod
    def _reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("value must contain non-whitespace characters")
        return value

    @property
    def code_key(self) -> str:
        return normalize_key(self.code)

    @property
    def message_key(self) -> str:
        return normalize_key(self.message)
