from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .errors import build_not_found_error

type LookupKind = Literal["code", "message"]


@dataclass(frozen=True, slots=True)
class Found:
    value: str

    @property
    def found(self) -> bool:
        return True

    def unwrap(self) -> str:
        return self.value

    def value_or(self, default: str) -> str:
        del default
        return self.value


@dataclass(frozen=True, slots=True)
class NotFound:
    """No entry exists for ``query``.

    ``kind`` names what was being looked up: ``"code"`` for ``code(message)``
    and ``"message"`` for ``message(code)``.
    """

    query: str
    key: str
    kind: LookupKind

    @property
    def found(self) -> bool:
        return False

    def unwrap(self) -> str:
        """Abort the caller with ``StatusNotFoundError``; use when a miss is a bug."""
        raise build_not_found_error(
            f"no {self.kind} is defined for {self.query!r}",
            self.query,
            self.key,
        )

    def value_or(self, default: str) -> str:
        return default


type LookupResult = Found | NotFound
