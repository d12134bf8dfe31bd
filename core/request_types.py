"""Shared request data types."""

from dataclasses import dataclass
from typing import Any

from core.payload import ParsedJson, RawText


@dataclass(frozen=True)
class ProxiedRequest:
    """Inbound request reduced to what is forwarded upstream.

    ``path`` and ``query`` hold the raw, still-encoded strings. A ``body`` of
    None means nothing is sent upstream.
    """

    method: str
    path: str
    query: str | None = None
    body: Any = None


@dataclass(frozen=True)
class ProxiedResponse:
    """Upstream status and decoded body."""

    status_code: int
    url: str
    payload: ParsedJson | RawText

    def data(self) -> Any:
        return self.payload.as_json()
