"""Shared protocol definitions."""

from typing import Any, Protocol


class RequestLogger(Protocol):
    """Protocol for request logging (Dashboard)."""

    def log_proxy(self, method: str, url: str) -> None: ...
    def log_rpc(
        self,
        method: str | None,
        request_id: Any,
        *,
        tool: str | None = None,
    ) -> None: ...
    def log_error(self, route: str, status: int, message: str) -> None: ...
