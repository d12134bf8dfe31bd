"""Credential checks and logging around upstream calls."""

from core.config import Config
from core.exceptions import CredentialsMissingError, UpstreamError
from core.jsonrpc import WpRequestArguments
from core.protocols import RequestLogger
from core.request_types import ProxiedRequest, ProxiedResponse
from core.upstream_url import normalize_tool_path
from services.upstream import UpstreamClient


class ProxyService:
    """Translate inbound requests and tool calls into WordPress REST calls."""

    def __init__(
        self,
        config: Config,
        logger: RequestLogger,
        upstream: UpstreamClient,
    ) -> None:
        self._settings = config.wordpress
        self._logger = logger
        self._upstream = upstream

    def ensure_configured(self) -> None:
        """Raise CredentialsMissingError before any network call is attempted."""
        if not self._settings.is_configured:
            raise CredentialsMissingError(self._settings.missing())

    async def forward(self, request: ProxiedRequest, *, route: str = "proxy") -> ProxiedResponse:
        """Forward a request to WordPress and decode its response."""
        self.ensure_configured()
        self._logger.log_proxy(request.method, self._upstream.url_for(request))
        try:
            return await self._upstream.send(request)
        except UpstreamError as e:
            self._logger.log_error(route, 500, e.message)
            raise

    async def call_tool(self, arguments: WpRequestArguments) -> ProxiedResponse:
        """Run a ``wp_request`` tool call; the path may carry its own query."""
        request = ProxiedRequest(
            method=arguments.method,
            path=normalize_tool_path(arguments.path),
            body=arguments.body,
        )
        return await self.forward(request, route="mcp")
