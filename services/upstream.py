"""HTTP client for the WordPress REST API."""

import httpx

from core.config import WordPressSettings
from core.exceptions import UpstreamConnectionError, UpstreamTimeoutError
from core.headers import HeaderBuilder
from core.payload import decode_payload, encode_body
from core.request_types import ProxiedRequest, ProxiedResponse
from core.upstream_url import build_upstream_url

BODYLESS_METHODS = frozenset({"GET", "HEAD"})


class UpstreamClient:
    """Send authenticated requests to the configured WordPress origin."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        settings: WordPressSettings,
        header_builder: HeaderBuilder,
    ) -> None:
        self._client = client
        self._settings = settings
        self._headers = header_builder

    def url_for(self, request: ProxiedRequest) -> str:
        return build_upstream_url(self._settings.api_url or "", request.path, request.query)

    async def send(self, request: ProxiedRequest) -> ProxiedResponse:
        """Forward a single request; no retries.

        Raises:
            UpstreamTimeoutError: The origin did not answer within the timeout.
            UpstreamConnectionError: Any other transport failure.
        """
        url = self.url_for(request)
        method = request.method.upper()
        content = None
        if method not in BODYLESS_METHODS and request.body is not None:
            content = encode_body(request.body)
        headers = self._headers.build_wordpress_headers(
            self._settings.username or "",
            self._settings.password or "",
        )

        try:
            response = await self._client.request(method, url, content=content, headers=headers)
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError(str(e) or "Upstream timeout", url=url) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise UpstreamConnectionError(str(e) or type(e).__name__, url=url) from e

        return ProxiedResponse(
            status_code=response.status_code,
            url=url,
            payload=decode_payload(response.text),
        )
