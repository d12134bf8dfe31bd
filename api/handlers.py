"""FastAPI route handlers."""

import platform
from datetime import UTC, datetime
from typing import Any

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from core.config import Config
from core.exceptions import CredentialsMissingError, UpstreamError
from core.jsonrpc import PARSE_ERROR, jsonrpc_error
from core.payload import JSON_ERRORS, loads_strict
from core.request_types import ProxiedRequest
from ui.log_utils import write_incoming_log

MAX_BODY_SIZE = 1024 * 1024  # 1MB
SERVICE_NAME = "wordpress-mcp-proxy"

# Statuses that must not carry a body
_EMPTY_BODY_STATUSES = {204, 304}


async def _parse_json_body(request: Request, config: Config) -> Any | Response:
    """Parse request body as JSON, return the body or an error Response.

    An empty body parses as ``{}``.
    """
    raw_body = await request.body()
    if len(raw_body) > MAX_BODY_SIZE:
        return _too_large()

    text_body = raw_body.decode("utf-8", errors="replace")
    try:
        body = loads_strict(text_body) if text_body.strip() else {}
    except JSON_ERRORS as e:
        _log_incoming(request, config, text_body)
        return JSONResponse({"error": f"Invalid JSON: {e}"}, status_code=400)

    _log_incoming(request, config, body)
    return body


def _too_large() -> JSONResponse:
    return JSONResponse({"error": "Request body too large"}, status_code=413)


def _log_incoming(request: Request, config: Config, body: Any) -> None:
    if config.proxy.log_requests:
        write_incoming_log(request.method, request.url.path, dict(request.headers), body)


def _raw_path(request: Request) -> str:
    """Return the request path exactly as sent, percent-escapes intact."""
    raw = request.scope.get("raw_path")
    if not raw:
        return request.url.path
    return raw.split(b"?", 1)[0].decode("latin-1")


def _runtime_version() -> str:
    """Runtime identifier; also reported as node_version for existing health checks."""
    return f"{platform.python_implementation()} {platform.python_version()}"


def _utc_timestamp() -> str:
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def handle_root(config: Config) -> dict[str, Any]:
    """Static service descriptor."""
    return {
        "status": "running",
        "service": SERVICE_NAME,
        "wp_url": config.wordpress.api_url,
        "python_version": platform.python_version(),
        "node_version": _runtime_version(),
        "endpoints": {
            "health": "/health",
            "proxy": "/wp-json/*",
            "mcp": "/mcp",
        },
    }


def handle_health(config: Config) -> dict[str, Any]:
    """Liveness probe; does not contact WordPress."""
    return {
        "status": "healthy",
        "timestamp": _utc_timestamp(),
        "wp_configured": config.wordpress.is_configured,
        "python_version": platform.python_version(),
        "node_version": _runtime_version(),
    }


async def handle_wp_proxy(request: Request, config: Config) -> Response:
    """Handle /wp-json/* by forwarding to the WordPress REST API."""
    proxy = request.app.state.proxy_service
    try:
        proxy.ensure_configured()
    except CredentialsMissingError as e:
        return JSONResponse(
            {"error": "WordPress credentials not configured", "missing": e.missing},
            status_code=500,
        )

    body = None
    if request.method not in ("GET", "HEAD"):
        result = await _parse_json_body(request, config)
        if isinstance(result, Response):
            return result
        body = result

    query = request.scope.get("query_string", b"").decode("latin-1")
    proxied = ProxiedRequest(
        method=request.method,
        path=_raw_path(request),
        query=query or None,
        body=body,
    )

    try:
        response = await proxy.forward(proxied)
    except UpstreamError as e:
        return JSONResponse(
            {
                "error": "WordPress API request failed",
                "message": e.message,
                "wp_url": config.wordpress.api_url,
            },
            status_code=500,
        )

    if response.status_code in _EMPTY_BODY_STATUSES:
        return Response(status_code=response.status_code)
    return JSONResponse(response.data(), status_code=response.status_code)


async def handle_mcp(request: Request) -> JSONResponse:
    """Handle POST /mcp JSON-RPC messages; HTTP 200 unless the body is oversized."""
    raw_body = await request.body()
    if len(raw_body) > MAX_BODY_SIZE:
        return _too_large()
    try:
        message = loads_strict(raw_body)
    except JSON_ERRORS:
        return JSONResponse(jsonrpc_error(None, PARSE_ERROR, "Parse error"))

    mcp = request.app.state.mcp_service
    return JSONResponse(await mcp.handle(message))
