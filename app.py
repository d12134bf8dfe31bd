"""FastAPI application factory."""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.handlers import handle_health, handle_mcp, handle_root, handle_wp_proxy
from core.config import Config
from core.headers import HeaderBuilder
from core.protocols import RequestLogger
from services.mcp_service import McpService
from services.proxy_service import ProxyService
from services.upstream import UpstreamClient

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def create_app(
    config: Config,
    logger: RequestLogger,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``transport`` replaces the network layer of the upstream client (tests).
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        limits = httpx.Limits(max_connections=100, max_keepalive_connections=20)
        wp_client = httpx.AsyncClient(
            timeout=config.wordpress.timeout,
            limits=limits,
            transport=transport,
        )
        upstream = UpstreamClient(wp_client, config.wordpress, HeaderBuilder())
        app.state.proxy_service = ProxyService(config, logger, upstream)
        app.state.mcp_service = McpService(logger, app.state.proxy_service)
        try:
            yield
        finally:
            await wp_client.aclose()

    app = FastAPI(title="WordPress MCP Proxy", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root():
        return handle_root(config)

    @app.get("/health")
    async def health():
        return handle_health(config)

    @app.api_route("/wp-json/{wp_path:path}", methods=PROXY_METHODS)
    async def proxy_wordpress(request: Request, wp_path: str):
        return await handle_wp_proxy(request, config)

    @app.post("/mcp")
    async def mcp(request: Request):
        return await handle_mcp(request)

    return app
