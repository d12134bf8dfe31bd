"""Minimal MCP surface over JSON-RPC 2.0.

Only ``wp_request`` is exposed. ``resources/list`` and ``prompts/list`` answer
with empty lists so clients probing capabilities on startup do not fail.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from core.exceptions import CredentialsMissingError
from core.jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PROTOCOL_VERSION,
    SERVER_NAME,
    SERVER_VERSION,
    WP_REQUEST_DESCRIPTOR,
    WP_REQUEST_TOOL,
    JsonRpcError,
    JsonRpcRequest,
    ToolCallParams,
    WpRequestArguments,
    jsonrpc_error,
    jsonrpc_result,
)
from core.protocols import RequestLogger
from services.proxy_service import ProxyService

ModelT = TypeVar("ModelT", bound=BaseModel)


def _validate_params(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False)
        raise JsonRpcError(INVALID_PARAMS, "Invalid params", errors) from e


class McpService:
    """Dispatch JSON-RPC messages by method name."""

    def __init__(self, logger: RequestLogger, proxy: ProxyService) -> None:
        self._logger = logger
        self._proxy = proxy
        self._handlers = {
            "initialize": self._initialize,
            "tools/list": self._list_tools,
            "tools/call": self._call_tool,
            "resources/list": self._list_resources,
            "prompts/list": self._list_prompts,
        }

    async def handle(self, message: Any) -> dict[str, Any]:
        """Return a JSON-RPC response for one message; never raises."""
        if not isinstance(message, dict):
            return jsonrpc_error(None, INVALID_REQUEST, "Invalid Request")

        request_id = message.get("id")
        try:
            request = JsonRpcRequest.model_validate(message)
        except ValidationError:
            return jsonrpc_error(request_id, INVALID_REQUEST, "Invalid Request")

        try:
            method = request.method if isinstance(request.method, str) else None
            handler = self._handlers.get(method) if method else None
            if handler is None:
                raise JsonRpcError(METHOD_NOT_FOUND, "Method not found")
            tool = (request.params or {}).get("name") if method == "tools/call" else None
            self._logger.log_rpc(method, request_id, tool=str(tool) if tool is not None else None)
            return jsonrpc_result(request_id, await handler(request.params or {}))
        except JsonRpcError as e:
            self._logger.log_error("mcp", e.code, e.message)
            return jsonrpc_error(request_id, e.code, e.message, e.data)
        except Exception as e:
            self._logger.log_error("mcp", INTERNAL_ERROR, str(e))
            return jsonrpc_error(request_id, INTERNAL_ERROR, str(e) or "Internal error")

    async def _initialize(self, _params: dict[str, Any]) -> dict[str, Any]:
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
            "capabilities": {"tools": {}},
        }

    async def _list_tools(self, _params: dict[str, Any]) -> dict[str, Any]:
        return {"tools": [WP_REQUEST_DESCRIPTOR]}

    async def _list_resources(self, _params: dict[str, Any]) -> dict[str, Any]:
        return {"resources": []}

    async def _list_prompts(self, _params: dict[str, Any]) -> dict[str, Any]:
        return {"prompts": []}

    async def _call_tool(self, params: dict[str, Any]) -> dict[str, Any]:
        call = _validate_params(ToolCallParams, params)

        if call.name != WP_REQUEST_TOOL:
            raise JsonRpcError(METHOD_NOT_FOUND, f"Unknown tool: {call.name}")

        try:
            self._proxy.ensure_configured()
        except CredentialsMissingError as e:
            # Soft failure: a readable notice instead of an RPC error.
            return {"content": [{"type": "text", "text": f"{e}."}]}

        arguments = _validate_params(WpRequestArguments, call.arguments or {})

        response = await self._proxy.call_tool(arguments)
        return {
            "content": [
                {
                    "type": "json",
                    "data": {
                        "status": response.status_code,
                        "url": response.url,
                        "data": response.data(),
                    },
                }
            ]
        }
