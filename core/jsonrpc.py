"""JSON-RPC 2.0 envelopes and the wp_request tool schema."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator

# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "wordpress-mcp"
SERVER_VERSION = "0.1.0"

WP_REQUEST_TOOL = "wp_request"
TOOL_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


class JsonRpcError(Exception):
    """RPC-level failure, rendered into the ``error`` member."""

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data


class JsonRpcRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    jsonrpc: str = "2.0"
    id: Any = None
    # Non-string methods are answered with "Method not found"
    method: Any = None
    params: dict[str, Any] | None = None


class ToolCallParams(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Any = None
    arguments: dict[str, Any] | None = None


class WpRequestArguments(BaseModel):
    """Arguments accepted by the ``wp_request`` tool."""

    model_config = ConfigDict(extra="forbid")

    path: str
    method: Literal["GET", "POST", "PUT", "PATCH", "DELETE"] = "GET"
    body: dict[str, Any] | None = None

    @field_validator("method", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


WP_REQUEST_DESCRIPTOR: dict[str, Any] = {
    "name": WP_REQUEST_TOOL,
    "description": "Call WordPress REST API via /wp-json using configured Basic Auth.",
    "inputSchema": {
        "type": "object",
        "properties": {
            "path": {
                "type": "string",
                "description": "Absolute WP REST path, e.g. /wp-json/wp/v2/posts",
            },
            "method": {"type": "string", "enum": list(TOOL_METHODS), "default": "GET"},
            "body": {"type": "object", "description": "JSON body for non-GET methods"},
        },
        "required": ["path", "method"],
        "additionalProperties": False,
    },
    "outputSchema": {"type": "object"},
}


def jsonrpc_result(request_id: Any, result: Any) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def jsonrpc_error(request_id: Any, code: int, message: str, data: Any = None) -> dict[str, Any]:
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": request_id, "error": error}
