"""Upstream URL construction.

Paths and query strings are concatenated as received. Nothing here decodes or
re-encodes them, so WordPress sees exactly what the caller sent.
"""


def strip_origin(origin: str) -> str:
    """Drop trailing slashes from the configured origin."""
    return origin.rstrip("/")


def build_upstream_url(origin: str, path: str, query: str | None = None) -> str:
    url = f"{strip_origin(origin)}{path}"
    if query:
        url += f"?{query}"
    return url


def normalize_tool_path(path: str) -> str:
    """Tool callers may omit the leading slash."""
    return path if path.startswith("/") else f"/{path}"
