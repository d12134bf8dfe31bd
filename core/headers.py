"""Header construction for upstream requests."""

import base64

USER_AGENT = "WordPress-MCP-Proxy/1.0"


def basic_credentials(username: str, password: str) -> str:
    """Encode ``username:password`` for the Basic scheme."""
    return base64.b64encode(f"{username}:{password}".encode()).decode("ascii")


class HeaderBuilder:
    """Build upstream headers for the WordPress REST API."""

    def build_wordpress_headers(self, username: str, password: str) -> dict[str, str]:
        """Inbound headers are never forwarded; only these fixed ones are sent."""
        return {
            "Authorization": f"Basic {basic_credentials(username, password)}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }
