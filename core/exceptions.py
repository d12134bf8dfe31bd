"""Custom exception hierarchy for the WordPress MCP proxy."""


class ProxyError(Exception):
    """Base exception for all proxy errors."""


class ConfigurationError(ProxyError):
    """Raised when configuration is missing or invalid."""


class CredentialsMissingError(ConfigurationError):
    """Raised when any WordPress credential is absent.

    Attributes:
        missing: Environment variable name -> whether it is absent
    """

    def __init__(self, missing: dict[str, bool]) -> None:
        names = [name for name, absent in missing.items() if absent]
        super().__init__(f"WordPress credentials not configured (missing: {', '.join(names)})")
        self.missing = missing


class UpstreamError(ProxyError):
    """Raised when the WordPress request fails at the transport level.

    Attributes:
        message: Error message
        url: Upstream URL that was being requested
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.url = url


class UpstreamTimeoutError(UpstreamError):
    """Raised when the WordPress request times out."""


class UpstreamConnectionError(UpstreamError):
    """Raised when unable to reach the WordPress origin."""
