"""Domain errors carrying the HTTP status they surface as."""


class ChainCacheError(Exception):
    """Base exception with HTTP status code."""

    status_code = 500

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)


class InvalidKeyError(ChainCacheError):
    """Request key failed validation (malformed address, slot, limit)."""

    status_code = 400


class NotFoundError(ChainCacheError):
    """Upstream confirms the object does not exist."""

    status_code = 404

    def __init__(self, message: str = "Resource not found", details: str | None = None):
        super().__init__(message, details)


class UpstreamUnavailableError(ChainCacheError):
    """Upstream node unhealthy or unreachable."""

    status_code = 502
