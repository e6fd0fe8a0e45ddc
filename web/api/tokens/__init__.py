"""Token API."""

from web.api.tokens.views import router

__all__ = ["router"]
