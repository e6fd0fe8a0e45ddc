"""Network API."""

from web.api.network.views import router

__all__ = ["router"]
