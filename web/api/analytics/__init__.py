"""Analytics API."""

from web.api.analytics.views import router

__all__ = ["router"]
