"""Account API."""

from web.api.accounts.views import router

__all__ = ["router"]
