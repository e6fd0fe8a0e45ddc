"""Transaction API."""

from web.api.transactions.views import router

__all__ = ["router"]
