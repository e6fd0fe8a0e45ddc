"""Program API."""

from web.api.programs.views import router

__all__ = ["router"]
