"""Network services."""

from app.services.network.service import NetworkService

__all__ = ["NetworkService"]
