"""Accounts services."""

from app.services.accounts.service import AccountService

__all__ = ["AccountService"]
