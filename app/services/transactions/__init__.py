"""Transactions services."""

from app.services.transactions.service import TransactionService

__all__ = ["TransactionService"]
