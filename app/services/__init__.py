"""Services package - service class exports."""

from app.services.accounts import AccountService
from app.services.analytics import AnalyticsService
from app.services.cache import ReadThroughCache
from app.services.network import NetworkService
from app.services.programs import ProgramService
from app.services.tokens import TokenService
from app.services.transactions import TransactionService

__all__ = [
    "ReadThroughCache",
    "NetworkService",
    "AccountService",
    "TransactionService",
    "TokenService",
    "ProgramService",
    "AnalyticsService",
]
