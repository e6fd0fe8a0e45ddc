"""Analytics repositories."""

from app.repositories.analytics.aggregates import PERIODS, AnalyticsRepository

__all__ = ["AnalyticsRepository", "PERIODS"]
