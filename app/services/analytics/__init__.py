"""Analytics services."""

from app.services.analytics.aggregations import instruction_programs, program_activity, success_rate
from app.services.analytics.service import AnalyticsService

__all__ = [
    "AnalyticsService",
    "instruction_programs",
    "program_activity",
    "success_rate",
]
