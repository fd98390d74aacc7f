"""SQLAlchemy models for the hotel performance portal.

All models are imported here so that Alembic's autogenerate can discover
them via Base.metadata. If you add a new model, import it in this file.
"""

from revportal.models.hotel import Hotel
from revportal.models.marketing import PaidMediaData, WebAnalyticsData
from revportal.models.performance import PerformanceRecord
from revportal.models.strategy import AnnualStrategy, QuarterlyStrategy, Tactic
from revportal.models.user import User, UserHotelAssignment
from revportal.models.weekly_update import WeeklyUpdate

__all__ = [
    "AnnualStrategy",
    "Hotel",
    "PaidMediaData",
    "PerformanceRecord",
    "QuarterlyStrategy",
    "Tactic",
    "User",
    "UserHotelAssignment",
    "WebAnalyticsData",
    "WeeklyUpdate",
]
