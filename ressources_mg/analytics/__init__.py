"""
RessourcesMG Analytics
======================

Anonymous resource clicks and search queries, with a 30-day dashboard.
"""

from .models import AnalyticsDashboard, ResourceClick, SearchEvent, TopResource, TopSearch
from .database import AnalyticsDB
from .service import AnalyticsService, get_analytics_service

__all__ = [
    "AnalyticsDashboard",
    "ResourceClick",
    "SearchEvent",
    "TopResource",
    "TopSearch",
    "AnalyticsDB",
    "AnalyticsService",
    "get_analytics_service",
]
