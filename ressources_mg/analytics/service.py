"""
Analytics Service
=================
Record anonymous events and aggregate them for the webmaster dashboard.
"""

import logging
from collections import defaultdict
from datetime import datetime, timedelta
from typing import Dict, Optional

from ..exceptions import ValidationError
from .database import AnalyticsDB
from .models import AnalyticsDashboard, ResourceClick, SearchEvent, TopResource, TopSearch

logger = logging.getLogger(__name__)

MAX_QUERY_LENGTH = 200
DEFAULT_PERIOD_DAYS = 30
TOP_LIMIT = 10


# Singleton instance
_analytics_service: Optional["AnalyticsService"] = None


def get_analytics_service() -> "AnalyticsService":
    """Get or create the global analytics service instance."""
    global _analytics_service
    if _analytics_service is None:
        _analytics_service = AnalyticsService()
    return _analytics_service


class AnalyticsService:
    """Service for click and search analytics."""

    def __init__(self, db_path: Optional[str] = None):
        self.db = AnalyticsDB(db_path)

    def record_click(self, click: ResourceClick):
        resource_id = (click.resource_id or "").strip()
        resource_name = (click.resource_name or "").strip()
        category_id = (click.category_id or "").strip()
        if not resource_id or not resource_name or not category_id:
            raise ValidationError("Champs manquants")
        self.db.insert_click(resource_id, resource_name, category_id)

    def record_search(self, event: SearchEvent):
        """Store a search; the query is trimmed and capped, the count floored at 0."""
        query = (event.query or "").strip()[:MAX_QUERY_LENGTH]
        if not query:
            raise ValidationError("Query manquante")
        self.db.insert_search(query, max(0, event.result_count or 0))

    def get_dashboard(self, period_days: int = DEFAULT_PERIOD_DAYS) -> AnalyticsDashboard:
        """
        Top resources and searches over the last `period_days` days.

        Ties keep first-seen order.
        """
        since = datetime.now() - timedelta(days=period_days)

        clicks = self.db.get_clicks_since(since)
        resources: Dict[str, TopResource] = {}
        for click in clicks:
            entry = resources.get(click["resource_id"])
            if entry is None:
                resources[click["resource_id"]] = TopResource(
                    id=click["resource_id"],
                    name=click["resource_name"],
                    category_id=click["category_id"] or "",
                    count=1,
                )
            else:
                entry.count += 1

        searches = self.db.get_searches_since(since)
        search_counts: Dict[str, int] = defaultdict(int)
        for search in searches:
            query = (search["query"] or "").strip().lower()
            if query:
                search_counts[query] += 1

        top_resources = sorted(resources.values(), key=lambda r: r.count, reverse=True)[:TOP_LIMIT]
        top_searches = sorted(
            (TopSearch(query=q, count=c) for q, c in search_counts.items()),
            key=lambda s: s.count,
            reverse=True,
        )[:TOP_LIMIT]

        return AnalyticsDashboard(
            top_resources=top_resources,
            top_searches=top_searches,
            total_clicks=len(clicks),
            total_searches=len(searches),
            period_days=period_days,
        )
