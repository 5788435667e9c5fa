# Tests for analytics
# ===================

from datetime import datetime, timedelta

import pytest

from ressources_mg.analytics import AnalyticsService, ResourceClick, SearchEvent
from ressources_mg.exceptions import ValidationError


@pytest.fixture
def service(tmp_path):
    return AnalyticsService(db_path=str(tmp_path / "analytics.db"))


def _click(service, resource_id, name="Outil", category_id="outils"):
    service.record_click(ResourceClick(resource_id=resource_id, resource_name=name, category_id=category_id))


class TestRecording:
    """Event validation."""

    def test_click_requires_fields(self, service):
        with pytest.raises(ValidationError):
            _click(service, "antibioclic", name=" ")

    def test_search_requires_query(self, service):
        with pytest.raises(ValidationError):
            service.record_search(SearchEvent(query="   "))

    def test_search_is_trimmed_and_capped(self, service):
        service.record_search(SearchEvent(query="  " + "x" * 300, result_count=-4))
        row = service.db.get_searches_since(datetime.now() - timedelta(days=1))[0]
        assert len(row["query"]) == 200
        assert row["result_count"] == 0


class TestDashboard:
    """Aggregation over the period."""

    def test_top_resources(self, service):
        _click(service, "vaccinclic", name="Vaccinclic")
        for _ in range(3):
            _click(service, "antibioclic", name="Antibioclic", category_id="infectiologie")

        dashboard = service.get_dashboard()
        assert dashboard.total_clicks == 4
        assert dashboard.top_resources[0].id == "antibioclic"
        assert dashboard.top_resources[0].count == 3
        assert dashboard.top_resources[0].category_id == "infectiologie"
        assert dashboard.top_resources[1].id == "vaccinclic"

    def test_searches_grouped_case_insensitively(self, service):
        for query in ("Otite", "otite", "OTITE ", "vaccin"):
            service.record_search(SearchEvent(query=query, result_count=2))

        dashboard = service.get_dashboard()
        assert dashboard.total_searches == 4
        assert dashboard.top_searches[0].query == "otite"
        assert dashboard.top_searches[0].count == 3

    def test_old_events_excluded(self, service):
        service.db.insert_click("old", "Ancien", "outils", clicked_at=datetime.now() - timedelta(days=45))
        service.db.insert_search("ancien", 0, searched_at=datetime.now() - timedelta(days=45))
        _click(service, "recent")

        dashboard = service.get_dashboard(period_days=30)
        assert dashboard.total_clicks == 1
        assert dashboard.total_searches == 0
        assert [r.id for r in dashboard.top_resources] == ["recent"]

        assert service.get_dashboard(period_days=60).total_clicks == 2

    def test_top_lists_are_capped(self, service):
        for i in range(12):
            _click(service, f"r{i}")
        assert len(service.get_dashboard().top_resources) == 10

    def test_empty(self, service):
        dashboard = service.get_dashboard()
        assert dashboard.top_resources == []
        assert dashboard.total_searches == 0
        assert dashboard.period_days == 30
