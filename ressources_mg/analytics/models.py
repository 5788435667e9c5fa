"""
Analytics Models
================

Pydantic models for click and search statistics.
"""

from typing import List

from pydantic import BaseModel, Field


class ResourceClick(BaseModel):
    """A visitor opened a resource."""
    resource_id: str
    resource_name: str
    category_id: str


class SearchEvent(BaseModel):
    """A visitor ran a search."""
    query: str
    result_count: int = 0


class TopResource(BaseModel):
    id: str
    name: str
    category_id: str
    count: int


class TopSearch(BaseModel):
    query: str
    count: int


class AnalyticsDashboard(BaseModel):
    """Webmaster dashboard over a rolling period."""
    top_resources: List[TopResource] = Field(default_factory=list)
    top_searches: List[TopSearch] = Field(default_factory=list)
    total_clicks: int = 0
    total_searches: int = 0
    period_days: int = 30
