# RessourcesMG API - Analytics Router
# ===================================
"""Anonymous event collection and the webmaster dashboard."""

from fastapi import APIRouter, Depends, Query, Response, status

from ...analytics import ResourceClick, SearchEvent, get_analytics_service
from ..models.responses import envelope
from .auth import require_webmaster

router = APIRouter()


@router.post("/clicks", status_code=status.HTTP_204_NO_CONTENT)
async def record_click(body: ResourceClick):
    get_analytics_service().record_click(body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/searches", status_code=status.HTTP_204_NO_CONTENT)
async def record_search(body: SearchEvent):
    get_analytics_service().record_search(body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/dashboard")
async def dashboard(
    period_days: int = Query(30, ge=1, le=365),
    _: dict = Depends(require_webmaster),
):
    """Top 10 resources and searches over the period."""
    return envelope(get_analytics_service().get_dashboard(period_days).model_dump())
