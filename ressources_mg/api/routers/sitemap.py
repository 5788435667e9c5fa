# RessourcesMG API - Sitemap Router
# =================================
"""sitemap.xml for search engines."""

from fastapi import APIRouter, Response

from ...catalog import get_catalog_service
from ...config import get_config
from ...sitemap import build_urls, render_sitemap

router = APIRouter()


@router.get("/sitemap.xml")
async def sitemap():
    categories = get_catalog_service().get_catalog()
    xml = render_sitemap(build_urls(get_config().site_base_url, categories))
    return Response(
        content=xml,
        media_type="application/xml; charset=utf-8",
        headers={"Cache-Control": "public, s-maxage=3600, stale-while-revalidate"},
    )
