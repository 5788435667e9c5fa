"""
Sitemap
=======
XML sitemap: home page, back office, and one anchor per category.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional
from xml.sax.saxutils import escape

from .catalog.models import Category

_XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}


@dataclass
class SitemapUrl:
    loc: str
    changefreq: Optional[str] = None
    priority: Optional[float] = None
    lastmod: Optional[str] = None


def build_urls(base_url: str, categories: Iterable[Category], today: Optional[date] = None) -> List[SitemapUrl]:
    base_url = base_url.rstrip("/")
    lastmod = (today or date.today()).isoformat()
    urls = [
        SitemapUrl(f"{base_url}/", "weekly", 1.0, lastmod),
        SitemapUrl(f"{base_url}/webmaster", "monthly", 0.3, lastmod),
    ]
    for category in categories:
        urls.append(SitemapUrl(f"{base_url}/#{category.id}", "weekly", 0.8))
    return urls


def render_sitemap(urls: Iterable[SitemapUrl]) -> str:
    """Serialize URLs to sitemaps.org XML."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
    ]
    for url in urls:
        lines.append("  <url>")
        lines.append(f"    <loc>{escape(url.loc, _XML_ENTITIES)}</loc>")
        if url.lastmod:
            lines.append(f"    <lastmod>{url.lastmod}</lastmod>")
        if url.changefreq:
            lines.append(f"    <changefreq>{url.changefreq}</changefreq>")
        if url.priority is not None:
            lines.append(f"    <priority>{url.priority:.1f}</priority>")
        lines.append("  </url>")
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"
