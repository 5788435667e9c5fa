# Tests for the XML sitemap
# =========================

from datetime import date

from ressources_mg.sitemap import build_urls, render_sitemap


class TestSitemap:

    def test_urls(self, sample_categories):
        urls = build_urls("https://site.example/", sample_categories, today=date(2024, 5, 1))
        assert urls[0].loc == "https://site.example/"
        assert urls[0].lastmod == "2024-05-01"
        assert urls[1].loc == "https://site.example/webmaster"
        assert [u.loc for u in urls[2:]] == [
            "https://site.example/#prescription",
            "https://site.example/#infectiologie",
            "https://site.example/#pediatrie",
            "https://site.example/#allergologie",
        ]

    def test_render(self, sample_categories):
        xml = render_sitemap(build_urls("https://site.example", sample_categories, today=date(2024, 5, 1)))
        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert "<loc>https://site.example/#pediatrie</loc>" in xml
        assert "<priority>1.0</priority>" in xml
        assert "<priority>0.8</priority>" in xml
        assert xml.count("<url>") == 6

    def test_escaping(self):
        xml = render_sitemap(build_urls("https://site.example/?a=1&b=2", []))
        assert "&amp;" in xml
        assert "&b=" not in xml
