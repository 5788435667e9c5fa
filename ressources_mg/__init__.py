"""
RessourcesMG
============
Curated directory of web resources for general practitioners.

Subpackages:
- search: normalization, synonyms, matching, ranking and suggestions
- catalog: categories and resources (SQLite)
- proposals: community resource proposals
- announcements: site-wide banners
- analytics: resource clicks and search queries
- auth: webmaster tokens
- api: FastAPI application
"""

__version__ = "1.0.0"
