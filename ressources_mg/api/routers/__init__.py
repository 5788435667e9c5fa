# RessourcesMG API Routers
# ========================
"""API route handlers."""

from . import auth
from . import catalog
from . import search
from . import proposals
from . import announcements
from . import analytics
from . import sitemap

__all__ = [
    'auth',
    'catalog',
    'search',
    'proposals',
    'announcements',
    'analytics',
    'sitemap',
]
