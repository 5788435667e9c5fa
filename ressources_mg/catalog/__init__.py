"""
RessourcesMG Catalog
====================

Categories and resources stored in SQLite, with webmaster CRUD,
ordering and seeding from the bundled default catalog.
"""

from .models import (
    Resource,
    Category,
    ResourceCreate,
    ResourceUpdate,
    CategoryCreate,
    CategoryUpdate,
    CatalogStats,
)
from .database import CatalogDB
from .service import CatalogService, get_catalog_service, load_default_catalog, slugify

__all__ = [
    # Models
    "Resource",
    "Category",
    "ResourceCreate",
    "ResourceUpdate",
    "CategoryCreate",
    "CategoryUpdate",
    "CatalogStats",
    # Database
    "CatalogDB",
    # Service
    "CatalogService",
    "get_catalog_service",
    "load_default_catalog",
    "slugify",
]
