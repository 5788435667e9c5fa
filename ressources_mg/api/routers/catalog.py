# RessourcesMG API - Catalog Router
# =================================
"""Public catalog listing and webmaster CRUD on categories and resources."""

from typing import Optional

from fastapi import APIRouter, Depends, status

from ...catalog import (
    CategoryCreate,
    CategoryUpdate,
    ResourceCreate,
    ResourceUpdate,
    get_catalog_service,
)
from ...search import export_catalog
from ..models.requests import ReorderCategoriesRequest, ReorderResourcesRequest, SeedRequest
from ..models.responses import envelope
from .auth import optional_webmaster, require_webmaster

router = APIRouter()


# ============================================
# Reads
# ============================================

@router.get("")
async def get_catalog(webmaster: Optional[dict] = Depends(optional_webmaster)):
    """
    Categories with their resources, in display order.

    Hidden resources are only returned to the webmaster.
    """
    categories = get_catalog_service().get_catalog(include_hidden=webmaster is not None)
    return envelope({
        "categories": [c.model_dump() for c in categories],
        "total_categories": len(categories),
        "total_resources": sum(len(c.resources) for c in categories),
    })


@router.get("/export")
async def export(_: dict = Depends(require_webmaster)):
    """Visible resources grouped by category name, as sent to the suggestion service."""
    return envelope(export_catalog(get_catalog_service().get_catalog()))


@router.get("/stats")
async def stats(_: dict = Depends(require_webmaster)):
    return envelope(get_catalog_service().get_stats().model_dump())


# ============================================
# Categories
# ============================================

@router.post("/categories", status_code=status.HTTP_201_CREATED)
async def add_category(body: CategoryCreate, _: dict = Depends(require_webmaster)):
    category = get_catalog_service().add_category(body)
    return envelope(category.model_dump())


@router.patch("/categories/{category_id}")
async def update_category(category_id: str, body: CategoryUpdate, _: dict = Depends(require_webmaster)):
    category = get_catalog_service().update_category(category_id, body)
    return envelope(category.model_dump())


@router.delete("/categories/{category_id}")
async def delete_category(category_id: str, _: dict = Depends(require_webmaster)):
    """Delete a category and every resource in it."""
    removed = get_catalog_service().delete_category(category_id)
    return envelope({"id": category_id, "resources_removed": removed})


@router.put("/categories/order")
async def reorder_categories(body: ReorderCategoriesRequest, _: dict = Depends(require_webmaster)):
    get_catalog_service().reorder_categories(body.general_order, body.specialty_order)
    return envelope({"reordered": True})


@router.put("/categories/{category_id}/order")
async def reorder_resources(
    category_id: str,
    body: ReorderResourcesRequest,
    _: dict = Depends(require_webmaster),
):
    get_catalog_service().reorder_resources(category_id, body.resource_ids)
    return envelope({"reordered": True})


# ============================================
# Resources
# ============================================

@router.post("/resources", status_code=status.HTTP_201_CREATED)
async def add_resource(body: ResourceCreate, _: dict = Depends(require_webmaster)):
    resource = get_catalog_service().add_resource(body)
    return envelope(resource.model_dump())


@router.patch("/resources/{resource_id}")
async def update_resource(resource_id: str, body: ResourceUpdate, _: dict = Depends(require_webmaster)):
    """Partial update; moving to another category re-sorts it alphabetically."""
    resource = get_catalog_service().update_resource(resource_id, body)
    return envelope(resource.model_dump())


@router.delete("/resources/{resource_id}")
async def delete_resource(resource_id: str, _: dict = Depends(require_webmaster)):
    get_catalog_service().delete_resource(resource_id)
    return envelope({"id": resource_id})


# ============================================
# Seeding
# ============================================

@router.post("/seed")
async def seed(body: Optional[SeedRequest] = None, _: dict = Depends(require_webmaster)):
    """Load the bundled catalog (or the given one) into an empty database."""
    categories = body.categories if body else None
    stats = get_catalog_service().seed(categories)
    return envelope(stats.model_dump())
