"""
Catalog Service
===============
Business logic for the managed catalog: listing, CRUD, ordering and seeding.
"""

import json
import logging
import random
import re
import string
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..exceptions import ConflictError, NotFoundError, ValidationError
from ..search.normalizer import normalize_term
from .database import CatalogDB
from .models import (
    CatalogStats,
    Category,
    CategoryCreate,
    CategoryUpdate,
    Resource,
    ResourceCreate,
    ResourceUpdate,
)

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "default_catalog.json"

# New resources go to the end of their category
APPENDED_SORT_ORDER = 9999

_SLUG_SPACES_RE = re.compile(r"\s+")
_SLUG_INVALID_RE = re.compile(r"[^a-z0-9-]")


# Singleton instance
_catalog_service: Optional["CatalogService"] = None


def get_catalog_service() -> "CatalogService":
    """Get or create the global catalog service instance."""
    global _catalog_service
    if _catalog_service is None:
        _catalog_service = CatalogService()
    return _catalog_service


def slugify(name: str) -> str:
    """Category id derived from its name ("Soins palliatifs" -> "soins-palliatifs")."""
    slug = _SLUG_SPACES_RE.sub("-", normalize_term(name))
    return _SLUG_INVALID_RE.sub("", slug)


def new_resource_id() -> str:
    """Unique id for a resource created from the back office."""
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=7))
    return f"custom-{int(time.time() * 1000)}-{suffix}"


def load_default_catalog(path: Optional[Path] = None) -> List[Dict[str, Any]]:
    """Read a catalog JSON file ({"categories": [...]})."""
    with open(path or DEFAULT_CATALOG_PATH, encoding="utf-8") as f:
        data = json.load(f)
    return data["categories"] if isinstance(data, dict) else data


class CatalogService:
    """Service for the managed catalog."""

    def __init__(self, db_path: Optional[str] = None):
        """Initialize the catalog service.

        Args:
            db_path: Path to catalog database
        """
        self.db = CatalogDB(db_path)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_catalog(self, include_hidden: bool = False) -> List[Category]:
        """
        Full catalog in display order.

        Args:
            include_hidden: Keep hidden resources (webmaster view)
        """
        by_category: Dict[str, List[Resource]] = {}
        for row in self.db.get_resources():
            if row["is_hidden"] and not include_hidden:
                continue
            by_category.setdefault(row["category_id"], []).append(Resource(**row))

        return [
            Category(**row, resources=by_category.get(row["id"], []))
            for row in self.db.get_categories()
        ]

    def get_category(self, category_id: str) -> Category:
        row = self.db.get_category(category_id)
        if row is None:
            raise NotFoundError(f"Catégorie introuvable: {category_id}")
        resources = [Resource(**r) for r in self.db.get_resources(category_id)]
        return Category(**row, resources=resources)

    def get_resource(self, resource_id: str) -> Resource:
        row = self.db.get_resource(resource_id)
        if row is None:
            raise NotFoundError(f"Ressource introuvable: {resource_id}")
        return Resource(**row)

    def is_empty(self) -> bool:
        return self.db.count_categories() == 0

    def get_stats(self) -> CatalogStats:
        categories = self.get_catalog(include_hidden=True)
        resources = [r for c in categories for r in c.resources]
        return CatalogStats(
            categories=len(categories),
            specialties=sum(1 for c in categories if c.is_specialty),
            resources=len(resources),
            hidden_resources=sum(1 for r in resources if r.is_hidden),
        )

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------

    def add_resource(self, data: ResourceCreate) -> Resource:
        """Add a resource at the end of its category."""
        name = (data.name or "").strip()
        url = (data.url or "").strip()
        if not data.category_id or not name or not url:
            raise ValidationError("categoryId, name et url requis")
        if self.db.get_category(data.category_id) is None:
            raise NotFoundError(f"Catégorie introuvable: {data.category_id}")

        resource = Resource(
            id=new_resource_id(),
            name=name,
            description=data.description or "",
            url=url,
            requires_auth=data.requires_auth,
            note=data.note,
            is_hidden=data.is_hidden,
            sort_order=APPENDED_SORT_ORDER,
        )
        self.db.insert_resource({**resource.model_dump(), "category_id": data.category_id})
        logger.info(f"Resource added: {resource.id} ({name}) in {data.category_id}")
        return resource

    def update_resource(self, resource_id: str, update: ResourceUpdate) -> Resource:
        """
        Apply a partial update.

        Moving a resource to another category appends it there, then sorts
        that category alphabetically.
        """
        # note is the only nullable column
        fields = {
            k: v for k, v in update.model_dump(exclude_unset=True).items()
            if v is not None or k == "note"
        }
        if not fields:
            raise ValidationError("Aucun champ à modifier")
        if self.db.get_resource(resource_id) is None:
            raise NotFoundError(f"Ressource introuvable: {resource_id}")

        target = fields.get("category_id")
        if target:
            if self.db.get_category(target) is None:
                raise NotFoundError(f"Catégorie introuvable: {target}")
            fields["sort_order"] = self.db.max_resource_order(target) + 1

        self.db.update_resource(resource_id, fields)

        if target:
            self._sort_alphabetically(target)
            logger.info(f"Resource {resource_id} moved to {target}")
        return self.get_resource(resource_id)

    def _sort_alphabetically(self, category_id: str):
        resources = self.db.get_resources(category_id)
        ordered = sorted(resources, key=lambda r: (normalize_term(r["name"] or ""), r["name"] or ""))
        self.db.set_resource_orders(category_id, {r["id"]: i for i, r in enumerate(ordered)})

    def delete_resource(self, resource_id: str):
        if not self.db.delete_resource(resource_id):
            raise NotFoundError(f"Ressource introuvable: {resource_id}")
        logger.info(f"Resource deleted: {resource_id}")

    def reorder_resources(self, category_id: str, resource_ids: List[str]):
        """Persist the display order of a category's resources."""
        if not category_id or not resource_ids:
            raise ValidationError("categoryId et resourceIds (tableau) requis")
        orders = {rid: i for i, rid in enumerate(resource_ids) if rid}
        self.db.set_resource_orders(category_id, orders)

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def add_category(self, data: CategoryCreate) -> Category:
        """Add a category at the end of its section (general or specialties)."""
        name = (data.name or "").strip()
        if not name:
            raise ValidationError("name requis")

        category_id = (data.id or "").strip() or slugify(name) or f"cat-{int(time.time() * 1000)}"
        if self.db.get_category(category_id) is not None:
            raise ConflictError(f"Catégorie déjà existante: {category_id}")

        category = Category(
            id=category_id,
            name=name,
            icon=data.icon or "Circle",
            is_specialty=data.is_specialty,
            sort_order=self.db.max_category_order(data.is_specialty) + 1,
        )
        self.db.insert_category(category.model_dump(exclude={"resources"}))
        logger.info(f"Category added: {category_id}")
        return category

    def update_category(self, category_id: str, update: CategoryUpdate) -> Category:
        fields = {k: v for k, v in update.model_dump(exclude_unset=True).items() if v is not None}
        if not fields:
            raise ValidationError("Aucun champ à modifier")
        if not self.db.update_category(category_id, fields):
            raise NotFoundError(f"Catégorie introuvable: {category_id}")
        return self.get_category(category_id)

    def delete_category(self, category_id: str) -> int:
        """Delete a category with all its resources. Returns the number of resources removed."""
        removed = self.db.delete_category(category_id)
        if removed < 0:
            raise NotFoundError(f"Catégorie introuvable: {category_id}")
        logger.info(f"Category deleted: {category_id} ({removed} resource(s))")
        return removed

    def reorder_categories(
        self,
        general_order: Optional[List[str]] = None,
        specialty_order: Optional[List[str]] = None,
    ):
        """Persist the order of general categories and/or specialties."""
        if general_order is None and specialty_order is None:
            raise ValidationError("generalOrder ou specialtyOrder requis")

        orders = {}
        for section, ids in ((False, general_order), (True, specialty_order)):
            for i, category_id in enumerate(ids or []):
                row = self.db.get_category(category_id) if category_id else None
                # ids from the other section are ignored
                if row is not None and row["is_specialty"] == section:
                    orders[category_id] = i
        self.db.set_category_orders(orders)

    # ------------------------------------------------------------------
    # Seeding and export
    # ------------------------------------------------------------------

    def seed(self, categories: Optional[List[Dict[str, Any]]] = None) -> CatalogStats:
        """
        Fill an empty catalog.

        Args:
            categories: Category dicts with nested resources; the bundled
                default catalog when omitted

        Raises:
            ConflictError: if the catalog already has categories
        """
        if not self.is_empty():
            raise ConflictError("Données déjà initialisées")

        if categories is None:
            categories = load_default_catalog()

        category_rows = []
        resource_rows = []
        for i, cat in enumerate(categories):
            if not cat.get("id") or not cat.get("name"):
                raise ValidationError("Chaque catégorie doit avoir un id et un nom")
            category_rows.append({
                "id": cat["id"],
                "name": cat["name"],
                "icon": cat.get("icon") or "Circle",
                "sort_order": i,
                "is_specialty": bool(cat.get("is_specialty", False)),
            })
            for j, res in enumerate(cat.get("resources") or []):
                resource_rows.append({
                    "id": res["id"],
                    "category_id": cat["id"],
                    "name": res["name"],
                    "description": res.get("description") or "",
                    "url": res["url"],
                    "requires_auth": bool(res.get("requires_auth", False)),
                    "note": res.get("note"),
                    "sort_order": j,
                    "is_hidden": bool(res.get("is_hidden", False)),
                })

        self.db.insert_many(category_rows, resource_rows)
        logger.info(f"Catalog seeded: {len(category_rows)} categories, {len(resource_rows)} resources")
        return self.get_stats()
