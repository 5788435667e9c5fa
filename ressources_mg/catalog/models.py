"""
Catalog Models
==============

Pydantic models for categories and resources.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class Resource(BaseModel):
    """A web resource listed in the directory."""
    id: str
    name: str
    description: str = ""
    url: str
    requires_auth: bool = False
    note: Optional[str] = None
    is_hidden: bool = False     # only visible to the webmaster
    sort_order: int = 0


class Category(BaseModel):
    """A category (general section) or specialty with its resources."""
    id: str
    name: str
    icon: str = "Circle"
    is_specialty: bool = True
    sort_order: int = 0
    resources: List[Resource] = Field(default_factory=list)

    def visible_resources(self) -> List[Resource]:
        return [r for r in self.resources if not r.is_hidden]


class ResourceCreate(BaseModel):
    """Fields accepted when adding a resource."""
    category_id: str
    name: str
    url: str
    description: str = ""
    requires_auth: bool = False
    note: Optional[str] = None
    is_hidden: bool = False


class ResourceUpdate(BaseModel):
    """Partial resource update; unset fields are left untouched."""
    name: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    requires_auth: Optional[bool] = None
    note: Optional[str] = None
    is_hidden: Optional[bool] = None
    category_id: Optional[str] = None


class CategoryCreate(BaseModel):
    """Fields accepted when adding a category."""
    name: str
    id: Optional[str] = None
    icon: str = "Circle"
    is_specialty: bool = True


class CategoryUpdate(BaseModel):
    """Partial category update."""
    name: Optional[str] = None
    icon: Optional[str] = None


class CatalogStats(BaseModel):
    """Counts shown by the seeding script and the webmaster dashboard."""
    categories: int = 0
    specialties: int = 0
    resources: int = 0
    hidden_resources: int = 0
