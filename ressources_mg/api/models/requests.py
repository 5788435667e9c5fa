# RessourcesMG API Request Models
# ===============================
"""Pydantic models for API request bodies not covered by the domain models."""

from typing import List, Optional

from pydantic import BaseModel, Field


# ============================================
# Authentication Requests
# ============================================

class LoginRequest(BaseModel):
    """Webmaster login."""
    password: Optional[str] = Field(default=None, description="Webmaster password")


# ============================================
# Catalog Requests
# ============================================

class ReorderCategoriesRequest(BaseModel):
    """New order of general categories and/or specialties."""
    general_order: Optional[List[str]] = None
    specialty_order: Optional[List[str]] = None


class ReorderResourcesRequest(BaseModel):
    """New order of the resources of one category."""
    resource_ids: List[str] = Field(default_factory=list)


class SeedRequest(BaseModel):
    """Catalog to load into an empty database (bundled default when omitted)."""
    categories: Optional[List[dict]] = None


# ============================================
# Proposal Requests
# ============================================

class ProposalAcceptRequest(BaseModel):
    category_id: Optional[str] = None


# ============================================
# Search Requests
# ============================================

class SuggestRequest(BaseModel):
    """Free-text clinical question."""
    question: str = Field(..., description="Question, at least 5 characters")
