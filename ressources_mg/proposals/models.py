"""
Proposal Models
===============

Pydantic models for community resource proposals.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ProposalStatus(str, Enum):
    """Moderation status of a proposal."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Proposal(BaseModel):
    """A resource suggested by a visitor."""
    id: str
    name: str
    url: str
    description: str = ""
    status: ProposalStatus = ProposalStatus.PENDING
    category_id: Optional[str] = None   # set when accepted
    created_at: str


class ProposalCreate(BaseModel):
    """Public submission."""
    name: str
    url: str
    description: Optional[str] = None


class ProposalEdit(BaseModel):
    """Webmaster correction before accepting."""
    name: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
