# RessourcesMG API - Proposals Router
# ===================================
"""Public proposal submission and webmaster moderation."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from ...proposals import ProposalCreate, ProposalEdit, ProposalStatus, get_proposal_service
from ..models.requests import ProposalAcceptRequest
from ..models.responses import envelope
from .auth import require_webmaster

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit(body: ProposalCreate):
    """Submit a resource (no authentication)."""
    proposal = get_proposal_service().submit(body)
    return envelope({"id": proposal.id, "message": "Proposition envoyée. Merci !"})


@router.get("")
async def list_proposals(
    status_filter: Optional[ProposalStatus] = Query(None, alias="status"),
    _: dict = Depends(require_webmaster),
):
    """All proposals, newest first."""
    proposals = get_proposal_service().list_proposals(status_filter)
    return envelope({"proposals": [p.model_dump() for p in proposals]})


@router.post("/{proposal_id}/accept")
async def accept(proposal_id: str, body: ProposalAcceptRequest, _: dict = Depends(require_webmaster)):
    """Accept into a category; the proposal becomes a catalog resource."""
    resource_id = get_proposal_service().accept(proposal_id, body.category_id)
    return envelope({"id": proposal_id, "resource_id": resource_id})


@router.post("/{proposal_id}/reject")
async def reject(proposal_id: str, _: dict = Depends(require_webmaster)):
    get_proposal_service().reject(proposal_id)
    return envelope({"id": proposal_id})


@router.patch("/{proposal_id}")
async def edit(proposal_id: str, body: ProposalEdit, _: dict = Depends(require_webmaster)):
    proposal = get_proposal_service().edit(proposal_id, body)
    return envelope(proposal.model_dump())
