"""
RessourcesMG Proposals
======================

Community resource proposals and their moderation.
"""

from .models import Proposal, ProposalCreate, ProposalEdit, ProposalStatus
from .database import ProposalsDB
from .service import ProposalService, get_proposal_service

__all__ = [
    "Proposal",
    "ProposalCreate",
    "ProposalEdit",
    "ProposalStatus",
    "ProposalsDB",
    "ProposalService",
    "get_proposal_service",
]
