"""
Proposals Service
=================
Visitors submit resources; the webmaster edits, accepts or rejects them.
Accepting a proposal adds it to the catalog.
"""

import logging
from typing import List, Optional

from ..catalog import CatalogService, ResourceCreate, get_catalog_service
from ..exceptions import NotFoundError, ValidationError
from .database import ProposalsDB
from .models import Proposal, ProposalCreate, ProposalEdit, ProposalStatus

logger = logging.getLogger(__name__)


# Singleton instance
_proposal_service: Optional["ProposalService"] = None


def get_proposal_service() -> "ProposalService":
    """Get or create the global proposal service instance."""
    global _proposal_service
    if _proposal_service is None:
        _proposal_service = ProposalService()
    return _proposal_service


class ProposalService:
    """Service for community proposals."""

    def __init__(self, db_path: Optional[str] = None, catalog: Optional[CatalogService] = None):
        self.db = ProposalsDB(db_path)
        self._catalog = catalog

    @property
    def catalog(self) -> CatalogService:
        if self._catalog is None:
            self._catalog = get_catalog_service()
        return self._catalog

    def submit(self, data: ProposalCreate) -> Proposal:
        """Record a public submission as pending."""
        name = (data.name or "").strip()
        url = (data.url or "").strip()
        if not name or not url:
            raise ValidationError("Nom et lien du site requis")

        record = self.db.insert(name, url, (data.description or "").strip())
        logger.info(f"Proposal submitted: {record['id']} ({name})")
        return Proposal(**record)

    def list_proposals(self, status: Optional[ProposalStatus] = None) -> List[Proposal]:
        rows = self.db.list_proposals(status.value if status else None)
        return [Proposal(**row) for row in rows]

    def get(self, proposal_id: str) -> Proposal:
        row = self.db.get(proposal_id)
        if row is None:
            raise NotFoundError("Proposition introuvable")
        return Proposal(**row)

    def accept(self, proposal_id: str, category_id: Optional[str]) -> str:
        """
        Accept a proposal into a category.

        Returns:
            Id of the created catalog resource
        """
        proposal = self.get(proposal_id)
        category_id = (category_id or "").strip()
        if not category_id:
            raise ValidationError("Choisissez une catégorie pour accepter")

        resource = self.catalog.add_resource(ResourceCreate(
            category_id=category_id,
            name=proposal.name,
            url=proposal.url,
            description=proposal.description,
        ))
        self.db.update(proposal_id, {"status": ProposalStatus.ACCEPTED.value, "category_id": category_id})
        logger.info(f"Proposal {proposal_id} accepted as {resource.id}")
        return resource.id

    def reject(self, proposal_id: str):
        if not self.db.update(proposal_id, {"status": ProposalStatus.REJECTED.value}):
            raise NotFoundError("Proposition introuvable")
        logger.info(f"Proposal {proposal_id} rejected")

    def edit(self, proposal_id: str, changes: ProposalEdit) -> Proposal:
        fields = {}
        if changes.name is not None:
            fields["name"] = changes.name.strip()
        if changes.url is not None:
            fields["url"] = changes.url.strip()
        if changes.description is not None:
            fields["description"] = changes.description
        if not fields:
            raise ValidationError("Aucun champ à modifier")
        if not self.db.update(proposal_id, fields):
            raise NotFoundError("Proposition introuvable")
        return self.get(proposal_id)
