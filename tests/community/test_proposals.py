# Tests for community proposals
# =============================

import pytest

from ressources_mg.catalog import CatalogService
from ressources_mg.exceptions import NotFoundError, ValidationError
from ressources_mg.proposals import (
    ProposalCreate,
    ProposalEdit,
    ProposalService,
    ProposalStatus,
)


@pytest.fixture
def catalog(tmp_path):
    svc = CatalogService(db_path=str(tmp_path / "catalog.db"))
    svc.seed([{"id": "outils", "name": "Outils", "is_specialty": False, "resources": []}])
    return svc


@pytest.fixture
def service(tmp_path, catalog):
    return ProposalService(db_path=str(tmp_path / "proposals.db"), catalog=catalog)


def _submit(service, name="Gestaclic", url="https://gestaclic.fr", description=" Grossesse "):
    return service.submit(ProposalCreate(name=name, url=url, description=description))


class TestSubmit:
    """Public submissions."""

    def test_pending_and_trimmed(self, service):
        proposal = _submit(service)
        assert proposal.status == ProposalStatus.PENDING
        assert proposal.description == "Grossesse"
        assert proposal.category_id is None

    def test_name_and_url_required(self, service):
        with pytest.raises(ValidationError):
            _submit(service, name="  ")
        with pytest.raises(ValidationError):
            _submit(service, url="")

    def test_description_optional(self, service):
        proposal = service.submit(ProposalCreate(name="X", url="https://x.example"))
        assert proposal.description == ""


class TestModeration:
    """Webmaster review."""

    def test_list_newest_first(self, service):
        first = _submit(service, name="Premier")
        second = _submit(service, name="Second")
        assert [p.id for p in service.list_proposals()] == [second.id, first.id]

    def test_filter_by_status(self, service):
        kept = _submit(service, name="Gardé")
        rejected = _submit(service, name="Refusé")
        service.reject(rejected.id)
        assert [p.id for p in service.list_proposals(ProposalStatus.PENDING)] == [kept.id]
        assert [p.id for p in service.list_proposals(ProposalStatus.REJECTED)] == [rejected.id]

    def test_accept_adds_to_catalog(self, service, catalog):
        proposal = _submit(service)
        resource_id = service.accept(proposal.id, "outils")

        resource = catalog.get_resource(resource_id)
        assert resource.name == "Gestaclic"
        assert resource.url == "https://gestaclic.fr"

        accepted = service.get(proposal.id)
        assert accepted.status == ProposalStatus.ACCEPTED
        assert accepted.category_id == "outils"

    def test_accept_requires_category(self, service):
        proposal = _submit(service)
        with pytest.raises(ValidationError):
            service.accept(proposal.id, " ")
        assert service.get(proposal.id).status == ProposalStatus.PENDING

    def test_accept_unknown_category(self, service):
        proposal = _submit(service)
        with pytest.raises(NotFoundError):
            service.accept(proposal.id, "inconnue")
        assert service.get(proposal.id).status == ProposalStatus.PENDING

    def test_accept_unknown_proposal(self, service):
        with pytest.raises(NotFoundError):
            service.accept("missing", "outils")

    def test_reject_unknown(self, service):
        with pytest.raises(NotFoundError):
            service.reject("missing")

    def test_edit(self, service):
        proposal = _submit(service)
        edited = service.edit(proposal.id, ProposalEdit(name=" Gestaclic 2 "))
        assert edited.name == "Gestaclic 2"
        assert edited.url == proposal.url

    def test_edit_nothing(self, service):
        proposal = _submit(service)
        with pytest.raises(ValidationError):
            service.edit(proposal.id, ProposalEdit())
