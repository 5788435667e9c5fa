# Pytest configuration
"""
Shared fixtures: every test runs against its own data directory and fresh
service singletons, with a known webmaster password and secret.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ressources_mg.catalog.models import Category, Resource

TEST_PASSWORD = "test-webmaster-password"
TEST_SECRET = "test-webmaster-secret"


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point DATA_DIR at a temp dir and reset service singletons."""
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("APP_ENV", "development")
    monkeypatch.setenv("WEBMASTER_PASSWORD", TEST_PASSWORD)
    monkeypatch.setenv("WEBMASTER_SECRET", TEST_SECRET)
    monkeypatch.delenv("SUGGEST_SERVICE_URL", raising=False)
    monkeypatch.delenv("TOKEN_EXPIRE_HOURS", raising=False)

    from ressources_mg.catalog import service as catalog_service
    from ressources_mg.proposals import service as proposal_service
    from ressources_mg.announcements import service as announcement_service
    from ressources_mg.analytics import service as analytics_service

    monkeypatch.setattr(catalog_service, "_catalog_service", None)
    monkeypatch.setattr(proposal_service, "_proposal_service", None)
    monkeypatch.setattr(announcement_service, "_announcement_service", None)
    monkeypatch.setattr(analytics_service, "_analytics_service", None)
    return tmp_path


@pytest.fixture
def sample_categories():
    """Small catalog covering the search scenarios."""
    return [
        Category(
            id="prescription",
            name="Prescription",
            icon="Stethoscope",
            is_specialty=False,
            resources=[
                Resource(
                    id="ordotype",
                    name="Ordotype",
                    description="Site de recommandations axé sur les ordonnances",
                    url="https://www.ordotype.fr/",
                ),
                Resource(
                    id="biomg",
                    name="Bio MG",
                    description="Aide à la prescription de biologie pour des cas spécifiques",
                    url="https://biomg.fr/",
                ),
            ],
        ),
        Category(
            id="infectiologie",
            name="Infectiologie",
            icon="Bug",
            resources=[
                Resource(
                    id="antibioclic",
                    name="Antibioclic",
                    description="Aide à la prescription d'antibiotiques",
                    url="https://antibioclic.com/",
                ),
                Resource(
                    id="vaccinclic",
                    name="Vaccinclic",
                    description="Calendrier vaccinal et rattrapage",
                    url="https://vaccinclic.com/",
                ),
            ],
        ),
        Category(
            id="pediatrie",
            name="Pédiatrie",
            icon="Baby",
            resources=[
                Resource(
                    id="pediadoc",
                    name="Pediadoc",
                    description="La consultation standard par âge",
                    url="https://www.pediadoc.fr/",
                ),
                Resource(
                    id="hidden-peds",
                    name="Pédiatrie interne",
                    description="Outil réservé",
                    url="https://example.org/peds",
                    is_hidden=True,
                ),
            ],
        ),
        Category(
            id="allergologie",
            name="Allergologie",
            icon="Wind",
            resources=[
                Resource(
                    id="allergodiet",
                    name="Allergodiet",
                    description="Conseils pour l'éviction",
                    url="https://allergodiet.org/",
                    note="Site associatif",
                ),
            ],
        ),
    ]
