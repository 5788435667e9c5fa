# Tests for resource suggestions
# ==============================

from unittest.mock import MagicMock

import pytest
import requests

from ressources_mg.exceptions import SuggestionServiceError
from ressources_mg.search.suggestions import (
    HostedSuggestionClient,
    export_catalog,
    suggest_resources,
)


def _session(body=None, side_effect=None):
    session = MagicMock()
    if side_effect is not None:
        session.post.side_effect = side_effect
    else:
        response = MagicMock()
        response.json.return_value = body
        session.post.return_value = response
    return session


HOSTED_BODY = {
    "suggestions": [
        {
            "resourceName": "Antibioclic",
            "resourceUrl": "https://antibioclic.com/",
            "categoryName": "Infectiologie",
            "reason": "Antibiothérapie",
        }
    ]
}


class TestExportCatalog:

    def test_visible_resources_only(self, sample_categories):
        exported = export_catalog(sample_categories)
        pediatrie = next(c for c in exported if c["categoryName"] == "Pédiatrie")
        assert [r["name"] for r in pediatrie["resources"]] == ["Pediadoc"]

    def test_payload_shape(self, sample_categories):
        resource = export_catalog(sample_categories)[0]["resources"][0]
        assert set(resource) == {"name", "description", "url"}


class TestHostedClient:
    """HTTP client for the hosted service."""

    def test_parses_suggestions(self, sample_categories):
        session = _session(HOSTED_BODY)
        client = HostedSuggestionClient("https://suggest.example", timeout=3, session=session)
        suggestions = client.suggest("otite enfant", sample_categories)

        assert suggestions[0].resource_name == "Antibioclic"
        assert suggestions[0].category_name == "Infectiologie"
        args, kwargs = session.post.call_args
        assert args[0] == "https://suggest.example"
        assert kwargs["json"]["question"] == "otite enfant"
        assert kwargs["timeout"] == 3

    def test_network_error(self, sample_categories):
        session = _session(side_effect=requests.ConnectionError("down"))
        client = HostedSuggestionClient("https://suggest.example", session=session)
        with pytest.raises(SuggestionServiceError):
            client.suggest("otite enfant", sample_categories)

    def test_service_error_field(self, sample_categories):
        client = HostedSuggestionClient("https://suggest.example", session=_session({"error": "quota"}))
        with pytest.raises(SuggestionServiceError) as exc_info:
            client.suggest("otite enfant", sample_categories)
        assert exc_info.value.message == "quota"

    def test_missing_list(self, sample_categories):
        client = HostedSuggestionClient("https://suggest.example", session=_session({}))
        with pytest.raises(SuggestionServiceError):
            client.suggest("otite enfant", sample_categories)

    def test_invalid_entries_skipped(self, sample_categories):
        body = {"suggestions": [{"reason": "no name"}, "junk"] + HOSTED_BODY["suggestions"]}
        client = HostedSuggestionClient("https://suggest.example", session=_session(body))
        assert len(client.suggest("otite enfant", sample_categories)) == 1


class TestSuggestResources:
    """Hosted first, local matcher as fallback."""

    def test_local_when_not_configured(self, sample_categories):
        result = suggest_resources("antibiotique", sample_categories)
        assert result.source == "local"
        assert result.fallback_reason is None
        assert result.suggestions[0].resource_name == "Antibioclic"

    def test_hosted(self, sample_categories):
        client = HostedSuggestionClient("https://suggest.example", session=_session(HOSTED_BODY))
        result = suggest_resources("otite enfant", sample_categories, client=client)
        assert result.source == "hosted"
        assert result.to_dict()["suggestions"][0]["resource_url"] == "https://antibioclic.com/"

    def test_falls_back_on_error(self, sample_categories):
        session = _session(side_effect=requests.Timeout("slow"))
        client = HostedSuggestionClient("https://suggest.example", session=session)
        result = suggest_resources("antibiotique", sample_categories, client=client)
        assert result.source == "local"
        assert result.fallback_reason
        assert result.suggestions[0].resource_name == "Antibioclic"
