# RessourcesMG Search - Resource Suggestions
# ==========================================
"""
Suggest resources for a clinical question.

A hosted suggestion service is used when SUGGEST_SERVICE_URL is set; it
receives the question and the visible catalog and answers with
``{"suggestions": [{resourceName, resourceUrl, categoryName, reason}], "error"?}``.
The local question matcher answers when the service is not configured or
fails, with the same output shape.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from ..catalog.models import Category
from ..config import get_config
from ..exceptions import SuggestionServiceError
from .question_matcher import ResourceSuggestion, match_question_locally

logger = logging.getLogger(__name__)

MIN_QUESTION_LENGTH = 5

SOURCE_HOSTED = "hosted"
SOURCE_LOCAL = "local"


def export_catalog(categories: List[Category]) -> List[Dict[str, Any]]:
    """Visible resources, in the payload shape the hosted service expects."""
    exported = []
    for category in categories:
        resources = [
            {"name": r.name, "description": r.description, "url": r.url}
            for r in category.visible_resources()
        ]
        if resources:
            exported.append({"categoryName": category.name, "resources": resources})
    return exported


class HostedSuggestionClient:
    """HTTP client for the hosted suggestion service."""

    def __init__(self, url: str, timeout: float = 15.0, session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def suggest(self, question: str, categories: List[Category]) -> List[ResourceSuggestion]:
        """
        Ask the hosted service for suggestions.

        Raises:
            SuggestionServiceError: on network error, HTTP error, service-side
                error message or malformed payload
        """
        payload = {"question": question, "catalog": export_catalog(categories)}
        try:
            response = self.session.post(self.url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            raise SuggestionServiceError(f"Suggestion service unreachable: {e}") from e
        except ValueError as e:
            raise SuggestionServiceError("Suggestion service returned invalid JSON") from e

        if not isinstance(body, dict):
            raise SuggestionServiceError("Suggestion service returned an unexpected payload")
        if body.get("error"):
            raise SuggestionServiceError(str(body["error"]))

        raw = body.get("suggestions")
        if not isinstance(raw, list):
            raise SuggestionServiceError("Suggestion service returned no suggestion list")

        suggestions = []
        for item in raw:
            if not isinstance(item, dict) or not item.get("resourceName"):
                continue
            suggestions.append(ResourceSuggestion(
                resource_name=str(item.get("resourceName", "")),
                resource_url=str(item.get("resourceUrl", "")),
                category_name=str(item.get("categoryName", "")),
                reason=str(item.get("reason", "")),
            ))
        return suggestions


@dataclass
class SuggestionResult:
    """Suggestions and where they came from."""
    suggestions: List[ResourceSuggestion] = field(default_factory=list)
    source: str = SOURCE_LOCAL
    fallback_reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "suggestions": [s.to_dict() for s in self.suggestions],
            "source": self.source,
            "fallback_reason": self.fallback_reason,
        }


def suggest_resources(
    question: str,
    categories: List[Category],
    client: Optional[HostedSuggestionClient] = None,
) -> SuggestionResult:
    """
    Suggest resources, preferring the hosted service when available.

    Args:
        question: Free-text clinical question
        categories: Full catalog
        client: Hosted client; built from configuration when omitted

    Returns:
        SuggestionResult with source "hosted" or "local"
    """
    if client is None:
        config = get_config()
        if config.suggest_service_url:
            client = HostedSuggestionClient(config.suggest_service_url, config.suggest_timeout_seconds)

    if client is None:
        return SuggestionResult(suggestions=match_question_locally(question, categories))

    try:
        return SuggestionResult(suggestions=client.suggest(question, categories), source=SOURCE_HOSTED)
    except SuggestionServiceError as e:
        logger.warning(f"Hosted suggestions failed, using local matcher: {e.message}")
        return SuggestionResult(
            suggestions=match_question_locally(question, categories),
            fallback_reason=e.message,
        )
