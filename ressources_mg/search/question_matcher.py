# RessourcesMG Search - Local Question Matcher
# ============================================
"""
Match a free-text clinical question to catalog resources without any
external service.

Resources are ranked by how many distinct words of the question they cover,
then by relevance score. The output has the same shape as the hosted
suggestion service so callers can fall back transparently.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from ..catalog.models import Category
from .matcher import count_matching_groups
from .scorer import SearchableContext, score_search_match
from .term_groups import build_term_groups_for_question

logger = logging.getLogger(__name__)

MAX_RESULTS = 8

REASON_TEMPLATE = "Correspond à votre question (mots-clés trouvés dans « {category} » / {name})."


@dataclass
class ResourceSuggestion:
    """One suggested resource."""
    resource_name: str
    resource_url: str
    category_name: str
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def resource_search_text(category_name: str, name: str, description: str, note: Optional[str] = None) -> str:
    """Haystack used to match a resource: category, name, description and note."""
    return f"{category_name} {name} {description or ''} {note or ''}"


def match_question_locally(question: str, categories: List[Category]) -> List[ResourceSuggestion]:
    """
    Suggest resources for a question using synonyms and scoring only.

    Args:
        question: Free-text question, e.g. "antibiotique pour une otite"
        categories: Full catalog; hidden resources are ignored

    Returns:
        Up to MAX_RESULTS suggestions, best first
    """
    term_groups = build_term_groups_for_question(question)
    if not term_groups:
        return []

    candidates = []
    for category in categories:
        for resource in category.visible_resources():
            text = resource_search_text(category.name, resource.name, resource.description, resource.note)
            match_count = count_matching_groups(text, term_groups)
            if match_count == 0:
                continue
            score = score_search_match(
                SearchableContext(
                    name=resource.name,
                    description=resource.description,
                    category_name=category.name,
                    note=resource.note,
                ),
                term_groups,
            )
            candidates.append((match_count, score, category, resource))

    candidates.sort(key=lambda c: (-c[0], -c[1]))

    suggestions = []
    seen_ids = set()
    for _, _, category, resource in candidates:
        if resource.id in seen_ids:
            continue
        seen_ids.add(resource.id)
        suggestions.append(ResourceSuggestion(
            resource_name=resource.name,
            resource_url=resource.url,
            category_name=category.name,
            reason=REASON_TEMPLATE.format(category=category.name, name=resource.name),
        ))
        if len(suggestions) >= MAX_RESULTS:
            break

    logger.debug(f"Local match for '{question}': {len(suggestions)} suggestion(s)")
    return suggestions
