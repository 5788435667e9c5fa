# RessourcesMG Search - Catalog Search
# ====================================
"""
Filter and rank a catalog for a search query.

Pipeline:
1. Build term groups from the query
2. Keep resources whose text satisfies every group, or contains the
   whole query verbatim
3. Sort resources by relevance inside each category, and categories by
   their best resource
4. When nothing survives, compute "did you mean" suggestions and, for
   multi-word queries, fall back to resources matching at least one word
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..catalog.models import Category
from .did_you_mean import get_did_you_mean_suggestions
from .matcher import count_matching_groups, matches_search
from .question_matcher import resource_search_text
from .scorer import SearchableContext, score_search_match
from .term_groups import build_term_groups

logger = logging.getLogger(__name__)


@dataclass
class CatalogSearchResult:
    """Filtered catalog plus search diagnostics."""
    query: str
    categories: List[Category] = field(default_factory=list)
    result_count: int = 0
    did_you_mean: List[str] = field(default_factory=list)
    partial: bool = False       # True when results only match some words

    def to_dict(self) -> Dict[str, Any]:
        return {
            "query": self.query,
            "categories": [c.model_dump() for c in self.categories],
            "result_count": self.result_count,
            "did_you_mean": self.did_you_mean,
            "partial": self.partial,
        }


def build_vocabulary(categories: List[Category]) -> List[str]:
    """Category and resource names, for spelling suggestions."""
    vocabulary = []
    for category in categories:
        vocabulary.append(category.name)
        vocabulary.extend(r.name for r in category.resources)
    return vocabulary


def _select(categories: List[Category], selected_category: Optional[str], include_hidden: bool) -> List[Category]:
    selected = []
    for category in categories:
        if selected_category and category.id != selected_category:
            continue
        resources = category.resources if include_hidden else category.visible_resources()
        selected.append(category.model_copy(update={"resources": list(resources)}))
    return selected


def _score(category: Category, resource, term_groups: List[List[str]]) -> int:
    return score_search_match(
        SearchableContext(
            name=resource.name,
            description=resource.description,
            category_name=category.name,
            note=resource.note,
        ),
        term_groups,
    )


def _rank(ranked: List[tuple]) -> List[Category]:
    """Order (category, [(key, resource)]) pairs by their best key, best first."""
    ordered = []
    for category, scored in ranked:
        scored.sort(key=lambda item: item[0], reverse=True)
        ordered.append((scored[0][0], category.model_copy(update={"resources": [r for _, r in scored]})))
    ordered.sort(key=lambda item: item[0], reverse=True)
    return [category for _, category in ordered]


def search_catalog(
    categories: List[Category],
    query: str,
    selected_category: Optional[str] = None,
    include_hidden: bool = False,
) -> CatalogSearchResult:
    """
    Search the catalog.

    Args:
        categories: Catalog in display order
        query: Raw query text
        selected_category: Restrict to one category id
        include_hidden: Keep hidden resources (webmaster view)

    Returns:
        CatalogSearchResult with only the categories that kept a resource
    """
    query = query if isinstance(query, str) else ""
    pool = _select(categories, selected_category, include_hidden)

    if not query.strip():
        return CatalogSearchResult(
            query=query,
            categories=pool,
            result_count=sum(len(c.resources) for c in pool),
        )

    term_groups = build_term_groups(query)
    whole_query = [[query.strip()]]

    strict = []
    for category in pool:
        scored = []
        for resource in category.resources:
            text = resource_search_text(category.name, resource.name, resource.description, resource.note)
            if matches_search(text, term_groups) or matches_search(text, whole_query):
                scored.append((_score(category, resource, term_groups), resource))
        if scored:
            strict.append((category, scored))

    if strict:
        ranked = _rank(strict)
        return CatalogSearchResult(
            query=query,
            categories=ranked,
            result_count=sum(len(c.resources) for c in ranked),
        )

    suggestions = get_did_you_mean_suggestions(query, build_vocabulary(pool))

    partial = []
    if len(term_groups) > 1:
        for category in pool:
            scored = []
            for resource in category.resources:
                text = resource_search_text(category.name, resource.name, resource.description, resource.note)
                match_count = count_matching_groups(text, term_groups)
                if match_count:
                    scored.append(((match_count, _score(category, resource, term_groups)), resource))
            if scored:
                partial.append((category, scored))

    ranked = _rank(partial)
    result_count = sum(len(c.resources) for c in ranked)
    logger.info(
        f"No exact result for '{query}': {result_count} partial result(s), "
        f"suggestions={suggestions}"
    )
    return CatalogSearchResult(
        query=query,
        categories=ranked,
        result_count=result_count,
        did_you_mean=suggestions,
        partial=bool(ranked),
    )
