# RessourcesMG Search - Relevance Scorer
# ======================================
"""
Rank resources against term groups.

Each group contributes the best score any of its terms reaches on any field,
and the total is the sum over groups. A name hit is worth the most, more so
at the start of a word; a note hit the least.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from .normalizer import is_stop_word, normalize_term, normalize_text

# Field weights
SCORE_NAME_WORD_START = 100
SCORE_NAME = 70
SCORE_CATEGORY = 30
SCORE_DESCRIPTION = 20
SCORE_NOTE = 15

MIN_TERM_LENGTH = 2


@dataclass(frozen=True)
class SearchableContext:
    """Text fields of a resource as seen by the scorer."""
    name: str
    description: str = ""
    category_name: Optional[str] = None
    note: Optional[str] = None


def _word_start_pattern(term: str) -> "re.Pattern[str]":
    return re.compile(r"(^|[^a-z0-9_])" + re.escape(term))


def _term_score(term: str, name: str, category: str, description: str, note: str) -> int:
    normalized = normalize_term(term)
    if len(normalized) < MIN_TERM_LENGTH or is_stop_word(term):
        return 0

    best = 0
    if normalized in name:
        best = SCORE_NAME_WORD_START if _word_start_pattern(normalized).search(name) else SCORE_NAME
    if normalized in category:
        best = max(best, SCORE_CATEGORY)
    if normalized in description:
        best = max(best, SCORE_DESCRIPTION)
    if normalized in note:
        best = max(best, SCORE_NOTE)
    return best


def score_search_match(context: SearchableContext, term_groups: List[List[str]]) -> int:
    """
    Relevance of a resource for a query.

    Args:
        context: Resource fields (category name and note optional)
        term_groups: Output of build_term_groups()

    Returns:
        Sum over groups of the best per-term, per-field score (0 if nothing hits)
    """
    name = normalize_text(context.name or "")
    category = normalize_text(context.category_name or "")
    description = normalize_text(context.description or "")
    note = normalize_text(context.note or "")

    total = 0
    for group in term_groups:
        total += max(
            (_term_score(term, name, category, description, note) for term in group),
            default=0,
        )
    return total
