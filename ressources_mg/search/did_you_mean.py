# RessourcesMG Search - Did You Mean
# ==================================
"""
Spelling suggestions for queries that returned nothing.

Candidates come from a vocabulary (category and resource names). Distance is
Levenshtein on normalized strings; for multi-word queries the best single
word also counts, so "allergi traitement" still suggests "allergie".
"""

import logging
from typing import Iterable, List

from rapidfuzz.distance import Levenshtein

from .normalizer import normalize_term

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
MIN_WORD_LENGTH = 2
MIN_VOCABULARY_LENGTH = 2
MAX_DISTANCE = 3
DEFAULT_MAX_SUGGESTIONS = 3


def levenshtein_distance(a: str, b: str) -> int:
    """Unit-cost edit distance between two normalized strings."""
    return Levenshtein.distance(normalize_term(a), normalize_term(b))


def _unique_vocabulary(vocabulary: Iterable[str]) -> List[str]:
    seen = set()
    unique = []
    for term in vocabulary:
        if not isinstance(term, str) or len(term) < MIN_VOCABULARY_LENGTH:
            continue
        key = term.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(term)
    return unique


def get_did_you_mean_suggestions(
    query: str,
    vocabulary: Iterable[str],
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
) -> List[str]:
    """
    Suggest vocabulary entries close to a query.

    Args:
        query: The query that produced no result
        vocabulary: Candidate strings, returned as given
        max_suggestions: Maximum number of suggestions

    Returns:
        Entries at distance 1 to 3, closest first (exact matches excluded)
    """
    if not isinstance(query, str) or len(query.strip()) < MIN_QUERY_LENGTH:
        return []

    normalized_query = normalize_term(query)
    words = [w for w in normalized_query.split() if len(w) >= MIN_WORD_LENGTH]

    scored = []
    for term in _unique_vocabulary(vocabulary):
        normalized = normalize_term(term)
        distance = Levenshtein.distance(normalized_query, normalized)
        for word in words:
            distance = min(distance, Levenshtein.distance(word, normalized))
        if 0 < distance <= MAX_DISTANCE:
            scored.append((distance, term))

    # sort is stable: equal distances keep vocabulary order
    scored.sort(key=lambda item: item[0])
    suggestions = [term for _, term in scored[:max(max_suggestions, 0)]]
    if suggestions:
        logger.debug(f"Did you mean for '{query}': {suggestions}")
    return suggestions
