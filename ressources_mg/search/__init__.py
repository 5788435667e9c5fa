"""
RessourcesMG Search
===================

Accent-insensitive French search over the resource catalog:
normalization, stop words, synonyms, term groups, matching, relevance
scoring, spelling suggestions and question-to-resource matching.
"""

from .normalizer import (
    normalize_term,
    normalize_text,
    is_stop_word,
    STOP_WORDS,
)
from .synonyms import SYNONYMS, find_synonyms
from .term_groups import (
    build_term_groups,
    build_term_groups_for_question,
    extract_keyword,
)
from .matcher import matches, matches_search, matches_search_fuzzy
from .scorer import SearchableContext, score_search_match
from .did_you_mean import get_did_you_mean_suggestions, levenshtein_distance
from .question_matcher import ResourceSuggestion, match_question_locally
from .catalog_search import CatalogSearchResult, build_vocabulary, search_catalog
from .suggestions import (
    HostedSuggestionClient,
    SuggestionResult,
    export_catalog,
    suggest_resources,
)

__all__ = [
    # Normalizer
    "normalize_term",
    "normalize_text",
    "is_stop_word",
    "STOP_WORDS",
    # Synonyms
    "SYNONYMS",
    "find_synonyms",
    # Term groups
    "build_term_groups",
    "build_term_groups_for_question",
    "extract_keyword",
    # Matching and scoring
    "matches",
    "matches_search",
    "matches_search_fuzzy",
    "SearchableContext",
    "score_search_match",
    # Suggestions
    "get_did_you_mean_suggestions",
    "levenshtein_distance",
    "ResourceSuggestion",
    "match_question_locally",
    "CatalogSearchResult",
    "build_vocabulary",
    "search_catalog",
    "HostedSuggestionClient",
    "SuggestionResult",
    "export_catalog",
    "suggest_resources",
]
