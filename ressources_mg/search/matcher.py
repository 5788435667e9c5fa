# RessourcesMG Search - Matcher
# =============================
"""
Decide whether a text satisfies a sequence of term groups.

AND across groups, OR within a group. Stop words only match whole words
("sur" does not match "surveillance"); content words match as substrings
of the normalized text. The fuzzy variant also accepts near-miss words.
"""

import logging
import re
from typing import List, Sequence

from rapidfuzz.distance import Levenshtein

from .normalizer import is_stop_word, normalize_term, normalize_text

logger = logging.getLogger(__name__)

# Normalized terms shorter than this never match
MIN_TERM_LENGTH = 2

# Fuzzy matching thresholds
FUZZY_MIN_TERM_LENGTH = 3
FUZZY_SHORT_TERM_LENGTH = 5     # terms up to this length allow 1 edit
FUZZY_SHORT_MAX_DISTANCE = 1
FUZZY_LONG_MAX_DISTANCE = 2

_TOKEN_SPLIT_RE = re.compile(r"[^a-z0-9]+")


def _word_pattern(term: str) -> "re.Pattern[str]":
    return re.compile(r"(^|[^a-z0-9])" + re.escape(term) + r"([^a-z0-9]|$)", re.IGNORECASE)


def fuzzy_max_distance(term: str) -> int:
    """Allowed edit distance for a normalized term."""
    if len(term) <= FUZZY_SHORT_TERM_LENGTH:
        return FUZZY_SHORT_MAX_DISTANCE
    return FUZZY_LONG_MAX_DISTANCE


def term_matches(term: str, normalized_text: str, fuzzy: bool = False) -> bool:
    """
    Check a single term against an already normalized text.

    Args:
        term: Candidate term from a group (raw form)
        normalized_text: Output of normalize_text()
        fuzzy: Also accept words within a small edit distance

    Returns:
        True if the term is found
    """
    normalized = normalize_term(term)
    if len(normalized) < MIN_TERM_LENGTH:
        return False

    if is_stop_word(term):
        return _word_pattern(normalized).search(normalized_text) is not None

    if normalized in normalized_text:
        return True

    if fuzzy and len(normalized) >= FUZZY_MIN_TERM_LENGTH:
        max_distance = fuzzy_max_distance(normalized)
        for token in _TOKEN_SPLIT_RE.split(normalized_text):
            if not token:
                continue
            if Levenshtein.distance(normalized, token, score_cutoff=max_distance) <= max_distance:
                return True

    return False


def group_matches(group: Sequence[str], normalized_text: str, fuzzy: bool = False) -> bool:
    """True if any term of the group is found in the text."""
    return any(term_matches(term, normalized_text, fuzzy) for term in group)


def matches(text: str, term_groups: List[List[str]], fuzzy: bool = False) -> bool:
    """True if every group matches the text (vacuously true with no groups)."""
    if not term_groups:
        return True
    normalized_text = normalize_text(text)
    return all(group_matches(group, normalized_text, fuzzy) for group in term_groups)


def count_matching_groups(text: str, term_groups: List[List[str]], fuzzy: bool = False) -> int:
    """Number of groups that find at least one term in the text."""
    normalized_text = normalize_text(text)
    return sum(1 for group in term_groups if group_matches(group, normalized_text, fuzzy))


def matches_search(text: str, term_groups: List[List[str]]) -> bool:
    """Exact filter used by the catalog search."""
    return matches(text, term_groups, fuzzy=False)


def matches_search_fuzzy(text: str, term_groups: List[List[str]]) -> bool:
    """Looser filter tolerating typos in content words."""
    return matches(text, term_groups, fuzzy=True)
