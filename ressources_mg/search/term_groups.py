# RessourcesMG Search - Term Groups
# =================================
"""
Split a query into term groups.

One group per significant word, left to right; French stop words are
skipped. A group is the word itself followed by its synonyms, without
duplicates. A text satisfies a query when
every group has at least one term present in it.

Example:
    "Aide à la prescription d'antibiotiques"
    -> [["aide"],
        ["prescription", "ordonnance", "prescrire"],
        ["antibiotiques", "antibiotique", "antibio", "atb", "infectiologie"]]
"""

import re
from typing import List

from .normalizer import is_stop_word
from .synonyms import find_synonyms

TermGroup = List[str]

# Words shorter than this never form a group
MIN_WORD_LENGTH = 2

_SPLIT_RE = re.compile(r"[\s,;.!?]+")
_QUOTE_RE = re.compile(r"^['’]|['’]$")
_ELISION_RE = re.compile(r"^(d|j|l|n|qu|s|m|c)['’]")


def extract_keyword(word: str) -> str:
    """
    Reduce a raw token to its keyword.

    Lower-cases, strips one leading and one trailing quote, then one
    French elision prefix (d', l', qu', ...).

        >>> extract_keyword("d'allergie")
        'allergie'
    """
    lower = _QUOTE_RE.sub("", word.lower())
    return _ELISION_RE.sub("", lower, count=1)


def tokenize(query: str) -> List[str]:
    """Significant keywords of a query, in order (stop words dropped)."""
    if not isinstance(query, str):
        return []
    keywords = (extract_keyword(w) for w in _SPLIT_RE.split(query.lower()) if w)
    return [k for k in keywords if len(k) >= MIN_WORD_LENGTH and not is_stop_word(k)]


def build_term_groups(query: str) -> List[TermGroup]:
    """
    Build the term groups of a search query.

    Args:
        query: Raw text typed in the search box

    Returns:
        One group per significant word; empty for a blank query
    """
    groups = []
    for word in tokenize(query):
        group = [word]
        for synonym in find_synonyms(word):
            if synonym not in group:
                group.append(synonym)
        groups.append(group)
    return groups


def build_term_groups_for_question(question: str) -> List[TermGroup]:
    """Term groups for a free-text clinical question (same rules as a query)."""
    return build_term_groups(question)
