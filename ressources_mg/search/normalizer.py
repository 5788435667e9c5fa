# RessourcesMG Search - Text Normalizer
# =====================================
"""
Case folding, diacritic stripping and stop-word classification.

All comparisons in the search package go through these helpers so that
"Pédiatrie", "pediatrie" and "PEDIATRIE" are the same term.
"""

import unicodedata
from typing import FrozenSet

# Combining diacritical marks block (U+0300 - U+036F)
_COMBINING_START = 0x0300
_COMBINING_END = 0x036F


def _strip_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text.lower())
    return "".join(
        ch for ch in decomposed
        if not (_COMBINING_START <= ord(ch) <= _COMBINING_END)
    )


def normalize_text(text: str) -> str:
    """
    Normalize a whole haystack: lowercase, NFD, combining marks removed.

    Whitespace is kept as is so offsets stay meaningful for regex search.
    Non-string input normalizes to an empty string.
    """
    if not isinstance(text, str):
        return ""
    return _strip_diacritics(text)


def normalize_term(term: str) -> str:
    """Normalize a single term for comparison (same as normalize_text, trimmed)."""
    return normalize_text(term).strip()


# =============================================================================
# FRENCH STOP WORDS
# =============================================================================
# Matched on whole words only, never as substrings.

STOP_WORDS: FrozenSet[str] = frozenset([
    # Articles and determiners
    "le", "la", "les", "un", "une", "des", "du", "de", "d'",
    "ce", "cet", "cette", "ces",
    # Prepositions
    "à", "au", "aux", "en", "dans", "sur", "pour", "avec", "sans", "sous",
    "par", "entre", "vers", "chez", "avant", "après", "pendant", "depuis",
    # Conjunctions
    "et", "ou", "mais", "donc", "ni", "que", "qui", "quoi", "si", "comme",
    "car", "lorsque", "quand", "alors",
    # Possessives and demonstratives
    "mon", "ma", "mes", "ton", "ta", "tes", "son", "sa", "ses",
    "notre", "nos", "votre", "vos", "leur", "leurs", "cela", "ça",
    # Auxiliaries
    "est", "sont", "être", "avoir", "fait", "faire", "a", "ont", "sera",
    "seraient", "été",
    # Adverbs and quantifiers
    "ne", "pas", "plus", "très", "trop", "aussi", "bien", "mal", "peu",
    "beaucoup", "tout", "tous", "toute", "toutes", "autre", "autres",
    "même", "mêmes", "seulement", "encore", "déjà", "toujours", "souvent",
    "jamais",
    # Personal pronouns
    "je", "tu", "il", "elle", "on", "nous", "vous", "ils", "elles", "y",
    "lui", "eux",
])

NORMALIZED_STOP_WORDS: FrozenSet[str] = frozenset(normalize_term(w) for w in STOP_WORDS)


def is_stop_word(term: str) -> bool:
    """True if the term is a French function word, with or without accents."""
    if not isinstance(term, str):
        return False
    raw = term.lower()
    return raw in STOP_WORDS or normalize_term(term) in NORMALIZED_STOP_WORDS
