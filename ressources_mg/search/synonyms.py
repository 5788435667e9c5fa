# RessourcesMG Search - Synonym Resolver
# ======================================
"""
French synonym dictionary for medical resource search.

Each key maps to the ordered list of terms accepted in its place (the list
includes the key). Lists are literal data: they are not symmetric and are
not merged, so "antibio" and "antibiotique" resolve to different lists.

Lookup is accent-insensitive on both sides. A term resolves to the first
entry, in table order, whose key or any of whose members normalizes to the
same form. Resolution goes through a precomputed index built in that same
order, so the result is identical to a linear scan.

Used by: term_groups.py
"""

from typing import Dict, List

from .normalizer import normalize_term

# Terms shorter than this skip the lookup
MIN_LOOKUP_LENGTH = 2


SYNONYMS: Dict[str, List[str]] = {
    # Prescription
    'ordonnance': ['ordonnance', 'prescription', 'prescrire'],
    'prescription': ['ordonnance', 'prescription', 'prescrire'],
    'ordotype': ['ordonnance', 'prescription', 'ordotype'],
    'recomed': ['recommandation', 'recomed', 'algorithme', 'traitement'],

    # Antibiotics and infectious diseases
    'antibiotique': ['antibiotique', 'antibiotiques', 'antibio', 'atb', 'infectiologie'],
    'antibio': ['antibiotique', 'antibiotiques', 'antibio'],
    'infectiologie': ['antibiotique', 'infection', 'infectiologie', 'microbiologie'],
    'vaccination': ['vaccination', 'vaccin', 'vaccins'],
    'vaccin': ['vaccination', 'vaccin', 'vaccins'],

    # Imaging
    'imagerie': ['imagerie', 'radiologie', 'radio', 'scanner', 'irm', 'échographie', 'écho'],
    'radiologie': ['imagerie', 'radiologie', 'radio', 'scanner'],
    'radio': ['imagerie', 'radiologie', 'radio', 'radiopédiatrique'],
    'scanner': ['imagerie', 'scanner', 'tomodensitométrie'],
    'irm': ['imagerie', 'irm', 'résonance', 'magnétique'],
    'échographie': ['imagerie', 'échographie', 'écho', 'échographique'],
    'écho': ['échographie', 'écho'],

    # Laboratory
    'biologie': ['biologie', 'bio', 'analyse', 'analyses', 'labo', 'laboratoire'],
    'bio': ['biologie', 'bio', 'analyse'],
    'analyse': ['biologie', 'analyse', 'analyses'],
    'hémogramme': ['hémogramme', 'numération', 'nfs', 'biologie'],

    # Artificial intelligence
    'ia': ['ia', 'intelligence artificielle', 'artificielle'],
    'intelligence': ['ia', 'intelligence artificielle'],
    'artificielle': ['ia', 'intelligence artificielle'],

    # Allergology
    'allergie': ['allergie', 'allergologie', 'allergologique', 'éviction'],
    'allergologie': ['allergie', 'allergologie', 'allergologique'],

    # Cardiology
    'cardiologie': ['cardiologie', 'cœur', 'cardiaque', 'cardiovasculaire'],
    'cœur': ['cardiologie', 'cœur', 'cardiaque'],
    'cardiaque': ['cardiologie', 'cardiaque', 'cardiovasculaire'],
    'ecg': ['ecg', 'électrocardiogramme', 'cardiologie'],

    # Dermatology
    'dermatologie': ['dermatologie', 'dermato', 'peau', 'cutané'],
    'peau': ['dermatologie', 'peau', 'cutané', 'dermatologique'],

    # Endocrinology
    'diabète': ['diabète', 'diabétique', 'glycémie', 'endocrinologie'],
    'glycémie': ['diabète', 'glycémie', 'endocrinologie'],
    'thyroïde': ['thyroïde', 'tsh', 'nodule', 'endocrinologie'],

    # Paediatrics
    'pédiatrie': ['pédiatrie', 'pédiatrique', 'enfant', 'enfants', 'bébé'],
    'enfant': ['pédiatrie', 'enfant', 'enfants', 'pédiatrique'],
    'pédiatrique': ['pédiatrie', 'pédiatrique', 'enfant'],

    # Gynaecology
    'gynécologie': ['gynécologie', 'gynéco', 'grossesse', 'obstétrique'],
    'grossesse': ['grossesse', 'gestation', 'gynécologie', 'prénatal'],
    'allaitement': ['allaitement', 'lactation', 'sein', 'nourrisson'],

    # Psychiatry
    'psychiatrie': ['psychiatrie', 'psy', 'psychologique', 'mental'],
    'psychiatrique': ['psychiatrie', 'psychiatrique', 'psychotrope'],
    'antidépresseur': ['antidépresseur', 'antidépresseurs', 'dépression', 'psychiatrie'],
    'addiction': ['addiction', 'addictologie', 'dépendance'],

    # Other specialties
    'neurologie': ['neurologie', 'neurologique', 'céphalée', 'migraine'],
    'rhumatologie': ['rhumatologie', 'rhumato', 'articulation', 'ostéoporose'],
    'orl': ['orl', 'oreille', 'otoscope', 'vertige', 'tympan'],
    'ophtalmologie': ['ophtalmologie', 'œil', 'vue', 'vision'],
    'dentaire': ['dentaire', 'dent', 'cmf', 'maxillo', 'maxillofacial'],
    'gériatrie': ['gériatrie', 'gériatrique', 'senior', 'sénior', 'âgé', 'démence'],
    'oncologie': ['oncologie', 'cancer', 'oncologique', 'tumeur'],
    'cancer': ['oncologie', 'cancer', 'tumeur'],

    # Tools and concepts
    'calculateur': ['calculateur', 'calcul', 'échelle', 'score'],
    'certificat': ['certificat', 'certificats', 'médical'],
    'recommandation': ['recommandation', 'recommandations', 'has', 'guidelines'],
    'médicament': ['médicament', 'médicaments', 'médicamenteux', 'pharmacologie'],
    'interaction': ['interaction', 'interactions', 'médicamenteuse'],
}


def _build_index(table: Dict[str, List[str]]) -> Dict[str, str]:
    """
    Map every normalized key and member to the key of the entry that owns it.

    An entry claims its own key before its members, and earlier entries
    keep what they claimed, which reproduces a first-match-wins scan.
    """
    index: Dict[str, str] = {}
    for key, terms in table.items():
        index.setdefault(normalize_term(key), key)
        for term in terms:
            index.setdefault(normalize_term(term), key)
    return index


_INDEX: Dict[str, str] = _build_index(SYNONYMS)


def find_synonyms(term: str) -> List[str]:
    """
    Get the equivalence class of a term.

    Args:
        term: A single query word (any case, with or without accents)

    Returns:
        The matching entry's list, lower-cased, or [term.lower()] when the
        term is too short or not in the dictionary
    """
    if not isinstance(term, str):
        return []
    normalized = normalize_term(term)
    if len(normalized) < MIN_LOOKUP_LENGTH:
        return [term.lower()]

    key = _INDEX.get(normalized)
    if key is None:
        return [term.lower()]
    return [t.lower() for t in SYNONYMS[key]]
