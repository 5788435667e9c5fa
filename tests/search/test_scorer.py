# Tests for the relevance scorer
# ==============================

from ressources_mg.search.scorer import (
    SCORE_CATEGORY,
    SCORE_DESCRIPTION,
    SCORE_NAME,
    SCORE_NAME_WORD_START,
    SCORE_NOTE,
    SearchableContext,
    score_search_match,
)
from ressources_mg.search.term_groups import build_term_groups


ANTIBIOCLIC = SearchableContext(
    name="Antibioclic",
    description="Aide à la prescription d'antibiotiques",
    category_name="Infectiologie",
)


class TestFieldWeights:
    """One score per field."""

    def test_name_word_start(self):
        assert score_search_match(ANTIBIOCLIC, build_term_groups("antibiotique")) == SCORE_NAME_WORD_START

    def test_name_inside_word(self):
        context = SearchableContext(name="Pediadoc")
        assert score_search_match(context, [["adoc"]]) == SCORE_NAME

    def test_name_second_word(self):
        context = SearchableContext(name="Bio MG")
        assert score_search_match(context, [["mg"]]) == SCORE_NAME_WORD_START

    def test_category(self):
        assert score_search_match(ANTIBIOCLIC, [["infectiologie"]]) == SCORE_CATEGORY

    def test_description(self):
        assert score_search_match(ANTIBIOCLIC, [["prescription"]]) == SCORE_DESCRIPTION

    def test_note(self):
        context = SearchableContext(name="Allergodiet", note="Site associatif")
        assert score_search_match(context, [["associatif"]]) == SCORE_NOTE

    def test_no_hit(self):
        assert score_search_match(ANTIBIOCLIC, [["cardiologie"]]) == 0

    def test_missing_optional_fields(self):
        context = SearchableContext(name="Ordotype", description="")
        assert score_search_match(context, [["ordotype"]]) == SCORE_NAME_WORD_START


class TestAggregation:
    """Max within a group, sum across groups."""

    def test_group_takes_the_best_term(self):
        # name and category both hit; only the best counts
        score = score_search_match(ANTIBIOCLIC, [["infectiologie", "antibio"]])
        assert score == SCORE_NAME_WORD_START

    def test_groups_add_up(self):
        score = score_search_match(ANTIBIOCLIC, [["antibio"], ["prescription"]])
        assert score == SCORE_NAME_WORD_START + SCORE_DESCRIPTION

    def test_stop_words_score_nothing(self):
        assert score_search_match(ANTIBIOCLIC, [["la"]]) == 0
        assert score_search_match(ANTIBIOCLIC, [["a"]]) == 0

    def test_empty_groups(self):
        assert score_search_match(ANTIBIOCLIC, []) == 0

    def test_adding_a_group_never_lowers_the_score(self):
        base = score_search_match(ANTIBIOCLIC, [["antibio"]])
        more = score_search_match(ANTIBIOCLIC, [["antibio"], ["cardiologie"]])
        assert more >= base

    def test_accent_insensitive(self):
        context = SearchableContext(name="Pédiatrie pratique")
        assert score_search_match(context, [["pediatrie"]]) == SCORE_NAME_WORD_START
