# Tests for the synonym resolver
# ==============================

from ressources_mg.search.synonyms import SYNONYMS, find_synonyms


class TestFindSynonyms:
    """Dictionary lookup."""

    def test_antibio_expansion(self):
        """'antibio' is a member of the 'antibiotique' entry, which comes first."""
        synonyms = find_synonyms("antibio")
        for term in ("antibiotique", "antibiotiques", "antibio", "atb"):
            assert term in synonyms

    def test_key_lookup(self):
        assert find_synonyms("ordotype") == ["ordonnance", "prescription", "ordotype"]

    def test_member_lookup_uses_first_entry(self):
        """'prescription' is in the 'ordonnance' entry before its own key."""
        assert find_synonyms("prescription") == ["ordonnance", "prescription", "prescrire"]

    def test_first_match_wins_over_own_key(self):
        """'écho' belongs to 'imagerie', listed before the 'écho' key."""
        assert find_synonyms("écho")[0] == "imagerie"

    def test_accent_insensitive(self):
        assert find_synonyms("Pediatrie") == find_synonyms("pédiatrie")
        assert "pédiatrie" in find_synonyms("PEDIATRIE")

    def test_multi_word_member(self):
        assert "intelligence artificielle" in find_synonyms("ia")

    def test_unknown_term_is_its_own_class(self):
        assert find_synonyms("Otoscopie") == ["otoscopie"]

    def test_short_term_bypasses_lookup(self):
        assert find_synonyms("X") == ["x"]

    def test_result_is_a_copy(self):
        synonyms = find_synonyms("vaccin")
        synonyms.append("modified")
        assert "modified" not in SYNONYMS["vaccination"]
        assert "modified" not in find_synonyms("vaccin")


class TestSynonymTable:
    """The table itself."""

    def test_keys_are_lowercase(self):
        for key in SYNONYMS:
            assert key == key.lower()

    def test_lists_are_not_empty(self):
        for terms in SYNONYMS.values():
            assert len(terms) >= 2

    def test_table_is_not_symmetric(self):
        """Cross-referencing entries keep their own lists."""
        assert SYNONYMS["antibio"] != SYNONYMS["antibiotique"]
