# Tests for catalog search
# ========================

from ressources_mg.search.catalog_search import build_vocabulary, search_catalog


def _ids(result):
    return [c.id for c in result.categories]


def _resource_ids(category):
    return [r.id for r in category.resources]


class TestBlankQuery:
    """A blank query returns the catalog unchanged."""

    def test_returns_visible_catalog(self, sample_categories):
        result = search_catalog(sample_categories, "   ")
        assert _ids(result) == ["prescription", "infectiologie", "pediatrie", "allergologie"]
        assert result.result_count == 6
        assert result.did_you_mean == []
        assert not result.partial

    def test_selected_category(self, sample_categories):
        result = search_catalog(sample_categories, "", selected_category="infectiologie")
        assert _ids(result) == ["infectiologie"]

    def test_include_hidden(self, sample_categories):
        result = search_catalog(sample_categories, "", include_hidden=True)
        assert result.result_count == 7

    def test_input_not_mutated(self, sample_categories):
        search_catalog(sample_categories, "")
        assert len(sample_categories[2].resources) == 2


class TestStrictSearch:
    """Every word must match."""

    def test_synonym_match(self, sample_categories):
        result = search_catalog(sample_categories, "antibiotique")
        assert _ids(result) == ["infectiologie"]
        assert _resource_ids(result.categories[0]) == ["antibioclic", "vaccinclic"]
        assert result.result_count == 2
        assert not result.partial

    def test_categories_ordered_by_best_resource(self, sample_categories):
        result = search_catalog(sample_categories, "prescription")
        assert _ids(result) == ["prescription", "infectiologie"]

    def test_hidden_excluded_by_default(self, sample_categories):
        assert search_catalog(sample_categories, "interne").result_count == 0

    def test_hidden_included_for_webmaster(self, sample_categories):
        result = search_catalog(sample_categories, "interne", include_hidden=True)
        assert _resource_ids(result.categories[0]) == ["hidden-peds"]

    def test_selected_category_filters_results(self, sample_categories):
        result = search_catalog(sample_categories, "prescription", selected_category="infectiologie")
        assert _ids(result) == ["infectiologie"]

    def test_note_is_searched(self, sample_categories):
        result = search_catalog(sample_categories, "associatif")
        assert _resource_ids(result.categories[0]) == ["allergodiet"]


class TestFallbacks:
    """Did you mean and partial results."""

    def test_partial_results_for_multi_word_query(self, sample_categories):
        result = search_catalog(sample_categories, "pédiatrie ordonnance")
        assert result.partial
        assert "pediatrie" in _ids(result)
        assert "prescription" in _ids(result)

    def test_stop_words_do_not_widen_partial_results(self, sample_categories):
        padded = search_catalog(sample_categories, "vaccin de la grossesse")
        plain = search_catalog(sample_categories, "vaccin grossesse")
        assert padded.partial == plain.partial
        assert padded.result_count == plain.result_count
        assert _ids(padded) == _ids(plain) == ["infectiologie"]
        assert _resource_ids(padded.categories[0]) == ["vaccinclic"]

    def test_only_stop_words(self, sample_categories):
        result = search_catalog(sample_categories, "de la")
        assert result.result_count == search_catalog(sample_categories, "").result_count
        assert not result.partial

    def test_did_you_mean(self, sample_categories):
        result = search_catalog(sample_categories, "alergodiet")
        assert result.result_count == 0
        assert result.categories == []
        assert result.did_you_mean[0] == "Allergodiet"
        assert not result.partial

    def test_to_dict(self, sample_categories):
        data = search_catalog(sample_categories, "antibiotique").to_dict()
        assert data["query"] == "antibiotique"
        assert data["result_count"] == 2
        assert data["categories"][0]["id"] == "infectiologie"


class TestVocabulary:

    def test_names_of_categories_and_resources(self, sample_categories):
        vocabulary = build_vocabulary(sample_categories)
        assert "Infectiologie" in vocabulary
        assert "Antibioclic" in vocabulary
