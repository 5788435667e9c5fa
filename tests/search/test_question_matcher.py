# Tests for the local question matcher
# ====================================

from ressources_mg.catalog.models import Category, Resource
from ressources_mg.search.question_matcher import (
    MAX_RESULTS,
    match_question_locally,
    resource_search_text,
)


def _category(category_id, name, resources):
    return Category(id=category_id, name=name, resources=resources)


class TestMatchQuestionLocally:
    """Breadth first, then score."""

    def test_best_resource_first(self, sample_categories):
        suggestions = match_question_locally("antibiotique pour une otite", sample_categories)
        assert suggestions[0].resource_name == "Antibioclic"
        assert suggestions[0].category_name == "Infectiologie"
        assert suggestions[0].resource_url == "https://antibioclic.com/"

    def test_reason_names_category_and_resource(self, sample_categories):
        suggestion = match_question_locally("antibiotique", sample_categories)[0]
        assert "Infectiologie" in suggestion.reason
        assert "Antibioclic" in suggestion.reason

    def test_hidden_resources_are_ignored(self):
        categories = [_category("misc", "Divers", [
            Resource(id="hidden", name="Outil vaccin", url="https://hidden.example", is_hidden=True),
            Resource(id="visible", name="Outil vaccin", url="https://visible.example"),
        ])]
        suggestions = match_question_locally("vaccin", categories)
        assert [s.resource_url for s in suggestions] == ["https://visible.example"]

    def test_padded_question(self, sample_categories):
        suggestions = match_question_locally("Quel antibiotique pour une otite chez l'enfant ?", sample_categories)
        names = [s.resource_name for s in suggestions]
        assert names[0] == "Antibioclic"
        # "pour" appears in both descriptions but carries no meaning
        assert "Bio MG" not in names
        assert "Allergodiet" not in names

    def test_more_words_beat_higher_score(self):
        categories = [_category("misc", "Divers", [
            Resource(id="a", name="Vaccin express", url="https://a.example"),
            Resource(id="b", name="Calendrier", description="vaccin grossesse", url="https://b.example"),
        ])]
        suggestions = match_question_locally("vaccin grossesse", categories)
        # "a" scores higher on the name but only covers one word
        assert [s.resource_name for s in suggestions] == ["Calendrier", "Vaccin express"]

    def test_results_are_capped(self):
        resources = [
            Resource(id=f"r{i}", name=f"Outil vaccin {i}", url=f"https://r{i}.example")
            for i in range(MAX_RESULTS + 4)
        ]
        suggestions = match_question_locally("vaccin", [_category("misc", "Divers", resources)])
        assert len(suggestions) == MAX_RESULTS

    def test_duplicate_ids_listed_once(self):
        shared = Resource(id="shared", name="Vaccin partagé", url="https://shared.example")
        categories = [
            _category("one", "Un", [shared]),
            _category("two", "Deux", [shared]),
        ]
        suggestions = match_question_locally("vaccin", categories)
        assert len(suggestions) == 1

    def test_no_significant_word(self, sample_categories):
        assert match_question_locally("?", sample_categories) == []
        assert match_question_locally("", sample_categories) == []

    def test_no_match(self, sample_categories):
        assert match_question_locally("ophtalmologie", sample_categories) == []

    def test_to_dict(self, sample_categories):
        data = match_question_locally("antibiotique", sample_categories)[0].to_dict()
        assert set(data) == {"resource_name", "resource_url", "category_name", "reason"}


class TestResourceSearchText:

    def test_includes_all_fields(self):
        text = resource_search_text("Allergologie", "Allergodiet", "Conseils", "Site associatif")
        for part in ("Allergologie", "Allergodiet", "Conseils", "Site associatif"):
            assert part in text

    def test_missing_note(self):
        assert "None" not in resource_search_text("Cat", "Name", "Desc", None)
