"""
Tests for the rule-based category + emoji predictor
"""
import pytest

from lijstje.domain.classification import (
    CategoryConcept,
    CategoryPredictor,
    predict_category_and_emoji,
)
from lijstje.domain.classification.category_predictor import term_matches


class TestTermMatching:

    def test_exact(self):
        assert term_matches("appel", "appel")

    def test_whole_word(self):
        assert term_matches("rode appel", "appel")
        assert term_matches("blauwe bes uit spanje", "blauwe bes")

    def test_no_substring_inside_longer_word(self):
        assert not term_matches("sinaasappel", "sap")
        assert not term_matches("chocolade", "cola")
        assert not term_matches("sinaasappelsap", "appel")

    def test_plural_s_both_directions(self):
        assert term_matches("appels", "appel")
        assert term_matches("appel", "appels")

    def test_plural_en_both_directions(self):
        assert term_matches("kersen", "kers")
        assert term_matches("kers", "kersen")

    def test_no_generic_stemming(self):
        # Dutch vowel doubling is not handled
        assert not term_matches("peren", "peer")

    def test_empty_never_matches(self):
        assert not term_matches("", "appel")
        assert not term_matches("appel", "")


class TestPredictDefaultTables:

    @pytest.mark.parametrize("name,category,emoji", [
        ("Appels", "Fruit & Groente", "🍎"),
        ("peer", "Fruit & Groente", "🍐"),
        ("Sinaasappel", "Fruit & Groente", "🍊"),
        ("Sinaasappelsap", "Dranken", "🧃"),
        ("Cola", "Dranken", "🥤"),
        ("Wc-papier", "Huishouden & Verzorging", "🧻"),
        ("Tomaat", "Fruit & Groente", "🍅"),
        ("  SPINAZIE  ", "Fruit & Groente", "🥬"),
    ])
    def test_known_products(self, name, category, emoji):
        prediction = predict_category_and_emoji(name)
        assert prediction.category_name == category
        assert prediction.emoji == emoji

    def test_whole_word_inside_longer_name(self):
        prediction = predict_category_and_emoji("Rode wijn")
        assert prediction.category_name == "Dranken"
        assert prediction.matched_term == "wijn"
        assert prediction.emoji == "🍷"

    def test_emoji_from_matched_term(self):
        # "verse zalm" is not in the picker table, "zalm" is
        prediction = predict_category_and_emoji("Verse zalm")
        assert prediction.category_name == "Vers, Vega, Vlees & Vis"
        assert prediction.emoji == "🐟"

    def test_emoji_from_category_default(self):
        prediction = predict_category_and_emoji("Courgette")
        assert prediction.category_name == "Fruit & Groente"
        assert prediction.emoji == "🥬"

    def test_kaas_override(self):
        for name in ("Kaas", "Jonge kaas", "Geitenkaas"):
            prediction = predict_category_and_emoji(name)
            assert prediction.category_name == "Zuivel"
            assert prediction.emoji == "🧀"

    def test_unknown_product_falls_back(self):
        prediction = predict_category_and_emoji("Xyzzy")
        assert prediction.category_name == "Overig"
        assert prediction.emoji == "📦"
        assert prediction.matched_term is None

    def test_unknown_category_still_uses_picker_emoji(self):
        prediction = predict_category_and_emoji("Chocolade")
        assert prediction.category_name == "Overig"
        assert prediction.emoji == "🍫"

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_empty_input(self, name):
        prediction = predict_category_and_emoji(name)
        assert prediction.category_name == "Overig"
        assert prediction.emoji == "📦"

    def test_deterministic(self):
        names = ["Appels", "Kaas", "Xyzzy", "Rode wijn", "Bananen"]
        first = [predict_category_and_emoji(n) for n in names]
        second = [predict_category_and_emoji(n) for n in names]
        assert first == second

    @pytest.mark.parametrize("name", [
        "a", "melk 1L", "0.0 bier", "crème fraîche", "wc reiniger", "!!!", "ïë", "123",
    ])
    def test_always_returns_values(self, name):
        prediction = predict_category_and_emoji(name)
        assert prediction.category_name
        assert prediction.emoji


class TestPredictCustomConcepts:

    def test_first_declared_concept_wins(self):
        first = CategoryConcept(category_name="Eerste", product_terms=("melk",))
        second = CategoryConcept(category_name="Tweede", product_terms=("kaas", "melk"))

        assert CategoryPredictor(concepts=(first, second)).predict("melk").category_name == "Eerste"
        assert CategoryPredictor(concepts=(second, first)).predict("melk").category_name == "Tweede"

    def test_short_term_does_not_steal_longer_word(self):
        dranken = CategoryConcept(category_name="Dranken", product_terms=("sap",))
        fruit = CategoryConcept(category_name="Fruit", product_terms=("sinaasappel",))

        assert CategoryPredictor(concepts=(dranken,)).predict("sinaasappel").category_name == "Overig"
        assert CategoryPredictor(concepts=(dranken, fruit)).predict("sinaasappel").category_name == "Fruit"

    def test_plural_symmetry(self):
        singular = CategoryPredictor(concepts=(CategoryConcept("Fruit", ("appel",)),))
        plural = CategoryPredictor(concepts=(CategoryConcept("Fruit", ("appels",)),))

        assert singular.predict("appels").category_name == "Fruit"
        assert plural.predict("appel").category_name == "Fruit"

    def test_kaas_emoji_without_matching_concept(self):
        predictor = CategoryPredictor(concepts=(CategoryConcept("Dranken", ("cola",)),))
        prediction = predictor.predict("Kaas")
        assert prediction.category_name == "Overig"
        assert prediction.emoji == "🧀"

    def test_missing_category_emoji_uses_global_fallback(self):
        predictor = CategoryPredictor(
            concepts=(CategoryConcept("Speelgoed", ("lego",)),),
            emoji_index={},
        )
        prediction = predictor.predict("lego")
        assert prediction.category_name == "Speelgoed"
        assert prediction.emoji == "📦"
