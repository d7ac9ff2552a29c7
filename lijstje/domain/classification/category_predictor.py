"""
Category Predictor - rule-based category + emoji guess for a product name

Used when a product is created without an explicit category. Pure keyword
logic over static tables, no database and no AI calls.

Matching (per concept term, concepts in declaration order, first hit wins):
- exact equality (case-insensitive)
- term occurs as a whole word in the name ("rode appel" -> "appel")
- single plural step in either direction: +"s" or +"en"

A term never matches as a bare substring: "sap" must not claim
"sinaasappel", so the fruit concept gets it.

Emoji priority:
1. name-based override ("kaas" anywhere -> 🧀)
2. emoji picker lookup of the product name
3. emoji picker lookup of the matched term
4. category default emoji
5. 📦
"""
import re
from typing import Iterable, List, Mapping, Optional, Pattern, Sequence, Tuple

import structlog

from lijstje.domain.classification.concepts import (
    CATEGORY_CONCEPTS,
    CATEGORY_EMOJI,
    FALLBACK_CATEGORY,
    FALLBACK_EMOJI,
    CategoryConcept,
)
from lijstje.domain.classification.emoji_picker import EMOJI_PICKER_INDEX, lookup_emoji
from lijstje.domain.classification.schemas import CategoryPrediction

logger = structlog.get_logger()


# (substring, emoji) - applied before any table lookup
NAME_EMOJI_OVERRIDES: Tuple[Tuple[str, str], ...] = (
    ("kaas", "🧀"),
)


def term_matches(name: str, term: str, pattern: Optional[Pattern] = None) -> bool:
    """
    Check whether a lowercased product name matches a lowercased term.

    Args:
        name: Normalized product name
        term: Normalized concept term
        pattern: Precompiled whole-word pattern for term (optional)

    Returns:
        True on exact, whole-word or single-step plural match
    """
    if not name or not term:
        return False
    if name == term:
        return True
    if name == term + "s" or term == name + "s":
        return True
    if name == term + "en" or term == name + "en":
        return True
    if pattern is None:
        pattern = _word_pattern(term)
    return pattern.search(name) is not None


def _word_pattern(term: str) -> Pattern:
    return re.compile(r"\b" + re.escape(term) + r"\b")


class CategoryPredictor:
    """
    Predicts category and emoji from ordered keyword concepts.

    Usage:
        predictor = CategoryPredictor()
        prediction = predictor.predict("Appels")
        print(prediction.category_name, prediction.emoji)
    """

    def __init__(
        self,
        concepts: Sequence[CategoryConcept] = CATEGORY_CONCEPTS,
        category_emoji: Mapping[str, str] = CATEGORY_EMOJI,
        emoji_index: Mapping[str, str] = EMOJI_PICKER_INDEX,
        name_overrides: Iterable[Tuple[str, str]] = NAME_EMOJI_OVERRIDES,
    ):
        self.concepts = tuple(concepts)
        self.category_emoji = category_emoji
        self.emoji_index = emoji_index
        self.name_overrides = tuple(name_overrides)

        # Compile once; concepts are immutable for the process lifetime
        self._compiled: List[Tuple[CategoryConcept, List[Tuple[str, Pattern]]]] = [
            (
                concept,
                [
                    (term.lower().strip(), _word_pattern(term.lower().strip()))
                    for term in concept.product_terms
                ],
            )
            for concept in self.concepts
        ]

    def match_concept(self, product_name: str) -> Optional[Tuple[CategoryConcept, str]]:
        """
        Find the first concept (in declaration order) with a matching term.

        Returns:
            (concept, matched_term) or None
        """
        name = (product_name or "").lower().strip()
        if not name:
            return None

        for concept, terms in self._compiled:
            for term, pattern in terms:
                if term_matches(name, term, pattern):
                    return concept, term
        return None

    def predict(self, product_name: str) -> CategoryPrediction:
        """
        Predict category and emoji for a product name.

        Never raises; unknown names get the fallback category and emoji.

        Args:
            product_name: Free-text product name as typed by the user

        Returns:
            CategoryPrediction
        """
        name = (product_name or "").lower().strip()
        match = self.match_concept(name)

        if match is None:
            emoji = self._override_emoji(name) or lookup_emoji(name, self.emoji_index) or FALLBACK_EMOJI
            prediction = CategoryPrediction(
                category_name=FALLBACK_CATEGORY,
                emoji=emoji,
                matched_term=None,
            )
        else:
            concept, term = match
            emoji = (
                self._override_emoji(name)
                or lookup_emoji(name, self.emoji_index)
                or lookup_emoji(term, self.emoji_index)
                or self.category_emoji.get(concept.category_name)
                or FALLBACK_EMOJI
            )
            prediction = CategoryPrediction(
                category_name=concept.category_name,
                emoji=emoji,
                matched_term=term,
            )

        logger.debug("category_predicted",
                    product_name=product_name,
                    category=prediction.category_name,
                    emoji=prediction.emoji,
                    matched_term=prediction.matched_term)

        return prediction

    def _override_emoji(self, name: str) -> Optional[str]:
        for needle, emoji in self.name_overrides:
            if needle in name:
                return emoji
        return None


# Singleton instance
category_predictor = CategoryPredictor()


def predict_category_and_emoji(product_name: str) -> CategoryPrediction:
    """Predict with the default concept tables."""
    return category_predictor.predict(product_name)
