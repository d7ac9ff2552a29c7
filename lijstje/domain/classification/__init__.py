"""
Classification Module - category, emoji and fruit/groente guesses for product names

Three pieces:
1. Category Predictor (rules): free-text name -> canonical category + emoji
2. Category Aliases (rules): canonical category -> household category id
3. Fruit/Groente: secondary sort key inside "Fruit & Groente"

Example flow:
- "Appels" -> plural of "appel" -> "Fruit & Groente", 🍎
- "Fruit & Groente" -> household has "Groente & Fruit" -> alias hit -> category id
- "Jonge kaas" -> "Zuivel", 🧀 (kaas override)
"""

from lijstje.domain.classification.category_aliases import (
    CATEGORY_ALIASES,
    find_category_id_by_predicted_name,
    find_fallback_category_id,
    normalize_category_name,
)
from lijstje.domain.classification.category_predictor import (
    CategoryPredictor,
    category_predictor,
    predict_category_and_emoji,
)
from lijstje.domain.classification.concepts import CategoryConcept
from lijstje.domain.classification.fruit_groente import fruit_groente_sort_key, is_fruit
from lijstje.domain.classification.schemas import CategoryPrediction

__all__ = [
    'CATEGORY_ALIASES',
    'CategoryConcept',
    'CategoryPrediction',
    'CategoryPredictor',
    'category_predictor',
    'find_category_id_by_predicted_name',
    'find_fallback_category_id',
    'fruit_groente_sort_key',
    'is_fruit',
    'normalize_category_name',
    'predict_category_and_emoji',
]
