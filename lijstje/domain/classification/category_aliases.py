"""
Category Aliases - map a predicted category name to a household category

Households rename and reword their categories ("Groente & Fruit",
"Fruit en groente", ...). Resolution tries, in order:
1. exact stored name
2. alias variants of the canonical name
3. normalized comparison (case, "&"/"en", commas, whitespace)
"""
import re
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence

import structlog

from lijstje.domain.classification.concepts import FALLBACK_CATEGORY

logger = structlog.get_logger()

_COMMA = re.compile(r"\s*,\s*")
_AMPERSAND = re.compile(r"\s*&\s*")
_WHITESPACE = re.compile(r"\s+")


def normalize_category_name(name: str) -> str:
    """Lowercase, trim, commas to spaces, "&" to "en", single spaces."""
    normalized = (name or "").lower().strip()
    normalized = _COMMA.sub(" ", normalized)
    normalized = _AMPERSAND.sub(" en ", normalized)
    normalized = _WHITESPACE.sub(" ", normalized)
    # A leading/trailing "," or "&" leaves edge whitespace behind
    return normalized.strip()


# Keys = canonical category names; values = variants seen in household data
CATEGORY_ALIASES = MappingProxyType({
    "Fruit & Groente": (
        "Fruit & Groente",
        "fruit & groente",
        "Fruit en Groente",
        "Groente & Fruit",
        "Groente en Fruit",
        "Fruit en groente",
        "Groente en fruit",
    ),
    "Vers, Vega, Vlees & Vis": (
        "Vers, Vega, Vlees & Vis",
        "vers, vega, vlees & vis",
        "Vers, Vega, Vlees en Vis",
        "Vlees & Vis",
        "Vlees en Vis",
        "vlees & vis",
        "Vers",
        "Vega",
        "Vis & Vlees",
    ),
    "Pasta, Oosters & Wereld": (
        "Pasta, Oosters & Wereld",
        "pasta, oosters & wereld",
        "Pasta, Oosters en Wereld",
        "Pasta & Oosters",
        "Oosters & Wereld",
        "Droge Kruidenierswaren",
    ),
    "Brood & Bakkerij": (
        "Brood & Bakkerij",
        "brood & bakkerij",
        "Brood en Bakkerij",
        "Bakkerij & Brood",
        "brood en bakkerij",
        "Brood",
        "Bakkerij",
    ),
    "Zuivel": ("Zuivel", "zuivel"),
    "Droog & Houdbaar": (
        "Droog & Houdbaar",
        "droog & houdbaar",
        "Droog en Houdbaar",
        "Houdbaar & Droog",
        "Houdbare Producten",
        "Houdbare waren",
        "Droge waren",
        "Conserven",
        "conserven",
    ),
    "Dranken": ("Dranken", "dranken", "Drank", "drank"),
    "Huishouden & Verzorging": (
        "Huishouden & Verzorging",
        "huishouden & verzorging",
        "Huishouden en Verzorging",
        "Verzorging & Huishouden",
        "Persoonlijke Verzorging",
        "Huishoudelijke Artikelen",
        "Verzorging",
        "Huishoud",
        "verzorging",
        "huishoud",
    ),
    "Diepvries": ("Diepvries", "diepvries"),
    "Overig": ("Overig", "overig"),
})


def find_category_id_by_predicted_name(
    predicted_name: str,
    categories: Sequence[Mapping[str, Any]],
    aliases: Mapping[str, Sequence[str]] = CATEGORY_ALIASES,
) -> Optional[Any]:
    """
    Resolve a predicted category name to a household category id.

    Args:
        predicted_name: Canonical name from the predictor
        categories: Household categories with "id" and "name"
        aliases: Canonical name -> variants table

    Returns:
        Category id or None when no tier matches
    """
    if not categories:
        return None

    for category in categories:
        if category["name"] == predicted_name:
            return category["id"]

    for alias in aliases.get(predicted_name, ()):
        for category in categories:
            if category["name"] == alias:
                logger.debug("category_resolved_by_alias",
                            predicted=predicted_name,
                            alias=alias)
                return category["id"]

    predicted_normalized = normalize_category_name(predicted_name)
    for category in categories:
        if normalize_category_name(category["name"]) == predicted_normalized:
            logger.debug("category_resolved_by_normalized_name",
                        predicted=predicted_name,
                        stored=category["name"])
            return category["id"]

    return None


def find_fallback_category_id(categories: Sequence[Mapping[str, Any]]) -> Optional[Any]:
    """Find the household "Overig" category (exact or normalized name)."""
    fallback_normalized = normalize_category_name(FALLBACK_CATEGORY)
    for category in categories:
        if (
            category["name"] == FALLBACK_CATEGORY
            or normalize_category_name(category["name"]) == fallback_normalized
        ):
            return category["id"]
    return None
