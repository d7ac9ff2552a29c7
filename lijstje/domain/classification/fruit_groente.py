"""
Fruit vs groente classification for sorting the "Fruit & Groente" category.

Fruit sorts first, then groente, each alphabetically. A token counts as fruit
when it equals a fruit term or starts with one. The prefix rule is loose on
purpose (covers compounds such as "appelmoes"), so words that merely share a
prefix with a fruit term are also treated as fruit.
"""
from typing import Tuple

FRUIT_TOKENS = frozenset({
    'abrikoos',
    'abrikozen',
    'ananas',
    'ananassen',
    'appel',
    'appels',
    'aardbei',
    'aardbeien',
    'avocado',
    "avocado's",
    'avocados',
    'banaan',
    'bananen',
    'bes',
    'bessen',
    'blauwe',
    'bosbes',
    'bosbessen',
    'braam',
    'bramen',
    'cactusvijg',
    'cactusvijgen',
    'clementine',
    'clementines',
    'cranberry',
    "cranberry's",
    'citroen',
    'citroenen',
    'dadel',
    'dadels',
    'druif',
    'druiven',
    'framboos',
    'frambozen',
    'grapefruit',
    'grapefruits',
    'granaatappel',
    'granaatappels',
    'guave',
    'guaves',
    'kaki',
    "kaki's",
    'kers',
    'kersen',
    'kiwi',
    "kiwi's",
    'limoen',
    'limoenen',
    'lychee',
    'lychees',
    'mandarijn',
    'mandarijnen',
    'mango',
    "mango's",
    'meloen',
    'meloenen',
    'nectarine',
    'nectarines',
    'papaja',
    "papaja's",
    'passievrucht',
    'passievruchten',
    'peer',
    'peren',
    'perzik',
    'perziken',
    'physalis',
    'pruim',
    'pruimen',
    'sinaasappel',
    'sinaasappelen',
    'vijg',
    'vijgen',
    'watermeloen',
    'watermeloenen',
})


def is_fruit(product_name: str) -> bool:
    """True if any whitespace token is a fruit term or starts with one."""
    normalized = (product_name or "").lower().strip()
    if not normalized:
        return False

    for token in normalized.split():
        if token in FRUIT_TOKENS:
            return True
        if any(token.startswith(term) for term in FRUIT_TOKENS):
            return True
    return False


def fruit_groente_sort_key(product_name: str) -> Tuple[int, str]:
    """Sort key: fruit (0) before groente (1), then alphabetical."""
    return (0 if is_fruit(product_name) else 1, (product_name or "").lower())
