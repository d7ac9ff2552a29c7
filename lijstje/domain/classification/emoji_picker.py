"""
Emoji picker table - product name to emoji preselection

Consulted before the per-category default emoji. Lookups are
case-insensitive and tolerate a single trailing "s"/"en" plural in either
direction ("Appels" finds "appel", "kers" finds "kersen").
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Tuple


@dataclass(frozen=True)
class EmojiPickerEntry:
    name: str
    emoji: str


EMOJI_PICKER_ENTRIES: Tuple[EmojiPickerEntry, ...] = (
    # Fruit
    EmojiPickerEntry("appel", "🍎"),
    EmojiPickerEntry("groene appel", "🍏"),
    EmojiPickerEntry("peer", "🍐"),
    EmojiPickerEntry("banaan", "🍌"),
    EmojiPickerEntry("bananen", "🍌"),
    EmojiPickerEntry("sinaasappel", "🍊"),
    EmojiPickerEntry("mandarijn", "🍊"),
    EmojiPickerEntry("clementine", "🍊"),
    EmojiPickerEntry("grapefruit", "🍊"),
    EmojiPickerEntry("citroen", "🍋"),
    EmojiPickerEntry("limoen", "🍋"),
    EmojiPickerEntry("druiven", "🍇"),
    EmojiPickerEntry("aardbei", "🍓"),
    EmojiPickerEntry("aardbeien", "🍓"),
    EmojiPickerEntry("bosbes", "🫐"),
    EmojiPickerEntry("blauwe bes", "🫐"),
    EmojiPickerEntry("kersen", "🍒"),
    EmojiPickerEntry("perzik", "🍑"),
    EmojiPickerEntry("perziken", "🍑"),
    EmojiPickerEntry("nectarine", "🍑"),
    EmojiPickerEntry("pruimen", "🫐"),
    EmojiPickerEntry("kiwi", "🥝"),
    EmojiPickerEntry("mango", "🥭"),
    EmojiPickerEntry("watermeloen", "🍉"),
    EmojiPickerEntry("meloen", "🍈"),
    EmojiPickerEntry("ananas", "🍍"),
    EmojiPickerEntry("kokosnoot", "🥥"),
    EmojiPickerEntry("avocado", "🥑"),
    # Groente
    EmojiPickerEntry("tomaat", "🍅"),
    EmojiPickerEntry("tomaten", "🍅"),
    EmojiPickerEntry("komkommer", "🥒"),
    EmojiPickerEntry("aubergine", "🍆"),
    EmojiPickerEntry("paprika", "🫑"),
    EmojiPickerEntry("rode paprika", "🫑"),
    EmojiPickerEntry("chili", "🌶️"),
    EmojiPickerEntry("broccoli", "🥦"),
    EmojiPickerEntry("sla", "🥬"),
    EmojiPickerEntry("spinazie", "🥬"),
    EmojiPickerEntry("wortel", "🥕"),
    EmojiPickerEntry("wortels", "🥕"),
    EmojiPickerEntry("ui", "🧅"),
    EmojiPickerEntry("uien", "🧅"),
    EmojiPickerEntry("prei", "🧅"),
    EmojiPickerEntry("knoflook", "🧄"),
    EmojiPickerEntry("maïs", "🌽"),
    EmojiPickerEntry("mais", "🌽"),
    EmojiPickerEntry("pompoen", "🎃"),
    EmojiPickerEntry("champignons", "🍄"),
    EmojiPickerEntry("aardappel", "🥔"),
    EmojiPickerEntry("aardappelen", "🥔"),
    EmojiPickerEntry("zoete aardappel", "🍠"),
    # Vlees & vis
    EmojiPickerEntry("gehakt", "🥩"),
    EmojiPickerEntry("biefstuk", "🥩"),
    EmojiPickerEntry("ham", "🥩"),
    EmojiPickerEntry("kip", "🍗"),
    EmojiPickerEntry("kipfilet", "🍗"),
    EmojiPickerEntry("kalkoenfilet", "🦃"),
    EmojiPickerEntry("bacon", "🥓"),
    EmojiPickerEntry("spek", "🥓"),
    EmojiPickerEntry("ontbijtspek", "🥓"),
    EmojiPickerEntry("worst", "🌭"),
    EmojiPickerEntry("vis", "🐟"),
    EmojiPickerEntry("zalm", "🐟"),
    EmojiPickerEntry("tonijn", "🐟"),
    EmojiPickerEntry("haring", "🐟"),
    EmojiPickerEntry("garnalen", "🦐"),
    EmojiPickerEntry("kreeft", "🦞"),
    EmojiPickerEntry("krab", "🦀"),
    EmojiPickerEntry("inktvis", "🦑"),
    EmojiPickerEntry("octopus", "🐙"),
    EmojiPickerEntry("sushi", "🍣"),
    # Zuivel
    EmojiPickerEntry("melk", "🥛"),
    EmojiPickerEntry("boter", "🧈"),
    EmojiPickerEntry("eieren", "🥚"),
    EmojiPickerEntry("ei", "🥚"),
    EmojiPickerEntry("hüttenkäse", "🧀"),
    EmojiPickerEntry("ricotta", "🧀"),
    EmojiPickerEntry("mozzarella", "🧀"),
    EmojiPickerEntry("feta", "🧀"),
    EmojiPickerEntry("brie", "🧀"),
    # Brood & bakkerij
    EmojiPickerEntry("brood", "🍞"),
    EmojiPickerEntry("stokbrood", "🥖"),
    EmojiPickerEntry("baguette", "🥖"),
    EmojiPickerEntry("croissant", "🥐"),
    EmojiPickerEntry("bagel", "🥯"),
    EmojiPickerEntry("wafel", "🧇"),
    EmojiPickerEntry("pannenkoek", "🥞"),
    EmojiPickerEntry("pannenkoeken", "🥞"),
    EmojiPickerEntry("muffin", "🧁"),
    EmojiPickerEntry("cake", "🍰"),
    EmojiPickerEntry("taart", "🎂"),
    EmojiPickerEntry("koekje", "🍪"),
    EmojiPickerEntry("donut", "🍩"),
    EmojiPickerEntry("muesli", "🥣"),
    EmojiPickerEntry("cruesli", "🥣"),
    EmojiPickerEntry("ontbijtgranen", "🥣"),
    # Dranken
    EmojiPickerEntry("water", "💧"),
    EmojiPickerEntry("cola", "🥤"),
    EmojiPickerEntry("fanta", "🥤"),
    EmojiPickerEntry("appelsap", "🧃"),
    EmojiPickerEntry("sinaasappelsap", "🧃"),
    EmojiPickerEntry("sap", "🧃"),
    EmojiPickerEntry("koffie", "☕"),
    EmojiPickerEntry("thee", "🍵"),
    EmojiPickerEntry("bier", "🍺"),
    EmojiPickerEntry("wijn", "🍷"),
    EmojiPickerEntry("rode wijn", "🍷"),
    EmojiPickerEntry("champagne", "🍾"),
    EmojiPickerEntry("prosecco", "🥂"),
    EmojiPickerEntry("whisky", "🥃"),
    EmojiPickerEntry("cocktail", "🍸"),
    # Pasta, oosters & wereld / houdbaar
    EmojiPickerEntry("pasta", "🍝"),
    EmojiPickerEntry("spaghetti", "🍝"),
    EmojiPickerEntry("rijst", "🍚"),
    EmojiPickerEntry("couscous", "🍚"),
    EmojiPickerEntry("noedels", "🍜"),
    EmojiPickerEntry("soep", "🍲"),
    EmojiPickerEntry("bouillon", "🍲"),
    EmojiPickerEntry("sojasaus", "🍶"),
    EmojiPickerEntry("ketjap", "🍶"),
    EmojiPickerEntry("zout", "🧂"),
    EmojiPickerEntry("olijfolie", "🫒"),
    EmojiPickerEntry("honing", "🍯"),
    EmojiPickerEntry("jam", "🫙"),
    EmojiPickerEntry("pindakaas", "🥜"),
    EmojiPickerEntry("noten", "🥜"),
    EmojiPickerEntry("rozijnen", "🍇"),
    EmojiPickerEntry("chips", "🍟"),
    EmojiPickerEntry("snoep", "🍬"),
    EmojiPickerEntry("chocolade", "🍫"),
    EmojiPickerEntry("popcorn", "🍿"),
    # Diepvries
    EmojiPickerEntry("ijs", "🍦"),
    EmojiPickerEntry("pizza", "🍕"),
    EmojiPickerEntry("friet", "🍟"),
    EmojiPickerEntry("patat", "🍟"),
    EmojiPickerEntry("frikandel", "🌭"),
    EmojiPickerEntry("bitterballen", "🍟"),
    EmojiPickerEntry("ijsklontjes", "🧊"),
    # Huishouden & verzorging
    EmojiPickerEntry("tandpasta", "🪥"),
    EmojiPickerEntry("zeep", "🧼"),
    EmojiPickerEntry("shampoo", "🧴"),
    EmojiPickerEntry("wc-papier", "🧻"),
    EmojiPickerEntry("keukenrol", "🧻"),
    EmojiPickerEntry("sponsjes", "🧽"),
    EmojiPickerEntry("bezem", "🧹"),
    EmojiPickerEntry("emmer", "🪣"),
    EmojiPickerEntry("kaarsen", "🕯️"),
    EmojiPickerEntry("batterijen", "🔋"),
    EmojiPickerEntry("pleisters", "🩹"),
    EmojiPickerEntry("luiers", "🧷"),
)


def _build_index(entries):
    index = {}
    for entry in entries:
        # First declaration wins for duplicate names
        index.setdefault(entry.name.lower().strip(), entry.emoji)
    return MappingProxyType(index)


EMOJI_PICKER_INDEX = _build_index(EMOJI_PICKER_ENTRIES)


def lookup_emoji(name: str, index=EMOJI_PICKER_INDEX) -> Optional[str]:
    """
    Find an emoji for a product name (exact first, then singular/plural).

    Args:
        name: Product name or concept term
        index: Lowercased name -> emoji mapping

    Returns:
        Emoji or None when the table has no entry
    """
    key = (name or "").lower().strip()
    if not key:
        return None

    candidates = [key, key + "s", key + "en"]
    if key.endswith("en"):
        candidates.append(key[:-2])
    if key.endswith("s"):
        candidates.append(key[:-1])

    for candidate in candidates:
        emoji = index.get(candidate)
        if emoji:
            return emoji
    return None
