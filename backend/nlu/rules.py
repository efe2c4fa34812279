"""Rule-based intent detection for the store assistant.

Plain lower-case substring checks, evaluated in a fixed priority order. The
first rule whose agent produces an answer wins (see ``app/fallback.py``).
"""
from typing import Callable, List, Tuple

DIRECT_WANT = "i want"
COOKING = ["cook", "make", "recipe"]
RECIPE = ["recipe", "how to make", "how to cook", "make", "cook"]
LOCATION = ["where", "find", "location"]
DISCOUNT = ["discount", "offer", "sale", "promo"]
PRICE = ["price", "cost", "how much"]
LAYOUT = ["floor", "section", "vegetables", "fruits", "dairy", "grocery"]
SUGGEST = ["suggest", "popular", "trending", "best"]


def _contains_any(q: str, vocab: List[str]) -> bool:
    ql = q.lower()
    return any(phrase in ql for phrase in vocab)


def is_direct_want(q: str) -> bool:
    return DIRECT_WANT in q.lower() and not _contains_any(q, COOKING)

def is_recipe(q: str) -> bool:
    # "want to cook" / "want to make" are covered by the bare verbs
    return _contains_any(q, RECIPE)

def is_location(q: str) -> bool:
    return _contains_any(q, LOCATION)

def is_discount(q: str) -> bool:
    return _contains_any(q, DISCOUNT)

def is_price(q: str) -> bool:
    return _contains_any(q, PRICE)

def is_layout(q: str) -> bool:
    return _contains_any(q, LAYOUT)

def is_suggestion(q: str) -> bool:
    return _contains_any(q, SUGGEST)

def is_anything(q: str) -> bool:
    return True


# Priority order matters: earlier rules shadow later ones.
INTENT_RULES: List[Tuple[str, Callable[[str], bool]]] = [
    ("direct_want", is_direct_want),
    ("recipe", is_recipe),
    ("location", is_location),
    ("discount", is_discount),
    ("price", is_price),
    ("store_layout", is_layout),
    ("suggestion", is_suggestion),
    ("greeting", is_anything),
]


def rule_based_intents(query: str) -> List[str]:
    """All intents whose rule matches, highest priority first."""
    return [intent for intent, matches in INTENT_RULES if matches(query)]
