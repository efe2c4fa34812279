"""Deterministic store assistant used when the remote model is unavailable.

``generate_response`` is a pure function of the message and the catalog
snapshot: no session, no randomness, no I/O.
"""
from typing import List, Optional, Sequence, Tuple

from ..agents.base_agent import BaseAgent
from ..agents.general_info_agent import StoreLayoutAgent
from ..agents.meta_agent import GreetingAgent
from ..agents.offers_agent import DiscountAgent, SuggestionAgent
from ..agents.product_info_agent import DirectWantAgent, LocationAgent, PriceAgent
from ..agents.recipe_agent import RecipeAgent
from ..data.catalog_view import CatalogView
from ..nlu.rules import INTENT_RULES
from ..schemas.catalog_models import BranchDetail, ItemOut
from ..schemas.io_models import AgentResult

AGENT_MAP = {
    "direct_want": DirectWantAgent(),
    "recipe": RecipeAgent(),
    "location": LocationAgent(),
    "discount": DiscountAgent(),
    "price": PriceAgent(),
    "store_layout": StoreLayoutAgent(),
    "suggestion": SuggestionAgent(),
    "greeting": GreetingAgent(),
}

# (intent, rule, agent) in priority order
AGENT_CHAIN: List[Tuple[str, object, BaseAgent]] = [
    (intent, rule, AGENT_MAP[intent]) for intent, rule in INTENT_RULES
]


def answer(message: str, catalog: CatalogView) -> AgentResult:
    for intent, matches, agent in AGENT_CHAIN:
        if not matches(message):
            continue
        result = agent.handle(message, catalog)
        if result is not None:
            return result
    # the greeting rule always matches, this is unreachable in practice
    return AGENT_MAP["greeting"].handle(message, catalog)


def generate_response(message: str, branch: Optional[BranchDetail], items: Sequence[ItemOut]) -> str:
    """Answer a customer message from the branch catalog alone."""
    return answer(message, CatalogView(branch, items)).text
