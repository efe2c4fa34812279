"""Meta Agent: greeting and help when no other rule applies."""
from typing import Optional

from .base_agent import BaseAgent
from ..data.catalog_view import CatalogView
from ..schemas.io_models import AgentResult

HELP_TEXT = (
    "👋 Hi! I can help with product locations, prices, discounts, and recipes. Try:\n"
    "• \"Where is Kurkure?\"\n"
    "• \"What's the price of Dairy Milk?\"\n"
    "• \"Recipe for biryani\""
)

class GreetingAgent(BaseAgent):
    name = "meta"
    intent = "greeting"

    def handle(self, query: str, catalog: CatalogView) -> Optional[AgentResult]:
        return self._ok(HELP_TEXT)
