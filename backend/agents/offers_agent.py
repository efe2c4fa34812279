"""Offers Agents: current discounts and recommendations."""
from typing import Optional

from .base_agent import BaseAgent
from ..app.config import Config
from ..data.catalog_view import CatalogView, final_price, format_price
from ..schemas.io_models import AgentResult

NO_DISCOUNTS = "We don't have active discounts right now."


class DiscountAgent(BaseAgent):
    name = "offers"
    intent = "discount"

    def handle(self, query: str, catalog: CatalogView) -> Optional[AgentResult]:
        discounted = catalog.discounted()
        if not discounted:
            return self._ok(NO_DISCOUNTS)
        lines = ["🎉 **Current Discounts:**", ""]
        for item in discounted[:Config.MAX_DISCOUNT_LINES]:
            lines.append(
                f"• {item.name}: {item.discount}% off - {format_price(item.price)} -> {format_price(final_price(item))}"
            )
        return self._ok("\n".join(lines))


class SuggestionAgent(BaseAgent):
    """Recommends the most discounted items; discount stands in for popularity."""
    name = "offers"
    intent = "suggestion"

    def handle(self, query: str, catalog: CatalogView) -> Optional[AgentResult]:
        lines = ["⭐ **Recommendations:**", ""]
        for item in catalog.by_discount()[:Config.MAX_SUGGESTIONS]:
            if item.discount:
                lines.append(f"• {item.name} - {item.discount}% off (Now {format_price(final_price(item))})")
            else:
                lines.append(f"• {item.name} - {format_price(item.price)}")
        return self._ok("\n".join(lines))
