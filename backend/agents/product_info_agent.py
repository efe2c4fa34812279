"""Product Info Agents: single-item answers (direct requests, locations, prices)."""
from typing import Optional

from .base_agent import BaseAgent
from ..data.catalog_view import CatalogView, final_price, format_price
from ..nlu.rules import DIRECT_WANT
from ..schemas.catalog_models import ItemOut
from ..schemas.io_models import AgentResult


def _price_line(item: ItemOut) -> str:
    line = f"Price: {format_price(item.price)}"
    if item.discount:
        line += f" - {item.discount}% off (Final: {format_price(final_price(item))})"
    return line


class DirectWantAgent(BaseAgent):
    """Answers "i want <product>" with a product card."""
    name = "product_info"
    intent = "direct_want"

    def handle(self, query: str, catalog: CatalogView) -> Optional[AgentResult]:
        parts = query.lower().split(DIRECT_WANT)
        wanted = parts[1].strip() if len(parts) > 1 else ""
        if not wanted:
            return None
        found = catalog.find_containing(wanted)
        if found is None:
            # nothing to show; let the remaining rules have a go
            return None
        location = catalog.location_text(found) or "Location not recorded"
        stock = found.stock if found.stock is not None else "Available"
        return self._ok(
            f"🛒 **{found.name}**\n"
            f"Category: {found.category or 'General'}\n"
            f"Location: {location}\n"
            f"{_price_line(found)}\n\n"
            f"In stock: {stock}"
        )


class LocationAgent(BaseAgent):
    name = "product_info"
    intent = "location"

    def handle(self, query: str, catalog: CatalogView) -> Optional[AgentResult]:
        found = catalog.find_mentioned(query)
        if found is None:
            return self._ok('I can help you find products. Try "Where is Kurkure?" or use the exact product name.')
        location = catalog.location_text(found) or "Location not recorded"
        return self._ok(
            f"📍 **{found.name}**\n"
            f"Category: {found.category or 'General'}\n"
            f"Location: {location}\n"
            f"{_price_line(found)}"
        )


class PriceAgent(BaseAgent):
    name = "product_info"
    intent = "price"

    def handle(self, query: str, catalog: CatalogView) -> Optional[AgentResult]:
        found = catalog.find_mentioned(query)
        if found is None:
            return self._ok('Which product price do you want to check? For example: "What\'s the price of Dairy Milk?"')
        lines = [f"💰 **{found.name}**", f"Regular: {format_price(found.price)}"]
        if found.discount:
            lines.append(f"Discount: {found.discount}%")
            lines.append(f"Final: {format_price(final_price(found))}")
        location = catalog.location_text(found)
        lines.append(f"Location: {location}" if location else "Location: Not recorded")
        return self._ok("\n".join(lines))
