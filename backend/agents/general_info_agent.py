"""General Info Agent: store layout, floor by floor."""
from typing import List, Optional

from .base_agent import BaseAgent
from ..data.catalog_view import CatalogView, floor_label
from ..schemas.io_models import AgentResult

class StoreLayoutAgent(BaseAgent):
    name = "general_info"
    intent = "store_layout"

    def handle(self, query: str, catalog: CatalogView) -> Optional[AgentResult]:
        lines = ["🏢 **Store Layout:**", ""]
        for floor in catalog.floors:
            categories: List[str] = []
            for rack in floor.racks:
                if rack.category and rack.category not in categories:
                    categories.append(rack.category)
            lines.append(f"• {floor_label(floor)}: {', '.join(categories)}")
        return self._ok("\n".join(lines))
