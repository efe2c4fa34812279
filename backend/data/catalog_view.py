"""Catalog snapshot helpers for the assistant: item lookup, location and price text.

Works on pydantic snapshots (``BranchDetail`` plus the branch item list) so the
answer generators never touch the database and stay pure functions of their
inputs.
"""
from typing import Dict, List, Optional, Sequence, Tuple

from ..app.config import Config
from ..schemas.catalog_models import BranchDetail, FloorWithRacks, ItemOut, RackWithItems


def format_price(price: float) -> str:
    return f"{Config.CURRENCY_SYMBOL}{price:.2f}"

def final_price(item: ItemOut) -> float:
    return item.price * (1 - (item.discount or 0) / 100)

def floor_label(floor: FloorWithRacks) -> str:
    return floor.name or f"Floor {floor.floor_number}"


class CatalogView:
    def __init__(self, branch: Optional[BranchDetail], items: Sequence[ItemOut]):
        self.branch = branch
        self.items: List[ItemOut] = list(items)
        self._locations: Dict[int, Tuple[FloorWithRacks, RackWithItems]] = {}
        for floor in self.floors:
            for rack in floor.racks:
                for item in rack.items:
                    self._locations.setdefault(item.id, (floor, rack))

    @property
    def floors(self) -> List[FloorWithRacks]:
        return self.branch.floors if self.branch else []

    def find_by_name(self, name: str) -> Optional[ItemOut]:
        """Exact (case-insensitive) name first, then the first name containing ``name``."""
        if not name:
            return None
        q = name.lower()
        for item in self.items:
            if item.name.lower() == q:
                return item
        return self.find_containing(q)

    def find_containing(self, fragment: str) -> Optional[ItemOut]:
        q = fragment.lower()
        for item in self.items:
            if q in item.name.lower():
                return item
        return None

    def find_mentioned(self, message: str) -> Optional[ItemOut]:
        """First item whose whole name appears in the message."""
        q = message.lower()
        for item in self.items:
            if item.name.lower() in q:
                return item
        return None

    def locate(self, item_id: int) -> Optional[Tuple[FloorWithRacks, RackWithItems]]:
        return self._locations.get(item_id)

    def location_text(self, item: ItemOut) -> Optional[str]:
        loc = self.locate(item.id)
        if loc is None:
            return None
        floor, rack = loc
        return f"{rack.name} ({rack.category}) on {floor_label(floor)}"

    def discounted(self) -> List[ItemOut]:
        """Items with a discount, biggest discount first (stable on catalog order)."""
        return sorted((i for i in self.items if i.discount and i.discount > 0), key=lambda i: -i.discount)

    def by_discount(self) -> List[ItemOut]:
        return sorted(self.items, key=lambda i: -(i.discount or 0))
