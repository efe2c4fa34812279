#!/usr/bin/env python3
"""
Prompt builder module for the store assistant.

This module renders the branch inventory into the system prompt sent to the LLM.
"""

from typing import Optional

from ..data.catalog_view import final_price, format_price
from ..schemas.catalog_models import BranchDetail

DEFAULT_STORE_NAME = "Smart Grocery Store"

class PromptBuilder:
    """Builds prompts for the LLM with the store inventory."""

    def __init__(self):
        """Initialize the prompt builder."""
        self.system_prompt = """You are a helpful AI assistant for "{store_name}".

STORE INVENTORY (Organized by Floor > Rack):
{inventory}

YOUR TASKS:
1. Answer questions about item locations (Floor, Rack).
2. Answer questions about prices and discounts.
3. When asked about discounts, list all items with discounts > 0%.
4. If a user asks for a recipe (e.g. "Cake", "Biryani"), list the ingredients available in the store, their prices, locations, and the total cost.
5. Be concise and friendly.
6. If an item is not in the inventory, say "Sorry, we don't have that item in stock."
"""

    def format_inventory(self, branch: Optional[BranchDetail]) -> str:
        """
        Render floors, racks and items as an indented outline.

        Args:
            branch: Branch snapshot with floors, racks and items

        Returns:
            Inventory text, empty when the branch is unknown
        """
        if branch is None:
            return ""
        lines = []
        for floor in branch.floors:
            lines.append(f"{floor.name}:")
            for rack in floor.racks:
                lines.append(f"  {rack.name} ({rack.category or 'General'}):")
                for item in rack.items:
                    line = f"    - {item.name}: {format_price(item.price)}"
                    if item.discount:
                        line += f" ({item.discount}% off = {format_price(final_price(item))})"
                    lines.append(line)
        return "\n".join(lines)

    def build_prompt(self, branch: Optional[BranchDetail], message: str) -> str:
        """
        Build the full prompt for one customer question.

        Args:
            branch: Branch snapshot (None when the branch does not exist)
            message: The customer's question

        Returns:
            Formatted prompt string
        """
        store_name = branch.name if branch else DEFAULT_STORE_NAME
        prompt = self.system_prompt.format(store_name=store_name, inventory=self.format_inventory(branch))
        return f"{prompt}\nUser Question: {message}\n"
