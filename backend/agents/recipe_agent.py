"""Recipe Agent: maps a dish to store ingredients, their locations and an estimated bill."""
from typing import Dict, List, Optional

from .base_agent import BaseAgent
from ..data.catalog_view import CatalogView, final_price, format_price
from ..schemas.io_models import AgentResult

# Ingredient names follow the seeded catalog names.
RECIPES: Dict[str, List[str]] = {
    "biryani": ["Basmati Rice", "Garam Masala", "Turmeric Powder", "Chilli Powder", "Onion", "Tomato", "Chicken", "Salt"],
    "pancake": ["Wheat Flour", "Milk", "Eggs (Dozen)", "Sugar", "Butter"],
    "omelette": ["Eggs (Dozen)", "Salt", "Black Pepper", "Onion", "Tomato"],
    "salad": ["Tomato", "Cucumber", "Lemon", "Salt", "Olive Oil"],
    "cake": ["Wheat Flour", "Sugar", "Eggs (Dozen)", "Butter"],
    "paneer curry": ["Paneer", "Onion", "Tomato", "Garam Masala", "Turmeric Powder", "Chilli Powder", "Coconut Oil",
                     "Salt", "Coriander Powder"],
    "paneer tikka": ["Paneer", "Yogurt", "Garam Masala", "Turmeric Powder", "Chilli Powder", "Lemon", "Salt"],
    "butter chicken": ["Chicken", "Butter", "Tomato", "Garam Masala", "Turmeric Powder", "Chilli Powder",
                       "Coriander Powder", "Salt"],
    "chicken curry": ["Chicken", "Onion", "Tomato", "Turmeric Powder", "Chilli Powder", "Garam Masala",
                      "Coriander Powder", "Coconut Oil", "Salt"],
    "dal fry": ["Turmeric Powder", "Salt", "Chilli Powder", "Cumin Seeds", "Onion", "Tomato", "Coriander Powder",
                "Coconut Oil"],
    "masala chai": ["Cardamom", "Turmeric Powder"],
    "vegetable stir fry": ["Onion", "Bell Pepper", "Cauliflower", "Cucumber", "Salt", "Sunflower Oil", "Chilli Powder"],
    "fish curry": ["Fish", "Coconut Oil", "Onion", "Tomato", "Turmeric Powder", "Chilli Powder", "Coriander Powder",
                   "Salt"],
    "egg curry": ["Eggs (Dozen)", "Onion", "Tomato", "Turmeric Powder", "Chilli Powder", "Coriander Powder",
                  "Coconut Oil", "Salt"],
    "carrot curry": ["Carrot", "Onion", "Tomato", "Turmeric Powder", "Chilli Powder", "Coconut Oil", "Salt",
                     "Coriander Powder"],
    "broccoli curry": ["Broccoli", "Onion", "Tomato", "Turmeric Powder", "Chilli Powder", "Coconut Oil", "Salt"],
    "cauliflower curry": ["Cauliflower", "Onion", "Tomato", "Turmeric Powder", "Chilli Powder", "Coconut Oil", "Salt"],
    "potato curry": ["Potato", "Onion", "Tomato", "Turmeric Powder", "Chilli Powder", "Salt", "Coconut Oil"],
    "spinach curry": ["Spinach", "Onion", "Tomato", "Turmeric Powder", "Salt", "Coconut Oil"],
    "cucumber curry": ["Cucumber", "Onion", "Tomato", "Turmeric Powder", "Chilli Powder", "Coconut Oil", "Salt",
                       "Coriander Powder"],
    "cabbage curry": ["Cabbage", "Onion", "Tomato", "Turmeric Powder", "Chilli Powder", "Coconut Oil", "Salt"],
    "tomato curry": ["Tomato", "Onion", "Turmeric Powder", "Chilli Powder", "Coconut Oil", "Salt", "Coriander Powder"],
    "bell pepper curry": ["Bell Pepper", "Onion", "Tomato", "Turmeric Powder", "Chilli Powder", "Coconut Oil", "Salt"],
    "egg fried rice": ["Eggs (Dozen)", "Basmati Rice", "Onion", "Bell Pepper", "Salt", "Sunflower Oil",
                       "Chilli Powder"],
    "chicken fried rice": ["Chicken", "Basmati Rice", "Onion", "Bell Pepper", "Salt", "Sunflower Oil",
                           "Chilli Powder"],
    "vegetable fried rice": ["Basmati Rice", "Onion", "Bell Pepper", "Carrot", "Salt", "Sunflower Oil",
                             "Chilli Powder"],
}

# Longest key first so "paneer curry" beats a shorter key it contains.
RECIPE_KEYS = sorted(RECIPES, key=len, reverse=True)

RECIPE_HINT = ('Which recipe would you like? Try "i want to cook cucumber curry", "egg fried rice", '
               '"carrot curry", "paneer curry", "chicken curry", or "biryani".')


def match_recipe(query: str) -> Optional[str]:
    q = query.lower()
    for key in RECIPE_KEYS:
        if key in q:
            return key
    return None

def _title(key: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in key.split(" "))


class RecipeAgent(BaseAgent):
    name = "recipe"
    intent = "recipe"

    def handle(self, query: str, catalog: CatalogView) -> Optional[AgentResult]:
        key = match_recipe(query)
        if key is None:
            return self._ok(RECIPE_HINT)

        lines = [f"🍽️ **Recipe: {_title(key)}**", "", "Ingredients & where to find them:"]
        total = 0.0
        missing: List[str] = []
        for ingredient in RECIPES[key]:
            found = catalog.find_by_name(ingredient)
            if found is None:
                missing.append(ingredient)
                continue
            price = final_price(found)
            total += price
            entry = f"• **{found.name}** - {format_price(found.price)}"
            if found.discount:
                entry += f" ({found.discount}% off -> {format_price(price)})"
            entry += f" - {catalog.location_text(found) or 'Location: Not listed'}"
            lines.append(entry)

        if missing:
            lines.append("")
            lines.append(f"⚠️ Missing from inventory: {', '.join(missing)}")

        lines.append("")
        lines.append(f"🧾 **Estimated total (using discounted prices if available):** {format_price(total)}")
        return self._ok("\n".join(lines))
