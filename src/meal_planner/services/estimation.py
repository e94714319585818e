"""Cost and flavor profile estimation for ingredients without catalog data."""

from dataclasses import dataclass, field
from typing import Protocol

from meal_planner.domain.ingredients import Category

_COSTS: dict[Category, dict[str, float]] = {
    Category.PROTEIN: {
        "chicken": 3.99,
        "chicken breast": 4.99,
        "chicken thigh": 3.49,
        "ground beef": 5.99,
        "beef": 7.99,
        "steak": 9.99,
        "pork": 4.49,
        "pork chop": 4.99,
        "bacon": 6.99,
        "tofu": 2.99,
        "tempeh": 3.99,
        "salmon": 9.99,
        "tuna": 7.99,
        "shrimp": 8.99,
        "fish": 7.99,
        "turkey": 4.49,
        "ground turkey": 4.99,
        "eggs": 3.49,
        "lentils": 1.99,
        "beans": 1.49,
        "chickpeas": 1.99,
        "seitan": 4.99,
    },
    Category.GRAIN: {
        "rice": 0.99,
        "brown rice": 1.49,
        "white rice": 0.99,
        "quinoa": 3.99,
        "pasta": 1.29,
        "spaghetti": 1.29,
        "noodles": 1.49,
        "bread": 2.99,
        "tortilla": 2.49,
        "pita": 2.99,
        "couscous": 2.49,
        "barley": 1.99,
        "farro": 3.49,
        "oats": 2.49,
        "polenta": 2.99,
        "potato": 0.79,
        "sweet potato": 1.29,
    },
    Category.VEGETABLE: {
        "broccoli": 1.99,
        "spinach": 2.99,
        "kale": 2.49,
        "lettuce": 1.99,
        "tomato": 1.79,
        "carrot": 1.29,
        "onion": 0.99,
        "garlic": 0.79,
        "bell pepper": 1.49,
        "cucumber": 1.29,
        "zucchini": 1.49,
        "squash": 1.99,
        "eggplant": 2.49,
        "mushroom": 3.49,
        "cabbage": 1.49,
        "cauliflower": 2.99,
        "corn": 0.99,
        "green beans": 2.49,
        "peas": 1.99,
        "asparagus": 3.99,
        "brussels sprouts": 3.49,
    },
    Category.SAUCE: {
        "marinara": 2.99,
        "tomato sauce": 1.99,
        "pesto": 3.99,
        "alfredo": 3.49,
        "soy sauce": 2.49,
        "teriyaki": 3.49,
        "bbq": 2.99,
        "hot sauce": 2.49,
        "sriracha": 2.99,
        "salsa": 2.99,
        "hummus": 3.49,
        "guacamole": 3.99,
        "olive oil": 4.99,
        "vinegar": 2.49,
        "mayo": 2.99,
        "ketchup": 1.99,
        "mustard": 1.49,
        "honey": 3.99,
        "maple syrup": 5.99,
        "curry": 2.99,
        "coconut milk": 2.49,
    },
}

_DEFAULT_COSTS: dict[Category, float] = {
    Category.PROTEIN: 4.99,
    Category.GRAIN: 1.99,
    Category.VEGETABLE: 2.49,
    Category.SAUCE: 2.99,
}

_FLAVORS: dict[Category, dict[str, tuple[str, ...]]] = {
    Category.PROTEIN: {
        "chicken": ("mild", "savory"),
        "chicken breast": ("mild", "lean"),
        "chicken thigh": ("rich", "savory"),
        "ground beef": ("rich", "savory", "umami"),
        "beef": ("rich", "savory", "umami"),
        "steak": ("rich", "savory", "umami"),
        "pork": ("mild", "savory"),
        "pork chop": ("mild", "savory"),
        "bacon": ("smoky", "salty", "rich"),
        "tofu": ("mild", "neutral"),
        "tempeh": ("nutty", "earthy", "fermented"),
        "salmon": ("rich", "buttery", "oceanic"),
        "tuna": ("meaty", "oceanic", "savory"),
        "shrimp": ("sweet", "oceanic", "delicate"),
        "fish": ("mild", "oceanic"),
        "turkey": ("mild", "lean", "savory"),
        "ground turkey": ("mild", "lean"),
        "eggs": ("mild", "versatile", "rich"),
        "lentils": ("earthy", "nutty", "mild"),
        "beans": ("earthy", "mild", "starchy"),
        "chickpeas": ("nutty", "earthy", "mild"),
        "seitan": ("savory", "chewy", "mild"),
    },
    Category.GRAIN: {
        "rice": ("mild", "neutral", "starchy"),
        "brown rice": ("nutty", "earthy", "mild"),
        "white rice": ("mild", "neutral", "starchy"),
        "quinoa": ("nutty", "earthy", "mild"),
        "pasta": ("mild", "neutral", "starchy"),
        "spaghetti": ("mild", "neutral", "starchy"),
        "noodles": ("mild", "neutral", "versatile"),
        "bread": ("yeasty", "mild", "versatile"),
        "tortilla": ("mild", "neutral", "versatile"),
        "pita": ("mild", "neutral", "versatile"),
        "couscous": ("mild", "neutral", "starchy"),
        "barley": ("chewy", "nutty", "earthy"),
        "farro": ("nutty", "earthy", "chewy"),
        "oats": ("mild", "earthy", "hearty"),
        "polenta": ("creamy", "corn-like", "mild"),
        "potato": ("starchy", "mild", "earthy"),
        "sweet potato": ("sweet", "starchy", "earthy"),
    },
    Category.VEGETABLE: {
        "broccoli": ("earthy", "green", "mild"),
        "spinach": ("green", "mild", "earthy"),
        "kale": ("bitter", "green", "earthy"),
        "lettuce": ("crisp", "watery", "mild"),
        "tomato": ("sweet", "acidic", "juicy"),
        "carrot": ("sweet", "earthy", "crunchy"),
        "onion": ("pungent", "savory", "aromatic"),
        "garlic": ("pungent", "spicy", "aromatic"),
        "bell pepper": ("sweet", "crisp", "juicy"),
        "cucumber": ("cool", "crisp", "watery"),
        "zucchini": ("mild", "tender", "versatile"),
        "squash": ("sweet", "earthy", "starchy"),
        "eggplant": ("mild", "earthy", "meaty"),
        "mushroom": ("umami", "earthy", "meaty"),
        "cabbage": ("crisp", "mild", "slightly bitter"),
        "cauliflower": ("mild", "nutty", "versatile"),
        "corn": ("sweet", "juicy", "starchy"),
        "green beans": ("green", "snappy", "mild"),
        "peas": ("sweet", "green", "starchy"),
        "asparagus": ("earthy", "grassy", "slightly bitter"),
        "brussels sprouts": ("nutty", "cabbage-like", "slightly bitter"),
    },
    Category.SAUCE: {
        "marinara": ("tangy", "savory", "herby"),
        "tomato sauce": ("tangy", "savory", "slightly sweet"),
        "pesto": ("herby", "garlicky", "savory"),
        "alfredo": ("creamy", "rich", "savory"),
        "soy sauce": ("salty", "umami", "fermented"),
        "teriyaki": ("sweet", "salty", "savory"),
        "bbq": ("sweet", "smoky", "tangy"),
        "hot sauce": ("spicy", "tangy", "pungent"),
        "sriracha": ("spicy", "garlicky", "sweet-tangy"),
        "salsa": ("spicy", "tangy", "fresh"),
        "hummus": ("nutty", "garlicky", "creamy"),
        "guacamole": ("creamy", "fresh", "tangy"),
        "olive oil": ("fruity", "rich", "mild"),
        "vinegar": ("acidic", "tangy", "sharp"),
        "mayo": ("creamy", "tangy", "rich"),
        "ketchup": ("sweet", "tangy", "tomatoey"),
        "mustard": ("tangy", "spicy", "pungent"),
        "honey": ("sweet", "floral", "sticky"),
        "maple syrup": ("sweet", "woody", "rich"),
        "curry": ("spicy", "aromatic", "complex"),
        "coconut milk": ("creamy", "sweet", "tropical"),
    },
}

_DEFAULT_FLAVORS: dict[Category, tuple[str, ...]] = {
    Category.PROTEIN: ("mild", "savory"),
    Category.GRAIN: ("mild", "starchy"),
    Category.VEGETABLE: ("fresh", "mild"),
    Category.SAUCE: ("flavorful", "complementary"),
}


class CostEstimator(Protocol):
    """Interface for ingredient cost estimation."""

    async def estimate_cost(self, name: str, category: Category) -> float:
        """Return an estimated unit cost."""


class FlavorEstimator(Protocol):
    """Interface for ingredient flavor profile estimation."""

    def estimate_flavor_profile(
        self, name: str, category: Category
    ) -> tuple[str, ...]:
        """Return estimated flavor tags."""


def find_similar_item(name: str, table: dict[str, object]) -> str | None:
    """Return the table key matching the name exactly, else by substring."""
    normalized = name.strip().lower()
    if not normalized:
        return None
    if normalized in table:
        return normalized
    for item in table:
        if item in normalized or normalized in item:
            return item
    return None


@dataclass
class LookupCostEstimator(CostEstimator):
    """Cost estimator backed by a static price table."""

    costs: dict[Category, dict[str, float]] = field(default_factory=lambda: _COSTS)
    defaults: dict[Category, float] = field(default_factory=lambda: _DEFAULT_COSTS)

    async def estimate_cost(self, name: str, category: Category) -> float:
        """Return the table price for the closest match or the category default."""
        table = self.costs.get(category, {})
        match = find_similar_item(name, table)
        if match is not None:
            return table[match]
        return self.defaults[category]


@dataclass
class LookupFlavorEstimator(FlavorEstimator):
    """Flavor estimator backed by a static tag table."""

    flavors: dict[Category, dict[str, tuple[str, ...]]] = field(
        default_factory=lambda: _FLAVORS
    )
    defaults: dict[Category, tuple[str, ...]] = field(
        default_factory=lambda: _DEFAULT_FLAVORS
    )

    def estimate_flavor_profile(
        self, name: str, category: Category
    ) -> tuple[str, ...]:
        """Return the tags of the closest match or the category default."""
        table = self.flavors.get(category, {})
        match = find_similar_item(name, table)
        if match is not None:
            return table[match]
        return self.defaults[category]
