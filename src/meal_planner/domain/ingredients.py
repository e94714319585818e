"""Domain models for the ingredient catalog."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """Ingredient categories; every meal takes exactly one of each."""

    PROTEIN = "protein"
    GRAIN = "grain"
    VEGETABLE = "vegetable"
    SAUCE = "sauce"

    @classmethod
    def parse(cls, raw: str | None) -> "Category | None":
        """Return the category for a case-insensitive name, if known."""
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class EmptyCategoryError(ValueError):
    """Raised when a catalog has no ingredients for a category."""

    def __init__(self, categories: list[Category]) -> None:
        self.categories = categories
        names = ", ".join(category.value for category in categories)
        super().__init__(f"Catalog has no ingredients for: {names}")


@dataclass(frozen=True)
class Ingredient:
    """A single catalog ingredient."""

    id: str
    name: str
    category: Category
    cost: float
    flavor_profile: tuple[str, ...]
    attributes: tuple[str, ...] = ()


@dataclass(frozen=True)
class Catalog:
    """Category-partitioned ingredients available for one planning session."""

    proteins: tuple[Ingredient, ...]
    grains: tuple[Ingredient, ...]
    vegetables: tuple[Ingredient, ...]
    sauces: tuple[Ingredient, ...]

    @classmethod
    def from_ingredients(cls, ingredients: list[Ingredient]) -> "Catalog":
        """Partition ingredients by their category."""
        buckets: dict[Category, list[Ingredient]] = {
            category: [] for category in Category
        }
        for ingredient in ingredients:
            buckets[ingredient.category].append(ingredient)
        return cls(
            proteins=tuple(buckets[Category.PROTEIN]),
            grains=tuple(buckets[Category.GRAIN]),
            vegetables=tuple(buckets[Category.VEGETABLE]),
            sauces=tuple(buckets[Category.SAUCE]),
        )

    def for_category(self, category: Category) -> tuple[Ingredient, ...]:
        """Return the ingredients of one category."""
        return {
            Category.PROTEIN: self.proteins,
            Category.GRAIN: self.grains,
            Category.VEGETABLE: self.vegetables,
            Category.SAUCE: self.sauces,
        }[category]

    def ingredients(self) -> Iterator[Ingredient]:
        """Iterate over every ingredient in category order."""
        for category in Category:
            yield from self.for_category(category)

    def find(self, ingredient_id: str) -> Ingredient | None:
        """Return an ingredient by id, if present."""
        for ingredient in self.ingredients():
            if ingredient.id == ingredient_id:
                return ingredient
        return None

    def missing_categories(self) -> list[Category]:
        """Return the categories that have no ingredients."""
        return [category for category in Category if not self.for_category(category)]

    def require_complete(self) -> None:
        """Raise EmptyCategoryError unless every category is populated."""
        missing = self.missing_categories()
        if missing:
            raise EmptyCategoryError(missing)
