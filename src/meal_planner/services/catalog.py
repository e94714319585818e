"""Catalog parsing and manual catalog building."""

import csv
import io
import math
import re
import zipfile
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import pandas as pd

from meal_planner.domain.ingredients import Catalog, Category, Ingredient
from meal_planner.services.estimation import CostEstimator, FlavorEstimator

TEMPLATE_HEADERS = ("Name", "Category", "Cost", "FlavorProfile", "Attributes")
TEMPLATE_ROWS = (
    ("Chicken Breast", "protein", "3.99", "mild, savory", "lean, high-protein"),
    ("Ground Beef", "protein", "4.99", "rich, savory", "versatile"),
    ("Tofu", "protein", "2.49", "mild, neutral", "vegetarian"),
    ("Brown Rice", "grain", "0.99", "nutty, mild", "whole-grain"),
    ("Quinoa", "grain", "3.99", "nutty, mild", "high-protein"),
    ("Pasta", "grain", "1.29", "mild, neutral", "versatile"),
    ("Broccoli", "vegetable", "1.99", "earthy, mild", "cruciferous"),
    ("Bell Peppers", "vegetable", "1.49", "sweet, fresh", "colorful"),
    ("Spinach", "vegetable", "2.99", "earthy, mild", "leafy-green"),
    ("Tomato Sauce", "sauce", "1.99", "tangy, savory", "acidic"),
    ("Soy Sauce", "sauce", "2.49", "salty, umami", "fermented"),
    ("Pesto", "sauce", "3.99", "herby, savory", "italian"),
)

_NON_FOOD_WORDS = frozenset(
    {
        "the", "and", "of", "to", "a", "in", "for", "is", "on", "that", "by",
        "this", "with", "i", "you", "it", "not", "or", "be", "are", "from",
        "at", "as", "your", "test", "example", "item", "sample", "my", "stuff",
        "thing", "random", "placeholder", "something", "blah", "xyz", "abc",
        "123", "todo", "none", "n/a", "na", "nil",
    }
)  # fmt: skip
_MAX_FOOD_NAME_LENGTH = 50
_LETTERS = re.compile(r"[a-zA-Z]")

_CATEGORY_HINTS: tuple[tuple[Category, tuple[str, ...]], ...] = (
    (Category.PROTEIN, ("chicken", "beef", "tofu")),
    (Category.GRAIN, ("rice", "pasta", "bread")),
    (Category.SAUCE, ("sauce", "dressing")),
)


class CatalogParseError(ValueError):
    """Raised when catalog input cannot be turned into ingredients."""


@dataclass(frozen=True)
class IngredientEntry:
    """A manually entered ingredient; missing values are estimated."""

    name: str
    category: Category
    cost: float | None = None
    flavor_profile: tuple[str, ...] | None = None
    attributes: tuple[str, ...] = ()


def is_food_item(text: str) -> bool:
    """Heuristically decide whether text names a food."""
    if not text or len(text) < 2:
        return False
    normalized = text.strip().lower()
    if normalized in _NON_FOOD_WORDS:
        return False
    if not _LETTERS.search(normalized):
        return False
    return len(normalized) <= _MAX_FOOD_NAME_LENGTH


def guess_category(name: str) -> Category:
    """Guess a category from an ingredient name, defaulting to vegetable."""
    lowered = name.lower()
    for category, hints in _CATEGORY_HINTS:
        if any(hint in lowered for hint in hints):
            return category
    return Category.VEGETABLE


def parse_catalog_rows(rows: Iterable[Mapping[str, object]]) -> Catalog:
    """Build a catalog from spreadsheet-style rows.

    Header spellings ``Name``/``name``, ``Category``/``category``,
    ``Cost``/``cost``, ``FlavorProfile``/``Flavor Profile``/``flavorProfile``
    and ``Attributes`` are accepted. Ids are the row index.
    """
    ingredients: list[Ingredient] = []
    for index, row in enumerate(rows):
        name = str(_first(row, "Name", "name")).strip()
        if not name:
            continue
        category = Category.parse(str(_first(row, "Category", "category")))
        if category is None:
            category = guess_category(name)
        ingredients.append(
            Ingredient(
                id=str(index),
                name=name,
                category=category,
                cost=_parse_cost(_first(row, "Cost", "cost"), row_number=index + 1),
                flavor_profile=_split_list(
                    _first(row, "FlavorProfile", "Flavor Profile", "flavorProfile")
                ),
                attributes=_split_list(_first(row, "Attributes", "attributes")),
            )
        )
    return Catalog.from_ingredients(ingredients)


def parse_catalog_csv(text: str) -> Catalog:
    """Parse CSV text with a header row into a catalog."""
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    if not reader.fieldnames:
        raise CatalogParseError("CSV input has no header row")
    try:
        return parse_catalog_rows(reader)
    except csv.Error as exc:
        raise CatalogParseError(f"Unreadable CSV input: {exc}") from exc


def catalog_template_csv() -> str:
    """Return the example catalog sheet as CSV text."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(TEMPLATE_HEADERS)
    writer.writerows(TEMPLATE_ROWS)
    return buffer.getvalue()


def parse_catalog_xlsx(data: bytes) -> Catalog:
    """Parse the first sheet of an XLSX workbook into a catalog."""
    try:
        frame = pd.read_excel(
            io.BytesIO(data), sheet_name=0, dtype=str, keep_default_na=False
        )
    except (ValueError, zipfile.BadZipFile) as exc:
        raise CatalogParseError(f"Unreadable spreadsheet: {exc}") from exc
    if len(frame.columns) == 0:
        raise CatalogParseError("Spreadsheet has no header row")
    return parse_catalog_rows(frame.to_dict("records"))


def catalog_template_xlsx() -> bytes:
    """Return the example catalog sheet as an XLSX workbook."""
    frame = pd.DataFrame(TEMPLATE_ROWS, columns=TEMPLATE_HEADERS)
    frame["Cost"] = frame["Cost"].astype(float)
    buffer = io.BytesIO()
    frame.to_excel(buffer, sheet_name="Ingredients", index=False, engine="openpyxl")
    return buffer.getvalue()


def fallback_catalog() -> Catalog:
    """Return the demonstration catalog used when a user has none saved."""

    def item(
        ingredient_id: str,
        name: str,
        category: Category,
        cost: float,
        *flavors: str,
    ) -> Ingredient:
        return Ingredient(ingredient_id, name, category, cost, flavors)

    return Catalog(
        proteins=(
            item("1", "Chicken Breast", Category.PROTEIN, 3.99, "mild", "savory"),
            item("2", "Ground Beef", Category.PROTEIN, 4.99, "rich", "savory"),
            item("3", "Tofu", Category.PROTEIN, 2.49, "mild", "neutral"),
            item("4", "Salmon", Category.PROTEIN, 8.99, "rich", "savory"),
            item("5", "Chickpeas", Category.PROTEIN, 1.49, "nutty", "mild"),
        ),
        grains=(
            item("6", "Brown Rice", Category.GRAIN, 0.99, "nutty", "mild"),
            item("7", "Pasta", Category.GRAIN, 1.29, "mild", "neutral"),
            item("8", "Quinoa", Category.GRAIN, 3.99, "nutty", "mild"),
            item("9", "Couscous", Category.GRAIN, 2.49, "mild", "neutral"),
            item("10", "Bread", Category.GRAIN, 2.99, "mild", "neutral"),
        ),
        vegetables=(
            item("11", "Broccoli", Category.VEGETABLE, 1.99, "earthy", "mild"),
            item("12", "Bell Peppers", Category.VEGETABLE, 1.49, "sweet", "fresh"),
            item("13", "Spinach", Category.VEGETABLE, 2.99, "earthy", "mild"),
            item("14", "Carrots", Category.VEGETABLE, 0.99, "sweet", "earthy"),
            item("15", "Zucchini", Category.VEGETABLE, 1.29, "mild", "fresh"),
        ),
        sauces=(
            item("16", "Tomato Sauce", Category.SAUCE, 1.99, "tangy", "savory"),
            item("17", "Soy Sauce", Category.SAUCE, 2.49, "salty", "umami"),
            item("18", "Pesto", Category.SAUCE, 3.99, "herby", "savory"),
            item("19", "Curry Sauce", Category.SAUCE, 2.99, "spicy", "aromatic"),
            item("20", "Teriyaki Sauce", Category.SAUCE, 3.49, "sweet", "salty"),
        ),
    )


@dataclass
class CatalogService:
    """Builds catalogs from manual entries, estimating what is missing."""

    cost_estimator: CostEstimator
    flavor_estimator: FlavorEstimator

    async def build_catalog(self, entries: Iterable[IngredientEntry]) -> Catalog:
        """Return a catalog with costs and flavors filled in for every entry."""
        ingredients: list[Ingredient] = []
        per_category: dict[Category, int] = {category: 0 for category in Category}
        for entry in entries:
            name = entry.name.strip()
            if not name:
                continue
            if not is_food_item(name):
                raise CatalogParseError(f"Not a food item: {name!r}")
            cost = entry.cost
            if cost is None:
                cost = await self.cost_estimator.estimate_cost(name, entry.category)
            elif not math.isfinite(cost) or cost < 0:
                raise CatalogParseError(f"Invalid cost {cost!r} for {name!r}")
            flavors = entry.flavor_profile
            if not flavors:
                flavors = self.flavor_estimator.estimate_flavor_profile(
                    name, entry.category
                )
            ingredients.append(
                Ingredient(
                    id=f"manual-{entry.category.value}-{per_category[entry.category]}",
                    name=name,
                    category=entry.category,
                    cost=cost,
                    flavor_profile=tuple(flavors),
                    attributes=tuple(entry.attributes),
                )
            )
            per_category[entry.category] += 1
        return Catalog.from_ingredients(ingredients)


def _first(row: Mapping[str, object], *keys: str) -> object:
    for key in keys:
        value = row.get(key)
        if value not in (None, ""):
            return value
    return ""


def _split_list(raw: object) -> tuple[str, ...]:
    if isinstance(raw, (list, tuple)):
        return tuple(str(value).strip() for value in raw if str(value).strip())
    return tuple(part.strip() for part in str(raw).split(",") if part.strip())


def _parse_cost(raw: object, row_number: int) -> float:
    if raw in (None, ""):
        return 0.0
    try:
        cost = float(str(raw).strip().lstrip("$"))
    except ValueError as exc:
        raise CatalogParseError(f"Invalid cost {raw!r} on row {row_number}") from exc
    if not math.isfinite(cost):
        raise CatalogParseError(f"Non-finite cost {raw!r} on row {row_number}")
    if cost < 0:
        raise CatalogParseError(f"Negative cost {raw!r} on row {row_number}")
    return cost
