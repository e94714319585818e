"""Tests for catalog parsing and building."""

import asyncio
import csv
import io

import pandas as pd
import pytest

from meal_planner.domain.ingredients import Category
from meal_planner.services.catalog import (
    TEMPLATE_HEADERS,
    TEMPLATE_ROWS,
    CatalogParseError,
    CatalogService,
    IngredientEntry,
    catalog_template_csv,
    catalog_template_xlsx,
    fallback_catalog,
    guess_category,
    is_food_item,
    parse_catalog_csv,
    parse_catalog_rows,
    parse_catalog_xlsx,
)
from meal_planner.services.estimation import LookupCostEstimator, LookupFlavorEstimator


def _service() -> CatalogService:
    return CatalogService(
        cost_estimator=LookupCostEstimator(),
        flavor_estimator=LookupFlavorEstimator(),
    )


def test_parse_catalog_csv_partitions_by_category() -> None:
    text = (
        "\ufeffName,Category,Cost,FlavorProfile,Attributes\n"
        "Chicken Breast,Protein,$3.99,\"mild, savory\",\"lean, baked\"\n"
        "Brown Rice,grain,0.99,\"nutty, mild\",\n"
        "Broccoli,vegetable,1.99,earthy,\n"
        "Soy Sauce,sauce,2.49,\"salty, umami\",fermented\n"
    )

    catalog = parse_catalog_csv(text)

    assert [item.name for item in catalog.proteins] == ["Chicken Breast"]
    chicken = catalog.proteins[0]
    assert chicken.id == "0"
    assert chicken.cost == 3.99
    assert chicken.flavor_profile == ("mild", "savory")
    assert chicken.attributes == ("lean", "baked")
    assert catalog.grains[0].attributes == ()
    assert catalog.sauces[0].id == "3"
    assert catalog.missing_categories() == []


def test_parse_rows_accepts_alternate_headers_and_guesses_category() -> None:
    catalog = parse_catalog_rows(
        [
            {"name": "Beef Strips", "cost": "5", "Flavor Profile": "rich"},
            {"name": "Sourdough Bread", "flavorProfile": "yeasty"},
            {"name": "", "category": "protein"},
            {"name": "Ranch Dressing", "category": "dip"},
            {"name": "Kale"},
        ]
    )

    assert [item.name for item in catalog.proteins] == ["Beef Strips"]
    assert catalog.proteins[0].flavor_profile == ("rich",)
    assert [item.name for item in catalog.grains] == ["Sourdough Bread"]
    assert catalog.grains[0].cost == 0.0
    assert [item.name for item in catalog.sauces] == ["Ranch Dressing"]
    assert [item.name for item in catalog.vegetables] == ["Kale"]


@pytest.mark.parametrize("cost", ["cheap", "-1", "nan", "inf", "-inf", "Infinity"])
def test_parse_rows_rejects_bad_costs(cost: str) -> None:
    with pytest.raises(CatalogParseError):
        parse_catalog_rows([{"Name": "Tofu", "Category": "protein", "Cost": cost}])


def test_parse_catalog_csv_rejects_non_finite_cost() -> None:
    text = "Name,Category,Cost\nChicken,protein,3.99\nRice,grain,nan\n"

    with pytest.raises(CatalogParseError, match="row 2"):
        parse_catalog_csv(text)


def test_parse_catalog_csv_requires_header() -> None:
    with pytest.raises(CatalogParseError):
        parse_catalog_csv("")


def test_template_round_trips_through_parser() -> None:
    text = catalog_template_csv()

    rows = list(csv.reader(io.StringIO(text)))
    assert tuple(rows[0]) == TEMPLATE_HEADERS
    assert len(rows) == len(TEMPLATE_ROWS) + 1

    catalog = parse_catalog_csv(text)
    assert len(catalog.proteins) == 3
    assert len(catalog.sauces) == 3
    assert catalog.missing_categories() == []


def test_fallback_catalog_is_complete() -> None:
    catalog = fallback_catalog()

    assert catalog.missing_categories() == []
    assert [len(catalog.for_category(category)) for category in Category] == [
        5,
        5,
        5,
        5,
    ]
    assert [item.id for item in catalog.ingredients()] == [
        str(number) for number in range(1, 21)
    ]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Chicken", True),
        ("bok choy", True),
        ("a", False),
        ("", False),
        ("placeholder", False),
        ("N/A", False),
        ("12345", False),
        ("x" * 51, False),
    ],
)
def test_is_food_item(text: str, expected: bool) -> None:
    assert is_food_item(text) is expected


def test_guess_category() -> None:
    assert guess_category("Smoked Tofu") is Category.PROTEIN
    assert guess_category("Whole Wheat Pasta") is Category.GRAIN
    assert guess_category("Caesar Dressing") is Category.SAUCE
    assert guess_category("Beets") is Category.VEGETABLE


def test_build_catalog_estimates_missing_values() -> None:
    catalog = asyncio.run(
        _service().build_catalog(
            [
                IngredientEntry(name="Salmon", category=Category.PROTEIN),
                IngredientEntry(
                    name="Tofu",
                    category=Category.PROTEIN,
                    cost=1.5,
                    flavor_profile=("smoky",),
                    attributes=("baked",),
                ),
                IngredientEntry(name="  ", category=Category.GRAIN),
                IngredientEntry(name="Pesto", category=Category.SAUCE),
            ]
        )
    )

    salmon, tofu = catalog.proteins
    assert salmon.id == "manual-protein-0"
    assert salmon.cost == 9.99
    assert salmon.flavor_profile == ("rich", "buttery", "oceanic")
    assert tofu.id == "manual-protein-1"
    assert tofu.cost == 1.5
    assert tofu.flavor_profile == ("smoky",)
    assert tofu.attributes == ("baked",)
    assert catalog.grains == ()
    assert catalog.sauces[0].cost == 3.99
    assert catalog.missing_categories() == [Category.GRAIN, Category.VEGETABLE]


def test_build_catalog_rejects_non_food_names() -> None:
    with pytest.raises(CatalogParseError):
        asyncio.run(
            _service().build_catalog(
                [IngredientEntry(name="placeholder", category=Category.VEGETABLE)]
            )
        )


@pytest.mark.parametrize("cost", [float("nan"), float("inf"), -0.5])
def test_build_catalog_rejects_invalid_manual_cost(cost: float) -> None:
    with pytest.raises(CatalogParseError):
        asyncio.run(
            _service().build_catalog(
                [IngredientEntry(name="Tofu", category=Category.PROTEIN, cost=cost)]
            )
        )


def _workbook(rows: list[dict[str, object]]) -> bytes:
    buffer = io.BytesIO()
    pd.DataFrame(rows).to_excel(buffer, index=False, engine="openpyxl")
    return buffer.getvalue()


def test_xlsx_template_matches_csv_template() -> None:
    catalog = parse_catalog_xlsx(catalog_template_xlsx())

    assert catalog == parse_catalog_csv(catalog_template_csv())
    assert catalog.missing_categories() == []


def test_parse_catalog_xlsx_reads_first_sheet() -> None:
    data = _workbook(
        [
            {"name": "Salmon", "category": "protein", "cost": 8.5,
             "Flavor Profile": "rich, oceanic"},
            {"name": "", "category": "grain", "cost": 1.0, "Flavor Profile": ""},
            {"name": "Garlic Bread", "category": "", "cost": 2,
             "Flavor Profile": "savory"},
        ]
    )  # fmt: skip

    catalog = parse_catalog_xlsx(data)

    assert [item.name for item in catalog.proteins] == ["Salmon"]
    assert catalog.proteins[0].cost == 8.5
    assert catalog.proteins[0].flavor_profile == ("rich", "oceanic")
    assert [item.name for item in catalog.grains] == ["Garlic Bread"]
    assert catalog.grains[0].cost == 2.0


def test_parse_catalog_xlsx_rejects_non_finite_cost() -> None:
    data = _workbook([{"Name": "Tofu", "Category": "protein", "Cost": "inf"}])

    with pytest.raises(CatalogParseError, match="row 1"):
        parse_catalog_xlsx(data)


def test_parse_catalog_xlsx_rejects_non_workbook() -> None:
    with pytest.raises(CatalogParseError, match="Unreadable spreadsheet"):
        parse_catalog_xlsx(catalog_template_csv().encode("utf-8"))
