"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field

from meal_planner.domain.ingredients import Catalog, Category, Ingredient
from meal_planner.domain.plans import Meal, MealPlan, WeeklyPlan
from meal_planner.services.catalog import IngredientEntry


class IngredientPayload(BaseModel):
    """Ingredient as sent by clients."""

    id: str
    name: str
    category: Category
    cost: float = Field(ge=0.0, allow_inf_nan=False)
    flavor_profile: list[str] = Field(default_factory=list)
    attributes: list[str] = Field(default_factory=list)

    def to_domain(self) -> Ingredient:
        return Ingredient(
            id=self.id,
            name=self.name,
            category=self.category,
            cost=self.cost,
            flavor_profile=tuple(self.flavor_profile),
            attributes=tuple(self.attributes),
        )


class CatalogPayload(BaseModel):
    """Category-partitioned ingredient lists."""

    proteins: list[IngredientPayload] = Field(default_factory=list)
    grains: list[IngredientPayload] = Field(default_factory=list)
    vegetables: list[IngredientPayload] = Field(default_factory=list)
    sauces: list[IngredientPayload] = Field(default_factory=list)

    def to_domain(self) -> Catalog:
        ingredients = [
            item.to_domain()
            for group in (self.proteins, self.grains, self.vegetables, self.sauces)
            for item in group
        ]
        return Catalog.from_ingredients(ingredients)


class MealPayload(BaseModel):
    """Meal as sent by clients, e.g. when marking a favorite."""

    id: str
    name: str
    protein: IngredientPayload
    grain: IngredientPayload
    vegetable: IngredientPayload
    sauce: IngredientPayload
    cost: float = Field(ge=0.0, allow_inf_nan=False)

    def to_domain(self) -> Meal:
        return Meal(
            id=self.id,
            name=self.name,
            protein=self.protein.to_domain(),
            grain=self.grain.to_domain(),
            vegetable=self.vegetable.to_domain(),
            sauce=self.sauce.to_domain(),
            cost=self.cost,
        )


class WeeklyPlanPayload(BaseModel):
    """A week of meals."""

    week_number: int = Field(ge=1)
    meals: list[MealPayload]

    def to_domain(self) -> WeeklyPlan:
        return WeeklyPlan(
            week_number=self.week_number,
            meals=tuple(meal.to_domain() for meal in self.meals),
        )


class MealPlanPayload(BaseModel):
    """A generated multi-week plan."""

    plan_id: str
    weeks: list[WeeklyPlanPayload]
    total_cost: float = Field(ge=0.0, allow_inf_nan=False)

    def to_domain(self) -> MealPlan:
        return MealPlan(
            plan_id=self.plan_id,
            weeks=tuple(week.to_domain() for week in self.weeks),
            total_cost=self.total_cost,
        )


class GeneratePlanRequest(BaseModel):
    """Options for generating a new plan."""

    catalog: CatalogPayload | None = None
    weeks_count: int | None = Field(default=None, ge=1, le=12)
    meals_per_week: int | None = Field(default=None, ge=1)
    budget_per_week: float | str | None = None
    use_favorites: bool = True


class SavePlanRequest(BaseModel):
    """A generated plan to keep in the library."""

    name: str
    plan: MealPlanPayload


class CatalogEntryPayload(BaseModel):
    """Manual ingredient entry; cost and flavors are estimated when missing."""

    name: str
    category: Category
    cost: float | None = Field(default=None, ge=0.0, allow_inf_nan=False)
    flavor_profile: list[str] | None = None
    attributes: list[str] = Field(default_factory=list)

    def to_entry(self) -> IngredientEntry:
        return IngredientEntry(
            name=self.name,
            category=self.category,
            cost=self.cost,
            flavor_profile=(
                tuple(self.flavor_profile) if self.flavor_profile else None
            ),
            attributes=tuple(self.attributes),
        )


class CatalogEntriesRequest(BaseModel):
    """Manual catalog entries."""

    entries: list[CatalogEntryPayload]
