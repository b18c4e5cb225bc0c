"""Food domain models."""

from dataclasses import dataclass, field
from enum import Enum

MIN_VISIBLE_NUTRIENT_VALUE = 1.0


@dataclass(frozen=True)
class FoodNutrient:
    """A single nutrient measurement reported for a food."""

    nutrient_id: int
    nutrient_name: str
    nutrient_number: str
    unit_name: str
    value: float


@dataclass(frozen=True)
class FoodItem:
    """A food returned by the nutrition database search."""

    fdc_id: int
    description: str
    brand_owner: str = ""
    food_nutrients: tuple[FoodNutrient, ...] = ()


@dataclass(frozen=True)
class SearchState:
    """Snapshot of the live query and the results shown for it."""

    query: str = ""
    results: tuple[FoodItem, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SavedRecord:
    """A food persisted in the saved foods store."""

    fdc_id: int
    description: str


class SaveOutcome(Enum):
    """User-visible result of a save attempt."""

    SAVED = "saved"
    ALREADY_EXISTS = "already_exists"
    FAILED = "failed"


def visible_nutrients(food: FoodItem) -> list[FoodNutrient]:
    """Return the nutrients worth displaying, keeping their order."""
    return [
        nutrient
        for nutrient in food.food_nutrients
        if nutrient.value >= MIN_VISIBLE_NUTRIENT_VALUE
    ]
