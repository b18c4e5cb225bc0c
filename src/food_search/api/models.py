"""Pydantic models for the HTTP API."""

from pydantic import BaseModel, Field

from food_search.domain.foods import FoodItem, FoodNutrient, visible_nutrients


class FoodNutrientView(BaseModel):
    """Nutrient as shown to API clients."""

    nutrient_id: int
    nutrient_name: str
    nutrient_number: str
    unit_name: str
    value: float

    @classmethod
    def from_domain(cls, nutrient: FoodNutrient) -> "FoodNutrientView":
        return cls(
            nutrient_id=nutrient.nutrient_id,
            nutrient_name=nutrient.nutrient_name,
            nutrient_number=nutrient.nutrient_number,
            unit_name=nutrient.unit_name,
            value=nutrient.value,
        )


class FoodView(BaseModel):
    """Food search hit with only its displayable nutrients."""

    fdc_id: int
    description: str
    brand_owner: str
    nutrients: list[FoodNutrientView]

    @classmethod
    def from_domain(cls, food: FoodItem) -> "FoodView":
        return cls(
            fdc_id=food.fdc_id,
            description=food.description,
            brand_owner=food.brand_owner,
            nutrients=[
                FoodNutrientView.from_domain(nutrient)
                for nutrient in visible_nutrients(food)
            ],
        )


class SearchResponse(BaseModel):
    """Search endpoint response."""

    foods: list[FoodView] = Field(default_factory=list)


class SaveFoodRequest(BaseModel):
    """Request body for saving a food."""

    fdc_id: int
    description: str


class SaveFoodResponse(BaseModel):
    """Outcome of a save request."""

    status: str
