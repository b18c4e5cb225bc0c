"""Food search against USDA FDC."""

import logging
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from food_search.adapters.fdc_client import FdcClient
from food_search.domain.errors import DecodeError
from food_search.domain.foods import FoodItem, FoodNutrient

_logger = logging.getLogger(__name__)


class FoodNutrientPayload(BaseModel):
    """Nutrient entry of an FDC search hit."""

    model_config = ConfigDict(populate_by_name=True)

    nutrient_id: int = Field(alias="nutrientId")
    nutrient_name: str = Field(alias="nutrientName")
    nutrient_number: str = Field(alias="nutrientNumber")
    unit_name: str = Field(alias="unitName")
    value: float


class FoodPayload(BaseModel):
    """FDC search hit.

    ``brandOwner`` is deliberately not mapped, so decoded foods never carry
    a brand owner.
    """

    model_config = ConfigDict(populate_by_name=True)

    fdc_id: int = Field(alias="fdcId")
    description: str
    food_nutrients: list[FoodNutrientPayload] = Field(
        default_factory=list, alias="foodNutrients"
    )


class ApiResponse(BaseModel):
    """Top-level FDC search response."""

    foods: list[FoodPayload] = Field(default_factory=list)


@dataclass
class FoodSearchService:
    """Remote food search returning typed food items."""

    fdc_client: FdcClient

    async def fetch_foods(self, query: str) -> list[FoodItem]:
        """Search FDC for ``query`` and decode the hits.

        Raises ``NetworkError`` when the API cannot be reached and
        ``DecodeError`` when the payload does not match the expected shape.
        """
        payload = await self.fdc_client.search_foods(query)
        try:
            response = ApiResponse.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError("Unexpected FDC search payload", exc) from exc
        foods = [_to_food_item(food) for food in response.foods]
        _logger.info("FDC search: query=%s results=%s", query, len(foods))
        return foods


def _to_food_item(payload: FoodPayload) -> FoodItem:
    return FoodItem(
        fdc_id=payload.fdc_id,
        description=payload.description,
        food_nutrients=tuple(
            FoodNutrient(
                nutrient_id=nutrient.nutrient_id,
                nutrient_name=nutrient.nutrient_name,
                nutrient_number=nutrient.nutrient_number,
                unit_name=nutrient.unit_name,
                value=nutrient.value,
            )
            for nutrient in payload.food_nutrients
        ),
    )
