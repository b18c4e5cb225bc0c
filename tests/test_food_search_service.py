"""Tests for the remote food search service."""

import asyncio

import pytest

from food_search.domain.errors import DecodeError, NetworkError
from food_search.domain.foods import FoodNutrient, visible_nutrients
from food_search.services.food_search import FoodSearchService
from tests.conftest import FakeFdcClient


def test_fetch_foods_decodes_fields() -> None:
    client = FakeFdcClient()
    service = FoodSearchService(client)

    foods = asyncio.run(service.fetch_foods("chicken"))

    assert client.queries == ["chicken"]
    assert len(foods) == 1
    food = foods[0]
    assert food.fdc_id == 123456
    assert food.description == "Kirkland Signature Chicken Breast"
    assert food.food_nutrients[0] == FoodNutrient(
        nutrient_id=1008,
        nutrient_name="Energy",
        nutrient_number="208",
        unit_name="KCAL",
        value=165.0,
    )
    assert [n.nutrient_id for n in food.food_nutrients] == [1008, 1003, 1005, 1093]


def test_fetch_foods_ignores_brand_owner() -> None:
    service = FoodSearchService(FakeFdcClient())

    foods = asyncio.run(service.fetch_foods("chicken"))

    assert foods[0].brand_owner == ""


def test_fetch_foods_missing_foods_is_empty() -> None:
    service = FoodSearchService(FakeFdcClient(payload={"totalHits": 0}))

    assert asyncio.run(service.fetch_foods("nothing")) == []


def test_fetch_foods_rejects_unexpected_payload() -> None:
    payload = {"foods": [{"description": "no id"}]}
    service = FoodSearchService(FakeFdcClient(payload=payload))

    with pytest.raises(DecodeError) as exc_info:
        asyncio.run(service.fetch_foods("broken"))

    assert exc_info.value.cause is not None


def test_fetch_foods_propagates_network_error() -> None:
    client = FakeFdcClient(error=NetworkError("down"))
    service = FoodSearchService(client)

    with pytest.raises(NetworkError):
        asyncio.run(service.fetch_foods("chicken"))


def test_visible_nutrients_keeps_values_of_at_least_one() -> None:
    service = FoodSearchService(FakeFdcClient())
    food = asyncio.run(service.fetch_foods("chicken"))[0]

    visible = visible_nutrients(food)

    assert [n.nutrient_name for n in visible] == ["Energy", "Protein"]
    assert len(food.food_nutrients) == 4
