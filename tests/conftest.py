"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from food_search.adapters.fdc_client import FdcClient
from food_search.config import Settings
from food_search.containers import AppContainer
from food_search.domain.foods import SavedRecord
from food_search.services.food_search import FoodSearchService
from food_search.services.saved_foods import SavedFoodRepository, SavedFoodService


def chicken_payload() -> dict[str, object]:
    return {
        "totalHits": 1,
        "foods": [
            {
                "fdcId": 123456,
                "description": "Kirkland Signature Chicken Breast",
                "brandOwner": "Costco",
                "dataType": "Branded",
                "foodNutrients": [
                    {
                        "nutrientId": 1008,
                        "nutrientName": "Energy",
                        "nutrientNumber": "208",
                        "unitName": "KCAL",
                        "value": 165,
                    },
                    {
                        "nutrientId": 1003,
                        "nutrientName": "Protein",
                        "nutrientNumber": "203",
                        "unitName": "G",
                        "value": 31.0,
                    },
                    {
                        "nutrientId": 1005,
                        "nutrientName": "Carbohydrate, by difference",
                        "nutrientNumber": "205",
                        "unitName": "G",
                        "value": 0.0,
                    },
                    {
                        "nutrientId": 1093,
                        "nutrientName": "Sodium, Na",
                        "nutrientNumber": "307",
                        "unitName": "MG",
                        "value": 0.5,
                    },
                ],
            }
        ],
    }


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client that records queries and returns a fixed payload."""

    payload: dict[str, object] = field(default_factory=chicken_payload)
    queries: list[str] = field(default_factory=list)
    error: Exception | None = None

    async def search_foods(self, query: str) -> dict[str, object]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class InMemorySavedFoodRepository(SavedFoodRepository):
    """In-memory saved food repository for tests."""

    rows: list[dict[str, object]] = field(default_factory=list)
    find_calls: int = 0
    insert_calls: int = 0
    find_error: Exception | None = None
    insert_error: Exception | None = None

    def find(self, fdc_id: int, description: str) -> list[dict[str, object]]:
        self.find_calls += 1
        if self.find_error is not None:
            raise self.find_error
        return [
            row
            for row in self.rows
            if row["id"] == fdc_id and row["description"] == description
        ][:1]

    def insert(self, fdc_id: int, description: str) -> SavedRecord:
        self.insert_calls += 1
        if self.insert_error is not None:
            raise self.insert_error
        self.rows.append({"id": fdc_id, "description": description})
        return SavedRecord(fdc_id=fdc_id, description=description)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        fdc_api_key="fdc-key",
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient()


@pytest.fixture
def saved_food_repository() -> InMemorySavedFoodRepository:
    return InMemorySavedFoodRepository()


@pytest.fixture
def container(
    settings: Settings,
    fdc_client: FakeFdcClient,
    saved_food_repository: InMemorySavedFoodRepository,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        search_service=FoodSearchService(fdc_client),
        saved_food_service=SavedFoodService(saved_food_repository),
        close_resources=close_resources,
    )
