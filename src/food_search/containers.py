"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from food_search.adapters.fdc_client import HttpxFdcClient
from food_search.adapters.supabase_saved_food_repository import (
    SupabaseSavedFoodRepository,
)
from food_search.config import Settings
from food_search.services.food_search import FoodSearchService
from food_search.services.saved_foods import SavedFoodService
from food_search.services.search_controller import SearchController


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    search_service: FoodSearchService
    saved_food_service: SavedFoodService
    close_resources: Callable[[], Awaitable[None]]

    def new_search_controller(self) -> SearchController:
        """Create a search session bound to the shared clients."""
        return SearchController(
            search_service=self.search_service,
            saved_food_service=self.saved_food_service,
            debounce_seconds=self.settings.search_debounce_seconds,
            min_query_length=self.settings.search_min_query_length,
        )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    saved_food_repository = SupabaseSavedFoodRepository(
        supabase_client, table=resolved_settings.saved_foods_table
    )
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
    )

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        search_service=FoodSearchService(fdc_client),
        saved_food_service=SavedFoodService(saved_food_repository),
        close_resources=close_resources,
    )
