"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status

from food_search.api.models import (
    FoodView,
    SaveFoodRequest,
    SaveFoodResponse,
    SearchResponse,
)
from food_search.app_logging import configure_logging
from food_search.containers import AppContainer
from food_search.domain.errors import FoodSearchError
from food_search.domain.foods import FoodItem, SaveOutcome

_SAVE_STATUS_CODES = {
    SaveOutcome.SAVED: status.HTTP_201_CREATED,
    SaveOutcome.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    SaveOutcome.FAILED: status.HTTP_502_BAD_GATEWAY,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods/search")
    async def search_foods(request: Request, query: str = "") -> SearchResponse:
        """Search foods without debouncing; short queries return nothing."""
        state_container: AppContainer = request.app.state.container
        if len(query) < state_container.settings.search_min_query_length:
            return SearchResponse()
        try:
            foods = await state_container.search_service.fetch_foods(query)
        except FoodSearchError as exc:
            logger.warning("Food search failed: query=%s error=%s", query, exc)
            return SearchResponse()
        return SearchResponse(foods=[FoodView.from_domain(food) for food in foods])

    @app.post("/foods/saved")
    async def save_food(
        payload: SaveFoodRequest, request: Request, response: Response
    ) -> SaveFoodResponse:
        """Save a food, reporting saved, already_exists or failed."""
        state_container: AppContainer = request.app.state.container
        food = FoodItem(fdc_id=payload.fdc_id, description=payload.description)
        outcome = await state_container.saved_food_service.save_outcome(food)
        response.status_code = _SAVE_STATUS_CODES[outcome]
        return SaveFoodResponse(status=outcome.value)

    return app
