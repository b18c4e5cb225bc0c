"""Saving foods to the personal record store."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol

from food_search.domain.errors import (
    ConflictError,
    FoodSearchError,
    QueryError,
    SaveError,
)
from food_search.domain.foods import FoodItem, SavedRecord, SaveOutcome

_logger = logging.getLogger(__name__)


class SavedFoodRepository(Protocol):
    """Persistence interface for saved foods."""

    def find(self, fdc_id: int, description: str) -> list[dict[str, object]]:
        """Return rows matching the FDC id and description, at most one."""

    def insert(self, fdc_id: int, description: str) -> SavedRecord:
        """Persist a saved food and return it."""


@dataclass
class SavedFoodService:
    """Check-then-insert save flow for search results.

    Saves for the same FDC id are serialized within the process, so the
    existence check and the insert never interleave with another save of
    that food. Duplicates across processes are left to the store's key.
    """

    repository: SavedFoodRepository
    _locks: dict[int, asyncio.Lock] = field(default_factory=dict, repr=False)
    _lock_users: dict[int, int] = field(default_factory=dict, repr=False)

    async def save(self, food: FoodItem) -> SavedRecord:
        """Save ``food`` unless it is already stored.

        Raises ``QueryError`` if the existence check fails, ``ConflictError``
        if a matching record exists and ``SaveError`` if the insert fails.
        """
        lock = self._locks.setdefault(food.fdc_id, asyncio.Lock())
        self._lock_users[food.fdc_id] = self._lock_users.get(food.fdc_id, 0) + 1
        try:
            async with lock:
                return await self._check_and_insert(food)
        finally:
            self._lock_users[food.fdc_id] -= 1
            if not self._lock_users[food.fdc_id]:
                del self._lock_users[food.fdc_id]
                del self._locks[food.fdc_id]

    async def _check_and_insert(self, food: FoodItem) -> SavedRecord:
        try:
            matches = await asyncio.to_thread(
                self.repository.find, food.fdc_id, food.description
            )
        except Exception as exc:
            raise QueryError(
                f"Existence check failed for food {food.fdc_id}", exc
            ) from exc
        if matches:
            raise ConflictError(food.fdc_id)
        try:
            return await asyncio.to_thread(
                self.repository.insert, food.fdc_id, food.description
            )
        except Exception as exc:
            raise SaveError(f"Insert failed for food {food.fdc_id}", exc) from exc

    async def save_outcome(self, food: FoodItem) -> SaveOutcome:
        """Save ``food`` and classify the result for display."""
        try:
            await self.save(food)
        except ConflictError:
            _logger.info("Food already saved: fdc_id=%s", food.fdc_id)
            return SaveOutcome.ALREADY_EXISTS
        except FoodSearchError as exc:
            _logger.warning("Saving food %s failed: %s", food.fdc_id, exc)
            return SaveOutcome.FAILED
        _logger.info("Food saved: fdc_id=%s", food.fdc_id)
        return SaveOutcome.SAVED
