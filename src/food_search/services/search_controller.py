"""Debounced search driving the displayed result list."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from food_search.domain.errors import FoodSearchError
from food_search.domain.foods import FoodItem, SaveOutcome, SearchState
from food_search.services.food_search import FoodSearchService
from food_search.services.saved_foods import SavedFoodService

_logger = logging.getLogger(__name__)

StateListener = Callable[[SearchState], None]


@dataclass
class SearchController:
    """Owns the live query and its results for one search session.

    All methods must be called from the event loop thread. Query edits restart
    a debounce timer; when it fires the current query is searched unless it is
    too short. Every fetch is numbered, and only the most recently issued one
    may publish results, so a slow stale response never replaces newer ones.
    """

    search_service: FoodSearchService
    saved_food_service: SavedFoodService
    debounce_seconds: float = 0.5
    min_query_length: int = 3
    selected: FoodItem | None = None
    last_save_outcome: SaveOutcome | None = None
    _state: SearchState = field(default_factory=SearchState, repr=False)
    _listeners: list[StateListener] = field(default_factory=list, repr=False)
    _timer: asyncio.TimerHandle | None = field(default=None, repr=False)
    _timer_done: asyncio.Event | None = field(default=None, repr=False)
    _fetches: set[asyncio.Task[None]] = field(default_factory=set, repr=False)
    _sequence: int = field(default=0, repr=False)

    @property
    def query(self) -> str:
        return self._state.query

    @property
    def results(self) -> tuple[FoodItem, ...]:
        return self._state.results

    @property
    def state(self) -> SearchState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a state listener and return a callable that removes it.

        A listener that raises is logged and does not stop the others.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_query(self, query: str) -> None:
        """Update the query and restart the debounce timer."""
        self._publish(SearchState(query=query, results=self._state.results))
        loop = asyncio.get_running_loop()
        self._cancel_timer()
        self._timer_done = asyncio.Event()
        self._timer = loop.call_later(self.debounce_seconds, self._on_debounced)

    def select(self, food: FoodItem | None) -> None:
        """Mark a result as the item to save."""
        self.selected = food

    async def save_selected(self) -> SaveOutcome:
        """Save the selected food and publish the outcome."""
        if self.selected is None:
            outcome = SaveOutcome.FAILED
        else:
            outcome = await self.saved_food_service.save_outcome(self.selected)
        self.last_save_outcome = outcome
        self._notify()
        return outcome

    async def wait_idle(self) -> None:
        """Wait until no debounce timer is pending and no fetch is running."""
        while True:
            if self._timer_done is not None and not self._timer_done.is_set():
                await self._timer_done.wait()
                continue
            if self._fetches:
                await asyncio.gather(*self._fetches)
                continue
            return

    def close(self) -> None:
        """Drop a pending debounce timer; running fetches finish on their own."""
        self._cancel_timer()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self._timer_done is not None:
            self._timer_done.set()

    def _on_debounced(self) -> None:
        self._timer = None
        query = self._state.query
        self._sequence += 1
        try:
            if len(query) < self.min_query_length:
                self._publish(SearchState(query=query, results=()))
            else:
                task = asyncio.get_running_loop().create_task(
                    self._fetch(query, self._sequence)
                )
                self._fetches.add(task)
                task.add_done_callback(self._fetches.discard)
        finally:
            if self._timer_done is not None:
                self._timer_done.set()

    async def _fetch(self, query: str, sequence: int) -> None:
        try:
            foods = await self.search_service.fetch_foods(query)
        except FoodSearchError as exc:
            _logger.warning("Food search failed: query=%s error=%s", query, exc)
            foods = []
        if sequence != self._sequence:
            _logger.debug("Discarding stale results: query=%s", query)
            return
        self._publish(SearchState(query=self._state.query, results=tuple(foods)))

    def _publish(self, state: SearchState) -> None:
        self._state = state
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                _logger.exception("Search state listener failed")
