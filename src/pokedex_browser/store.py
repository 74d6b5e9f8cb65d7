"""Event loop that owns the application state.

Events are applied one at a time, in arrival order, through the pure
transition function. Fetch effects run the synchronous gateway in a worker
thread and feed their outcome back in as a new event.
"""

import asyncio
from collections.abc import Callable
from typing import assert_never

from loguru import logger

from pokedex_browser.config import CATALOG_ERROR_MESSAGE, DETAIL_ERROR_MESSAGE
from pokedex_browser.core.errors import TransportError
from pokedex_browser.core.transition import (
    CatalogLoaded,
    DetailLoaded,
    Effect,
    Event,
    FetchCatalog,
    FetchDetail,
    init,
    is_stale,
    transition,
)
from pokedex_browser.models.remote import Err, Ok
from pokedex_browser.models.state import AppState
from pokedex_browser.protocols import GatewayProtocol


class Store:
    """Single owner of AppState.

    Presentation code reads ``state`` and calls ``submit``; it never
    mutates state itself.
    """

    def __init__(
        self,
        gateway: GatewayProtocol,
        *,
        on_change: Callable[[AppState], None] | None = None,
    ) -> None:
        self._gateway = gateway
        self._on_change = on_change
        self._queue: asyncio.Queue[Event] = asyncio.Queue()
        self._pending: set[asyncio.Task[None]] = set()
        self.state, self._initial_effect = init()
        self.started = False

    def start(self) -> None:
        """Issue the startup catalog fetch. Must be called inside a running loop."""
        if self.started:
            return
        self.started = True
        self._run_effect(self._initial_effect)

    def submit(self, event: Event) -> None:
        """Queue an event for processing."""
        self._queue.put_nowait(event)

    @property
    def idle(self) -> bool:
        return self._queue.empty() and not self._pending

    async def run_until_idle(self) -> AppState:
        """Process events until the queue is empty and no fetch is outstanding."""
        self.start()
        while not self.idle:
            if self._queue.empty():
                done, _ = await asyncio.wait(self._pending, return_when=asyncio.FIRST_COMPLETED)
                self._pending -= done
                failures = [task.exception() for task in done if task.exception() is not None]
                if failures:
                    # Anything other than a transport failure is a bug. Let the other
                    # fetches land so their results are applied on the next run.
                    await self._drain_pending()
                    raise failures[0]
                continue
            self._apply(self._queue.get_nowait())
        return self.state

    def _apply(self, event: Event) -> None:
        if is_stale(event, self.state):
            logger.debug("Dropping stale result: {}", type(event).__name__)
        previous = self.state
        self.state, effect = transition(event, self.state)
        logger.debug(
            "{}: {} -> {}",
            type(event).__name__,
            type(previous).__name__,
            type(self.state).__name__,
        )
        if self.state is not previous and self._on_change is not None:
            self._on_change(self.state)
        if effect is not None:
            self._run_effect(effect)

    async def _drain_pending(self) -> None:
        pending, self._pending = self._pending, set()
        await asyncio.gather(*pending, return_exceptions=True)

    def _run_effect(self, effect: Effect) -> None:
        task = asyncio.get_running_loop().create_task(self._perform(effect))
        self._pending.add(task)

    async def _perform(self, effect: Effect) -> None:
        event: Event
        match effect:
            case FetchCatalog():
                try:
                    entries = await asyncio.to_thread(self._gateway.fetch_catalog)
                    event = CatalogLoaded(Ok(entries))
                except TransportError:
                    event = CatalogLoaded(Err(CATALOG_ERROR_MESSAGE))
            case FetchDetail(pokemon_id=pokemon_id):
                try:
                    detail = await asyncio.to_thread(self._gateway.fetch_detail, pokemon_id)
                    event = DetailLoaded(pokemon_id, Ok(detail))
                except TransportError:
                    event = DetailLoaded(pokemon_id, Err(DETAIL_ERROR_MESSAGE))
            case _:
                assert_never(effect)
        self.submit(event)
