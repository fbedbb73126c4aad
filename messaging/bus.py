"""Event bus - EventBusProtocol and InMemoryEventBus."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Protocol

from .events import Event

EventHandler = Callable[[Event], Awaitable[None]]

logger = logging.getLogger(__name__)


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations."""

    async def publish(self, event: Event) -> None:
        """Publish an event and wait until every subscriber has run."""
        ...

    def publish_nowait(self, event: Event) -> None:
        """Publish an event without waiting for subscribers."""
        ...

    def subscribe(self, topic: str, handler: EventHandler) -> None:
        """Subscribe a handler to a topic."""
        ...

    def unsubscribe(self, topic: str, handler: EventHandler) -> None:
        """Remove a handler from a topic."""
        ...


class InMemoryEventBus(EventBusProtocol):
    """
    Process-wide publish/subscribe hub.

    Delivery is in-process. `publish` awaits each subscriber in registration
    order; a subscriber that raises is logged and the others still run.
    `publish_nowait` hands delivery to a background task so the publisher is
    never blocked by slow subscribers.
    """

    def __init__(self) -> None:
        """Initialize in-memory event bus."""
        self._handlers: dict[str, list[EventHandler]] = {}
        self._background: set[asyncio.Task] = set()

    def subscribe(self, topic: str, handler: EventHandler) -> None:
        """
        Subscribe a handler to a topic.

        Args:
            topic: Topic name to subscribe to
            handler: Async handler function
        """
        self._handlers.setdefault(str(topic), []).append(handler)
        logger.debug(f"Subscribed {getattr(handler, '__qualname__', handler)} to {topic}")

    def unsubscribe(self, topic: str, handler: EventHandler) -> None:
        """
        Remove a handler from a topic. Unknown handlers are ignored.

        Args:
            topic: Topic name
            handler: Handler previously passed to subscribe()
        """
        handlers = self._handlers.get(str(topic), [])
        if handler in handlers:
            handlers.remove(handler)

    def has_subscribers(self, topic: str) -> bool:
        """Return True if at least one handler listens on the topic."""
        return bool(self._handlers.get(str(topic)))

    async def publish(self, event: Event) -> None:
        """
        Publish an event to all subscribed handlers.

        Args:
            event: Event to publish
        """
        # Snapshot so handlers may (un)subscribe while being called.
        handlers = list(self._handlers.get(str(event.name), []))
        if not handlers:
            logger.debug(f"No subscribers for {event.name}")
            return

        logger.debug(
            f"Publishing {event.name} (event_id: {event.metadata.event_id}, "
            f"handlers: {len(handlers)})"
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as exc:
                logger.error(
                    f"Handler {getattr(handler, '__qualname__', handler)} failed "
                    f"for {event.name}: {exc}",
                    exc_info=True,
                )

    def publish_nowait(self, event: Event) -> None:
        """
        Schedule delivery of an event on the running loop and return at once.

        Args:
            event: Event to publish
        """
        task = asyncio.get_running_loop().create_task(self.publish(event))
        self._background.add(task)
        task.add_done_callback(self._background.discard)

    @property
    def pending_deliveries(self) -> int:
        """Number of background deliveries still running."""
        return len(self._background)

    async def drain(self) -> None:
        """Wait for every background delivery scheduled so far."""
        while self._background:
            await asyncio.gather(*list(self._background), return_exceptions=True)
