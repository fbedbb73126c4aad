"""
Request/response correlation over the fire-and-forget bus.

The bus has no notion of a reply. RequestResponseService adds one: each
request gets a fresh token in its `requestId` field, the caller suspends on a
future, and the first reply carrying the same token on the reply topic
resolves it. A per-request timer fails the future with RequestTimeoutError
when no reply shows up in time.

Reply and timeout race for the same in-flight entry. Whichever removes the
entry from the table first wins; the other finds nothing and does nothing.
"""
import asyncio
import functools
import logging
import threading
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional, Set

from core.domain.exceptions import DomainError, MessagingError, RequestTimeoutError

from .bus import EventBusProtocol
from .events import Event
from .topics import REQUEST_ID_FIELD, reply_topic_for

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT = 10.0


@dataclass
class InFlightRequest:
    """Bookkeeping for one outstanding request."""

    token: str
    topic: str
    reply_topic: str
    future: asyncio.Future
    deadline: float
    timeout: float
    timer: Optional[asyncio.TimerHandle] = None


class RequestResponseService:
    """Call-style API on top of an EventBusProtocol."""

    def __init__(
        self,
        event_bus: EventBusProtocol,
        default_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        source: str = "correlator",
    ) -> None:
        """
        Initialize the correlator.

        Args:
            event_bus: Bus used for requests and replies
            default_timeout: Seconds to wait when send_request() gets no timeout
            source: Value stamped into the metadata of published requests
        """
        if default_timeout <= 0:
            raise ValueError(f"default_timeout must be positive, got {default_timeout}")

        self._bus = event_bus
        self._default_timeout = default_timeout
        self._source = source
        self._pending: Dict[str, InFlightRequest] = {}
        self._lock = threading.Lock()
        self._reply_topics: Set[str] = set()
        self._deliveries: Set[asyncio.Task] = set()
        self._closed = False

    @property
    def in_flight_count(self) -> int:
        """Number of requests still waiting for a reply or a timeout."""
        with self._lock:
            return len(self._pending)

    @property
    def closed(self) -> bool:
        return self._closed

    async def send_request(
        self,
        request: Event,
        reply_topic: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Publish `request` and wait for the reply carrying the same token.

        Args:
            request: Request event; its payload must not carry a requestId
            reply_topic: Topic the reply is published on (derived if omitted)
            timeout: Seconds to wait (defaults to the service default)

        Returns:
            The reply payload

        Raises:
            RequestTimeoutError: No matching reply before the deadline
            DomainError: The reply carried an error string
            MessagingError: The correlator is closed or the topic has no reply

        An exception raised while publishing the request is re-raised here.
        """
        if self._closed:
            raise MessagingError("Correlator is closed")

        reply_topic = str(reply_topic or reply_topic_for(request.name))
        timeout = self._default_timeout if timeout is None else timeout
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")

        self._ensure_subscribed(reply_topic)

        loop = asyncio.get_running_loop()
        token = str(uuid.uuid4())
        entry = InFlightRequest(
            token=token,
            topic=str(request.name),
            reply_topic=reply_topic,
            future=loop.create_future(),
            deadline=loop.time() + timeout,
            timeout=timeout,
        )

        with self._lock:
            entry.timer = loop.call_later(timeout, self._expire, token)
            self._pending[token] = entry

        logger.debug(f"Sending {entry.topic} (requestId: {token}, timeout: {timeout:g}s)")

        # Subscribers run in their own task; the caller only waits on the future.
        delivery = loop.create_task(
            self._bus.publish(request.with_payload(**{REQUEST_ID_FIELD: token}))
        )
        self._deliveries.add(delivery)
        delivery.add_done_callback(functools.partial(self._on_delivered, token))

        return await entry.future

    async def publish_reply(self, reply_topic: str, response: Dict[str, Any]) -> None:
        """
        Publish a reply. Used by responders; no bookkeeping on this side.

        Args:
            reply_topic: Topic to publish on
            response: Reply payload; must carry the request's requestId
        """
        await self._bus.publish(Event.create(str(reply_topic), response, source=self._source))

    async def close(self) -> None:
        """Cancel every timer and request delivery, then fail every waiting caller."""
        self._closed = True
        with self._lock:
            pending = list(self._pending.values())
            self._pending.clear()

        for entry in pending:
            if entry.timer is not None:
                entry.timer.cancel()
            if not entry.future.done():
                entry.future.set_exception(MessagingError("Correlator closed while waiting for reply"))

        for delivery in list(self._deliveries):
            delivery.cancel()

        for topic in self._reply_topics:
            self._bus.unsubscribe(topic, self._on_reply)
        self._reply_topics.clear()

        if pending:
            logger.warning(f"Correlator closed with {len(pending)} request(s) in flight")

    def _ensure_subscribed(self, reply_topic: str) -> None:
        with self._lock:
            if reply_topic in self._reply_topics:
                return
            self._reply_topics.add(reply_topic)
        self._bus.subscribe(reply_topic, self._on_reply)

    async def _on_reply(self, event: Event) -> None:
        token = event.payload.get(REQUEST_ID_FIELD)
        if not isinstance(token, str):
            logger.debug(f"Reply on {event.name} without {REQUEST_ID_FIELD}, ignored")
            return

        with self._lock:
            entry = self._pending.get(token)
            # Token must also have been issued for this reply topic.
            if entry is None or entry.reply_topic != str(event.name):
                entry = None
            else:
                del self._pending[token]

        if entry is None:
            logger.debug(f"No in-flight request for reply {token} on {event.name}, dropped")
            return

        if entry.timer is not None:
            entry.timer.cancel()

        if entry.future.done():
            # Caller was cancelled (e.g. fail-fast sibling); nobody to tell.
            return

        error = event.payload.get("error")
        if error:
            entry.future.set_exception(DomainError(str(error)))
        else:
            entry.future.set_result(dict(event.payload))

    def _expire(self, token: str) -> None:
        with self._lock:
            entry = self._pending.pop(token, None)

        if entry is None:
            return

        logger.warning(
            f"Request {entry.topic} ({token}) timed out after {entry.timeout:g}s"
        )
        if not entry.future.done():
            entry.future.set_exception(
                RequestTimeoutError(entry.topic, token, entry.timeout)
            )

    def _on_delivered(self, token: str, delivery: asyncio.Task) -> None:
        self._deliveries.discard(delivery)
        if delivery.cancelled() or delivery.exception() is None:
            return

        # Publishing itself failed: release the caller with that error.
        with self._lock:
            entry = self._pending.pop(token, None)
        if entry is None:
            return
        if entry.timer is not None:
            entry.timer.cancel()
        if not entry.future.done():
            entry.future.set_exception(delivery.exception())
