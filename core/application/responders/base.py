"""
Responder base.

A responder owns one module's store, listens on request topics and answers
on the mirrored reply topic with the same requestId. Anything that goes
wrong while computing the answer is sent back as the reply's error instead
of leaving the caller to time out.
"""
import logging
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Dict

from core.domain.events import REQUEST_ID, ReplyContract
from messaging import Event, EventBusProtocol, RequestResponseService, Topic, reply_topic_for


logger = logging.getLogger(__name__)

ReplyBuilder = Callable[[str, Event], Awaitable[ReplyContract]]


class Responder(ABC):
    """Wires request topics to reply builders."""

    def __init__(self, correlator: RequestResponseService):
        self._correlator = correlator

    @abstractmethod
    def routes(self) -> Dict[Topic, ReplyBuilder]:
        """Request topic -> coroutine building the reply for it."""
        pass

    def register(self, bus: EventBusProtocol) -> None:
        for topic, builder in self.routes().items():
            bus.subscribe(topic, self._make_handler(topic, builder))

    def _make_handler(self, topic: Topic, builder: ReplyBuilder):
        reply_topic = reply_topic_for(topic)

        async def handle(event: Event) -> None:
            request_id = event.payload.get(REQUEST_ID)
            if not request_id:
                logger.warning(f"{topic} without {REQUEST_ID} ignored")
                return

            try:
                reply = await builder(request_id, event)
                payload = reply.to_payload()
            except Exception as exc:
                logger.error(f"{type(self).__name__} failed on {topic}: {exc}", exc_info=True)
                payload = {REQUEST_ID: request_id, "error": str(exc) or type(exc).__name__}

            await self._correlator.publish_reply(reply_topic, payload)

        handle.__qualname__ = f"{type(self).__name__}.{topic.name.lower()}"
        return handle
