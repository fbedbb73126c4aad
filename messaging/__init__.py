"""Messaging layer - in-process bus with request/response correlation."""

from .bus import EventBusProtocol, EventHandler, InMemoryEventBus
from .correlator import DEFAULT_REQUEST_TIMEOUT, InFlightRequest, RequestResponseService
from .events import Event, EventMetadata
from .topics import REPLY_TOPICS, REQUEST_ID_FIELD, Topic, reply_topic_for

__all__ = [
    "DEFAULT_REQUEST_TIMEOUT",
    "Event",
    "EventBusProtocol",
    "EventHandler",
    "EventMetadata",
    "InFlightRequest",
    "InMemoryEventBus",
    "REPLY_TOPICS",
    "REQUEST_ID_FIELD",
    "RequestResponseService",
    "Topic",
    "reply_topic_for",
]
