"""Tests for the topic catalogue."""

import pytest

from core.domain.exceptions import MessagingError
from messaging import REPLY_TOPICS, Topic, reply_topic_for


def test_every_request_topic_has_a_response_topic():
    requests = [t for t in Topic if t.value.endswith(".request")]

    assert set(requests) == set(REPLY_TOPICS)
    for request in requests:
        assert REPLY_TOPICS[request].value == request.value.replace(".request", ".response")


def test_reply_topic_for_accepts_plain_strings():
    assert reply_topic_for("cart.clear.request") is Topic.CART_CLEAR_RESPONSE
    assert reply_topic_for(Topic.STOCK_VALIDATION_REQUEST) is Topic.STOCK_VALIDATION_RESPONSE


@pytest.mark.parametrize("topic", [Topic.ORDER_CREATED, Topic.USER_LOOKUP_RESPONSE, "unknown.topic"])
def test_topics_without_reply_are_rejected(topic):
    with pytest.raises(MessagingError):
        reply_topic_for(topic)


def test_topic_renders_as_its_wire_name():
    assert str(Topic.ORDER_CREATED) == "order.created"
    assert f"{Topic.USER_LOOKUP_REQUEST}" == "user.lookup.request"
