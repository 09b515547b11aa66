"""Unit tests for SignalBus."""
from __future__ import annotations

from lifetick_signal import SignalBus


def test_subscribe_and_flush():
    """Subscribe handler, publish signal, flush dispatches to handler."""
    bus = SignalBus()
    received = []

    def handler(signal_name: str, data: dict) -> None:
        received.append((signal_name, data))

    bus.subscribe("event_completed", handler)
    bus.publish("event_completed", event_id=3, points=10)
    bus.flush()

    assert received == [("event_completed", {"event_id": 3, "points": 10})]


def test_publish_is_deferred_until_flush():
    bus = SignalBus()
    received = []
    bus.subscribe("event_failed", lambda n, d: received.append(d))

    bus.publish("event_failed", event_id=1)
    assert received == []
    assert bus.pending() == 1

    bus.flush()
    assert received == [{"event_id": 1}]
    assert bus.pending() == 0


def test_publish_without_subscribe():
    """Publish signal with no subscribers, flush is a no-op (no error)."""
    bus = SignalBus()
    bus.publish("no_subscribers", value=123)
    bus.flush()


def test_handlers_called_in_registration_order():
    bus = SignalBus()
    order = []
    bus.subscribe("event_completed", lambda n, d: order.append("renderer"))
    bus.subscribe("event_completed", lambda n, d: order.append("audio"))
    bus.subscribe("event_completed", lambda n, d: order.append("score"))

    bus.publish("event_completed")
    bus.flush()

    assert order == ["renderer", "audio", "score"]


def test_fifo_ordering():
    """Publish A then B, handlers called in A-then-B order."""
    bus = SignalBus()
    order = []

    def handler(signal_name: str, data: dict) -> None:
        order.append(signal_name)

    bus.subscribe("event_completed", handler)
    bus.subscribe("event_failed", handler)

    bus.publish("event_failed", event_id=1)
    bus.publish("event_completed", event_id=2)
    bus.flush()

    assert order == ["event_failed", "event_completed"]


def test_flush_clears_queue():
    bus = SignalBus()
    calls = []
    bus.subscribe("test", lambda n, d: calls.append(d))
    bus.publish("test", value=1)
    bus.flush()
    bus.flush()
    assert len(calls) == 1


def test_clear_without_dispatch():
    bus = SignalBus()
    calls = []
    bus.subscribe("test", lambda n, d: calls.append(d))
    bus.publish("test", value=1)
    bus.clear()
    bus.flush()
    assert calls == []


def test_unsubscribe():
    bus = SignalBus()
    received = []

    def handler(signal_name: str, data: dict) -> None:
        received.append(data)

    bus.subscribe("test", handler)
    bus.unsubscribe("test", handler)
    bus.publish("test", value=42)
    bus.flush()

    assert received == []


def test_unsubscribe_noop():
    """Unsubscribe handler that isn't subscribed - no error."""
    bus = SignalBus()

    def handler(signal_name: str, data: dict) -> None:
        pass

    bus.unsubscribe("nonexistent", handler)
    bus.subscribe("other", handler)
    bus.unsubscribe("test", handler)


def test_failing_handler_does_not_block_others(caplog):
    bus = SignalBus()
    received = []

    def broken(signal_name: str, data: dict) -> None:
        raise RuntimeError("renderer gone")

    bus.subscribe("event_completed", broken)
    bus.subscribe("event_completed", lambda n, d: received.append(d))

    bus.publish("event_completed", event_id=7)
    bus.flush()

    assert received == [{"event_id": 7}]
    assert "event_completed" in caplog.text


def test_handler_publishing_during_flush_is_deferred():
    bus = SignalBus()
    received = []

    def chain(signal_name: str, data: dict) -> None:
        received.append(signal_name)
        bus.publish("followup")

    bus.subscribe("first", chain)
    bus.subscribe("followup", lambda n, d: received.append(n))

    bus.publish("first")
    bus.flush()
    assert received == ["first"]

    bus.flush()
    assert received == ["first", "followup"]
