import logging

import pytest

from ashfall.events import Card_Drawn, Card_Played, Event_Bus, State_Changed


def test_handlers_run_in_subscription_order():
    bus = Event_Bus()
    calls = []
    bus.subscribe(Card_Played, lambda e: calls.append(("first", e.entity)))
    bus.subscribe(Card_Played, lambda e: calls.append(("second", e.entity)))
    bus.publish(Card_Played("x"))
    assert calls == [("first", "x"), ("second", "x")]


def test_dispatch_is_by_event_type():
    bus = Event_Bus()
    drawn = []
    bus.subscribe(Card_Drawn, drawn.append)
    bus.publish(Card_Played("x"))
    bus.publish(State_Changed(None))
    assert drawn == []


def test_unsubscribe():
    bus = Event_Bus()
    seen = []
    bus.subscribe(Card_Drawn, seen.append)
    bus.unsubscribe(Card_Drawn, seen.append)
    bus.unsubscribe(Card_Played, seen.append)  # never subscribed
    bus.publish(Card_Drawn("x"))
    assert seen == []


def test_failing_handler_does_not_stop_delivery(caplog):
    bus = Event_Bus()
    seen = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(Card_Drawn, broken)
    bus.subscribe(Card_Drawn, seen.append)
    with caplog.at_level(logging.ERROR, logger="ashfall.events"):
        bus.publish(Card_Drawn("x"))
    assert len(seen) == 1
    assert "broken" in caplog.text


def test_subscribe_requires_callable():
    with pytest.raises(TypeError):
        Event_Bus().subscribe(Card_Drawn, "not callable")
