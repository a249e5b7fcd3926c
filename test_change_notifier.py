"""Tests for the synchronous change notifier."""

import logging

import pytest

from statelab.shared.core.change_notifier import ChangeNotifier, SubscriptionToken


def test_subscribe_returns_distinct_tokens():
    notifier = ChangeNotifier()
    first = notifier.subscribe(lambda: None)
    second = notifier.subscribe(lambda: None)

    assert isinstance(first, SubscriptionToken)
    assert first != second
    assert notifier.listener_count == 2
    assert notifier.has_listeners


def test_same_callback_can_subscribe_twice():
    notifier = ChangeNotifier()
    calls = []

    def listener():
        calls.append(1)

    notifier.subscribe(listener)
    notifier.subscribe(listener)
    notifier.notify_listeners()

    assert len(calls) == 2


def test_notify_calls_each_listener_once():
    notifier = ChangeNotifier()
    calls = {"a": 0, "b": 0}
    notifier.subscribe(lambda: calls.__setitem__("a", calls["a"] + 1))
    notifier.subscribe(lambda: calls.__setitem__("b", calls["b"] + 1))

    notifier.notify_listeners()

    assert calls == {"a": 1, "b": 1}


def test_unsubscribe_stops_delivery_only_for_that_listener():
    notifier = ChangeNotifier()
    seen = []
    notifier.subscribe(lambda: seen.append("keep"))
    drop = notifier.subscribe(lambda: seen.append("drop"))

    assert notifier.unsubscribe(drop) is True
    notifier.notify_listeners()

    assert seen == ["keep"]
    assert notifier.listener_count == 1


def test_unsubscribe_unknown_token_is_noop():
    notifier = ChangeNotifier()
    token = notifier.subscribe(lambda: None)
    notifier.unsubscribe(token)

    assert notifier.unsubscribe(token) is False
    assert notifier.unsubscribe(SubscriptionToken(-1)) is False


def test_subscription_context_releases_on_exit():
    notifier = ChangeNotifier()
    calls = []

    with notifier.subscription(lambda: calls.append(1)) as token:
        assert isinstance(token, SubscriptionToken)
        notifier.notify_listeners()

    notifier.notify_listeners()
    assert calls == [1]
    assert not notifier.has_listeners


def test_subscription_context_releases_on_error():
    notifier = ChangeNotifier()

    with pytest.raises(KeyError):
        with notifier.subscription(lambda: None):
            raise KeyError("boom")

    assert notifier.listener_count == 0


def test_listener_removed_during_pass_is_not_called():
    notifier = ChangeNotifier()
    seen = []
    tokens = {}

    def first():
        seen.append("first")
        notifier.unsubscribe(tokens["second"])
        notifier.unsubscribe(tokens["first"])

    def second():
        seen.append("second")

    tokens["first"] = notifier.subscribe(first)
    tokens["second"] = notifier.subscribe(second)
    notifier.notify_listeners()

    assert seen == ["first"]


def test_listener_added_during_pass_waits_for_next_pass():
    notifier = ChangeNotifier()
    late_calls = []

    def adder():
        notifier.subscribe(lambda: late_calls.append(1))

    token = notifier.subscribe(adder)
    notifier.notify_listeners()
    assert late_calls == []

    notifier.unsubscribe(token)
    notifier.notify_listeners()
    assert late_calls == [1]


def test_failing_listener_does_not_stop_others(caplog):
    notifier = ChangeNotifier()
    calls = []

    def broken():
        raise ValueError("listener failed")

    notifier.subscribe(broken)
    notifier.subscribe(lambda: calls.append(1))

    with caplog.at_level(logging.ERROR):
        notifier.notify_listeners()

    assert calls == [1]
    assert "broken" in caplog.text


def test_dispose_clears_listeners_and_blocks_reuse():
    notifier = ChangeNotifier()
    notifier.subscribe(lambda: None)

    notifier.dispose()

    assert notifier.listener_count == 0
    with pytest.raises(RuntimeError):
        notifier.subscribe(lambda: None)
    with pytest.raises(RuntimeError):
        notifier.notify_listeners()
