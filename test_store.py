"""Tests for the store singleton, session shell state and the app-state view."""

from unittest.mock import Mock

import flet as ft
import pytest

from statelab.app_state import main as app_main
from statelab.app_state.state import AppState, Store
from statelab.app_state.ui.layouts.shell import build_shell
from statelab.shared.core.configuration import CounterConfig


def test_get_before_initialize_raises():
    Store.reset()
    with pytest.raises(RuntimeError):
        Store.get()


def test_initialize_twice_raises(store):
    with pytest.raises(RuntimeError):
        Store.initialize()


def test_get_returns_single_instance(store):
    assert Store.get() is store
    assert Store.get().counter is store.counter


def test_counter_config_is_applied():
    Store.reset()
    try:
        store = Store.initialize(CounterConfig(clamp_at_zero=True))
        store.counter.decrement()
        assert store.counter.value == 0
    finally:
        Store.reset()


def test_reset_disposes_counter(store):
    counter = store.counter
    counter.subscribe(lambda: None)

    Store.reset()

    assert counter.listener_count == 0
    assert not Store.is_initialized()


def test_app_state_tracks_counter_changes(store):
    app = AppState(store.counter)
    app.initialize()
    app.initialize()  # second call is a no-op

    store.counter.increment()
    store.counter.increment()

    assert app.started
    assert app.notification_count == 2
    assert store.counter.listener_count == 1
    assert "Counter changed to 2" in app.status_text.value


def test_app_state_shutdown_releases_subscription(store):
    app = AppState(store.counter)
    app.initialize()
    app.shutdown()
    store.counter.increment()

    assert not app.started
    assert app.notification_count == 0
    assert store.counter.listener_count == 0


def test_toggle_mirror(store):
    app = AppState(store.counter)

    assert app.mirror_visible.value is True
    app.toggle_mirror()
    assert app.mirror_visible.value is False


def test_shell_subscribes_two_displays_and_shell_state(page, store):
    view, teardown = build_shell(page, store)

    assert isinstance(view, ft.View)
    assert callable(teardown)
    assert store.counter.listener_count == 3


def test_shell_teardown_restores_listener_count(page, store):
    store.counter.subscribe(lambda: None)
    before = store.counter.listener_count

    _, teardown = build_shell(page, store)
    teardown()
    teardown()  # second call is a no-op

    assert store.counter.listener_count == before


def test_torn_down_session_gets_no_updates(store):
    gone, alive = Mock(), Mock()
    _, teardown_gone = build_shell(gone, store)
    build_shell(alive, store)
    teardown_gone()
    gone.update.reset_mock()

    store.counter.increment()

    gone.update.assert_not_called()
    assert store.counter.listener_count == 3


def test_sessions_keep_separate_mirror_state(store):
    first_app = AppState(store.counter)
    second_app = AppState(store.counter)
    build_shell(Mock(), store, app=first_app)
    build_shell(Mock(), store, app=second_app)
    assert store.counter.listener_count == 6

    first_app.toggle_mirror()

    assert first_app.mirror_visible.value is False
    assert second_app.mirror_visible.value is True
    assert store.counter.listener_count == 5

    first_app.toggle_mirror()

    assert store.counter.listener_count == 6


def test_main_wires_teardown_to_session_close(page, store, clean_env):
    app_main.main(page)

    page.views.append.assert_called_once()
    assert store.counter.listener_count == 3

    page.on_close(None)

    assert store.counter.listener_count == 0
