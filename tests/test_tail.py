import threading
import time

from lumberjack.engine import TailController, TailState

from .conftest import FakeLogStore


def make_controller(store, state=None, interval=0.01):
    lines, errors = [], []
    controller = TailController(
        store, "g", "", 1000, threading.Event(),
        on_line=lines.append, on_error=errors.append,
        state=state, poll_interval=interval,
    )
    return controller, lines, errors


def test_state_never_moves_backwards():
    state = TailState()
    state.observe(5000)
    state.observe(3000)
    state.observe(None)
    assert state.last_seen_ts == 5000
    assert state.next_start(0) == 5001


def test_state_fallback_before_any_event():
    assert TailState().next_start(1234) == 1234


def test_first_poll_uses_original_start():
    store = FakeLogStore()
    controller, _, _ = make_controller(store)
    controller.poll_once()
    assert store.calls == [("g", 1000, None, "", None)]


def test_poll_advances_past_last_seen():
    store = FakeLogStore(pages=[([(2000, "a"), (2500, "b")], None)])
    controller, lines, _ = make_controller(store)
    assert controller.poll_once() == 2
    controller.poll_once()
    assert store.calls[1][1] == 2501
    assert len(lines) == 2


def test_seeded_state_is_used():
    store = FakeLogStore()
    controller, _, _ = make_controller(store, state=TailState(9000))
    controller.poll_once()
    assert store.calls[0][1] == 9001


def test_failed_poll_reports_and_keeps_state():
    store = FakeLogStore(error=RuntimeError("Throttled"))
    controller, lines, errors = make_controller(store, state=TailState(4000))
    assert controller.poll_once() == 0
    assert errors == ["[tail error] Throttled"]
    assert controller.state.last_seen_ts == 4000

    store.error = None
    controller.poll_once()
    assert store.calls[-1][1] == 4001


def test_run_stops_promptly():
    store = FakeLogStore()
    controller, _, _ = make_controller(store, interval=10.0)
    thread = threading.Thread(target=controller.run, daemon=True)
    thread.start()
    time.sleep(0.05)
    controller.stop_event.set()
    thread.join(timeout=1.0)
    assert not thread.is_alive()
    assert controller.polls == 1


def test_run_does_nothing_when_already_stopped():
    store = FakeLogStore()
    controller, _, _ = make_controller(store)
    controller.stop_event.set()
    controller.run()
    assert store.calls == []


def test_unparseable_payload_does_not_stop_polling():
    nested = 'INFO {"a":' + "[" * 100000
    store = FakeLogStore(pages=[([(2000, nested)], None)])
    controller, lines, errors = make_controller(store)
    assert controller.poll_once() == 1
    assert lines == [f"1970-01-01T00:00:02+00:00 {nested}"]
    assert errors == []
