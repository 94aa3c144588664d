from unittest.mock import MagicMock

from studyaid.events import ChangeNotifier


def test_emit_calls_listeners_in_order():
    notifier = ChangeNotifier()
    calls = []
    notifier.subscribe(lambda value: calls.append(("first", value)))
    notifier.subscribe(lambda value: calls.append(("second", value)))

    notifier.emit(42)

    assert calls == [("first", 42), ("second", 42)]


def test_unsubscribe_stops_delivery_and_is_idempotent():
    notifier = ChangeNotifier()
    listener = MagicMock()
    unsubscribe = notifier.subscribe(listener)

    unsubscribe()
    unsubscribe()
    notifier.emit("x")

    listener.assert_not_called()
    assert len(notifier) == 0


def test_failing_listener_is_logged_and_skipped(caplog):
    notifier = ChangeNotifier()
    good = MagicMock()

    def bad(value):
        raise RuntimeError("boom")

    notifier.subscribe(bad)
    notifier.subscribe(good)

    notifier.emit("snapshot")

    good.assert_called_once_with("snapshot")
    assert "boom" in caplog.text


def test_listener_may_unsubscribe_during_emit():
    notifier = ChangeNotifier()
    later = MagicMock()
    holder = {}

    def once(value):
        holder["unsubscribe"]()

    holder["unsubscribe"] = notifier.subscribe(once)
    notifier.subscribe(later)

    notifier.emit(1)
    notifier.emit(2)

    assert later.call_count == 2
    assert len(notifier) == 1


def test_clear_removes_everything():
    notifier = ChangeNotifier()
    listener = MagicMock()
    notifier.subscribe(listener)
    notifier.clear()
    notifier.emit(None)
    listener.assert_not_called()
