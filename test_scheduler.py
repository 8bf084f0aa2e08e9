"""
Tests for the deferred-callback schedulers.
"""

from logic.scheduler import ManualScheduler, TkScheduler


def test_runs_in_due_order():
    scheduler = ManualScheduler()
    calls = []
    scheduler.call_later(30, lambda: calls.append("late"))
    scheduler.call_later(10, lambda: calls.append("early"))
    scheduler.call_later(10, lambda: calls.append("early-2"))

    assert scheduler.run_pending() == 3
    assert calls == ["early", "early-2", "late"]
    assert scheduler.now_ms == 30


def test_advance_only_runs_due_tasks():
    scheduler = ManualScheduler()
    calls = []
    scheduler.call_later(100, lambda: calls.append(1))

    assert scheduler.advance(99) == 0
    assert calls == []
    assert scheduler.advance(1) == 1
    assert calls == [1]
    assert scheduler.pending == 0


def test_cancel():
    scheduler = ManualScheduler()
    calls = []
    handle = scheduler.call_later(5, lambda: calls.append(1))
    scheduler.cancel(handle)
    scheduler.cancel(handle)
    scheduler.cancel(None)

    assert scheduler.run_pending() == 0
    assert calls == []


def test_task_scheduled_by_task_runs_in_same_window():
    scheduler = ManualScheduler()
    calls = []

    def first():
        calls.append("first")
        scheduler.call_later(5, lambda: calls.append("second"))

    scheduler.call_later(5, first)
    scheduler.advance(20)
    assert calls == ["first", "second"]


def test_negative_delay_runs_now():
    scheduler = ManualScheduler()
    calls = []
    scheduler.call_later(-10, lambda: calls.append(1))
    assert scheduler.advance(0) == 1


class FakeWidget:
    """Records after()/after_cancel() calls like a Tk widget."""

    def __init__(self):
        self.scheduled = {}
        self.cancelled = []

    def after(self, ms, callback):
        handle = f"after#{len(self.scheduled)}"
        self.scheduled[handle] = (ms, callback)
        return handle

    def after_cancel(self, handle):
        self.cancelled.append(handle)


def test_tk_scheduler_delegates_to_widget():
    widget = FakeWidget()
    scheduler = TkScheduler(widget)
    callback = lambda: None

    handle = scheduler.call_later(250, callback)
    assert widget.scheduled[handle] == (250, callback)

    scheduler.cancel(handle)
    scheduler.cancel(None)
    assert widget.cancelled == [handle]
