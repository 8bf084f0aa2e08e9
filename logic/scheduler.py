"""
Deferred callbacks for the opponent's move.

The controller never sleeps; it asks a scheduler to call it back later
and keeps the handle so the call can be cancelled on reset.
"""

import itertools
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional


class Scheduler:
    """Interface: run a callback after a delay, with cancellation."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]):
        """Schedule callback; returns a handle for cancel()."""
        raise NotImplementedError

    def cancel(self, handle) -> None:
        """Cancel a pending callback. Unknown or spent handles are ignored."""
        raise NotImplementedError


@dataclass(order=True)
class _Task:
    due_ms: int
    seq: int
    callback: Callable[[], None] = field(compare=False)


class ManualScheduler(Scheduler):
    """
    A scheduler driven by hand.

    Nothing runs until run_pending() or advance() is called. Used in
    tests and in console mode, where there is no event loop.
    """

    def __init__(self):
        self.now_ms = 0
        self._seq = itertools.count()
        self._tasks: Dict[int, _Task] = {}

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> int:
        task = _Task(self.now_ms + max(0, int(delay_ms)), next(self._seq), callback)
        self._tasks[task.seq] = task
        return task.seq

    def cancel(self, handle: Optional[int]) -> None:
        if handle is not None:
            self._tasks.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def advance(self, ms: int) -> int:
        """
        Move the clock forward and run every task that falls due.

        Tasks scheduled by a running task are picked up too if they are
        due within the window.

        Returns:
            Number of callbacks run.
        """
        target = self.now_ms + ms
        ran = 0
        while True:
            due = self._next_due(target)
            if due is None:
                break
            del self._tasks[due.seq]
            self.now_ms = max(self.now_ms, due.due_ms)
            due.callback()
            ran += 1
        self.now_ms = target
        return ran

    def run_pending(self) -> int:
        """Run everything queued, however far in the future."""
        ran = 0
        while self._tasks:
            task = min(self._tasks.values())
            ran += self.advance(task.due_ms - self.now_ms)
        return ran

    def _next_due(self, limit_ms: int) -> Optional[_Task]:
        ready: List[_Task] = [t for t in self._tasks.values() if t.due_ms <= limit_ms]
        return min(ready) if ready else None


class TkScheduler(Scheduler):
    """Scheduler backed by a Tk widget's after() / after_cancel()."""

    def __init__(self, widget):
        self.widget = widget

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> str:
        return self.widget.after(max(0, int(delay_ms)), callback)

    def cancel(self, handle: Optional[str]) -> None:
        if handle is not None:
            self.widget.after_cancel(handle)
