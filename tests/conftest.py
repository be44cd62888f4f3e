from __future__ import annotations

import heapq
import itertools
from typing import Any, Callable

import pytest

from toaster.toast import (
    ActionDispatcher,
    DismissTimer,
    StatusStateMachine,
    ToastConfig,
    ToastStatus,
)


class FakeTimer:
    def __init__(self) -> None:
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


class FakeClock:
    """Deterministic stand-in for ``set_timer`` and ``call_after_refresh``.

    Time is in seconds, like Textual's timers.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[tuple[float, int, FakeTimer, Callable[[], Any]]] = []
        self._seq = itertools.count()
        self.deferred: list[Callable[[], Any]] = []

    def schedule(self, delay: float, callback: Callable[[], Any]) -> FakeTimer:
        handle = FakeTimer()
        heapq.heappush(self._queue, (self.now + delay, next(self._seq), handle, callback))
        return handle

    def defer(self, callback: Callable[[], Any]) -> None:
        self.deferred.append(callback)

    def flush_deferred(self) -> int:
        """Run one round of deferred callbacks (one "refresh")."""
        batch, self.deferred = self.deferred, []
        for callback in batch:
            callback()
        return len(batch)

    def advance_to(self, when: float) -> None:
        while self._queue and self._queue[0][0] <= when:
            due, _seq, handle, callback = heapq.heappop(self._queue)
            self.now = due
            if not handle.stopped:
                callback()
        self.now = when

    def advance(self, seconds: float) -> None:
        self.advance_to(self.now + seconds)

    @property
    def pending(self) -> int:
        return sum(1 for entry in self._queue if not entry[2].stopped)


class WiredToast:
    """Machine, timer and dispatcher wired the way the Toast widget wires them."""

    def __init__(self, clock: FakeClock, config: ToastConfig) -> None:
        self.clock = clock
        self.config = config
        self.machine = StatusStateMachine(config.removal_callback, clock.defer, config.name)
        self.timer = DismissTimer(
            config.effective_timeout,
            lambda: self.machine.request_hide("timeout"),
            clock.schedule,
            enabled=config.allow_auto_hiding,
        )
        self.actions = ActionDispatcher(config.actions, self.machine.request_hide)
        self.machine.add_listener(self._on_change)

    def _on_change(self, old: ToastStatus, new: ToastStatus) -> None:
        if new is ToastStatus.HIDING:
            self.timer.cancel()

    def mount(self) -> None:
        self.timer.start()
        self.machine.mount()

    def unmount(self) -> None:
        self.timer.cancel()
        self.machine.destroy()

    def pointer_enter(self) -> None:
        self.timer.cancel()

    def pointer_leave(self) -> None:
        if not self.machine.is_hiding:
            self.timer.reset()


class RemovalRecorder:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def removed() -> RemovalRecorder:
    return RemovalRecorder()


@pytest.fixture
def make_toast(clock: FakeClock, removed: RemovalRecorder):
    def _make(**overrides: Any) -> WiredToast:
        overrides.setdefault("name", "t1")
        overrides.setdefault("removal_callback", removed)
        return WiredToast(clock, ToastConfig(**overrides))

    return _make
