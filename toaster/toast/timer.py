from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

log = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def stop(self) -> Any: ...


# ``schedule(delay_seconds, callback)``; matches ``Widget.set_timer``.
Scheduler = Callable[[float, Callable[[], Any]], TimerHandle]


class DismissTimer:
    """Resettable one-shot countdown that requests a toast's dismissal.

    At most one countdown is armed at a time: :meth:`start` replaces any
    pending one.  Hovering does not pause the countdown; callers
    :meth:`cancel` on pointer enter and :meth:`reset` on pointer leave,
    which discards the remaining time and starts a full-duration one.

    Can be used as a context manager; leaving the block cancels.
    """

    def __init__(
        self,
        duration_ms: int,
        on_expire: Callable[[], Any],
        schedule: Scheduler,
        enabled: bool = True,
    ) -> None:
        self._duration_ms = max(0, duration_ms)
        self._on_expire = on_expire
        self._schedule = schedule
        self._enabled = enabled
        self._handle: TimerHandle | None = None

    @property
    def duration_ms(self) -> int:
        return self._duration_ms

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def armed(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        """Arm a full-duration countdown, replacing any pending one."""
        if not self._enabled:
            return
        self.cancel()
        self._handle = self._schedule(self._duration_ms / 1000, self._fire)
        log.debug("Dismiss timer armed for %d ms", self._duration_ms)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.stop()
            self._handle = None

    def reset(self) -> None:
        self.cancel()
        self.start()

    def _fire(self) -> None:
        if self._handle is None:
            # Cancelled after the scheduler already queued the callback.
            return
        self._handle = None
        self._on_expire()

    def __enter__(self) -> DismissTimer:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cancel()
