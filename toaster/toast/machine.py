from __future__ import annotations

import logging
from typing import Any, Callable

from .state import (
    AnimationName,
    ToastEvent,
    ToastStatus,
    completes_removal,
    next_status,
)

log = logging.getLogger(__name__)

StatusListener = Callable[[ToastStatus, ToastStatus], Any]


def _coerce_animation(name: AnimationName | str | None) -> AnimationName | None:
    if name is None or isinstance(name, AnimationName):
        return name
    try:
        return AnimationName(name)
    except ValueError:
        return None


class StatusStateMachine:
    """Owns a toast's lifecycle phase.

    The two appearing steps (creating -> showing-indents -> showing-height)
    each run on a separate deferred callback supplied by *defer*, so every
    phase is painted before the next one is applied.  The remaining
    transitions are driven by animation-completion signals and hide
    requests; anything not applicable in the current phase is ignored.

    *on_removed* runs once, when the exit animation finishes while hiding.
    After :meth:`destroy` nothing fires.
    """

    def __init__(
        self,
        on_removed: Callable[[], Any],
        defer: Callable[[Callable[[], Any]], Any],
        name: str = "",
    ) -> None:
        self._on_removed = on_removed
        self._defer = defer
        self._name = name
        self._status = ToastStatus.CREATING
        self._history: list[ToastStatus] = [ToastStatus.CREATING]
        self._listeners: list[StatusListener] = []
        self._mounted = False
        self._removed = False
        self._destroyed = False

    @property
    def status(self) -> ToastStatus:
        return self._status

    @property
    def history(self) -> tuple[ToastStatus, ...]:
        return tuple(self._history)

    @property
    def is_hiding(self) -> bool:
        return self._status is ToastStatus.HIDING

    @property
    def removed(self) -> bool:
        return self._removed

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def add_listener(self, listener: StatusListener) -> None:
        self._listeners.append(listener)

    def mount(self) -> None:
        """Schedule the first appearing step."""
        if self._mounted or self._destroyed:
            return
        self._mounted = True
        self._defer(self.advance)

    def advance(self) -> bool:
        """Run the pending deferred step for the current phase."""
        if self._status is ToastStatus.CREATING:
            return self._dispatch(ToastEvent.MOUNTED)
        return self._dispatch(ToastEvent.PAINTED)

    def handle_animation_end(self, name: AnimationName | str | None) -> bool:
        """React to a finished animation; unknown or mismatched names are no-ops."""
        if self._destroyed or self._removed:
            return False
        animation = _coerce_animation(name)
        if completes_removal(self._status, animation):
            self._removed = True
            log.debug("Toast %r removed", self._name)
            self._on_removed()
            return True
        return self._dispatch(ToastEvent.ANIMATION_END, animation)

    def request_hide(self, reason: str = "close") -> bool:
        changed = self._dispatch(ToastEvent.HIDE)
        if changed:
            log.debug("Toast %r hiding (%s)", self._name, reason)
        return changed

    def destroy(self) -> None:
        """Void pending deferred steps and silence every further event."""
        self._destroyed = True
        self._listeners.clear()

    def _dispatch(self, event: ToastEvent, animation: AnimationName | None = None) -> bool:
        if self._destroyed or self._removed:
            return False
        target = next_status(self._status, event, animation)
        if target is None:
            return False
        old = self._status
        self._status = target
        self._history.append(target)
        for listener in list(self._listeners):
            listener(old, target)
        if target is ToastStatus.SHOWING_INDENTS and not self._destroyed:
            self._defer(self.advance)
        return True
