from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from .models import ToastAction

log = logging.getLogger(__name__)


class ActionDispatcher:
    """Runs a toast's action callbacks and dismisses it afterwards.

    A callback that raises is logged and re-raised; the toast is only
    dismissed when the callback returns normally.
    """

    def __init__(
        self,
        actions: Sequence[ToastAction],
        request_hide: Callable[[str], Any],
    ) -> None:
        self._actions = tuple(actions)
        self._request_hide = request_hide

    @property
    def actions(self) -> tuple[ToastAction, ...]:
        return self._actions

    def activate(self, action: ToastAction | int) -> None:
        if isinstance(action, int):
            action = self._actions[action]
        try:
            action.on_activate()
        except Exception:
            log.exception("Toast action %r failed", action.label)
            raise
        if action.remove_after_activate:
            self._request_hide(f"action:{action.label}")

    def handler_for(self, index: int) -> Callable[[], None]:
        """Zero-argument click handler for the action at *index*."""

        def _handler() -> None:
            self.activate(index)

        return _handler
