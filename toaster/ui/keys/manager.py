from __future__ import annotations

import logging
from collections import defaultdict

from textual.binding import Binding

from toaster.config.defaults import DEFAULT_CONFIG

log = logging.getLogger("toaster.keys")

DEFAULT_KEYBINDINGS: dict[str, str] = dict(DEFAULT_CONFIG["keybindings"])

ACTION_DESCRIPTIONS: dict[str, str] = {
    "show_info": "Info",
    "show_success": "Success",
    "show_error": "Error",
    "show_actions": "Actions",
    "show_sticky": "Sticky",
    "dismiss_all": "Dismiss all",
    "quit": "Quit",
}


class KeybindManager:
    """Resolves the demo's key bindings from the ``[keybindings]`` table.

    An empty key disables the action.  Keys shared by several actions are
    reported through :attr:`conflicts`; the first action listed keeps the key.
    """

    def __init__(self, user_bindings: dict[str, str] | None = None) -> None:
        self._bindings: dict[str, str] = dict(DEFAULT_KEYBINDINGS)
        self._conflicts: list[str] = []

        if user_bindings:
            for action, key in user_bindings.items():
                if action in self._bindings:
                    self._bindings[action] = str(key)
                else:
                    log.warning("Ignoring binding for unknown action %r", action)

        self._detect_conflicts()

    def _detect_conflicts(self) -> None:
        key_to_actions: dict[str, list[str]] = defaultdict(list)
        for action, key in self._bindings.items():
            if key:
                key_to_actions[key].append(action)

        self._conflicts = []
        for key, actions in key_to_actions.items():
            if len(actions) > 1:
                msg = f"Key '{key}' bound to multiple actions: {', '.join(actions)}"
                self._conflicts.append(msg)
                log.warning(msg)

    @property
    def conflicts(self) -> list[str]:
        return list(self._conflicts)

    def get_all(self) -> dict[str, str]:
        return dict(self._bindings)

    def bindings(self) -> list[Binding]:
        """Textual bindings for every enabled action, one per key."""
        result: list[Binding] = []
        taken: set[str] = set()
        for action, key in self._bindings.items():
            if not key:
                log.debug("Action %r has no key", action)
                continue
            if key in taken:
                continue
            taken.add(key)
            result.append(Binding(key, action, ACTION_DESCRIPTIONS.get(action, action)))
        return result
