from __future__ import annotations

import logging

log = logging.getLogger(__name__)

TOAST_KEYS = ("timeout_ms", "allow_auto_hiding", "is_closable", "enter_duration", "exit_duration")


def get_toast_defaults(config: dict | None = None) -> dict[str, object]:
    """Return the ``[toast]`` section of *config*, filled in from defaults.

    Unknown keys are dropped with a warning.
    """
    section = dict(DEFAULT_CONFIG["toast"])
    user = (config or {}).get("toast", {})
    if not isinstance(user, dict):
        log.warning("Ignoring non-table [toast] section")
        return section
    for key, value in user.items():
        if key not in TOAST_KEYS:
            log.warning("Unknown toast setting %r", key)
            continue
        section[key] = value
    return section


DEFAULT_CONFIG: dict = {
    "general": {
        "log_file": "~/.local/share/toaster/toaster.log",
        "log_level": "INFO",
    },
    "toast": {
        "timeout_ms": 5000,
        "allow_auto_hiding": True,
        "is_closable": True,
        # Seconds; the enter and exit animations each run in two halves.
        "enter_duration": 0.3,
        "exit_duration": 0.3,
    },
    "keybindings": {
        "show_info": "i",
        "show_success": "s",
        "show_error": "e",
        "show_actions": "a",
        "show_sticky": "p",
        "dismiss_all": "x",
        "quit": "q",
    },
}
