from __future__ import annotations

from .manager import ACTION_DESCRIPTIONS, DEFAULT_KEYBINDINGS, KeybindManager

__all__ = ["ACTION_DESCRIPTIONS", "DEFAULT_KEYBINDINGS", "KeybindManager"]
