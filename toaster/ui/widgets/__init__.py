from __future__ import annotations

from .primitives import ActionLink, CloseButton, Icon
from .toast import Toast

__all__ = [
    "ActionLink",
    "CloseButton",
    "Icon",
    "Toast",
]
