from __future__ import annotations

from .defaults import DEFAULT_CONFIG, get_toast_defaults
from .manager import ConfigManager

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigManager",
    "get_toast_defaults",
]
