from __future__ import annotations

from .models import (
    DEFAULT_TIMEOUT_MS,
    ToastAction,
    ToastConfig,
    ToastConfigError,
    ToastType,
)
from .state import (
    AnimationName,
    LayoutStyle,
    ToastEvent,
    ToastRuntimeState,
    ToastStatus,
    layout_for,
)
from .height import HeightTracker
from .timer import DismissTimer
from .actions import ActionDispatcher
from .machine import StatusStateMachine

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "ActionDispatcher",
    "AnimationName",
    "DismissTimer",
    "HeightTracker",
    "LayoutStyle",
    "StatusStateMachine",
    "ToastAction",
    "ToastConfig",
    "ToastConfigError",
    "ToastEvent",
    "ToastRuntimeState",
    "ToastStatus",
    "ToastType",
    "layout_for",
]
