from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

log = logging.getLogger(__name__)


class ToastStatus(Enum):
    """Visible lifecycle phase of a toast."""

    CREATING = "creating"
    SHOWING_INDENTS = "showing-indents"
    SHOWING_HEIGHT = "showing-height"
    SHOWN = "shown"
    HIDING = "hiding"


class AnimationName(Enum):
    """Identifiers of the last enter and exit animations."""

    ENTER = "move-left"
    EXIT = "remove-height"


class ToastEvent(Enum):
    """Inputs to the transition function."""

    MOUNTED = "mounted"  # first deferred step after mount
    PAINTED = "painted"  # second deferred step
    ANIMATION_END = "animation_end"
    HIDE = "hide"


# Valid state transitions for ToastStatus
VALID_TRANSITIONS: dict[ToastStatus, frozenset[ToastStatus]] = {
    ToastStatus.CREATING: frozenset({ToastStatus.SHOWING_INDENTS, ToastStatus.HIDING}),
    ToastStatus.SHOWING_INDENTS: frozenset(
        {ToastStatus.SHOWING_HEIGHT, ToastStatus.HIDING}
    ),
    ToastStatus.SHOWING_HEIGHT: frozenset({ToastStatus.SHOWN, ToastStatus.HIDING}),
    ToastStatus.SHOWN: frozenset({ToastStatus.HIDING}),
    ToastStatus.HIDING: frozenset(),  # only the removal event follows
}

# Animation that completes each animating phase
EXPECTED_ANIMATION: dict[ToastStatus, AnimationName] = {
    ToastStatus.SHOWING_HEIGHT: AnimationName.ENTER,
    ToastStatus.HIDING: AnimationName.EXIT,
}

# Phases that carry an explicit pixel (row) height
EXPLICIT_HEIGHT_STATES: frozenset[ToastStatus] = frozenset(
    {ToastStatus.SHOWING_HEIGHT, ToastStatus.HIDING}
)


def is_valid_transition(current: ToastStatus, target: ToastStatus) -> bool:
    """Check whether a ToastStatus transition is allowed."""
    return target in VALID_TRANSITIONS.get(current, frozenset())


def next_status(
    current: ToastStatus,
    event: ToastEvent,
    animation: AnimationName | None = None,
) -> ToastStatus | None:
    """Resolve the status that *event* leads to from *current*.

    Returns ``None`` when the pair is not applicable.  A matching
    ``ANIMATION_END`` while hiding also returns ``None``: removal is an
    event, not a status, and the caller detects it with
    :func:`completes_removal`.
    """
    target: ToastStatus | None = None
    if event is ToastEvent.MOUNTED and current is ToastStatus.CREATING:
        target = ToastStatus.SHOWING_INDENTS
    elif event is ToastEvent.PAINTED and current is ToastStatus.SHOWING_INDENTS:
        target = ToastStatus.SHOWING_HEIGHT
    elif event is ToastEvent.ANIMATION_END and current is ToastStatus.SHOWING_HEIGHT:
        if animation is EXPECTED_ANIMATION[current]:
            target = ToastStatus.SHOWN
    elif event is ToastEvent.HIDE and current is not ToastStatus.HIDING:
        target = ToastStatus.HIDING

    if target is None or not is_valid_transition(current, target):
        log.debug("Ignoring %s (%s) in status %s", event.value, animation, current.value)
        return None
    return target


def completes_removal(current: ToastStatus, animation: AnimationName | None) -> bool:
    """True when *animation* finishing in *current* means the toast is gone."""
    return current is ToastStatus.HIDING and animation is EXPECTED_ANIMATION[current]


@dataclass(frozen=True)
class LayoutStyle:
    """Layout overrides the widget applies for a phase."""

    height: int | None = None
    pinned: bool = False
    appearing: bool = False
    show_animation: bool = False
    hide_animation: bool = False

    @property
    def classes(self) -> dict[str, bool]:
        return {
            "-pinned": self.pinned,
            "-appearing": self.appearing,
            "-show-animation": self.show_animation,
            "-hide-animation": self.hide_animation,
        }


def layout_for(status: ToastStatus, height: int | None) -> LayoutStyle:
    """Derive the layout overrides for *status* given a measured *height*."""
    explicit = height if height and status in EXPLICIT_HEIGHT_STATES else None
    return LayoutStyle(
        height=explicit,
        pinned=status is not ToastStatus.CREATING,
        appearing=status in (ToastStatus.SHOWING_INDENTS, ToastStatus.SHOWING_HEIGHT),
        show_animation=status is ToastStatus.SHOWING_HEIGHT,
        hide_animation=status is ToastStatus.HIDING,
    )


@dataclass(frozen=True)
class ToastRuntimeState:
    """Snapshot of a mounted toast's mutable state."""

    status: ToastStatus
    height: int | None = None
    timer_armed: bool = False
