from __future__ import annotations

import logging
import re
from contextlib import ExitStack
from functools import partial
from typing import Any, Callable

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.css.scalar import ScalarOffset
from textual.message import Message
from textual.reactive import reactive
from textual.timer import Timer
from textual.widget import Widget
from textual.widgets import Static

from toaster.toast import (
    ActionDispatcher,
    AnimationName,
    DismissTimer,
    HeightTracker,
    StatusStateMachine,
    ToastConfig,
    ToastRuntimeState,
    ToastStatus,
    ToastType,
    layout_for,
)
from toaster.ui.icons import TITLE_ICONS
from toaster.ui.widgets.primitives import ActionLink, CloseButton, Icon

log = logging.getLogger(__name__)

# Intermediate animations; the state machine ignores them.
FADE_IN_ANIMATION_NAME = "fade-in"
FADE_OUT_ANIMATION_NAME = "fade-out"

# Textual timers cannot run with a zero interval.
MIN_TIMER_DELAY = 0.001


def _toast_id(name: str) -> str:
    return "toast-" + re.sub(r"[^\w-]", "-", name)


class Toast(Widget):
    """A transient notification that animates in, auto-hides and collapses out.

    The owner mounts the toast and removes it once ``config.removal_callback``
    has run; the toast never removes itself.
    """

    DEFAULT_CSS = """
    Toast {
        layout: vertical;
        width: 100%;
        max-width: 60;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        background: $surface;
        border: round $primary;
    }

    Toast.-error {
        border: round $error;
    }

    Toast.-success {
        border: round $success;
    }

    Toast.-pinned {
        overflow: hidden hidden;
    }

    Toast .toast--header {
        height: auto;
    }

    Toast .toast--title {
        width: 1fr;
    }

    Toast .toast--title.-bold {
        text-style: bold;
    }

    Toast .toast--content {
        height: auto;
        margin-top: 1;
    }

    Toast .toast--actions {
        height: auto;
        margin-top: 1;
    }

    Toast .toast--action {
        margin-right: 2;
    }
    """

    is_override: reactive[bool] = reactive(False, init=False, always_update=True)

    class AnimationEnded(Message):
        """An animation on the toast finished."""

        def __init__(self, toast: Toast, animation: AnimationName | str) -> None:
            super().__init__()
            self.toast = toast
            self.animation = animation

        @property
        def control(self) -> Toast:
            return self.toast

    class StatusChanged(Message):
        """The toast moved to a new lifecycle phase."""

        def __init__(self, toast: Toast, old: ToastStatus, new: ToastStatus) -> None:
            super().__init__()
            self.toast = toast
            self.old = old
            self.new = new

        @property
        def control(self) -> Toast:
            return self.toast

    def __init__(
        self,
        config: ToastConfig,
        *,
        enter_duration: float = 0.3,
        exit_duration: float = 0.3,
        id: str | None = None,
    ) -> None:
        classes = [config.class_name] if config.class_name else []
        if config.type is not ToastType.NONE:
            classes.append(f"-{config.type.value}")
        super().__init__(id=id or _toast_id(config.name), classes=" ".join(classes) or None)
        self.config = config
        self._content: Any = config.content
        self._enter_duration = enter_duration
        self._exit_duration = exit_duration

        self._machine = StatusStateMachine(
            on_removed=config.removal_callback,
            defer=self.call_after_refresh,
            name=config.name,
        )
        self._machine.add_listener(self._on_status_change)
        self._height = HeightTracker(self._probe_height, config.is_override)
        self._timer = DismissTimer(
            config.effective_timeout,
            self._on_timer_expired,
            self._schedule_dismiss,
            enabled=config.allow_auto_hiding,
        )
        self._actions = ActionDispatcher(config.actions, self.request_hide)
        self._resources = ExitStack()
        self.set_reactive(Toast.is_override, config.is_override)

    @classmethod
    def from_props(
        cls,
        props: dict[str, Any] | None = None,
        *,
        enter_duration: float = 0.3,
        exit_duration: float = 0.3,
        **kwargs: Any,
    ) -> Toast:
        """Build a toast from the camel-case props mapping (see ToastConfig.from_dict)."""
        config = ToastConfig.from_dict({**(props or {}), **kwargs})
        return cls(config, enter_duration=enter_duration, exit_duration=exit_duration)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def status(self) -> ToastStatus:
        return self._machine.status

    @property
    def history(self) -> tuple[ToastStatus, ...]:
        return self._machine.history

    @property
    def measured_height(self) -> int | None:
        return self._height.height

    @property
    def runtime_state(self) -> ToastRuntimeState:
        return ToastRuntimeState(
            status=self._machine.status,
            height=self._height.height,
            timer_armed=self._timer.armed,
        )

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def compose(self) -> ComposeResult:
        with Horizontal(classes="toast--header"):
            icon = TITLE_ICONS.get(self.config.type)
            if icon is not None:
                yield Icon(icon, classes="toast--icon")
            title_classes = "toast--title -bold" if self._has_body() else "toast--title"
            yield Static(self._title_text(), classes=title_classes)
            if self.config.is_closable:
                yield CloseButton(self.request_hide, classes="toast--close")
        if self._content not in (None, ""):
            yield self._content_widget(self._content)
        if self.config.actions:
            with Horizontal(classes="toast--actions"):
                for index, action in enumerate(self.config.actions):
                    yield ActionLink(
                        action.label,
                        self._actions.handler_for(index),
                        classes="toast--action",
                    )

    def _has_body(self) -> bool:
        return self._content not in (None, "") or bool(self.config.actions)

    def _title_text(self) -> Text:
        return Text(self.config.title)

    @staticmethod
    def _content_widget(content: Any) -> Widget:
        if isinstance(content, Widget):
            content.add_class("toast--content")
            return content
        return Static(content, classes="toast--content")

    def update_content(self, content: Any) -> None:
        """Replace the body content.

        The measured height follows the new content only while ``is_override``
        is set; otherwise the toast keeps collapsing from its first height.
        """
        self._content = content
        title = self.query_one(".toast--title", Static)
        title.update(self._title_text())
        title.set_class(self._has_body(), "-bold")
        self.call_later(self._swap_content, content)

    async def _swap_content(self, content: Any) -> None:
        await self.query(".toast--content").remove()
        if content not in (None, ""):
            await self.mount(
                self._content_widget(content), after=self.query_one(".toast--header")
            )
        if self.is_override:
            self.call_after_refresh(self._height.set_override, True)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def on_mount(self) -> None:
        self._apply_layout(self._machine.status)
        self._resources.enter_context(self._timer)
        self._resources.callback(self._machine.destroy)
        self._machine.mount()
        log.debug("Toast %r mounted (timeout=%d ms)", self.config.name, self._timer.duration_ms)

    def on_unmount(self) -> None:
        self._resources.close()

    def request_hide(self, reason: str = "close") -> bool:
        """Start the exit animation unless the toast is already hiding."""
        return self._machine.request_hide(reason)

    def _schedule_dismiss(self, delay: float, callback: Callable[[], Any]) -> Timer:
        return self.set_timer(max(delay, MIN_TIMER_DELAY), callback)

    def _on_timer_expired(self) -> None:
        self.request_hide("timeout")

    def _on_status_change(self, old: ToastStatus, new: ToastStatus) -> None:
        if old is ToastStatus.CREATING or self._height.height is None:
            self._height.measure()
        if new is ToastStatus.HIDING:
            self._timer.cancel()
        self._apply_layout(new)
        if new is ToastStatus.SHOWING_HEIGHT:
            self._play_enter()
        elif new is ToastStatus.HIDING:
            self._play_exit()
        self.post_message(self.StatusChanged(self, old, new))

    def _apply_layout(self, status: ToastStatus) -> None:
        style = layout_for(status, self._height.height)
        self.styles.height = style.height if style.height is not None else "auto"
        for name, enabled in style.classes.items():
            self.set_class(enabled, name)

    def _probe_height(self) -> int | None:
        return self.outer_size.height or None

    # ------------------------------------------------------------------
    # Animations
    # ------------------------------------------------------------------

    def _play_enter(self) -> None:
        self.styles.opacity = 0.0
        self.styles.offset = (self.outer_size.width or self.app.size.width, 0)
        self.styles.animate(
            "opacity",
            1.0,
            duration=self._enter_duration / 2,
            on_complete=partial(self._animation_done, FADE_IN_ANIMATION_NAME),
        )
        self.styles.animate(
            "offset",
            ScalarOffset.from_offset((0, 0)),
            duration=self._enter_duration,
            on_complete=partial(self._animation_done, AnimationName.ENTER),
        )

    def _play_exit(self) -> None:
        self.styles.animate(
            "opacity",
            0.0,
            duration=self._exit_duration / 2,
            on_complete=self._collapse,
        )

    def _collapse(self) -> None:
        if not self.is_attached:
            return
        self._animation_done(FADE_OUT_ANIMATION_NAME)
        if not self._height.height:
            self.call_after_refresh(self._animation_done, AnimationName.EXIT)
            return
        self.styles.animate(
            "height",
            0,
            duration=self._exit_duration / 2,
            on_complete=partial(self._animation_done, AnimationName.EXIT),
        )

    def _animation_done(self, animation: AnimationName | str) -> None:
        if self.is_attached:
            self.post_message(self.AnimationEnded(self, animation))

    def on_toast_animation_ended(self, message: Toast.AnimationEnded) -> None:
        message.stop()
        self._machine.handle_animation_end(message.animation)

    # ------------------------------------------------------------------
    # Pointer and override handling
    # ------------------------------------------------------------------

    def on_enter(self, event: events.Enter) -> None:
        self.pointer_enter()

    def on_leave(self, event: events.Leave) -> None:
        # Leave bubbles up from children, and may arrive after the toast's own
        # Enter when the pointer moves from a child back onto the toast.
        if not self.is_mouse_over:
            self.pointer_leave()

    def pointer_enter(self) -> None:
        """Stop the countdown while the pointer is over the toast."""
        self._timer.cancel()

    def pointer_leave(self) -> None:
        """Restart a full-length countdown when the pointer leaves."""
        if not self._machine.is_hiding:
            self._timer.reset()

    def watch_is_override(self, is_override: bool) -> None:
        if is_override:
            self.call_after_refresh(self._height.set_override, True)
        else:
            self._height.set_override(False)
