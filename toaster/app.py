from __future__ import annotations

import logging
from functools import partial
from typing import Any

from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Footer, Static

from toaster.config.manager import ConfigManager
from toaster.toast import ToastConfigError, ToastStatus
from toaster.ui.events import ShowToast, ToastRemoved
from toaster.ui.keys.manager import KeybindManager
from toaster.ui.widgets import Toast
from toaster.utils.logger import setup_logging

log = logging.getLogger("toaster.app")


class ToasterApp(App):
    """Demo owner: mounts toasts on key presses and discards removed ones."""

    CSS = """
    #intro {
        padding: 1 2;
        color: $text-muted;
    }

    #toast-list {
        dock: right;
        width: 62;
        height: auto;
        max-height: 100%;
        padding: 1 1 0 1;
    }
    """

    def __init__(self, config_path: str | None = None, verbose: bool = False) -> None:
        super().__init__()
        self._config_manager = ConfigManager(config_path)
        config = self._config_manager

        log_level = "DEBUG" if verbose else str(config.get("general.log_level", "INFO"))
        setup_logging(log_file=str(config.get("general.log_file", "")), log_level=log_level)

        self._toast_settings = config.toast_settings()
        self._keybind_manager = KeybindManager(config.get("keybindings"))
        for binding in self._keybind_manager.bindings():
            self.bind(binding.key, binding.action, description=binding.description)

        self._toasts: dict[str, Toast] = {}
        self._counter = 0

    @property
    def toasts(self) -> dict[str, Toast]:
        return dict(self._toasts)

    def compose(self) -> ComposeResult:
        yield Static("Press a key to raise a toast. Hover one to hold it open.", id="intro")
        yield Vertical(id="toast-list")
        yield Footer()

    def on_mount(self) -> None:
        log.info("toaster started (config: %s)", self._config_manager.path)
        for conflict in self._keybind_manager.conflicts:
            self.notify(conflict, title="Key bindings", severity="warning")

    # ------------------------------------------------------------------
    # Owning toasts
    # ------------------------------------------------------------------

    def show_toast(self, **props: Any) -> Toast | None:
        """Mount a toast built from camel-case *props* filled with config defaults."""
        self._counter += 1
        name = str(props.get("name") or f"toast-{self._counter}")
        if name in self._toasts:
            log.warning("Toast %r is already shown; ignoring", name)
            return None

        settings = self._toast_settings
        merged: dict[str, Any] = {
            "timeout": settings["timeout_ms"],
            "allowAutoHiding": settings["allow_auto_hiding"],
            "isClosable": settings["is_closable"],
            **props,
            "name": name,
            "removalCallback": partial(self.post_message, ToastRemoved(name)),
        }
        try:
            toast = Toast.from_props(
                merged,
                enter_duration=float(settings["enter_duration"]),
                exit_duration=float(settings["exit_duration"]),
            )
        except ToastConfigError as exc:
            log.error("Cannot show toast %r: %s", name, exc)
            self.notify(str(exc), severity="error")
            return None

        self._toasts[name] = toast
        self.query_one("#toast-list", Vertical).mount(toast)
        return toast

    def on_show_toast(self, message: ShowToast) -> None:
        self.show_toast(**message.props)

    def on_toast_removed(self, message: ToastRemoved) -> None:
        toast = self._toasts.pop(message.toast_name, None)
        if toast is None:
            return
        toast.remove()
        log.debug("Discarded toast %r", message.toast_name)

    def on_toast_status_changed(self, message: Toast.StatusChanged) -> None:
        log.debug(
            "Toast %r: %s -> %s",
            message.toast.config.name, message.old.value, message.new.value,
        )

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_show_info(self) -> None:
        self.show_toast(title="Heads up", content="Something happened worth knowing.")

    def action_show_success(self) -> None:
        self.show_toast(title="Saved", type="success")

    def action_show_error(self) -> None:
        self.show_toast(
            title="Upload failed",
            type="error",
            content="The server closed the connection.",
        )

    def action_show_actions(self) -> None:
        self.show_toast(
            title="File deleted",
            content="report.pdf was moved to the trash.",
            actions=[
                {"label": "Undo", "onActivate": partial(self.notify, "Restored report.pdf")},
                {
                    "label": "Details",
                    "onActivate": partial(self.notify, "Deleted 2 minutes ago"),
                    "removeAfterActivate": False,
                },
            ],
        )

    def action_show_sticky(self) -> None:
        self.show_toast(
            title="Pinned",
            content="This toast stays until you close it.",
            allowAutoHiding=False,
        )

    def action_dismiss_all(self) -> None:
        for toast in self._toasts.values():
            if toast.status is not ToastStatus.HIDING:
                toast.request_hide("dismiss-all")
