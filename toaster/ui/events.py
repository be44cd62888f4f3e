from __future__ import annotations

from textual.message import Message


class ShowToast(Message):
    """Request to mount a toast in the owning application."""

    def __init__(self, props: dict) -> None:
        super().__init__()
        self.props = props


class ToastRemoved(Message):
    """A toast finished its exit animation and may be discarded."""

    def __init__(self, toast_name: str) -> None:
        super().__init__()
        self.toast_name = toast_name
