from __future__ import annotations

from typing import Any, Callable

from rich.text import Text
from textual import events
from textual.binding import Binding
from textual.widgets import Button, Static

from toaster.ui.icons import CROSS, IconAsset


class Icon(Static):
    """A single glyph drawn from an :class:`IconAsset`."""

    DEFAULT_CSS = """
    Icon {
        width: auto;
        height: 1;
        margin-right: 1;
    }
    """

    def __init__(self, asset: IconAsset, classes: str | None = None) -> None:
        super().__init__(classes=classes)
        self.asset = asset

    def render(self) -> Text:
        return Text(self.asset.glyph, style=self.asset.style)


class CloseButton(Button):
    """Flat one-cell button that runs *handler* when pressed."""

    DEFAULT_CSS = """
    CloseButton {
        width: 3;
        min-width: 3;
        height: 1;
        border: none;
        padding: 0;
        background: transparent;
        color: $text-muted;
    }

    CloseButton:hover {
        background: $boost;
        color: $text;
    }
    """

    def __init__(self, handler: Callable[[], Any], classes: str | None = None) -> None:
        super().__init__(CROSS.glyph, classes=classes)
        self._handler = handler

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._handler()


class ActionLink(Static, can_focus=True):
    """Underlined clickable label; Enter activates it when focused."""

    DEFAULT_CSS = """
    ActionLink {
        width: auto;
        height: 1;
        color: $accent;
        text-style: underline;
    }

    ActionLink:hover, ActionLink:focus {
        text-style: bold underline;
    }
    """

    BINDINGS = [Binding("enter", "activate", "Activate", show=False)]

    def __init__(
        self,
        label: str,
        handler: Callable[[], Any],
        classes: str | None = None,
    ) -> None:
        super().__init__(label, classes=classes, markup=False)
        self.label = label
        self._handler = handler

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self._handler()

    def action_activate(self) -> None:
        self._handler()
