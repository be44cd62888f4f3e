from __future__ import annotations

from dataclasses import dataclass

from toaster.toast.models import ToastType


@dataclass(frozen=True)
class IconAsset:
    """A named glyph with the style it is drawn in."""

    name: str
    glyph: str
    style: str = ""


ATTENTION = IconAsset("attention", "⚠", "bold red")
SUCCESS = IconAsset("success", "✔", "bold green")
CROSS = IconAsset("cross", "✕", "")

TITLE_ICONS: dict[ToastType, IconAsset] = {
    ToastType.ERROR: ATTENTION,
    ToastType.SUCCESS: SUCCESS,
}
