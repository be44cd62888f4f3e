from __future__ import annotations

import logging
from typing import Callable

log = logging.getLogger(__name__)


class HeightTracker:
    """Remembers the rendered height a toast collapses from when hiding.

    Layout engines cannot animate from an implicit height to zero, so the
    widget pins this value as an explicit height while the exit animation
    runs.  Measuring happens only when asked: once after mount, and again
    whenever the override flag is set.
    """

    def __init__(self, probe: Callable[[], int | None], is_override: bool = False) -> None:
        self._probe = probe
        self._is_override = is_override
        self._height: int | None = None

    @property
    def height(self) -> int | None:
        return self._height

    @property
    def is_override(self) -> bool:
        return self._is_override

    def measure(self) -> int | None:
        value = self._probe()
        if value:
            if value != self._height:
                log.debug("Toast height %s -> %s", self._height, value)
            self._height = value
        return self._height

    def set_override(self, is_override: bool) -> int | None:
        """Record the override flag; re-measure while it is set."""
        self._is_override = is_override
        if is_override:
            return self.measure()
        return self._height
