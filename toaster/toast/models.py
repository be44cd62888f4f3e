from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 5000


class ToastConfigError(ValueError):
    """Raised when a toast is constructed from structurally invalid input."""


class ToastType(Enum):
    ERROR = "error"
    SUCCESS = "success"
    NONE = "none"


@dataclass(frozen=True)
class ToastAction:
    label: str
    on_activate: Callable[[], Any]
    remove_after_activate: bool = True


@dataclass(frozen=True)
class ToastConfig:
    """Caller-supplied description of a single toast.

    ``timeout`` is in milliseconds.  ``None`` selects the default; zero or
    negative values are clamped to 0 by :attr:`effective_timeout`.
    """

    name: str
    removal_callback: Callable[[], Any]
    title: str = ""
    class_name: str = ""
    timeout: int | None = None
    allow_auto_hiding: bool = True
    content: Any = None
    type: ToastType = ToastType.NONE
    is_closable: bool = True
    is_override: bool = False
    actions: tuple[ToastAction, ...] = field(default_factory=tuple)
    _effective_timeout: int = field(
        default=DEFAULT_TIMEOUT_MS, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not self.name:
            raise ToastConfigError("toast name is required")
        if not callable(self.removal_callback):
            raise ToastConfigError(f"toast {self.name!r}: removal callback must be callable")
        if self.timeout is not None and (
            isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float))
        ):
            raise ToastConfigError(
                f"toast {self.name!r}: timeout must be a number of milliseconds, "
                f"got {self.timeout!r}"
            )
        for action in self.actions:
            if not action.label:
                raise ToastConfigError(f"toast {self.name!r}: action label is required")
            if not callable(action.on_activate):
                raise ToastConfigError(
                    f"toast {self.name!r}: action {action.label!r} has no callback"
                )
        object.__setattr__(self, "_effective_timeout", self._resolve_timeout())

    def _resolve_timeout(self) -> int:
        if self.timeout is None:
            return DEFAULT_TIMEOUT_MS
        if self.timeout <= 0:
            log.warning(
                "Toast %r has non-positive timeout %r; it will hide immediately",
                self.name, self.timeout,
            )
            return 0
        return int(self.timeout)

    @property
    def effective_timeout(self) -> int:
        return self._effective_timeout

    @classmethod
    def from_dict(cls, props: Mapping[str, Any]) -> ToastConfig:
        """Build a config from the camel-case construction contract.

        Accepts ``{name, title?, className?, timeout?, allowAutoHiding?,
        content?, type?, isClosable?, isOverride?, actions?,
        removalCallback}``.  Each action is a mapping with ``label``,
        ``onActivate`` and optional ``removeAfterActivate``.
        """
        if "name" not in props:
            raise ToastConfigError("toast name is required")
        if "removalCallback" not in props:
            raise ToastConfigError(f"toast {props['name']!r}: removalCallback is required")

        raw_type = props.get("type")
        try:
            toast_type = ToastType(raw_type) if raw_type else ToastType.NONE
        except ValueError:
            raise ToastConfigError(f"unknown toast type {raw_type!r}") from None

        actions = []
        for item in props.get("actions") or ():
            if not isinstance(item, Mapping):
                raise ToastConfigError(
                    f"toast {props['name']!r}: each action must be a mapping, got {item!r}"
                )
            actions.append(
                ToastAction(
                    label=str(item.get("label", "")),
                    on_activate=item.get("onActivate"),
                    remove_after_activate=bool(item.get("removeAfterActivate", True)),
                )
            )

        return cls(
            name=str(props["name"]),
            removal_callback=props["removalCallback"],
            title=str(props.get("title") or ""),
            class_name=str(props.get("className") or ""),
            timeout=props.get("timeout"),
            allow_auto_hiding=bool(props.get("allowAutoHiding", True)),
            content=props.get("content"),
            type=toast_type,
            is_closable=bool(props.get("isClosable", True)),
            is_override=bool(props.get("isOverride", False)),
            actions=tuple(actions),
        )
