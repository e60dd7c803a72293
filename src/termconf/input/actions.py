# topmark:header:start
#
#   project      : TermConf
#   file         : actions.py
#   file_relpath : src/termconf/input/actions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Application actions selected by input bindings.

The set of actions is open: the front end executes whatever it understands, and
new actions can be registered at runtime via `ActionRegistry.register`. This
module only knows each action's *name* and *parameter shape*, which is what the
document reader needs to validate ``[[input_mapping]]`` entries.

An `Action` is an immutable, hashable value so resolved action lists can be
compared and cached freely.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

from termconf.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from termconf.config.logging import TermconfLogger

logger: TermconfLogger = get_logger(__name__)

ParamValue = str | int | bool


@dataclass(frozen=True)
class ActionParam:
    """Shape of one action parameter.

    Attributes:
        name (str): Parameter key as written next to ``action`` in the document.
        kind (type): Expected Python type (``str``, ``int`` or ``bool``).
        required (bool): Whether the parameter must be present.
    """

    name: str
    kind: type = str
    required: bool = True


@dataclass(frozen=True)
class Action:
    """A named application action with its (possibly empty) parameters.

    Attributes:
        name (str): Action name, e.g. ``"ToggleFullscreen"``.
        params (tuple[tuple[str, ParamValue], ...]): Parameter pairs in their
            registered order.
    """

    name: str
    params: tuple[tuple[str, ParamValue], ...] = ()

    def param(self, key: str, default: ParamValue | None = None) -> ParamValue | None:
        """Return a parameter value by key."""
        for k, v in self.params:
            if k == key:
                return v
        return default

    def __str__(self) -> str:
        if not self.params:
            return self.name
        args: str = ", ".join(f"{k}={v!r}" for k, v in self.params)
        return f"{self.name}({args})"


class ActionRegistry:
    """Process-wide registry of known action names and their parameters."""

    _lock = RLock()
    _specs: dict[str, tuple[ActionParam, ...]] = {}

    @classmethod
    def register(cls, name: str, *params: ActionParam) -> None:
        """Register (or replace) an action specification.

        Args:
            name (str): Action name.
            *params (ActionParam): Parameter shapes, in rendering order.
        """
        with cls._lock:
            if name in cls._specs:
                logger.debug("Replacing action specification for %s", name)
            cls._specs[name] = tuple(params)

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove an action specification (no-op when unknown)."""
        with cls._lock:
            cls._specs.pop(name, None)

    @classmethod
    def get(cls, name: str) -> tuple[ActionParam, ...] | None:
        """Return the parameter shapes of an action, or None if unknown."""
        with cls._lock:
            return cls._specs.get(name)

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return all registered action names (sorted)."""
        with cls._lock:
            return tuple(sorted(cls._specs))

    @classmethod
    def as_mapping(cls) -> Mapping[str, tuple[ActionParam, ...]]:
        """Return a read-only view of the registered specifications."""
        with cls._lock:
            return MappingProxyType(dict(cls._specs))


def make_action(name: str, table: Mapping[str, Any] | None = None) -> Action:
    """Build a validated `Action` from its name and the surrounding entry table.

    Parameters are picked from ``table`` by their registered keys; keys unrelated to
    the action are ignored.

    Args:
        name (str): The action name.
        table (Mapping[str, Any] | None): The binding entry (or a plain parameter dict).

    Returns:
        Action: The validated action.

    Raises:
        ValueError: If the action is unknown or a required parameter is missing.
        TypeError: If a parameter has the wrong type.
    """
    spec: tuple[ActionParam, ...] | None = ActionRegistry.get(name)
    if spec is None:
        raise ValueError(f"Unknown action {name!r}")

    values: Mapping[str, Any] = table or {}
    params: list[tuple[str, ParamValue]] = []
    for p in spec:
        if p.name not in values:
            if p.required:
                raise ValueError(f"Action {name!r} requires parameter {p.name!r}")
            continue
        raw: Any = values[p.name]
        # bool is a subclass of int; exclude it explicitly
        if not isinstance(raw, p.kind) or (p.kind is int and isinstance(raw, bool)):
            raise TypeError(
                f"Expected {p.kind.__name__} for {name}.{p.name}, got {type(raw).__name__}: {raw!r}"
            )
        params.append((p.name, raw))
    return Action(name, tuple(params))


_BUILTIN_ACTIONS: Final[tuple[tuple[str, tuple[ActionParam, ...]], ...]] = (
    ("CancelSelection", ()),
    ("ChangeProfile", (ActionParam("name"),)),
    ("ClearHistoryAndReset", ()),
    ("CloseTab", ()),
    ("CopyPreviousMarkRange", ()),
    ("CopySelection", (ActionParam("format", required=False),)),
    ("CreateDebugDump", ()),
    ("CreateNewTab", ()),
    ("DecreaseFontSize", ()),
    ("DecreaseOpacity", ()),
    ("FocusNextSearchMatch", ()),
    ("FocusPreviousSearchMatch", ()),
    ("FollowHyperlink", ()),
    ("IncreaseFontSize", ()),
    ("IncreaseOpacity", ()),
    ("NewTerminal", (ActionParam("profile", required=False),)),
    ("OpenConfiguration", ()),
    ("OpenFileManager", ()),
    ("PasteClipboard", (ActionParam("strip", kind=bool, required=False),)),
    ("PasteSelection", ()),
    ("Quit", ()),
    ("ReloadConfig", (ActionParam("profile", required=False),)),
    ("ResetConfig", ()),
    ("ResetFontSize", ()),
    ("ScreenshotVT", ()),
    ("ScrollDown", ()),
    ("ScrollMarkDown", ()),
    ("ScrollMarkUp", ()),
    ("ScrollOneDown", ()),
    ("ScrollOneUp", ()),
    ("ScrollPageDown", ()),
    ("ScrollPageUp", ()),
    ("ScrollToBottom", ()),
    ("ScrollToTop", ()),
    ("ScrollUp", ()),
    ("SearchReverse", ()),
    ("SendChars", (ActionParam("chars"),)),
    ("SwitchToTab", (ActionParam("position", kind=int),)),
    ("SwitchToTabLeft", ()),
    ("SwitchToTabRight", ()),
    ("ToggleAllKeyMaps", ()),
    ("ToggleFullscreen", ()),
    ("ToggleInputProtection", ()),
    ("ToggleStatusLine", ()),
    ("ToggleTitleBar", ()),
    ("ViNormalMode", ()),
    ("WriteScreen", (ActionParam("chars"),)),
)


def register_action(name: str, *params: ActionParam) -> None:
    """Make an action name known to the document reader.

    Shorthand for `ActionRegistry.register`.
    """
    ActionRegistry.register(name, *params)


def register_builtin_actions() -> None:
    """Register the built-in action vocabulary (idempotent)."""
    for name, params in _BUILTIN_ACTIONS:
        ActionRegistry.register(name, *params)


register_builtin_actions()
