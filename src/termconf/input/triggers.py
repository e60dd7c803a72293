# topmark:header:start
#
#   project      : TermConf
#   file         : triggers.py
#   file_relpath : src/termconf/input/triggers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Binding triggers: named keys, literal characters and mouse buttons.

Each trigger kind has its own ordered binding list (see
`termconf.input.bindings.BindingTable`). In the configuration document a binding
names either a ``key`` or a ``mouse`` button; a ``key`` value that matches a named
key (case-insensitive) binds that key, any other single character binds the
character itself.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class Key(Enum):
    """Named (non-printable) keys."""

    ENTER = "Enter"
    ESCAPE = "Escape"
    TAB = "Tab"
    BACKSPACE = "Backspace"
    UP_ARROW = "UpArrow"
    DOWN_ARROW = "DownArrow"
    LEFT_ARROW = "LeftArrow"
    RIGHT_ARROW = "RightArrow"
    INSERT = "Insert"
    DELETE = "Delete"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"
    F13 = "F13"
    F14 = "F14"
    F15 = "F15"
    F16 = "F16"
    F17 = "F17"
    F18 = "F18"
    F19 = "F19"
    F20 = "F20"
    NUMPAD_ENTER = "Numpad_Enter"
    NUMPAD_ADD = "Numpad_Add"
    NUMPAD_SUBTRACT = "Numpad_Subtract"
    NUMPAD_MULTIPLY = "Numpad_Multiply"
    NUMPAD_DIVIDE = "Numpad_Divide"
    NUMPAD_DECIMAL = "Numpad_Decimal"
    NUMPAD_0 = "Numpad_0"
    NUMPAD_1 = "Numpad_1"
    NUMPAD_2 = "Numpad_2"
    NUMPAD_3 = "Numpad_3"
    NUMPAD_4 = "Numpad_4"
    NUMPAD_5 = "Numpad_5"
    NUMPAD_6 = "Numpad_6"
    NUMPAD_7 = "Numpad_7"
    NUMPAD_8 = "Numpad_8"
    NUMPAD_9 = "Numpad_9"

    def __str__(self) -> str:
        return self.value


class MouseButton(Enum):
    """Mouse buttons and wheel directions."""

    LEFT = "Left"
    MIDDLE = "Middle"
    RIGHT = "Right"
    WHEEL_UP = "WheelUp"
    WHEEL_DOWN = "WheelDown"
    WHEEL_LEFT = "WheelLeft"
    WHEEL_RIGHT = "WheelRight"

    def __str__(self) -> str:
        return self.value


_KEYS_BY_NAME: Final[dict[str, Key]] = {k.value.lower(): k for k in Key}
_BUTTONS_BY_NAME: Final[dict[str, MouseButton]] = {b.value.lower(): b for b in MouseButton}


def parse_key_trigger(text: str) -> Key | str:
    """Parse the ``key`` of a binding entry into a named key or a character.

    Args:
        text (str): The raw ``key`` value.

    Returns:
        Key | str: The named key, or the single character.

    Raises:
        ValueError: If the value is neither a named key nor a single character.
    """
    key: Key | None = _KEYS_BY_NAME.get(text.lower())
    if key is not None:
        return key
    if len(text) == 1:
        return text
    raise ValueError(f"Unknown key {text!r}: expected a named key or a single character")


def parse_mouse_button(text: str) -> MouseButton:
    """Parse the ``mouse`` of a binding entry.

    Raises:
        ValueError: If the value is not a known mouse button.
    """
    button: MouseButton | None = _BUTTONS_BY_NAME.get(text.lower())
    if button is None:
        allowed: str = ", ".join(b.value for b in MouseButton)
        raise ValueError(f"Unknown mouse button {text!r} (allowed: {allowed})")
    return button
