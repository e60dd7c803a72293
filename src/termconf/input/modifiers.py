# topmark:header:start
#
#   project      : TermConf
#   file         : modifiers.py
#   file_relpath : src/termconf/input/modifiers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keyboard modifier sets.

A modifier set is an `enum.Flag` combination of `Modifier` members. Bindings compare
modifier sets by *exact equality*: a binding for ``Control`` never fires for
``Control+Shift``.

External representation:
    Modifier sets are written as a comma-joined list of modifier names
    (``"Control,Shift"``) or as a TOML array (``["Control", "Shift"]``).
    Formatting always emits the names in the fixed enumeration order
    (Shift, Alt, Control, Meta) so rendered documents are stable.
"""

from __future__ import annotations

from enum import Flag
from typing import Final


class Modifier(Flag):
    """Active keyboard modifiers, in their fixed enumeration order."""

    NONE = 0
    SHIFT = 1
    ALT = 2
    CONTROL = 4
    META = 8

    @property
    def token(self) -> str:
        """Return the external (configuration) name of a single modifier."""
        return _MODIFIER_TOKENS[self]


# Ordered: this is the rendering order of modifier sets.
_MODIFIER_TOKENS: Final[dict[Modifier, str]] = {
    Modifier.SHIFT: "Shift",
    Modifier.ALT: "Alt",
    Modifier.CONTROL: "Control",
    Modifier.META: "Meta",
}

# Accepted spellings on input (case-insensitive).
_MODIFIER_ALIASES: Final[dict[str, Modifier]] = {
    "shift": Modifier.SHIFT,
    "alt": Modifier.ALT,
    "option": Modifier.ALT,
    "control": Modifier.CONTROL,
    "ctrl": Modifier.CONTROL,
    "meta": Modifier.META,
    "super": Modifier.META,
}


def format_modifiers(mods: Modifier) -> str:
    """Render a modifier set as a comma-joined list in fixed enumeration order.

    Args:
        mods (Modifier): The modifier set.

    Returns:
        str: e.g. ``"Alt,Control"``; the empty string for no modifiers.
    """
    return ",".join(token for flag, token in _MODIFIER_TOKENS.items() if flag in mods)


def parse_modifier(name: str) -> Modifier:
    """Parse a single modifier name.

    Raises:
        ValueError: If the name is not a known modifier.
    """
    try:
        return _MODIFIER_ALIASES[name.strip().lower()]
    except KeyError:
        allowed: str = ", ".join(_MODIFIER_TOKENS.values())
        raise ValueError(f"Unknown modifier {name!r} (allowed: {allowed})") from None


def parse_modifiers(value: object) -> Modifier:
    """Parse a modifier set from its external representation.

    Accepts a comma-joined string (``"Control,Shift"``, empty string for none) or a
    list of modifier names. Duplicates are harmless.

    Args:
        value (object): Raw value from the configuration document.

    Returns:
        Modifier: The combined modifier set.

    Raises:
        ValueError: If an element is not a known modifier name.
        TypeError: If the value is neither a string nor a list of strings.
    """
    names: list[str]
    if isinstance(value, str):
        names = [part for part in value.split(",") if part.strip()]
    elif isinstance(value, list):
        names = []
        for item in value:
            if not isinstance(item, str):
                raise TypeError(f"Expected modifier name, got {type(item).__name__}: {item!r}")
            names.append(item)
    else:
        raise TypeError(f"Expected modifier list, got {type(value).__name__}: {value!r}")

    mods = Modifier.NONE
    for name in names:
        mods |= parse_modifier(name)
    return mods
