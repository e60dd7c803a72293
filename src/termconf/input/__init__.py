# topmark:header:start
#
#   project      : TermConf
#   file         : __init__.py
#   file_relpath : src/termconf/input/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input-event resolution: modifiers, triggers, match modes, actions and bindings."""

from __future__ import annotations

from termconf.input.actions import (
    Action,
    ActionParam,
    ActionRegistry,
    make_action,
    register_action,
)
from termconf.input.bindings import (
    Binding,
    BindingTable,
    MutableBinding,
    MutableBindingTable,
    accumulate,
    resolve,
)
from termconf.input.defaults import default_bindings
from termconf.input.match_modes import (
    ANY_MODE,
    MatchMode,
    MatchModeFilter,
    TriState,
    matches,
    parse_match_modes,
)
from termconf.input.modifiers import Modifier, format_modifiers, parse_modifiers
from termconf.input.triggers import Key, MouseButton, parse_key_trigger, parse_mouse_button

__all__: list[str] = [
    "ANY_MODE",
    "Action",
    "ActionParam",
    "ActionRegistry",
    "Binding",
    "BindingTable",
    "Key",
    "MatchMode",
    "MatchModeFilter",
    "Modifier",
    "MouseButton",
    "MutableBinding",
    "MutableBindingTable",
    "TriState",
    "accumulate",
    "default_bindings",
    "format_modifiers",
    "make_action",
    "matches",
    "parse_key_trigger",
    "parse_match_modes",
    "parse_mouse_button",
    "parse_modifiers",
    "register_action",
    "resolve",
]
