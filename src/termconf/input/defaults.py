# topmark:header:start
#
#   project      : TermConf
#   file         : defaults.py
#   file_relpath : src/termconf/input/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in input bindings.

These are loaded before any document bindings; document entries for the same
*(filter, modifiers, trigger)* triple extend the built-in action list rather than
replacing it.
"""

from __future__ import annotations

from termconf.input.actions import Action, make_action
from termconf.input.bindings import BindingTable, MutableBindingTable
from termconf.input.match_modes import ANY_MODE, MatchMode, MatchModeFilter, TriState
from termconf.input.modifiers import Modifier
from termconf.input.triggers import Key, MouseButton

_NONE = Modifier.NONE
_SHIFT = Modifier.SHIFT
_ALT = Modifier.ALT
_CTRL = Modifier.CONTROL
_CTRL_SHIFT = Modifier.CONTROL | Modifier.SHIFT

_SELECTING = MatchModeFilter.from_states({MatchMode.SELECT: TriState.ENABLED})
_NOT_ALT_SCREEN = MatchModeFilter.from_states({MatchMode.ALTERNATE_SCREEN: TriState.DISABLED})


def _a(name: str, **params: str | int | bool) -> Action:
    return make_action(name, params)


def default_bindings() -> BindingTable:
    """Return the built-in binding table (a fresh, frozen instance)."""
    table = MutableBindingTable()

    # Named keys
    table.add_key(ANY_MODE, _ALT, Key.ENTER, _a("ToggleFullscreen"))
    table.add_key(ANY_MODE, _SHIFT, Key.PAGE_UP, _a("ScrollPageUp"))
    table.add_key(ANY_MODE, _SHIFT, Key.PAGE_DOWN, _a("ScrollPageDown"))
    table.add_key(ANY_MODE, _SHIFT, Key.UP_ARROW, _a("ScrollOneUp"))
    table.add_key(ANY_MODE, _SHIFT, Key.DOWN_ARROW, _a("ScrollOneDown"))
    table.add_key(ANY_MODE, _CTRL, Key.HOME, _a("ScrollToTop"))
    table.add_key(ANY_MODE, _CTRL, Key.END, _a("ScrollToBottom"))
    table.add_key(ANY_MODE, _CTRL_SHIFT, Key.LEFT_ARROW, _a("SwitchToTabLeft"))
    table.add_key(ANY_MODE, _CTRL_SHIFT, Key.RIGHT_ARROW, _a("SwitchToTabRight"))
    table.add_key(ANY_MODE, _CTRL_SHIFT, Key.F5, _a("ReloadConfig"))
    table.add_key(_SELECTING, _NONE, Key.ESCAPE, _a("CancelSelection"))

    # Characters
    table.add_char(ANY_MODE, _CTRL_SHIFT, "=", _a("IncreaseFontSize"))
    table.add_char(ANY_MODE, _CTRL_SHIFT, "-", _a("DecreaseFontSize"))
    table.add_char(ANY_MODE, _CTRL, "0", _a("ResetFontSize"))
    table.add_char(_SELECTING, _CTRL_SHIFT, "C", _a("CopySelection"))
    table.add_char(_SELECTING, _CTRL_SHIFT, "C", _a("CancelSelection"))
    table.add_char(ANY_MODE, _CTRL_SHIFT, "V", _a("PasteClipboard"))
    table.add_char(ANY_MODE, _CTRL_SHIFT, "F", _a("SearchReverse"))
    table.add_char(ANY_MODE, _CTRL_SHIFT, "N", _a("NewTerminal"))
    table.add_char(ANY_MODE, _CTRL_SHIFT, "T", _a("CreateNewTab"))
    table.add_char(ANY_MODE, _CTRL_SHIFT, "W", _a("CloseTab"))
    table.add_char(ANY_MODE, _CTRL_SHIFT, "Q", _a("Quit"))
    table.add_char(ANY_MODE, _CTRL_SHIFT, "O", _a("OpenConfiguration"))
    table.add_char(ANY_MODE, _CTRL_SHIFT, " ", _a("ViNormalMode"))
    table.add_char(ANY_MODE, _CTRL_SHIFT, "K", _a("ClearHistoryAndReset"))

    # Mouse
    table.add_mouse(ANY_MODE, _CTRL, MouseButton.WHEEL_UP, _a("IncreaseFontSize"))
    table.add_mouse(ANY_MODE, _CTRL, MouseButton.WHEEL_DOWN, _a("DecreaseFontSize"))
    table.add_mouse(ANY_MODE, _ALT, MouseButton.WHEEL_UP, _a("IncreaseOpacity"))
    table.add_mouse(ANY_MODE, _ALT, MouseButton.WHEEL_DOWN, _a("DecreaseOpacity"))
    table.add_mouse(_NOT_ALT_SCREEN, _NONE, MouseButton.WHEEL_UP, _a("ScrollUp"))
    table.add_mouse(_NOT_ALT_SCREEN, _NONE, MouseButton.WHEEL_DOWN, _a("ScrollDown"))
    table.add_mouse(ANY_MODE, _SHIFT, MouseButton.WHEEL_UP, _a("ScrollPageUp"))
    table.add_mouse(ANY_MODE, _SHIFT, MouseButton.WHEEL_DOWN, _a("ScrollPageDown"))
    table.add_mouse(ANY_MODE, _NONE, MouseButton.MIDDLE, _a("PasteSelection"))
    table.add_mouse(ANY_MODE, _CTRL, MouseButton.LEFT, _a("FollowHyperlink"))

    return table.freeze()
