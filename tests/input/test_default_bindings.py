# topmark:header:start
#
#   project      : TermConf
#   file         : test_default_bindings.py
#   file_relpath : tests/input/test_default_bindings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the built-in binding table."""

from __future__ import annotations

from termconf.input.actions import Action
from termconf.input.bindings import BindingTable
from termconf.input.defaults import default_bindings
from termconf.input.match_modes import MatchMode
from termconf.input.modifiers import Modifier
from termconf.input.triggers import Key, MouseButton

CTRL_SHIFT = Modifier.CONTROL | Modifier.SHIFT


def test_alt_enter_toggles_fullscreen() -> None:
    table: BindingTable = default_bindings()
    assert table.resolve_key(Modifier.ALT, Key.ENTER, MatchMode.NONE) == (
        Action("ToggleFullscreen"),
    )


def test_copy_only_while_selecting() -> None:
    table: BindingTable = default_bindings()
    assert table.resolve_char(CTRL_SHIFT, "C", MatchMode.SELECT) == (
        Action("CopySelection"),
        Action("CancelSelection"),
    )
    assert table.resolve_char(CTRL_SHIFT, "C", MatchMode.NONE) is None


def test_wheel_scrolls_only_outside_alternate_screen() -> None:
    table: BindingTable = default_bindings()
    assert table.resolve_mouse(Modifier.NONE, MouseButton.WHEEL_UP, MatchMode.NONE) == (
        Action("ScrollUp"),
    )
    assert (
        table.resolve_mouse(Modifier.NONE, MouseButton.WHEEL_UP, MatchMode.ALTERNATE_SCREEN)
        is None
    )


def test_default_bindings_are_fresh_and_equal() -> None:
    assert default_bindings() == default_bindings()
    assert default_bindings() is not default_bindings()
