# topmark:header:start
#
#   project      : TermConf
#   file         : test_bindings.py
#   file_relpath : tests/input/test_bindings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for binding accumulation and resolution."""

from __future__ import annotations

from hypothesis import given

from tests.strategies_termconf import s_modifiers
from termconf.input.actions import Action
from termconf.input.bindings import BindingTable, MutableBindingTable
from termconf.input.match_modes import ANY_MODE, MatchMode, MatchModeFilter, TriState
from termconf.input.modifiers import Modifier
from termconf.input.triggers import Key, MouseButton

A1 = Action("ScrollUp")
A2 = Action("ScrollDown")
A3 = Action("Quit")

SELECTING = MatchModeFilter.from_states({MatchMode.SELECT: TriState.ENABLED})


def test_same_input_accumulates_into_one_record() -> None:
    table = MutableBindingTable()
    table.add_key(ANY_MODE, Modifier.CONTROL, Key.ENTER, A1)
    table.add_key(ANY_MODE, Modifier.CONTROL, Key.ENTER, A2)
    frozen: BindingTable = table.freeze()

    assert len(frozen.keys) == 1
    assert frozen.resolve_key(Modifier.CONTROL, Key.ENTER, MatchMode.NONE) == (A1, A2)


def test_different_filters_are_different_records() -> None:
    table = MutableBindingTable()
    table.add_char(SELECTING, Modifier.NONE, "c", A1)
    table.add_char(ANY_MODE, Modifier.NONE, "c", A2)
    frozen: BindingTable = table.freeze()

    assert len(frozen.chars) == 2
    # first matching record in stored order wins
    assert frozen.resolve_char(Modifier.NONE, "c", MatchMode.SELECT) == (A1,)
    assert frozen.resolve_char(Modifier.NONE, "c", MatchMode.NONE) == (A2,)


def test_miss_returns_none() -> None:
    table = MutableBindingTable()
    table.add_mouse(ANY_MODE, Modifier.NONE, MouseButton.MIDDLE, A3)
    frozen: BindingTable = table.freeze()

    assert frozen.resolve_mouse(Modifier.NONE, MouseButton.LEFT, MatchMode.NONE) is None
    assert frozen.resolve_key(Modifier.NONE, Key.ENTER, MatchMode.NONE) is None


@given(query=s_modifiers)
def test_modifiers_must_match_exactly(query: Modifier) -> None:
    table = MutableBindingTable()
    table.add_key(ANY_MODE, Modifier.CONTROL, Key.HOME, A1)
    frozen: BindingTable = table.freeze()

    result = frozen.resolve_key(query, Key.HOME, MatchMode.NONE)
    if query == Modifier.CONTROL:
        assert result == (A1,)
    else:
        assert result is None


def test_add_dispatches_on_trigger_kind() -> None:
    table = MutableBindingTable()
    table.add(ANY_MODE, Modifier.NONE, Key.TAB, A1)
    table.add(ANY_MODE, Modifier.NONE, "x", A2)
    table.add(ANY_MODE, Modifier.NONE, MouseButton.RIGHT, A3)
    frozen: BindingTable = table.freeze()

    assert [b.trigger for b in frozen.keys] == [Key.TAB]
    assert [b.trigger for b in frozen.chars] == ["x"]
    assert [b.trigger for b in frozen.mouse] == [MouseButton.RIGHT]
    assert len(frozen) == 3


def test_thaw_copies_action_lists() -> None:
    table = MutableBindingTable()
    table.add_key(ANY_MODE, Modifier.NONE, Key.F1, A1)
    frozen: BindingTable = table.freeze()

    thawed: MutableBindingTable = frozen.thaw()
    thawed.add_key(ANY_MODE, Modifier.NONE, Key.F1, A2)

    assert frozen.resolve_key(Modifier.NONE, Key.F1, MatchMode.NONE) == (A1,)
    assert thawed.freeze().resolve_key(Modifier.NONE, Key.F1, MatchMode.NONE) == (A1, A2)
