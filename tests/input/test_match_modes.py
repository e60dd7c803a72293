# topmark:header:start
#
#   project      : TermConf
#   file         : test_match_modes.py
#   file_relpath : tests/input/test_match_modes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for terminal match modes and tri-state mode filters."""

from __future__ import annotations

import itertools

import pytest
from hypothesis import given

from tests.conftest import parametrize
from tests.strategies_termconf import s_match_modes, s_mode_filters
from termconf.input.match_modes import (
    ANY_MODE,
    MODE_FLAGS,
    MatchMode,
    MatchModeFilter,
    TriState,
    matches,
    parse_match_modes,
)


def test_any_filter_matches_every_flag_combination() -> None:
    """The all-Any filter accepts each of the 2^7 runtime flag combinations."""
    for picks in itertools.product((False, True), repeat=len(MODE_FLAGS)):
        actual = MatchMode.NONE
        for flag, on in zip(MODE_FLAGS, picks):
            if on:
                actual |= flag
        assert matches(actual, ANY_MODE)


@given(actual=s_match_modes, mode_filter=s_mode_filters)
def test_matches_is_per_flag_conjunction(actual: MatchMode, mode_filter: MatchModeFilter) -> None:
    """A filter passes exactly when every Enabled flag is set and every Disabled flag clear."""
    expected: bool = all(
        (state is not TriState.ENABLED or flag in actual)
        and (state is not TriState.DISABLED or flag not in actual)
        for flag, state in zip(MODE_FLAGS, mode_filter.states)
    )
    assert matches(actual, mode_filter) is expected


def test_enabled_requires_flag_and_disabled_forbids_it() -> None:
    selecting = MatchModeFilter.from_states({MatchMode.SELECT: TriState.ENABLED})
    assert matches(MatchMode.SELECT, selecting)
    assert matches(MatchMode.SELECT | MatchMode.INSERT, selecting)
    assert not matches(MatchMode.NONE, selecting)

    not_alt = MatchModeFilter.from_states({MatchMode.ALTERNATE_SCREEN: TriState.DISABLED})
    assert matches(MatchMode.NONE, not_alt)
    assert not matches(MatchMode.ALTERNATE_SCREEN, not_alt)


def test_parse_filter_syntax() -> None:
    mode_filter: MatchModeFilter = MatchModeFilter.parse("Alt | ~select")
    assert mode_filter.state(MatchMode.ALTERNATE_SCREEN) is TriState.ENABLED
    assert mode_filter.state(MatchMode.SELECT) is TriState.DISABLED
    assert mode_filter.state(MatchMode.INSERT) is TriState.ANY
    assert str(mode_filter) == "Alt|~Select"


def test_parse_empty_filter_is_any() -> None:
    assert MatchModeFilter.parse("") == ANY_MODE
    assert ANY_MODE.is_any
    assert str(ANY_MODE) == ""


@given(mode_filter=s_mode_filters)
def test_filter_text_form_parses_back(mode_filter: MatchModeFilter) -> None:
    assert MatchModeFilter.parse(str(mode_filter)) == mode_filter


@parametrize("text", ["Bogus", "Alt|Alt", "~"])
def test_parse_filter_rejects_bad_input(text: str) -> None:
    with pytest.raises(ValueError):
        MatchModeFilter.parse(text)


def test_filter_requires_one_state_per_flag() -> None:
    with pytest.raises(ValueError, match="needs 7 states"):
        MatchModeFilter((TriState.ANY,))


def test_with_state_replaces_one_slot() -> None:
    mode_filter: MatchModeFilter = ANY_MODE.with_state(MatchMode.SEARCH, TriState.ENABLED)
    assert mode_filter.state(MatchMode.SEARCH) is TriState.ENABLED
    assert sum(s is not TriState.ANY for s in mode_filter.states) == 1


def test_parse_match_modes_accepts_both_separators() -> None:
    assert parse_match_modes("Alt|Select") == MatchMode.ALTERNATE_SCREEN | MatchMode.SELECT
    assert parse_match_modes("appcursor, insert") == MatchMode.APP_CURSOR | MatchMode.INSERT
    assert parse_match_modes("") == MatchMode.NONE


def test_parse_match_modes_rejects_unknown_flag() -> None:
    with pytest.raises(ValueError, match="Unknown match mode"):
        parse_match_modes("Alt|Nope")


def test_flag_tokens() -> None:
    assert MatchMode.ALTERNATE_SCREEN.token == "Alt"
    assert [f.token for f in MODE_FLAGS] == [
        "Alt",
        "AppCursor",
        "AppKeypad",
        "Select",
        "Insert",
        "Search",
        "Trace",
    ]
