# topmark:header:start
#
#   project      : TermConf
#   file         : match_modes.py
#   file_relpath : src/termconf/input/match_modes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal match modes and tri-state mode filters.

The terminal reports its current state as a combination of `MatchMode` flags
(alternate screen active, application cursor keys, ...). A binding carries a
`MatchModeFilter` that assigns each flag one of three states:

* `TriState.ENABLED`: the flag must be set,
* `TriState.DISABLED`: the flag must be clear,
* `TriState.ANY`: the flag is not looked at.

Filters are stored as a fixed-size tuple indexed by flag position rather than as a
pair of bitmasks, so "don't care" and "must be clear" can never be confused.

External representation:
    ``mode = "Alt|~Select"`` enables ``Alt`` (alternate screen) and requires
    ``Select`` to be inactive; unnamed flags are ``Any``. The empty string (or a
    missing ``mode`` key) is the all-``Any`` filter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping


class MatchMode(Flag):
    """Runtime terminal-state flags consulted by binding filters."""

    NONE = 0
    ALTERNATE_SCREEN = 1
    APP_CURSOR = 2
    APP_KEYPAD = 4
    SELECT = 8
    INSERT = 16
    SEARCH = 32
    TRACE = 64

    @property
    def token(self) -> str:
        """Return the external name of a single flag."""
        return MODE_TOKENS[self]


class TriState(Enum):
    """Per-flag filter state."""

    ENABLED = "enabled"
    DISABLED = "disabled"
    ANY = "any"


# Filter slot order; also the rendering order of filters.
MODE_FLAGS: Final[tuple[MatchMode, ...]] = (
    MatchMode.ALTERNATE_SCREEN,
    MatchMode.APP_CURSOR,
    MatchMode.APP_KEYPAD,
    MatchMode.SELECT,
    MatchMode.INSERT,
    MatchMode.SEARCH,
    MatchMode.TRACE,
)

MODE_TOKENS: Final[dict[MatchMode, str]] = {
    MatchMode.ALTERNATE_SCREEN: "Alt",
    MatchMode.APP_CURSOR: "AppCursor",
    MatchMode.APP_KEYPAD: "AppKeypad",
    MatchMode.SELECT: "Select",
    MatchMode.INSERT: "Insert",
    MatchMode.SEARCH: "Search",
    MatchMode.TRACE: "Trace",
}

_MODES_BY_TOKEN: Final[dict[str, MatchMode]] = {
    token.lower(): flag for flag, token in MODE_TOKENS.items()
}


@dataclass(frozen=True)
class MatchModeFilter:
    """Tri-state filter over all match-mode flags.

    Attributes:
        states (tuple[TriState, ...]): One state per flag, in `MODE_FLAGS` order.
    """

    states: tuple[TriState, ...] = (TriState.ANY,) * len(MODE_FLAGS)

    def __post_init__(self) -> None:
        if len(self.states) != len(MODE_FLAGS):
            raise ValueError(
                f"MatchModeFilter needs {len(MODE_FLAGS)} states, got {len(self.states)}"
            )

    @classmethod
    def from_states(cls, states: Mapping[MatchMode, TriState]) -> MatchModeFilter:
        """Build a filter from a partial mapping; unmentioned flags are ``Any``."""
        return cls(tuple(states.get(flag, TriState.ANY) for flag in MODE_FLAGS))

    def state(self, flag: MatchMode) -> TriState:
        """Return the filter state for a single flag."""
        return self.states[MODE_FLAGS.index(flag)]

    def with_state(self, flag: MatchMode, state: TriState) -> MatchModeFilter:
        """Return a copy of this filter with one flag's state replaced."""
        index: int = MODE_FLAGS.index(flag)
        return MatchModeFilter(self.states[:index] + (state,) + self.states[index + 1 :])

    @property
    def is_any(self) -> bool:
        """True when every flag is ``Any``."""
        return all(s is TriState.ANY for s in self.states)

    @classmethod
    def parse(cls, text: str) -> MatchModeFilter:
        """Parse the ``"Alt|~Select"`` filter syntax.

        Raises:
            ValueError: On an unknown flag name or a flag named twice.
        """
        states: dict[MatchMode, TriState] = {}
        for raw_part in text.split("|"):
            part: str = raw_part.strip()
            if not part:
                continue
            state = TriState.ENABLED
            if part.startswith("~"):
                state = TriState.DISABLED
                part = part[1:].strip()
            flag: MatchMode | None = _MODES_BY_TOKEN.get(part.lower())
            if flag is None:
                allowed: str = ", ".join(MODE_TOKENS.values())
                raise ValueError(f"Unknown match mode {part!r} (allowed: {allowed})")
            if flag in states:
                raise ValueError(f"Match mode {part!r} specified more than once")
            states[flag] = state
        return cls.from_states(states)

    def __str__(self) -> str:
        parts: list[str] = []
        for flag, state in zip(MODE_FLAGS, self.states):
            if state is TriState.ENABLED:
                parts.append(MODE_TOKENS[flag])
            elif state is TriState.DISABLED:
                parts.append("~" + MODE_TOKENS[flag])
        return "|".join(parts)


ANY_MODE: Final[MatchModeFilter] = MatchModeFilter()


def matches(actual: MatchMode, mode_filter: MatchModeFilter) -> bool:
    """Return True if the runtime flags satisfy the filter.

    Enabled requires the flag set, Disabled requires it clear, Any always passes.

    Args:
        actual (MatchMode): Currently active terminal flags.
        mode_filter (MatchModeFilter): The binding's filter.

    Returns:
        bool: True only if all per-flag checks pass.
    """
    for flag, state in zip(MODE_FLAGS, mode_filter.states):
        if state is TriState.ENABLED and flag not in actual:
            return False
        if state is TriState.DISABLED and flag in actual:
            return False
    return True


def parse_match_modes(text: str) -> MatchMode:
    """Parse a set of active runtime flags, e.g. ``"Alt|Select"`` or ``"Alt,Select"``.

    Raises:
        ValueError: On an unknown flag name.
    """
    flags = MatchMode.NONE
    for raw_part in text.replace(",", "|").split("|"):
        part: str = raw_part.strip()
        if not part:
            continue
        flag: MatchMode | None = _MODES_BY_TOKEN.get(part.lower())
        if flag is None:
            allowed: str = ", ".join(MODE_TOKENS.values())
            raise ValueError(f"Unknown match mode {part!r} (allowed: {allowed})")
        flags |= flag
    return flags
