# topmark:header:start
#
#   project      : TermConf
#   file         : bindings.py
#   file_relpath : src/termconf/input/bindings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Binding tables and the binding resolver.

A binding associates *(mode filter, exact modifier set, trigger)* with an ordered
list of actions. There is one ordered list per trigger kind (named keys, literal
characters, mouse buttons).

Accumulation:
    `MutableBindingTable.add` never creates two records for the same
    *(filter, modifiers, trigger)* triple: a second definition appends its action to
    the existing record. Because documents are processed top to bottom, file order
    decides both the action order of a trigger and the priority between records.

Resolution:
    `resolve` scans a list in stored order and returns the actions of the first
    record whose modifier set *equals* the query, whose trigger equals the query and
    whose filter matches the runtime flags. A miss returns ``None`` (no action);
    this is a normal outcome, not an error.

Immutability:
    The reader builds a `MutableBindingTable` and freezes it into a `BindingTable`
    (tuples only) before the owning document is published, so resolution can run
    without locking.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from termconf.config.logging import get_logger
from termconf.input.match_modes import matches
from termconf.input.triggers import Key, MouseButton

if TYPE_CHECKING:
    from collections.abc import Sequence

    from termconf.config.logging import TermconfLogger
    from termconf.input.actions import Action
    from termconf.input.match_modes import MatchMode, MatchModeFilter
    from termconf.input.modifiers import Modifier

logger: TermconfLogger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Binding(Generic[T]):
    """A frozen binding record.

    Attributes:
        modes (MatchModeFilter): Terminal-mode filter.
        modifiers (Modifier): Exact modifier set.
        trigger (T): Named key, character or mouse button.
        actions (tuple[Action, ...]): Actions to execute, in order.
    """

    modes: MatchModeFilter
    modifiers: Modifier
    trigger: T
    actions: tuple[Action, ...]

    def same_input(self, modes: MatchModeFilter, modifiers: Modifier, trigger: object) -> bool:
        """Return True if this record has the given (filter, modifiers, trigger) triple."""
        return self.modes == modes and self.modifiers == modifiers and self.trigger == trigger


@dataclass
class MutableBinding(Generic[T]):
    """Mutable binding record used while accumulating a table."""

    modes: MatchModeFilter
    modifiers: Modifier
    trigger: T
    actions: list[Action] = field(default_factory=lambda: [])

    def same_input(self, modes: MatchModeFilter, modifiers: Modifier, trigger: object) -> bool:
        """Return True if this record has the given (filter, modifiers, trigger) triple."""
        return self.modes == modes and self.modifiers == modifiers and self.trigger == trigger

    def freeze(self) -> Binding[T]:
        """Return the frozen record."""
        return Binding(self.modes, self.modifiers, self.trigger, tuple(self.actions))


def accumulate(
    bindings: list[MutableBinding[T]],
    modes: MatchModeFilter,
    modifiers: Modifier,
    trigger: T,
    action: Action,
) -> MutableBinding[T]:
    """Add one action to a binding list, merging identical triples.

    Args:
        bindings (list[MutableBinding[T]]): The list to update in place.
        modes (MatchModeFilter): Mode filter of the new definition.
        modifiers (Modifier): Modifier set of the new definition.
        trigger (T): Trigger of the new definition.
        action (Action): Action to bind.

    Returns:
        MutableBinding[T]: The record the action was added to.
    """
    for record in bindings:
        if record.same_input(modes, modifiers, trigger):
            record.actions.append(action)
            logger.trace("Appended %s to existing binding for %s", action, trigger)
            return record
    record = MutableBinding(modes, modifiers, trigger, [action])
    bindings.append(record)
    logger.trace("Added binding %s+%s [%s] -> %s", modifiers, trigger, modes, action)
    return record


def resolve(
    bindings: Sequence[Binding[T]],
    modifiers: Modifier,
    trigger: T,
    flags: MatchMode,
) -> tuple[Action, ...] | None:
    """Return the actions bound to an input event, or None when nothing matches.

    Args:
        bindings (Sequence[Binding[T]]): Binding list in priority (file) order.
        modifiers (Modifier): Currently active modifiers (compared for equality).
        trigger (T): The key, character or mouse button of the event.
        flags (MatchMode): Currently active terminal mode flags.

    Returns:
        tuple[Action, ...] | None: The first matching record's actions, or None.
    """
    for record in bindings:
        if (
            record.modifiers == modifiers
            and record.trigger == trigger
            and matches(flags, record.modes)
        ):
            return record.actions
    return None


@dataclass(frozen=True)
class BindingTable:
    """Immutable binding lists, one per trigger kind.

    Attributes:
        keys (tuple[Binding[Key], ...]): Named-key bindings.
        chars (tuple[Binding[str], ...]): Character bindings.
        mouse (tuple[Binding[MouseButton], ...]): Mouse button bindings.
    """

    keys: tuple[Binding[Key], ...] = ()
    chars: tuple[Binding[str], ...] = ()
    mouse: tuple[Binding[MouseButton], ...] = ()

    def resolve_key(
        self, modifiers: Modifier, key: Key, flags: MatchMode
    ) -> tuple[Action, ...] | None:
        """Resolve a named-key event."""
        return resolve(self.keys, modifiers, key, flags)

    def resolve_char(
        self, modifiers: Modifier, char: str, flags: MatchMode
    ) -> tuple[Action, ...] | None:
        """Resolve a character event."""
        return resolve(self.chars, modifiers, char, flags)

    def resolve_mouse(
        self, modifiers: Modifier, button: MouseButton, flags: MatchMode
    ) -> tuple[Action, ...] | None:
        """Resolve a mouse button event."""
        return resolve(self.mouse, modifiers, button, flags)

    def __len__(self) -> int:
        return len(self.keys) + len(self.chars) + len(self.mouse)

    def thaw(self) -> MutableBindingTable:
        """Return a mutable copy of this table.

        Symmetry:
            Mirrors `MutableBindingTable.freeze`.
        """
        return MutableBindingTable(
            keys=[
                MutableBinding(b.modes, b.modifiers, b.trigger, list(b.actions)) for b in self.keys
            ],
            chars=[
                MutableBinding(b.modes, b.modifiers, b.trigger, list(b.actions)) for b in self.chars
            ],
            mouse=[
                MutableBinding(b.modes, b.modifiers, b.trigger, list(b.actions)) for b in self.mouse
            ],
        )


@dataclass
class MutableBindingTable:
    """Mutable binding lists used while loading a document."""

    keys: list[MutableBinding[Key]] = field(default_factory=lambda: [])
    chars: list[MutableBinding[str]] = field(default_factory=lambda: [])
    mouse: list[MutableBinding[MouseButton]] = field(default_factory=lambda: [])

    def add_key(
        self, modes: MatchModeFilter, modifiers: Modifier, key: Key, action: Action
    ) -> None:
        """Accumulate a named-key binding."""
        accumulate(self.keys, modes, modifiers, key, action)

    def add_char(
        self, modes: MatchModeFilter, modifiers: Modifier, char: str, action: Action
    ) -> None:
        """Accumulate a character binding."""
        accumulate(self.chars, modes, modifiers, char, action)

    def add_mouse(
        self, modes: MatchModeFilter, modifiers: Modifier, button: MouseButton, action: Action
    ) -> None:
        """Accumulate a mouse binding."""
        accumulate(self.mouse, modes, modifiers, button, action)

    def freeze(self) -> BindingTable:
        """Freeze into an immutable `BindingTable`."""
        return BindingTable(
            keys=tuple(b.freeze() for b in self.keys),
            chars=tuple(b.freeze() for b in self.chars),
            mouse=tuple(b.freeze() for b in self.mouse),
        )

    def add(
        self,
        modes: MatchModeFilter,
        modifiers: Modifier,
        trigger: Key | str | MouseButton,
        action: Action,
    ) -> None:
        """Accumulate a binding into the list matching the trigger kind."""
        if isinstance(trigger, Key):
            self.add_key(modes, modifiers, trigger, action)
        elif isinstance(trigger, MouseButton):
            self.add_mouse(modes, modifiers, trigger, action)
        else:
            self.add_char(modes, modifiers, trigger, action)
