# topmark:header:start
#
#   project      : TermConf
#   file         : writer.py
#   file_relpath : src/termconf/config/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document writer: `Document` -> fully commented TOML text.

The output is a pure function of the document's values and the documentation
attached to each field, so it is stable and reproducible:

1. header comment;
2. global scalar settings, then global tables (``[images]``, ``[renderer]``);
3. ``[profiles.<name>]``: default profile first, then the others by name;
4. ``[color_schemes.<name>]`` by name;
5. ``[[input_mapping]]`` entries.

Within a table, scalar entries precede nested tables (a TOML requirement) and
each group keeps declaration order. Every entry is preceded by its documentation
as ``#`` comments, and every line written inside a nested table is indented by
one `INDENT` per nesting level.

Bindings:
    Built-in bindings are always loaded before document bindings and document
    entries can only extend them. The writer therefore lists the built-in table as
    comments and emits only the part of the binding table that the built-ins do
    not already contain, so that loading the rendered text reproduces the same
    table.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Final

import tomlkit

from termconf.config.codecs import describe_value
from termconf.config.entry import entries, field_default
from termconf.config.keys import Toml
from termconf.config.logging import get_logger
from termconf.config.model import Document
from termconf.constants import TERMCONF_VERSION
from termconf.input.defaults import default_bindings
from termconf.input.modifiers import format_modifiers
from termconf.input.triggers import Key, MouseButton

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from termconf.config.logging import TermconfLogger
    from termconf.input.actions import Action
    from termconf.input.bindings import Binding, BindingTable
    from termconf.input.match_modes import MatchModeFilter
    from termconf.input.modifiers import Modifier

logger: TermconfLogger = get_logger(__name__)

INDENT: Final[str] = "    "

__all__: list[str] = [
    "INDENT",
    "binding_fields",
    "describe_value",
    "extra_bindings",
    "format_key",
    "format_toml_value",
    "render_defaults",
    "render_document",
]

BindingSpec = tuple["MatchModeFilter", "Modifier", "Key | str | MouseButton", "Action"]


def format_key(key: str) -> str:
    """Return a TOML key, quoted when it is not a bare key."""
    return tomlkit.key(key).as_string()


def format_toml_value(value: Any) -> str:
    """Format a plain (encoded) value as inline TOML.

    Mappings become inline tables and lists become arrays; scalars are formatted
    by `tomlkit`.
    """
    if isinstance(value, dict):
        if not value:
            return "{}"
        pairs: str = ", ".join(
            f"{format_key(str(k))} = {format_toml_value(v)}" for k, v in value.items()
        )
        return "{ " + pairs + " }"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_toml_value(v) for v in value) + "]"
    return tomlkit.item(value).as_string()


def binding_fields(
    modes: MatchModeFilter,
    modifiers: Modifier,
    trigger: Key | str | MouseButton,
    action: Action,
) -> list[tuple[str, Any]]:
    """Return the ``[[input_mapping]]`` keys and values describing one binding."""
    fields: list[tuple[str, Any]] = []
    if modifiers:
        fields.append((Toml.KEY_MODS, format_modifiers(modifiers)))
    if isinstance(trigger, MouseButton):
        fields.append((Toml.KEY_MOUSE, trigger.value))
    elif isinstance(trigger, Key):
        fields.append((Toml.KEY_KEY, trigger.value))
    else:
        fields.append((Toml.KEY_KEY, trigger))
    if not modes.is_any:
        fields.append((Toml.KEY_MODE, str(modes)))
    fields.append((Toml.KEY_ACTION, action.name))
    fields.extend(action.params)
    return fields


def _iter_records(table: BindingTable) -> Iterator[tuple[Binding[Any], Sequence[Binding[Any]]]]:
    builtin: BindingTable = default_bindings()
    for record in table.keys:
        yield record, builtin.keys
    for record in table.chars:
        yield record, builtin.chars
    for record in table.mouse:
        yield record, builtin.mouse


def extra_bindings(table: BindingTable) -> Iterator[BindingSpec]:
    """Yield the bindings of ``table`` that the built-in table does not contain.

    For a record that extends a built-in record only the extra actions are
    yielded, in order.
    """
    for record, base in _iter_records(table):
        skip: int = 0
        for known in base:
            if known.same_input(record.modes, record.modifiers, record.trigger):
                if record.actions[: len(known.actions)] == known.actions:
                    skip = len(known.actions)
                else:
                    logger.debug(
                        "Binding for %s does not extend its built-in record", record.trigger
                    )
                break
        for action in record.actions[skip:]:
            yield record.modes, record.modifiers, record.trigger, action


class _DocumentWriter:
    """Accumulates the lines of one rendering; one instance per call."""

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._depth: int = 0

    def _emit(self, text: str = "") -> None:
        self._lines.append(INDENT * self._depth + text if text else "")

    def _comment(self, text: str) -> None:
        for line in text.splitlines():
            self._emit(f"# {line}".rstrip())

    @contextmanager
    def _nested(self) -> Iterator[None]:
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    def _header(self, path: Sequence[str], *, array: bool = False) -> None:
        name: str = ".".join(format_key(p) for p in path)
        self._emit(f"[[{name}]]" if array else f"[{name}]")

    def write_struct(self, obj: object, path: tuple[str, ...]) -> None:
        """Write a struct's scalar entries, then its nested tables."""
        schema = entries(type(obj))
        for f, e in schema:
            if e.codec.is_table:
                continue
            self._comment(e.render_doc(field_default(f)))
            value: Any = e.codec.encode(getattr(obj, f.name))
            self._emit(f"{format_key(e.key)} = {format_toml_value(value)}")

        for f, e in schema:
            if not e.codec.is_table:
                continue
            sub_path: tuple[str, ...] = (*path, e.key)
            self._emit()
            self._comment(e.render_doc(field_default(f)))
            self._header(sub_path)
            with self._nested():
                self.write_struct(getattr(obj, f.name), sub_path)

    def write_bindings(self, table: BindingTable) -> None:
        self._emit()
        self._comment(
            "Input bindings. Each [[input_mapping]] entry binds one action to a key\n"
            "(named key or single character) or a mouse button, with exact modifiers\n"
            "(mods) and an optional mode filter such as \"Select|~Alt\".\n"
            "Entries for the same mods, key and mode add actions in file order.\n"
            "\n"
            "Built-in bindings (always loaded first):"
        )
        builtin: BindingTable = default_bindings()
        for record, _ in _iter_records(builtin):
            for action in record.actions:
                spec = binding_fields(record.modes, record.modifiers, record.trigger, action)
                self._comment(INDENT + format_toml_value(dict(spec)))

        for modes, modifiers, trigger, action in extra_bindings(table):
            self._emit()
            self._header((Toml.SECTION_INPUT_MAPPING,), array=True)
            with self._nested():
                for key, value in binding_fields(modes, modifiers, trigger, action):
                    self._emit(f"{format_key(key)} = {format_toml_value(value)}")

    def render(self, document: Document) -> str:
        self._comment(
            f"TermConf configuration (format of termconf {TERMCONF_VERSION}).\n"
            "All values below are documented; removing a key restores its default."
        )
        self._emit()
        self.write_struct(document.settings, ())

        self._emit()
        self._comment(
            "Profiles. Every profile starts as a copy of the default profile and\n"
            "only needs the keys it changes."
        )
        for name in document.profile_names():
            path: tuple[str, ...] = (Toml.SECTION_PROFILES, name)
            self._emit()
            self._header(path)
            with self._nested():
                self.write_struct(document.profiles[name], path)

        self._emit()
        self._comment("Color schemes, referenced by name from a profile's \"colors\".")
        for name in sorted(document.color_schemes):
            path = (Toml.SECTION_COLOR_SCHEMES, name)
            self._emit()
            self._header(path)
            with self._nested():
                self.write_struct(document.color_schemes[name], path)

        self.write_bindings(document.bindings)
        return "\n".join(self._lines) + "\n"


def render_document(document: Document) -> str:
    """Render a document as fully commented TOML.

    Args:
        document (Document): The document to render.

    Returns:
        str: TOML text that loads back into an equal document.
    """
    return _DocumentWriter().render(document)


def render_defaults() -> str:
    """Render the all-default document."""
    return render_document(Document.defaults())
