# topmark:header:start
#
#   project      : TermConf
#   file         : reader.py
#   file_relpath : src/termconf/config/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document reader: TOML text -> `Document`.

The reader never raises for document content. Failures are recovered at the
smallest possible scope, logged, and recorded in the document's diagnostics:

- document level (unreadable file, invalid TOML): ERROR, all-default document;
- field level (wrong type, out of range, unknown color scheme): WARNING, the field
  keeps its previous value;
- binding entry level (bad modifiers, unknown key or action, missing parameter):
  WARNING, the entry is skipped.

Unknown keys are ignored with a DEBUG log.

Load order:
    1. global settings (top-level keys);
    2. ``[color_schemes.<name>]``, each on top of the built-in default palette;
    3. the default profile: built-in defaults plus its own table, if any;
    4. every other profile: a copy of the default profile plus its own table;
    5. ``[[input_mapping]]`` entries, in file order, accumulated on top of the
       built-in bindings.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import TYPE_CHECKING, Any

from termconf.config.codecs import LoadContext, apply_table
from termconf.config.colors import ColorPalette, SimpleColorConfig
from termconf.config.io.guards import is_any_list, is_toml_table
from termconf.config.io.loaders import parse_toml_text, read_toml_text
from termconf.config.keys import Toml
from termconf.config.logging import get_logger
from termconf.config.model import DEFAULT_PROFILE_NAME, GlobalSettings, MutableDocument
from termconf.config.profile import Profile
from termconf.core.diagnostics import DiagnosticLog
from termconf.input.actions import make_action
from termconf.input.match_modes import MatchModeFilter
from termconf.input.modifiers import parse_modifiers
from termconf.input.triggers import parse_key_trigger, parse_mouse_button

if TYPE_CHECKING:
    from termconf.config.io.types import TomlTable
    from termconf.config.logging import TermconfLogger
    from termconf.config.model import Document
    from termconf.input.actions import Action
    from termconf.input.modifiers import Modifier
    from termconf.input.triggers import Key, MouseButton

logger: TermconfLogger = get_logger(__name__)


def load_document_file(path: Path | str) -> Document:
    """Load a configuration document from a file.

    Args:
        path (Path | str): File to read (UTF-8 TOML).

    Returns:
        Document: The loaded document, or the all-default document when the file
        cannot be read or parsed.
    """
    path = Path(path)
    text, error = read_toml_text(path)
    if text is None:
        return _fallback(error or f"Cannot read {path}", str(path), DiagnosticLog())
    return load_document_text(text, source=str(path))


def load_document_text(text: str, *, source: str | None = None) -> Document:
    """Load a configuration document from TOML text.

    Args:
        text (str): TOML document text.
        source (str | None): Provenance recorded on the document.

    Returns:
        Document: The loaded document (all defaults when the text is not valid TOML).
    """
    diagnostics = DiagnosticLog()
    data, error = parse_toml_text(text)
    if error is not None:
        return _fallback(error, source, diagnostics)
    return load_document_data(data, source=source, diagnostics=diagnostics)


def load_document_data(
    data: TomlTable,
    *,
    source: str | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> Document:
    """Build a document from an already parsed TOML table.

    Args:
        data (TomlTable): Parsed top-level table.
        source (str | None): Provenance recorded on the document.
        diagnostics (DiagnosticLog | None): Log to append to (a new one if omitted).

    Returns:
        Document: The loaded document.
    """
    builder = MutableDocument(source=source, diagnostics=diagnostics or DiagnosticLog())
    ctx = LoadContext(builder.diagnostics, builder.color_schemes)

    _load_settings(builder, data, ctx)
    _load_color_schemes(builder, data.get(Toml.SECTION_COLOR_SCHEMES), ctx)
    _load_profiles(builder, data.get(Toml.SECTION_PROFILES), ctx)
    _load_bindings(builder, data.get(Toml.SECTION_INPUT_MAPPING))

    document: Document = builder.freeze()
    logger.info(
        "Loaded configuration from %s (%d diagnostic(s))",
        source or "<text>",
        len(document.diagnostics),
    )
    return document


def _fallback(reason: str, source: str | None, diagnostics: DiagnosticLog) -> Document:
    message: str = f"{reason}; using built-in defaults"
    logger.error("%s", message)
    diagnostics.add_error(message)
    builder = MutableDocument(source=source, diagnostics=diagnostics)
    builder.profiles[DEFAULT_PROFILE_NAME] = Profile()
    return builder.freeze()


def _warn(builder: MutableDocument, message: str) -> None:
    logger.warning("%s", message)
    builder.diagnostics.add_warning(message)


def _load_settings(builder: MutableDocument, data: TomlTable, ctx: LoadContext) -> None:
    sections: frozenset[str] = Toml.structural_sections()
    table: TomlTable = {k: v for k, v in data.items() if k not in sections}
    logger.trace("Loading global settings: %r", table)
    builder.settings = apply_table(GlobalSettings(), table, where="", ctx=ctx)


def _load_color_schemes(builder: MutableDocument, raw: Any, ctx: LoadContext) -> None:
    if raw is None:
        return
    if not is_toml_table(raw):
        _warn(builder, f"Expected table in {Toml.SECTION_COLOR_SCHEMES}, got {type(raw).__name__}")
        return
    for name, value in raw.items():
        where: str = f"{Toml.SECTION_COLOR_SCHEMES}.{name}"
        if not is_toml_table(value):
            _warn(builder, f"Expected table in {where}, got {type(value).__name__}: {value!r}")
            continue
        logger.trace("Loading color scheme %s: %r", name, value)
        builder.color_schemes[name] = apply_table(ColorPalette(), value, where=where, ctx=ctx)


def _load_profiles(builder: MutableDocument, raw: Any, ctx: LoadContext) -> None:
    tables: dict[str, TomlTable] = {}
    if raw is not None and not is_toml_table(raw):
        _warn(builder, f"Expected table in {Toml.SECTION_PROFILES}, got {type(raw).__name__}")
    elif raw is not None:
        for name, value in raw.items():
            if is_toml_table(value):
                tables[name] = value
            else:
                _warn(
                    builder,
                    f"Expected table in {Toml.SECTION_PROFILES}.{name}, "
                    f"got {type(value).__name__}: {value!r}",
                )

    default_name: str = builder.settings.default_profile
    scheme: str = Toml.DEFAULT_COLOR_SCHEME
    start: Profile = dataclasses.replace(
        Profile(), colors=SimpleColorConfig(scheme, builder.color_schemes[scheme])
    )

    if default_name not in tables:
        logger.info("Profile %r is not defined; using built-in defaults", default_name)
    logger.trace("Loading default profile %s", default_name)
    baseline: Profile = apply_table(
        start,
        tables.get(default_name, {}),
        where=f"{Toml.SECTION_PROFILES}.{default_name}",
        ctx=ctx,
    )
    builder.profiles[default_name] = baseline

    for name, table in tables.items():
        if name == default_name:
            continue
        logger.trace("Loading profile %s on top of %s", name, default_name)
        builder.profiles[name] = apply_table(
            baseline, table, where=f"{Toml.SECTION_PROFILES}.{name}", ctx=ctx
        )


def parse_binding_entry(
    item: object,
) -> tuple[MatchModeFilter, Modifier, Key | str | MouseButton, Action]:
    """Parse one ``[[input_mapping]]`` entry.

    Args:
        item (object): The parsed entry.

    Returns:
        tuple[MatchModeFilter, Modifier, Key | str | MouseButton, Action]: The mode
        filter, the modifier set, the trigger and the action.

    Raises:
        ValueError: On unknown modifiers, modes, keys, buttons or actions, a missing
            trigger or action, or a missing required action parameter.
        TypeError: On values of the wrong type.
    """
    if not is_toml_table(item):
        raise TypeError(f"expected table, got {type(item).__name__}: {item!r}")

    modifiers: Modifier = parse_modifiers(item.get(Toml.KEY_MODS, ""))

    mode: Any = item.get(Toml.KEY_MODE, "")
    if not isinstance(mode, str):
        raise TypeError(f"expected string for {Toml.KEY_MODE!r}, got {type(mode).__name__}")
    modes: MatchModeFilter = MatchModeFilter.parse(mode)

    key: Any = item.get(Toml.KEY_KEY)
    mouse: Any = item.get(Toml.KEY_MOUSE)
    trigger: Key | str | MouseButton
    if key is not None and mouse is not None:
        raise ValueError(f"only one of {Toml.KEY_KEY!r} and {Toml.KEY_MOUSE!r} may be given")
    if key is not None:
        if not isinstance(key, str):
            raise TypeError(f"expected string for {Toml.KEY_KEY!r}, got {type(key).__name__}")
        trigger = parse_key_trigger(key)
    elif mouse is not None:
        if not isinstance(mouse, str):
            raise TypeError(f"expected string for {Toml.KEY_MOUSE!r}, got {type(mouse).__name__}")
        trigger = parse_mouse_button(mouse)
    else:
        raise ValueError(f"missing {Toml.KEY_KEY!r} or {Toml.KEY_MOUSE!r}")

    name: Any = item.get(Toml.KEY_ACTION)
    if name is None:
        raise ValueError(f"missing {Toml.KEY_ACTION!r}")
    if not isinstance(name, str):
        raise TypeError(f"expected string for {Toml.KEY_ACTION!r}, got {type(name).__name__}")
    return modes, modifiers, trigger, make_action(name, item)


def _load_bindings(builder: MutableDocument, raw: Any) -> None:
    if raw is None:
        return
    if not is_any_list(raw):
        _warn(
            builder,
            f"Expected array of tables in {Toml.SECTION_INPUT_MAPPING}, got {type(raw).__name__}",
        )
        return
    for index, item in enumerate(raw):
        where: str = f"{Toml.SECTION_INPUT_MAPPING}[{index}]"
        try:
            modes, modifiers, trigger, action = parse_binding_entry(item)
        except (TypeError, ValueError) as e:
            _warn(builder, f"Ignoring {where}: {e}")
            continue
        logger.trace("Binding %s: %s", where, action)
        builder.bindings.add(modes, modifiers, trigger, action)
