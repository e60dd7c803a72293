# topmark:header:start
#
#   project      : TermConf
#   file         : test_reader.py
#   file_relpath : tests/config/test_reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for loading configuration documents from TOML.

Covers document-level fallback, profile inheritance, color scheme resolution,
field-level recovery and binding entry accumulation.
"""

from __future__ import annotations

from datetime import timedelta
from textwrap import dedent
from typing import TYPE_CHECKING

import pytest

from tests.conftest import make_document, parametrize, warnings_of
from termconf.config.colors import ColorPalette, RGBColor, SimpleColorConfig
from termconf.config.model import Document
from termconf.config.profile import Profile
from termconf.config.reader import load_document_file, load_document_text, parse_binding_entry
from termconf.config.types import CursorShape
from termconf.config.writer import render_document
from termconf.core.diagnostics import DiagnosticLevel
from termconf.input.actions import Action
from termconf.input.match_modes import MatchMode
from termconf.input.modifiers import Modifier
from termconf.input.triggers import Key, MouseButton

if TYPE_CHECKING:
    from pathlib import Path


def test_empty_document_is_all_defaults() -> None:
    document: Document = make_document("")
    assert document == Document.defaults()
    assert document.diagnostics == ()
    assert document.profile("main") == Profile()


@parametrize(
    "text",
    [
        "this is = = not toml",
        "[[[\n",
        "[profiles.main]\nenvironment = { A = '1', A = '2' }\n",
    ],
    ids=["garbage", "bad_header", "duplicate_inline_key"],
)
def test_malformed_toml_falls_back_to_defaults(text: str) -> None:
    document: Document = make_document(text)
    assert document == Document.defaults()
    assert len(document.diagnostics) == 1
    diagnostic = document.diagnostics[0]
    assert diagnostic.level is DiagnosticLevel.ERROR
    assert diagnostic.message.startswith("Invalid TOML")
    assert diagnostic.message.endswith("using built-in defaults")


def test_missing_file_falls_back_to_defaults(tmp_path: Path) -> None:
    document: Document = load_document_file(tmp_path / "absent.toml")
    assert document == Document.defaults()
    assert document.source == str(tmp_path / "absent.toml")
    assert document.diagnostics[0].level is DiagnosticLevel.ERROR
    assert "Cannot read" in document.diagnostics[0].message


def test_global_settings() -> None:
    document: Document = make_document(
        dedent(
            """
            live_config = true
            early_exit_threshold = 100
            bypass_mouse_protocol_modifier = "Alt"

            [images]
            sixel_register_count = 256
            """
        )
    )
    assert document.settings.live_config is True
    assert document.settings.early_exit_threshold == timedelta(milliseconds=100)
    assert document.settings.bypass_mouse_protocol_modifier == Modifier.ALT
    assert document.settings.images.sixel_register_count == 256
    assert document.diagnostics == ()


def test_profiles_inherit_from_default_profile() -> None:
    document: Document = make_document(
        dedent(
            """
            [profiles.main]
            history.limit = 5000
            font.size = 14

            [profiles.main.cursor.insert_mode]
            shape = "Underscore"

            [profiles.work]
            font.size = 10
            """
        )
    )
    main: Profile = document.profile("main")
    work: Profile = document.profile("work")

    assert main.history.limit == 5000
    assert main.font.size == 14.0
    assert main.cursor.insert_mode.shape is CursorShape.UNDERSCORE
    # untouched sibling keys keep their defaults
    assert main.cursor.insert_mode.blinking is True

    assert work.history.limit == 5000
    assert work.cursor.insert_mode.shape is CursorShape.UNDERSCORE
    assert work.font.size == 10.0
    assert document.profile_names() == ("main", "work")


def test_default_profile_name_is_configurable() -> None:
    document: Document = make_document(
        dedent(
            """
            default_profile = "work"

            [profiles.work]
            login_shell = true

            [profiles.main]
            maximized = true
            """
        )
    )
    assert document.default_profile_name == "work"
    assert document.default_profile().login_shell is True
    # every other profile starts as a copy of the default profile
    assert document.profile("main").login_shell is True
    assert document.profile("main").maximized is True
    assert document.profile_names() == ("work", "main")


def test_undefined_default_profile_uses_builtin_defaults() -> None:
    document: Document = make_document('default_profile = "ghost"\n')
    assert document.profile_names() == ("ghost",)
    assert document.default_profile() == Profile()


def test_unlimited_history() -> None:
    document: Document = make_document('[profiles.main.history]\nlimit = "unbounded"\n')
    assert document.default_profile().history.limit is None


def test_field_failure_keeps_value_and_siblings() -> None:
    document: Document = make_document(
        dedent(
            """
            [profiles.main.history]
            scroll_multiplier = "x"
            limit = 10
            """
        )
    )
    history = document.default_profile().history
    assert history.scroll_multiplier == 3
    assert history.limit == 10
    assert warnings_of(document) == [
        "Expected int in profiles.main.history.scroll_multiplier, got str: 'x'"
    ]


def test_nan_is_a_field_failure() -> None:
    document: Document = make_document("[profiles.main.background]\nopacity = nan\n")
    assert document.default_profile().background.opacity == 1.0
    assert warnings_of(document) == [
        "Value nan in profiles.main.background.opacity is not a finite number"
    ]
    assert load_document_text(render_document(document)) == document


def test_tab_width_and_log_settings() -> None:
    document: Document = make_document(
        dedent(
            """
            log_file_path = "/var/log/termconf.log"
            logging_mask = ["raw_input"]

            [profiles.main]
            tab_width = 4

            [profiles.wide]
            tab_width = 0
            """
        )
    )
    assert document.settings.log_file_path == "/var/log/termconf.log"
    assert document.settings.logging_mask == ("raw_input",)
    assert document.default_profile().tab_width == 4
    # the bad value keeps the inherited one
    assert document.profile("wide").tab_width == 4
    assert warnings_of(document) == [
        "Value 0 in profiles.wide.tab_width is out of range [1, inf]"
    ]


def test_unknown_keys_are_ignored() -> None:
    document: Document = make_document(
        dedent(
            """
            no_such_setting = 1

            [profiles.main]
            no_such_field = "x"
            """
        )
    )
    assert document == Document.defaults()
    assert document.diagnostics == ()


def test_profile_colors_resolve_to_scheme() -> None:
    document: Document = make_document(
        dedent(
            """
            [color_schemes.paper]
            default_background = "#ffffff"
            normal.black = "#111111"

            [profiles.main]
            colors = "paper"
            """
        )
    )
    colors = document.default_profile().colors
    assert isinstance(colors, SimpleColorConfig)
    assert colors.scheme == "paper"
    assert colors.palette.default_background == RGBColor(255, 255, 255)
    assert colors.palette.normal.black == RGBColor(0x11, 0x11, 0x11)
    # unspecified palette entries keep the built-in values
    assert colors.palette.cursor == ColorPalette().cursor


def test_overriding_default_scheme_applies_to_default_colors() -> None:
    document: Document = make_document('[color_schemes.default]\ncursor = "#00ff00"\n')
    colors = document.default_profile().colors
    assert isinstance(colors, SimpleColorConfig)
    assert colors.palette.cursor == RGBColor(0, 255, 0)


def test_unknown_color_scheme_is_a_warning() -> None:
    document: Document = make_document('[profiles.main]\ncolors = "solarized"\n')
    assert document.default_profile().colors == SimpleColorConfig()
    assert warnings_of(document) == [
        "Unknown color scheme 'solarized' in profiles.main.colors (known: default)"
    ]


@parametrize(
    "text",
    [
        "profiles = 3\n",
        "color_schemes = 3\n",
        "input_mapping = 3\n",
        "[profiles]\nmain = 3\n",
    ],
)
def test_malformed_sections_are_warnings(text: str) -> None:
    document: Document = make_document(text)
    assert document.profile("main") == Profile()
    assert len(warnings_of(document)) == 1


def test_binding_entries_accumulate_in_file_order() -> None:
    document: Document = make_document(
        dedent(
            """
            [[input_mapping]]
            mods = "Control"
            key = "F1"
            action = "ScrollUp"

            [[input_mapping]]
            mods = ["Control"]
            key = "f1"
            action = "ScrollDown"
            """
        )
    )
    assert document.bindings.resolve_key(Modifier.CONTROL, Key.F1, MatchMode.NONE) == (
        Action("ScrollUp"),
        Action("ScrollDown"),
    )


def test_binding_entries_extend_builtin_records() -> None:
    document: Document = make_document(
        dedent(
            """
            [[input_mapping]]
            mods = "Alt"
            key = "Enter"
            action = "ToggleTitleBar"
            """
        )
    )
    assert document.bindings.resolve_key(Modifier.ALT, Key.ENTER, MatchMode.NONE) == (
        Action("ToggleFullscreen"),
        Action("ToggleTitleBar"),
    )


def test_binding_with_mode_and_parameters() -> None:
    document: Document = make_document(
        dedent(
            """
            [[input_mapping]]
            mods = "Control"
            key = "1"
            mode = "~Alt"
            action = "SwitchToTab"
            position = 1

            [[input_mapping]]
            mouse = "Right"
            action = "PasteSelection"
            """
        )
    )
    bindings = document.bindings
    assert bindings.resolve_char(Modifier.CONTROL, "1", MatchMode.NONE) == (
        Action("SwitchToTab", (("position", 1),)),
    )
    assert bindings.resolve_char(Modifier.CONTROL, "1", MatchMode.ALTERNATE_SCREEN) is None
    assert bindings.resolve_mouse(Modifier.NONE, MouseButton.RIGHT, MatchMode.NONE) == (
        Action("PasteSelection"),
    )


def test_bad_binding_entry_is_skipped() -> None:
    document: Document = make_document(
        dedent(
            """
            [[input_mapping]]
            key = "F2"
            action = "Explode"

            [[input_mapping]]
            key = "F2"
            action = "Quit"
            """
        )
    )
    assert warnings_of(document) == ["Ignoring input_mapping[0]: Unknown action 'Explode'"]
    assert document.bindings.resolve_key(Modifier.NONE, Key.F2, MatchMode.NONE) == (
        Action("Quit"),
    )


@parametrize(
    ("item", "message"),
    [
        ({"action": "Quit"}, "missing 'key' or 'mouse'"),
        ({"key": "F1", "mouse": "Left", "action": "Quit"}, "only one of"),
        ({"key": "F1"}, "missing 'action'"),
        ({"key": "F1", "mods": "Hyper", "action": "Quit"}, "Unknown modifier"),
        ({"key": "F1", "mode": "Bogus", "action": "Quit"}, "Unknown match mode"),
        ({"key": "Hyperdrive", "action": "Quit"}, "Unknown key"),
        ({"mouse": "Thumb", "action": "Quit"}, "Unknown mouse button"),
        ({"key": "F1", "action": "SendChars"}, "requires parameter 'chars'"),
    ],
)
def test_parse_binding_entry_value_errors(item: dict[str, object], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        parse_binding_entry(item)


@parametrize(
    "item",
    [
        "Quit",
        {"key": 1, "action": "Quit"},
        {"key": "F1", "action": 3},
        {"key": "F1", "mode": 1, "action": "Quit"},
    ],
)
def test_parse_binding_entry_type_errors(item: object) -> None:
    with pytest.raises(TypeError):
        parse_binding_entry(item)


def test_load_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING"):
        make_document('[profiles.main]\nlogin_shell = "yes"\n')
    assert "Expected bool in profiles.main.login_shell" in caplog.text
