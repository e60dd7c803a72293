# topmark:header:start
#
#   project      : TermConf
#   file         : test_writer.py
#   file_relpath : tests/config/test_writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for rendering documents as commented TOML."""

from __future__ import annotations

from textwrap import dedent

import tomlkit

from tests.conftest import make_document
from termconf.config.model import Document
from termconf.config.reader import load_document_text
from termconf.config.writer import (
    INDENT,
    extra_bindings,
    format_key,
    format_toml_value,
    render_defaults,
    render_document,
)
from termconf.input.actions import Action
from termconf.input.defaults import default_bindings
from termconf.input.triggers import Key

CUSTOM = dedent(
    """
    live_config = true
    log_file_path = "/tmp/termconf.log"
    logging_mask = ["raw_input", "raw_output"]

    [color_schemes.paper]
    default_background = "#ffffff"

    [color_schemes.night]
    default_background = "#000000"

    [profiles.main]
    arguments = ["-l"]
    tab_width = 4
    environment = { TERM = "xterm-256color" }
    frozen_dec_modes = { 2026 = false }
    colors = { light = "paper", dark = "night" }

    [profiles.main.history]
    limit = "unbounded"

    [profiles.main.font]
    size = 13.5
    regular = { family = "Iosevka", features = ["ss01"] }

    [profiles.work]
    shell = "/usr/bin/fish"
    colors = "paper"

    [[input_mapping]]
    mods = "Alt"
    key = "Enter"
    action = "ToggleTitleBar"

    [[input_mapping]]
    mods = "Control"
    key = "1"
    mode = "Select|~Alt"
    action = "SwitchToTab"
    position = 1

    [[input_mapping]]
    mouse = "Right"
    action = "SendChars"
    chars = "clear"
    """
)


def test_defaults_render_and_load_back() -> None:
    text: str = render_defaults()
    document: Document = load_document_text(text)
    assert document == Document.defaults()
    assert document.diagnostics == ()


def test_rendered_defaults_are_valid_toml() -> None:
    parsed = tomlkit.parse(render_defaults()).unwrap()
    assert parsed["default_profile"] == "main"
    assert "main" in parsed["profiles"]
    assert "default" in parsed["color_schemes"]
    # built-in bindings are documented as comments only
    assert "input_mapping" not in parsed


def test_custom_document_round_trip() -> None:
    document: Document = make_document(CUSTOM)
    assert document.diagnostics == ()

    reloaded: Document = load_document_text(render_document(document))
    assert reloaded == document
    assert reloaded.diagnostics == ()


def test_rendering_is_stable() -> None:
    document: Document = make_document(CUSTOM)
    text: str = render_document(document)
    assert render_document(load_document_text(text)) == text


def test_only_non_builtin_bindings_are_emitted() -> None:
    document: Document = make_document(CUSTOM)
    extra = list(extra_bindings(document.bindings))
    assert [action.name for *_, action in extra] == [
        "ToggleTitleBar",
        "SwitchToTab",
        "SendChars",
    ]
    assert list(extra_bindings(default_bindings())) == []


def test_nested_tables_are_indented() -> None:
    lines: list[str] = render_defaults().splitlines()
    assert "[profiles.main]" in lines
    assert INDENT + "[profiles.main.history]" in lines
    assert INDENT * 2 + "[profiles.main.cursor.insert_mode]" in lines
    assert INDENT * 2 + "limit = 1000" in lines


def test_every_entry_is_documented() -> None:
    lines: list[str] = render_defaults().splitlines()
    index: int = lines.index(INDENT * 2 + "scroll_multiplier = 3")
    assert lines[index - 1] == INDENT * 2 + "# Lines scrolled per mouse wheel step. Default: 3."


def test_builtin_bindings_are_listed_as_comments() -> None:
    text: str = render_defaults()
    assert '#     { mods = "Alt", key = "Enter", action = "ToggleFullscreen" }' in text


def test_binding_order_in_output() -> None:
    text: str = render_document(make_document(CUSTOM))
    assert text.index('action = "ToggleTitleBar"') < text.index('action = "SwitchToTab"')
    assert 'mode = "~Alt|Select"' in text


def test_value_formatting() -> None:
    assert format_key("plain_key") == "plain_key"
    assert format_key("needs quoting") == '"needs quoting"'
    assert format_toml_value({"a": 1, "b": [True, "x"]}) == '{ a = 1, b = [true, "x"] }'
    assert format_toml_value({}) == "{}"
    assert format_toml_value(0.5) == "0.5"


def test_extension_of_builtin_record_keeps_builtin_first() -> None:
    document: Document = make_document(CUSTOM)
    reloaded: Document = load_document_text(render_document(document))
    assert reloaded.bindings.keys[0].trigger is Key.ENTER
    assert reloaded.bindings.keys[0].actions == (
        Action("ToggleFullscreen"),
        Action("ToggleTitleBar"),
    )


def test_custom_document_keeps_tab_width_and_log_settings() -> None:
    reloaded: Document = load_document_text(render_document(make_document(CUSTOM)))
    assert reloaded.default_profile().tab_width == 4
    assert reloaded.profile("work").tab_width == 4
    assert reloaded.settings.log_file_path == "/tmp/termconf.log"
    assert reloaded.settings.logging_mask == ("raw_input", "raw_output")
