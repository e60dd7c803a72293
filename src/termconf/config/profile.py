# topmark:header:start
#
#   project      : TermConf
#   file         : profile.py
#   file_relpath : src/termconf/config/profile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Profile schema: the per-session terminal settings.

A `Profile` is a frozen dataclass whose fields are all declared with
`termconf.config.entry.entry`, so every field has a default and a constructed
`Profile()` is always fully populated. Nested groups (``history``, ``cursor``,
``font``, ...) are frozen dataclasses of their own and render as nested TOML
tables.

Profiles are never mutated: the document reader derives new instances with
`dataclasses.replace` (see `termconf.config.codecs.apply_table`).
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from datetime import timedelta
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from termconf.config.codecs import (
    BoolCodec,
    DecModeMapCodec,
    DurationCodec,
    EnumCodec,
    FloatCodec,
    IntCodec,
    LimitCodec,
    StrCodec,
    StrListCodec,
    StrMapCodec,
    StructCodec,
)
from termconf.config.colors import ColorConfig, ColorConfigCodec, SimpleColorConfig
from termconf.config.entry import entry, entry_factory
from termconf.config.fonts import FontConfig
from termconf.config.types import (
    CursorShape,
    Permission,
    ScrollBarPosition,
    StatusDisplay,
    StatusDisplayPosition,
    TerminalId,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


def default_shell(environ: Mapping[str, str], platform: str) -> str:
    """Return the default shell for an environment and platform (``sys.platform``)."""
    if platform.startswith("win"):
        return "powershell.exe"
    return environ.get("SHELL") or "/bin/sh"


_BOOL: Final[BoolCodec] = BoolCodec()
_STR: Final[StrCodec] = StrCodec()
_PERMISSION: Final[EnumCodec[Permission]] = EnumCodec(Permission)


@dataclass(frozen=True)
class TerminalSize:
    """Initial grid size in character cells."""

    columns: int = entry(80, doc="Initial number of columns.", codec=IntCodec(minimum=1))
    lines: int = entry(25, doc="Initial number of lines.", codec=IntCodec(minimum=1))


@dataclass(frozen=True)
class Margins:
    """Space between the window border and the text area."""

    horizontal: int = entry(0, doc="Horizontal window margin in pixels.", codec=IntCodec(0))
    vertical: int = entry(0, doc="Vertical window margin in pixels.", codec=IntCodec(0))


@dataclass(frozen=True)
class HistoryConfig:
    """Scrollback settings."""

    limit: int | None = entry(
        1000,
        doc=(
            "Number of lines kept in the scrollback buffer, or \"unbounded\".\n"
            "Default: {default}."
        ),
        codec=LimitCodec(),
    )
    scroll_multiplier: int = entry(
        3,
        doc="Lines scrolled per mouse wheel step. Default: {default}.",
        codec=IntCodec(minimum=1),
    )
    auto_scroll_on_update: bool = entry(
        True,
        doc="Scroll back to the bottom when new output arrives.",
        codec=_BOOL,
    )


@dataclass(frozen=True)
class ScrollbarConfig:
    """Scrollbar settings."""

    position: ScrollBarPosition = entry(
        ScrollBarPosition.RIGHT,
        doc="Scrollbar placement (Left, Right, Hidden). Default: {default}.",
        codec=EnumCodec(ScrollBarPosition),
    )
    hide_in_alt_screen: bool = entry(
        True, doc="Hide the scrollbar while the alternate screen is active.", codec=_BOOL
    )


@dataclass(frozen=True)
class MouseConfig:
    """Mouse settings."""

    hide_while_typing: bool = entry(
        True, doc="Hide the mouse cursor while typing.", codec=_BOOL
    )


@dataclass(frozen=True)
class PermissionsConfig:
    """Answers to capability requests made by applications (Allow, Deny, Ask)."""

    change_font: Permission = entry(
        Permission.ASK, doc="Changing the font via OSC 50.", codec=_PERMISSION
    )
    capture_buffer: Permission = entry(
        Permission.ASK, doc="Capturing the screen buffer.", codec=_PERMISSION
    )
    display_host_writable_statusline: Permission = entry(
        Permission.ASK,
        doc="Showing the host writable status line.",
        codec=_PERMISSION,
    )


@dataclass(frozen=True)
class CursorConfig:
    """Cursor appearance in one input mode."""

    shape: CursorShape = entry(
        CursorShape.BLOCK,
        doc="Cursor shape (Block, Rectangle, Underscore, Bar).",
        codec=EnumCodec(CursorShape),
    )
    blinking: bool = entry(False, doc="Whether the cursor blinks.", codec=_BOOL)
    blinking_interval: timedelta = entry(
        timedelta(milliseconds=500),
        doc="Blink interval in milliseconds. Default: {default}.",
        codec=DurationCodec(),
    )


_CURSOR: Final[StructCodec[CursorConfig]] = StructCodec(CursorConfig)


@dataclass(frozen=True)
class CursorModes:
    """Cursor appearance per input mode."""

    insert_mode: CursorConfig = entry(
        CursorConfig(shape=CursorShape.BAR, blinking=True),
        doc="Cursor in insert mode (normal typing).",
        codec=_CURSOR,
    )
    normal_mode: CursorConfig = entry(
        CursorConfig(), doc="Cursor in vi-like normal mode.", codec=_CURSOR
    )
    visual_mode: CursorConfig = entry(
        CursorConfig(), doc="Cursor in vi-like visual mode.", codec=_CURSOR
    )


@dataclass(frozen=True)
class StatusLineIndicator:
    """Format strings of the indicator status line."""

    left: str = entry(
        " {InputMode} {SearchPrompt} ", doc="Left-aligned format string.", codec=_STR
    )
    middle: str = entry(" {Title} ", doc="Centered format string.", codec=_STR)
    right: str = entry(
        " {HistoryLineCount} {Clock} ", doc="Right-aligned format string.", codec=_STR
    )


@dataclass(frozen=True)
class StatusLineConfig:
    """Status line settings."""

    display: StatusDisplay = entry(
        StatusDisplay.NONE,
        doc="Status line contents (None, Indicator, HostWritable). Default: {default}.",
        codec=EnumCodec(StatusDisplay),
    )
    position: StatusDisplayPosition = entry(
        StatusDisplayPosition.BOTTOM,
        doc="Status line position (Top, Bottom).",
        codec=EnumCodec(StatusDisplayPosition),
    )
    sync_to_window_title: bool = entry(
        False, doc="Mirror the status line into the window title.", codec=_BOOL
    )
    indicator: StatusLineIndicator = entry(
        StatusLineIndicator(),
        doc="Layout of the indicator status line.",
        codec=StructCodec(StatusLineIndicator),
    )


@dataclass(frozen=True)
class BackgroundConfig:
    """Window background settings."""

    opacity: float = entry(
        1.0,
        doc="Background opacity between 0.0 and 1.0. Default: {default}.",
        codec=FloatCodec(minimum=0.0, maximum=1.0),
    )
    blur: bool = entry(False, doc="Blur what is behind a translucent window.", codec=_BOOL)


@dataclass(frozen=True)
class BellConfig:
    """Terminal bell settings."""

    sound: str = entry(
        "default",
        doc='Bell sound: "default", "off" or a path to a sound file.',
        codec=_STR,
    )
    alert: bool = entry(True, doc="Raise a desktop alert on bell.", codec=_BOOL)
    volume: float = entry(
        1.0, doc="Bell volume between 0.0 and 1.0.", codec=FloatCodec(minimum=0.0, maximum=1.0)
    )


@dataclass(frozen=True)
class Profile:
    """Terminal session settings (``[profiles.<name>]``)."""

    shell: str = entry_factory(
        lambda: default_shell(os.environ, sys.platform),
        doc="Program to run in the terminal. Defaults to $SHELL.",
        codec=_STR,
    )
    arguments: tuple[str, ...] = entry(
        (), doc="Arguments passed to the shell.", codec=StrListCodec()
    )
    initial_working_directory: str = entry(
        "~", doc="Working directory of the shell. Default: {default}.", codec=_STR
    )
    environment: Mapping[str, str] = entry_factory(
        lambda: MappingProxyType({}),
        doc="Extra environment variables for the shell.",
        codec=StrMapCodec(),
    )
    escape_sandbox: bool = entry(
        True, doc="Run the shell outside of a Flatpak sandbox, if any.", codec=_BOOL
    )
    login_shell: bool = entry(False, doc="Start the shell as a login shell.", codec=_BOOL)
    terminal_id: TerminalId = entry(
        TerminalId.VT525,
        doc="Terminal identity reported to applications. Default: {default}.",
        codec=EnumCodec(TerminalId),
    )
    maximized: bool = entry(False, doc="Start with a maximized window.", codec=_BOOL)
    fullscreen: bool = entry(False, doc="Start in fullscreen mode.", codec=_BOOL)
    show_title_bar: bool = entry(True, doc="Show the window title bar.", codec=_BOOL)
    size_indicator_on_resize: bool = entry(
        True, doc="Show the terminal size while resizing.", codec=_BOOL
    )
    draw_bold_text_with_bright_colors: bool = entry(
        False, doc="Render bold text with the bright color variants.", codec=_BOOL
    )
    highlight_word_and_matches_on_double_click: bool = entry(
        True,
        doc="Highlight all occurrences of a double-clicked word.",
        codec=_BOOL,
    )
    copy_last_mark_range_offset: int = entry(
        0,
        doc="Line offset used by CopyPreviousMarkRange.",
        codec=IntCodec(),
    )
    tab_width: int = entry(
        8,
        doc="Distance between tab stops in columns. Default: {default}.",
        codec=IntCodec(minimum=1),
    )
    vi_mode_scrolloff: int = entry(
        8,
        doc="Lines kept visible above and below the cursor in vi mode.",
        codec=IntCodec(minimum=0),
    )
    vi_mode_highlight_timeout: timedelta = entry(
        timedelta(milliseconds=300),
        doc="How long vi yank highlights stay visible, in milliseconds. Default: {default}.",
        codec=DurationCodec(),
    )
    colors: ColorConfig = entry(
        SimpleColorConfig(),
        doc=(
            "Color scheme name, or { light = \"...\", dark = \"...\" } to follow the\n"
            "desktop color preference. Default: {default}."
        ),
        codec=ColorConfigCodec(),
    )
    frozen_dec_modes: Mapping[int, bool] = entry_factory(
        lambda: MappingProxyType({}),
        doc="DEC private modes forced on (true) or off (false), keyed by mode number.",
        codec=DecModeMapCodec(),
    )
    terminal_size: TerminalSize = entry(
        TerminalSize(), doc="Initial terminal size.", codec=StructCodec(TerminalSize)
    )
    margins: Margins = entry(Margins(), doc="Window margins.", codec=StructCodec(Margins))
    history: HistoryConfig = entry(
        HistoryConfig(), doc="Scrollback buffer.", codec=StructCodec(HistoryConfig)
    )
    scrollbar: ScrollbarConfig = entry(
        ScrollbarConfig(), doc="Scrollbar.", codec=StructCodec(ScrollbarConfig)
    )
    mouse: MouseConfig = entry(MouseConfig(), doc="Mouse.", codec=StructCodec(MouseConfig))
    permissions: PermissionsConfig = entry(
        PermissionsConfig(),
        doc="Answers to capability requests.",
        codec=StructCodec(PermissionsConfig),
    )
    font: FontConfig = entry(FontConfig(), doc="Fonts.", codec=StructCodec(FontConfig))
    cursor: CursorModes = entry(
        CursorModes(), doc="Cursor shape per input mode.", codec=StructCodec(CursorModes)
    )
    status_line: StatusLineConfig = entry(
        StatusLineConfig(), doc="Status line.", codec=StructCodec(StatusLineConfig)
    )
    background: BackgroundConfig = entry(
        BackgroundConfig(), doc="Window background.", codec=StructCodec(BackgroundConfig)
    )
    bell: BellConfig = entry(BellConfig(), doc="Terminal bell.", codec=StructCodec(BellConfig))
