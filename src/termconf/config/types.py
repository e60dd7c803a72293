# topmark:header:start
#
#   project      : TermConf
#   file         : types.py
#   file_relpath : src/termconf/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enumerated configuration value types.

Each member's ``value`` is its external token as written in the configuration
document. Tokens are matched case-insensitively on read (see
`termconf.config.codecs.EnumCodec`) and always rendered in the spelling given here.
"""

from __future__ import annotations

from enum import Enum


class TerminalId(Enum):
    """VT terminal identity reported to applications (DA1/DA2)."""

    VT100 = "VT100"
    VT220 = "VT220"
    VT240 = "VT240"
    VT320 = "VT320"
    VT330 = "VT330"
    VT340 = "VT340"
    VT420 = "VT420"
    VT510 = "VT510"
    VT520 = "VT520"
    VT525 = "VT525"


class CursorShape(Enum):
    """Text cursor shape."""

    BLOCK = "Block"
    RECTANGLE = "Rectangle"
    UNDERSCORE = "Underscore"
    BAR = "Bar"


class Permission(Enum):
    """Answer to a capability request issued by the host application."""

    ALLOW = "Allow"
    DENY = "Deny"
    ASK = "Ask"


class ScrollBarPosition(Enum):
    """Placement of the scrollbar."""

    LEFT = "Left"
    RIGHT = "Right"
    HIDDEN = "Hidden"


class StatusDisplay(Enum):
    """What the status line shows."""

    NONE = "None"
    INDICATOR = "Indicator"
    HOST_WRITABLE = "HostWritable"


class StatusDisplayPosition(Enum):
    """Status line placement."""

    TOP = "Top"
    BOTTOM = "Bottom"


class SelectionAction(Enum):
    """What happens with the text once a mouse selection completes."""

    NOTHING = "Nothing"
    COPY_TO_SELECTION_CLIPBOARD = "CopyToSelectionClipboard"
    COPY_TO_CLIPBOARD = "CopyToClipboard"


class RenderingBackend(Enum):
    """Renderer backend selection."""

    DEFAULT = "Default"
    OPENGL = "OpenGL"
    SOFTWARE = "Software"


class FontWeight(Enum):
    """Font weight, from thinnest to heaviest."""

    THIN = "thin"
    EXTRA_LIGHT = "extra_light"
    LIGHT = "light"
    DEMILIGHT = "demilight"
    BOOK = "book"
    NORMAL = "normal"
    MEDIUM = "medium"
    DEMIBOLD = "demibold"
    BOLD = "bold"
    EXTRA_BOLD = "extra_bold"
    BLACK = "black"
    EXTRA_BLACK = "extra_black"


class FontSlant(Enum):
    """Font slant."""

    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


class RenderMode(Enum):
    """Glyph rasterization mode."""

    LCD = "lcd"
    LIGHT = "light"
    GRAY = "gray"
    MONOCHROME = "monochrome"


class TextShaping(Enum):
    """Text shaping engine."""

    NATIVE = "native"
    OPEN_SHAPER = "open_shaper"


class FontLocator(Enum):
    """Font discovery backend."""

    NATIVE = "native"
    MOCK = "mock"
