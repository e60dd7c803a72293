# topmark:header:start
#
#   project      : TermConf
#   file         : colors.py
#   file_relpath : src/termconf/config/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colors, color palettes (color schemes) and per-profile color configuration.

A profile's color configuration is a sum type:

- `SimpleColorConfig`: one named color scheme;
- `DualColorConfig`: a light and a dark variant, selected by the desktop's
  `ColorPreference`.

Scheme names are resolved against the document's ``[color_schemes]`` while the
document is loaded, so both variants carry their resolved `ColorPalette` and
consumers never look schemes up themselves.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Final

from termconf.config.codecs import Codec, FieldError, StructCodec, expected
from termconf.config.entry import entry
from termconf.config.keys import Toml

if TYPE_CHECKING:
    from termconf.config.codecs import LoadContext

_HEX_COLOR_RE: Final[re.Pattern[str]] = re.compile(r"^(?:#|0x)([0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class RGBColor:
    """24-bit RGB color."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    @classmethod
    def parse(cls, text: str) -> RGBColor:
        """Parse ``#RRGGBB`` or ``0xRRGGBB``.

        Raises:
            ValueError: If the text is not a 6-digit hex color.
        """
        m: re.Match[str] | None = _HEX_COLOR_RE.match(text.strip())
        if m is None:
            raise ValueError(f"Invalid color {text!r} (expected #RRGGBB)")
        value = int(m.group(1), 16)
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def from_hex(cls, value: int) -> RGBColor:
        """Build a color from a ``0xRRGGBB`` integer."""
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def __str__(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


class RGBColorCodec(Codec[RGBColor]):
    """Color written as ``"#RRGGBB"`` or ``"0xRRGGBB"``."""

    def decode(self, raw: Any, current: RGBColor, *, where: str, ctx: LoadContext) -> RGBColor:
        if not isinstance(raw, str):
            raise expected("color string", where, raw)
        try:
            return RGBColor.parse(raw)
        except ValueError as e:
            raise FieldError(f"{e} in {where}") from e

    def encode(self, value: RGBColor) -> Any:
        return str(value)

    def describe(self, value: RGBColor) -> str:
        return str(value)


_RGB: Final[RGBColorCodec] = RGBColorCodec()


def _rgb(value: int) -> RGBColor:
    return RGBColor.from_hex(value)


@dataclass(frozen=True)
class AnsiColors:
    """The eight ANSI colors of one intensity (normal, bright or dim)."""

    black: RGBColor = entry(_rgb(0x000000), doc="Black.", codec=_RGB)
    red: RGBColor = entry(_rgb(0xCD0000), doc="Red.", codec=_RGB)
    green: RGBColor = entry(_rgb(0x00CD00), doc="Green.", codec=_RGB)
    yellow: RGBColor = entry(_rgb(0xCDCD00), doc="Yellow.", codec=_RGB)
    blue: RGBColor = entry(_rgb(0x0000EE), doc="Blue.", codec=_RGB)
    magenta: RGBColor = entry(_rgb(0xCD00CD), doc="Magenta.", codec=_RGB)
    cyan: RGBColor = entry(_rgb(0x00CDCD), doc="Cyan.", codec=_RGB)
    white: RGBColor = entry(_rgb(0xE5E5E5), doc="White.", codec=_RGB)


BRIGHT_ANSI_COLORS: Final[AnsiColors] = AnsiColors(
    black=_rgb(0x7F7F7F),
    red=_rgb(0xFF0000),
    green=_rgb(0x00FF00),
    yellow=_rgb(0xFFFF00),
    blue=_rgb(0x5C5CFF),
    magenta=_rgb(0xFF00FF),
    cyan=_rgb(0x00FFFF),
    white=_rgb(0xFFFFFF),
)

DIM_ANSI_COLORS: Final[AnsiColors] = AnsiColors(
    black=_rgb(0x000000),
    red=_rgb(0x660000),
    green=_rgb(0x006600),
    yellow=_rgb(0x666600),
    blue=_rgb(0x000077),
    magenta=_rgb(0x660066),
    cyan=_rgb(0x006666),
    white=_rgb(0x727272),
)


@dataclass(frozen=True)
class ColorPalette:
    """A color scheme, as defined under ``[color_schemes.<name>]``."""

    default_foreground: RGBColor = entry(
        _rgb(0xD0D0D0), doc="Default text color. Default: {default}.", codec=_RGB
    )
    default_background: RGBColor = entry(
        _rgb(0x1A1716), doc="Default background color. Default: {default}.", codec=_RGB
    )
    cursor: RGBColor = entry(_rgb(0xB0B0B0), doc="Cursor color.", codec=_RGB)
    cursor_text: RGBColor = entry(
        _rgb(0x1A1716), doc="Color of the text under a block cursor.", codec=_RGB
    )
    selection_foreground: RGBColor = entry(
        _rgb(0xFFFFFF), doc="Text color of selected cells.", codec=_RGB
    )
    selection_background: RGBColor = entry(
        _rgb(0x4040A0), doc="Background color of selected cells.", codec=_RGB
    )
    hyperlink_hover: RGBColor = entry(
        _rgb(0xFF0000), doc="Color of a hyperlink under the mouse cursor.", codec=_RGB
    )
    normal: AnsiColors = entry(
        AnsiColors(), doc="Normal intensity ANSI colors.", codec=StructCodec(AnsiColors)
    )
    bright: AnsiColors = entry(
        BRIGHT_ANSI_COLORS, doc="Bright ANSI colors.", codec=StructCodec(AnsiColors)
    )
    dim: AnsiColors = entry(
        DIM_ANSI_COLORS, doc="Dim (faint) ANSI colors.", codec=StructCodec(AnsiColors)
    )


class ColorPreference(Enum):
    """Desktop color preference used to pick a `DualColorConfig` variant."""

    DARK = "dark"
    LIGHT = "light"


@dataclass(frozen=True)
class SimpleColorConfig:
    """A single color scheme reference with its resolved palette."""

    scheme: str = Toml.DEFAULT_COLOR_SCHEME
    palette: ColorPalette = ColorPalette()

    def palette_for(self, preference: ColorPreference) -> ColorPalette:
        """Return the palette (the same one for every preference)."""
        return palette_for(self, preference)

    def __str__(self) -> str:
        return self.scheme


@dataclass(frozen=True)
class DualColorConfig:
    """Light and dark color scheme references."""

    light: SimpleColorConfig
    dark: SimpleColorConfig

    def palette_for(self, preference: ColorPreference) -> ColorPalette:
        """Return the light or dark palette."""
        return palette_for(self, preference)

    def __str__(self) -> str:
        return f"light={self.light.scheme}, dark={self.dark.scheme}"


ColorConfig = SimpleColorConfig | DualColorConfig


def palette_for(config: ColorConfig, preference: ColorPreference) -> ColorPalette:
    """Return the palette a color configuration selects for a desktop preference."""
    match config:
        case SimpleColorConfig():
            return config.palette
        case DualColorConfig():
            if preference is ColorPreference.LIGHT:
                return config.light.palette
            return config.dark.palette


class ColorConfigCodec(Codec[ColorConfig]):
    """``colors = "scheme"`` or ``colors = { light = "a", dark = "b" }``."""

    def _resolve(self, name: Any, where: str, ctx: LoadContext) -> SimpleColorConfig:
        if not isinstance(name, str):
            raise expected("color scheme name", where, name)
        palette: ColorPalette | None = ctx.color_schemes.get(name)
        if palette is None:
            known: str = ", ".join(sorted(ctx.color_schemes)) or "none"
            raise FieldError(f"Unknown color scheme {name!r} in {where} (known: {known})")
        return SimpleColorConfig(name, palette)

    def decode(
        self, raw: Any, current: ColorConfig, *, where: str, ctx: LoadContext
    ) -> ColorConfig:
        if isinstance(raw, str):
            return self._resolve(raw, where, ctx)
        if isinstance(raw, dict):
            if Toml.KEY_LIGHT not in raw or Toml.KEY_DARK not in raw:
                raise FieldError(
                    f"Expected both {Toml.KEY_LIGHT!r} and {Toml.KEY_DARK!r} in {where}"
                )
            return DualColorConfig(
                light=self._resolve(raw[Toml.KEY_LIGHT], f"{where}.{Toml.KEY_LIGHT}", ctx),
                dark=self._resolve(raw[Toml.KEY_DARK], f"{where}.{Toml.KEY_DARK}", ctx),
            )
        raise expected("color scheme name or {light, dark} table", where, raw)

    def encode(self, value: ColorConfig) -> Any:
        match value:
            case SimpleColorConfig():
                return value.scheme
            case DualColorConfig():
                return {Toml.KEY_LIGHT: value.light.scheme, Toml.KEY_DARK: value.dark.scheme}

    def describe(self, value: ColorConfig) -> str:
        return str(value)
