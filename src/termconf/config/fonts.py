# topmark:header:start
#
#   project      : TermConf
#   file         : fonts.py
#   file_relpath : src/termconf/config/fonts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Font descriptions and the per-profile font configuration."""

from __future__ import annotations

import dataclasses
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from termconf.config.codecs import (
    BoolCodec,
    Codec,
    EnumCodec,
    FloatCodec,
    StrCodec,
    StrListCodec,
    expected,
)
from termconf.config.entry import entry
from termconf.config.logging import get_logger
from termconf.config.types import FontLocator, FontSlant, FontWeight, RenderMode, TextShaping

if TYPE_CHECKING:
    from termconf.config.codecs import LoadContext
    from termconf.config.logging import TermconfLogger

logger: TermconfLogger = get_logger(__name__)


def default_font_family(platform: str) -> str:
    """Return the default monospace font family for a platform (``sys.platform``)."""
    if platform == "darwin":
        return "Menlo"
    if platform.startswith("win"):
        return "Consolas"
    return "monospace"


DEFAULT_FONT_FAMILY: Final[str] = default_font_family(sys.platform)


@dataclass(frozen=True)
class FontDescription:
    """A font face request.

    Attributes:
        family (str): Font family name.
        weight (FontWeight): Requested weight.
        slant (FontSlant): Requested slant.
        features (tuple[str, ...]): OpenType feature tags, e.g. ``"ss01"`` or
            ``"-liga"`` to disable one.
    """

    family: str = DEFAULT_FONT_FAMILY
    weight: FontWeight = FontWeight.NORMAL
    slant: FontSlant = FontSlant.NORMAL
    features: tuple[str, ...] = ()

    def __str__(self) -> str:
        return (
            f"{self.family} ({self.weight.value}, {self.slant.value})"
            f" [{', '.join(self.features)}]"
        )


_WEIGHT: Final[EnumCodec[FontWeight]] = EnumCodec(FontWeight)
_SLANT: Final[EnumCodec[FontSlant]] = EnumCodec(FontSlant)
_FEATURES: Final[StrListCodec] = StrListCodec()


class FontDescriptionCodec(Codec[FontDescription]):
    """``"Family"`` or ``{ family, weight, slant, features }``.

    The short form only changes the family; weight and slant keep their current
    values so ``bold = "Fira Code"`` still requests a bold face.
    """

    def decode(
        self, raw: Any, current: FontDescription, *, where: str, ctx: LoadContext
    ) -> FontDescription:
        if isinstance(raw, str):
            if not raw:
                raise expected("non-empty string", where, raw)
            return dataclasses.replace(current, family=raw)
        if not isinstance(raw, dict):
            raise expected("font family or font table", where, raw)

        changes: dict[str, Any] = {}
        for key, value in raw.items():
            loc: str = f"{where}.{key}"
            if key == "family":
                if not isinstance(value, str) or not value:
                    raise expected("non-empty string", loc, value)
                changes["family"] = value
            elif key == "weight":
                changes["weight"] = _WEIGHT.decode(value, current.weight, where=loc, ctx=ctx)
            elif key == "slant":
                changes["slant"] = _SLANT.decode(value, current.slant, where=loc, ctx=ctx)
            elif key == "features":
                changes["features"] = _FEATURES.decode(value, current.features, where=loc, ctx=ctx)
            else:
                logger.debug("Ignoring unknown key %s", loc)
        return dataclasses.replace(current, **changes)

    def encode(self, value: FontDescription) -> Any:
        return {
            "family": value.family,
            "weight": value.weight.value,
            "slant": value.slant.value,
            "features": list(value.features),
        }

    def describe(self, value: FontDescription) -> str:
        return str(value)


_FONT: Final[FontDescriptionCodec] = FontDescriptionCodec()


@dataclass(frozen=True)
class FontConfig:
    """Font settings of a profile (``[profiles.<name>.font]``)."""

    size: float = entry(
        12.0,
        doc="Font size in points. Default: {default}.",
        codec=FloatCodec(minimum=4.0, maximum=200.0),
    )
    dpi_scale: float = entry(
        1.0,
        doc="Extra scale factor applied on top of the display DPI.",
        codec=FloatCodec(minimum=0.1, maximum=10.0),
    )
    locator: FontLocator = entry(
        FontLocator.NATIVE,
        doc="Font discovery backend. Default: {default}.",
        codec=EnumCodec(FontLocator),
    )
    text_shaping: TextShaping = entry(
        TextShaping.NATIVE,
        doc="Text shaping engine. Default: {default}.",
        codec=EnumCodec(TextShaping),
    )
    builtin_box_drawing: bool = entry(
        True,
        doc="Draw box drawing characters internally instead of using the font.",
        codec=BoolCodec(),
    )
    render_mode: RenderMode = entry(
        RenderMode.GRAY,
        doc="Glyph rasterization mode (lcd, light, gray, monochrome). Default: {default}.",
        codec=EnumCodec(RenderMode),
    )
    regular: FontDescription = entry(
        FontDescription(),
        doc="Regular font face. Default: {default}.",
        codec=_FONT,
    )
    bold: FontDescription = entry(
        FontDescription(weight=FontWeight.BOLD),
        doc="Bold font face.",
        codec=_FONT,
    )
    italic: FontDescription = entry(
        FontDescription(slant=FontSlant.ITALIC),
        doc="Italic font face.",
        codec=_FONT,
    )
    bold_italic: FontDescription = entry(
        FontDescription(weight=FontWeight.BOLD, slant=FontSlant.ITALIC),
        doc="Bold italic font face.",
        codec=_FONT,
    )
    emoji: str = entry(
        "emoji",
        doc="Font family used for emoji presentation.",
        codec=StrCodec(),
    )
