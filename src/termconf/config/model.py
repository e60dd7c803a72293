# topmark:header:start
#
#   project      : TermConf
#   file         : model.py
#   file_relpath : src/termconf/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration document model.

The document is the root configuration object. It owns:

- the global settings (`GlobalSettings`), including the default profile name;
- the profiles (name -> `Profile`);
- the color schemes (name -> `ColorPalette`);
- the binding table (`termconf.input.bindings.BindingTable`);
- the provenance (``source``) and the diagnostics of the load that produced it.

Immutability:
    `Document` is frozen and only holds immutable values (frozen dataclasses,
    tuples and read-only mappings). The reader builds a `MutableDocument` and
    freezes it; a reload replaces the whole `Document`.

Contract:
    The default profile always exists. `Document` construction raises
    ``ValueError`` otherwise, and asking for an absent profile by name raises
    `ProfileNotFoundError`: both are programming errors, not recoverable
    configuration problems.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from termconf.config.codecs import (
    BoolCodec,
    DurationCodec,
    EnumCodec,
    IntCodec,
    ModifiersCodec,
    StrCodec,
    StrListCodec,
    StructCodec,
)
from termconf.config.colors import ColorPalette
from termconf.config.entry import entry
from termconf.config.keys import Toml
from termconf.config.logging import get_logger
from termconf.config.profile import Profile
from termconf.config.types import RenderingBackend, SelectionAction
from termconf.core.diagnostics import DiagnosticLog
from termconf.input.bindings import BindingTable, MutableBindingTable
from termconf.input.defaults import default_bindings
from termconf.input.modifiers import Modifier

if TYPE_CHECKING:
    from collections.abc import Mapping

    from termconf.config.logging import TermconfLogger
    from termconf.core.diagnostics import Diagnostic

logger: TermconfLogger = get_logger(__name__)

DEFAULT_PROFILE_NAME: Final[str] = "main"

DEFAULT_WORD_DELIMITERS: Final[str] = " /\\()\"'-.,:;<>~!@#$%^&*+=[]{}~?|│"


class ProfileNotFoundError(LookupError):
    """Raised when a profile is requested by a name the document does not define."""

    def __init__(self, name: str, known: tuple[str, ...]) -> None:
        super().__init__(f"Profile {name!r} not found (known: {', '.join(known) or 'none'})")
        self.name: str = name


@dataclass(frozen=True)
class ImagesConfig:
    """Inline image (Sixel) settings."""

    sixel_scrolling: bool = entry(True, doc="Enable Sixel scrolling mode.", codec=BoolCodec())
    sixel_register_count: int = entry(
        4096,
        doc="Number of Sixel color registers. Default: {default}.",
        codec=IntCodec(minimum=1, maximum=65536),
    )
    max_width: int = entry(
        0, doc="Maximum image width in pixels (0 means no limit).", codec=IntCodec(minimum=0)
    )
    max_height: int = entry(
        0, doc="Maximum image height in pixels (0 means no limit).", codec=IntCodec(minimum=0)
    )


@dataclass(frozen=True)
class RendererConfig:
    """Renderer settings."""

    backend: RenderingBackend = entry(
        RenderingBackend.DEFAULT,
        doc="Rendering backend (Default, OpenGL, Software). Default: {default}.",
        codec=EnumCodec(RenderingBackend),
    )
    tile_hashtable_slots: int = entry(
        4096,
        doc="Number of hash table slots of the glyph tile cache.",
        codec=IntCodec(minimum=1),
    )
    tile_cache_count: int = entry(
        4000,
        doc="Number of tiles the glyph cache can hold.",
        codec=IntCodec(minimum=1),
    )


@dataclass(frozen=True)
class GlobalSettings:
    """Document-level settings (top-level keys of the configuration document)."""

    default_profile: str = entry(
        DEFAULT_PROFILE_NAME,
        doc="Name of the profile used when none is requested. Default: {default}.",
        codec=StrCodec(),
        key=Toml.KEY_DEFAULT_PROFILE,
    )
    word_delimiters: str = entry(
        DEFAULT_WORD_DELIMITERS,
        doc="Characters that end a word when selecting by double click.",
        codec=StrCodec(),
    )
    read_buffer_size: int = entry(
        16384,
        doc="Size in bytes of each read from the PTY. Default: {default}.",
        codec=IntCodec(minimum=1),
    )
    pty_buffer_size: int = entry(
        1048576,
        doc="Size in bytes of the PTY buffer object. Default: {default}.",
        codec=IntCodec(minimum=1),
    )
    live_config: bool = entry(
        False,
        doc="Reload this file automatically when it changes on disk.",
        codec=BoolCodec(),
    )
    spawn_new_process: bool = entry(
        False,
        doc="Open new terminals in a new process instead of a new window.",
        codec=BoolCodec(),
    )
    reflow_on_resize: bool = entry(
        True, doc="Rewrap long lines when the terminal is resized.", codec=BoolCodec()
    )
    log_file_path: str = entry(
        "",
        doc="File that receives the terminal's own log output (empty: no log file).",
        codec=StrCodec(),
    )
    logging_mask: tuple[str, ...] = entry(
        (),
        doc=(
            "Log categories to enable, for example [\"raw_input\", \"raw_output\",\n"
            "\"invalid_output\"]. Default: none."
        ),
        codec=StrListCodec(),
    )
    early_exit_threshold: timedelta = entry(
        timedelta(milliseconds=6000),
        doc=(
            "Keep the window open if the shell exits within this many milliseconds.\n"
            "Default: {default}."
        ),
        codec=DurationCodec(),
    )
    bypass_mouse_protocol_modifier: Modifier = entry(
        Modifier.SHIFT,
        doc="Modifiers that bypass mouse reporting to the application. Default: {default}.",
        codec=ModifiersCodec(),
    )
    mouse_block_selection_modifier: Modifier = entry(
        Modifier.CONTROL,
        doc="Modifiers that turn a mouse selection into a block selection. Default: {default}.",
        codec=ModifiersCodec(),
    )
    on_mouse_select: SelectionAction = entry(
        SelectionAction.COPY_TO_SELECTION_CLIPBOARD,
        doc=(
            "What to do with text selected by mouse (Nothing, CopyToSelectionClipboard,\n"
            "CopyToClipboard). Default: {default}."
        ),
        codec=EnumCodec(SelectionAction),
    )
    images: ImagesConfig = entry(
        ImagesConfig(), doc="Inline images.", codec=StructCodec(ImagesConfig)
    )
    renderer: RendererConfig = entry(
        RendererConfig(), doc="Renderer.", codec=StructCodec(RendererConfig)
    )


def _default_profiles() -> Mapping[str, Profile]:
    return MappingProxyType({DEFAULT_PROFILE_NAME: Profile()})


def _default_color_schemes() -> Mapping[str, ColorPalette]:
    return MappingProxyType({Toml.DEFAULT_COLOR_SCHEME: ColorPalette()})


@dataclass(frozen=True)
class Document:
    """Immutable configuration document.

    Attributes:
        settings (GlobalSettings): Document-level settings.
        profiles (Mapping[str, Profile]): Profiles by name.
        color_schemes (Mapping[str, ColorPalette]): Color schemes by name.
        bindings (BindingTable): Input bindings (built-in plus document entries).
        source (str | None): Where the document was loaded from (not compared).
        diagnostics (tuple[Diagnostic, ...]): Problems recovered while loading
            (not compared).
    """

    settings: GlobalSettings = field(default_factory=GlobalSettings)
    profiles: Mapping[str, Profile] = field(default_factory=_default_profiles)
    color_schemes: Mapping[str, ColorPalette] = field(default_factory=_default_color_schemes)
    bindings: BindingTable = field(default_factory=default_bindings)
    source: str | None = field(default=None, compare=False)
    diagnostics: tuple[Diagnostic, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        if self.settings.default_profile not in self.profiles:
            raise ValueError(
                f"Default profile {self.settings.default_profile!r} is not defined"
            )

    @classmethod
    def defaults(cls) -> Document:
        """Return the all-default document.

        It has the built-in bindings, the built-in ``default`` color scheme and a
        single profile named ``main``.
        """
        return cls()

    @property
    def default_profile_name(self) -> str:
        """Name of the default profile."""
        return self.settings.default_profile

    def profile_names(self) -> tuple[str, ...]:
        """Return the profile names, default profile first, then in name order."""
        default: str = self.default_profile_name
        return (default, *sorted(n for n in self.profiles if n != default))

    def profile(self, name: str) -> Profile:
        """Return a profile by name.

        Raises:
            ProfileNotFoundError: If the document has no such profile.
        """
        try:
            return self.profiles[name]
        except KeyError:
            raise ProfileNotFoundError(name, self.profile_names()) from None

    def default_profile(self) -> Profile:
        """Return the default profile (always present)."""
        return self.profiles[self.default_profile_name]

    def thaw(self) -> MutableDocument:
        """Return a mutable copy of this document.

        Symmetry:
            Mirrors `MutableDocument.freeze`.
        """
        diagnostics = DiagnosticLog()
        diagnostics.items.extend(self.diagnostics)
        return MutableDocument(
            settings=self.settings,
            profiles=dict(self.profiles),
            color_schemes=dict(self.color_schemes),
            bindings=self.bindings.thaw(),
            source=self.source,
            diagnostics=diagnostics,
        )


@dataclass
class MutableDocument:
    """Mutable document builder used by the reader.

    Profiles and color schemes are immutable values themselves; only the
    containers (and the binding lists) are mutable here.
    """

    settings: GlobalSettings = field(default_factory=GlobalSettings)
    profiles: dict[str, Profile] = field(default_factory=lambda: {})
    color_schemes: dict[str, ColorPalette] = field(
        default_factory=lambda: {Toml.DEFAULT_COLOR_SCHEME: ColorPalette()}
    )
    bindings: MutableBindingTable = field(default_factory=lambda: default_bindings().thaw())
    source: str | None = None
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    def freeze(self) -> Document:
        """Freeze into an immutable `Document`.

        Raises:
            ValueError: If the default profile is missing.
        """
        logger.debug(
            "Freezing document: %d profile(s), %d color scheme(s), %d diagnostic(s)",
            len(self.profiles),
            len(self.color_schemes),
            len(self.diagnostics),
        )
        return Document(
            settings=self.settings,
            profiles=MappingProxyType(dict(self.profiles)),
            color_schemes=MappingProxyType(dict(self.color_schemes)),
            bindings=self.bindings.freeze(),
            source=self.source,
            diagnostics=self.diagnostics.freeze(),
        )
