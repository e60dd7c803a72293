# topmark:header:start
#
#   project      : TermConf
#   file         : keys.py
#   file_relpath : src/termconf/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names that are not schema fields.

Field keys are attached to the dataclass fields themselves (see
`termconf.config.entry`); this module names the structural sections of the
document and the keys of ``[[input_mapping]]`` entries.

Renaming a key here is a breaking change of the configuration format.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by the configuration document."""

    # Global
    KEY_DEFAULT_PROFILE: Final[str] = "default_profile"

    # [profiles.<name>]
    SECTION_PROFILES: Final[str] = "profiles"

    # [color_schemes.<name>]
    SECTION_COLOR_SCHEMES: Final[str] = "color_schemes"
    DEFAULT_COLOR_SCHEME: Final[str] = "default"

    # [[input_mapping]]
    SECTION_INPUT_MAPPING: Final[str] = "input_mapping"

    KEY_MODS: Final[str] = "mods"
    KEY_KEY: Final[str] = "key"
    KEY_MOUSE: Final[str] = "mouse"
    KEY_MODE: Final[str] = "mode"
    KEY_ACTION: Final[str] = "action"

    # Color configuration variants
    KEY_LIGHT: Final[str] = "light"
    KEY_DARK: Final[str] = "dark"

    # Unbounded quantity marker
    VALUE_UNBOUNDED: Final[str] = "unbounded"

    @classmethod
    def structural_sections(cls) -> frozenset[str]:
        """Top-level keys that are not global setting fields."""
        return frozenset(
            {cls.SECTION_PROFILES, cls.SECTION_COLOR_SCHEMES, cls.SECTION_INPUT_MAPPING}
        )
