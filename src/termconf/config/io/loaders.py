# topmark:header:start
#
#   project      : TermConf
#   file         : loaders.py
#   file_relpath : src/termconf/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse TOML configuration text and files.

Parsing is done with `tomlkit` and returned as plain ``dict`` structures. These
helpers never raise for bad input: they return the failure alongside an empty
table so the caller can record it and fall back to defaults.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.exceptions import TOMLKitError

from termconf.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from termconf.config.logging import TermconfLogger

    from .types import TomlTable

logger: TermconfLogger = get_logger(__name__)


def parse_toml_text(text: str) -> tuple[TomlTable, str | None]:
    """Parse TOML text into a plain dict.

    Args:
        text (str): TOML document text.

    Returns:
        tuple[TomlTable, str | None]: The parsed table and ``None``, or an empty
        table and a description of the parse failure.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
    except TomlkitParseError as e:
        return {}, f"Invalid TOML: {e}"
    except TOMLKitError as e:
        # Raised outside the parser proper, e.g. duplicate keys in an inline table.
        logger.debug("tomlkit rejected the document: %r", e)
        return {}, f"Invalid TOML: {e}"
    except (TypeError, ValueError) as e:
        return {}, f"Unexpected error while parsing TOML: {e}"
    if not isinstance(data_any, dict):
        return {}, f"Expected a TOML table at top level, got {type(data_any).__name__}"
    return cast("TomlTable", data_any), None


def read_toml_text(path: Path) -> tuple[str | None, str | None]:
    """Read a configuration file as UTF-8 text.

    Returns:
        tuple[str | None, str | None]: ``(text, None)`` on success, ``(None, reason)``
        when the file cannot be read or decoded.
    """
    try:
        return path.read_text(encoding="utf-8"), None
    except UnicodeDecodeError as e:
        return None, f"Cannot decode {path} as UTF-8: {e}"
    except OSError as e:
        return None, f"Cannot read {path}: {e}"

