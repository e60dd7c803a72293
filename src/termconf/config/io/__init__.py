# topmark:header:start
#
#   project      : TermConf
#   file         : __init__.py
#   file_relpath : src/termconf/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers: parsing, loading and shape guards."""

from __future__ import annotations

from termconf.config.io.guards import is_any_list, is_toml_table
from termconf.config.io.loaders import parse_toml_text, read_toml_text
from termconf.config.io.types import TomlTable

__all__: list[str] = [
    "TomlTable",
    "is_any_list",
    "is_toml_table",
    "parse_toml_text",
    "read_toml_text",
]
