# topmark:header:start
#
#   project      : TermConf
#   file         : __init__.py
#   file_relpath : src/termconf/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermConf package.

TermConf is the configuration model and input binding resolver of a terminal
emulator front end. It loads a TOML configuration document into immutable
profiles, color schemes and bindings, resolves input events to action lists, and
renders fully commented configuration documents. It exposes both a CLI and a
small typed API.
"""

from __future__ import annotations
