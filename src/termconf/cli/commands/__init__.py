# topmark:header:start
#
#   project      : TermConf
#   file         : __init__.py
#   file_relpath : src/termconf/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermConf CLI subcommands."""

from __future__ import annotations
