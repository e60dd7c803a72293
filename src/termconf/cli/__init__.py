# topmark:header:start
#
#   project      : TermConf
#   file         : __init__.py
#   file_relpath : src/termconf/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for TermConf."""

from __future__ import annotations
