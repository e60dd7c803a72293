# topmark:header:start
#
#   project      : TermConf
#   file         : __init__.py
#   file_relpath : src/termconf/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model, document reader/writer and the active-document store.

Submodules are imported explicitly (``termconf.config.model``,
``termconf.config.reader``, ...); this package stays import-light because
``termconf.config.logging`` is used by every layer, including ``termconf.input``.
"""

from __future__ import annotations
