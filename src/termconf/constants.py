# topmark:header:start
#
#   project      : TermConf
#   file         : constants.py
#   file_relpath : src/termconf/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermConf Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TERMCONF_VERSION: str = get_version("termconf")

DEFAULT_CONFIG_NAME: str = "termconf.toml"
