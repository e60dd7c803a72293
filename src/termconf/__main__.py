# topmark:header:start
#
#   project      : TermConf
#   file         : __main__.py
#   file_relpath : src/termconf/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m termconf``."""

from __future__ import annotations

from termconf.cli.main import cli

if __name__ == "__main__":
    cli()
