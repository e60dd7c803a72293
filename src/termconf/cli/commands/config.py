# topmark:header:start
#
#   project      : TermConf
#   file         : config.py
#   file_relpath : src/termconf/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermConf `config` command group.

Subcommands for inspecting and scaffolding configuration documents:

  * ``termconf config defaults``: print the fully commented default document.
  * ``termconf config init``: write the default document to a file.
  * ``termconf config dump``: load a document and render it back.
  * ``termconf config check``: report the problems found while loading a document.
"""

from __future__ import annotations

import click

from termconf.cli.options import CONTEXT_SETTINGS

from .config_check import config_check_command
from .config_defaults import config_defaults_command
from .config_dump import config_dump_command
from .config_init import config_init_command


@click.group(
    name="config",
    help="Inspect and scaffold TermConf configuration documents.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands."""


config_command.add_command(config_defaults_command, name="defaults")
config_command.add_command(config_init_command, name="init")
config_command.add_command(config_dump_command, name="dump")
config_command.add_command(config_check_command, name="check")
