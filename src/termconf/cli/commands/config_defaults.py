# topmark:header:start
#
#   project      : TermConf
#   file         : config_defaults.py
#   file_relpath : src/termconf/cli/commands/config_defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermConf `config defaults` command.

Prints the fully commented default configuration document to stdout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termconf.cli.cmd_common import get_console
from termconf.config.writer import render_defaults

if TYPE_CHECKING:
    from termconf.cli.console import ClickConsole


@click.command(
    name="defaults",
    help="Display the default configuration document.",
)
def config_defaults_command() -> None:
    """Print the default configuration document."""
    console: ClickConsole = get_console(click.get_current_context())
    console.print(render_defaults(), nl=False)
