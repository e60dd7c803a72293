# topmark:header:start
#
#   project      : TermConf
#   file         : version.py
#   file_relpath : src/termconf/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermConf `version` command.

Prints the TermConf version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termconf.cli.cmd_common import get_console
from termconf.cli.options import get_effective_verbosity
from termconf.constants import TERMCONF_VERSION

if TYPE_CHECKING:
    from termconf.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of TermConf.",
)
def version_command() -> None:
    """Show the current version of TermConf."""
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("TermConf version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(TERMCONF_VERSION, bold=True)}")
    else:
        console.print(console.styled(TERMCONF_VERSION, bold=True))
