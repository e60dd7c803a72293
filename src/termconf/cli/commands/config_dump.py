# topmark:header:start
#
#   project      : TermConf
#   file         : config_dump.py
#   file_relpath : src/termconf/cli/commands/config_dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermConf `config dump` command.

Loads a configuration document (recovering from any problem in its content) and
renders the effective document to stdout. Diagnostics go to stderr.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termconf.cli.cmd_common import emit_diagnostics, get_console, load_cli_document
from termconf.cli.options import get_effective_verbosity
from termconf.config.writer import render_document

if TYPE_CHECKING:
    from termconf.cli.console import ClickConsole
    from termconf.config.model import Document


@click.command(
    name="dump",
    help="Load PATH and print the effective configuration document.",
)
@click.argument("path", type=click.Path(dir_okay=False))
def config_dump_command(path: str) -> None:
    """Render the effective configuration loaded from ``path``."""
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console(ctx)

    document: Document = load_cli_document(path)
    if get_effective_verbosity(ctx) >= 0:
        emit_diagnostics(console, document.diagnostics)
    console.print(render_document(document), nl=False)
