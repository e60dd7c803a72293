# topmark:header:start
#
#   project      : TermConf
#   file         : config_check.py
#   file_relpath : src/termconf/cli/commands/config_check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermConf `config check` command.

Loads a configuration document and reports every recovered problem. Exits with
``CONFIG_ERROR`` (78) when there is any warning or error, so the command can gate
configuration changes in scripts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termconf.cli.cmd_common import emit_diagnostics, get_console, load_cli_document
from termconf.cli.errors import TermconfConfigError
from termconf.cli.options import get_effective_verbosity

if TYPE_CHECKING:
    from termconf.cli.console import ClickConsole
    from termconf.config.model import Document
    from termconf.core.diagnostics import DiagnosticStats


@click.command(
    name="check",
    help="Load PATH and report configuration problems (exit 78 if any).",
)
@click.argument("path", type=click.Path(dir_okay=False))
def config_check_command(path: str) -> None:
    """Report the diagnostics of loading ``path``."""
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    document: Document = load_cli_document(path)
    stats: DiagnosticStats = emit_diagnostics(console, document.diagnostics)

    if stats.n_warning or stats.n_error:
        raise TermconfConfigError(
            f"{path}: {stats.n_error} error(s), {stats.n_warning} warning(s)"
        )

    if vlevel >= 0:
        profiles: str = ", ".join(document.profile_names())
        console.print(f"{path}: OK (profiles: {profiles})")
