# topmark:header:start
#
#   project      : TermConf
#   file         : cmd_common.py
#   file_relpath : src/termconf/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from termconf.cli.errors import TermconfFileNotFoundError
from termconf.config.reader import load_document_file
from termconf.core.diagnostics import compute_diagnostic_stats

if TYPE_CHECKING:
    from collections.abc import Iterable

    from termconf.cli.console import ClickConsole
    from termconf.config.model import Document
    from termconf.core.diagnostics import Diagnostic, DiagnosticStats


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the Click context by the root group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def load_cli_document(path: str | Path) -> Document:
    """Load a configuration document named on the command line.

    A missing file is a CLI error; any problem with the file's content is recovered
    by the reader and reported through the document's diagnostics.

    Raises:
        TermconfFileNotFoundError: If ``path`` does not exist or is not a file.
    """
    p = Path(path)
    if not p.is_file():
        raise TermconfFileNotFoundError(f"No such configuration file: {p}")
    return load_document_file(p)


def emit_diagnostics(console: ClickConsole, diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Print diagnostics to stderr, colored by level.

    Returns:
        DiagnosticStats: Per-level counts of the printed diagnostics.
    """
    items: list[Diagnostic] = list(diagnostics)
    for d in items:
        text: str = str(d)
        if console.enable_color:
            text = d.level.color(text)
        click.echo(text, file=console.err, color=console.enable_color)
    return compute_diagnostic_stats(items)
