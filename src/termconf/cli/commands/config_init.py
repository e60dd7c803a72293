# topmark:header:start
#
#   project      : TermConf
#   file         : config_init.py
#   file_relpath : src/termconf/cli/commands/config_init.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermConf `config init` command.

Writes the fully commented default configuration document to a file, as a
starting point for customization.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from termconf.cli.cmd_common import get_console
from termconf.cli.errors import TermconfFileExistsError, TermconfIOError
from termconf.cli.options import get_effective_verbosity
from termconf.config.logging import get_logger
from termconf.config.writer import render_defaults
from termconf.constants import DEFAULT_CONFIG_NAME

if TYPE_CHECKING:
    from termconf.cli.console import ClickConsole
    from termconf.config.logging import TermconfLogger

logger: TermconfLogger = get_logger(__name__)


@click.command(
    name="init",
    help=f"Write the default configuration document to PATH (default: {DEFAULT_CONFIG_NAME}).",
)
@click.argument(
    "path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_NAME,
    required=False,
)
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing file.")
def config_init_command(path: Path, force: bool) -> None:
    """Write the default configuration document.

    Args:
        path (Path): Output file.
        force (bool): Overwrite ``path`` if it exists.

    Raises:
        TermconfFileExistsError: If ``path`` exists and ``force`` is not set.
        TermconfIOError: If the file cannot be written.
    """
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console(ctx)

    if path.exists() and not force:
        raise TermconfFileExistsError(f"{path} already exists (use --force to overwrite)")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_defaults(), encoding="utf-8")
    except OSError as e:
        raise TermconfIOError(f"Cannot write {path}: {e}") from e

    logger.info("Wrote default configuration to %s", path)
    if get_effective_verbosity(ctx) >= 0:
        console.print(f"Wrote {console.styled(str(path), bold=True)}")
