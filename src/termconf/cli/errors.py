# topmark:header:start
#
#   project      : TermConf
#   file         : errors.py
#   file_relpath : src/termconf/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TermConf CLI.

Raise these in CLI commands to signal errors with standardized messages and exit
codes. They print through the project console when one is present in the Click
context, and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from termconf.cli.exit_codes import ExitCode


class TermconfError(click.ClickException):
    """Base class for all TermConf CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized in `show()`)."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class TermconfUsageError(TermconfError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TermconfConfigError(TermconfError):
    """The configuration document has problems."""

    exit_code = ExitCode.CONFIG_ERROR


class TermconfFileNotFoundError(TermconfError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TermconfFileExistsError(TermconfError):
    """Error when an output file already exists and overwriting was not requested."""

    exit_code = ExitCode.CANNOT_CREATE


class TermconfIOError(TermconfError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR
