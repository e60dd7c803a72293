# topmark:header:start
#
#   project      : TermConf
#   file         : resolve.py
#   file_relpath : src/termconf/cli/commands/resolve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermConf `resolve` command.

Loads a configuration document and prints the actions bound to one input event:
a named key (``--key``), a character (``--char``) or a mouse button
(``--mouse``), with the given modifiers and active terminal modes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termconf.cli.cmd_common import emit_diagnostics, get_console, load_cli_document
from termconf.cli.errors import TermconfUsageError
from termconf.cli.options import get_effective_verbosity
from termconf.input.match_modes import parse_match_modes
from termconf.input.modifiers import format_modifiers, parse_modifiers
from termconf.input.triggers import Key, parse_key_trigger, parse_mouse_button

if TYPE_CHECKING:
    from termconf.cli.console import ClickConsole
    from termconf.config.model import Document
    from termconf.input.actions import Action
    from termconf.input.match_modes import MatchMode
    from termconf.input.modifiers import Modifier


@click.command(
    name="resolve",
    help="Show the actions bound to an input event in the document at PATH.",
)
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--key", "key", default=None, help="Named key, e.g. Enter or PageUp.")
@click.option("--char", "char", default=None, help="Single character, e.g. 'C'.")
@click.option("--mouse", "mouse", default=None, help="Mouse button, e.g. WheelUp.")
@click.option("--mods", default="", help="Active modifiers, e.g. 'Control,Shift'.")
@click.option("--modes", default="", help="Active terminal modes, e.g. 'Select|Alt'.")
def resolve_command(
    path: str,
    key: str | None,
    char: str | None,
    mouse: str | None,
    mods: str,
    modes: str,
) -> None:
    """Resolve one input event against a configuration document.

    Raises:
        TermconfUsageError: If not exactly one trigger is given, or a value is invalid.
    """
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console(ctx)

    given: int = sum(v is not None for v in (key, char, mouse))
    if given != 1:
        raise TermconfUsageError("Specify exactly one of --key, --char or --mouse.")

    try:
        modifiers: Modifier = parse_modifiers(mods)
        flags: MatchMode = parse_match_modes(modes)
    except ValueError as e:
        raise TermconfUsageError(str(e)) from e

    document: Document = load_cli_document(path)
    if get_effective_verbosity(ctx) > 0:
        emit_diagnostics(console, document.diagnostics)

    actions: tuple[Action, ...] | None
    trigger: str
    try:
        if key is not None:
            named = parse_key_trigger(key)
            if not isinstance(named, Key):
                raise ValueError(f"{key!r} is not a named key (use --char)")
            actions = document.bindings.resolve_key(modifiers, named, flags)
            trigger = named.value
        elif char is not None:
            if len(char) != 1:
                raise ValueError(f"--char expects a single character, got {char!r}")
            actions = document.bindings.resolve_char(modifiers, char, flags)
            trigger = repr(char)
        else:
            button = parse_mouse_button(mouse or "")
            actions = document.bindings.resolve_mouse(modifiers, button, flags)
            trigger = button.value
    except ValueError as e:
        raise TermconfUsageError(str(e)) from e

    if get_effective_verbosity(ctx) > 0:
        prefix: str = format_modifiers(modifiers)
        console.print(console.styled(f"{prefix + '+' if prefix else ''}{trigger}:", bold=True))

    if actions is None:
        console.print("no binding")
        return
    for action in actions:
        console.print(str(action))
