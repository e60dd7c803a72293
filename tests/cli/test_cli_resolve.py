# topmark:header:start
#
#   project      : TermConf
#   file         : test_cli_resolve.py
#   file_relpath : tests/cli/test_cli_resolve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `resolve` against built-in and document bindings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli, parametrize, write_config

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return write_config(
        tmp_path,
        "\n".join(
            [
                "[[input_mapping]]",
                'mods = "Control"',
                'key = "1"',
                'action = "SwitchToTab"',
                "position = 1",
                "",
                "[[input_mapping]]",
                'mods = "Alt"',
                'key = "Enter"',
                'action = "ToggleTitleBar"',
                "",
            ]
        ),
    )


@mark_cli
@parametrize(
    ("args", "expected"),
    [
        (["--key", "Enter", "--mods", "Alt"], "ToggleFullscreen\nToggleTitleBar\n"),
        (["--char", "1", "--mods", "Control"], "SwitchToTab(position=1)\n"),
        (
            ["--char", "C", "--mods", "Control,Shift", "--modes", "Select"],
            "CopySelection\nCancelSelection\n",
        ),
        (["--mouse", "WheelUp"], "ScrollUp\n"),
        (["--mouse", "WheelUp", "--modes", "Alt"], "no binding\n"),
        (["--key", "F1"], "no binding\n"),
    ],
)
def test_resolve(config_path: Path, args: list[str], expected: str) -> None:
    result = run_cli(["--no-color", "resolve", str(config_path), *args])
    assert_SUCCESS(result)
    assert result.output == expected


@mark_cli
def test_resolve_verbose_names_the_event(config_path: Path) -> None:
    result = run_cli(
        ["--no-color", "-v", "resolve", str(config_path), "--key", "enter", "--mods", "alt"]
    )
    assert_SUCCESS(result)
    assert result.output.splitlines()[0] == "Alt+Enter:"


@mark_cli
@parametrize(
    "args",
    [
        [],
        ["--key", "Enter", "--char", "x"],
        ["--key", "x"],
        ["--char", "xy"],
        ["--mouse", "Thumb"],
        ["--key", "Enter", "--mods", "Hyper"],
        ["--key", "Enter", "--modes", "Bogus"],
    ],
)
def test_resolve_usage_errors(config_path: Path, args: list[str]) -> None:
    result = run_cli(["--no-color", "resolve", str(config_path), *args])
    assert_USAGE_ERROR(result)
