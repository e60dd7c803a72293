# topmark:header:start
#
#   project      : TermConf
#   file         : test_store.py
#   file_relpath : tests/config/test_store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the active document store and live reload."""

from __future__ import annotations

import os
import threading
import time
from typing import TYPE_CHECKING

from tests.conftest import write_config
from termconf.config.model import Document
from termconf.config.store import DocumentStore
from termconf.input.actions import Action
from termconf.input.match_modes import MatchMode
from termconf.input.modifiers import Modifier
from termconf.input.triggers import Key

if TYPE_CHECKING:
    from pathlib import Path


def _touch_later(path: Path) -> None:
    """Move the file's modification time forward so a rewrite is always seen."""
    st = path.stat()
    os.utime(path, ns=(st.st_atime_ns, st.st_mtime_ns + 2_000_000_000))


def test_store_loads_on_construction(tmp_path: Path) -> None:
    path: Path = write_config(tmp_path, "[profiles.main]\nlogin_shell = true\n")
    store = DocumentStore(path)
    assert store.path == path
    assert store.profile().login_shell is True
    assert store.document.source == str(path)


def test_reload_publishes_new_snapshot(tmp_path: Path) -> None:
    path: Path = write_config(tmp_path, "")
    store = DocumentStore(path)
    before: Document = store.document
    received: list[Document] = []
    store.subscribe(received.append)

    write_config(tmp_path, "[[input_mapping]]\nkey = 'F4'\naction = 'Quit'\n")
    after: Document = store.reload()

    assert store.document is after
    assert received == [after]
    # the old snapshot is unchanged
    assert before.bindings.resolve_key(Modifier.NONE, Key.F4, MatchMode.NONE) is None
    assert store.resolve_key(Modifier.NONE, Key.F4, MatchMode.NONE) == (Action("Quit"),)


def test_unsubscribe(tmp_path: Path) -> None:
    store = DocumentStore(write_config(tmp_path, ""))
    received: list[Document] = []
    unsubscribe = store.subscribe(received.append)
    unsubscribe()
    store.reload()
    assert received == []


def test_poll_requires_live_config(tmp_path: Path) -> None:
    path: Path = write_config(tmp_path, "")
    store = DocumentStore(path)

    write_config(tmp_path, "[profiles.main]\nmaximized = true\n")
    _touch_later(path)

    assert store.poll() is False
    assert store.profile().maximized is False


def test_poll_reloads_changed_file(tmp_path: Path) -> None:
    path: Path = write_config(tmp_path, "live_config = true\n")
    store = DocumentStore(path)
    assert store.poll() is False

    write_config(tmp_path, "live_config = true\n[profiles.main]\nmaximized = true\n")
    _touch_later(path)

    assert store.poll() is True
    assert store.profile("main").maximized is True
    assert store.poll() is False


def test_broken_rewrite_falls_back_to_defaults(tmp_path: Path) -> None:
    path: Path = write_config(tmp_path, "[profiles.main]\nmaximized = true\n")
    store = DocumentStore(path)

    write_config(tmp_path, "[profiles.main\n")
    document: Document = store.reload()

    assert document.default_profile().maximized is False
    assert document.diagnostics[0].level.value == "error"


def test_custom_loader(tmp_path: Path) -> None:
    calls: list[Path] = []

    def loader(p: Path) -> Document:
        calls.append(p)
        return Document.defaults()

    store = DocumentStore(tmp_path / "unused.toml", loader=loader)
    store.reload()
    assert calls == [tmp_path / "unused.toml"] * 2
    assert store.resolve_char(Modifier.CONTROL, "0", MatchMode.NONE) == (Action("ResetFontSize"),)


def test_concurrent_reloads_do_not_overlap(tmp_path: Path) -> None:
    guard = threading.Lock()
    active: list[int] = [0]
    peak: list[int] = [0]
    loaded: list[Document] = []

    def loader(p: Path) -> Document:
        with guard:
            active[0] += 1
            peak[0] = max(peak[0], active[0])
        time.sleep(0.05)
        document = Document.defaults()
        with guard:
            loaded.append(document)
            active[0] -= 1
        return document

    store = DocumentStore(tmp_path / "unused.toml", loader=loader)
    threads = [threading.Thread(target=store.reload) for _ in range(3)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert peak[0] == 1
    assert len(loaded) == 4
    assert store.document is loaded[-1]
