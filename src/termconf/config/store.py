# topmark:header:start
#
#   project      : TermConf
#   file         : store.py
#   file_relpath : src/termconf/config/store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Active configuration document and live reload.

`DocumentStore` owns the one mutable reference of the configuration layer: the
active `Document`. Readers take a snapshot through `DocumentStore.document` and
work on it without locking; everything reachable from a document is immutable.

A reload builds a complete new document first and only then swaps the reference.
Loading and swapping happen under one lock, so concurrent reloads serialize and
the document published last is the one loaded last. A resolution that started on
the old snapshot finishes on it; the next one sees the new document.
"""

from __future__ import annotations

from pathlib import Path
from threading import RLock
from typing import TYPE_CHECKING

from termconf.config.logging import get_logger
from termconf.config.reader import load_document_file

if TYPE_CHECKING:
    from collections.abc import Callable

    from termconf.config.logging import TermconfLogger
    from termconf.config.model import Document
    from termconf.config.profile import Profile
    from termconf.input.actions import Action
    from termconf.input.match_modes import MatchMode
    from termconf.input.modifiers import Modifier
    from termconf.input.triggers import Key, MouseButton

logger: TermconfLogger = get_logger(__name__)


class DocumentStore:
    """Holds the active document loaded from a configuration file.

    Args:
        path (Path | str): Configuration file.
        loader (Callable[[Path], Document]): Document loader; must not raise for
            document content (defaults to `load_document_file`).
    """

    def __init__(
        self,
        path: Path | str,
        *,
        loader: Callable[[Path], Document] = load_document_file,
    ) -> None:
        self._path: Path = Path(path)
        self._loader: Callable[[Path], Document] = loader
        self._lock = RLock()
        self._listeners: list[Callable[[Document], None]] = []
        self._mtime: int | None = self._stat_mtime()
        self._document: Document = loader(self._path)

    @property
    def path(self) -> Path:
        """The configuration file this store loads."""
        return self._path

    @property
    def document(self) -> Document:
        """The active document snapshot."""
        return self._document

    def subscribe(self, listener: Callable[[Document], None]) -> Callable[[], None]:
        """Call ``listener`` with every newly published document.

        Returns:
            Callable[[], None]: A function that removes the subscription.
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _stat_mtime(self) -> int | None:
        try:
            return self._path.stat().st_mtime_ns
        except OSError as e:
            logger.debug("Cannot stat %s: %s", self._path, e)
            return None

    def reload(self) -> Document:
        """Load the file again and publish the result as the active document.

        Returns:
            Document: The newly published document.
        """
        with self._lock:
            mtime: int | None = self._stat_mtime()
            document: Document = self._loader(self._path)
            self._document = document
            self._mtime = mtime
            listeners: list[Callable[[Document], None]] = list(self._listeners)
        logger.info("Reloaded configuration from %s", self._path)
        for listener in listeners:
            listener(document)
        return document

    def poll(self) -> bool:
        """Reload if live reload is enabled and the file changed on disk.

        Meant to be called from the owner's watcher or timer callback.

        Returns:
            bool: True if a new document was published.
        """
        if not self._document.settings.live_config:
            return False
        mtime: int | None = self._stat_mtime()
        if mtime == self._mtime:
            return False
        logger.debug("%s changed on disk (mtime %s -> %s)", self._path, self._mtime, mtime)
        self.reload()
        return True

    def profile(self, name: str | None = None) -> Profile:
        """Return a profile of the active document (the default one if ``name`` is None)."""
        document: Document = self._document
        return document.default_profile() if name is None else document.profile(name)

    def resolve_key(
        self, modifiers: Modifier, key: Key, flags: MatchMode
    ) -> tuple[Action, ...] | None:
        """Resolve a named-key event against the active document."""
        return self._document.bindings.resolve_key(modifiers, key, flags)

    def resolve_char(
        self, modifiers: Modifier, char: str, flags: MatchMode
    ) -> tuple[Action, ...] | None:
        """Resolve a character event against the active document."""
        return self._document.bindings.resolve_char(modifiers, char, flags)

    def resolve_mouse(
        self, modifiers: Modifier, button: MouseButton, flags: MatchMode
    ) -> tuple[Action, ...] | None:
        """Resolve a mouse event against the active document."""
        return self._document.bindings.resolve_mouse(modifiers, button, flags)
