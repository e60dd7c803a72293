# topmark:header:start
#
#   project      : TermConf
#   file         : entry.py
#   file_relpath : src/termconf/config/entry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed, self-documenting configuration fields.

Every schema field is a regular dataclass field carrying an `Entry` in its
metadata. The `Entry` pairs the field's external key with an immutable
documentation template and the codec that reads and formats its values. The
dataclass default is the field's built-in default; only instances change (the
reader produces new instances, it never mutates an `Entry`).

Example:
    ```python
    @dataclass(frozen=True)
    class HistoryConfig:
        limit: int | None = entry(1000, doc="Lines kept.", codec=LimitCodec())
    ```

`entries(cls)` returns the schema table of a class in declaration order; the
reader and the writer are both driven by it.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from functools import cache
from typing import TYPE_CHECKING, Any, Final, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from termconf.config.codecs import Codec

T = TypeVar("T")

ENTRY_METADATA_KEY: Final[str] = "termconf.entry"


@dataclass(frozen=True)
class Entry(Generic[T]):
    """Schema information attached to a configuration field.

    Attributes:
        key (str): External key in the configuration document. Empty until
            resolved against the field name by `entries`.
        doc (str): Documentation template. ``{default}`` is replaced by the
            formatted built-in default when the document is rendered.
        codec (Codec[T]): Reads and formats values of this field.
    """

    key: str
    doc: str
    codec: Codec[T]

    def render_doc(self, default: T) -> str:
        """Return the documentation with ``{default}`` filled in."""
        if "{default}" not in self.doc:
            return self.doc
        return self.doc.replace("{default}", self.codec.describe(default))


def entry(default: T, *, doc: str, codec: Codec[T], key: str = "") -> T:
    """Declare a configuration field with an immutable default value.

    Args:
        default (T): Built-in default value (must be hashable).
        doc (str): Documentation template.
        codec (Codec[T]): Codec for this field's values.
        key (str): External key; defaults to the attribute name.

    Returns:
        T: A `dataclasses.field` (typed as ``T`` for the benefit of type checkers).
    """
    return dataclasses.field(
        default=default,
        metadata={ENTRY_METADATA_KEY: Entry(key, doc, codec)},
    )


def entry_factory(
    factory: Callable[[], T], *, doc: str, codec: Codec[T], key: str = ""
) -> T:
    """Declare a configuration field whose default is built by ``factory``.

    Used for mapping defaults and for defaults that depend on the environment
    (e.g. the login shell).
    """
    return dataclasses.field(
        default_factory=factory,
        metadata={ENTRY_METADATA_KEY: Entry(key, doc, codec)},
    )


@cache
def entries(cls: type) -> tuple[tuple[dataclasses.Field[Any], Entry[Any]], ...]:
    """Return the schema table of a dataclass: ``(field, entry)`` in declaration order.

    Fields without an `Entry` are not part of the external schema and are skipped.
    """
    out: list[tuple[dataclasses.Field[Any], Entry[Any]]] = []
    for f in dataclasses.fields(cls):
        e: Entry[Any] | None = f.metadata.get(ENTRY_METADATA_KEY)
        if e is None:
            continue
        if not e.key:
            e = dataclasses.replace(e, key=f.name)
        out.append((f, e))
    return tuple(out)


def entry_values(obj: object) -> Iterator[tuple[Entry[Any], Any]]:
    """Yield ``(entry, current value)`` pairs of a dataclass instance."""
    for f, e in entries(type(obj)):
        yield e, getattr(obj, f.name)


def field_default(f: dataclasses.Field[Any]) -> Any:
    """Return the built-in default of a dataclass field.

    Raises:
        ValueError: If the field declares no default.
    """
    if f.default is not dataclasses.MISSING:
        return f.default
    if f.default_factory is not dataclasses.MISSING:
        return f.default_factory()
    raise ValueError(f"Field {f.name!r} has no default")
