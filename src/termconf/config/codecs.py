# topmark:header:start
#
#   project      : TermConf
#   file         : codecs.py
#   file_relpath : src/termconf/config/codecs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type-directed value codecs for configuration fields.

Each kind of field value (scalar, duration, boxed quantity, enum, modifier set,
nested struct, collection, and the font/color kinds defined next to their types)
has one `Codec` that:

- ``decode``: extracts a value from the parsed TOML document, on top of the
  field's current value;
- ``encode``: turns a value into its plain TOML representation;
- ``describe``: formats a value for humans (documentation and diagnostics).

Failure model:
    ``decode`` raises `FieldError` for any value it cannot accept. `apply_table`
    catches it per field, records a warning in the load's `DiagnosticLog` and keeps
    the field's previous value, so one bad value never affects its siblings.
"""

from __future__ import annotations

import dataclasses
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

import tomlkit

from termconf.config.entry import entries
from termconf.config.keys import Toml
from termconf.config.logging import get_logger
from termconf.input.modifiers import Modifier, format_modifiers, parse_modifiers

if TYPE_CHECKING:
    from collections.abc import Mapping

    from termconf.config.colors import ColorPalette
    from termconf.config.logging import TermconfLogger
    from termconf.core.diagnostics import DiagnosticLog

logger: TermconfLogger = get_logger(__name__)

T = TypeVar("T")
E = TypeVar("E", bound=Enum)
S = TypeVar("S")


class FieldError(ValueError):
    """A single configuration value could not be accepted."""


def expected(what: str, where: str, value: object) -> FieldError:
    """Build the standard type-mismatch `FieldError`."""
    return FieldError(f"Expected {what} in {where}, got {type(value).__name__}: {value!r}")


@dataclass
class LoadContext:
    """Per-load state shared by all codecs.

    Attributes:
        diagnostics (DiagnosticLog): Collects field-level warnings.
        color_schemes (Mapping[str, ColorPalette]): Color schemes known so far, used
            to resolve scheme names referenced by profiles.
    """

    diagnostics: DiagnosticLog
    color_schemes: Mapping[str, ColorPalette] = field(default_factory=lambda: {})

    def field_failure(self, error: FieldError) -> None:
        """Log and record a recovered field-level failure."""
        logger.warning("%s", error)
        self.diagnostics.add_warning(str(error))


def describe_value(value: object) -> str:
    """Format a configuration value for humans.

    Total over every value type used by the schema; falls back to ``str(value)``.
    """
    match value:
        case None:
            return Toml.VALUE_UNBOUNDED
        case bool():
            return "true" if value else "false"
        case timedelta():
            return str(value // timedelta(milliseconds=1))
        case Modifier():
            return format_modifiers(value) or "none"
        case Enum():
            return str(value.value)
        case str() | int() | float():
            return tomlkit.item(value).as_string()
        case tuple() | list():
            return "[" + ", ".join(describe_value(v) for v in value) + "]"
        case MappingProxyType() | dict():
            return "{" + ", ".join(f"{k} = {describe_value(v)}" for k, v in value.items()) + "}"
        case _:
            return str(value)


class Codec(ABC, Generic[T]):
    """Reads and formats one kind of configuration value."""

    # True for kinds rendered as their own ``[table]`` section.
    is_table: ClassVar[bool] = False

    @abstractmethod
    def decode(self, raw: Any, current: T, *, where: str, ctx: LoadContext) -> T:
        """Extract a value from its parsed TOML form.

        Args:
            raw (Any): The parsed TOML value.
            current (T): The field's value before this document is applied.
            where (str): Dotted location used in messages.
            ctx (LoadContext): Per-load state.

        Returns:
            T: The new value.

        Raises:
            FieldError: If the value cannot be accepted.
        """

    @abstractmethod
    def encode(self, value: T) -> Any:
        """Return the plain TOML representation of a value."""

    def describe(self, value: T) -> str:
        """Return a human-readable rendering of a value."""
        return describe_value(value)


# --- Scalars ---


class BoolCodec(Codec[bool]):
    """Boolean; no coercion from other types."""

    def decode(self, raw: Any, current: bool, *, where: str, ctx: LoadContext) -> bool:
        if isinstance(raw, bool):
            return raw
        raise expected("bool", where, raw)

    def encode(self, value: bool) -> Any:
        return value


def _check_range(
    value: float, minimum: float | None, maximum: float | None, where: str
) -> None:
    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        low: str = "-inf" if minimum is None else str(minimum)
        high: str = "inf" if maximum is None else str(maximum)
        raise FieldError(f"Value {value} in {where} is out of range [{low}, {high}]")


@dataclass(frozen=True)
class IntCodec(Codec[int]):
    """Integer; ``bool`` is rejected even though it subclasses ``int``."""

    minimum: int | None = None
    maximum: int | None = None

    def decode(self, raw: Any, current: int, *, where: str, ctx: LoadContext) -> int:
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise expected("int", where, raw)
        _check_range(raw, self.minimum, self.maximum, where)
        return raw

    def encode(self, value: int) -> Any:
        return value


@dataclass(frozen=True)
class FloatCodec(Codec[float]):
    """Floating-point number; integers are accepted and widened."""

    minimum: float | None = None
    maximum: float | None = None

    def decode(self, raw: Any, current: float, *, where: str, ctx: LoadContext) -> float:
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise expected("float", where, raw)
        if not math.isfinite(raw):
            raise FieldError(f"Value {raw} in {where} is not a finite number")
        _check_range(raw, self.minimum, self.maximum, where)
        return float(raw)

    def encode(self, value: float) -> Any:
        return value


class StrCodec(Codec[str]):
    """String, accepted as is."""

    def decode(self, raw: Any, current: str, *, where: str, ctx: LoadContext) -> str:
        if isinstance(raw, str):
            return raw
        raise expected("string", where, raw)

    def encode(self, value: str) -> Any:
        return value


# --- Quantities ---


class DurationCodec(Codec[timedelta]):
    """Duration written as a non-negative number of milliseconds."""

    def decode(self, raw: Any, current: timedelta, *, where: str, ctx: LoadContext) -> timedelta:
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise expected("milliseconds (int)", where, raw)
        if raw < 0:
            raise FieldError(f"Negative duration in {where}: {raw}")
        return timedelta(milliseconds=raw)

    def encode(self, value: timedelta) -> Any:
        return value // timedelta(milliseconds=1)


class LimitCodec(Codec["int | None"]):
    """Boxed quantity: a non-negative count, or ``None`` for unbounded.

    External forms: an integer ``>= 0``, the string ``"unbounded"`` or ``-1``.
    """

    def decode(
        self, raw: Any, current: int | None, *, where: str, ctx: LoadContext
    ) -> int | None:
        if isinstance(raw, str):
            if raw.strip().lower() == Toml.VALUE_UNBOUNDED:
                return None
            raise FieldError(f"Expected int or {Toml.VALUE_UNBOUNDED!r} in {where}, got {raw!r}")
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise expected(f"int or {Toml.VALUE_UNBOUNDED!r}", where, raw)
        if raw == -1:
            return None
        if raw < 0:
            raise FieldError(f"Negative limit in {where}: {raw}")
        return raw

    def encode(self, value: int | None) -> Any:
        return Toml.VALUE_UNBOUNDED if value is None else value


# --- Enumerations ---


class EnumCodec(Codec[E]):
    """Enum member by its token (case-insensitive on read)."""

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self._by_token: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}

    def decode(self, raw: Any, current: E, *, where: str, ctx: LoadContext) -> E:
        if not isinstance(raw, str):
            raise expected("string", where, raw)
        member: E | None = self._by_token.get(raw.strip().lower())
        if member is None:
            allowed: str = ", ".join(str(m.value) for m in self.enum_cls)
            raise FieldError(f"Invalid value for {where}: {raw!r} (allowed: {allowed})")
        return member

    def encode(self, value: E) -> Any:
        return value.value

    def __repr__(self) -> str:
        return f"EnumCodec({self.enum_cls.__name__})"


class ModifiersCodec(Codec[Modifier]):
    """Modifier set: ``"Control,Shift"`` or ``["Control", "Shift"]``."""

    def decode(self, raw: Any, current: Modifier, *, where: str, ctx: LoadContext) -> Modifier:
        try:
            return parse_modifiers(raw)
        except (TypeError, ValueError) as e:
            raise FieldError(f"Invalid modifiers in {where}: {e}") from e

    def encode(self, value: Modifier) -> Any:
        return format_modifiers(value)


# --- Nested structs ---


class StructCodec(Codec[S]):
    """Nested dataclass rendered as its own table, loaded field by field."""

    is_table: ClassVar[bool] = True

    def __init__(self, cls: type[S]) -> None:
        self.cls: type[S] = cls

    def decode(self, raw: Any, current: S, *, where: str, ctx: LoadContext) -> S:
        if not isinstance(raw, dict):
            raise expected("table", where, raw)
        return apply_table(current, raw, where=where, ctx=ctx)

    def encode(self, value: S) -> Any:
        return {e.key: e.codec.encode(getattr(value, f.name)) for f, e in entries(self.cls)}

    def __repr__(self) -> str:
        return f"StructCodec({self.cls.__name__})"


def apply_table(obj: S, table: Mapping[str, Any], *, where: str, ctx: LoadContext) -> S:
    """Apply a parsed TOML table on top of a dataclass instance.

    Each present key is decoded with its field's codec; a `FieldError` keeps that
    field at its current value. Unknown keys are ignored (debug log only).

    Args:
        obj (S): Starting value (defaults, or the inherited baseline).
        table (Mapping[str, Any]): Parsed TOML table.
        where (str): Dotted location of ``table`` ("" at top level).
        ctx (LoadContext): Per-load state.

    Returns:
        S: A new instance with the accepted values (``obj`` itself if nothing changed).
    """
    changes: dict[str, Any] = {}
    known: set[str] = set()
    for f, e in entries(type(obj)):
        known.add(e.key)
        if e.key not in table:
            continue
        loc: str = f"{where}.{e.key}" if where else e.key
        try:
            changes[f.name] = e.codec.decode(table[e.key], getattr(obj, f.name), where=loc, ctx=ctx)
        except FieldError as exc:
            ctx.field_failure(exc)

    for key in table:
        if key not in known:
            logger.debug("Ignoring unknown key %s", f"{where}.{key}" if where else key)

    if not changes:
        return obj
    logger.trace("Applied %d value(s) in %s", len(changes), where or "<top>")
    return dataclasses.replace(obj, **changes)  # type: ignore[type-var]


# --- Collections ---


class StrListCodec(Codec["tuple[str, ...]"]):
    """Array of strings, stored as a tuple."""

    def decode(
        self, raw: Any, current: tuple[str, ...], *, where: str, ctx: LoadContext
    ) -> tuple[str, ...]:
        if not isinstance(raw, list):
            raise expected("list of strings", where, raw)
        for item in raw:
            if not isinstance(item, str):
                raise expected("string item", where, item)
        return tuple(raw)

    def encode(self, value: tuple[str, ...]) -> Any:
        return list(value)


class StrMapCodec(Codec["Mapping[str, str]"]):
    """Table of string values (e.g. environment variables)."""

    def decode(
        self, raw: Any, current: Mapping[str, str], *, where: str, ctx: LoadContext
    ) -> Mapping[str, str]:
        if not isinstance(raw, dict):
            raise expected("table of strings", where, raw)
        out: dict[str, str] = {}
        for k, v in raw.items():
            if not isinstance(v, str):
                raise expected("string", f"{where}.{k}", v)
            out[k] = v
        return MappingProxyType(out)

    def encode(self, value: Mapping[str, str]) -> Any:
        return dict(value)


class DecModeMapCodec(Codec["Mapping[int, bool]"]):
    """Table mapping DEC private mode numbers to a frozen on/off state."""

    def decode(
        self, raw: Any, current: Mapping[int, bool], *, where: str, ctx: LoadContext
    ) -> Mapping[int, bool]:
        if not isinstance(raw, dict):
            raise expected("table of DEC modes", where, raw)
        out: dict[int, bool] = {}
        for k, v in raw.items():
            try:
                mode: int = int(k)
            except ValueError:
                raise FieldError(f"Invalid DEC mode number in {where}: {k!r}") from None
            if mode <= 0:
                raise FieldError(f"Invalid DEC mode number in {where}: {k!r}")
            if not isinstance(v, bool):
                raise expected("bool", f"{where}.{k}", v)
            out[mode] = v
        return MappingProxyType(dict(sorted(out.items())))

    def encode(self, value: Mapping[int, bool]) -> Any:
        return {str(k): v for k, v in sorted(value.items())}
