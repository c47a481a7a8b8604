"""Fixed-offset record layouts.

Every fixed-size record in the track and replay formats is described as a
table of :class:`FieldSpec` rows (name, offset, width, kind).  ``build_struct``
turns a table into a ``construct.Struct``, filling unnamed gaps with padding,
and checks the table against the record size when the module defining it is
imported, so a typo in an offset fails loudly instead of shifting every field
after it.

Kinds:
  - ``u8``     unsigned byte
  - ``u16le``  little-endian unsigned 16-bit integer
  - ``bytes``  raw bytes
  - ``ascii``  fixed-width identifier, decoded verbatim (fill bytes kept)
  - ``asciiz`` NUL-padded text, trailing NULs stripped on decode

Text is decoded as latin-1 so that every byte value maps to a character;
the games store sentinel bytes such as 0xFF in identifier slots.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from construct import Byte, Bytes, Construct, ExprAdapter, Int16ul, Padding, Struct

TEXT_ENCODING: Final[str] = "latin-1"

_FIXED_WIDTHS: Final[dict[str, int]] = {
    "u8": 1,
    "u16le": 2,
}
_KINDS: Final[frozenset[str]] = frozenset(("u8", "u16le", "bytes", "ascii", "asciiz"))


@dataclass(frozen=True, slots=True)
class FieldSpec:
    name: str
    offset: int
    width: int
    kind: str = "bytes"

    @property
    def end(self) -> int:
        return int(self.offset) + int(self.width)


def _text(width: int, *, strip_nul: bool) -> Construct:
    def _decode(obj: bytes, ctx: object) -> str:
        raw = bytes(obj)
        if strip_nul:
            raw = raw.rstrip(b"\x00")
        return raw.decode(TEXT_ENCODING)

    def _encode(obj: str, ctx: object) -> bytes:
        return str(obj).encode(TEXT_ENCODING)[:width].ljust(width, b"\x00")

    return ExprAdapter(Bytes(width), _decode, _encode)


def _subcon(entry: FieldSpec) -> Construct:
    kind = entry.kind
    if kind == "u8":
        return Byte
    if kind == "u16le":
        return Int16ul
    if kind == "bytes":
        return Bytes(int(entry.width))
    if kind == "ascii":
        return _text(int(entry.width), strip_nul=False)
    return _text(int(entry.width), strip_nul=True)


def build_struct(fields: Sequence[FieldSpec], size: int) -> Struct:
    """Build a construct ``Struct`` covering exactly ``size`` bytes."""

    parts: list[Construct] = []
    cursor = 0
    for entry in fields:
        if entry.kind not in _KINDS:
            raise ValueError(f"field {entry.name!r}: unknown kind {entry.kind!r}")
        if entry.width <= 0:
            raise ValueError(f"field {entry.name!r}: width must be positive, got {entry.width}")
        fixed = _FIXED_WIDTHS.get(entry.kind)
        if fixed is not None and entry.width != fixed:
            raise ValueError(f"field {entry.name!r}: {entry.kind} is {fixed} bytes wide, got {entry.width}")
        if entry.offset < cursor:
            raise ValueError(f"field {entry.name!r} at {entry.offset:#x} overlaps the previous field (ends at {cursor:#x})")
        if entry.offset > cursor:
            parts.append(Padding(entry.offset - cursor))
        parts.append(entry.name / _subcon(entry))
        cursor = entry.end
    if cursor > size:
        raise ValueError(f"fields end at {cursor:#x}, past the record size {size:#x}")
    if cursor < size:
        parts.append(Padding(size - cursor))

    struct = Struct(*parts)
    if struct.sizeof() != size:  # pragma: no cover
        raise ValueError(f"struct size {struct.sizeof():#x} does not match record size {size:#x}")
    return struct


def field_names(struct: Struct) -> tuple[str, ...]:
    return tuple(sub.name for sub in struct.subcons if sub.name)
