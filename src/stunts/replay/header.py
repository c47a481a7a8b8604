from __future__ import annotations

import logging
from typing import Final

from construct import ConstructError

from ..errors import StructureTooSmallError, ValidationError
from ..fields import FieldSpec, build_struct, field_names
from .types import ReplayHeader, ReplayVersion
from .versioning import HEADER_SIZE, detect_version

logger = logging.getLogger(__name__)

# Car identifiers are kept verbatim: shorter names carry fill bytes, and a
# missing opponent is stored as 0xFF. Byte 0x15 is padding.
HEADER_FIELDS: Final[tuple[FieldSpec, ...]] = (
    FieldSpec("player_car", 0x00, 4, "ascii"),
    FieldSpec("player_color", 0x04, 1, "u8"),
    FieldSpec("player_transmission", 0x05, 1, "u8"),
    FieldSpec("opponent_type", 0x06, 1, "u8"),
    FieldSpec("opponent_car", 0x07, 4, "ascii"),
    FieldSpec("opponent_color", 0x0B, 1, "u8"),
    FieldSpec("opponent_transmission", 0x0C, 1, "u8"),
    FieldSpec("track_name", 0x0D, 8, "asciiz"),
)
HEADER_STRUCT = build_struct(HEADER_FIELDS, HEADER_SIZE)


def decode_header(data: bytes, version: ReplayVersion | None = None) -> ReplayHeader:
    """Decode the replay header.

    When ``version`` is omitted it is detected from ``data``, which then has to
    be a whole replay.
    """

    if len(data) < HEADER_SIZE:
        raise StructureTooSmallError("replay header", size=len(data), required=HEADER_SIZE)
    if version is None:
        version = detect_version(data)
    try:
        raw = HEADER_STRUCT.parse(bytes(data[:HEADER_SIZE]))
    except ConstructError as exc:  # pragma: no cover
        raise ValidationError(f"failed to parse replay header: {exc}") from exc

    header = ReplayHeader(
        version=ReplayVersion(version),
        **{name: raw[name] for name in field_names(HEADER_STRUCT)},
    )
    logger.debug(
        "replay header: car=%r opponent_type=%d track=%r",
        header.player_car,
        header.opponent_type,
        header.track_name,
    )
    return header
