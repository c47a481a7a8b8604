"""Replay wire-version detection.

Replays carry no version byte.  The two versions differ only in the size of
the recording header that sits between the 0x16-byte replay header and the
embedded track, so the version is recovered from the buffer size and the
16-bit length field each version would store at 0x16:

  - 1.0: ``u16 length`` at 0x16, track at 0x18
  - 1.1: ``u16 granularity, u16 length`` at 0x16, track at 0x1A
"""

from __future__ import annotations

import logging
from typing import Final

from ..errors import SizeOutOfRangeError, UnrecognizedFormatError
from ..fields import FieldSpec, build_struct
from ..track import TRACK_RECORD_SIZE
from .types import ReplayVersion

logger = logging.getLogger(__name__)

HEADER_SIZE: Final[int] = 0x16
RECORDING_HEADER_OFFSET: Final[int] = HEADER_SIZE

TRACK_OFFSETS: Final[dict[ReplayVersion, int]] = {
    ReplayVersion.V1_0: 0x18,
    ReplayVersion.V1_1: 0x1A,
}

MIN_SIZE: Final[int] = TRACK_OFFSETS[ReplayVersion.V1_0] + TRACK_RECORD_SIZE
MAX_SIZE: Final[int] = 0x3FFF

VERSION_PROBE_FIELDS: Final[tuple[FieldSpec, ...]] = (
    FieldSpec("length_v1_0", 0, 2, "u16le"),
    FieldSpec("length_v1_1", 2, 2, "u16le"),
)
VERSION_PROBE = build_struct(VERSION_PROBE_FIELDS, 4)


def track_offset(version: ReplayVersion) -> int:
    return TRACK_OFFSETS[ReplayVersion(version)]


def events_offset(version: ReplayVersion) -> int:
    return track_offset(version) + TRACK_RECORD_SIZE


def detect_version(data: bytes) -> ReplayVersion:
    size = len(data)
    if size < MIN_SIZE:
        raise SizeOutOfRangeError(
            f"the replay data is too small: {size} < {MIN_SIZE}",
            size=size,
            minimum=MIN_SIZE,
            maximum=MAX_SIZE,
        )
    if size > MAX_SIZE:
        raise SizeOutOfRangeError(
            f"the replay data is too large: {size} > {MAX_SIZE}",
            size=size,
            minimum=MIN_SIZE,
            maximum=MAX_SIZE,
        )

    probe = VERSION_PROBE.parse(bytes(data[RECORDING_HEADER_OFFSET : RECORDING_HEADER_OFFSET + 4]))
    variable_size = size - TRACK_RECORD_SIZE

    # 1.1 first: its header is two bytes longer.
    if int(probe.length_v1_1) == variable_size - TRACK_OFFSETS[ReplayVersion.V1_1]:
        version = ReplayVersion.V1_1
    elif int(probe.length_v1_0) == variable_size - TRACK_OFFSETS[ReplayVersion.V1_0]:
        version = ReplayVersion.V1_0
    else:
        raise UnrecognizedFormatError("the replay data is invalid: size matches no known replay version")

    logger.debug("detected replay version %s (%d bytes)", version.value, size)
    return version
