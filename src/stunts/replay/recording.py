from __future__ import annotations

import logging
from typing import Final

from construct import ConstructError, Struct

from ..errors import LengthMismatchError, StructureTooSmallError, UnrecognizedFormatError, ValidationError
from ..fields import FieldSpec, build_struct
from ..track import TRACK_RECORD_SIZE
from .types import DEFAULT_GRANULARITY, Recording, ReplayVersion
from .versioning import RECORDING_HEADER_OFFSET, events_offset, track_offset

logger = logging.getLogger(__name__)

RECORDING_HEADERS: Final[dict[ReplayVersion, Struct]] = {
    ReplayVersion.V1_0: build_struct((FieldSpec("length", 0, 2, "u16le"),), 2),
    ReplayVersion.V1_1: build_struct(
        (
            FieldSpec("granularity", 0, 2, "u16le"),
            FieldSpec("length", 2, 2, "u16le"),
        ),
        4,
    ),
}


def extract_track(data: bytes, version: ReplayVersion) -> bytes:
    """Return the 1802-byte track record embedded in a replay."""

    start = track_offset(version)
    end = start + TRACK_RECORD_SIZE
    if len(data) < end:
        raise StructureTooSmallError("replay data", size=len(data), required=end)
    return bytes(data[start:end])


def decode_recording(data: bytes, version: ReplayVersion) -> Recording:
    version = ReplayVersion(version)
    start = events_offset(version)
    if len(data) < start:
        raise StructureTooSmallError("replay data", size=len(data), required=start)

    header_struct = RECORDING_HEADERS[version]
    try:
        raw = header_struct.parse(bytes(data[RECORDING_HEADER_OFFSET : RECORDING_HEADER_OFFSET + header_struct.sizeof()]))
    except ConstructError as exc:  # pragma: no cover
        raise ValidationError(f"failed to parse recording header: {exc}") from exc

    granularity = int(raw.get("granularity", DEFAULT_GRANULARITY))
    length = int(raw.length)
    keyboard_events = bytes(data[start:])

    if len(keyboard_events) != length:
        raise LengthMismatchError(expected=length, actual=len(keyboard_events))
    if granularity <= 0:
        raise UnrecognizedFormatError(f"invalid recording granularity: {granularity}")

    logger.debug("recording: version=%s granularity=%d length=%d", version.value, granularity, length)
    return Recording(keyboard_events=keyboard_events, granularity=granularity)
