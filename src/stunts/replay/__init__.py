from __future__ import annotations

from .codec import build_replay, decode_replay, load_replay
from .header import HEADER_FIELDS, decode_header
from .recording import decode_recording, extract_track
from .types import (
    DEFAULT_GRANULARITY,
    TIME_UNITS_PER_SECOND,
    TRANSMISSION_AUTOMATIC,
    TRANSMISSION_MANUAL,
    Car,
    Opponent,
    Recording,
    Replay,
    ReplayHeader,
    ReplayVersion,
    opponent_name,
)
from .versioning import HEADER_SIZE, MAX_SIZE, MIN_SIZE, detect_version, events_offset, track_offset

__all__ = [
    "DEFAULT_GRANULARITY",
    "HEADER_FIELDS",
    "HEADER_SIZE",
    "MAX_SIZE",
    "MIN_SIZE",
    "TIME_UNITS_PER_SECOND",
    "TRANSMISSION_AUTOMATIC",
    "TRANSMISSION_MANUAL",
    "Car",
    "Opponent",
    "Recording",
    "Replay",
    "ReplayHeader",
    "ReplayVersion",
    "build_replay",
    "decode_header",
    "decode_recording",
    "decode_replay",
    "detect_version",
    "events_offset",
    "extract_track",
    "load_replay",
    "opponent_name",
    "track_offset",
]
