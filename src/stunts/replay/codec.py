from __future__ import annotations

import logging
from pathlib import Path

from ..source import read_source
from ..track import Track, decode_track
from .header import decode_header
from .recording import decode_recording, extract_track
from .types import Car, Recording, Replay, ReplayHeader
from .versioning import MAX_SIZE, MIN_SIZE, detect_version

logger = logging.getLogger(__name__)


def build_replay(header: ReplayHeader, track: Track, recording: Recording) -> Replay:
    car = Car(
        name=header.player_car,
        color=int(header.player_color),
        transmission=int(header.player_transmission),
    )
    opponent_car = None
    if header.has_opponent:
        opponent_car = Car(
            name=header.opponent_car,
            color=int(header.opponent_color),
            transmission=int(header.opponent_transmission),
        )
    return Replay(
        version=header.version,
        car=car,
        opponent_type=int(header.opponent_type),
        opponent_car=opponent_car,
        track=track.with_name(header.track_name),
        recording=recording,
    )


def decode_replay(data: bytes) -> Replay:
    data = bytes(data)
    version = detect_version(data)
    header = decode_header(data, version)
    track = decode_track(extract_track(data, version))
    recording = decode_recording(data, version)
    replay = build_replay(header, track, recording)
    logger.debug(
        "decoded replay: version=%s track=%r time=%d recorded=%d",
        replay.version.value,
        replay.track_name,
        replay.time,
        replay.recorded_time,
    )
    return replay


def load_replay(path: str | Path, *, max_size: int = MAX_SIZE) -> Replay:
    data = read_source(path, kind="replay", min_size=MIN_SIZE, max_size=min(int(max_size), MAX_SIZE))
    return decode_replay(data)
