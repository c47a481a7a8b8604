from __future__ import annotations

import struct

import pytest

from stunts import SizeOutOfRangeError, UnrecognizedFormatError
from stunts.replay import MAX_SIZE, MIN_SIZE, ReplayVersion, detect_version, events_offset, track_offset


def test_size_limits() -> None:
    assert MIN_SIZE == 0x18 + 0x70A
    assert MAX_SIZE == 0x3FFF


def test_detect_version_1_0(make_replay_bytes) -> None:
    data = make_replay_bytes(version="1.0", events=b"\x00" * 200)

    assert detect_version(data) is ReplayVersion.V1_0


def test_detect_version_1_1(make_replay_bytes) -> None:
    data = make_replay_bytes(version="1.1", events=b"\x00" * 200, granularity=10)

    assert detect_version(data) is ReplayVersion.V1_1


def test_detect_version_at_minimum_size(make_replay_bytes) -> None:
    data = make_replay_bytes(version="1.0", events=b"")

    assert len(data) == MIN_SIZE
    assert detect_version(data) is ReplayVersion.V1_0


def test_detect_version_too_small(make_replay_bytes) -> None:
    data = make_replay_bytes(version="1.0", events=b"")[:-1]

    with pytest.raises(SizeOutOfRangeError, match=f"too small: {MIN_SIZE - 1} < {MIN_SIZE}") as excinfo:
        detect_version(data)

    assert excinfo.value.size == MIN_SIZE - 1
    assert excinfo.value.minimum == MIN_SIZE


def test_detect_version_short_text() -> None:
    with pytest.raises(SizeOutOfRangeError, match="too small"):
        detect_version(b"this is not valid replay data")


def test_detect_version_too_large() -> None:
    data = b"x" * (MAX_SIZE + 10)

    with pytest.raises(SizeOutOfRangeError, match=f"too large: {MAX_SIZE + 10} > {MAX_SIZE}"):
        detect_version(data)


def test_detect_version_unrecognized() -> None:
    with pytest.raises(UnrecognizedFormatError, match="invalid"):
        detect_version(b"x" * MIN_SIZE)


def test_detect_version_prefers_1_1_when_both_match(make_replay_bytes) -> None:
    data = bytearray(make_replay_bytes(version="1.1", events=b"\x00" * 30))
    # Make the 1.0 length field agree as well: variable size minus 0x18.
    struct.pack_into("<H", data, 0x16, 32)

    assert detect_version(bytes(data)) is ReplayVersion.V1_1


def test_offsets_per_version() -> None:
    assert track_offset(ReplayVersion.V1_0) == 0x18
    assert track_offset(ReplayVersion.V1_1) == 0x1A
    assert events_offset(ReplayVersion.V1_0) == 0x18 + 0x70A
    assert events_offset(ReplayVersion.V1_1) == 0x1A + 0x70A
