from __future__ import annotations

import struct
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

SIZE_MAP = 900


def pytest_configure(config: pytest.Config) -> None:
    # Ensure the local `src/` tree wins over any other editable install that may exist
    # (e.g. a different git worktree pointing at the same project).
    src_dir = Path(__file__).resolve().parents[1] / "src"
    src_str = str(src_dir)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


def build_track_bytes(
    layout_char: bytes = b"A",
    terrain_char: bytes = b"B",
    *,
    horizon: int = 3,
    reserved: int = 0,
    appended: bytes = b"",
) -> bytes:
    return layout_char * SIZE_MAP + bytes([horizon]) + terrain_char * SIZE_MAP + bytes([reserved]) + appended


def build_replay_bytes(
    *,
    version: str = "1.1",
    player_car: bytes = b"P962",
    player_color: int = 3,
    player_transmission: int = 0,
    opponent_type: int = 6,
    opponent_car: bytes = b"PMIN",
    opponent_color: int = 2,
    opponent_transmission: int = 1,
    track_name: bytes = b"DEFAULT",
    track: bytes | None = None,
    events: bytes = b"",
    granularity: int = 20,
    declared_length: int | None = None,
) -> bytes:
    header = (
        player_car
        + bytes([player_color, player_transmission, opponent_type])
        + opponent_car
        + bytes([opponent_color, opponent_transmission])
        + track_name.ljust(8, b"\x00")
        + b"\x00"
    )
    assert len(header) == 0x16
    length = len(events) if declared_length is None else declared_length
    if version == "1.0":
        recording_header = struct.pack("<H", length)
    else:
        recording_header = struct.pack("<HH", granularity, length)
    if track is None:
        track = build_track_bytes()
    return header + recording_header + track + events


@pytest.fixture
def make_track_bytes() -> Callable[..., bytes]:
    return build_track_bytes


@pytest.fixture
def make_replay_bytes() -> Callable[..., bytes]:
    return build_replay_bytes
