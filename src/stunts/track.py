"""Track files (``.TRK``).

A track is a fixed 1802-byte record with no magic number or version field:

  - 0x000  layout   900 bytes, 30x30 road and scenery grid
  - 0x384  horizon  1 byte, scenery theme
  - 0x385  terrain  900 bytes, 30x30 elevation and surface grid
  - 0x709  reserved 1 byte, 0 in files saved by the game

Third-party editors write a non-zero reserved byte and append their own
metadata after the record.  Both are kept so that a track can be written back
unchanged, but neither is part of the canonical encoding that identifies a
track (and that its hash is computed over).
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, field, replace
from enum import IntEnum
from pathlib import Path
from typing import Final

from construct import ConstructError

from .errors import StructureTooSmallError, ValidationError
from .fields import FieldSpec, build_struct
from .source import read_source

logger = logging.getLogger(__name__)

SIZE_LAYOUT: Final[int] = 900
SIZE_TERRAIN: Final[int] = 900
TRACK_RECORD_SIZE: Final[int] = 0x70A
# Headroom for editor trailers; anything bigger is not a track file.
TRACK_MAX_FILE_SIZE: Final[int] = TRACK_RECORD_SIZE + 256
TRACK_NAME_LENGTH: Final[int] = 8

RESERVED_DEFAULT: Final[int] = 0


class Horizon(IntEnum):
    DESERT = 0
    TROPICAL = 1
    ALPINE = 2
    CITY = 3
    COUNTRY = 4


HORIZON_DESERT: Final[int] = int(Horizon.DESERT)
HORIZON_TROPICAL: Final[int] = int(Horizon.TROPICAL)
HORIZON_ALPINE: Final[int] = int(Horizon.ALPINE)
HORIZON_CITY: Final[int] = int(Horizon.CITY)
HORIZON_COUNTRY: Final[int] = int(Horizon.COUNTRY)

_HORIZON_VALUES: Final[frozenset[int]] = frozenset(int(value) for value in Horizon)

TRACK_FIELDS: Final[tuple[FieldSpec, ...]] = (
    FieldSpec("layout", 0x000, SIZE_LAYOUT, "bytes"),
    FieldSpec("horizon", 0x384, 1, "u8"),
    FieldSpec("terrain", 0x385, SIZE_TERRAIN, "bytes"),
    FieldSpec("reserved", 0x709, 1, "u8"),
)
TRACK_RECORD = build_struct(TRACK_FIELDS, TRACK_RECORD_SIZE)


@dataclass(frozen=True, slots=True)
class Track:
    layout: bytes
    terrain: bytes
    horizon: int = HORIZON_DESERT
    reserved: int = RESERVED_DEFAULT
    appended: bytes = b""
    # Out-of-band label (file name or replay header); not part of the encoding.
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        for attr in ("layout", "terrain", "appended"):
            if not isinstance(getattr(self, attr), (bytes, bytearray, memoryview)):
                raise TypeError(f"track {attr} must be bytes, got {type(getattr(self, attr)).__name__}")
        layout = bytes(self.layout)
        terrain = bytes(self.terrain)
        if len(layout) != SIZE_LAYOUT:
            raise ValueError(f"track layout must be {SIZE_LAYOUT} bytes, got {len(layout)}")
        if len(terrain) != SIZE_TERRAIN:
            raise ValueError(f"track terrain must be {SIZE_TERRAIN} bytes, got {len(terrain)}")
        object.__setattr__(self, "layout", layout)
        object.__setattr__(self, "terrain", terrain)
        object.__setattr__(self, "horizon", int(self.horizon) & 0xFF)
        object.__setattr__(self, "reserved", int(self.reserved) & 0xFF)
        object.__setattr__(self, "appended", bytes(self.appended))
        object.__setattr__(self, "name", str(self.name))

    @classmethod
    def empty(cls, horizon: int = HORIZON_DESERT) -> "Track":
        """Return a track with blank layout and flat terrain."""

        return cls(
            layout=bytes(SIZE_LAYOUT),
            terrain=bytes(SIZE_TERRAIN),
            horizon=horizon,
        )

    @property
    def is_standard_horizon(self) -> bool:
        return self.horizon in _HORIZON_VALUES

    @property
    def horizon_name(self) -> str:
        if not self.is_standard_horizon:
            return "unknown"
        return Horizon(self.horizon).name.lower()

    def encode(self) -> bytes:
        """Return the track as stored, reserved byte and trailing data included."""

        return _build_record(self, reserved=self.reserved) + self.appended

    def canonical(self) -> bytes:
        """Return the 1802 bytes the game itself would save for this track."""

        return _build_record(self, reserved=RESERVED_DEFAULT)

    def hash(self) -> str:
        """SHA-1 hex digest of the canonical encoding."""

        return hashlib.sha1(self.canonical()).hexdigest()

    def normalize(self) -> "Track":
        return replace(self, reserved=RESERVED_DEFAULT, appended=b"")

    def truncate(self) -> "Track":
        return replace(self, appended=b"")

    def with_name(self, name: str) -> "Track":
        return replace(self, name=name)


def _build_record(track: Track, *, reserved: int) -> bytes:
    return TRACK_RECORD.build(
        {
            "layout": track.layout,
            "horizon": int(track.horizon),
            "terrain": track.terrain,
            "reserved": int(reserved) & 0xFF,
        }
    )


def decode_track(data: bytes, *, name: str = "") -> Track:
    data = bytes(data)
    if len(data) < TRACK_RECORD_SIZE:
        raise StructureTooSmallError("track data", size=len(data), required=TRACK_RECORD_SIZE)
    try:
        raw = TRACK_RECORD.parse(data)
    except ConstructError as exc:  # pragma: no cover
        raise ValidationError(f"failed to parse track record: {exc}") from exc

    track = Track(
        layout=raw.layout,
        terrain=raw.terrain,
        horizon=raw.horizon,
        reserved=raw.reserved,
        appended=data[TRACK_RECORD_SIZE:],
        name=name,
    )
    if not track.is_standard_horizon:
        logger.info("track %r uses non-standard horizon %d", name, track.horizon)
    if track.reserved != RESERVED_DEFAULT:
        logger.info("track %r has non-standard reserved byte %#04x", name, track.reserved)
    if track.appended:
        logger.info("track %r carries %d bytes of appended data", name, len(track.appended))
    return track


def encode_track(track: Track) -> bytes:
    return track.encode()


def track_name_from_path(path: str | Path) -> str:
    return Path(path).stem.upper()[:TRACK_NAME_LENGTH]


def load_track(path: str | Path, *, max_size: int = TRACK_MAX_FILE_SIZE) -> Track:
    data = read_source(path, kind="track", min_size=TRACK_RECORD_SIZE, max_size=max_size)
    return decode_track(data, name=track_name_from_path(path))
