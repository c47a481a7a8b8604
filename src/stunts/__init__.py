from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("stunts-formats")
except PackageNotFoundError:  # pragma: no cover
    # Allow running from source (e.g. `PYTHONPATH=src`) without installed package metadata.
    __version__ = "0.0.0+dev"

from .errors import (
    LengthMismatchError,
    SizeOutOfRangeError,
    StructureTooSmallError,
    StuntsError,
    UnreadableSourceError,
    UnrecognizedFormatError,
    ValidationError,
)
from .replay import Car, Recording, Replay, ReplayVersion, decode_replay, load_replay
from .track import Horizon, Track, decode_track, encode_track, load_track

__all__ = [
    "Car",
    "Horizon",
    "LengthMismatchError",
    "Recording",
    "Replay",
    "ReplayVersion",
    "SizeOutOfRangeError",
    "StructureTooSmallError",
    "StuntsError",
    "Track",
    "UnreadableSourceError",
    "UnrecognizedFormatError",
    "ValidationError",
    "__version__",
    "decode_replay",
    "decode_track",
    "encode_track",
    "load_replay",
    "load_track",
]
