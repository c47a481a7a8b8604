from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .replay.versioning import MAX_SIZE
from .track import TRACK_MAX_FILE_SIZE, TRACK_RECORD_SIZE

TRACK_MAX_SIZE_ENV = "STUNTS_TRACK_MAX_SIZE"
LOG_LEVEL_ENV = "STUNTS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    """File-size limits applied by the loaders before any bytes are decoded."""

    track_max_size: int = TRACK_MAX_FILE_SIZE
    replay_max_size: int = MAX_SIZE

    def __post_init__(self) -> None:
        if int(self.track_max_size) < TRACK_RECORD_SIZE:
            raise ValueError(f"track_max_size must be at least {TRACK_RECORD_SIZE}, got {self.track_max_size}")
        if not (0 < int(self.replay_max_size) <= MAX_SIZE):
            raise ValueError(f"replay_max_size must be in 1..{MAX_SIZE}, got {self.replay_max_size}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LoaderConfig":
        env = os.environ if environ is None else environ
        raw = env.get(TRACK_MAX_SIZE_ENV)
        if raw is None or not raw.strip():
            return cls()
        try:
            track_max_size = int(raw.strip(), 0)
        except ValueError as exc:
            raise ValueError(f"{TRACK_MAX_SIZE_ENV} must be an integer, got {raw!r}") from exc
        return cls(track_max_size=track_max_size)
