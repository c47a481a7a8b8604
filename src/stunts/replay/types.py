from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Final

from ..track import Track

DEFAULT_GRANULARITY: Final[int] = 20
# Recording times are kept in hundredths of a second.
TIME_UNITS_PER_SECOND: Final[int] = 100

TRANSMISSION_MANUAL: Final[int] = 0
TRANSMISSION_AUTOMATIC: Final[int] = 1


class ReplayVersion(str, Enum):
    # Version A: 16-bit length only, granularity fixed at 20 samples per second.
    V1_0 = "1.0"
    # Version B: 16-bit granularity followed by 16-bit length.
    V1_1 = "1.1"


class Opponent(IntEnum):
    NONE = 0
    BERNIE = 1
    OTTO = 2
    JOE = 3
    CHERRY = 4
    HELEN = 5
    SKID = 6


_OPPONENT_VALUES: Final[frozenset[int]] = frozenset(int(value) for value in Opponent)


def opponent_name(opponent_type: int) -> str:
    if int(opponent_type) not in _OPPONENT_VALUES:
        return "Unknown"
    return Opponent(int(opponent_type)).name.title()


@dataclass(frozen=True, slots=True)
class Car:
    name: str
    color: int
    transmission: int

    @property
    def is_automatic(self) -> bool:
        return int(self.transmission) == TRANSMISSION_AUTOMATIC

    @property
    def transmission_name(self) -> str:
        return "automatic" if self.is_automatic else "manual"


@dataclass(frozen=True, slots=True)
class ReplayHeader:
    """Fields of the first 0x16 bytes of a replay, plus the detected version."""

    version: ReplayVersion
    player_car: str
    player_color: int
    player_transmission: int
    opponent_type: int
    opponent_car: str
    opponent_color: int
    opponent_transmission: int
    track_name: str

    @property
    def has_opponent(self) -> bool:
        return int(self.opponent_type) != int(Opponent.NONE)


@dataclass(frozen=True, slots=True)
class Recording:
    keyboard_events: bytes
    granularity: int = DEFAULT_GRANULARITY

    def __post_init__(self) -> None:
        granularity = int(self.granularity)
        if granularity <= 0:
            raise ValueError(f"granularity must be positive, got {granularity}")
        object.__setattr__(self, "granularity", granularity)
        object.__setattr__(self, "keyboard_events", bytes(self.keyboard_events))

    @property
    def length(self) -> int:
        return len(self.keyboard_events)

    @property
    def time(self) -> int:
        return self.length * TIME_UNITS_PER_SECOND // self.granularity

    def last_second(self) -> bytes:
        return self.keyboard_events[-self.granularity :]

    def seems_complete(self) -> bool:
        """True when nothing was pressed during the final second.

        The game records one idle second after the finish line.  A race abandoned
        while idling for its last second looks the same, so this is a heuristic.
        """

        return not self.last_second().strip(b"\x00")


@dataclass(frozen=True, slots=True)
class Replay:
    version: ReplayVersion
    car: Car
    opponent_type: int
    opponent_car: Car | None
    track: Track
    recording: Recording

    def __post_init__(self) -> None:
        has_opponent = int(self.opponent_type) != int(Opponent.NONE)
        if has_opponent != (self.opponent_car is not None):
            raise ValueError(
                f"opponent_car must be set iff opponent_type is non-zero (opponent_type={self.opponent_type})"
            )

    @property
    def has_opponent(self) -> bool:
        return self.opponent_car is not None

    @property
    def opponent_name(self) -> str:
        return opponent_name(self.opponent_type)

    @property
    def track_name(self) -> str:
        return self.track.name

    @property
    def is_incomplete(self) -> bool:
        return not self.recording.seems_complete()

    @property
    def recorded_time(self) -> int:
        return self.recording.time

    @property
    def time(self) -> int:
        """Driven time, without the idle second recorded after the finish line."""

        if self.recording.seems_complete():
            return self.recording.time - TIME_UNITS_PER_SECOND
        return self.recording.time
