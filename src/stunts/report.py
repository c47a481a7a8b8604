from __future__ import annotations

from .replay import TIME_UNITS_PER_SECOND, Car, Replay
from .track import Track


def format_time(units: int) -> str:
    """Format hundredths of a second as seconds, e.g. ``8400`` -> ``84.00``."""

    value = int(units)
    sign = "-" if value < 0 else ""
    whole, frac = divmod(abs(value), TIME_UNITS_PER_SECOND)
    return f"{sign}{whole}.{frac:02d}"


def _car_line(car: Car) -> str:
    transmission = "auto" if car.is_automatic else "manual"
    return f"{car.name} {transmission}"


def format_replay_report(replay: Replay) -> str:
    lines = [
        f"Track:       {replay.track_name} ({replay.track.hash()})",
        f"Car:         {_car_line(replay.car)}",
        "",
        f"Version:     {replay.version.value}",
        f"Granularity: {replay.recording.granularity}",
        f"Time:        {format_time(replay.time)} ({format_time(replay.recorded_time)})",
        "",
    ]
    if replay.opponent_car is not None:
        lines.append(f"Opponent:    {replay.opponent_name}")
        lines.append(f"Car:         {_car_line(replay.opponent_car)}")
    else:
        lines.append("No opponent")
    return "\n".join(lines)


def format_track_report(track: Track) -> str:
    lines = [
        f"Track:       {track.name or '-'} ({track.hash()})",
        f"Horizon:     {track.horizon_name} ({track.horizon})",
        f"Reserved:    {track.reserved:#04x}",
        f"Appended:    {len(track.appended)} bytes",
    ]
    return "\n".join(lines)
