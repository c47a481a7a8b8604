from __future__ import annotations

import logging
from pathlib import Path

import typer

from .config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, TRACK_MAX_SIZE_ENV, LoaderConfig
from .errors import StuntsError
from .replay import load_replay
from .report import format_replay_report, format_track_report
from .track import load_track

app = typer.Typer(add_completion=False)

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@app.callback()
def cmd_root(
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        envvar=LOG_LEVEL_ENV,
        help=f"logging level ({', '.join(_LOG_LEVELS)})",
    ),
) -> None:
    """Inspect Stunts track and replay files."""
    level = str(log_level).strip().upper()
    if level not in _LOG_LEVELS:
        raise typer.BadParameter(f"unknown log level: {log_level!r}", param_hint="--log-level")
    logging.basicConfig(level=getattr(logging, level), format="%(levelname)s %(name)s: %(message)s")


def _loader_config(*, track_max_size: int | None = None) -> LoaderConfig:
    try:
        if track_max_size is not None:
            return LoaderConfig(track_max_size=track_max_size)
        return LoaderConfig.from_env()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command("replay-info")
def cmd_replay_info(
    replay_file: Path = typer.Argument(..., help="replay file path (.rpl)"),
) -> None:
    """Print a summary of a replay: track, cars, version and time."""
    config = LoaderConfig()
    try:
        replay = load_replay(replay_file, max_size=config.replay_max_size)
    except StuntsError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(format_replay_report(replay))


@app.command("track-info")
def cmd_track_info(
    track_file: Path = typer.Argument(..., help="track file path (.trk)"),
    max_size: int | None = typer.Option(
        None,
        "--max-size",
        help=f"largest accepted track file in bytes (default: 1802 + 256; override with {TRACK_MAX_SIZE_ENV})",
    ),
) -> None:
    """Print a summary of a track: name, hash, horizon and non-standard data."""
    config = _loader_config(track_max_size=max_size)
    try:
        track = load_track(track_file, max_size=config.track_max_size)
    except StuntsError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(format_track_report(track))


def main(argv: list[str] | None = None) -> None:
    app(prog_name="stunts", args=argv)


if __name__ == "__main__":
    main()
