from __future__ import annotations

import pytest

from stunts.config import TRACK_MAX_SIZE_ENV, LoaderConfig
from stunts.replay import MAX_SIZE
from stunts.track import TRACK_MAX_FILE_SIZE


def test_loader_config_defaults() -> None:
    config = LoaderConfig()

    assert config.track_max_size == TRACK_MAX_FILE_SIZE == 1802 + 256
    assert config.replay_max_size == MAX_SIZE


def test_loader_config_from_env() -> None:
    assert LoaderConfig.from_env({}) == LoaderConfig()
    assert LoaderConfig.from_env({TRACK_MAX_SIZE_ENV: "4096"}).track_max_size == 4096
    assert LoaderConfig.from_env({TRACK_MAX_SIZE_ENV: "0x1000"}).track_max_size == 4096


def test_loader_config_from_env_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv(TRACK_MAX_SIZE_ENV, "3000")

    assert LoaderConfig.from_env().track_max_size == 3000


def test_loader_config_from_env_invalid() -> None:
    with pytest.raises(ValueError, match=TRACK_MAX_SIZE_ENV):
        LoaderConfig.from_env({TRACK_MAX_SIZE_ENV: "lots"})


def test_loader_config_limits() -> None:
    with pytest.raises(ValueError, match="track_max_size"):
        LoaderConfig(track_max_size=1000)
    with pytest.raises(ValueError, match="replay_max_size"):
        LoaderConfig(replay_max_size=MAX_SIZE + 1)
    assert LoaderConfig(replay_max_size=4000).replay_max_size == 4000
