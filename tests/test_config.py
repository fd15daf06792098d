from __future__ import annotations

import pytest

from location_history.config import DEFAULT_BUF_SIZE, DEFAULT_PROGRESS_INTERVAL, DecoderConfig
from location_history.exceptions import ConfigError


def test_defaults() -> None:
    config = DecoderConfig()
    assert config.buf_size == DEFAULT_BUF_SIZE
    assert config.backend is None
    assert config.progress_interval == DEFAULT_PROGRESS_INTERVAL


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOCATION_HISTORY_BUF_SIZE", "4096")
    monkeypatch.setenv("LOCATION_HISTORY_BACKEND", " python ")
    monkeypatch.setenv("LOCATION_HISTORY_PROGRESS_INTERVAL", "0")

    config = DecoderConfig.from_env()

    assert config.buf_size == 4096
    assert config.backend == "python"
    assert config.progress_interval == 0


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOCATION_HISTORY_BUF_SIZE", "4096")

    config = DecoderConfig.from_env(buf_size=128)

    assert config.buf_size == 128


def test_from_env_ignores_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOCATION_HISTORY_BUF_SIZE", "  ")
    monkeypatch.setenv("LOCATION_HISTORY_BACKEND", "")

    config = DecoderConfig.from_env()

    assert config == DecoderConfig()


def test_from_env_rejects_non_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOCATION_HISTORY_PROGRESS_INTERVAL", "often")

    with pytest.raises(ConfigError, match="LOCATION_HISTORY_PROGRESS_INTERVAL"):
        DecoderConfig.from_env()


@pytest.mark.parametrize("kwargs", [{"buf_size": 0}, {"progress_interval": -1}])
def test_invalid_values(kwargs: dict[str, int]) -> None:
    with pytest.raises(ConfigError):
        DecoderConfig(**kwargs)
