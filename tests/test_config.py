"""Tests for game configuration."""

import pytest

from dareloop.core.config import GameConfig
from dareloop.core.enums import GameMode


def test_defaults():
    config = GameConfig()

    assert config.quota == 5
    assert config.mode == GameMode.PARTY
    assert config.min_players == 2
    assert config.pack_id == "Family Friendly"


def test_solo_mode_minimum():
    assert GameConfig(mode=GameMode.SOLO).min_players == 1
    assert GameConfig(mode="solo").mode == GameMode.SOLO


@pytest.mark.parametrize("quota", [0, 11, -1])
def test_quota_bounds(quota):
    with pytest.raises(ValueError):
        GameConfig(quota=quota)


def test_max_players_below_minimum():
    with pytest.raises(ValueError):
        GameConfig(max_players=1)


def test_from_env(monkeypatch):
    monkeypatch.setenv("DARELOOP_QUOTA", "3")
    monkeypatch.setenv("DARELOOP_PACK", "Couples")
    monkeypatch.setenv("DARELOOP_SEED", "17")
    monkeypatch.setenv("DARELOOP_MODE", "SOLO")
    monkeypatch.setenv("DARELOOP_VERBOSE", "true")

    config = GameConfig.from_env(max_players=4)

    assert config.quota == 3
    assert config.pack_id == "Couples"
    assert config.seed == 17
    assert config.mode == GameMode.SOLO
    assert config.verbose is True
    assert config.max_players == 4


def test_from_env_rejects_bad_quota(monkeypatch):
    monkeypatch.setenv("DARELOOP_QUOTA", "42")

    with pytest.raises(ValueError):
        GameConfig.from_env()
