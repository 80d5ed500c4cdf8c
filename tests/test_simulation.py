"""Integration test for the simulated match entry point."""

import asyncio
import logging

import pytest

from dareloop.__main__ import run_simulation
from dareloop.core.config import GameConfig
from dareloop.core.errors import EntitlementError


def test_simulation_runs_to_standings(caplog):
    """Test a seeded match plays through to final standings."""
    config = GameConfig(quota=2, seed=11, pack_id="IceBreakers")

    with caplog.at_level(logging.INFO, logger="dareloop"):
        asyncio.run(run_simulation(config, players=["Ann", "Ben"]))

    messages = caplog.text
    assert "FINAL STANDINGS" in messages
    assert "Eve" in messages  # late guest joined
    assert "completed" in messages


def test_simulation_with_locked_pack_fails():
    config = GameConfig(quota=1, pack_id="Spicy")

    with pytest.raises(EntitlementError):
        asyncio.run(run_simulation(config, players=["Ann", "Ben"]))
