"""Pytest configuration and fixtures."""

import asyncio

import pytest

from dareloop.core.config import GameConfig
from dareloop.core.errors import ContentUnavailableError
from dareloop.core.session import GameSession


class StaticContentProvider:
    """Deterministic provider: hands out dares in listed order."""

    def __init__(self, packs=None):
        self.packs = packs if packs is not None else {
            "test": [f"dare {i}" for i in range(1, 41)],
        }
        self.calls = []
        self.gate = None  # asyncio.Event that holds draws until set

    async def draw(self, pack_id, count, exclude=frozenset()):
        self.calls.append((pack_id, count, set(exclude)))
        if pack_id not in self.packs:
            raise ContentUnavailableError(f"Unknown dare pack: {pack_id!r}")
        if self.gate is not None:
            await self.gate.wait()
        available = [d for d in self.packs[pack_id] if d not in exclude]
        return available[:count]


@pytest.fixture
def provider():
    """Deterministic content provider with a 40-dare test pack."""
    return StaticContentProvider()


@pytest.fixture
def make_session(provider):
    """Factory for sessions using the static provider."""

    def _make(players, quota=2, **kwargs):
        kwargs.setdefault("pack_id", "test")
        kwargs.setdefault("max_players", 6)
        config = GameConfig(quota=quota, **kwargs)
        return GameSession(config, provider, players=players)

    return _make


@pytest.fixture
def started_session(make_session):
    """Factory returning an initialized session."""

    def _make(players, quota=2, **kwargs):
        session = make_session(players, quota=quota, **kwargs)
        asyncio.run(session.initialize())
        return session

    return _make
