"""Tests for the pending queue and post-game review."""

import asyncio

import pytest

from dareloop.core.enums import Outcome
from dareloop.core.game_state import PendingEntry, PendingQueue
from dareloop.results import review_pending


def test_queue_keeps_order_and_duplicates():
    queue = PendingQueue()
    queue.append("Sing a song", "Alice")
    queue.append("Sing a song", "Alice")
    queue.append("Dance", "Bob")

    assert len(queue) == 3
    assert [e.player_name for e in queue] == ["Alice", "Alice", "Bob"]
    assert queue.for_player("Alice") == [PendingEntry("Sing a song", "Alice")] * 2
    assert queue.entries[2].to_dict() == {"item_text": "Dance", "player_name": "Bob"}


def test_review_adds_completed_pending():
    entries = [PendingEntry("a", "Bob"), PendingEntry("b", "Cat"), PendingEntry("c", "Bob")]

    counts = review_pending(["Ann", "Bob", "Cat"], [2, 0, 1], entries, [True, False, True])

    assert counts == [2, 2, 1]


def test_review_matches_first_name():
    counts = review_pending(["Sam", "Sam"], [0, 0], [PendingEntry("x", "Sam")], [True])

    assert counts == [1, 0]


def test_review_skips_unknown_player():
    counts = review_pending(["Ann"], [1], [PendingEntry("x", "Ghost")], [True])

    assert counts == [1]


def test_review_caps_at_quota():
    entries = [PendingEntry("x", "Ann"), PendingEntry("y", "Ann")]

    assert review_pending(["Ann"], [2], entries, [True, True], quota=3) == [3]


def test_review_leaves_inputs_alone():
    completed = [0, 0]
    review_pending(["A", "B"], completed, [PendingEntry("x", "A")], [True])

    assert completed == [0, 0]


def test_review_requires_alignment():
    with pytest.raises(ValueError):
        review_pending(["A", "B"], [0], [], [])
    with pytest.raises(ValueError):
        review_pending(["A"], [0], [PendingEntry("x", "A")], [])


def test_review_after_session(started_session):
    """Test deferred dares from a real match can be credited afterwards."""
    session = started_session(["Alice", "Bob"], quota=2)

    async def _run():
        for outcome in [Outcome.COMPLETED, Outcome.DEFERRED, Outcome.FAILED, Outcome.DEFERRED]:
            await session.report_outcome(outcome)

    asyncio.run(_run())
    snap = session.snapshot()

    counts = review_pending(
        snap.player_names, snap.completed_counts, session.pending.entries, [True, True], session.quota
    )

    assert snap.completed_counts == (1, 0)
    assert counts == [1, 2]
    assert len(session.pending) == 2
