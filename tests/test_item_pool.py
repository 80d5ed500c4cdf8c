"""Tests for the drawn dare pool."""

import asyncio

from dareloop.core.game_state import NO_ITEMS_AVAILABLE
from dareloop.core.item_pool import ItemPool


def filled_pool(provider, total):
    pool = ItemPool(provider, "test")
    asyncio.run(pool.fill(total))
    return pool


def test_fill_and_advance(provider):
    pool = filled_pool(provider, 3)

    assert pool.items == ["dare 1", "dare 2", "dare 3"]
    assert [pool.advance() for _ in range(4)] == [1, 2, 0, 1]


def test_empty_pool_sentinel(provider):
    provider.packs["empty"] = []
    pool = ItemPool(provider, "empty")
    asyncio.run(pool.fill(4))

    assert pool.current_item == NO_ITEMS_AVAILABLE
    assert pool.advance() == 0


def test_growth_excludes_existing(provider):
    pool = filled_pool(provider, 4)

    items = asyncio.run(pool.plan_growth(6))

    assert items == ["dare 1", "dare 2", "dare 3", "dare 4", "dare 5", "dare 6"]
    assert len(pool) == 4  # nothing applied until commit
    pool.commit(items)
    assert len(pool) == 6


def test_growth_never_more_than_target(provider):
    pool = filled_pool(provider, 2)

    assert len(asyncio.run(pool.plan_growth(2))) == 2


def test_shrink_keeps_current_item(provider):
    pool = filled_pool(provider, 6)
    for _ in range(4):
        pool.advance()

    assert pool.plan_shrink(2) == pool.items[:5]
    assert pool.plan_shrink(10) == pool.items


def test_shrink_from_start(provider):
    pool = filled_pool(provider, 6)

    assert pool.plan_shrink(4) == ["dare 1", "dare 2", "dare 3", "dare 4"]
