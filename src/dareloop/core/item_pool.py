"""Drawn dare sequence for a session."""

import logging
from typing import TYPE_CHECKING, AbstractSet, List

from .game_state import NO_ITEMS_AVAILABLE

if TYPE_CHECKING:
    from ..content.base import ContentProvider

logger = logging.getLogger(__name__)


class ItemPool:
    """Ordered dares sized to ``quota * roster size``.

    Once the last dare has been shown the index wraps to 0 and dares are
    reused rather than drawing more.
    """

    def __init__(self, provider: "ContentProvider", pack_id: str):
        self.provider = provider
        self.pack_id = pack_id
        self.items: List[str] = []
        self.current_index = 0

    def __len__(self) -> int:
        return len(self.items)

    @property
    def current_item(self) -> str:
        if not self.items:
            return NO_ITEMS_AVAILABLE
        return self.items[self.current_index]

    async def fill(self, total: int, exclude: AbstractSet[str] = frozenset()) -> None:
        """Replace the pool with a fresh draw of ``total`` dares."""
        items = await self.provider.draw(self.pack_id, total, set(exclude))
        self.items = list(items)[:total]
        self.current_index = 0
        logger.debug(f"Pool filled with {len(self.items)}/{total} dares from {self.pack_id!r}")

    async def plan_growth(self, total: int) -> List[str]:
        """Work out the grown pool for a bigger table without applying it.

        Draws the missing dares, skipping ones already in the pool when the
        provider can. The caller commits the result together with the
        roster edit.
        """
        current = len(self.items)
        if total <= current:
            return list(self.items)
        extra = await self.provider.draw(self.pack_id, total - current, set(self.items))
        items = self.items + list(extra)[: total - current]
        logger.debug(f"Pool grown {current} -> {len(items)} (wanted {total})")
        return items

    def plan_shrink(self, total: int) -> List[str]:
        """Truncated pool for a smaller table, never cutting the dare on screen."""
        keep = max(total, self.current_index + 1)
        if keep >= len(self.items):
            return list(self.items)
        logger.debug(f"Pool truncated {len(self.items)} -> {keep}")
        return self.items[:keep]

    def commit(self, items: List[str]) -> None:
        self.items = items

    def advance(self) -> int:
        """Step to the next dare, wrapping back to the first when exhausted."""
        if self.current_index + 1 < len(self.items):
            self.current_index += 1
        else:
            self.current_index = 0
        return self.current_index
