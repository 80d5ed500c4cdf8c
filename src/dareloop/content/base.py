"""Content pool interfaces consumed by the game session."""

import random
from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class PackInfo:
    """Metadata describing a dare pack."""

    name: str
    description: str = ""
    age_restricted: bool = False
    premium: bool = False


@runtime_checkable
class ContentProvider(Protocol):
    """Anything that can hand out dares for a pack.

    Implementations must raise ContentUnavailableError for unknown packs
    and may return fewer than ``count`` items, never more.
    """

    async def draw(
        self, pack_id: str, count: int, exclude: AbstractSet[str] = frozenset()
    ) -> List[str]:
        ...


@runtime_checkable
class EntitlementChecker(Protocol):
    """Answers whether a pack may be played."""

    def is_unlocked(self, pack_id: str) -> bool:
        ...


def shuffle_items(items: Iterable[str], seed: Optional[int] = None) -> List[str]:
    """Return a shuffled copy of ``items``.

    The same seed always yields the same order, which keeps test draws
    deterministic. ``seed=None`` uses fresh system randomness.
    """
    shuffled = list(items)
    random.Random(seed).shuffle(shuffled)
    return shuffled
