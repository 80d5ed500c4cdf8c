"""Premium pack unlock tracking."""

import logging
from typing import Iterable, Mapping, Optional, Set

from . import catalog
from .base import PackInfo

logger = logging.getLogger(__name__)


class Entitlements:
    """Tracks which premium packs the player owns.

    Free packs are always playable. Purchasing happens elsewhere; this
    only records the result.
    """

    def __init__(
        self,
        premium_packs: Optional[Iterable[str]] = None,
        unlocked: Iterable[str] = (),
    ):
        if premium_packs is None:
            premium_packs = [name for name, info in catalog.PACKS.items() if info.premium]
        self.premium_packs: Set[str] = set(premium_packs)
        self.unlocked: Set[str] = set(unlocked)

    @classmethod
    def from_packs(cls, packs: Mapping[str, PackInfo], unlocked: Iterable[str] = ()):
        """Build entitlements from a pack library's metadata."""
        return cls(
            premium_packs=[name for name, info in packs.items() if info.premium],
            unlocked=unlocked,
        )

    def is_unlocked(self, pack_id: str) -> bool:
        return pack_id not in self.premium_packs or pack_id in self.unlocked

    def unlock(self, pack_id: str) -> None:
        self.unlocked.add(pack_id)
        logger.info(f"Unlocked pack {pack_id!r}")
