"""Roster of players and their index-aligned turn counters."""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .errors import CapacityError, MinimumRosterError
from .game_state import Player

logger = logging.getLogger(__name__)


class Roster:
    """Ordered players plus the counters that ride along with them.

    asked[i] and completed[i] always belong to players[i], and
    current_index always points into players. Every mutation builds the
    new arrays first and swaps them in together, so a failed edit leaves
    nothing half-applied.
    """

    def __init__(
        self,
        quota: int,
        min_players: int = 2,
        max_players: int = 12,
        names: Optional[Sequence[str]] = None,
    ):
        self.quota = quota
        self.min_players = min_players
        self.max_players = max_players

        self.players: List[Player] = []
        self.asked = np.zeros(0, dtype=np.int64)
        self.completed = np.zeros(0, dtype=np.int64)
        self.current_index = 0

        for name in names or []:
            self.add_player(name)

    def __len__(self) -> int:
        return len(self.players)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(p.name for p in self.players)

    @property
    def asked_counts(self) -> Tuple[int, ...]:
        return tuple(int(v) for v in self.asked)

    @property
    def completed_counts(self) -> Tuple[int, ...]:
        return tuple(int(v) for v in self.completed)

    @property
    def current_player(self) -> Optional[Player]:
        if not self.players:
            return None
        return self.players[self.current_index]

    def add_player(self, name: str) -> int:
        """Append a player and return their roster index.

        A late joiner starts at the lowest asked count among the players
        already seated, so they land in the same round as whoever is
        furthest behind instead of owing every round played so far.

        Raises:
            CapacityError: If the roster is already full
        """
        if len(self.players) >= self.max_players:
            raise CapacityError(
                f"Cannot add {name!r}: roster is full ({self.max_players} players)"
            )

        start_asked = int(self.asked.min()) if len(self.asked) else 0

        asked = np.append(self.asked, start_asked)
        completed = np.append(self.completed, 0)

        self.players = self.players + [Player(name)]
        self.asked, self.completed = asked, completed
        self._clamp()

        index = len(self.players) - 1
        logger.debug(f"Added {name!r} at index {index} (asked starts at {start_asked})")
        return index

    def remove_player(self, index: int) -> Player:
        """Remove the player at ``index`` along with their counters.

        The turn pointer keeps pointing at the same person when someone
        earlier in the order leaves. When the current player leaves, the
        same index now names the next player (or wraps to 0 if they were
        last), so nobody is skipped or asked twice.

        Raises:
            IndexError: If index is out of range
            MinimumRosterError: If the roster is already at its minimum
        """
        if not 0 <= index < len(self.players):
            raise IndexError(f"No player at index {index} (roster size {len(self.players)})")
        if len(self.players) <= self.min_players:
            raise MinimumRosterError(
                f"At least {self.min_players} player(s) are required"
            )

        current = self.current_index
        if index < current:
            current -= 1

        players = self.players[:index] + self.players[index + 1:]
        asked = np.delete(self.asked, index)
        completed = np.delete(self.completed, index)

        if current >= len(players):
            current = 0

        removed = self.players[index]
        self.players = players
        self.asked, self.completed = asked, completed
        self.current_index = current
        self._clamp()

        logger.debug(f"Removed {removed.name!r} from index {index}; turn pointer now {current}")
        return removed

    def record_turn(self, completed: bool) -> int:
        """Count a dare as asked (and maybe completed) for the current player.

        Returns the index of the player that was credited.
        """
        index = self.current_index
        asked = self.asked.copy()
        done = self.completed.copy()

        asked[index] += 1
        if completed:
            done[index] += 1

        self.asked, self.completed = asked, done
        self._clamp()
        return index

    def advance(self) -> int:
        """Move the turn pointer to the next seat, wrapping around."""
        if self.players:
            self.current_index = (self.current_index + 1) % len(self.players)
        return self.current_index

    def all_reached_quota(self) -> bool:
        """True once every seated player has been asked ``quota`` dares."""
        return len(self.players) > 0 and bool(np.all(self.asked >= self.quota))

    def reset_counters(self) -> None:
        """Zero every counter and hand the first turn to seat 0."""
        self.asked = np.zeros(len(self.players), dtype=np.int64)
        self.completed = np.zeros(len(self.players), dtype=np.int64)
        self.current_index = 0

    def set_quota(self, quota: int) -> None:
        self.quota = quota
        self._clamp()

    def _clamp(self) -> None:
        # 0 <= completed <= asked <= quota
        self.asked = np.clip(self.asked, 0, self.quota)
        self.completed = np.minimum(np.clip(self.completed, 0, self.quota), self.asked)
