"""Core game state data structures."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

# Shown when a pack produced no dares at all
NO_ITEMS_AVAILABLE = "No dares available"


@dataclass(frozen=True)
class Player:
    """A player at the table.

    The display name is the only identity. Two players may share a name;
    they are told apart by roster position. Per-player counters live in
    the Roster, not here.
    """

    name: str


@dataclass(frozen=True)
class PendingEntry:
    """A dare a player chose to do later."""

    item_text: str
    player_name: str

    def to_dict(self) -> Dict[str, str]:
        return {"item_text": self.item_text, "player_name": self.player_name}


class PendingQueue:
    """Append-only log of deferred dares, kept in insertion order.

    Duplicates are kept: the same player may defer the same dare twice.
    There is no removal API; resolution happens after the match.
    """

    def __init__(self):
        self._entries: List[PendingEntry] = []

    def append(self, item_text: str, player_name: str) -> PendingEntry:
        entry = PendingEntry(item_text=item_text, player_name=player_name)
        self._entries.append(entry)
        return entry

    @property
    def entries(self) -> Tuple[PendingEntry, ...]:
        """Read-only view of the log."""
        return tuple(self._entries)

    def for_player(self, player_name: str) -> List[PendingEntry]:
        """Get every entry deferred by a player name."""
        return [e for e in self._entries if e.player_name == player_name]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PendingEntry]:
        return iter(tuple(self._entries))

    def __bool__(self) -> bool:
        return bool(self._entries)


@dataclass(frozen=True)
class Turn:
    """Whose turn it is and which dare they face."""

    player: Player
    item: str
    player_index: int
    item_index: int

    @property
    def has_item(self) -> bool:
        return self.item != NO_ITEMS_AVAILABLE


@dataclass(frozen=True)
class GameSnapshot:
    """Everything a UI needs to render the session without touching internals."""

    current_player: Optional[str]
    current_item: Optional[str]
    asked_counts: Tuple[int, ...]
    completed_counts: Tuple[int, ...]
    pending_count: int
    is_game_over: bool
    player_names: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "current_player": self.current_player,
            "current_item": self.current_item,
            "asked_counts": list(self.asked_counts),
            "completed_counts": list(self.completed_counts),
            "pending_count": self.pending_count,
            "is_game_over": self.is_game_over,
            "player_names": list(self.player_names),
        }
