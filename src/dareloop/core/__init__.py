"""Turn rotation, quota tracking and pending dares."""

from .config import GameConfig
from .enums import GameMode, GamePhase, Outcome, SessionEventType
from .errors import (
    CapacityError,
    ContentError,
    ContentUnavailableError,
    DareLoopError,
    EntitlementError,
    InvalidStateError,
    MinimumRosterError,
    PreconditionError,
    RosterError,
)
from .game_state import NO_ITEMS_AVAILABLE, GameSnapshot, PendingEntry, PendingQueue, Player, Turn
from .roster import Roster
from .item_pool import ItemPool
from .session import GameSession, SessionEvent

__all__ = [
    "GameConfig",
    "GameMode",
    "GamePhase",
    "Outcome",
    "SessionEventType",
    "CapacityError",
    "ContentError",
    "ContentUnavailableError",
    "DareLoopError",
    "EntitlementError",
    "InvalidStateError",
    "MinimumRosterError",
    "PreconditionError",
    "RosterError",
    "NO_ITEMS_AVAILABLE",
    "GameSnapshot",
    "PendingEntry",
    "PendingQueue",
    "Player",
    "Turn",
    "Roster",
    "ItemPool",
    "GameSession",
    "SessionEvent",
]
