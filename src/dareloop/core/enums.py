"""Enumerations for session phases, turn outcomes and events."""

from enum import Enum


class GamePhase(Enum):
    """Lifecycle of a game session. There is no way back out of ENDED."""

    INITIALIZING = "initializing"
    IN_PROGRESS = "in_progress"
    ENDED = "game_over"


class Outcome(Enum):
    """Result reported for a single turn."""

    COMPLETED = "completed"
    FAILED = "failed"
    DEFERRED = "deferred"  # "Need more time" - goes to the pending queue


class GameMode(Enum):
    """Play modes. The mode decides the smallest legal roster."""

    SOLO = "solo"
    PARTY = "party"


class SessionEventType(Enum):
    """Events emitted to the presentation layer."""

    INITIALIZED = "initialized"
    TURN_ADVANCED = "turn_advanced"
    PLAYER_ADDED = "player_added"
    PLAYER_REMOVED = "player_removed"
    GAME_OVER = "game_over"
