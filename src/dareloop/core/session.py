"""Turn rotation and quota tracking for a dare session.

A GameSession owns the roster, the drawn dares and the pending log for
one match. Every mutation is a coroutine serialized on a single lock, so
a roster edit can never interleave with a turn advance. While a content
draw is in flight the session is not ready and reads are rejected.

Lifecycle::

    INITIALIZING --initialize()--> IN_PROGRESS --all players at quota--> ENDED
"""

import asyncio
import inspect
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, AbstractSet, Any, Callable, List, Optional, Sequence, Union

from .config import GameConfig, MAX_QUOTA, MIN_QUOTA
from .enums import GamePhase, Outcome, SessionEventType
from .errors import (
    CapacityError,
    EntitlementError,
    InvalidStateError,
    MinimumRosterError,
)
from .game_state import GameSnapshot, PendingQueue, Player, Turn
from .item_pool import ItemPool
from .roster import Roster

if TYPE_CHECKING:
    from ..content.base import ContentProvider, EntitlementChecker


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionEvent:
    """Emitted to listeners after every committed change."""

    event_type: SessionEventType
    snapshot: GameSnapshot
    timestamp: datetime = field(default_factory=datetime.now)


SessionListener = Callable[[SessionEvent], Any]


class GameSession:
    """One match of dares: who is up, what they face, and when it ends."""

    def __init__(
        self,
        config: GameConfig,
        provider: "ContentProvider",
        players: Optional[Sequence[str]] = None,
        entitlements: Optional["EntitlementChecker"] = None,
    ):
        """Initialize a session in the INITIALIZING phase.

        Args:
            config: Game configuration (quota, pack, roster bounds)
            provider: Source of dares for the configured pack
            players: Starting roster in turn order
            entitlements: Unlock check for premium packs (None allows all)
        """
        self.config = config
        self.phase = GamePhase.INITIALIZING
        self.roster = Roster(
            quota=config.quota,
            min_players=config.min_players,
            max_players=config.max_players,
            names=players,
        )
        self.pool = ItemPool(provider, config.pack_id)
        self.pending = PendingQueue()
        self.entitlements = entitlements

        self._lock = asyncio.Lock()
        self._ready = True
        self._listeners: List[SessionListener] = []

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def quota(self) -> int:
        return self.roster.quota

    @property
    def is_ready(self) -> bool:
        """False while a content draw is being awaited."""
        return self._ready

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.ENDED

    def current_turn(self) -> Turn:
        """Return the current player and dare. Has no side effects.

        Raises:
            InvalidStateError: Before initialize() or while a draw is pending
        """
        self._require_ready()
        if self.phase == GamePhase.INITIALIZING:
            raise InvalidStateError("Session has not been initialized yet")

        return Turn(
            player=self.roster.current_player,
            item=self.pool.current_item,
            player_index=self.roster.current_index,
            item_index=self.pool.current_index,
        )

    def snapshot(self) -> GameSnapshot:
        """Render-ready view of the session.

        Raises:
            InvalidStateError: While a draw is pending
        """
        self._require_ready()
        return self._build_snapshot()

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener for session events.

        Listeners may be plain functions or coroutine functions. Returns a
        function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Write side
    # ------------------------------------------------------------------

    async def set_quota(self, quota: int) -> None:
        """Change the per-player quota before play starts."""
        async with self._lock:
            if self.phase != GamePhase.INITIALIZING:
                raise InvalidStateError("Quota can only change before the game starts")
            if not MIN_QUOTA <= quota <= MAX_QUOTA:
                raise ValueError(f"quota must be between {MIN_QUOTA} and {MAX_QUOTA}, got {quota}")
            self.roster.set_quota(quota)
            logger.info(f"Quota set to {quota}")

    async def initialize(self, exclude: AbstractSet[str] = frozenset()) -> GameSnapshot:
        """Draw the session's dares and start play.

        Draws ``quota * roster size`` dares, skipping ``exclude``, zeroes
        every counter and hands the first turn to seat 0.

        Raises:
            InvalidStateError: If the session was already initialized
            EntitlementError: If the pack is premium and locked
            MinimumRosterError: If the roster is below the mode minimum
            ContentUnavailableError: If the provider does not know the pack
        """
        async with self._lock:
            if self.phase != GamePhase.INITIALIZING:
                raise InvalidStateError(f"Cannot initialize a session in phase {self.phase.value}")

            pack_id = self.pool.pack_id
            if self.entitlements is not None and not self.entitlements.is_unlocked(pack_id):
                raise EntitlementError(f"Pack {pack_id!r} is locked")

            size = len(self.roster)
            if size < self.roster.min_players:
                raise MinimumRosterError(
                    f"At least {self.roster.min_players} player(s) are required, got {size}"
                )

            self._ready = False
            try:
                await self.pool.fill(self.quota * size, exclude)
            finally:
                self._ready = True

            self.roster.reset_counters()
            self.pending = PendingQueue()
            self.phase = GamePhase.IN_PROGRESS

            logger.info(
                f"Session started: {size} players, quota {self.quota}, "
                f"{len(self.pool)} dares from {pack_id!r}"
            )
            snapshot = self._build_snapshot()

        await self._emit(SessionEventType.INITIALIZED, snapshot)
        return snapshot

    async def report_outcome(self, outcome: Union[Outcome, str]) -> GameSnapshot:
        """Resolve the current turn and pass play to the next seat.

        Every outcome counts the dare as asked. COMPLETED also counts it as
        completed; DEFERRED logs it to the pending queue instead.

        Raises:
            InvalidStateError: If the session is not in progress
        """
        outcome = Outcome(outcome)

        async with self._lock:
            if self.phase != GamePhase.IN_PROGRESS:
                raise InvalidStateError(
                    f"Cannot report an outcome in phase {self.phase.value}"
                )

            player = self.roster.current_player
            item = self.pool.current_item

            if outcome == Outcome.DEFERRED:
                self.pending.append(item, player.name)

            self.roster.record_turn(completed=outcome == Outcome.COMPLETED)
            self.roster.advance()
            self.pool.advance()

            logger.debug(f"{player.name}: {outcome.value} - {item!r}")

            events = [SessionEventType.TURN_ADVANCED]
            if self._check_game_over():
                events.append(SessionEventType.GAME_OVER)
            snapshot = self._build_snapshot()

        for event_type in events:
            await self._emit(event_type, snapshot)
        return snapshot

    async def add_player(self, name: str) -> int:
        """Seat a new player at the end of the turn order.

        Mid-game the pool grows by ``quota`` dares to cover them.

        Raises:
            InvalidStateError: If the game is over
            CapacityError: If the roster is full
        """
        async with self._lock:
            if self.phase == GamePhase.ENDED:
                raise InvalidStateError("Cannot add players after the game is over")
            if len(self.roster) >= self.roster.max_players:
                raise CapacityError(
                    f"Cannot add {name!r}: roster is full ({self.roster.max_players} players)"
                )

            items = None
            if self.phase == GamePhase.IN_PROGRESS:
                self._ready = False
                try:
                    items = await self.pool.plan_growth(self.quota * (len(self.roster) + 1))
                finally:
                    self._ready = True

            index = self.roster.add_player(name)
            if items is not None:
                self.pool.commit(items)

            logger.info(f"{name} joined at seat {index}")
            snapshot = self._build_snapshot()

        await self._emit(SessionEventType.PLAYER_ADDED, snapshot)
        return index

    async def remove_player(self, index: int) -> Player:
        """Remove the player at ``index``.

        Raises:
            InvalidStateError: If the game is over
            IndexError: If no player sits at ``index``
            MinimumRosterError: If the roster is already at its minimum
        """
        async with self._lock:
            if self.phase == GamePhase.ENDED:
                raise InvalidStateError("Cannot remove players after the game is over")

            removed = self.roster.remove_player(index)
            events = [SessionEventType.PLAYER_REMOVED]

            if self.phase == GamePhase.IN_PROGRESS:
                self.pool.commit(self.pool.plan_shrink(self.quota * len(self.roster)))
                if self._check_game_over():
                    events.append(SessionEventType.GAME_OVER)

            logger.info(f"{removed.name} left from seat {index}")
            snapshot = self._build_snapshot()

        for event_type in events:
            await self._emit(event_type, snapshot)
        return removed

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_ready(self) -> None:
        if not self._ready:
            raise InvalidStateError("Session is waiting for content; try again shortly")

    def _check_game_over(self) -> bool:
        if self.roster.all_reached_quota():
            self.phase = GamePhase.ENDED
            logger.info(
                f"Game over: completed {list(self.roster.completed_counts)}, "
                f"{len(self.pending)} pending"
            )
            return True
        return False

    def _build_snapshot(self) -> GameSnapshot:
        started = self.phase != GamePhase.INITIALIZING
        player = self.roster.current_player
        return GameSnapshot(
            current_player=player.name if player else None,
            current_item=self.pool.current_item if started else None,
            asked_counts=self.roster.asked_counts,
            completed_counts=self.roster.completed_counts,
            pending_count=len(self.pending),
            is_game_over=self.is_game_over,
            player_names=self.roster.names,
        )

    async def _emit(self, event_type: SessionEventType, snapshot: GameSnapshot) -> None:
        event = SessionEvent(event_type=event_type, snapshot=snapshot)
        for listener in list(self._listeners):
            try:
                result = listener(event)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.error(f"Session listener failed on {event_type.value}: {e}")
