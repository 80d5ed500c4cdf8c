"""Final standings and end-of-game commentary."""

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from ..core.errors import PreconditionError

logger = logging.getLogger(__name__)

# Used when no tier covers a player's score
FALLBACK_COMMENT = "Great effort!"


@dataclass(frozen=True)
class CommentaryTier:
    """Score band with the comments that may be handed out for it."""

    min: int
    max: int
    candidate_comments: List[str] = field(default_factory=list)

    def matches(self, score: int) -> bool:
        return self.min <= score <= self.max

    @classmethod
    def from_dict(cls, data: Mapping) -> "CommentaryTier":
        return cls(
            min=int(data["min"]),
            max=int(data["max"]),
            candidate_comments=list(data.get("candidateComments", data.get("candidate_comments", []))),
        )


CommentaryTable = Mapping[str, Sequence[CommentaryTier]]


@dataclass(frozen=True)
class Standing:
    """One row of the final results. Rank is the row's position."""

    player: str
    completed: int
    comment: str
    rank: int

    def describe(self) -> str:
        return f"{self.player} completed {self.completed} dares. {self.comment}"

    def to_dict(self) -> Dict:
        return {
            "rank": self.rank,
            "player": self.player,
            "completed": self.completed,
            "comment": self.comment,
        }


@dataclass(frozen=True)
class StandingsResult:
    """Ranked standings, best first."""

    standings: List[Standing]

    @property
    def top_score(self) -> Optional[int]:
        return self.standings[0].completed if self.standings else None

    @property
    def winners(self) -> List[Standing]:
        """Every player sharing the top score."""
        top = self.top_score
        return [s for s in self.standings if s.completed == top]

    @property
    def is_tie(self) -> bool:
        return len(self.winners) > 1

    def __iter__(self):
        return iter(self.standings)

    def __len__(self) -> int:
        return len(self.standings)


class StandingsCalculator:
    """Ranks players by completed dares and hands out commentary.

    Ranking is deterministic: highest score first, ties in roster order.
    Randomness only decides which comment a player gets, and comments
    already given to a higher-ranked player are avoided while the tier
    still has unused ones.
    """

    def __init__(
        self,
        commentary: Optional[CommentaryTable] = None,
        rng: Optional[random.Random] = None,
        fallback_comment: str = FALLBACK_COMMENT,
    ):
        self.commentary = commentary or {}
        self.rng = rng or random.Random()
        self.fallback_comment = fallback_comment

    def calculate(
        self,
        players: Optional[Sequence[str]],
        completed_counts: Optional[Sequence[int]],
        pack_id: str,
    ) -> StandingsResult:
        """Compute ranked standings.

        Raises:
            PreconditionError: If players or counts are missing or misaligned
        """
        if not players:
            raise PreconditionError("Standings need a non-empty roster")
        if completed_counts is None:
            raise PreconditionError("Standings need completed dare counts")
        if len(players) != len(completed_counts):
            raise PreconditionError(
                f"Roster has {len(players)} players but {len(completed_counts)} counts"
            )

        pairs = [(name, int(count)) for name, count in zip(players, completed_counts)]
        ranked = sorted(pairs, key=lambda pair: -pair[1])

        tiers = self.commentary.get(pack_id, [])
        used: set = set()
        standings = []

        for rank, (name, count) in enumerate(ranked, start=1):
            comment = self._pick_comment(tiers, count, used)
            used.add(comment)
            standings.append(Standing(player=name, completed=count, comment=comment, rank=rank))

        logger.info(f"Standings for {pack_id!r}: " + ", ".join(f"{s.player}={s.completed}" for s in standings))
        return StandingsResult(standings)

    def _pick_comment(self, tiers: Sequence[CommentaryTier], score: int, used: set) -> str:
        tier = next((t for t in tiers if t.matches(score)), None)
        if tier is None or not tier.candidate_comments:
            return self.fallback_comment

        fresh = [c for c in tier.candidate_comments if c not in used]
        return self.rng.choice(fresh or tier.candidate_comments)
