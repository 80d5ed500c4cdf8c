"""End-of-game results: standings, commentary and pending review."""

from .standings import (
    FALLBACK_COMMENT,
    CommentaryTier,
    Standing,
    StandingsCalculator,
    StandingsResult,
)
from .commentary import DEFAULT_COMMENTARY, load_commentary_table
from .pending_review import review_pending

__all__ = [
    "FALLBACK_COMMENT",
    "CommentaryTier",
    "Standing",
    "StandingsCalculator",
    "StandingsResult",
    "DEFAULT_COMMENTARY",
    "load_commentary_table",
    "review_pending",
]
