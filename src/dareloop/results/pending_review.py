"""Post-game review of deferred dares.

After the last turn the table goes back through every deferred dare in
order. Each one the player now completes is added to their total.
Players are matched by name, first roster position wins.
"""

import logging
from typing import List, Optional, Sequence

from ..core.game_state import PendingEntry

logger = logging.getLogger(__name__)


def review_pending(
    players: Sequence[str],
    completed_counts: Sequence[int],
    entries: Sequence[PendingEntry],
    resolutions: Sequence[bool],
    quota: Optional[int] = None,
) -> List[int]:
    """Apply pending-dare resolutions to completed counts.

    Args:
        players: Roster names in seat order
        completed_counts: Completed dares per seat
        entries: Pending entries in the order they were deferred
        resolutions: One flag per entry, True if the dare was completed
        quota: Optional cap for every count

    Returns:
        New list of completed counts; the inputs are left untouched.

    Raises:
        ValueError: If inputs are not aligned
    """
    if len(players) != len(completed_counts):
        raise ValueError(
            f"Roster has {len(players)} players but {len(completed_counts)} counts"
        )
    if len(entries) != len(resolutions):
        raise ValueError(
            f"{len(entries)} pending dares but {len(resolutions)} resolutions"
        )

    counts = [int(c) for c in completed_counts]

    for entry, completed in zip(entries, resolutions):
        if not completed:
            continue
        try:
            index = list(players).index(entry.player_name)
        except ValueError:
            logger.warning(f"Pending dare for unknown player {entry.player_name!r} skipped")
            continue

        counts[index] += 1
        if quota is not None:
            counts[index] = min(counts[index], quota)

    return counts
