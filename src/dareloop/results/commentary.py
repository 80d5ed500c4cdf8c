"""Tiered end-of-game commentary.

Tiers cover completed-dare counts from 0 to the maximum quota. A pack
without an entry falls back to the calculator's fixed comment.
"""

import json
from pathlib import Path
from typing import Dict, List, Union

from ..content.catalog import PACKS
from .standings import CommentaryTier

_GENERAL_TIERS = [
    CommentaryTier(0, 0, [
        "Playing it safe, we see.",
        "The dares are still waiting for you.",
        "Next time, maybe just one?",
    ]),
    CommentaryTier(1, 3, [
        "A cautious start!",
        "Dipped a toe in the water.",
        "Warming up nicely.",
        "Not bad for a beginner!",
    ]),
    CommentaryTier(4, 6, [
        "Solid performance!",
        "You're getting the hang of this.",
        "Brave and steady.",
        "Respectable daring!",
    ]),
    CommentaryTier(7, 10, [
        "Fearless!",
        "A true daredevil!",
        "Nothing scares you!",
        "Legendary daring!",
        "The crowd goes wild!",
    ]),
]

_PACK_TIERS: Dict[str, List[CommentaryTier]] = {
    "Music Mania": [
        CommentaryTier(0, 0, ["Stage fright got the best of you.", "Save it for the encore."]),
        CommentaryTier(1, 3, ["A promising opening act.", "Humming along nicely."]),
        CommentaryTier(4, 6, ["Top of the charts!", "A crowd-pleasing set."]),
        CommentaryTier(7, 10, ["Rock star status!", "Sold-out stadium energy!", "Encore! Encore!"]),
    ],
    "Office Fun": [
        CommentaryTier(0, 0, ["Still on your coffee break?", "Out of office, apparently."]),
        CommentaryTier(1, 3, ["Meets expectations.", "A quiet achiever."]),
        CommentaryTier(4, 6, ["Employee of the week!", "Promotion material."]),
        CommentaryTier(7, 10, ["Corner office, here you come!", "CEO of dares!"]),
    ],
    "Adventure Seekers": [
        CommentaryTier(0, 0, ["Base camp suits you.", "The trail awaits."]),
        CommentaryTier(1, 3, ["A few steps up the mountain.", "Scouting the route."]),
        CommentaryTier(4, 6, ["Halfway to the summit!", "Seasoned explorer."]),
        CommentaryTier(7, 10, ["Summit conquered!", "Born for adventure!"]),
    ],
}

# Pack name -> ordered tiers
DEFAULT_COMMENTARY: Dict[str, List[CommentaryTier]] = {
    name: _PACK_TIERS.get(name, _GENERAL_TIERS) for name in PACKS
}


def load_commentary_table(path: Union[str, Path]) -> Dict[str, List[CommentaryTier]]:
    """Load a commentary table from JSON.

    Expected shape::

        {"Pack Name": [{"min": 0, "max": 2, "candidateComments": ["..."]}, ...]}

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the JSON does not have the expected shape
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Commentary file {path} must contain an object keyed by pack")

    table = {}
    for pack_id, tiers in data.items():
        if not isinstance(tiers, list):
            raise ValueError(f"Tiers for {pack_id!r} must be a list")
        try:
            table[pack_id] = [CommentaryTier.from_dict(t) for t in tiers]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed tier for {pack_id!r}: {e}") from e
    return table
