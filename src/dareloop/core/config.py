"""Game configuration dataclass.

Defaults follow the mobile party game: 5 dares per player, the
"Family Friendly" pack, and at least two players unless playing solo.
"""

import os
from dataclasses import dataclass
from typing import Optional

from .enums import GameMode

MIN_QUOTA = 1
MAX_QUOTA = 10


@dataclass
class GameConfig:
    """Configuration for a single dare session."""

    # ===========================================
    # PLAYER SETUP
    # ===========================================
    # "party" needs at least 2 players, "solo" can be played alone
    mode: GameMode = GameMode.PARTY
    max_players: int = 12

    # ===========================================
    # QUOTA
    # ===========================================
    quota: int = 5  # Dares each player must be asked

    # ===========================================
    # CONTENT
    # ===========================================
    pack_id: str = "Family Friendly"
    content_dir: Optional[str] = None  # Extra *.json pack files
    custom_content_dir: Optional[str] = None  # custom_<pack>.json files
    seed: Optional[int] = None  # Fixed seed for reproducible shuffles

    # ===========================================
    # LOGGING
    # ===========================================
    verbose: bool = False
    save_logs: bool = False
    log_dir: str = "data/games"

    def __post_init__(self):
        if isinstance(self.mode, str):
            self.mode = GameMode(self.mode)
        if not MIN_QUOTA <= self.quota <= MAX_QUOTA:
            raise ValueError(
                f"quota must be between {MIN_QUOTA} and {MAX_QUOTA}, got {self.quota}"
            )
        if self.max_players < self.min_players:
            raise ValueError(
                f"max_players ({self.max_players}) is below the minimum "
                f"for {self.mode.value} mode ({self.min_players})"
            )

    @property
    def min_players(self) -> int:
        """Smallest legal roster for the configured mode."""
        return 1 if self.mode == GameMode.SOLO else 2

    @classmethod
    def from_env(cls, **overrides) -> "GameConfig":
        """Build a config from DARELOOP_* environment variables.

        Call ``load_dotenv()`` first to pick up a local .env file.
        Keyword overrides win over the environment.
        """
        values = {}

        if os.getenv("DARELOOP_MODE"):
            values["mode"] = GameMode(os.getenv("DARELOOP_MODE").lower())
        if os.getenv("DARELOOP_MAX_PLAYERS"):
            values["max_players"] = int(os.getenv("DARELOOP_MAX_PLAYERS"))
        if os.getenv("DARELOOP_QUOTA"):
            values["quota"] = int(os.getenv("DARELOOP_QUOTA"))
        if os.getenv("DARELOOP_PACK"):
            values["pack_id"] = os.getenv("DARELOOP_PACK")
        if os.getenv("DARELOOP_SEED"):
            values["seed"] = int(os.getenv("DARELOOP_SEED"))
        if os.getenv("DARELOOP_CONTENT_DIR"):
            values["content_dir"] = os.getenv("DARELOOP_CONTENT_DIR")
        if os.getenv("DARELOOP_CUSTOM_DIR"):
            values["custom_content_dir"] = os.getenv("DARELOOP_CUSTOM_DIR")
        if os.getenv("DARELOOP_VERBOSE"):
            values["verbose"] = os.getenv("DARELOOP_VERBOSE").lower() in ("1", "true", "yes")

        values.update(overrides)
        return cls(**values)
