"""Main entry point for dareloop.

Runs a simulated dare night: a table of players takes turns, outcomes are
rolled from a seeded random generator, one guest arrives mid-game, and
the final standings are printed with commentary.
"""

import asyncio
import logging
import random
import sys

from dotenv import load_dotenv

from .content import Entitlements, PackLibrary
from .core.config import GameConfig
from .core.enums import Outcome
from .core.errors import DareLoopError
from .core.session import GameSession
from .results import DEFAULT_COMMENTARY, StandingsCalculator, review_pending
from .utils.logger import setup_logger

DEFAULT_PLAYERS = ["Alice", "Bob", "Charlie", "Dana"]
LATE_GUEST = "Eve"

# Completed / failed / deferred
OUTCOME_WEIGHTS = (0.6, 0.25, 0.15)


async def run_simulation(config: GameConfig, players=None) -> None:
    """Play one full match with random outcomes."""
    logger = logging.getLogger(__name__)
    rng = random.Random(config.seed)

    library = PackLibrary(
        content_dir=config.content_dir,
        custom_dir=config.custom_content_dir,
        seed=config.seed,
    )
    entitlements = Entitlements.from_packs(library.packs)
    session = GameSession(
        config, library, players=players or DEFAULT_PLAYERS, entitlements=entitlements
    )

    await session.initialize()

    guest_joined = False
    while not session.is_game_over:
        turn = session.current_turn()
        outcome = rng.choices(list(Outcome), weights=OUTCOME_WEIGHTS)[0]
        logger.info(f"{turn.player.name}: {turn.item} -> {outcome.value}")
        await session.report_outcome(outcome)

        if not guest_joined and sum(session.roster.asked_counts) >= len(session.roster):
            guest_joined = True
            if len(session.roster) < config.max_players:
                await session.add_player(LATE_GUEST)

    snapshot = session.snapshot()
    names = list(snapshot.player_names)
    completed = list(snapshot.completed_counts)

    if session.pending:
        logger.info(f"\nReviewing {len(session.pending)} pending dare(s)")
        resolutions = []
        for entry in session.pending:
            done = rng.random() < 0.5
            resolutions.append(done)
            logger.info(f"  {entry.player_name}: {entry.item_text} -> {'done' if done else 'skipped'}")
        completed = review_pending(names, completed, session.pending.entries, resolutions, session.quota)

    calculator = StandingsCalculator(DEFAULT_COMMENTARY, rng=rng)
    result = calculator.calculate(names, completed, config.pack_id)

    logger.info("\n" + "=" * 60)
    logger.info("FINAL STANDINGS")
    logger.info("=" * 60)
    for standing in result:
        logger.info(f"{standing.rank}. {standing.describe()}")
    if result.is_tie:
        logger.info(f"\nIt's a tie between {', '.join(s.player for s in result.winners)}!")
    else:
        logger.info(f"\n🏆 WINNER: {result.winners[0].player}")


def main():
    """Main entry point for dareloop."""
    load_dotenv()

    try:
        config = GameConfig.from_env()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

    setup_logger(verbose=config.verbose, save_to_file=config.save_logs, log_dir=config.log_dir)
    logger = logging.getLogger(__name__)

    logger.info("\n" + "=" * 60)
    logger.info(f"DARE NIGHT - {config.pack_id} (quota {config.quota})")
    logger.info("=" * 60 + "\n")

    try:
        asyncio.run(run_simulation(config))
    except KeyboardInterrupt:
        logger.info("\n\nGame interrupted by user")
    except DareLoopError as e:
        logger.error(f"\n\nGame error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
