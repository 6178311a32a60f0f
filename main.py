"""Main entry point for Big Fish.

This module provides command-line options to run the game:
- Windowed mode (default): pygame frontend
- Headless mode: an autopilot plays at a fixed time step, no display needed
"""

import argparse
import logging
import random
import sys

from core.autopilot import Autopilot
from core.config.display import FRAME_RATE
from core.config.game_config import GameConfig
from core.constants import DEFAULT_HEADLESS_FRAMES, SEPARATOR_WIDTH
from core.events import FishEatenEvent, PlayerDamagedEvent
from core.exceptions import ConfigurationError
from core.logging_config import configure_logging
from core.session import GameSession
from core.state_machine import GamePhase

logger = logging.getLogger(__name__)


def run_windowed(config: GameConfig) -> None:
    """Run the pygame frontend."""
    from bigfish import BigFishGame

    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("BIG FISH")
    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("Records are kept in %s", config.persistence.records_path)
    BigFishGame(config).run()


def run_headless(config: GameConfig, max_frames: int) -> GameSession:
    """Let the autopilot play sessions back to back for ``max_frames`` frames.

    Args:
        config: Game configuration (seed and data directory included)
        max_frames: Number of simulated frames at the configured frame rate

    Returns:
        The session, for callers that want to inspect the ledger
    """
    session = GameSession.create(config)
    autopilot = Autopilot(random.Random(config.seed))
    delta_time = 1.0 / config.display.frame_rate

    totals = {"eaten": 0, "hits": 0, "sessions": 0}

    def on_eaten(event: FishEatenEvent) -> None:
        totals["eaten"] += 1

    def on_damaged(event: PlayerDamagedEvent) -> None:
        totals["hits"] += 1

    session.event_bus.subscribe(FishEatenEvent, on_eaten)
    session.event_bus.subscribe(PlayerDamagedEvent, on_damaged)

    session.start_new_game()
    for _ in range(max_frames):
        if session.phase is GamePhase.ENDED:
            totals["sessions"] += 1
            session.restart()
        session.step(delta_time, autopilot.next_input(session.render_view()))

    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("HEADLESS RUN COMPLETE")
    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("Frames simulated: %d", max_frames)
    logger.info("Sessions finished: %d", totals["sessions"] + (session.phase is GamePhase.ENDED))
    logger.info("Fish eaten: %d, hits taken: %d", totals["eaten"], totals["hits"])
    logger.info("Current score %d, size %.3f", session.state.score, session.state.size)
    best = max((r.score for r in session.history()), default=0)
    logger.info("Best recorded score: %d (%d records)", best, len(session.records))
    logger.debug("Spawner: %s", session.state.spawner.get_debug_info())
    logger.debug("Collisions: %s", session.collision_resolver.get_debug_info())
    return session


def main(argv=None) -> int:
    """Parse command-line arguments and run the appropriate mode."""
    parser = argparse.ArgumentParser(
        description="Big Fish - eat smaller fish, avoid bigger ones",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play the game
  python main.py

  # Let the autopilot play one minute of game time
  python main.py --headless --frames 3600

  # Reproducible headless run with a throwaway data directory
  python main.py --headless --seed 42 --data-dir /tmp/bigfish
        """,
    )
    parser.add_argument(
        "--headless", action="store_true", help="Run the autopilot without a window"
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=DEFAULT_HEADLESS_FRAMES,
        help=f"Frames to simulate in headless mode (default: {DEFAULT_HEADLESS_FRAMES}, "
        f"{DEFAULT_HEADLESS_FRAMES // FRAME_RATE}s of game time)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        metavar="DIR",
        help="Directory for the record ledger and saved game (default: $BIGFISH_DATA_DIR or ./data)",
    )
    parser.add_argument(
        "--log-level", type=str, default=None, help="Log level (default: $BIGFISH_LOG_LEVEL or INFO)"
    )

    args = parser.parse_args(argv)
    configure_logging(level=args.log_level, extra_loggers=["bigfish", "rendering", __name__])

    try:
        config = GameConfig.from_env(seed=args.seed)
        if args.data_dir:
            config.persistence.data_dir = args.data_dir
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    if args.frames < 0:
        logger.error("--frames cannot be negative, got %d", args.frames)
        return 2

    if args.headless:
        logger.info("Starting headless run: %d frames, seed %s", args.frames, args.seed)
        run_headless(config, args.frames)
    else:
        run_windowed(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
