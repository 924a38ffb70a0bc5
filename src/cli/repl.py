"""
Interactive REPL for GV Zork.

Reads one line at a time from the console, hands it to the game
controller, and prints what comes back.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from src.engine import EngineConfig, GameController, GameStatus

logger = logging.getLogger(__name__)


class GameREPL:
    """
    Console front end for a GameController.

    Input and output are injectable so the loop can be driven from tests.
    """

    def __init__(
        self,
        game: GameController,
        *,
        read_line: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
    ) -> None:
        self.game = game
        self.read_line = read_line or input
        self.write = write or print

    def _print_banner(self) -> None:
        banner = """
   ====================================
     G V   Z O R K
     A Grand Valley Text Adventure
   ====================================
"""
        self.write(banner)

    def run(self) -> GameStatus:
        """Run until the game is won, the player quits, or input ends."""
        self._print_banner()
        self.write(self.game.intro())
        self.write("")

        while self.game.running:
            try:
                line = self.read_line("> ")
            except (EOFError, KeyboardInterrupt):
                self.write("")
                logger.info("Input closed, leaving the game")
                break

            result = self.game.process_turn(line)
            if result.message:
                self.write("")
                self.write(result.message)
                self.write("")

        if self.game.status == GameStatus.WON:
            self.write("Thanks for playing!")
        return self.game.status


def main(argv: list[str] | None = None) -> int:
    """Entry point for the gvzork command."""
    parser = argparse.ArgumentParser(description="GV Zork Text Adventure")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random source")
    parser.add_argument(
        "--max-weight",
        type=float,
        default=EngineConfig.model_fields["max_weight"].default,
        help="Carrying capacity in pounds",
    )
    parser.add_argument(
        "--points",
        type=int,
        default=EngineConfig.model_fields["points_target"].default,
        help="Award points needed to win",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    if args.points < 1:
        parser.error("--points must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    config = EngineConfig(seed=args.seed, max_weight=args.max_weight, points_target=args.points)
    repl = GameREPL(GameController(config=config))
    repl.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
