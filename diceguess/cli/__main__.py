import logging
import random
from functools import partial

import click
from rich.console import Console
from rich.logging import RichHandler

from ..core.config import DEFAULT_CONFIG
from ..core.die import Die
from ..core.errors import GameError
from ..core.game import Game
from .controller import Controller, RoundOutcome
from .interface import ConsoleWriter, PromptReader, UserInterface

logger = logging.getLogger(__name__)


def setup_logging(level: str):
    """Configure logging to stderr through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def run_game(ui: UserInterface, game: Game, rounds=None) -> int:
    """Play rounds until the user quits or the round limit is reached."""
    controller = Controller()
    played = 0

    while rounds is None or played < rounds:
        played += 1
        try:
            outcome = controller.play_game(game, ui)
        except GameError as error:
            logger.warning("Round %d failed: %s", played, error.message)
            ui.rectify_user()
            ui.wait_for_user()
            continue

        if outcome == RoundOutcome.QUIT:
            break
        if outcome == RoundOutcome.INVALID:
            ui.rectify_user()
            ui.wait_for_user()

    ui.say_goodbye()
    return played


@click.command()
@click.option('--rounds', '-r', type=click.IntRange(min=1), help='Number of rounds to play')
@click.option('--seed', type=int, help='Seed for the die')
@click.option('--log-level', default='WARNING', show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
def main(rounds, seed, log_level):
    """Dice guessing game: roll dice and guess their total value."""
    setup_logging(log_level)

    rng = random.Random(seed) if seed is not None else None
    game = Game(partial(Die, rng=rng, faces=DEFAULT_CONFIG.die_faces))
    console = Console()
    ui = UserInterface(game, PromptReader(console), ConsoleWriter(console))

    run_game(ui, game, rounds)


if __name__ == "__main__":
    main()
