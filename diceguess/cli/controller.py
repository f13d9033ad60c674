"""Round sequencing for the dice guessing game."""
import logging
from enum import Enum

from ..core.errors import GameError

logger = logging.getLogger(__name__)


class RoundOutcome(Enum):
    """What happened during one round."""
    ROLLED = "rolled"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    QUIT = "quit"
    INVALID = "invalid"


class Controller:
    """Plays one round per call: show status, then roll or take a guess."""

    def play_game(self, game=None, ui=None, console=None) -> RoundOutcome:
        if game is None:
            raise GameError.empty_argument("game")
        if ui is None:
            raise GameError.empty_argument("ui")

        console = console or ui.console
        ui.initialize_view(console)
        ui.display_rolled_dice_amount(console)
        ui.display_instructions(console)

        if ui.does_user_want_to_quit():
            return RoundOutcome.QUIT

        if ui.does_user_want_to_roll_new_die():
            game.roll_new_die()
            return RoundOutcome.ROLLED

        if ui.did_user_guess():
            return self.handle_guess(game, ui, console)

        return RoundOutcome.INVALID

    def handle_guess(self, game, ui, console=None) -> RoundOutcome:
        """Check the guess, report it and start over."""
        guess = ui.get_guess()

        if game.is_guess_correct(guess):
            ui.display_correct_guess(console)
            outcome = RoundOutcome.CORRECT
        else:
            ui.display_incorrect_guess(console)
            outcome = RoundOutcome.INCORRECT

        logger.info("Guess %d was %s", guess, outcome.value)
        game.reset_game()
        return outcome
