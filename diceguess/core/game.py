"""Game state for the dice guessing game."""
import logging
from typing import Callable, Optional, Union

from .errors import GameError

logger = logging.getLogger(__name__)


class Game:
    """Accumulates rolled dice values and checks guesses against the total."""

    def __init__(self, die: Union[Callable, object, None] = None):
        if die is None:
            raise GameError.empty_argument("die")

        # A die instance is reused for every roll; a class or factory makes a fresh die each time.
        if hasattr(die, "roll_and_get_face_value") and not isinstance(die, type):
            self._make_die = lambda: die
        elif callable(die):
            self._make_die = die
        else:
            raise TypeError(f"Expected a die or a die factory, got {die!r}")

        self._total_dice_value = 0
        self._rolled_dice_amount = 0

    def roll_new_die(self) -> int:
        """Roll a new die and add its face value to the total."""
        face_value = self._make_die().roll_and_get_face_value()
        self._total_dice_value += face_value
        self._rolled_dice_amount += 1
        logger.debug("Rolled %d, total is now %d after %d rolls",
                     face_value, self._total_dice_value, self._rolled_dice_amount)
        return face_value

    def get_total_dice_value(self) -> int:
        return self._total_dice_value

    def get_rolled_dice_amount(self) -> int:
        return self._rolled_dice_amount

    def is_guess_correct(self, guess: Optional[int] = None) -> bool:
        """Validate the guess and compare it with the total dice value."""
        self.validate_guess(guess)
        return guess == self._total_dice_value

    def validate_guess(self, guess=None):
        """Raise a GameError unless the guess is a non-negative integer."""
        if guess is None:
            raise GameError.empty_argument("guess")
        if isinstance(guess, bool) or not isinstance(guess, int):
            raise GameError.not_an_int(guess)
        if guess < 0:
            raise GameError.negative_number(guess)

    def reset_game(self):
        """Reset the total and the roll count."""
        logger.debug("Resetting game after %d rolls", self._rolled_dice_amount)
        self._total_dice_value = 0
        self._rolled_dice_amount = 0
