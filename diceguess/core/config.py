"""Configurable texts and constants for the dice guessing game."""
from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Message texts, commands and die size."""
    question_prompt: str = "\tWhat do you want to do?: "
    continue_prompt: str = "\tenter anything to play again: "
    instructions: str = (
        'Enter "r" to roll another die or enter a positive integer to guess total dice value'
    )
    rolled_amount_template: str = "Amount of dice rolled: {amount}"
    correct_message: str = "Correct!"
    incorrect_template: str = "Wrong! The total dice value was {total}"
    invalid_input_message: str = "Invalid input, please try again!"
    farewell_message: str = "Thanks for playing!"
    roll_command: str = "r"
    quit_command: str = "q"
    die_faces: int = 6

    def __post_init__(self):
        if self.die_faces < 1:
            raise ValueError("A die needs at least one face")

    def rolled_amount(self, amount: int) -> str:
        return self.rolled_amount_template.format(amount=amount)

    def incorrect(self, total: int) -> str:
        return self.incorrect_template.format(total=total)


DEFAULT_CONFIG = GameConfig()
