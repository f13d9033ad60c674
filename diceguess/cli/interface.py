import re
from typing import Optional

from rich.console import Console
from rich.prompt import Prompt
from rich.text import Text

from ..core.config import GameConfig, DEFAULT_CONFIG
from ..core.errors import GameError
from ..core.game import Game


GUESS_PATTERN = re.compile(r"[0-9]+")
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class ConsoleWriter:
    """Console-writing capability backed by a rich Console."""
    
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
    
    def log(self, text: str):
        """Print text verbatim."""
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)
    
    def clear(self):
        self.console.clear()


class AnswerPrompt(Prompt):
    """Prompt whose question text already carries its own suffix."""
    prompt_suffix = ""


class PromptReader:
    """Line-reading capability backed by rich prompts."""
    
    def __init__(self, console: Optional[Console] = None):
        self.console = console
    
    def question(self, prompt_text: str) -> str:
        # Plain Text so configured prompts are never parsed as markup
        return AnswerPrompt.ask(Text(prompt_text), console=self.console)


class UserInterface:
    """Console interaction for the dice guessing game.

    Display methods write to the console passed in, falling back to the
    writer given at construction.
    """
    
    def __init__(self, game: Optional[Game] = None, reader=None, console=None,
                 config: Optional[GameConfig] = None):
        if game is None:
            raise GameError.empty_argument("game")
        if reader is None:
            raise GameError.empty_argument("reader")
        
        self.game = game
        self.reader = reader
        self.console = console or ConsoleWriter()
        self.config = config or DEFAULT_CONFIG
        self._user_input: Optional[str] = None
    
    def initialize_view(self, console=None):
        """Clear the screen and forget the last answer."""
        if console is None:
            raise GameError.empty_argument("console")
        
        console.clear()
        self._user_input = None
    
    def get_user_input(self) -> str:
        """Return the current answer, asking for it if none has been read yet."""
        if self._user_input is None:
            self._user_input = self.reader.question(self.config.question_prompt)
        return self._user_input
    
    def _get_answer(self) -> str:
        return (self.get_user_input() or "").strip()
    
    def _log(self, text: str, console=None):
        (console or self.console).log(text)
    
    def display_rolled_dice_amount(self, console=None):
        amount = self.game.get_rolled_dice_amount()
        self._log(self.config.rolled_amount(amount), console)
    
    def display_instructions(self, console=None):
        self._log(self.config.instructions, console)
    
    def does_user_want_to_roll_new_die(self) -> bool:
        return self._get_answer().lower() == self.config.roll_command.lower()
    
    def does_user_want_to_quit(self) -> bool:
        return self._get_answer().lower() == self.config.quit_command.lower()
    
    def did_user_guess(self) -> bool:
        """True if the answer is a non-negative integer."""
        return GUESS_PATTERN.fullmatch(self._get_answer()) is not None
    
    def get_guess(self) -> int:
        """Parse the answer as an integer."""
        answer = self._get_answer()
        if not INTEGER_PATTERN.fullmatch(answer):
            raise GameError.not_an_int(answer)
        return int(answer)
    
    def rectify_user(self, console=None):
        self._log(self.config.invalid_input_message, console)
    
    def wait_for_user(self):
        """Block until the user enters anything."""
        self.reader.question(self.config.continue_prompt)
    
    def display_correct_guess(self, console=None):
        self._log(self.config.correct_message, console)
        self.wait_for_user()
    
    def display_incorrect_guess(self, console=None):
        self._log(self.config.incorrect(self.game.get_total_dice_value()), console)
        self.wait_for_user()
    
    def say_goodbye(self, console=None):
        self._log(self.config.farewell_message, console)
