"""Error variants raised by the dice guessing game."""
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """The closed set of game error kinds."""
    EMPTY_ARGUMENT = "empty_argument"
    NOT_AN_INT = "not_an_int"
    NEGATIVE_NUMBER = "negative_number"


DEFAULT_MESSAGES = {
    ErrorKind.EMPTY_ARGUMENT: "A required argument is missing",
    ErrorKind.NOT_AN_INT: "Argument must be an integer",
    ErrorKind.NEGATIVE_NUMBER: "Argument must not be negative",
}


class GameError(Exception):
    """A game error tagged with its kind."""

    def __init__(self, kind: ErrorKind, message: Optional[str] = None):
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    @classmethod
    def empty_argument(cls, what: str) -> "GameError":
        return cls(ErrorKind.EMPTY_ARGUMENT, f"Missing required argument: {what}")

    @classmethod
    def not_an_int(cls, value) -> "GameError":
        return cls(ErrorKind.NOT_AN_INT, f"Expected an integer, got {value!r}")

    @classmethod
    def negative_number(cls, value) -> "GameError":
        return cls(ErrorKind.NEGATIVE_NUMBER, f"Expected a non-negative integer, got {value!r}")

    def __repr__(self) -> str:
        return f"GameError({self.kind.name}, {self.message!r})"
