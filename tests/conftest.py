"""Shared stubs for the dice guessing game tests."""
import pytest

from diceguess.core.game import Game


class ReaderStub:
    """Line reader returning canned answers and recording questions."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.questions = []

    def question(self, prompt_text):
        self.questions.append(prompt_text)
        return self.answers.pop(0) if self.answers else ""

    @property
    def asked_question(self):
        return self.questions[-1] if self.questions else None


class ConsoleStub:
    """Console writer recording logged lines and clears."""

    def __init__(self):
        self.lines = []
        self.clear_count = 0

    def log(self, text):
        self.lines.append(text)

    def clear(self):
        self.clear_count += 1


class DieStub:
    """Die always rolling the same value."""

    def __init__(self, value):
        self.value = value

    def roll_and_get_face_value(self):
        return self.value


class SequenceDie:
    """Die factory handing out dice that roll a fixed sequence."""

    def __init__(self, values):
        self.values = list(values)

    def __call__(self):
        return DieStub(self.values.pop(0))


@pytest.fixture
def console():
    return ConsoleStub()


@pytest.fixture
def game():
    return Game(DieStub(4))
