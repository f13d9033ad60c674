"""Tests for the game error variants."""
from diceguess.core.errors import ErrorKind, GameError


class TestGameError:

    def test_default_message_per_kind(self):
        for kind in ErrorKind:
            error = GameError(kind)
            assert error.kind == kind
            assert str(error) == error.message

    def test_constructors_tag_kind(self):
        assert GameError.empty_argument("game").kind == ErrorKind.EMPTY_ARGUMENT
        assert GameError.not_an_int("x").kind == ErrorKind.NOT_AN_INT
        assert GameError.negative_number(-1).kind == ErrorKind.NEGATIVE_NUMBER

    def test_message_names_the_argument(self):
        assert "game" in GameError.empty_argument("game").message
        assert "-3" in GameError.negative_number(-3).message
