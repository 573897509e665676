"""Tests for the tic-tac-toe game."""

import pytest

from mctskit.core.game import Game, IllegalActionError
from mctskit.games.tictactoe import Player, TicTacToe


class TestTicTacToe:
    """Tests for the TicTacToe game state."""

    def test_new_game_is_empty_with_x_to_move(self) -> None:
        """Test the starting position."""
        game = TicTacToe()
        assert game.current_player() is Player.X
        assert len(game.legal_actions()) == 9
        assert not game.done()
        assert game.check_winner() is None

    def test_satisfies_game_protocol(self) -> None:
        """Test that TicTacToe is recognized as a Game."""
        assert isinstance(TicTacToe(), Game)

    def test_step_places_mark_and_switches_player(self) -> None:
        """Test that a move fills the cell and passes the turn."""
        game = TicTacToe()
        reward = game.step((0, 0))

        assert reward == 0.0
        assert game.cells[0][0] is Player.X
        assert game.current_player() is Player.O
        assert (0, 0) not in game.legal_actions()

        game.step((0, 1))
        assert game.cells[0][1] is Player.O
        assert game.current_player() is Player.X

    def test_step_on_filled_cell_fails(self) -> None:
        """Test that an occupied cell is rejected and the state is unchanged."""
        game = TicTacToe()
        game.step((0, 0))

        with pytest.raises(IllegalActionError):
            game.step((0, 0))

        assert game.cells[0][0] is Player.X
        assert game.current_player() is Player.O

    def test_step_off_board_fails(self) -> None:
        """Test that out-of-range cells are rejected."""
        game = TicTacToe()
        with pytest.raises(IllegalActionError):
            game.step((3, 0))
        with pytest.raises(IllegalActionError):
            game.step((0, -1))

    def test_step_after_win_fails(self) -> None:
        """Test that no move is accepted once the game is won."""
        game = TicTacToe.from_rows(["XXX", "OO.", "..."])
        with pytest.raises(IllegalActionError):
            game.step((1, 2))

    def test_winning_move_returns_reward(self) -> None:
        """Test that completing a line returns 1.0."""
        game = TicTacToe.from_rows(["XX.", "O..", "O.."])
        assert game.step((0, 2)) == 1.0
        assert game.check_winner() is Player.X
        assert game.done()
        assert game.legal_actions() == []

    @pytest.mark.parametrize(
        ("rows", "winner"),
        [
            (["XXX", "OO.", "..."], Player.X),
            (["O..", "OX.", "OXX"], Player.O),
            (["X.O", ".XO", "..X"], Player.X),
            (["X.O", "XO.", "O.X"], Player.O),
            (["XO.", ".XO", "..."], None),
        ],
    )
    def test_check_winner(self, rows: list[str], winner: Player | None) -> None:
        """Test row, column and diagonal wins."""
        assert TicTacToe.from_rows(rows).check_winner() is winner

    def test_full_board_without_winner_is_draw(self) -> None:
        """Test that a full board with no line is done with no winner."""
        game = TicTacToe.from_rows(["XOX", "XOO", "OXX"])
        assert game.check_winner() is None
        assert game.legal_actions() == []
        assert game.done()

    def test_from_rows_infers_player_to_move(self) -> None:
        """Test mover inference from mark counts."""
        assert TicTacToe.from_rows(["X..", "...", "..."]).current_player() is Player.O
        assert TicTacToe.from_rows(["XO.", "...", "..."]).current_player() is Player.X
        assert TicTacToe.from_rows(["...", "...", "..."], Player.O).current_player() is Player.O

    def test_from_rows_rejects_malformed_input(self) -> None:
        """Test that bad shapes and symbols are rejected."""
        with pytest.raises(ValueError):
            TicTacToe.from_rows(["XX", "...", "..."])
        with pytest.raises(ValueError):
            TicTacToe.from_rows(["XZ.", "...", "..."])

    def test_copy_is_independent(self) -> None:
        """Test that moves on a copy don't affect the original."""
        game = TicTacToe()
        clone = game.copy()
        clone.step((1, 1))

        assert game.cells[1][1] is None
        assert game.current_player() is Player.X
        assert clone.cells[1][1] is Player.X

    def test_render(self) -> None:
        """Test the text rendering."""
        game = TicTacToe.from_rows(["X..", ".O.", "..."])
        assert str(game) == "X . .\n. O .\n. . ."

    def test_opponent(self) -> None:
        """Test that opponents alternate."""
        assert Player.X.opponent is Player.O
        assert Player.O.opponent is Player.X
