"""Tic-tac-toe on a 3x3 board."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from mctskit.core.game import IllegalActionError

BOARD_SIZE = 3

# Every row, column and diagonal as (row, col) triples
LINES: tuple[tuple[tuple[int, int], ...], ...] = (
    *(tuple((r, c) for c in range(BOARD_SIZE)) for r in range(BOARD_SIZE)),
    *(tuple((r, c) for r in range(BOARD_SIZE)) for c in range(BOARD_SIZE)),
    tuple((i, i) for i in range(BOARD_SIZE)),
    tuple((i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)),
)


class Player(Enum):
    """A tic-tac-toe side."""

    X = "X"
    O = "O"  # noqa: E741

    @property
    def opponent(self) -> Player:
        """The other side."""
        return Player.O if self is Player.X else Player.X


class TicTacToe:
    """Tic-tac-toe game state.

    Actions are ``(row, col)`` tuples with 0-based indices. X moves first.
    """

    def __init__(self) -> None:
        self.cells: list[list[Player | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._current_player = Player.X

    @classmethod
    def from_rows(cls, rows: Sequence[str], current_player: Player | None = None) -> TicTacToe:
        """Build a position from row strings such as ``["XX.", "O..", "O.."]``.

        Args:
            rows: Three strings of three characters, each ``X``, ``O`` or ``.``.
            current_player: Side to move. Inferred from piece counts if None
                (X moves when both sides have the same number of marks).

        Returns:
            The parsed game state.

        Raises:
            ValueError: If the rows are malformed.
        """
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"expected {BOARD_SIZE} rows of {BOARD_SIZE} cells, got {list(rows)!r}")

        game = cls()
        for r, row in enumerate(rows):
            for c, symbol in enumerate(row.upper()):
                if symbol == ".":
                    continue
                try:
                    game.cells[r][c] = Player(symbol)
                except ValueError:
                    raise ValueError(f"invalid cell symbol {symbol!r} at ({r}, {c})") from None

        if current_player is None:
            x_count = sum(cell is Player.X for row in game.cells for cell in row)
            o_count = sum(cell is Player.O for row in game.cells for cell in row)
            current_player = Player.X if x_count == o_count else Player.O
        game._current_player = current_player
        return game

    def step(self, action: tuple[int, int]) -> float:
        """Place the current player's mark at ``action`` and pass the turn.

        Returns:
            1.0 if the move wins the game, 0.0 otherwise.

        Raises:
            IllegalActionError: If the game is over, the cell is off the board,
                or the cell is already filled.
        """
        if self.check_winner() is not None:
            raise IllegalActionError("game is already won")

        row, col = action
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise IllegalActionError(f"cell ({row}, {col}) is off the board")
        if self.cells[row][col] is not None:
            raise IllegalActionError(f"cell ({row}, {col}) is already filled")

        self.cells[row][col] = self._current_player
        self._current_player = self._current_player.opponent
        return 1.0 if self.check_winner() is not None else 0.0

    def legal_actions(self) -> list[tuple[int, int]]:
        """Empty cells in row-major order; empty once someone has won."""
        if self.check_winner() is not None:
            return []
        return [
            (r, c)
            for r in range(BOARD_SIZE)
            for c in range(BOARD_SIZE)
            if self.cells[r][c] is None
        ]

    def current_player(self) -> Player:
        return self._current_player

    def done(self) -> bool:
        return self.check_winner() is not None or not self.legal_actions()

    def check_winner(self) -> Player | None:
        for line in LINES:
            first = self.cells[line[0][0]][line[0][1]]
            if first is not None and all(self.cells[r][c] is first for r, c in line[1:]):
                return first
        return None

    def copy(self) -> TicTacToe:
        game = type(self).__new__(type(self))
        game.cells = [row[:] for row in self.cells]
        game._current_player = self._current_player
        return game

    def __str__(self) -> str:
        return "\n".join(
            " ".join("." if cell is None else cell.value for cell in row) for row in self.cells
        )

    def __repr__(self) -> str:
        rows = ["".join("." if cell is None else cell.value for cell in row) for row in self.cells]
        return f"TicTacToe({rows!r}, to_play={self._current_player.value})"
