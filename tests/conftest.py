"""Pytest configuration and shared fixtures."""

from collections.abc import Callable, Sequence
from typing import Any

import pytest

from mctskit.core.game import IllegalActionError
from mctskit.games.tictactoe import TicTacToe
from mctskit.mcts import MCTSConfig, MCTSEngine


class FirstChoice:
    """Deterministic chooser that always picks the first candidate."""

    def choice(self, seq: Sequence[Any]) -> Any:
        return seq[0]


class AuditedTicTacToe(TicTacToe):
    """TicTacToe that records every step taken with an action that was not legal."""

    def __init__(self, violations: list | None = None) -> None:
        super().__init__()
        self.violations = violations if violations is not None else []

    def step(self, action):
        if action not in self.legal_actions():
            self.violations.append(action)
        return super().step(action)

    def copy(self):
        game = super().copy()
        game.violations = self.violations
        return game


class RejectingTicTacToe(TicTacToe):
    """TicTacToe that rejects every action, breaking the game contract."""

    def step(self, action):
        raise IllegalActionError(f"rejected {action!r}")


@pytest.fixture
def empty_board() -> TicTacToe:
    """Empty tic-tac-toe board, X to move."""
    return TicTacToe()


@pytest.fixture
def winning_position() -> TicTacToe:
    """X to move and wins immediately with (0, 2).

    X X .
    O . .
    O . .
    """
    return TicTacToe.from_rows(["XX.", "O..", "O.."])


@pytest.fixture
def first_choice() -> FirstChoice:
    """Chooser that always returns the first candidate."""
    return FirstChoice()


@pytest.fixture
def engine() -> MCTSEngine:
    """Small seeded engine for fast tests."""
    return MCTSEngine(MCTSConfig(num_iterations=200, seed=1234))


@pytest.fixture
def rejecting_game() -> TicTacToe:
    """Game whose ``step`` rejects every action it lists as legal."""
    return RejectingTicTacToe()


@pytest.fixture
def illegal_steps() -> list:
    """Actions that audited games were stepped with while illegal."""
    return []


@pytest.fixture
def audited_game(illegal_steps: list) -> Callable[[], TicTacToe]:
    """Factory for fresh boards that report illegal steps to ``illegal_steps``."""
    return lambda: AuditedTicTacToe(illegal_steps)
