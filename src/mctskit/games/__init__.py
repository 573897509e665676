"""Concrete games implementing the ``Game`` protocol."""

from mctskit.games.tictactoe import Player, TicTacToe

__all__ = ["Player", "TicTacToe"]
