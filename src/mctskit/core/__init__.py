"""Game abstractions shared by the search engine and concrete games."""

from mctskit.core.game import Action, Game, IllegalActionError, Player

__all__ = ["Action", "Game", "IllegalActionError", "Player"]
